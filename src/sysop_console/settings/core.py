"""
Core settings management for SysOp Console.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from PySide6.QtCore import QSettings

from ..errors import ConfigError
from .migration import ConfigVersion, SettingsMigrator
from .validation import SettingsValidator, ValidationResult
from .section import SettingsSection
from .paths import PathSettings
from .general import GeneralSettings
from .new_users import NewUserSettings
from .auth import AuthSettings
from .servers import ServerSettings
from .discord import DiscordSettings
from .logging import LoggingSettings

logger = logging.getLogger(__name__)

ORGANIZATION = "retrograde"
APPLICATION = "sysop_console"


class ConsoleSettings(SettingsSection):
    """
    Configuration management using QSettings in INI format.

    Provides type-safe access to host settings grouped by profile, with
    version stamping and validation.
    """

    def __init__(
        self, profile: str = "default", path: Optional[Union[str, Path]] = None
    ):
        """Initialize settings for a profile.

        Args:
            profile: Settings profile name (default: "default")
            path: Explicit INI file; the per-user location is used when omitted
        """
        if not profile or "/" in profile:
            raise ConfigError(f"Invalid settings profile name: '{profile}'")

        if path is not None:
            settings = QSettings(str(path), QSettings.Format.IniFormat)
        else:
            settings = QSettings(
                QSettings.Format.IniFormat,
                QSettings.Scope.UserScope,
                ORGANIZATION,
                APPLICATION,
            )
        super().__init__(settings)
        self.profile = profile

        # Profile group gives retrograde/sysop_console/<profile>/...
        self.settings.beginGroup(profile)

        self._migrator = SettingsMigrator(self.settings)
        self._validator = SettingsValidator(self)
        self._paths = PathSettings(self.settings)
        self._general = GeneralSettings(self.settings)
        self._new_users = NewUserSettings(self.settings)
        self._auth = AuthSettings(self.settings)
        self._servers = ServerSettings(self.settings)
        self._discord = DiscordSettings(self.settings)
        self._logging = LoggingSettings(self.settings, self._paths)

        self._migrator.ensure_version()

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    # === SUBSYSTEM ACCESS ===

    @property
    def paths(self) -> PathSettings:
        """Access path settings subsystem."""
        return self._paths

    @property
    def general(self) -> GeneralSettings:
        """Access general settings subsystem."""
        return self._general

    @property
    def new_users(self) -> NewUserSettings:
        """Access new user settings subsystem."""
        return self._new_users

    @property
    def auth(self) -> AuthSettings:
        """Access authentication settings subsystem."""
        return self._auth

    @property
    def servers(self) -> ServerSettings:
        """Access server settings subsystem."""
        return self._servers

    @property
    def discord(self) -> DiscordSettings:
        """Access Discord settings subsystem."""
        return self._discord

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    # === VERSION AND FIRST RUN ===

    @property
    def is_first_run(self) -> bool:
        """Check if this is the first run of the console."""
        return self._get_bool("app/first_run", True)

    def set_first_run_complete(self) -> None:
        """Mark first run as complete."""
        self._set("app/first_run", False)

    @property
    def version(self) -> str:
        """Get configuration version."""
        return self._get_str("app/version", ConfigVersion.CURRENT.value)

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()

    # === UTILITY METHODS ===

    def get_settings_file_path(self) -> str:
        """Get the file path where settings are stored."""
        return self.settings.fileName()

    def sync(self) -> None:
        """Force synchronization of settings to storage."""
        self.settings.sync()
