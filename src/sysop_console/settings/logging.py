"""
Logging-related settings for SysOp Console.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from .section import SettingsSection

if TYPE_CHECKING:
    from .paths import PathSettings

logger = logging.getLogger(__name__)

LOG_FILE_NAME = "sysop_console.csv"
VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(SettingsSection):
    """Manages logging-related settings."""

    def __init__(self, settings, paths: "PathSettings"):
        super().__init__(settings)
        self._paths = paths

    # === CONSOLE LOGGING SETTINGS ===

    @property
    def console_logging(self) -> bool:
        """Check if console logging is enabled."""
        return self._get_bool("logging/console_enabled", False)

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        """Set console logging enabled state."""
        self._set("logging/console_enabled", bool(value))

    @property
    def console_log_level(self) -> str:
        """Get console logging level."""
        return self._get_str("logging/console_level", "INFO")

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        """Set console logging level."""
        if value.upper() in VALID_LEVELS:
            self._set("logging/console_level", value.upper())
        else:
            logger.warning(
                f"Invalid console log level: {value}, keeping current: {self.console_log_level}"
            )

    @property
    def console_use_colors(self) -> bool:
        """Check if console should use colors."""
        return self._get_bool("logging/console_use_colors", True)

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        """Set console color usage."""
        self._set("logging/console_use_colors", bool(value))

    # === FILE LOGGING SETTINGS ===

    @property
    def file_logging(self) -> bool:
        """Check if file logging is enabled."""
        return self._get_bool("logging/file_enabled", True)

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        """Set file logging enabled state."""
        self._set("logging/file_enabled", bool(value))

    @property
    def file_log_level(self) -> str:
        """Get file logging level."""
        return self._get_str("logging/file_level", "DEBUG")

    @file_log_level.setter
    def file_log_level(self, value: str) -> None:
        if value.upper() in VALID_LEVELS:
            self._set("logging/file_level", value.upper())
        else:
            logger.warning(
                f"Invalid file log level: {value}, keeping current: {self.file_log_level}"
            )

    @property
    def log_file_path(self) -> Path:
        """Get log file path (always inside the configured logs directory)."""
        return self._paths.logs / LOG_FILE_NAME
