"""
Settings migration system for SysOp Console.
"""

import logging
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)


class ConfigVersion(Enum):
    """Settings layout versions. 1.1 moved the Discord keys under 'other'."""
    V1_0 = "1.0"
    V1_1 = "1.1"
    CURRENT = V1_1


class SettingsMigrator:
    """Handles configuration migration between versions."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def ensure_version(self) -> None:
        """Ensure configuration version is set and handle migrations."""
        current_version = str(self.settings.value("app/version", ""))

        if not current_version:
            # First run
            self.settings.setValue("app/version", ConfigVersion.CURRENT.value)
            self.settings.setValue("app/first_run", True)
            self.settings.sync()
            logger.info("First run detected, initializing configuration")
        elif current_version != ConfigVersion.CURRENT.value:
            self._migrate_config(current_version, ConfigVersion.CURRENT.value)

    def _migrate_config(self, from_version: str, to_version: str) -> None:
        """Migrate configuration from old version to new version."""
        logger.info(f"Migrating configuration from {from_version} to {to_version}")

        if from_version == ConfigVersion.V1_0.value and to_version == ConfigVersion.V1_1.value:
            self._migrate_1_0_to_1_1()
        else:
            logger.warning(
                f"No migration path from {from_version} to {to_version}, keeping values as-is"
            )

        self.settings.setValue("app/version", to_version)
        self.settings.setValue("app/migrated_from", from_version)
        self.settings.sync()
        logger.info(f"Migration from {from_version} to {to_version} completed")

    def _migrate_1_0_to_1_1(self) -> None:
        """Migrate from version 1.0 to 1.1 - Discord settings move under 'other'."""
        logger.debug("Performing migration from 1.0 to 1.1")

        self.settings.beginGroup("discord")
        old_keys = self.settings.childKeys()
        old_values = {key: self.settings.value(key) for key in old_keys}
        self.settings.endGroup()

        for key, value in old_values.items():
            new_key = f"other/discord/{key}"
            if self.settings.contains(new_key):
                logger.debug(f"Keeping existing {new_key}, dropping legacy discord/{key}")
                continue
            self.settings.setValue(new_key, value)
            logger.info(f"Migrated discord/{key} -> {new_key}")

        if old_keys:
            self.settings.remove("discord")
        self.settings.sync()
