"""
Shared typed accessors for settings sections.
"""

from typing import Any, cast

from PySide6.QtCore import QSettings

from ..errors import StoreWriteFailed


class SettingsSection:
    """Base class for a group of typed settings stored in QSettings.

    Subclasses expose one property per setting. Reads fall back to the
    default on missing or malformed values; writes are flushed immediately
    and raise StoreWriteFailed when the backing file cannot be written.
    """

    def __init__(self, settings: QSettings):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        """Type-safe string retrieval from settings."""
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    def _get_bool(self, key: str, default: bool = False) -> bool:
        """Type-safe boolean retrieval from settings."""
        value = self.settings.value(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value) if value is not None else default

    def _get_int(self, key: str, default: int = 0) -> int:
        """Type-safe integer retrieval from settings."""
        value = self.settings.value(key, default)
        try:
            if value is None:
                return default
            return int(cast(str | int, value))
        except (ValueError, TypeError):
            return default

    def _set(self, key: str, value: Any) -> None:
        """Write a value and flush it to storage."""
        try:
            self.settings.setValue(key, value)
        except (OverflowError, TypeError) as e:
            raise StoreWriteFailed(key, str(e)) from e
        self.settings.sync()
        status = self.settings.status()
        if status != QSettings.Status.NoError:
            raise StoreWriteFailed(key, f"settings storage reported {status.name}")
