"""
Path-related settings for SysOp Console.
"""

from pathlib import Path

from .section import SettingsSection


class PathSettings(SettingsSection):
    """Manages the host application's directory layout."""

    def _get_path(self, key: str, default: str) -> Path:
        path_str = self._get_str(key, default)
        return Path(path_str or default)

    @property
    def database(self) -> Path:
        """Get database directory."""
        return self._get_path("paths/database", "data")

    @database.setter
    def database(self, value: Path) -> None:
        """Set database directory."""
        self._set("paths/database", str(value))

    @property
    def file_base(self) -> Path:
        """Get file base directory."""
        return self._get_path("paths/file_base", "files")

    @file_base.setter
    def file_base(self, value: Path) -> None:
        """Set file base directory."""
        self._set("paths/file_base", str(value))

    @property
    def logs(self) -> Path:
        """Get logs directory."""
        return self._get_path("paths/logs", "logs")

    @logs.setter
    def logs(self, value: Path) -> None:
        """Set logs directory."""
        self._set("paths/logs", str(value))

    @property
    def message_base(self) -> Path:
        """Get message base directory."""
        return self._get_path("paths/message_base", "msgs")

    @message_base.setter
    def message_base(self, value: Path) -> None:
        """Set message base directory."""
        self._set("paths/message_base", str(value))

    @property
    def system(self) -> Path:
        """Get system root directory."""
        return self._get_path("paths/system", ".")

    @system.setter
    def system(self, value: Path) -> None:
        """Set system root directory."""
        self._set("paths/system", str(value))

    @property
    def themes(self) -> Path:
        """Get themes directory."""
        return self._get_path("paths/themes", "themes")

    @themes.setter
    def themes(self, value: Path) -> None:
        """Set themes directory."""
        self._set("paths/themes", str(value))

    @property
    def security(self) -> Path:
        """Get security lists directory."""
        return self._get_path("paths/security", "security")

    @security.setter
    def security(self, value: Path) -> None:
        """Set security lists directory."""
        self._set("paths/security", str(value))

    @property
    def collections(self) -> Path:
        """Directory holding ordered collections (menus and their commands)."""
        return self.database / "collections"
