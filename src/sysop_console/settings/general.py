"""
General BBS settings for SysOp Console.
"""

from .section import SettingsSection


class GeneralSettings(SettingsSection):
    """Manages system identity and session defaults."""

    @property
    def bbs_name(self) -> str:
        """Get BBS name."""
        return self._get_str("general/bbs_name", "Retrograde BBS")

    @bbs_name.setter
    def bbs_name(self, value: str) -> None:
        """Set BBS name."""
        self._set("general/bbs_name", value)

    @property
    def bbs_location(self) -> str:
        """Get BBS location."""
        return self._get_str("general/bbs_location", "Your City, State")

    @bbs_location.setter
    def bbs_location(self, value: str) -> None:
        """Set BBS location."""
        self._set("general/bbs_location", value)

    @property
    def sysop_name(self) -> str:
        """Get system operator name."""
        return self._get_str("general/sysop_name", "SysOp")

    @sysop_name.setter
    def sysop_name(self, value: str) -> None:
        """Set system operator name."""
        self._set("general/sysop_name", value)

    @property
    def timeout_minutes(self) -> int:
        """Get idle timeout in minutes."""
        return self._get_int("general/timeout_minutes", 3)

    @timeout_minutes.setter
    def timeout_minutes(self, value: int) -> None:
        """Set idle timeout in minutes."""
        self._set("general/timeout_minutes", int(value))

    @property
    def start_menu(self) -> str:
        """Get the menu shown when a caller connects."""
        return self._get_str("general/start_menu", "prelogin")

    @start_menu.setter
    def start_menu(self, value: str) -> None:
        """Set the menu shown when a caller connects."""
        self._set("general/start_menu", value)

    @property
    def default_theme(self) -> str:
        """Get default theme name."""
        return self._get_str("general/default_theme", "default")

    @default_theme.setter
    def default_theme(self, value: str) -> None:
        """Set default theme name."""
        self._set("general/default_theme", value)

    @property
    def sysop_timeout_exempt(self) -> bool:
        """Whether the SysOp is exempt from the idle timeout."""
        return self._get_bool("general/sysop_timeout_exempt", True)

    @sysop_timeout_exempt.setter
    def sysop_timeout_exempt(self, value: bool) -> None:
        self._set("general/sysop_timeout_exempt", bool(value))
