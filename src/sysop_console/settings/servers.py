"""
Server settings for SysOp Console.
"""

from .section import SettingsSection


class ServerSettings(SettingsSection):
    """Manages node limits, the telnet listener and rate limiting."""

    @property
    def max_nodes(self) -> int:
        """Get maximum number of simultaneous nodes."""
        return self._get_int("servers/max_nodes", 10)

    @max_nodes.setter
    def max_nodes(self, value: int) -> None:
        self._set("servers/max_nodes", int(value))

    @property
    def max_connections_per_ip(self) -> int:
        """Get maximum simultaneous connections from one address."""
        return self._get_int("servers/max_connections_per_ip", 5)

    @max_connections_per_ip.setter
    def max_connections_per_ip(self, value: int) -> None:
        self._set("servers/max_connections_per_ip", int(value))

    # === TELNET ===

    @property
    def telnet_active(self) -> bool:
        """Check if the telnet listener is enabled."""
        return self._get_bool("servers/telnet/active", True)

    @telnet_active.setter
    def telnet_active(self, value: bool) -> None:
        self._set("servers/telnet/active", bool(value))

    @property
    def telnet_port(self) -> int:
        """Get telnet listener port."""
        return self._get_int("servers/telnet/port", 2323)

    @telnet_port.setter
    def telnet_port(self, value: int) -> None:
        self._set("servers/telnet/port", int(value))

    # === RATE LIMITS ===

    @property
    def rate_limit_enabled(self) -> bool:
        """Check if connection rate limiting is enabled."""
        return self._get_bool("servers/rate_limits/enabled", True)

    @rate_limit_enabled.setter
    def rate_limit_enabled(self, value: bool) -> None:
        self._set("servers/rate_limits/enabled", bool(value))

    @property
    def rate_limit_window_minutes(self) -> int:
        """Get rate limiting window in minutes."""
        return self._get_int("servers/rate_limits/window_minutes", 15)

    @rate_limit_window_minutes.setter
    def rate_limit_window_minutes(self, value: int) -> None:
        self._set("servers/rate_limits/window_minutes", int(value))
