"""
Discord integration settings for SysOp Console.
"""

from .section import SettingsSection


class DiscordSettings(SettingsSection):
    """Manages the Discord webhook used for new user notifications."""

    @property
    def enabled(self) -> bool:
        """Check if Discord notifications are enabled."""
        return self._get_bool("other/discord/enabled", False)

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._set("other/discord/enabled", bool(value))

    @property
    def webhook_url(self) -> str:
        """Get webhook URL."""
        return self._get_str("other/discord/webhook_url", "")

    @webhook_url.setter
    def webhook_url(self, value: str) -> None:
        self._set("other/discord/webhook_url", value)

    @property
    def username(self) -> str:
        """Get bot username shown on notifications."""
        return self._get_str("other/discord/username", "Retrograde Bot")

    @username.setter
    def username(self, value: str) -> None:
        self._set("other/discord/username", value)

    @property
    def title(self) -> str:
        """Get notification title."""
        return self._get_str("other/discord/title", "New User Application:")

    @title.setter
    def title(self, value: str) -> None:
        self._set("other/discord/title", value)

    @property
    def invite_url(self) -> str:
        """Get server invite URL."""
        return self._get_str("other/discord/invite_url", "")

    @invite_url.setter
    def invite_url(self, value: str) -> None:
        self._set("other/discord/invite_url", value)
