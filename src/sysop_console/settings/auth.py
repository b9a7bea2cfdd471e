"""
Authentication policy settings for SysOp Console.
"""

from .section import SettingsSection


class AuthSettings(SettingsSection):
    """Manages login lockout policy and password storage."""

    @property
    def max_failed_attempts(self) -> int:
        """Get failed login attempts allowed before lockout."""
        return self._get_int("auth/max_failed_attempts", 5)

    @max_failed_attempts.setter
    def max_failed_attempts(self, value: int) -> None:
        self._set("auth/max_failed_attempts", int(value))

    @property
    def account_lock_minutes(self) -> int:
        """Get lockout duration in minutes."""
        return self._get_int("auth/account_lock_minutes", 15)

    @account_lock_minutes.setter
    def account_lock_minutes(self, value: int) -> None:
        self._set("auth/account_lock_minutes", int(value))

    @property
    def password_algorithm(self) -> str:
        """Get default hashing algorithm name for stored passwords."""
        return self._get_str("auth/password_algorithm", "sha256")

    @password_algorithm.setter
    def password_algorithm(self, value: str) -> None:
        self._set("auth/password_algorithm", value)
