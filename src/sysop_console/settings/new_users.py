"""
New user registration settings for SysOp Console.
"""

from .section import SettingsSection


class NewUserSettings(SettingsSection):
    """Manages which questions new callers are asked."""

    @property
    def allow_new(self) -> bool:
        """Check if new user registration is open."""
        return self._get_bool("new_users/allow_new", True)

    @allow_new.setter
    def allow_new(self, value: bool) -> None:
        self._set("new_users/allow_new", bool(value))

    @property
    def ask_real_name(self) -> bool:
        """Check if registration asks for a real name."""
        return self._get_bool("new_users/ask_real_name", True)

    @ask_real_name.setter
    def ask_real_name(self, value: bool) -> None:
        self._set("new_users/ask_real_name", bool(value))

    @property
    def ask_email(self) -> bool:
        """Check if registration asks for an email address."""
        return self._get_bool("new_users/ask_email", True)

    @ask_email.setter
    def ask_email(self, value: bool) -> None:
        self._set("new_users/ask_email", bool(value))

    @property
    def ask_location(self) -> bool:
        """Check if registration asks for a location."""
        return self._get_bool("new_users/ask_location", True)

    @ask_location.setter
    def ask_location(self, value: bool) -> None:
        self._set("new_users/ask_location", bool(value))

    @property
    def sysop_question(self) -> bool:
        """Check if registration asks the sysop questionnaire."""
        return self._get_bool("new_users/sysop_question", False)

    @sysop_question.setter
    def sysop_question(self, value: bool) -> None:
        self._set("new_users/sysop_question", bool(value))
