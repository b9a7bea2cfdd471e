"""
Default catalog declaration binding editor fields to the settings store.
"""

from typing import Any, Callable, Optional

from ..settings import ConsoleSettings
from ..settings.section import SettingsSection
from .catalog import Category, FieldCatalog, Item, action, editable, section
from .fields import TypedField, ValueKind

MENU_EDITOR = "menu-editor"


def positive(value: int) -> Optional[str]:
    if value <= 0:
        return "must be greater than zero"
    return None


def port_number(value: int) -> Optional[str]:
    if not 1 <= value <= 65535:
        return "must be between 1 and 65535"
    return None


def not_blank(value: str) -> Optional[str]:
    if not value.strip():
        return "cannot be empty"
    return None


def bind(
    owner: SettingsSection,
    attribute: str,
    identifier: str,
    label: str,
    kind: ValueKind,
    validator: Optional[Callable[[Any], Optional[str]]] = None,
    help_text: str = "",
) -> Item:
    """Declare an editable item over a settings property."""
    field = TypedField(
        identifier,
        label,
        kind,
        getter=lambda: getattr(owner, attribute),
        setter=lambda value: setattr(owner, attribute, value),
        validator=validator,
        help_text=help_text,
    )
    return editable(field)


def _path(owner: SettingsSection, attribute: str, label: str, help_text: str) -> Item:
    return bind(owner, attribute, f"paths.{attribute}", label, ValueKind.PATH, help_text=help_text)


def build_catalog(settings: ConsoleSettings) -> FieldCatalog:
    """Build the console's field catalog over the given settings."""
    paths = settings.paths
    general = settings.general
    new_users = settings.new_users
    auth = settings.auth
    servers = settings.servers
    discord = settings.discord

    configuration = Category(
        "configuration",
        "Configuration",
        "C",
        (
            section(
                "configuration.paths",
                "Paths",
                [
                    _path(paths, "system", "System Path", "Root directory of the BBS installation"),
                    _path(paths, "database", "Database", "Directory holding the user and menu databases"),
                    _path(paths, "file_base", "File Base", "Directory holding file areas"),
                    _path(paths, "logs", "Logs", "Directory for log files"),
                    _path(paths, "message_base", "Message Base", "Directory holding message areas"),
                    _path(paths, "themes", "Themes", "Directory holding ANSI themes"),
                    _path(paths, "security", "Security", "Directory holding blocklists and allowlists"),
                ],
            ),
            section(
                "configuration.general",
                "General",
                [
                    bind(general, "bbs_name", "general.bbs_name", "BBS Name", ValueKind.STRING, not_blank, "Name shown to callers"),
                    bind(general, "bbs_location", "general.bbs_location", "Location", ValueKind.STRING, help_text="City and state shown to callers"),
                    bind(general, "sysop_name", "general.sysop_name", "SysOp Name", ValueKind.STRING, not_blank, "Handle of the system operator"),
                    bind(general, "timeout_minutes", "general.timeout_minutes", "Timeout Mins", ValueKind.INTEGER, positive, "Idle minutes before a caller is disconnected"),
                    bind(general, "start_menu", "general.start_menu", "Start Menu", ValueKind.STRING, not_blank, "Menu shown when a caller connects"),
                    bind(general, "default_theme", "general.default_theme", "Default Theme", ValueKind.STRING, not_blank, "Theme used for new users"),
                    bind(general, "sysop_timeout_exempt", "general.sysop_timeout_exempt", "SysOp Timeout Exempt", ValueKind.BOOLEAN, help_text="SysOp is never disconnected for idling"),
                ],
            ),
            section(
                "configuration.new_users",
                "New Users",
                [
                    bind(new_users, "allow_new", "new_users.allow_new", "Allow New Users", ValueKind.BOOLEAN, help_text="Accept new registrations"),
                    bind(new_users, "ask_real_name", "new_users.ask_real_name", "Ask Real Name", ValueKind.BOOLEAN),
                    bind(new_users, "ask_email", "new_users.ask_email", "Ask Email", ValueKind.BOOLEAN),
                    bind(new_users, "ask_location", "new_users.ask_location", "Ask Location", ValueKind.BOOLEAN),
                    bind(new_users, "sysop_question", "new_users.sysop_question", "SysOp Questionnaire", ValueKind.BOOLEAN, help_text="Ask the sysop-defined questions on signup"),
                ],
            ),
            section(
                "configuration.auth",
                "Auth Persistence",
                [
                    bind(auth, "max_failed_attempts", "auth.max_failed_attempts", "Max Failed Logins", ValueKind.INTEGER, positive, "Failed logins before the account locks"),
                    bind(auth, "account_lock_minutes", "auth.account_lock_minutes", "Lock Minutes", ValueKind.INTEGER, positive, "Minutes an account stays locked"),
                    bind(auth, "password_algorithm", "auth.password_algorithm", "Password Algorithm", ValueKind.STRING, not_blank, "Hash used for new passwords"),
                ],
            ),
        ),
    )

    server_category = Category(
        "servers",
        "Servers",
        "S",
        (
            bind(servers, "max_nodes", "servers.max_nodes", "Max Nodes", ValueKind.INTEGER, positive, "Simultaneous caller limit"),
            bind(servers, "max_connections_per_ip", "servers.max_connections_per_ip", "Max Conn Per IP", ValueKind.INTEGER, positive),
            section(
                "servers.telnet",
                "Telnet",
                [
                    bind(servers, "telnet_active", "servers.telnet_active", "Active", ValueKind.BOOLEAN),
                    bind(servers, "telnet_port", "servers.telnet_port", "Port", ValueKind.INTEGER, port_number),
                ],
            ),
            section(
                "servers.rate_limits",
                "Rate Limits",
                [
                    bind(servers, "rate_limit_enabled", "servers.rate_limit_enabled", "Enabled", ValueKind.BOOLEAN),
                    bind(servers, "rate_limit_window_minutes", "servers.rate_limit_window_minutes", "Window Minutes", ValueKind.INTEGER, positive),
                ],
            ),
        ),
    )

    networking = Category("networking", "Networking", "N", ())

    editors = Category(
        "editors",
        "Editors",
        "E",
        (
            action("editors.menus", "Menus", MENU_EDITOR, "Edit menus and their commands"),
        ),
    )

    other = Category(
        "other",
        "Other",
        "O",
        (
            section(
                "other.discord",
                "Discord",
                [
                    bind(discord, "enabled", "discord.enabled", "Enabled", ValueKind.BOOLEAN, help_text="Post new user applications to Discord"),
                    bind(discord, "webhook_url", "discord.webhook_url", "Webhook URL", ValueKind.STRING),
                    bind(discord, "username", "discord.username", "Username", ValueKind.STRING),
                    bind(discord, "title", "discord.title", "Title", ValueKind.STRING),
                    bind(discord, "invite_url", "discord.invite_url", "Invite URL", ValueKind.STRING),
                ],
            ),
        ),
    )

    return FieldCatalog([configuration, server_category, networking, editors, other])


__all__ = ["build_catalog", "bind", "positive", "port_number", "not_blank", "MENU_EDITOR"]
