"""
Settings validation system for SysOp Console.
"""

import logging
from dataclasses import dataclass, field
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from .core import ConsoleSettings

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Problems found in the stored settings.

    Errors are values the host cannot run with; warnings only need attention.
    """
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "ConsoleSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        general = self.settings.general
        servers = self.settings.servers
        auth = self.settings.auth

        if general.timeout_minutes <= 0:
            errors.append(f"Timeout must be positive: {general.timeout_minutes}")
        if servers.max_nodes <= 0:
            errors.append(f"Max nodes must be positive: {servers.max_nodes}")
        if not 1 <= servers.telnet_port <= 65535:
            errors.append(f"Telnet port must be 1-65535: {servers.telnet_port}")
        if not auth.password_algorithm:
            errors.append("Password algorithm cannot be empty")

        # Directories are provisioned elsewhere, so missing ones only warn
        for name in ("database", "file_base", "logs", "message_base", "themes"):
            path = getattr(self.settings.paths, name)
            if not path.exists():
                warnings.append(f"Path for {name} does not exist: {path}")

        discord = self.settings.discord
        if discord.enabled and not discord.webhook_url:
            warnings.append("Discord notifications enabled without a webhook URL")

        return ValidationResult(errors=errors, warnings=warnings)
