"""
Settings package for SysOp Console.

This package provides a modular, type-safe configuration management system
using Qt's QSettings in INI format.

Usage:
    from sysop_console.settings import ConsoleSettings, ValidationResult

    settings = ConsoleSettings(path="console.ini")
    result = settings.validate()
"""

from ..errors import ConfigError
from .core import ConsoleSettings
from .migration import ConfigVersion
from .validation import ValidationResult
from .section import SettingsSection

__all__ = [
    "ConsoleSettings",
    "ConfigVersion",
    "ConfigError",
    "ValidationResult",
    "SettingsSection",
]
