"""
SysOp Console: configuration tree editor for a BBS host

Edits typed host settings and reorders menu command lists, with structural
changes staged until explicitly saved.
"""

__version__ = "0.1.0"
__author__ = "SysOp Console Contributors"

from .errors import (
    ConsoleError,
    ValidationError,
    TypeMismatch,
    StoreUnavailable,
    StoreWriteFailed,
    EmptyCollectionSeed,
    SessionStateError,
    CatalogError,
    ConfigError,
)
from .settings import ConsoleSettings
from .stores import JsonCollectionStore
from .utils.logging_config import setup_logging

__all__ = [
    # Settings and storage
    "ConsoleSettings",
    "JsonCollectionStore",

    # Logging
    "setup_logging",

    # Errors
    "ConsoleError",
    "ValidationError",
    "TypeMismatch",
    "StoreUnavailable",
    "StoreWriteFailed",
    "EmptyCollectionSeed",
    "SessionStateError",
    "CatalogError",
    "ConfigError",
]
