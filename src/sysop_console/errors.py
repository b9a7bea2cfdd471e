"""
Error taxonomy for SysOp Console.

Every error the editor can raise derives from ConsoleError so the editor
controller can surface it as an inline message and keep the screen open.
"""

from typing import Any


class ConsoleError(Exception):
    """Base class for errors surfaced to the operator."""
    pass


class ValidationError(ConsoleError):
    """Candidate value rejected by a field's parser or validation predicate."""

    def __init__(self, field_id: str, reason: str):
        super().__init__(f"{field_id}: {reason}")
        self.field_id = field_id
        self.reason = reason


class TypeMismatch(ConsoleError):
    """Declared value kind and accessor payload disagree.

    This is a programming defect: a correct catalog never raises it while
    editing, only while being built.
    """

    def __init__(self, field_id: str, expected: Any, actual: str):
        super().__init__(
            f"{field_id}: expected a {expected} value, accessor produced {actual}"
        )
        self.field_id = field_id
        self.expected = expected
        self.actual = actual


class StoreUnavailable(ConsoleError):
    """A settings or collection store could not be read."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"Store unavailable for '{key}': {reason}")
        self.key = key
        self.reason = reason


class StoreWriteFailed(ConsoleError):
    """A settings or collection store rejected a write."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"Could not save '{key}': {reason}")
        self.key = key
        self.reason = reason


class EmptyCollectionSeed(ConsoleError):
    """A collection that must not be empty was empty and has no default seed."""

    def __init__(self, key: str):
        super().__init__(f"Collection '{key}' is empty and has no default entries")
        self.key = key


class SessionStateError(ConsoleError):
    """Structural edit requested in a state that does not allow it."""
    pass


class CatalogError(ConsoleError):
    """Field catalog declaration is malformed."""
    pass


class ConfigError(ConsoleError):
    """Settings profile or file cannot be used."""
    pass
