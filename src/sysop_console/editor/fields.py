"""
Typed fields: validated read/write handles over individual settings.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Optional

from ..errors import (
    StoreUnavailable,
    StoreWriteFailed,
    TypeMismatch,
    ValidationError,
)

logger = logging.getLogger(__name__)

TRUE_WORDS = ("true", "yes", "y", "1")
FALSE_WORDS = ("false", "no", "n", "0")

# Settings storage holds integers as signed 64-bit
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


class ValueKind(Enum):
    """Value kinds a field may declare."""
    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    PATH = "path"


def kind_accepts(kind: ValueKind, value: Any) -> bool:
    """Check a raw payload against a declared kind."""
    if kind is ValueKind.STRING:
        return isinstance(value, str)
    if kind is ValueKind.INTEGER:
        # bool is an int subclass but never a valid integer payload
        return isinstance(value, int) and not isinstance(value, bool)
    if kind is ValueKind.BOOLEAN:
        return isinstance(value, bool)
    if kind is ValueKind.PATH:
        return isinstance(value, Path)
    return False


@dataclass(frozen=True)
class FieldValue:
    """A value tagged with its kind. The payload must match the tag."""
    kind: ValueKind
    value: Any

    def __post_init__(self) -> None:
        if not kind_accepts(self.kind, self.value):
            raise TypeMismatch("value", self.kind.value, type(self.value).__name__)

    @classmethod
    def string(cls, value: str) -> "FieldValue":
        return cls(ValueKind.STRING, value)

    @classmethod
    def integer(cls, value: int) -> "FieldValue":
        return cls(ValueKind.INTEGER, value)

    @classmethod
    def boolean(cls, value: bool) -> "FieldValue":
        return cls(ValueKind.BOOLEAN, value)

    @classmethod
    def path(cls, value: Path) -> "FieldValue":
        return cls(ValueKind.PATH, value)


def parse_value(kind: ValueKind, text: str, field_id: str = "value") -> FieldValue:
    """Convert operator input into a FieldValue of the given kind.

    Raises:
        ValidationError: If the text cannot be converted.
    """
    if kind is ValueKind.STRING:
        return FieldValue(kind, text)

    stripped = text.strip()
    if kind is ValueKind.INTEGER:
        try:
            number = int(stripped, 10)
        except ValueError:
            raise ValidationError(field_id, f"'{text}' is not a whole number")
        if not INT_MIN <= number <= INT_MAX:
            raise ValidationError(field_id, f"'{text}' is out of range")
        return FieldValue(kind, number)
    if kind is ValueKind.BOOLEAN:
        lowered = stripped.lower()
        if lowered in TRUE_WORDS:
            return FieldValue(kind, True)
        if lowered in FALSE_WORDS:
            return FieldValue(kind, False)
        raise ValidationError(field_id, f"'{text}' is not yes or no")
    if kind is ValueKind.PATH:
        if not stripped:
            raise ValidationError(field_id, "path cannot be empty")
        return FieldValue(kind, Path(stripped))
    raise ValidationError(field_id, f"unsupported kind {kind}")


def format_value(value: FieldValue) -> str:
    """Render a value for display."""
    if value.kind is ValueKind.BOOLEAN:
        return "Yes" if value.value else "No"
    return str(value.value)


class TypedField:
    """
    Read/validate/write handle over one externally stored setting.

    The getter returns the raw payload and the setter receives one; the
    field never learns where the value is stored. The optional validator
    returns None to accept a raw payload or a reason string to reject it,
    and always runs before the setter.
    """

    def __init__(
        self,
        identifier: str,
        label: str,
        kind: ValueKind,
        getter: Callable[[], Any],
        setter: Callable[[Any], None],
        validator: Optional[Callable[[Any], Optional[str]]] = None,
        help_text: str = "",
    ):
        self.identifier = identifier
        self.label = label
        self.kind = kind
        self.help_text = help_text
        self._getter = getter
        self._setter = setter
        self._validator = validator
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def __repr__(self) -> str:
        return f"TypedField({self.identifier!r}, {self.kind.name})"

    def read(self) -> FieldValue:
        """Return the current value tagged with the declared kind."""
        raw = self._getter()
        if not kind_accepts(self.kind, raw):
            raise TypeMismatch(self.identifier, self.kind.value, type(raw).__name__)
        return FieldValue(self.kind, raw)

    def check(self, candidate: FieldValue) -> None:
        """Run the tag check and validator without touching the store."""
        if candidate.kind is not self.kind:
            raise TypeMismatch(self.identifier, self.kind.value, candidate.kind.value)
        if self._validator is not None:
            reason = self._validator(candidate.value)
            if reason:
                raise ValidationError(self.identifier, reason)

    def write(self, candidate: FieldValue) -> None:
        """Validate and store a candidate value.

        Raises:
            TypeMismatch: Candidate tag differs from the declared kind.
            ValidationError: Validator rejected the candidate; nothing stored.
            StoreWriteFailed: Backing store rejected the write; the previous
                value has been put back.
        """
        self.check(candidate)
        previous = self._getter()
        try:
            self._setter(candidate.value)
        except (StoreWriteFailed, StoreUnavailable):
            self._restore(previous)
            raise
        self.logger.debug(f"{self.identifier} set to {candidate.value!r}")

    def _restore(self, previous: Any) -> None:
        try:
            self._setter(previous)
        except (StoreWriteFailed, StoreUnavailable) as e:
            self.logger.error(f"Could not restore {self.identifier} after failed write: {e}")

    def parse(self, text: str) -> FieldValue:
        """Parse operator input into a value of this field's kind."""
        return parse_value(self.kind, text, self.identifier)

    def format_value(self, value: Optional[FieldValue] = None) -> str:
        """Render the given value, or the current one, for display."""
        return format_value(value if value is not None else self.read())
