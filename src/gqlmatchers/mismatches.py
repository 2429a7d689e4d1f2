"""Structured conformance failures produced by the checker.

Records are immutable. The checker appends them in traversal order and the
matchers render them on demand.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import StrEnum
from typing import Any, ClassVar


class MismatchKind(StrEnum):
    """Kinds of conformance failure."""

    NOT_NULLABLE = "not_nullable"
    NIL_IN_STRICT_MODE = "nil_in_strict_mode"
    WRONG_TYPE = "wrong_type"
    MISSING_ACCESSOR = "missing_accessor"
    WRONG_ENUM_VALUE = "wrong_enum_value"
    MODEL_TYPE_MISMATCH = "model_type_mismatch"
    ACCESSOR_RAISED = "accessor_raised"
    NOT_A_TYPE_VIEW = "not_a_type_view"


@dataclass(frozen=True)
class Mismatch:
    """Base class for mismatch records.

    ``field_path`` is the dotted path from the root record, e.g.
    ``locations[1].city``.
    """

    kind: ClassVar[MismatchKind]

    field_path: str

    def template_vars(self) -> dict[str, str]:
        """Named placeholder values for the message template."""
        return {f.name: _display(getattr(self, f.name)) for f in fields(self)}


@dataclass(frozen=True)
class NotNullableViolation(Mismatch):
    """A non-null field held None."""

    kind = MismatchKind.NOT_NULLABLE


@dataclass(frozen=True)
class NilInStrictMode(Mismatch):
    """A nullable field held None while checking strictly."""

    kind = MismatchKind.NIL_IN_STRICT_MODE


@dataclass(frozen=True)
class WrongType(Mismatch):
    """A scalar field held a value of an incompatible class."""

    kind = MismatchKind.WRONG_TYPE

    expected_description: str
    actual_kind: str


@dataclass(frozen=True)
class MissingAccessor(Mismatch):
    """The record has no attribute for the field's accessor."""

    kind = MismatchKind.MISSING_ACCESSOR

    accessor: str
    record_description: str


@dataclass(frozen=True)
class WrongEnumValue(Mismatch):
    """An enum field held a value outside the declared values."""

    kind = MismatchKind.WRONG_ENUM_VALUE

    expected_values: tuple[Any, ...]
    actual_value: Any


@dataclass(frozen=True)
class ModelTypeMismatch(Mismatch):
    """A field bound to a model class held an instance of another class."""

    kind = MismatchKind.MODEL_TYPE_MISMATCH

    value_description: str
    expected_type: str
    actual_type: str


@dataclass(frozen=True)
class AccessorRaised(Mismatch):
    """Reading the field's accessor raised an exception."""

    kind = MismatchKind.ACCESSOR_RAISED

    accessor: str
    error_message: str


@dataclass(frozen=True)
class NotATypeView(Mismatch):
    """The matcher was given something that is not a schema type."""

    kind = MismatchKind.NOT_A_TYPE_VIEW

    given: str


def _display(value: Any) -> str:
    if isinstance(value, tuple):
        return f"[{', '.join(str(item) for item in value)}]"
    return str(value)
