"""Scalar compatibility table: which Python classes a scalar kind accepts."""

from __future__ import annotations

import datetime
from numbers import Number
from typing import TYPE_CHECKING

from gqlmatchers.errors import UnknownScalarKindError

if TYPE_CHECKING:
    from gqlmatchers.types import TypeView

# String accepts numbers, but Int does not accept strings.
_COMPATIBLE_CLASSES: dict[str, tuple[type, ...]] = {
    "Int": (int,),
    "ID": (int, str),
    "String": (str, Number),
    "Float": (float, int, Number),
    "Boolean": (bool,),
    "DateTime": (datetime.datetime,),
    "Date": (datetime.date,),
    "JSON": (dict, list, str, int, float, bool, type(None)),
}


def compatible_classes(scalar: TypeView) -> tuple[type, ...]:
    """Return the classes a value of the given scalar type may be an instance of.

    Raises:
        UnknownScalarKindError: If the scalar's kind has no table entry.

    """
    kind = scalar.scalar_kind()
    if kind is None or kind not in _COMPATIBLE_CLASSES:
        msg = f"Unknown scalar type {scalar} (kind {kind!r})"
        raise UnknownScalarKindError(msg)
    return _COMPATIBLE_CLASSES[kind]


def is_compatible(value: object, classes: tuple[type, ...]) -> bool:
    """Check value against classes. A bool only matches where bool is listed."""
    if isinstance(value, bool):
        return bool in classes
    return isinstance(value, classes)


def describe_expected(classes: tuple[type, ...]) -> str:
    """Render the expected-type part of a wrong-type message."""
    names = [cls.__name__ for cls in classes]
    if len(names) > 1:
        return f"one of `[{', '.join(names)}]`"
    return f"`{names[0]}`"
