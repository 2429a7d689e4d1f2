"""Value conformance checking: walk a record against a schema type.

The checker reads each declared field off a record, compares the value with
the field's type, and recurses into nested objects and lists. Failures are
collected as mismatch records in traversal order; they are never raised.

Example usage:
    from gqlmatchers.checker import CheckConfig, check_record

    mismatches = check_record(UserDecorator.schema_type(), user, CheckConfig())
    for mismatch in mismatches:
        print(mismatch.field_path, mismatch.kind)
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, TypeAlias

from gqlmatchers.mismatches import (
    AccessorRaised,
    MissingAccessor,
    Mismatch,
    ModelTypeMismatch,
    NilInStrictMode,
    NotNullableViolation,
    WrongEnumValue,
    WrongType,
)
from gqlmatchers.scalars import compatible_classes, describe_expected, is_compatible
from gqlmatchers.schema import expected_model_for
from gqlmatchers.types import is_list_like, native_kind

if TYPE_CHECKING:
    from gqlmatchers.types import TypeView

logger = logging.getLogger(__name__)

Visited: TypeAlias = frozenset[int]


@dataclass(frozen=True)
class CheckConfig:
    """Traversal settings.

    ``deep`` recurses into nested object and list fields; ``strict`` reports
    None in a nullable field.
    """

    deep: bool = True
    strict: bool = True

    def with_deep(self, deep: bool) -> CheckConfig:  # noqa: FBT001
        """Return a copy with ``deep`` replaced."""
        return replace(self, deep=deep)

    def with_strict(self, strict: bool) -> CheckConfig:  # noqa: FBT001
        """Return a copy with ``strict`` replaced."""
        return replace(self, strict=strict)


# =============================================================================
# Accessor reads: (record, accessor) -> Value | Missing | Raised
# =============================================================================


@dataclass(frozen=True)
class Value:
    """The accessor produced a value."""

    value: Any


@dataclass(frozen=True)
class Missing:
    """The record has no such accessor."""


@dataclass(frozen=True)
class Raised:
    """The accessor raised while being read or called."""

    message: str


AccessorResult: TypeAlias = Value | Missing | Raised

_ABSENT = object()


def _error_message(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


def _is_bound_to(attr: Any, record: object) -> bool:
    if inspect.ismethod(attr):
        return True
    return inspect.isbuiltin(attr) and getattr(attr, "__self__", None) is record


def read_accessor(record: object, accessor: str) -> AccessorResult:
    """Read ``accessor`` off ``record``, calling it if it is a bound method."""
    try:
        attr = getattr(record, accessor)
    except AttributeError as exc:
        if inspect.getattr_static(record, accessor, _ABSENT) is _ABSENT:
            return Missing()
        return Raised(_error_message(exc))
    except Exception as exc:  # noqa: BLE001
        return Raised(_error_message(exc))

    if not _is_bound_to(attr, record):
        return Value(attr)
    try:
        return Value(attr())
    except Exception as exc:  # noqa: BLE001
        return Raised(_error_message(exc))


# =============================================================================
# Checkers: (view, value, path, config, visited) -> list[Mismatch]
# =============================================================================


def _element_type(view: TypeView) -> TypeView:
    """Peel one list layer (and the non-null wrapper around it, if any)."""
    if not view.is_list():
        return view
    inner = view.unwrap()
    return inner.unwrap() if view.is_non_null() else inner


def _check_null(view: TypeView, path: str, config: CheckConfig) -> list[Mismatch]:
    if view.is_non_null():
        return [NotNullableViolation(path)]
    if config.strict:
        return [NilInStrictMode(path)]
    return []


def _check_list(
    view: TypeView,
    value: Any,
    path: str,
    config: CheckConfig,
    visited: Visited,
    expected_model: type | None,
) -> list[Mismatch]:
    # A list held by a scalar field (JSON arrays): elements go straight to the
    # scalar table, None included.
    if view.is_scalar_kind() and not view.is_list():
        return [
            mismatch
            for i, item in enumerate(value)
            for mismatch in _check_scalar(view, item, f"{path}[{i}]")
        ]

    element_type = _element_type(view)
    errors: list[Mismatch] = []
    for i, item in enumerate(value):
        errors.extend(
            check_value(
                element_type,
                item,
                f"{path}[{i}]",
                config,
                visited,
                expected_model=expected_model,
            ),
        )
    return errors


def _check_scalar(view: TypeView, value: Any, path: str) -> list[Mismatch]:
    classes = compatible_classes(view)
    if is_compatible(value, classes):
        return []
    return [WrongType(path, describe_expected(classes), native_kind(value))]


def _check_enum(view: TypeView, value: Any, path: str) -> list[Mismatch]:
    expected_values = view.enum_values()
    if value in expected_values:
        return []
    return [WrongEnumValue(path, expected_values, value)]


def _check_object(
    view: TypeView,
    value: Any,
    path: str,
    config: CheckConfig,
    visited: Visited,
    expected_model: type | None,
) -> list[Mismatch]:
    errors: list[Mismatch] = []
    if expected_model is not None and not isinstance(value, expected_model):
        errors.append(
            ModelTypeMismatch(
                path,
                repr(value),
                expected_model.__name__,
                native_kind(value),
            ),
        )

    if not config.deep:
        return errors
    if id(value) in visited:
        logger.debug("Not descending into %s again at %s", native_kind(value), path)
        return errors

    nested_visited = visited | {id(value)}
    for field in view.fields().values():
        errors.extend(
            check_field(
                field.type,
                value,
                field.accessor or field.name,
                f"{path}.{field.name}",
                config,
                nested_visited,
            ),
        )
    return errors


def check_value(
    view: TypeView,
    value: Any,
    path: str,
    config: CheckConfig,
    visited: Visited = frozenset(),
    *,
    expected_model: type | None = None,
) -> list[Mismatch]:
    """Check a value already read off its record against ``view``.

    Args:
        view: Declared type of the value
        value: The value to check
        path: Field path used in mismatch records
        config: Deep/strict settings
        visited: Identities of the objects on the current path. Objects in it
            are not descended into again, which cuts cycles off silently.
        expected_model: Model class the value must be an instance of, if the
            record's class binds the field to one

    Returns:
        Mismatches in traversal order

    Raises:
        UnknownScalarKindError: If a scalar type has no compatibility entry.

    """
    if value is None:
        return _check_null(view, path, config)
    if is_list_like(value):
        return _check_list(view, value, path, config, visited, expected_model)
    if view.is_scalar_kind():
        return _check_scalar(view, value, path)
    if view.is_enum_kind():
        return _check_enum(view, value, path)
    return _check_object(view, value, path, config, visited, expected_model)


def check_field(
    view: TypeView,
    record: object,
    accessor: str,
    path: str,
    config: CheckConfig,
    visited: Visited = frozenset(),
) -> list[Mismatch]:
    """Read one field off ``record`` through ``accessor`` and check it."""
    match read_accessor(record, accessor):
        case Missing():
            return [MissingAccessor(path, accessor, repr(record))]
        case Raised(message=message):
            logger.debug("Accessor %r for %s raised: %s", accessor, path, message)
            return [AccessorRaised(path, accessor, message)]
        case Value(value=value):
            return check_value(
                view,
                value,
                path,
                config,
                visited,
                expected_model=expected_model_for(record, accessor),
            )


def check_record(view: TypeView, record: object, config: CheckConfig) -> list[Mismatch]:
    """Check every declared field of ``view`` against ``record``."""
    # Ancestors stay referenced by the call stack, so their ids stay unique.
    visited: Visited = frozenset({id(record)})
    errors: list[Mismatch] = []
    for field in view.fields().values():
        errors.extend(
            check_field(
                field.type,
                record,
                field.accessor or field.name,
                field.name,
                config,
                visited,
            ),
        )
    return errors
