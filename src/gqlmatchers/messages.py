"""Human-readable rendering of mismatch records."""

from __future__ import annotations

import textwrap
from typing import TYPE_CHECKING

from gqlmatchers.errors import UnknownMismatchKindError
from gqlmatchers.mismatches import MismatchKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from gqlmatchers.mismatches import Mismatch

MAX_REPORTED_MESSAGES = 5

TEMPLATES: dict[MismatchKind, str] = {
    MismatchKind.NOT_NULLABLE: (
        'expected non-nullable field "{field_path}" not to be `None`'
    ),
    MismatchKind.ACCESSOR_RAISED: (
        'Method `{accessor}` for "{field_path}" field raised an error: '
        "{error_message}"
    ),
    MismatchKind.NIL_IN_STRICT_MODE: (
        "Using `strictly` matcher which does not allow `None` values, "
        'but field "{field_path}" is `None`. '
        "Use `loosely` matcher to allow `None` values"
    ),
    MismatchKind.WRONG_TYPE: (
        'Expected field "{field_path}" to be {expected_description}, '
        "but was `{actual_kind}`"
    ),
    MismatchKind.MISSING_ACCESSOR: (
        'Method `{accessor}` for "{field_path}" field does not exist '
        "on record {record_description}"
    ),
    MismatchKind.WRONG_ENUM_VALUE: (
        'Expected value of the "{field_path}" enum field to be one of '
        "{expected_values}, but was `{actual_value}`"
    ),
    MismatchKind.NOT_A_TYPE_VIEW: "Expected a GraphQL type, but got {given}",
    MismatchKind.MODEL_TYPE_MISMATCH: (
        "According to graphql configuration, {value_description} should be "
        "an instance of {expected_type}, but it is {actual_type}"
    ),
}


def render(mismatch: Mismatch) -> str:
    """Format a mismatch record into a message.

    Raises:
        UnknownMismatchKindError: If no template exists for the record's kind.

    """
    template = TEMPLATES.get(getattr(mismatch, "kind", None))  # type: ignore[arg-type]
    if template is None:
        msg = f"No message template for mismatch {mismatch!r}"
        raise UnknownMismatchKindError(msg)
    return template.format_map(mismatch.template_vars())


def render_all(mismatches: Iterable[Mismatch]) -> list[str]:
    """Render every record, preserving order."""
    return [render(mismatch) for mismatch in mismatches]


def summarize(messages: list[str], limit: int = MAX_REPORTED_MESSAGES) -> str:
    """Join the first ``limit`` messages, each indented by two spaces."""
    return textwrap.indent("\n".join(messages[:limit]), "  ")
