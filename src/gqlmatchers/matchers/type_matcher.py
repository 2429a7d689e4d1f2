"""Match a record against a schema type or a schema-described model."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Self

from gqlmatchers.checker import CheckConfig, check_record
from gqlmatchers.matchers.base import Matcher, describe_subject
from gqlmatchers.messages import render_all, summarize
from gqlmatchers.mismatches import NotATypeView
from gqlmatchers.schema import resolve_type

if TYPE_CHECKING:
    from gqlmatchers.mismatches import Mismatch

logger = logging.getLogger(__name__)


class TypeMatcher(Matcher):
    """Check that a record provides every field of a type with conforming values.

    Deep and strict by default. ``shallow``/``deeply`` and ``strictly``/
    ``loosely`` toggle the two settings independently before ``matches``.

    Example:
        matcher = TypeMatcher(UserDecorator).shallow()
        if not matcher.matches(user):
            print(matcher.failure_message)

    """

    def __init__(
        self,
        type_or_model: Any,
        *,
        deep: bool = True,
        strict: bool = True,
    ) -> None:
        """Initialize a matcher for a type view or a schema-described class."""
        self.type_or_model = type_or_model
        self.config = CheckConfig(deep=deep, strict=strict)
        self.record: Any = None
        self._mismatches: tuple[Mismatch, ...] = ()

    def matches(self, value: Any) -> bool:
        self.record = value
        view = resolve_type(self.type_or_model)
        if view is None:
            self._mismatches = (NotATypeView("", repr(self.type_or_model)),)
        else:
            self._mismatches = tuple(check_record(view, value, self.config))

        logger.debug(
            "Matched %r against %s: %d mismatch(es)",
            value,
            describe_subject(self.type_or_model),
            len(self._mismatches),
        )
        return not self._mismatches

    def shallow(self) -> Self:
        """Check only the top-level fields."""
        self.config = self.config.with_deep(False)
        return self

    def deeply(self) -> Self:
        """Recurse into nested objects and lists."""
        self.config = self.config.with_deep(True)
        return self

    def strictly(self) -> Self:
        """Report None in nullable fields."""
        self.config = self.config.with_strict(True)
        return self

    def loosely(self) -> Self:
        """Accept None in nullable fields."""
        self.config = self.config.with_strict(False)
        return self

    @property
    def mismatches(self) -> tuple[Mismatch, ...]:
        """Every mismatch found by the last ``matches`` call."""
        return self._mismatches

    @property
    def error_messages(self) -> list[str]:
        """Rendered messages for every mismatch, in traversal order."""
        return render_all(self._mismatches)

    @property
    def failure_message(self) -> str:
        return (
            f"Expected {self.record!r} to match "
            f"{describe_subject(self.type_or_model)}, but it didn't:\n"
            f"{summarize(self.error_messages)}"
        )

    @property
    def description(self) -> str:
        return f"matches GraphQL type {describe_subject(self.type_or_model)}"
