"""Record-first matchers: the record is fixed, the type is what gets checked."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from gqlmatchers.checker import CheckConfig
from gqlmatchers.matchers.base import Matcher, describe_subject
from gqlmatchers.matchers.type_matcher import TypeMatcher
from gqlmatchers.messages import summarize

if TYPE_CHECKING:
    from gqlmatchers.mismatches import Mismatch


class ValidTypeMatcher(Matcher):
    """Check that a type (or model) is valid for a given record.

    Shallow and loose unless escalated with ``deeply``/``strictly``.
    """

    def __init__(self, record: Any) -> None:
        """Initialize a matcher for the given record."""
        self.record = record
        self.config = CheckConfig(deep=False, strict=False)
        self.type_or_model: Any = None
        self.type_matcher: TypeMatcher | None = None

    def matches(self, value: Any) -> bool:
        self.type_or_model = value
        self.type_matcher = TypeMatcher(
            value,
            deep=self.config.deep,
            strict=self.config.strict,
        )
        return self.type_matcher.matches(self.record)

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
        if self.type_matcher is None:
            return ()
        return self.type_matcher.mismatches

    @property
    def error_messages(self) -> list[str]:
        """Rendered messages for every mismatch, in traversal order."""
        if self.type_matcher is None:
            return []
        return self.type_matcher.error_messages

    @property
    def failure_message(self) -> str:
        return (
            f"Expected {describe_subject(self.type_or_model)}, to be valid GraphQL "
            f"type for {self.record!r}, but it's not:\n"
            f"{summarize(self.error_messages)}"
        )

    @property
    def description(self) -> str:
        return f"valid GraphQL type for {self.record!r}"


class DecoratorMatcher(ValidTypeMatcher):
    """Check a decorator instance against the schema its own class describes."""

    def __init__(self) -> None:
        """Initialize a matcher with no record; ``matches`` supplies it."""
        super().__init__(None)

    def matches(self, value: Any) -> bool:
        self.record = value
        return super().matches(type(value))

    @property
    def description(self) -> str:
        return "valid GraphQL decorator"
