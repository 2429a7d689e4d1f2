"""Matchers for checking records against GraphQL schema types.

Example usage:
    from gqlmatchers.matchers import assert_that, be_valid_type_for, satisfy_type

    assert_that(user, satisfy_type(UserDecorator))
    assert_that(UserDecorator, be_valid_type_for(user).deeply())
"""

from __future__ import annotations

from typing import Any

from gqlmatchers.matchers.base import Matcher, describe_subject
from gqlmatchers.matchers.record import DecoratorMatcher, ValidTypeMatcher
from gqlmatchers.matchers.response import (
    Action,
    ActionDescriptor,
    ActionResponse,
    ControllerResponse,
    ResponseMatcher,
)
from gqlmatchers.matchers.type_matcher import TypeMatcher

__all__ = [
    "Action",
    "ActionDescriptor",
    "ActionResponse",
    "ControllerResponse",
    "DecoratorMatcher",
    "Matcher",
    "ResponseMatcher",
    "TypeMatcher",
    "ValidTypeMatcher",
    "assert_not",
    "assert_that",
    "be_loosely_valid_type_for",
    "be_successful_response",
    "be_valid_decorator",
    "be_valid_type_for",
    "satisfy_type",
]


def satisfy_type(type_or_model: Any) -> TypeMatcher:
    """Record must satisfy the type: ``assert_that(user, satisfy_type(UserType))``."""
    return TypeMatcher(type_or_model)


def be_valid_type_for(record: Any) -> ValidTypeMatcher:
    """Type must be valid for the record: ``assert_that(UserType, be_valid_type_for(user))``."""
    return ValidTypeMatcher(record)


def be_loosely_valid_type_for(record: Any) -> ValidTypeMatcher:
    """Like ``be_valid_type_for``, spelled out as loose."""
    return ValidTypeMatcher(record).loosely()


def be_valid_decorator() -> DecoratorMatcher:
    """Decorator instance must fit the schema its own class describes."""
    return DecoratorMatcher()


def be_successful_response() -> ResponseMatcher:
    """Response must succeed and return its action's declared type."""
    return ResponseMatcher()


def assert_that(value: Any, matcher: Matcher) -> None:
    """Raise AssertionError with the matcher's failure message unless it matches."""
    if not matcher.matches(value):
        raise AssertionError(matcher.failure_message)


def assert_not(value: Any, matcher: Matcher) -> None:
    """Raise AssertionError if the matcher matches."""
    if matcher.matches(value):
        msg = f"Expected {describe_subject(value)} not to be {matcher.description}"
        raise AssertionError(msg)
