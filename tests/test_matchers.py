"""Tests for the gqlmatchers.matchers factories and assertion helpers."""

from types import SimpleNamespace

import pytest

import gqlmatchers
from gqlmatchers.checker import CheckConfig
from gqlmatchers.matchers import (
    Action,
    ActionResponse,
    DecoratorMatcher,
    ResponseMatcher,
    TypeMatcher,
    ValidTypeMatcher,
    assert_not,
    assert_that,
    be_loosely_valid_type_for,
    be_successful_response,
    be_valid_decorator,
    be_valid_type_for,
    satisfy_type,
)
from gqlmatchers.schema import Attribute
from gqlmatchers.types import ID, STRING, NonNull, ObjectType, SchemaType

POST = ObjectType("FactoryPost", {"id": NonNull(ID), "title": STRING})


class TestFactories:
    """Test the matcher factory functions."""

    def test_satisfy_type(self) -> None:
        """Test satisfy_type is deep and strict."""
        matcher = satisfy_type(POST)
        assert isinstance(matcher, TypeMatcher)
        assert matcher.config == CheckConfig(deep=True, strict=True)

    def test_be_valid_type_for(self) -> None:
        """Test be_valid_type_for is shallow and loose."""
        matcher = be_valid_type_for(SimpleNamespace())
        assert isinstance(matcher, ValidTypeMatcher)
        assert matcher.config == CheckConfig(deep=False, strict=False)

    def test_be_loosely_valid_type_for(self) -> None:
        """Test the loose shorthand."""
        matcher = be_loosely_valid_type_for(SimpleNamespace()).strictly()
        assert matcher.config.strict
        assert not be_loosely_valid_type_for(SimpleNamespace()).config.strict

    def test_be_valid_decorator(self) -> None:
        """Test the decorator factory."""
        assert isinstance(be_valid_decorator(), DecoratorMatcher)

    def test_be_successful_response(self) -> None:
        """Test the response factory."""
        assert isinstance(be_successful_response(), ResponseMatcher)


class TestAssertThat:
    """Test assert_that."""

    def test_passes(self) -> None:
        """Test a matching value."""
        assert_that(SimpleNamespace(id="1", title="Hello"), satisfy_type(POST))

    def test_raises_with_failure_message(self) -> None:
        """Test the assertion carries the failure message."""
        with pytest.raises(AssertionError, match='"title" is `None`'):
            assert_that(SimpleNamespace(id="1", title=None), satisfy_type(POST))

    def test_type_first(self) -> None:
        """Test checking a type against a record."""
        record = SimpleNamespace(id="1", title=None)
        assert_that(POST, be_valid_type_for(record))
        with pytest.raises(AssertionError, match="to be valid GraphQL type for"):
            assert_that(POST, be_valid_type_for(record).strictly())

    def test_response(self) -> None:
        """Test a failed response."""
        response = ActionResponse(Action(POST), success=False, errors=(ValueError("Denied"),))
        with pytest.raises(AssertionError, match="but got errors:\n  Denied"):
            assert_that(response, be_successful_response())


class TestAssertNot:
    """Test assert_not."""

    def test_passes(self) -> None:
        """Test a value that does not match."""
        assert_not(SimpleNamespace(id=None, title="Hello"), satisfy_type(POST))

    def test_raises_with_description(self) -> None:
        """Test the assertion names the value and the description."""
        with pytest.raises(AssertionError) as exc_info:
            assert_not(POST, be_valid_type_for(SimpleNamespace(id="1", title=None)))
        assert str(exc_info.value) == (
            "Expected FactoryPost not to be valid GraphQL type for "
            "namespace(id='1', title=None)"
        )


@pytest.mark.parametrize(
    "func",
    [
        CheckConfig.with_deep,
        CheckConfig.with_strict,
        SchemaType.is_scalar_kind,
        SchemaType.is_enum_kind,
        SchemaType.scalar_kind,
        SchemaType.enum_values,
        SchemaType.fields,
        Attribute.field_view,
        Attribute.model,
        TypeMatcher.shallow,
        ValidTypeMatcher.loosely,
        be_loosely_valid_type_for,
        be_valid_decorator,
        be_successful_response,
    ],
)
def test_public_callables_are_documented(func: object) -> None:
    """Test public API callables carry docstrings."""
    assert func.__doc__


def test_package_exports() -> None:
    """Test the package root re-exports the public API."""
    for name in gqlmatchers.__all__:
        assert hasattr(gqlmatchers, name)
