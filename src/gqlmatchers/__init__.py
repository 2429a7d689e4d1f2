"""gqlmatchers - structural matchers for GraphQL schema types in Python 3.12+."""

from gqlmatchers.checker import (
    CheckConfig,
    check_field,
    check_record,
    check_value,
)
from gqlmatchers.errors import (
    ConfigurationError,
    GqlMatchersError,
    SchemaError,
    UnknownMismatchKindError,
    UnknownScalarKindError,
)
from gqlmatchers.matchers import (
    Action,
    ActionResponse,
    DecoratorMatcher,
    Matcher,
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
from gqlmatchers.messages import render
from gqlmatchers.mismatches import Mismatch, MismatchKind
from gqlmatchers.schema import (
    Attribute,
    Model,
    parse_type,
    register_type,
    resolve_type,
)
from gqlmatchers.types import (
    BOOLEAN,
    DATE,
    DATETIME,
    FLOAT,
    ID,
    INT,
    JSON,
    STRING,
    EnumType,
    FieldView,
    ListLike,
    ListOf,
    NonNull,
    ObjectType,
    ScalarType,
    TypeView,
    type_name,
)

__all__ = [
    # Built-in scalars
    "BOOLEAN",
    "DATE",
    "DATETIME",
    "FLOAT",
    "ID",
    "INT",
    "JSON",
    "STRING",
    # Matchers
    "Action",
    "ActionResponse",
    # Schema description
    "Attribute",
    # Checking
    "CheckConfig",
    # Errors
    "ConfigurationError",
    "DecoratorMatcher",
    # Type views
    "EnumType",
    "FieldView",
    "GqlMatchersError",
    "ListLike",
    "ListOf",
    "Matcher",
    # Mismatches
    "Mismatch",
    "MismatchKind",
    "Model",
    "NonNull",
    "ObjectType",
    "ResponseMatcher",
    "ScalarType",
    "SchemaError",
    "TypeMatcher",
    "TypeView",
    "UnknownMismatchKindError",
    "UnknownScalarKindError",
    "ValidTypeMatcher",
    "assert_not",
    "assert_that",
    "be_loosely_valid_type_for",
    "be_successful_response",
    "be_valid_decorator",
    "be_valid_type_for",
    "check_field",
    "check_record",
    "check_value",
    "parse_type",
    "register_type",
    "render",
    "resolve_type",
    "satisfy_type",
    "type_name",
]
