"""Schema description: models, attributes, type expressions and capability probes.

Models bind a record class to an object type:

    class UserDecorator(Model, name="User"):
        graphql_attributes = (
            Attribute("id", "ID!"),
            Attribute("name", "String", required=True),
            Attribute("organization", OrganizationDecorator),
            Attribute("display_name", "String", accessor="full_name"),
        )

Type expressions use GraphQL notation (``[User!]!``) and are resolved lazily,
so a model may refer to itself or to models declared after it.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, ClassVar, Protocol, runtime_checkable

from gqlmatchers.errors import SchemaError
from gqlmatchers.types import (
    BUILTIN_SCALARS,
    FieldView,
    ListOf,
    NonNull,
    ObjectType,
    TypeView,
)

logger = logging.getLogger(__name__)

_NAME_PATTERN = re.compile(r"[_A-Za-z][_0-9A-Za-z]*")
_NAMED_TYPES: dict[str, TypeView] = {scalar.name: scalar for scalar in BUILTIN_SCALARS}


# =============================================================================
# Optional capabilities
# =============================================================================


@runtime_checkable
class SchemaDescribed(Protocol):
    """A class that can describe its own schema type."""

    def schema_type(self) -> TypeView: ...


@runtime_checkable
class ModelBinding(Protocol):
    """A record class that binds some accessors to model classes."""

    def expected_model_for(self, accessor: str) -> type | None: ...


def resolve_type(type_or_model: Any) -> TypeView | None:
    """Resolve a type view from a type view or a schema-described class.

    Returns None when neither capability is present.
    """
    if isinstance(type_or_model, type):
        if isinstance(type_or_model, SchemaDescribed):
            return type_or_model.schema_type()
        return None
    if isinstance(type_or_model, TypeView):
        return type_or_model
    return None


def expected_model_for(record: object, accessor: str) -> type | None:
    """Model class the record's class binds ``accessor`` to, if any."""
    record_class = type(record)
    if not isinstance(record_class, ModelBinding):
        return None
    return record_class.expected_model_for(accessor)


# =============================================================================
# Type expressions
# =============================================================================


def register_type(view: TypeView) -> TypeView:
    """Make a named type available to type expressions."""
    name = getattr(view, "name", None)
    if not isinstance(name, str):
        msg = f"Only named types can be registered, got {view!r}"
        raise SchemaError(msg)
    if (existing := _NAMED_TYPES.get(name)) is not None and existing != view:
        msg = f"Type name '{name}' already registered to {existing!r}."
        raise SchemaError(msg)
    _NAMED_TYPES[name] = view
    return view


def lookup_type(name: str) -> TypeView:
    """Resolve a bare type name against registered models and named types."""
    if (model := Model.registry.get(name)) is not None:
        return model.schema_type()
    if (view := _NAMED_TYPES.get(name)) is not None:
        return view
    msg = f"Unknown type name '{name}'"
    raise SchemaError(msg)


def parse_type(expr: str) -> TypeView:
    """Parse a type expression such as ``[User!]!`` into a type view.

    Raises:
        SchemaError: If the expression is malformed or names an unknown type.

    """
    text = expr.strip()
    if text.endswith("!"):
        inner = text[:-1].rstrip()
        if not inner or inner.endswith("!"):
            msg = f"Invalid type expression '{expr}'"
            raise SchemaError(msg)
        return NonNull(parse_type(inner))
    if text.startswith("[") or text.endswith("]"):
        if not (text.startswith("[") and text.endswith("]")) or len(text) < 3:  # noqa: PLR2004
            msg = f"Invalid type expression '{expr}'"
            raise SchemaError(msg)
        return ListOf(parse_type(text[1:-1]))
    if not _NAME_PATTERN.fullmatch(text):
        msg = f"Invalid type expression '{expr}'"
        raise SchemaError(msg)
    return lookup_type(text)


def _expression_name(expr: str) -> str:
    return expr.strip().strip("[]! ")


def model_for(type_spec: Any) -> type[Model] | None:
    """Model class a type spec is bound to, looking through list/non-null."""
    if isinstance(type_spec, type) and issubclass(type_spec, Model):
        return type_spec
    if isinstance(type_spec, str):
        return Model.registry.get(_expression_name(type_spec))
    return None


def to_type_view(type_spec: Any) -> TypeView:
    """Turn an expression string, type view or model class into a type view."""
    if isinstance(type_spec, str):
        return parse_type(type_spec)
    if (view := resolve_type(type_spec)) is not None:
        return view
    msg = f"Cannot use {type_spec!r} as a schema type"
    raise SchemaError(msg)


# =============================================================================
# Models
# =============================================================================


@dataclass(frozen=True)
class Attribute:
    """A model attribute exposed as a schema field.

    ``accessor`` names the record attribute or method read for the field and
    defaults to ``name``.
    """

    name: str
    type: str | TypeView | type[Model]
    required: bool = False
    accessor: str | None = None

    def __post_init__(self) -> None:
        if self.accessor is None:
            object.__setattr__(self, "accessor", self.name)

    def field_view(self) -> FieldView:
        """Field view this attribute contributes to its model's object type."""
        view = to_type_view(self.type)
        if self.required and not view.is_non_null():
            view = NonNull(view)
        return FieldView(name=self.name, type=view, accessor=self.accessor)

    def model(self) -> type[Model] | None:
        """Model class the attribute's type is bound to, if any."""
        return model_for(self.type)


class Model:
    """Base for schema-described records and decorators.

    Subclasses register under ``name`` (default: the class name without a
    ``Decorator`` suffix) and list their fields in ``graphql_attributes``.
    """

    type_name: ClassVar[str] = ""
    graphql_attributes: ClassVar[tuple[Attribute, ...]] = ()
    registry: ClassVar[dict[str, type[Model]]] = {}

    def __init_subclass__(cls, name: str | None = None, **kwargs: Any) -> None:
        """Register model subclass with automatic name derivation."""
        super().__init_subclass__(**kwargs)
        cls.type_name = name if name is not None else cls.__name__.removesuffix("Decorator")

        if (existing := Model.registry.get(cls.type_name)) and existing is not cls:
            msg = (
                f"Type name '{cls.type_name}' already registered to {existing}. "
                "Choose a different name."
            )
            raise ValueError(msg)

        Model.registry[cls.type_name] = cls
        logger.debug("Registered model %s as %s", cls.__qualname__, cls.type_name)

    @classmethod
    def schema_type(cls) -> ObjectType:
        """Object type described by this model's attributes."""
        return ObjectType(
            cls.type_name,
            lambda: {attr.name: attr.field_view() for attr in cls.graphql_attributes},
        )

    @classmethod
    def expected_model_for(cls, accessor: str) -> type[Model] | None:
        """Model class the attribute read through ``accessor`` is bound to."""
        for attr in cls.graphql_attributes:
            if attr.accessor == accessor:
                return attr.model()
        return None
