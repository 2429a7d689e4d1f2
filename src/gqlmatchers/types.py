"""Read-only schema type views and the built-in schema nodes implementing them."""

from __future__ import annotations

from abc import ABC
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol, TypeAlias, dataclass_transform, runtime_checkable


@runtime_checkable
class TypeView(Protocol):
    """Capabilities the checker needs from a schema type node.

    Wrapper layers (non-null, list) are peeled one at a time with ``unwrap``;
    the kind predicates always answer for the bare type.
    """

    def is_non_null(self) -> bool: ...

    def is_list(self) -> bool: ...

    def unwrap(self) -> TypeView: ...

    def bare(self) -> TypeView: ...

    def is_scalar_kind(self) -> bool: ...

    def is_enum_kind(self) -> bool: ...

    def scalar_kind(self) -> str | None: ...

    def enum_values(self) -> tuple[Any, ...]: ...

    def fields(self) -> Mapping[str, FieldView]: ...


@dataclass(frozen=True)
class FieldView:
    """A declared field: display name, type, and the accessor read off records."""

    name: str
    type: TypeView
    accessor: str | None = None

    def __post_init__(self) -> None:
        if self.accessor is None:
            object.__setattr__(self, "accessor", self.name)


FieldSpec: TypeAlias = FieldView | TypeView
FieldsThunk: TypeAlias = Callable[[], Mapping[str, FieldSpec]]


@dataclass(frozen=True)
@dataclass_transform(frozen_default=True)
class SchemaType:
    """Base for schema type nodes."""

    def __init_subclass__(cls) -> None:
        """Make every schema node a frozen dataclass."""
        dataclass(frozen=True)(cls)

    def __str__(self) -> str:
        """Render the type in GraphQL notation."""
        return type_name(self)

    def is_non_null(self) -> bool:
        """Return True if the outermost layer is a non-null wrapper."""
        return False

    def is_list(self) -> bool:
        """Return True if the type is a list, looking through non-null."""
        return False

    def unwrap(self) -> TypeView:
        """Peel one wrapper layer; named types return themselves."""
        return self

    def bare(self) -> TypeView:
        """Peel every wrapper layer down to the named type."""
        current: TypeView = self
        while (inner := current.unwrap()) is not current:
            current = inner
        return current

    def is_scalar_kind(self) -> bool:
        """Return True if the bare type is a scalar."""
        return isinstance(self.bare(), ScalarType)

    def is_enum_kind(self) -> bool:
        """Return True if the bare type is an enum."""
        return isinstance(self.bare(), EnumType)

    def scalar_kind(self) -> str | None:
        """Built-in scalar kind of the bare type, or None."""
        bare = self.bare()
        return (bare.kind or bare.name) if isinstance(bare, ScalarType) else None

    def enum_values(self) -> tuple[Any, ...]:
        """Values records may hold for the bare enum type."""
        bare = self.bare()
        if not isinstance(bare, EnumType):
            return ()
        if isinstance(bare.values, Mapping):
            return tuple(bare.values.values())
        return tuple(bare.values)

    def fields(self) -> Mapping[str, FieldView]:
        """Declared fields of the bare object type, in order."""
        bare = self.bare()
        if not isinstance(bare, ObjectType):
            return {}
        return bare.resolve_fields()


class ScalarType(SchemaType):
    """Leaf value type. ``kind`` names the built-in scalar it specialises."""

    name: str
    kind: str | None = None


class EnumType(SchemaType):
    """Enumeration. ``values`` maps public names to the values records hold."""

    name: str
    values: Mapping[str, Any] | tuple[Any, ...]


class ObjectType(SchemaType):
    """Composite type with ordered named fields.

    ``declared_fields`` may be a zero-argument callable so a type can refer
    to itself.
    """

    name: str
    declared_fields: Mapping[str, FieldSpec] | FieldsThunk

    def resolve_fields(self) -> dict[str, FieldView]:
        """Evaluate the declared fields, thunk included, into field views."""
        declared = self.declared_fields
        if callable(declared):
            declared = declared()
        resolved: dict[str, FieldView] = {}
        for name, spec in declared.items():
            if isinstance(spec, FieldView):
                resolved[name] = spec
            else:
                resolved[name] = FieldView(name=name, type=spec)
        return resolved


class NonNull(SchemaType):
    """Non-null wrapper: T!."""

    of_type: TypeView

    def is_non_null(self) -> bool:
        """Always True for a non-null wrapper."""
        return True

    def is_list(self) -> bool:
        """Return True if the wrapped type is a list."""
        return self.of_type.is_list()

    def unwrap(self) -> TypeView:
        """Return the wrapped type."""
        return self.of_type


class ListOf(SchemaType):
    """List wrapper: [T]."""

    of_type: TypeView

    def is_list(self) -> bool:
        """Always True for a list wrapper."""
        return True

    def unwrap(self) -> TypeView:
        """Return the wrapped type."""
        return self.of_type


INT = ScalarType("Int")
FLOAT = ScalarType("Float")
STRING = ScalarType("String")
BOOLEAN = ScalarType("Boolean")
ID = ScalarType("ID")
DATE = ScalarType("Date")
DATETIME = ScalarType("DateTime")
JSON = ScalarType("JSON")

BUILTIN_SCALARS: tuple[ScalarType, ...] = (
    INT,
    FLOAT,
    STRING,
    BOOLEAN,
    ID,
    DATE,
    DATETIME,
    JSON,
)


# =============================================================================
# Type name formatting: TypeView -> str
# =============================================================================

_TYPE_FORMATTERS: dict[type[SchemaType], Callable[[Any], str]] = {
    NonNull: lambda t: f"{type_name(t.of_type)}!",
    ListOf: lambda t: f"[{type_name(t.of_type)}]",
}


def type_name(view: Any) -> str:
    """Get the GraphQL notation for a type view, e.g. ``[User!]!``."""
    if formatter := _TYPE_FORMATTERS.get(type(view)):
        return formatter(view)
    if (name := getattr(view, "name", None)) is not None:
        return str(name)
    return str(view)


# =============================================================================
# List-shaped values
# =============================================================================


class ListLike(ABC):  # noqa: B024
    """Virtual base for values that are walked element by element.

    Collaborators register their own list-like wrappers with
    ``ListLike.register(cls)``.
    """


ListLike.register(list)
ListLike.register(tuple)


def is_list_like(value: object) -> bool:
    """Return True if value is list-shaped. Mappings and strings never are."""
    if isinstance(value, (Mapping, str, bytes)):
        return False
    return isinstance(value, ListLike)


def native_kind(value: object) -> str:
    """Name of the runtime kind of a value, as shown in messages."""
    return type(value).__name__

