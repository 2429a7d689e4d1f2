"""Tests for gqlmatchers.schema module."""

import pytest

from gqlmatchers.errors import SchemaError
from gqlmatchers.schema import (
    Attribute,
    Model,
    expected_model_for,
    lookup_type,
    model_for,
    parse_type,
    register_type,
    resolve_type,
)
from gqlmatchers.types import (
    ID,
    STRING,
    EnumType,
    FieldView,
    ListOf,
    NonNull,
    ObjectType,
)


class SchemaOrganization(Model):
    graphql_attributes = (Attribute("id", "ID!"),)


class SchemaUserDecorator(Model):
    graphql_attributes = (
        Attribute("id", "ID!"),
        Attribute("name", "String", required=True),
        Attribute("organization", SchemaOrganization),
        Attribute("friends", "[SchemaUser!]"),
        Attribute("displayName", "String", accessor="full_name"),
    )


class TestParseType:
    """Test type expression parsing."""

    @pytest.mark.parametrize(
        ("expr", "expected"),
        [
            ("String", STRING),
            ("ID!", NonNull(ID)),
            ("[String]", ListOf(STRING)),
            ("[String!]!", NonNull(ListOf(NonNull(STRING)))),
            (" [ ID ] ! ", NonNull(ListOf(ID))),
        ],
    )
    def test_builtin_expressions(self, expr: str, expected: object) -> None:
        """Test expressions over built-in scalars."""
        assert parse_type(expr) == expected

    def test_model_name_resolves_to_object_type(self) -> None:
        """Test names of registered models."""
        view = parse_type("[SchemaOrganization]!")
        assert view.is_non_null()
        assert view.is_list()
        assert isinstance(view.bare(), ObjectType)
        assert list(view.fields()) == ["id"]

    @pytest.mark.parametrize("expr", ["", "!", "String!!", "[String", "String]", "[]", "Str ing"])
    def test_malformed_expressions(self, expr: str) -> None:
        """Test malformed expressions raise SchemaError."""
        with pytest.raises(SchemaError, match="Invalid type expression"):
            parse_type(expr)

    def test_unknown_name(self) -> None:
        """Test names that are not registered."""
        with pytest.raises(SchemaError, match="Unknown type name 'Nope'"):
            parse_type("[Nope]")


class TestRegisterType:
    """Test the named type registry."""

    def test_registered_enum_is_resolvable(self) -> None:
        """Test registering a named type for expressions."""
        role = register_type(EnumType("SchemaRole", {"ADMIN": "admin"}))
        assert lookup_type("SchemaRole") is role
        assert parse_type("SchemaRole!") == NonNull(role)

    def test_reregistering_same_type_is_allowed(self) -> None:
        """Test idempotent registration."""
        size = EnumType("SchemaSize", ("S",))
        register_type(size)
        assert register_type(EnumType("SchemaSize", ("S",))) == size

    def test_conflicting_registration(self) -> None:
        """Test registering a different type under a taken name."""
        register_type(EnumType("SchemaColor", ("red",)))
        with pytest.raises(SchemaError, match="already registered"):
            register_type(EnumType("SchemaColor", ("blue",)))

    def test_wrapped_types_cannot_be_registered(self) -> None:
        """Test that only named types can be registered."""
        with pytest.raises(SchemaError, match="Only named types"):
            register_type(NonNull(STRING))


class TestModel:
    """Test model declaration and registration."""

    def test_name_drops_decorator_suffix(self) -> None:
        """Test automatic name derivation."""
        assert SchemaUserDecorator.type_name == "SchemaUser"
        assert Model.registry["SchemaUser"] is SchemaUserDecorator

    def test_explicit_name(self) -> None:
        """Test naming a model explicitly."""

        class Anything(Model, name="SchemaExplicitName"):
            pass

        assert Anything.type_name == "SchemaExplicitName"

    def test_duplicate_name_raises(self) -> None:
        """Test that two models cannot share a name."""
        with pytest.raises(ValueError, match="already registered"):

            class Other(Model, name="SchemaUser"):
                pass

    def test_schema_type_fields(self) -> None:
        """Test the object type a model describes."""
        fields = SchemaUserDecorator.schema_type().fields()
        assert list(fields) == ["id", "name", "organization", "friends", "displayName"]
        assert fields["id"] == FieldView("id", NonNull(ID), "id")
        assert fields["name"].type == NonNull(STRING)
        assert fields["displayName"].accessor == "full_name"

    def test_self_referencing_model(self) -> None:
        """Test that a model can list itself in its own attributes."""
        friends = SchemaUserDecorator.schema_type().fields()["friends"].type
        assert friends.is_list()
        assert friends.bare().name == "SchemaUser"  # type: ignore[attr-defined]

    def test_required_does_not_double_wrap(self) -> None:
        """Test required on an already non-null expression."""
        attr = Attribute("id", "ID!", required=True)
        assert attr.field_view().type == NonNull(ID)


class TestModelBinding:
    """Test model-class binding of attributes."""

    def test_model_class_attribute(self) -> None:
        """Test an attribute typed with a model class."""
        assert SchemaUserDecorator.expected_model_for("organization") is SchemaOrganization

    def test_model_name_attribute(self) -> None:
        """Test an attribute typed with a model name expression."""
        assert SchemaUserDecorator.expected_model_for("friends") is SchemaUserDecorator

    def test_scalar_attribute(self) -> None:
        """Test attributes not bound to a model."""
        assert SchemaUserDecorator.expected_model_for("name") is None
        assert SchemaUserDecorator.expected_model_for("unknown") is None

    def test_lookup_by_accessor(self) -> None:
        """Test bindings are looked up by accessor, not field name."""
        assert SchemaUserDecorator.expected_model_for("full_name") is None
        assert model_for("[SchemaOrganization!]!") is SchemaOrganization

    def test_expected_model_for_records(self) -> None:
        """Test the capability probe on record instances."""

        class Plain:
            organization = None

        assert expected_model_for(SchemaUserDecorator(), "organization") is SchemaOrganization
        assert expected_model_for(Plain(), "organization") is None


class TestResolveType:
    """Test resolving type views from matcher arguments."""

    def test_type_view_is_used_as_is(self) -> None:
        """Test type views pass through."""
        view = NonNull(STRING)
        assert resolve_type(view) is view

    def test_model_class_is_described(self) -> None:
        """Test schema-described classes."""
        view = resolve_type(SchemaOrganization)
        assert isinstance(view, ObjectType)
        assert view.name == "SchemaOrganization"

    @pytest.mark.parametrize("value", ["String!", 42, None, object, ObjectType])
    def test_other_values(self, value: object) -> None:
        """Test values with neither capability."""
        assert resolve_type(value) is None
