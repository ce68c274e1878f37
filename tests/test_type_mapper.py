from collections.abc import Callable

import pytest
from graphql import NameNode, TypeNode
from hypothesis import given
from hypothesis import strategies as st

from gqlcodegen.mappers.type_mapper import (
    UnresolvedTypeShapeError,
    get_java_type,
    map_type,
    nested_type_name,
)
from gqlcodegen.model.context import MappingContext
from gqlcodegen.model.data_model import NamedDefinition
from tests.conftest import list_of, make_context, named, non_null, type_ref_strategy

SCHEMA = """
    scalar DateTime

    interface Character {
        friends: [Character]
        tags: [String!]!
    }

    type Human implements Character {
        friends: [Character]
        tags: [String!]!
        birthday: DateTime
    }

    type Event {
        tags: [String!]!
    }
"""

CONTEXT = make_context(SCHEMA)


class TestMapType:
    @pytest.mark.parametrize(
        "scalar,expected",
        [("ID", "String"), ("String", "String"), ("Int", "Integer"), ("Float", "Double"), ("Boolean", "Boolean")],
    )
    def test_builtin_scalars(self, scalar: str, expected: str) -> None:
        assert map_type(CONTEXT, named(scalar)) == NamedDefinition(expected, False)

    def test_custom_scalar_defaults_to_string(self) -> None:
        assert get_java_type(CONTEXT, named("DateTime")) == "String"

    def test_model_name_for_object_types(self, build_context: Callable[..., MappingContext]) -> None:
        context = build_context(SCHEMA, model_name_prefix="Gql", model_name_suffix="DTO")

        assert get_java_type(context, named("Human")) == "GqlHumanDTO"
        assert map_type(context, named("Character")) == NamedDefinition("GqlCharacterDTO", True)

    def test_list_of_scalars(self) -> None:
        type_ref = non_null(list_of(non_null(named("String"))))
        assert get_java_type(CONTEXT, type_ref, "tags", "Event") == "java.util.List<String>"

    def test_nested_lists(self) -> None:
        type_ref = list_of(list_of(named("Int")))
        assert get_java_type(CONTEXT, type_ref) == "java.util.List<java.util.List<Integer>>"

    def test_interface_list_inside_interface_is_covariant(self) -> None:
        mapped = map_type(CONTEXT, list_of(named("Character")), "friends", "Character")
        assert mapped == NamedDefinition("java.util.List<? extends Character>", True)

    def test_interface_list_inside_object_is_exact(self) -> None:
        mapped = map_type(CONTEXT, list_of(named("Character")), "friends", "Human")
        assert mapped == NamedDefinition("java.util.List<Character>", True)

    def test_scalar_list_inside_interface_is_exact(self) -> None:
        assert get_java_type(CONTEXT, list_of(named("String")), "tags", "Character") == "java.util.List<String>"

    def test_field_override_wins_over_type_override(self, build_context: Callable[..., MappingContext]) -> None:
        context = build_context(
            SCHEMA,
            custom_types_mapping={"DateTime": "java.time.OffsetDateTime", "Human.birthday": "java.time.LocalDate"},
        )

        assert get_java_type(context, named("DateTime"), "birthday", "Human") == "java.time.LocalDate"
        assert get_java_type(context, named("DateTime"), "createdAt", "Event") == "java.time.OffsetDateTime"
        assert get_java_type(context, list_of(named("DateTime")), "birthday", "Human") == (
            "java.util.List<java.time.LocalDate>"
        )

    def test_unknown_shape_is_fatal(self) -> None:
        with pytest.raises(UnresolvedTypeShapeError):
            map_type(CONTEXT, NameNode(value="Event"))  # type: ignore[arg-type]

    @given(type_ref=type_ref_strategy(st.sampled_from(["String", "Int", "Human", "Character"])))
    def test_non_null_does_not_change_the_type(self, type_ref: TypeNode) -> None:
        for parent_type_name in ("Human", "Character"):
            assert map_type(CONTEXT, non_null(type_ref), "friends", parent_type_name) == map_type(
                CONTEXT, type_ref, "friends", parent_type_name
            )

    @given(type_ref=type_ref_strategy(st.sampled_from(["String", "Int", "Human"])))
    def test_non_interface_lists_are_exact(self, type_ref: TypeNode) -> None:
        assert "? extends" not in get_java_type(CONTEXT, type_ref, "friends", "Character")


class TestTypeRefHelpers:
    @pytest.mark.parametrize(
        "type_ref",
        [
            named("Event"),
            non_null(named("Event")),
            non_null(list_of(non_null(named("Event")))),
            list_of(list_of(named("Event"))),
        ],
    )
    def test_nested_type_name(self, type_ref: TypeNode) -> None:
        assert nested_type_name(type_ref) == "Event"

    def test_nested_type_name_of_unknown_shape(self) -> None:
        assert nested_type_name(NameNode(value="Event")) is None  # type: ignore[arg-type]
