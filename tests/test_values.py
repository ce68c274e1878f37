import logging

import pytest
from graphql import parse_value

from gqlcodegen.mappers.values import (
    FORMATTER_TO_ARRAY,
    FORMATTER_TO_ARRAY_OF_STRINGS,
    FORMATTER_TO_STRING,
    format_list,
    format_value,
    map_literal,
    map_value,
)
from tests.conftest import list_of, make_context, named, non_null

CONTEXT = make_context(
    """
    scalar Long

    enum Status { ACTIVE ARCHIVED }

    input Filter {
        status: Status
        max: Long
        limit: Int
    }
    """,
    custom_types_mapping={"Long": "Long"},
)


class TestFormatList:
    @pytest.mark.parametrize(
        "values,formatter,expected",
        [
            ([], None, "java.util.Collections.emptyList()"),
            (["1", "2"], None, "java.util.Arrays.asList(1, 2)"),
            ([], FORMATTER_TO_ARRAY, "{}"),
            (["1", "2"], FORMATTER_TO_ARRAY, "{1, 2}"),
            (["a", "b"], FORMATTER_TO_ARRAY_OF_STRINGS, '{"a", "b"}'),
            ([], FORMATTER_TO_ARRAY_OF_STRINGS, "{}"),
            (["1", "2"], "?somethingElse", "{1, 2}"),
            (None, None, "null"),
        ],
    )
    def test_format_list(self, values: list[str] | None, formatter: str | None, expected: str) -> None:
        assert format_list(values, formatter) == expected

    def test_format_value(self) -> None:
        assert format_value("3", None) == "3"
        assert format_value("3", FORMATTER_TO_STRING) == '"3"'
        assert format_value("3", FORMATTER_TO_ARRAY) == "3"
        assert format_value('say "hi"', FORMATTER_TO_STRING) == '"say \\"hi\\""'


class TestMapLiteral:
    @pytest.mark.parametrize(
        "literal,formatter,expected",
        [
            ("3", None, "3"),
            ("3", FORMATTER_TO_STRING, '"3"'),
            ("1.5", None, "1.5"),
            ("true", None, "true"),
            ("null", None, "null"),
            ("ACTIVE", None, "ACTIVE"),
            ('"abc"', None, '"abc"'),
            ('"abc"', FORMATTER_TO_STRING, '"abc"'),
            ('"say \\"hi\\""', None, '"say \\"hi\\""'),
            ("[1, 2]", None, "java.util.Arrays.asList(1, 2)"),
            ("[1, 2]", FORMATTER_TO_ARRAY, "{1, 2}"),
            ('["a", "b"]', None, 'java.util.Arrays.asList("a", "b")'),
            ('["a", "b"]', FORMATTER_TO_ARRAY_OF_STRINGS, '{"a", "b"}'),
            ("[A, B]", FORMATTER_TO_ARRAY_OF_STRINGS, '{"A", "B"}'),
            ('["a\\"b", "c"]', FORMATTER_TO_ARRAY_OF_STRINGS, '{"a\\"b", "c"}'),
            ("[]", None, "java.util.Collections.emptyList()"),
        ],
    )
    def test_literals(self, literal: str, formatter: str | None, expected: str) -> None:
        assert map_literal(parse_value(literal), formatter) == expected

    def test_object_literal_is_unsupported(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="gqlcodegen"):
            assert map_literal(parse_value("{limit: 1}")) == "null"
        assert "Object literals are not supported" in caplog.text


class TestMapValue:
    def test_long_values_get_suffix(self) -> None:
        assert map_value(CONTEXT, parse_value("5"), named("Long")) == "5L"
        assert map_value(CONTEXT, parse_value("5"), non_null(named("Int"))) == "5"

    def test_enum_values_are_qualified(self) -> None:
        assert map_value(CONTEXT, parse_value("ACTIVE"), named("Status")) == "Status.ACTIVE"

    def test_enum_values_use_model_names(self) -> None:
        context = make_context("enum Status { ACTIVE }", model_name_suffix="DTO")
        assert map_value(context, parse_value("ACTIVE"), named("Status")) == "StatusDTO.ACTIVE"

    def test_unknown_enum_type_keeps_constant(self) -> None:
        assert map_value(CONTEXT, parse_value("ACTIVE"), named("String")) == "ACTIVE"

    def test_lists_map_their_elements(self) -> None:
        value = parse_value("[ACTIVE, ARCHIVED]")
        assert map_value(CONTEXT, value, list_of(named("Status"))) == (
            "java.util.Arrays.asList(Status.ACTIVE, Status.ARCHIVED)"
        )
        assert map_value(CONTEXT, parse_value("[1, 2]"), non_null(list_of(named("Long")))) == (
            "java.util.Arrays.asList(1L, 2L)"
        )

    def test_empty_list(self) -> None:
        assert map_value(CONTEXT, parse_value("[]"), list_of(named("Int"))) == "java.util.Collections.emptyList()"

    def test_strings_are_escaped(self) -> None:
        assert map_value(CONTEXT, parse_value('"line\\nbreak"'), named("String")) == '"line\\nbreak"'

    def test_without_type(self) -> None:
        assert map_value(CONTEXT, parse_value("ACTIVE")) == "ACTIVE"
