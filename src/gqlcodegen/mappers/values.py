"""Rendering of schema literal values (default values, directive arguments) as Java expressions."""

from graphql import (
    BooleanValueNode,
    EnumValueNode,
    FloatValueNode,
    IntValueNode,
    ListTypeNode,
    ListValueNode,
    NonNullTypeNode,
    NullValueNode,
    ObjectValueNode,
    StringValueNode,
    TypeNode,
    ValueNode,
)

from gqlcodegen import log
from gqlcodegen.mappers.naming import capitalize_if_restricted
from gqlcodegen.mappers.type_mapper import get_java_type, map_named_type, nested_type_name
from gqlcodegen.model.context import MappingContext

FORMATTER_TO_STRING = "?toString"
FORMATTER_TO_ARRAY = "?toArray"
FORMATTER_TO_ARRAY_OF_STRINGS = "?toArrayOfStrings"
FORMATTERS = (FORMATTER_TO_STRING, FORMATTER_TO_ARRAY, FORMATTER_TO_ARRAY_OF_STRINGS)

JAVA_LONG_TYPES = {"Long", "long", "java.lang.Long"}
NULL_LITERAL = "null"

_JAVA_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"}


def format_value(value: str, formatter: str | None) -> str:
    if formatter == FORMATTER_TO_STRING:
        return to_java_string_literal(value)
    return value


def format_list(values: list[str] | None, formatter: str | None) -> str:
    """
    Render already formatted element values as a Java collection or array initializer.

    Without a formatter the result is a `java.util.List` expression:
    `java.util.Collections.emptyList()` or `java.util.Arrays.asList(1, 2)`.
    `?toArrayOfStrings` quotes every element, `{"1", "2"}`; `?toArray` and any other
    formatter give an array initializer, `{1, 2}`.
    """
    if values is None:
        return format_value(NULL_LITERAL, formatter)
    if formatter is None:
        if not values:
            return "java.util.Collections.emptyList()"
        return f"java.util.Arrays.asList({', '.join(values)})"
    if formatter == FORMATTER_TO_ARRAY_OF_STRINGS:
        return "{" + ", ".join(format_value(value, FORMATTER_TO_STRING) for value in values) + "}"
    return "{" + ", ".join(values) + "}"


def to_java_string_literal(value: str) -> str:
    return '"' + "".join(_JAVA_ESCAPES.get(char, char) for char in value) + '"'


def literal_text(value: ValueNode) -> str:
    """Text of a literal as written in the schema, strings without their quotes."""
    if isinstance(value, NullValueNode):
        return NULL_LITERAL
    if isinstance(value, BooleanValueNode):
        return "true" if value.value else "false"
    if isinstance(value, StringValueNode | IntValueNode | FloatValueNode | EnumValueNode):
        return value.value
    if isinstance(value, ListValueNode):
        return ", ".join(literal_text(element) for element in value.values)
    return NULL_LITERAL


def map_literal(value: ValueNode, formatter: str | None = None) -> str:
    """
    Render a literal without knowing its schema type, as needed for directive arguments.

    Args:
        value: The literal
        formatter: One of the formatter tokens, or None

    Returns:
        str: Java expression
    """
    if isinstance(value, StringValueNode):
        return to_java_string_literal(value.value)
    if isinstance(value, ListValueNode):
        if formatter == FORMATTER_TO_ARRAY_OF_STRINGS:
            return format_list([literal_text(element) for element in value.values], formatter)
        return format_list([map_literal(element) for element in value.values], formatter)
    if isinstance(value, ObjectValueNode):
        log.warning(f"Object literals are not supported, rendering {NULL_LITERAL} instead")
        return NULL_LITERAL
    return format_value(literal_text(value), formatter)


def map_value(context: MappingContext, value: ValueNode, type_ref: TypeNode | None = None) -> str:
    """
    Render a default value as a Java expression of the field's type.

    Integers of a field mapped to `Long` get the `L` suffix; enum constants are qualified with
    the enum class, `Status.ACTIVE`; lists become `java.util.Arrays.asList(...)`.

    Args:
        context: Global mapping context
        value: The default value literal
        type_ref: Type of the input value the literal belongs to

    Returns:
        str: Java expression
    """
    if type_ref is None:
        return map_literal(value)

    if isinstance(value, IntValueNode):
        if get_java_type(context, type_ref) in JAVA_LONG_TYPES:
            return f"{value.value}L"
        return value.value
    if isinstance(value, EnumValueNode):
        return map_enum_value(context, value, type_ref)
    if isinstance(value, ListValueNode):
        element_type = list_element_type(type_ref)
        return format_list([map_value(context, element, element_type) for element in value.values], None)
    return map_literal(value)


def map_enum_value(context: MappingContext, value: EnumValueNode, type_ref: TypeNode) -> str:
    constant = capitalize_if_restricted(value.value)
    type_name = nested_type_name(type_ref)
    if type_name is None or type_name not in context.enum_names:
        return constant
    return f"{map_named_type(context, type_name).java_name}.{constant}"


def list_element_type(type_ref: TypeNode) -> TypeNode:
    """Element type of a list type; a non-list type is its own element type (single value input coercion)."""
    if isinstance(type_ref, NonNullTypeNode):
        return list_element_type(type_ref.type)
    if isinstance(type_ref, ListTypeNode):
        return type_ref.type
    return type_ref
