from graphql import ListTypeNode, NamedTypeNode, NonNullTypeNode, TypeNode

from gqlcodegen import log
from gqlcodegen.mappers.naming import get_model_class_name
from gqlcodegen.mappers.overrides import lookup_override
from gqlcodegen.model.context import MappingContext
from gqlcodegen.model.data_model import NamedDefinition

JAVA_UTIL_LIST = "java.util.List"


class UnresolvedTypeShapeError(TypeError):
    """Raised when a type reference is neither a named, a list nor a non-null type.

    This means the parsed document itself is malformed; there is nothing a user can change
    in the configuration to recover from it.
    """


def get_generics_string(generic_type: str, type_parameter: str) -> str:
    return f"{generic_type}<{type_parameter}>"


def wrap_into_java_list(java_type: str) -> str:
    """`String` becomes `java.util.List<String>`."""
    return get_generics_string(JAVA_UTIL_LIST, java_type)


def wrap_super_type_into_java_list(java_type: str) -> str:
    """Upper bounded wildcard list: `Foo` becomes `java.util.List<? extends Foo>`."""
    return get_generics_string(JAVA_UTIL_LIST, f"? extends {java_type}")


def map_type(
    context: MappingContext,
    type_ref: TypeNode,
    field_name: str | None = None,
    parent_type_name: str | None = None,
) -> NamedDefinition:
    """
    Convert a schema type reference into the corresponding Java type.

    Lists are mapped innermost first. A list of interfaces declared inside an interface is
    mapped to an upper bounded list so that implementations may narrow the element type.
    Non-null wrappers do not change the Java type.

    Args:
        context: Global mapping context
        type_ref: Type reference of a field, argument or input value
        field_name: Name of the field holding the reference, used for per-field overrides
        parent_type_name: Name of the type declaring the field

    Returns:
        NamedDefinition: Java type name and whether the innermost type is an interface

    Raises:
        UnresolvedTypeShapeError: If the reference is of an unknown kind.
    """
    if isinstance(type_ref, NamedTypeNode):
        return map_named_type(context, type_ref.name.value, field_name, parent_type_name)
    if isinstance(type_ref, ListTypeNode):
        element = map_type(context, type_ref.type, field_name, parent_type_name)
        if element.is_interface and context.is_interface(parent_type_name):
            return NamedDefinition(wrap_super_type_into_java_list(element.java_name), element.is_interface)
        return NamedDefinition(wrap_into_java_list(element.java_name), element.is_interface)
    if isinstance(type_ref, NonNullTypeNode):
        return map_type(context, type_ref.type, field_name, parent_type_name)

    log.error(f"Cannot map type reference {type_ref!r} (field {parent_type_name}.{field_name})")
    raise UnresolvedTypeShapeError(f"Unknown type reference: {type_ref!r}")


def map_named_type(
    context: MappingContext,
    type_name: str,
    field_name: str | None = None,
    parent_type_name: str | None = None,
) -> NamedDefinition:
    """Java type of a named schema type: a per-field override, a per-type override or the model class name."""
    java_name = lookup_override(context.custom_types_mapping, type_name, field_name, parent_type_name)
    if java_name is None:
        java_name = get_model_class_name(context, type_name)
    return NamedDefinition(java_name, context.is_interface(type_name))


def get_java_type(
    context: MappingContext,
    type_ref: TypeNode,
    field_name: str | None = None,
    parent_type_name: str | None = None,
) -> str:
    return map_type(context, type_ref, field_name, parent_type_name).java_name


def nested_type_name(type_ref: TypeNode) -> str | None:
    """
    Innermost named type of a type reference.

    `Event`, `Event!`, `[Event!]!` and `[[Event]]` all give `Event`. Returns None for a
    reference of unknown kind.
    """
    if isinstance(type_ref, NamedTypeNode):
        return type_ref.name.value
    if isinstance(type_ref, ListTypeNode | NonNullTypeNode):
        return nested_type_name(type_ref.type)
    return None
