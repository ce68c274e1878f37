"""Fields, arguments and input values mapped to ParameterDefinition entries."""

from graphql import InputValueDefinitionNode

from gqlcodegen.mappers.annotations import get_annotations
from gqlcodegen.mappers.naming import capitalize_if_restricted, get_model_class_name, uncapitalize
from gqlcodegen.mappers.type_mapper import get_java_type
from gqlcodegen.mappers.values import map_value
from gqlcodegen.model.context import MappingContext
from gqlcodegen.model.data_model import ParameterDefinition
from gqlcodegen.model.definitions import (
    ExtendedCompositeDefinition,
    ExtendedFieldDefinition,
    ExtendedInterfaceTypeDefinition,
    description_lines,
)
from gqlcodegen.utils.directive import is_deprecated

DATA_FETCHING_ENVIRONMENT_PARAMETER = ParameterDefinition(
    name="env",
    original_name="env",
    type="graphql.schema.DataFetchingEnvironment",
)


def generate_resolvers_for_field(
    context: MappingContext, field_definition: ExtendedFieldDefinition, parent_type_name: str
) -> bool:
    """
    Whether a field is served by a type resolver instead of being a plain model field.

    True when the field has arguments (and parameterized field resolvers are enabled), when it
    was declared in a type extension (and extension field resolvers are enabled), or when
    `fieldsWithResolvers` lists the type or the field. Fields of root types never get one.
    """
    if context.operation_kind(parent_type_name) is not None:
        return False
    if field_definition.arguments and context.generate_parameterized_fields_resolvers:
        return True
    if field_definition.from_extension and context.generate_extension_fields_resolvers:
        return True
    fields_with_resolvers = context.fields_with_resolvers
    field_key = f"{parent_type_name}.{field_definition.name}"
    return parent_type_name in fields_with_resolvers or field_key in fields_with_resolvers


def get_fields_with_resolvers(
    context: MappingContext, definition: ExtendedCompositeDefinition
) -> list[ExtendedFieldDefinition]:
    return [f for f in definition.field_definitions if generate_resolvers_for_field(context, f, definition.name)]


def get_all_field_definitions(
    context: MappingContext, definition: ExtendedCompositeDefinition
) -> list[ExtendedFieldDefinition]:
    """Fields declared on the type, followed by the fields of its interfaces that it does not redeclare."""
    field_definitions = list(definition.field_definitions)
    declared = {f.name for f in field_definitions}
    for interface_name in definition.implements:
        interface = context.document.get_definition(interface_name)
        if not isinstance(interface, ExtendedInterfaceTypeDefinition):
            continue
        for interface_field in interface.field_definitions:
            if interface_field.name not in declared:
                declared.add(interface_field.name)
                field_definitions.append(interface_field)
    return field_definitions


def map_field(
    context: MappingContext, field_definition: ExtendedFieldDefinition, parent_type_name: str
) -> ParameterDefinition:
    return ParameterDefinition(
        name=capitalize_if_restricted(field_definition.name),
        original_name=field_definition.name,
        type=get_java_type(context, field_definition.type, field_definition.name, parent_type_name),
        annotations=get_annotations(context, field_definition.type, field_definition.node, parent_type_name),
        java_doc=field_definition.java_doc,
        deprecated=is_deprecated(field_definition.node),
    )


def map_fields(context: MappingContext, definition: ExtendedCompositeDefinition) -> list[ParameterDefinition]:
    """Model fields of an object or interface type; fields served by a type resolver are left out."""
    return [
        map_field(context, f, definition.name)
        for f in get_all_field_definitions(context, definition)
        if not generate_resolvers_for_field(context, f, definition.name)
    ]


def map_input_value(
    context: MappingContext, input_value: InputValueDefinitionNode, parent_type_name: str
) -> ParameterDefinition:
    name = input_value.name.value
    default_value = None
    if input_value.default_value is not None:
        default_value = map_value(context, input_value.default_value, input_value.type)
    return ParameterDefinition(
        name=capitalize_if_restricted(name),
        original_name=name,
        type=get_java_type(context, input_value.type, name, parent_type_name),
        default_value=default_value,
        annotations=get_annotations(context, input_value.type, input_value, parent_type_name),
        java_doc=description_lines(input_value),
        deprecated=is_deprecated(input_value),
    )


def map_input_values(
    context: MappingContext, input_values: list[InputValueDefinitionNode], parent_type_name: str
) -> list[ParameterDefinition]:
    """
    Map input object fields or field arguments.

    For arguments `parent_type_name` is the name of the field, so per-field overrides of an
    argument are keyed `field.argument`.
    """
    return [map_input_value(context, input_value, parent_type_name) for input_value in input_values]


def get_parent_object_parameter(context: MappingContext, parent_type_name: str) -> ParameterDefinition:
    """First parameter of a type resolver method: the object whose field is being resolved."""
    return ParameterDefinition(
        name=capitalize_if_restricted(uncapitalize(parent_type_name)),
        original_name=parent_type_name,
        type=get_model_class_name(context, parent_type_name),
    )
