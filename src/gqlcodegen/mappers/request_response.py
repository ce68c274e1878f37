"""Client side classes: requests, responses, response projections and parametrized inputs."""

from typing import Any

from gqlcodegen import log
from gqlcodegen.mappers.common import base_data_model, model_class_flags
from gqlcodegen.mappers.naming import (
    capitalize,
    capitalize_if_restricted,
    get_model_package_name,
    get_parametrized_input_class_name,
    get_request_class_name,
    get_response_class_name,
    get_response_projection_class_name,
)
from gqlcodegen.mappers.parameters import get_all_field_definitions, map_input_values
from gqlcodegen.mappers.type_mapper import get_java_type, nested_type_name
from gqlcodegen.model.context import MappingContext
from gqlcodegen.model.data_model import DataModelFields, ProjectionParameterDefinition
from gqlcodegen.model.definitions import (
    ExtendedCompositeDefinition,
    ExtendedFieldDefinition,
    ExtendedUnionTypeDefinition,
)
from gqlcodegen.utils.directive import is_deprecated

TYPENAME_FIELD = ProjectionParameterDefinition(name="__typename", method_name="typename")


def map_request(
    context: MappingContext, field_definition: ExtendedFieldDefinition, definition: ExtendedCompositeDefinition
) -> dict[str, Any]:
    class_name = get_request_class_name(context, field_definition.name, definition.name)
    log.debug(f"Mapping request {class_name}")

    operation_kind = context.operation_kind(definition.name)
    data_model = base_data_model(context, get_model_package_name(context), class_name, field_definition.java_doc)
    data_model[DataModelFields.OPERATION_NAME] = field_definition.name
    data_model[DataModelFields.OPERATION_TYPE] = operation_kind.name if operation_kind is not None else None
    data_model[DataModelFields.FIELDS] = map_input_values(context, field_definition.arguments, field_definition.name)
    data_model.update(model_class_flags(context))
    return data_model


def map_response(
    context: MappingContext, field_definition: ExtendedFieldDefinition, definition: ExtendedCompositeDefinition
) -> dict[str, Any]:
    class_name = get_response_class_name(context, field_definition.name, definition.name)
    log.debug(f"Mapping response {class_name}")

    data_model = base_data_model(context, get_model_package_name(context), class_name, field_definition.java_doc)
    data_model[DataModelFields.OPERATION_NAME] = field_definition.name
    data_model[DataModelFields.RETURN_TYPE_NAME] = get_java_type(
        context, field_definition.type, field_definition.name, definition.name
    )
    return data_model


def map_projection_field(
    context: MappingContext, field_definition: ExtendedFieldDefinition, parent_type_name: str
) -> ProjectionParameterDefinition:
    """
    A selectable field; fields of object, interface or union type point to the nested projection.

    Parametrized inputs only exist for object types, so fields of an interface projection
    never take one.
    """
    type_name = nested_type_name(field_definition.type)
    projection_type = None
    if type_name is not None and type_name in context.projected_type_names:
        projection_type = get_response_projection_class_name(context, type_name)

    parametrized_input = None
    if field_definition.arguments and not context.is_interface(parent_type_name):
        parametrized_input = get_parametrized_input_class_name(context, field_definition.name, parent_type_name)

    return ProjectionParameterDefinition(
        name=field_definition.name,
        method_name=capitalize_if_restricted(field_definition.name),
        type=projection_type,
        parametrized_input_class_name=parametrized_input,
        deprecated=is_deprecated(field_definition.node),
    )


def map_response_projection(
    context: MappingContext, definition: ExtendedCompositeDefinition | ExtendedUnionTypeDefinition
) -> dict[str, Any]:
    """
    Map a type to its response projection, the builder selecting which fields a query returns.

    Union projections select `...on Member` fragments instead of fields. Every projection
    also selects `__typename`.
    """
    class_name = get_response_projection_class_name(context, definition.name)
    log.debug(f"Mapping response projection {class_name}")

    if isinstance(definition, ExtendedUnionTypeDefinition):
        fields = [
            ProjectionParameterDefinition(
                name=f"...on {member}",
                method_name=f"on{capitalize(member)}",
                type=get_response_projection_class_name(context, member),
            )
            for member in definition.member_type_names
        ]
    else:
        fields = [
            map_projection_field(context, f, definition.name) for f in get_all_field_definitions(context, definition)
        ]
    fields.append(TYPENAME_FIELD)

    data_model = base_data_model(context, get_model_package_name(context), class_name, definition.java_doc)
    data_model[DataModelFields.FIELDS] = fields
    data_model[DataModelFields.RESPONSE_PROJECTION_MAX_DEPTH] = context.response_projection_max_depth
    data_model[DataModelFields.EQUALS_AND_HASH_CODE] = context.generate_equals_and_hash_code
    return data_model


def map_parametrized_input(
    context: MappingContext, field_definition: ExtendedFieldDefinition, definition: ExtendedCompositeDefinition
) -> dict[str, Any]:
    """Arguments of a non-root field, passed along with the field selection of a projection."""
    class_name = get_parametrized_input_class_name(context, field_definition.name, definition.name)
    log.debug(f"Mapping parametrized input {class_name}")

    data_model = base_data_model(context, get_model_package_name(context), class_name, field_definition.java_doc)
    data_model[DataModelFields.FIELDS] = map_input_values(context, field_definition.arguments, field_definition.name)
    data_model.update(model_class_flags(context))
    return data_model
