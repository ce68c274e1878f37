"""API interfaces: root operation APIs, per-operation APIs and type resolvers."""

from typing import Any

from gqlcodegen import log
from gqlcodegen.mappers.annotations import get_annotations
from gqlcodegen.mappers.async_wrapper import wrap_if_async
from gqlcodegen.mappers.common import base_data_model
from gqlcodegen.mappers.naming import (
    capitalize_if_restricted,
    get_api_class_name,
    get_api_package_name,
    get_operation_api_class_name,
    get_type_resolver_class_name,
)
from gqlcodegen.mappers.parameters import (
    DATA_FETCHING_ENVIRONMENT_PARAMETER,
    get_fields_with_resolvers,
    get_parent_object_parameter,
    map_input_values,
)
from gqlcodegen.mappers.type_mapper import get_java_type
from gqlcodegen.model.context import MappingContext
from gqlcodegen.model.data_model import DataModelFields, OperationDefinition, ParameterDefinition
from gqlcodegen.model.definitions import ExtendedCompositeDefinition, ExtendedFieldDefinition
from gqlcodegen.utils.directive import is_deprecated


def map_operation(
    context: MappingContext,
    field_definition: ExtendedFieldDefinition,
    parent_type_name: str,
    type_resolver: bool = False,
) -> OperationDefinition:
    """
    Map a field to an API method.

    Args:
        context: Global mapping context
        field_definition: The field served by the method
        parent_type_name: Name of the type declaring the field
        type_resolver: Whether the method belongs to a type resolver, in which case the parent
            object is passed as first parameter

    Returns:
        OperationDefinition: The method
    """
    java_type = get_java_type(context, field_definition.type, field_definition.name, parent_type_name)

    parameters: list[ParameterDefinition] = []
    if type_resolver:
        parameters.append(get_parent_object_parameter(context, parent_type_name))
    parameters.extend(map_input_values(context, field_definition.arguments, field_definition.name))
    if context.generate_data_fetching_environment_argument_in_apis:
        parameters.append(DATA_FETCHING_ENVIRONMENT_PARAMETER)

    return OperationDefinition(
        name=capitalize_if_restricted(field_definition.name),
        original_name=field_definition.name,
        type=wrap_if_async(context, java_type, context.operation_kind(parent_type_name)),
        annotations=get_annotations(context, field_definition.type, field_definition.node, parent_type_name),
        parameters=parameters,
        java_doc=field_definition.java_doc,
        deprecated=is_deprecated(field_definition.node),
    )


def map_root_type_to_api(context: MappingContext, definition: ExtendedCompositeDefinition) -> dict[str, Any]:
    """Single API interface with one method per field of a root type (or of one of its source files)."""
    class_name = get_api_class_name(context, definition)
    log.debug(f"Mapping root type {definition.name} to API {class_name}")

    data_model = base_data_model(context, get_api_package_name(context), class_name, definition.java_doc)
    data_model[DataModelFields.OPERATIONS] = [
        map_operation(context, f, definition.name) for f in definition.field_definitions
    ]
    return data_model


def map_root_type_field_to_operation_api(
    context: MappingContext, field_definition: ExtendedFieldDefinition, definition: ExtendedCompositeDefinition
) -> dict[str, Any]:
    """API interface serving a single operation, e.g. `EventsQueryResolver` for `Query.events`."""
    class_name = get_operation_api_class_name(context, field_definition.name, definition)
    log.debug(f"Mapping operation {definition.name}.{field_definition.name} to API {class_name}")

    data_model = base_data_model(context, get_api_package_name(context), class_name, field_definition.java_doc)
    data_model[DataModelFields.OPERATIONS] = [map_operation(context, field_definition, definition.name)]
    return data_model


def map_field_resolvers(context: MappingContext, definition: ExtendedCompositeDefinition) -> dict[str, Any] | None:
    """
    Type resolver interface for the fields of a type that are not plain model fields.

    Returns:
        The data model, or None when no field of the type needs a resolver.
    """
    field_definitions = get_fields_with_resolvers(context, definition)
    if not field_definitions:
        return None

    class_name = get_type_resolver_class_name(context, definition.name)
    log.debug(f"Mapping {len(field_definitions)} field resolvers of {definition.name} to {class_name}")

    data_model = base_data_model(context, get_api_package_name(context), class_name, [])
    data_model[DataModelFields.OPERATIONS] = [
        map_operation(context, f, definition.name, type_resolver=True) for f in field_definitions
    ]
    return data_model
