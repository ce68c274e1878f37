from typing import Any

from graphql import EnumValueDefinitionNode

from gqlcodegen import log
from gqlcodegen.mappers.common import definition_data_model
from gqlcodegen.mappers.naming import capitalize_if_restricted, get_model_class_name, get_model_package_name
from gqlcodegen.model.context import MappingContext
from gqlcodegen.model.data_model import DataModelFields, EnumValueDefinition
from gqlcodegen.model.definitions import ExtendedEnumTypeDefinition, description_lines
from gqlcodegen.utils.directive import is_deprecated


def map_enum_value_definition(value: EnumValueDefinitionNode) -> EnumValueDefinition:
    return EnumValueDefinition(
        java_name=capitalize_if_restricted(value.name.value),
        graphql_name=value.name.value,
        java_doc=description_lines(value),
        deprecated=is_deprecated(value),
    )


def map_enum_definition(context: MappingContext, definition: ExtendedEnumTypeDefinition) -> dict[str, Any]:
    class_name = get_model_class_name(context, definition.name)
    log.debug(f"Mapping enum {definition.name} to {class_name}")

    data_model = definition_data_model(context, definition, get_model_package_name(context), class_name)
    data_model[DataModelFields.IMPLEMENTS] = []
    data_model[DataModelFields.FIELDS] = [map_enum_value_definition(value) for value in definition.value_definitions]
    return data_model
