from typing import Any

from gqlcodegen import log
from gqlcodegen.mappers.common import definition_data_model
from gqlcodegen.mappers.naming import get_model_class_name, get_model_package_name
from gqlcodegen.model.context import MappingContext
from gqlcodegen.model.definitions import ExtendedUnionTypeDefinition


def map_union_definition(context: MappingContext, definition: ExtendedUnionTypeDefinition) -> dict[str, Any]:
    """A union becomes a marker interface; member types list it in their `implements`."""
    class_name = get_model_class_name(context, definition.name)
    log.debug(f"Mapping union {definition.name} to {class_name}")
    return definition_data_model(context, definition, get_model_package_name(context), class_name)
