from typing import Any

from gqlcodegen import log
from gqlcodegen.mappers.common import definition_data_model, model_class_flags
from gqlcodegen.mappers.naming import get_model_class_name, get_model_package_name
from gqlcodegen.mappers.parameters import map_input_values
from gqlcodegen.model.context import MappingContext
from gqlcodegen.model.data_model import DataModelFields
from gqlcodegen.model.definitions import ExtendedInputObjectTypeDefinition


def map_input_definition(context: MappingContext, definition: ExtendedInputObjectTypeDefinition) -> dict[str, Any]:
    """Input object type to model class; default values of input fields become field initializers."""
    class_name = get_model_class_name(context, definition.name)
    log.debug(f"Mapping input {definition.name} to {class_name}")

    data_model = definition_data_model(context, definition, get_model_package_name(context), class_name)
    data_model[DataModelFields.IMPLEMENTS] = []
    data_model[DataModelFields.FIELDS] = map_input_values(context, definition.input_value_definitions, definition.name)
    data_model.update(model_class_flags(context))
    return data_model
