from typing import Any

from gqlcodegen import log
from gqlcodegen.mappers.common import definition_data_model, model_class_flags
from gqlcodegen.mappers.naming import get_model_class_name, get_model_package_name
from gqlcodegen.mappers.parameters import map_fields
from gqlcodegen.model.context import MappingContext
from gqlcodegen.model.data_model import DataModelFields
from gqlcodegen.model.definitions import ExtendedObjectTypeDefinition


def get_implements(context: MappingContext, definition: ExtendedObjectTypeDefinition) -> list[str]:
    """Model names of the unions containing the type, then of the interfaces it implements."""
    implements = [
        get_model_class_name(context, union.name)
        for union in context.document.union_definitions
        if definition.name in union.member_type_names
    ]
    implements.extend(get_model_class_name(context, name) for name in definition.implements)
    return list(dict.fromkeys(implements))


def map_type_definition(context: MappingContext, definition: ExtendedObjectTypeDefinition) -> dict[str, Any]:
    """
    Map an object type (with its extensions) to the data model of a model class.

    Args:
        context: Global mapping context
        definition: Object type definition

    Returns:
        dict[str, Any]: Data model of the class
    """
    class_name = get_model_class_name(context, definition.name)
    log.debug(f"Mapping type {definition.name} to {class_name}")

    data_model = definition_data_model(context, definition, get_model_package_name(context), class_name)
    data_model[DataModelFields.IMPLEMENTS] = get_implements(context, definition)
    data_model[DataModelFields.FIELDS] = map_fields(context, definition)
    data_model.update(model_class_flags(context))
    return data_model
