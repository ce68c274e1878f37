from typing import Any

from gqlcodegen import log
from gqlcodegen.mappers.common import definition_data_model
from gqlcodegen.mappers.naming import get_model_class_name, get_model_package_name
from gqlcodegen.mappers.parameters import map_fields
from gqlcodegen.model.context import MappingContext
from gqlcodegen.model.data_model import DataModelFields
from gqlcodegen.model.definitions import ExtendedInterfaceTypeDefinition


def map_interface_definition(context: MappingContext, definition: ExtendedInterfaceTypeDefinition) -> dict[str, Any]:
    """
    Map an interface type to the data model of a Java interface.

    List fields whose element type is an interface are mapped to upper bounded lists, so
    `friends: [Character]` declared on `interface Character` becomes
    `java.util.List<? extends Character>`.
    """
    class_name = get_model_class_name(context, definition.name)
    log.debug(f"Mapping interface {definition.name} to {class_name}")

    data_model = definition_data_model(context, definition, get_model_package_name(context), class_name)
    data_model[DataModelFields.IMPLEMENTS] = [get_model_class_name(context, name) for name in definition.implements]
    data_model[DataModelFields.FIELDS] = map_fields(context, definition)
    return data_model
