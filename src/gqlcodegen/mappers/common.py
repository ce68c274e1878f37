from typing import Any

from gqlcodegen.mappers.annotations import get_definition_annotations
from gqlcodegen.mappers.naming import get_imports
from gqlcodegen.model.context import MappingContext
from gqlcodegen.model.data_model import DataModelFields
from gqlcodegen.model.definitions import ExtendedDefinition


def base_data_model(
    context: MappingContext, package: str | None, class_name: str, java_doc: list[str]
) -> dict[str, Any]:
    """Keys shared by every data model: package, imports, class name, doc and generator information."""
    return {
        DataModelFields.PACKAGE: package,
        DataModelFields.IMPORTS: get_imports(context, package),
        DataModelFields.CLASS_NAME: class_name,
        DataModelFields.JAVA_DOC: java_doc,
        DataModelFields.GENERATED_INFO: context.generated_information,
    }


def model_class_flags(context: MappingContext) -> dict[str, Any]:
    return {
        DataModelFields.BUILDER: context.generate_builder,
        DataModelFields.EQUALS_AND_HASH_CODE: context.generate_equals_and_hash_code,
        DataModelFields.IMMUTABLE_MODELS: context.generate_immutable_models,
        DataModelFields.TO_STRING: context.generate_to_string,
        DataModelFields.TO_STRING_FOR_REQUEST: context.generate_client,
    }


def definition_data_model(
    context: MappingContext, definition: ExtendedDefinition, package: str | None, class_name: str
) -> dict[str, Any]:
    data_model = base_data_model(context, package, class_name, definition.java_doc)
    data_model[DataModelFields.ANNOTATIONS] = get_definition_annotations(context, definition)
    return data_model
