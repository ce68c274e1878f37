import time
from pathlib import Path

from gqlcodegen import log
from gqlcodegen.mappers.enum_definition import map_enum_definition
from gqlcodegen.mappers.input_definition import map_input_definition
from gqlcodegen.mappers.interface_definition import map_interface_definition
from gqlcodegen.mappers.parameters import get_all_field_definitions
from gqlcodegen.mappers.request_response import (
    map_parametrized_input,
    map_request,
    map_response,
    map_response_projection,
)
from gqlcodegen.mappers.resolvers import (
    map_field_resolvers,
    map_root_type_field_to_operation_api,
    map_root_type_to_api,
)
from gqlcodegen.mappers.type_definition import map_type_definition
from gqlcodegen.mappers.union_definition import map_union_definition
from gqlcodegen.model.config import (
    ApiNamePrefixStrategy,
    ApiRootInterfaceStrategy,
    MappingConfig,
    prepare_mapping_config,
    with_scalar_mappings,
)
from gqlcodegen.model.context import MappingContext
from gqlcodegen.model.data_model import ArtifactKind, GeneratedArtifact, GeneratedInformation
from gqlcodegen.model.definitions import (
    ExtendedCompositeDefinition,
    ExtendedDocument,
    ExtendedObjectTypeDefinition,
    build_extended_document,
)
from gqlcodegen.renderer import ArtifactRenderer, prepare_output_dir
from gqlcodegen.utils.graphql_type import is_builtin_scalar_type
from gqlcodegen.utils.schema_loader import load_documents


class GraphQLCodegen:
    """
    Generates Java sources from GraphQL schema files.

    The configuration is combined with the optional external one, completed with defaults,
    validated and sanitized when the generator is created, so that an inconsistent
    configuration fails before any schema is read.

    Raises:
        ConfigurationConflictError: If the combined configuration is inconsistent.
    """

    def __init__(
        self,
        schemas: list[Path],
        output_dir: Path,
        mapping_config: MappingConfig,
        external_config: MappingConfig | None = None,
        generated_information: GeneratedInformation | None = None,
        clean_output_dir: bool = False,
    ) -> None:
        self.schemas = schemas
        self.output_dir = output_dir
        self.mapping_config = prepare_mapping_config(mapping_config, external_config)
        self.generated_information = generated_information or GeneratedInformation()
        self.clean_output_dir = clean_output_dir
        self.renderer = ArtifactRenderer()

    def create_context(self, document: ExtendedDocument) -> MappingContext:
        custom_scalars = [d.name for d in document.scalar_definitions if not is_builtin_scalar_type(d.name)]
        config = with_scalar_mappings(self.mapping_config, custom_scalars)
        return MappingContext(config, document, self.generated_information)

    def map_definitions(self, document: ExtendedDocument) -> list[GeneratedArtifact]:
        """Map every definition of the document to the artifacts to generate, in generation order."""
        return map_document(self.create_context(document))

    def generate(self) -> list[Path]:
        """
        Load the schemas, map them and write one Java file per artifact.

        Nothing is written when mapping fails.

        Returns:
            list[Path]: Written files
        """
        start = time.perf_counter()

        document = build_extended_document(load_documents(self.schemas))
        artifacts = self.map_definitions(document)
        log.info(f"Mapped {len(document.definitions)} definitions to {len(artifacts)} artifacts")

        prepare_output_dir(self.output_dir, clean=self.clean_output_dir)
        paths = self.renderer.write_artifacts(artifacts, self.output_dir)

        log.info(f"Generated {len(paths)} files in {time.perf_counter() - start:.2f}s")
        return paths


def map_document(context: MappingContext) -> list[GeneratedArtifact]:
    """
    Walk the document once and collect the artifacts of every definition.

    Order: object types, their field resolvers, root operation types, inputs, enums, unions,
    interfaces and finally the field resolvers of interfaces.
    """
    document = context.document
    artifacts: list[GeneratedArtifact] = []

    object_definitions = document.type_definitions
    if context.generate_models_for_root_types:
        object_definitions = document.object_definitions

    for object_definition in object_definitions:
        artifacts.append(GeneratedArtifact(ArtifactKind.TYPE, map_type_definition(context, object_definition)))
        if context.generate_client:
            artifacts.extend(map_client_projection_artifacts(context, object_definition))

    for object_definition in object_definitions:
        artifacts.extend(map_field_resolver_artifacts(context, object_definition))

    for operation_definition in document.operation_definitions:
        if context.generate_apis:
            artifacts.extend(map_server_operation_artifacts(context, operation_definition))
        if context.generate_client:
            artifacts.extend(map_client_operation_artifacts(context, operation_definition))

    for input_definition in document.input_definitions:
        artifacts.append(GeneratedArtifact(ArtifactKind.INPUT, map_input_definition(context, input_definition)))

    for enum_definition in document.enum_definitions:
        artifacts.append(GeneratedArtifact(ArtifactKind.ENUM, map_enum_definition(context, enum_definition)))

    for union_definition in document.union_definitions:
        artifacts.append(GeneratedArtifact(ArtifactKind.UNION, map_union_definition(context, union_definition)))
        if context.generate_client:
            artifacts.append(
                GeneratedArtifact(ArtifactKind.RESPONSE_PROJECTION, map_response_projection(context, union_definition))
            )

    for interface_definition in document.interface_definitions:
        artifacts.append(
            GeneratedArtifact(ArtifactKind.INTERFACE, map_interface_definition(context, interface_definition))
        )
        if context.generate_client:
            artifacts.extend(map_client_projection_artifacts(context, interface_definition))

    for interface_definition in document.interface_definitions:
        artifacts.extend(map_field_resolver_artifacts(context, interface_definition))

    return artifacts


def map_client_projection_artifacts(
    context: MappingContext, definition: ExtendedCompositeDefinition
) -> list[GeneratedArtifact]:
    """Response projection of an object or interface; object types also get their parametrized inputs."""
    artifacts = [GeneratedArtifact(ArtifactKind.RESPONSE_PROJECTION, map_response_projection(context, definition))]
    if isinstance(definition, ExtendedObjectTypeDefinition):
        artifacts.extend(
            GeneratedArtifact(ArtifactKind.PARAMETRIZED_INPUT, map_parametrized_input(context, f, definition))
            for f in get_all_field_definitions(context, definition)
            if f.arguments
        )
    return artifacts


def map_field_resolver_artifacts(
    context: MappingContext, definition: ExtendedCompositeDefinition
) -> list[GeneratedArtifact]:
    data_model = map_field_resolvers(context, definition)
    if data_model is None:
        return []
    return [GeneratedArtifact(ArtifactKind.OPERATIONS, data_model)]


def map_server_operation_artifacts(
    context: MappingContext, definition: ExtendedObjectTypeDefinition
) -> list[GeneratedArtifact]:
    """
    Root API interface(s) of a root type, then one API interface per operation.

    With INTERFACE_PER_SCHEMA there is one root API per schema file declaring (or extending)
    the root type, or one per folder with the folder prefix strategy, since files sharing a
    folder would get the same name. With a file or folder prefix strategy the per-operation
    APIs are named after the file or folder declaring the operation.
    """
    if context.api_root_interface_strategy == ApiRootInterfaceStrategy.INTERFACE_PER_SCHEMA:
        if context.api_name_prefix_strategy == ApiNamePrefixStrategy.FOLDER_NAME_AS_PREFIX:
            root_definitions = list(definition.group_by_source_folder().values())
        else:
            root_definitions = list(definition.group_by_source_file().values())
    else:
        root_definitions = [definition]
    artifacts = [
        GeneratedArtifact(ArtifactKind.OPERATIONS, map_root_type_to_api(context, root_definition))
        for root_definition in root_definitions
    ]

    if context.api_name_prefix_strategy == ApiNamePrefixStrategy.FILE_NAME_AS_PREFIX:
        groups = list(definition.group_by_source_file().values())
    elif context.api_name_prefix_strategy == ApiNamePrefixStrategy.FOLDER_NAME_AS_PREFIX:
        groups = list(definition.group_by_source_folder().values())
    else:
        groups = [definition]
    for group in groups:
        artifacts.extend(
            GeneratedArtifact(ArtifactKind.OPERATIONS, map_root_type_field_to_operation_api(context, f, group))
            for f in group.field_definitions
        )
    return artifacts


def map_client_operation_artifacts(
    context: MappingContext, definition: ExtendedObjectTypeDefinition
) -> list[GeneratedArtifact]:
    artifacts = []
    for field_definition in definition.field_definitions:
        artifacts.append(GeneratedArtifact(ArtifactKind.REQUEST, map_request(context, field_definition, definition)))
        artifacts.append(GeneratedArtifact(ArtifactKind.RESPONSE, map_response(context, field_definition, definition)))
    return artifacts
