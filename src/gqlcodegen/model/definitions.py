"""Parsed schema definitions merged with their extensions.

A type may be declared once and extended any number of times, possibly in other schema
files. The classes below keep the definition node and its extension nodes together, and
remember for every node which file it came from.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from graphql import (
    DefinitionNode,
    DirectiveNode,
    DocumentNode,
    EnumTypeDefinitionNode,
    EnumTypeExtensionNode,
    EnumValueDefinitionNode,
    FieldDefinitionNode,
    InputObjectTypeDefinitionNode,
    InputObjectTypeExtensionNode,
    InputValueDefinitionNode,
    InterfaceTypeDefinitionNode,
    InterfaceTypeExtensionNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    OperationType,
    ScalarTypeDefinitionNode,
    ScalarTypeExtensionNode,
    SchemaDefinitionNode,
    SchemaExtensionNode,
    TypeExtensionNode,
    TypeNode,
    UnionTypeDefinitionNode,
    UnionTypeExtensionNode,
)

from gqlcodegen.utils.directive import collect_directives
from gqlcodegen.utils.graphql_type import DEFAULT_ROOT_TYPE_NAMES

UNKNOWN_SOURCE = "<unknown>"


def get_source_name(node: Any) -> str:
    """Name of the source (file path) an AST node was parsed from."""
    if node is not None and node.loc is not None:
        return str(node.loc.source.name)
    return UNKNOWN_SOURCE


def get_source_folder(node: Any) -> str:
    return Path(get_source_name(node)).parent.name


def description_lines(node: Any) -> list[str]:
    description = getattr(node, "description", None)
    if description is None or not description.value:
        return []
    return [line.strip() for line in description.value.strip().splitlines()]


@dataclass
class ExtendedFieldDefinition:
    node: FieldDefinitionNode
    from_extension: bool = False

    @property
    def name(self) -> str:
        return self.node.name.value

    @property
    def type(self) -> TypeNode:
        return self.node.type

    @property
    def arguments(self) -> list[InputValueDefinitionNode]:
        return list(self.node.arguments or [])

    @property
    def java_doc(self) -> list[str]:
        return description_lines(self.node)


@dataclass
class ExtendedDefinition:
    """A named definition together with its `extend` nodes."""

    definition: Any = None
    extensions: list[Any] = field(default_factory=list)

    def add(self, node: DefinitionNode) -> None:
        if isinstance(node, TypeExtensionNode):
            self.extensions.append(node)
        else:
            self.definition = node

    @property
    def nodes(self) -> list[Any]:
        nodes = [self.definition] if self.definition is not None else []
        return nodes + self.extensions

    @property
    def name(self) -> str:
        return str(self.nodes[0].name.value)

    @property
    def java_doc(self) -> list[str]:
        return description_lines(self.definition)

    @property
    def directives(self) -> list[DirectiveNode]:
        return collect_directives(self.nodes)

    def group_by_source_file(self) -> dict[str, "ExtendedDefinition"]:
        return self._group_by(get_source_name)

    def group_by_source_folder(self) -> dict[str, "ExtendedDefinition"]:
        return self._group_by(get_source_folder)

    def _group_by(self, key: Callable[[Any], str]) -> dict[str, "ExtendedDefinition"]:
        groups: dict[str, ExtendedDefinition] = {}
        for node in self.nodes:
            group = groups.setdefault(key(node), type(self)())
            group.add(node)
        return groups


@dataclass
class ExtendedCompositeDefinition(ExtendedDefinition):
    """Object or interface type: something with output fields and implemented interfaces."""

    @property
    def field_definitions(self) -> list[ExtendedFieldDefinition]:
        field_definitions = []
        for node in self.nodes:
            from_extension = isinstance(node, TypeExtensionNode)
            field_definitions.extend(ExtendedFieldDefinition(f, from_extension) for f in node.fields or [])
        return field_definitions

    @property
    def implements(self) -> list[str]:
        names: list[str] = []
        for node in self.nodes:
            names.extend(interface.name.value for interface in node.interfaces or [])
        return list(dict.fromkeys(names))


@dataclass
class ExtendedObjectTypeDefinition(ExtendedCompositeDefinition):
    pass


@dataclass
class ExtendedInterfaceTypeDefinition(ExtendedCompositeDefinition):
    pass


@dataclass
class ExtendedInputObjectTypeDefinition(ExtendedDefinition):
    @property
    def input_value_definitions(self) -> list[InputValueDefinitionNode]:
        return [value for node in self.nodes for value in node.fields or []]


@dataclass
class ExtendedEnumTypeDefinition(ExtendedDefinition):
    @property
    def value_definitions(self) -> list[EnumValueDefinitionNode]:
        return [value for node in self.nodes for value in node.values or []]


@dataclass
class ExtendedUnionTypeDefinition(ExtendedDefinition):
    @property
    def member_type_names(self) -> list[str]:
        names = [member.name.value for node in self.nodes for member in node.types or []]
        return list(dict.fromkeys(names))


@dataclass
class ExtendedScalarTypeDefinition(ExtendedDefinition):
    pass


DEFINITION_CLASSES: dict[type, type[ExtendedDefinition]] = {
    ObjectTypeDefinitionNode: ExtendedObjectTypeDefinition,
    ObjectTypeExtensionNode: ExtendedObjectTypeDefinition,
    InterfaceTypeDefinitionNode: ExtendedInterfaceTypeDefinition,
    InterfaceTypeExtensionNode: ExtendedInterfaceTypeDefinition,
    InputObjectTypeDefinitionNode: ExtendedInputObjectTypeDefinition,
    InputObjectTypeExtensionNode: ExtendedInputObjectTypeDefinition,
    EnumTypeDefinitionNode: ExtendedEnumTypeDefinition,
    EnumTypeExtensionNode: ExtendedEnumTypeDefinition,
    UnionTypeDefinitionNode: ExtendedUnionTypeDefinition,
    UnionTypeExtensionNode: ExtendedUnionTypeDefinition,
    ScalarTypeDefinitionNode: ExtendedScalarTypeDefinition,
    ScalarTypeExtensionNode: ExtendedScalarTypeDefinition,
}


@dataclass
class ExtendedDocument:
    """All definitions of a schema, possibly spread over several parsed documents."""

    definitions: dict[str, ExtendedDefinition] = field(default_factory=dict)
    root_operation_types: dict[str, OperationType] = field(default_factory=dict)

    def _of_kind(self, kind: type[ExtendedDefinition]) -> list[Any]:
        return [definition for definition in self.definitions.values() if type(definition) is kind]

    @property
    def object_definitions(self) -> list[ExtendedObjectTypeDefinition]:
        return self._of_kind(ExtendedObjectTypeDefinition)

    @property
    def type_definitions(self) -> list[ExtendedObjectTypeDefinition]:
        """Object types that are not root operation types."""
        return [d for d in self.object_definitions if d.name not in self.root_operation_types]

    @property
    def operation_definitions(self) -> list[ExtendedObjectTypeDefinition]:
        return [d for d in self.object_definitions if d.name in self.root_operation_types]

    @property
    def interface_definitions(self) -> list[ExtendedInterfaceTypeDefinition]:
        return self._of_kind(ExtendedInterfaceTypeDefinition)

    @property
    def input_definitions(self) -> list[ExtendedInputObjectTypeDefinition]:
        return self._of_kind(ExtendedInputObjectTypeDefinition)

    @property
    def enum_definitions(self) -> list[ExtendedEnumTypeDefinition]:
        return self._of_kind(ExtendedEnumTypeDefinition)

    @property
    def union_definitions(self) -> list[ExtendedUnionTypeDefinition]:
        return self._of_kind(ExtendedUnionTypeDefinition)

    @property
    def scalar_definitions(self) -> list[ExtendedScalarTypeDefinition]:
        return self._of_kind(ExtendedScalarTypeDefinition)

    def get_definition(self, name: str) -> ExtendedDefinition | None:
        return self.definitions.get(name)


def build_extended_document(documents: Iterable[DocumentNode]) -> ExtendedDocument:
    """
    Merge parsed documents into a single ExtendedDocument.

    Definitions keep the order in which their first node appears. Root operation types come
    from a `schema { ... }` definition when there is one, otherwise from the conventional
    Query/Mutation/Subscription names.

    Args:
        documents: Parsed schema documents, typically one per file

    Returns:
        ExtendedDocument: The merged definitions
    """
    extended = ExtendedDocument()
    schema_operation_types: dict[str, OperationType] = {}

    for document in documents:
        for node in document.definitions:
            if isinstance(node, SchemaDefinitionNode | SchemaExtensionNode):
                for operation_type in node.operation_types or []:
                    schema_operation_types[operation_type.type.name.value] = operation_type.operation
                continue

            definition_class = DEFINITION_CLASSES.get(type(node))
            if definition_class is None:
                # directive definitions carry nothing to generate
                continue

            name = node.name.value  # type: ignore[attr-defined]
            extended.definitions.setdefault(name, definition_class()).add(node)

    if schema_operation_types:
        extended.root_operation_types = schema_operation_types
    else:
        extended.root_operation_types = {
            name: operation
            for name, operation in DEFAULT_ROOT_TYPE_NAMES.items()
            if isinstance(extended.definitions.get(name), ExtendedObjectTypeDefinition)
        }

    return extended
