from typing import Any

from graphql import OperationType

from gqlcodegen.model.config import MappingConfig
from gqlcodegen.model.data_model import GeneratedInformation
from gqlcodegen.model.definitions import ExtendedDocument


class MappingContext:
    """
    Read-only view binding one prepared MappingConfig to one ExtendedDocument.

    Every configuration option can be read as an attribute of the context
    (`context.generate_builder`, `context.custom_types_mapping`, ...). Sets of type names
    needed while mapping are computed once here.
    """

    def __init__(
        self,
        config: MappingConfig,
        document: ExtendedDocument,
        generated_information: GeneratedInformation | None = None,
    ) -> None:
        self._config = config
        self._document = document
        self._generated_information = generated_information or GeneratedInformation()
        self._interface_names = frozenset(d.name for d in document.interface_definitions)
        self._enum_names = frozenset(d.name for d in document.enum_definitions)
        object_definitions = document.object_definitions if config.generate_models_for_root_types else []
        self._projected_type_names = frozenset(
            d.name
            for d in object_definitions
            + document.type_definitions
            + document.interface_definitions
            + document.union_definitions
        )

    def __getattr__(self, name: str) -> Any:
        # only reached for attributes the context itself does not define
        if name.startswith("_") or name not in MappingConfig.model_fields:
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
        return getattr(self._config, name)

    @property
    def config(self) -> MappingConfig:
        return self._config

    @property
    def document(self) -> ExtendedDocument:
        return self._document

    @property
    def generated_information(self) -> GeneratedInformation:
        return self._generated_information

    @property
    def interface_names(self) -> frozenset[str]:
        return self._interface_names

    @property
    def enum_names(self) -> frozenset[str]:
        return self._enum_names

    @property
    def projected_type_names(self) -> frozenset[str]:
        """Types that get a response projection when client generation is enabled."""
        return self._projected_type_names

    def is_interface(self, type_name: str | None) -> bool:
        return type_name in self._interface_names

    def operation_kind(self, type_name: str | None) -> OperationType | None:
        """Root operation kind of `type_name`, or None for a regular type."""
        if type_name is None:
            return None
        return self._document.root_operation_types.get(type_name)
