"""Render-ready structures handed from the mappers to the templates."""

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from gqlcodegen import __version__


class DataModelFields:
    """Keys of the data model dictionaries. Templates rely on these names."""

    PACKAGE = "package"
    IMPORTS = "imports"
    CLASS_NAME = "class_name"
    JAVA_DOC = "java_doc"
    ANNOTATIONS = "annotations"
    IMPLEMENTS = "implements"
    FIELDS = "fields"
    OPERATIONS = "operations"
    BUILDER = "builder"
    EQUALS_AND_HASH_CODE = "equals_and_hash_code"
    IMMUTABLE_MODELS = "immutable_models"
    TO_STRING = "to_string"
    TO_STRING_FOR_REQUEST = "to_string_for_request"
    OPERATION_NAME = "operation_name"
    OPERATION_TYPE = "operation_type"
    RETURN_TYPE_NAME = "return_type_name"
    RESPONSE_PROJECTION_MAX_DEPTH = "response_projection_max_depth"
    GENERATED_INFO = "generated_info"


class ArtifactKind(str, Enum):
    """Kind of generated artifact; the value names the template used to render it."""

    TYPE = "type"
    INPUT = "input"
    ENUM = "enum"
    UNION = "union"
    INTERFACE = "interface"
    OPERATIONS = "operations"
    REQUEST = "request"
    RESPONSE = "response"
    RESPONSE_PROJECTION = "response_projection"
    PARAMETRIZED_INPUT = "parametrized_input"


@dataclass(frozen=True)
class GeneratedArtifact:
    kind: ArtifactKind
    data_model: dict[str, Any]

    @property
    def class_name(self) -> str:
        return str(self.data_model[DataModelFields.CLASS_NAME])

    @property
    def package(self) -> str | None:
        return self.data_model.get(DataModelFields.PACKAGE)


@dataclass
class NamedDefinition:
    """Target type name of a schema type reference, and whether its innermost type is an interface."""

    java_name: str
    is_interface: bool = False


class GeneratedInformation(BaseModel):
    generator: str = "gqlcodegen"
    version: str = __version__
    date_time: str = Field(default_factory=lambda: datetime.now(UTC).isoformat(timespec="seconds"))


class ParameterDefinition(BaseModel):
    """A field of a generated class, or an argument of a generated method."""

    name: str
    original_name: str
    type: str
    default_value: str | None = None
    annotations: list[str] = Field(default_factory=list)
    java_doc: list[str] = Field(default_factory=list)
    deprecated: bool = False


class OperationDefinition(BaseModel):
    """A method of a generated API interface."""

    name: str
    original_name: str
    type: str
    annotations: list[str] = Field(default_factory=list)
    parameters: list[ParameterDefinition] = Field(default_factory=list)
    java_doc: list[str] = Field(default_factory=list)
    deprecated: bool = False


class EnumValueDefinition(BaseModel):
    java_name: str
    graphql_name: str
    java_doc: list[str] = Field(default_factory=list)
    deprecated: bool = False


class ProjectionParameterDefinition(BaseModel):
    """A selectable field of a response projection."""

    name: str
    method_name: str
    type: str | None = None
    parametrized_input_class_name: str | None = None
    deprecated: bool = False
