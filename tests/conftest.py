from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from ariadne import gql
from graphql import ListTypeNode, NamedTypeNode, NameNode, NonNullTypeNode, TypeNode
from hypothesis import strategies as st
from hypothesis.strategies import composite

from gqlcodegen.model.config import MappingConfig, prepare_mapping_config, with_scalar_mappings
from gqlcodegen.model.context import MappingContext
from gqlcodegen.model.data_model import GeneratedInformation
from gqlcodegen.model.definitions import ExtendedDocument, build_extended_document
from gqlcodegen.utils.graphql_type import is_builtin_scalar_type
from gqlcodegen.utils.schema_loader import parse_document

SCALAR_TYPES = ["ID", "String", "Int", "Float", "Boolean"]
VALIDATION_ANNOTATION = "javax.validation.constraints.NotNull"
GENERATED_INFO = GeneratedInformation(date_time="2024-01-01T00:00:00+00:00")

SchemaSource = str | tuple[str, str]


class TestSchemaData:
    TESTS_DATA_DIR: Path = Path(__file__).parent / "data"
    EVENTS_SCHEMA: Path = TESTS_DATA_DIR / "events.graphql"
    SPLIT_SCHEMA_DIR: Path = TESTS_DATA_DIR / "split"
    CATALOG_SCHEMA: Path = SPLIT_SCHEMA_DIR / "catalog" / "catalog.graphql"
    ACCOUNTS_SCHEMA: Path = SPLIT_SCHEMA_DIR / "accounts" / "accounts.graphql"
    CONFIG: Path = TESTS_DATA_DIR / "config.yaml"
    CONFLICTING_CONFIG: Path = TESTS_DATA_DIR / "conflicting-config.yaml"


def make_document(*schemas: SchemaSource) -> ExtendedDocument:
    """
    Build an ExtendedDocument from SDL strings.

    Each schema is either an SDL string or a `(source name, SDL)` tuple; plain strings are
    named `schema<index>.graphql`.
    """
    documents = []
    for index, schema in enumerate(schemas):
        source_name, sdl = schema if isinstance(schema, tuple) else (f"schema{index}.graphql", schema)
        documents.append(parse_document(gql(sdl), source_name))
    return build_extended_document(documents)


def make_context(*schemas: SchemaSource, **options: Any) -> MappingContext:
    """Prepared context for the given schemas, configured the way GraphQLCodegen configures it."""
    document = make_document(*schemas)
    config = prepare_mapping_config(MappingConfig(**options))
    custom_scalars = [d.name for d in document.scalar_definitions if not is_builtin_scalar_type(d.name)]
    return MappingContext(with_scalar_mappings(config, custom_scalars), document, GENERATED_INFO)


@pytest.fixture(scope="session")
def build_document() -> Callable[..., ExtendedDocument]:
    return make_document


@pytest.fixture(scope="session")
def build_context() -> Callable[..., MappingContext]:
    return make_context


def named(type_name: str) -> NamedTypeNode:
    return NamedTypeNode(name=NameNode(value=type_name))


def list_of(type_ref: TypeNode) -> ListTypeNode:
    return ListTypeNode(type=type_ref)


def non_null(type_ref: TypeNode) -> NonNullTypeNode:
    return NonNullTypeNode(type=type_ref)


@composite
def type_ref_strategy(
    draw: Callable[[st.SearchStrategy[Any]], Any],
    type_names: st.SearchStrategy[str] = st.sampled_from(SCALAR_TYPES),
    allow_non_null: bool = True,
    max_list_depth: int = 3,
) -> TypeNode:
    """Named type wrapped in up to `max_list_depth` lists, each level optionally non-null."""
    type_ref: TypeNode = named(draw(type_names))
    for _ in range(draw(st.integers(min_value=0, max_value=max_list_depth))):
        if allow_non_null and draw(st.booleans()):
            type_ref = non_null(type_ref)
        type_ref = list_of(type_ref)
    return type_ref
