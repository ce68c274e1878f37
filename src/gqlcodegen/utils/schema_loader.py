from pathlib import Path

from ariadne import load_schema_from_path
from graphql import DocumentNode, Source, parse

from gqlcodegen import log

GRAPHQL_FILE_PATTERN = "*.graphql"


def resolve_graphql_files(paths: list[Path]) -> list[Path]:
    """Resolve a list of paths (files and directories) into a flat list of unique GraphQL files.

    Args:
        paths: List of file or directory paths

    Returns:
        Flat list of unique GraphQL file paths (deduplicated and sorted)
    """
    resolved_files: set[Path] = set()

    for path in paths:
        if path.is_file():
            resolved_files.add(path)
        elif path.is_dir():
            for file in path.rglob(GRAPHQL_FILE_PATTERN):
                resolved_files.add(file)

    return sorted(resolved_files)


def parse_document(content: str, source_name: str) -> DocumentNode:
    """Parse SDL content, keeping `source_name` as the location of every node it produces."""
    return parse(Source(content, source_name))


def load_documents(graphql_schema_paths: list[Path]) -> list[DocumentNode]:
    """
    Load every schema file as its own document.

    Files are kept apart (rather than concatenated) so that each definition still knows which
    file and folder it came from.

    Args:
        graphql_schema_paths: Schema files or directories containing `*.graphql` files

    Returns:
        list[DocumentNode]: One parsed document per file, in path order
    """
    documents = []
    for graphql_file in resolve_graphql_files(graphql_schema_paths):
        content = load_schema_from_path(graphql_file)
        documents.append(parse_document(content, str(graphql_file)))
        log.debug(f"Parsed schema file {graphql_file}")

    log.info(f"Loaded {len(documents)} schema file(s)")
    return documents
