from collections.abc import Sequence
from typing import Any

from graphql import DirectiveNode, ValueNode

DEPRECATED_DIRECTIVE = "deprecated"


def get_directives(node: Any) -> list[DirectiveNode]:
    """Return the directives attached to an AST node, or an empty list when the node carries none."""
    return list(getattr(node, "directives", None) or [])


def has_given_directive(node: Any, directive_name: str) -> bool:
    """Check whether an AST node (field, type definition, enum value) has a particular directive."""
    return any(directive.name.value == directive_name for directive in get_directives(node))


def get_directive_arguments(directive: DirectiveNode) -> dict[str, ValueNode]:
    """
    Collect the arguments of a directive, keyed by argument name.

    Values are kept as graphql-core value nodes so that callers can decide how to render
    them (quoted, as arrays, as enum constants, ...).

    Args:
        directive: The directive node.
    Returns:
        dict[str, ValueNode]: Argument values in declaration order.
    """
    return {argument.name.value: argument.value for argument in directive.arguments or []}


def is_deprecated(node: Any) -> bool:
    return has_given_directive(node, DEPRECATED_DIRECTIVE)


def collect_directives(nodes: Sequence[Any]) -> list[DirectiveNode]:
    """Directives of several nodes (a definition and its extensions), in node order."""
    directives: list[DirectiveNode] = []
    for node in nodes:
        directives.extend(get_directives(node))
    return directives
