import re
from typing import Any

from graphql import DirectiveNode, ListTypeNode, NamedTypeNode, NonNullTypeNode, TypeNode, ValueNode

from gqlcodegen import log
from gqlcodegen.mappers.overrides import lookup_override
from gqlcodegen.mappers.type_mapper import UnresolvedTypeShapeError
from gqlcodegen.mappers.values import FORMATTERS, map_literal
from gqlcodegen.model.context import MappingContext
from gqlcodegen.model.definitions import ExtendedDefinition
from gqlcodegen.utils.directive import get_directive_arguments, get_directives

PLACEHOLDER_PATTERN = re.compile(r"\{\{(?P<name>[_A-Za-z][_0-9A-Za-z]*)(?P<formatter>\?[A-Za-z]+)?\}\}")


def render_annotation_template(template: str, arguments: dict[str, ValueNode]) -> str:
    """
    Substitute directive arguments into an annotation template.

    A placeholder is `{{name}}` or `{{name?formatter}}`. With `@Size(min={{min}}, max={{max}})`
    and `@size(min: 3)` the result is `@Size(min=3, max={{max}})`: placeholders without a
    matching argument are kept as written.

    Args:
        template: Annotation template registered for the directive
        arguments: Directive arguments keyed by name

    Returns:
        str: The rendered annotation
    """

    def substitute(match: re.Match[str]) -> str:
        name = match.group("name")
        if name not in arguments:
            return match.group(0)
        formatter = match.group("formatter")
        if formatter is not None and formatter not in FORMATTERS:
            log.warning(f"Unknown formatter '{formatter}' in annotation template '{template}'")
        return map_literal(arguments[name], formatter)

    return PLACEHOLDER_PATTERN.sub(substitute, template)


def get_directive_annotations(context: MappingContext, directives: list[DirectiveNode]) -> list[str]:
    """One rendered annotation per directive that has a registered template, in directive order."""
    annotations = []
    for directive in directives:
        template = context.directive_annotations_mapping.get(directive.name.value)
        if template is not None:
            annotations.append(render_annotation_template(template, get_directive_arguments(directive)))
    return annotations


def get_named_annotations(
    context: MappingContext,
    type_name: str,
    name: str | None,
    parent_type_name: str | None,
    directives: list[DirectiveNode],
    mandatory: bool = False,
) -> list[str]:
    annotations = []
    if mandatory and context.model_validation_annotation and context.model_validation_annotation.strip():
        annotations.append(context.model_validation_annotation)

    custom_annotation = lookup_override(context.custom_annotations_mapping, type_name, name, parent_type_name)
    if custom_annotation is not None:
        annotations.append(custom_annotation)

    annotations.extend(get_directive_annotations(context, directives))
    return annotations


def get_annotations(
    context: MappingContext,
    type_ref: TypeNode,
    node: Any,
    parent_type_name: str | None = None,
    mandatory: bool = False,
) -> list[str]:
    """
    Annotations of a field, argument or input value.

    In order: the validation annotation when the reference is non-null, at most one custom
    annotation (`Parent.field` key first, then the type name), and one annotation per mapped
    directive on the node. Nothing is de-duplicated.

    Args:
        context: Global mapping context
        type_ref: Type reference of the node
        node: The field, argument or input value definition node
        parent_type_name: Name of the type (or field) declaring the node
        mandatory: Whether an enclosing reference was non-null

    Returns:
        list[str]: Annotations without the leading `@`

    Raises:
        UnresolvedTypeShapeError: If the reference is of an unknown kind.
    """
    if isinstance(type_ref, ListTypeNode):
        return get_annotations(context, type_ref.type, node, parent_type_name, mandatory)
    if isinstance(type_ref, NonNullTypeNode):
        return get_annotations(context, type_ref.type, node, parent_type_name, True)
    if isinstance(type_ref, NamedTypeNode):
        return get_named_annotations(
            context, type_ref.name.value, node.name.value, parent_type_name, get_directives(node), mandatory
        )
    raise UnresolvedTypeShapeError(f"Unknown type reference: {type_ref!r}")


def get_definition_annotations(context: MappingContext, definition: ExtendedDefinition) -> list[str]:
    """Annotations of a generated class: the custom annotation of its type name and its mapped directives."""
    return get_named_annotations(context, definition.name, None, None, definition.directives)
