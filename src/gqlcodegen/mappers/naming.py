from pathlib import Path

from caseconverter import pascalcase

from gqlcodegen.model.config import ApiNamePrefixStrategy
from gqlcodegen.model.context import MappingContext
from gqlcodegen.model.definitions import ExtendedDefinition

JAVA_RESTRICTED_KEYWORDS = {
    "abstract",
    "assert",
    "boolean",
    "break",
    "byte",
    "case",
    "catch",
    "char",
    "class",
    "const",
    "continue",
    "default",
    "do",
    "double",
    "else",
    "enum",
    "extends",
    "false",
    "final",
    "finally",
    "float",
    "for",
    "goto",
    "if",
    "implements",
    "import",
    "instanceof",
    "int",
    "interface",
    "long",
    "native",
    "new",
    "null",
    "package",
    "private",
    "protected",
    "public",
    "return",
    "short",
    "static",
    "strictfp",
    "super",
    "switch",
    "synchronized",
    "this",
    "throw",
    "throws",
    "transient",
    "true",
    "try",
    "void",
    "volatile",
    "while",
}


def resolve_name(base_name: str, prefix: str | None = None, suffix: str | None = None) -> str:
    """Concatenate prefix, base name and suffix. No case transformation is applied."""
    return f"{prefix or ''}{base_name}{suffix or ''}"


def capitalize(name: str) -> str:
    return name[:1].upper() + name[1:]


def uncapitalize(name: str) -> str:
    return name[:1].lower() + name[1:]


def capitalize_if_restricted(name: str) -> str:
    """Java keywords cannot be used as identifiers, `class` becomes `Class`."""
    if name in JAVA_RESTRICTED_KEYWORDS:
        return capitalize(name)
    return name


def get_model_class_name(context: MappingContext, type_name: str) -> str:
    return resolve_name(type_name, context.model_name_prefix, context.model_name_suffix)


def get_type_resolver_class_name(context: MappingContext, type_name: str) -> str:
    return resolve_name(type_name, context.type_resolver_prefix, context.type_resolver_suffix)


def get_api_name_prefix(context: MappingContext, definition: ExtendedDefinition) -> str | None:
    """
    Prefix of the API interfaces generated for (a part of) a root type.

    With FILE_NAME_AS_PREFIX or FOLDER_NAME_AS_PREFIX the configured prefix is replaced by the
    PascalCase name of the file (or folder) the definition comes from. That only happens when
    the root type is spread over several files (folders) and `definition` is the part coming
    from exactly one of them; in every other case the configured prefix is used.
    """
    strategy = context.api_name_prefix_strategy
    if strategy == ApiNamePrefixStrategy.CONSTANT:
        return context.api_name_prefix

    root_definition = context.document.get_definition(definition.name)
    if root_definition is None:
        return context.api_name_prefix

    if strategy == ApiNamePrefixStrategy.FILE_NAME_AS_PREFIX:
        root_groups = root_definition.group_by_source_file()
        own_groups = definition.group_by_source_file()
    else:
        root_groups = root_definition.group_by_source_folder()
        own_groups = definition.group_by_source_folder()

    if len(root_groups) < 2 or len(own_groups) != 1:
        return context.api_name_prefix

    source = next(iter(own_groups))
    if strategy == ApiNamePrefixStrategy.FILE_NAME_AS_PREFIX:
        source = Path(source).stem
    return str(pascalcase(source))


def get_api_class_name(context: MappingContext, definition: ExtendedDefinition) -> str:
    """Name of the root API interface holding every operation of a root type, e.g. `QueryResolver`."""
    return resolve_name(definition.name, get_api_name_prefix(context, definition), context.api_name_suffix)


def get_operation_api_class_name(context: MappingContext, field_name: str, definition: ExtendedDefinition) -> str:
    """Name of the API interface of a single operation, e.g. `EventsQueryResolver`."""
    base_name = capitalize(field_name) + definition.name
    return resolve_name(base_name, get_api_name_prefix(context, definition), context.api_name_suffix)


def get_request_class_name(context: MappingContext, field_name: str, type_name: str) -> str:
    return resolve_name(capitalize(field_name) + type_name, suffix=context.request_suffix)


def get_response_class_name(context: MappingContext, field_name: str, type_name: str) -> str:
    return resolve_name(capitalize(field_name) + type_name, suffix=context.response_suffix)


def get_response_projection_class_name(context: MappingContext, type_name: str) -> str:
    return resolve_name(type_name, suffix=context.response_projection_suffix)


def get_parametrized_input_class_name(context: MappingContext, field_name: str, parent_type_name: str) -> str:
    return resolve_name(parent_type_name + capitalize(field_name), suffix=context.parametrized_input_suffix)


def get_model_package_name(context: MappingContext) -> str | None:
    return context.model_package_name or context.package_name


def get_api_package_name(context: MappingContext) -> str | None:
    return context.api_package_name or context.package_name


def get_imports(context: MappingContext, own_package: str | None) -> list[str]:
    """Packages a generated class has to import: every configured package other than its own."""
    packages = {context.package_name, get_model_package_name(context), get_api_package_name(context)}
    return sorted(package for package in packages if package and package != own_package)
