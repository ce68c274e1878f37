from collections.abc import Iterable
from enum import Enum
from pathlib import Path
from typing import Any, cast

import yaml
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from gqlcodegen import log

DEFAULT_VALIDATION_ANNOTATION = "@javax.validation.constraints.NotNull"
DEFAULT_API_ASYNC_RETURN_TYPE = "java.util.concurrent.CompletableFuture"
DEFAULT_RESOLVER_SUFFIX = "Resolver"
DEFAULT_REQUEST_SUFFIX = "Request"
DEFAULT_RESPONSE_SUFFIX = "Response"
DEFAULT_RESPONSE_PROJECTION_SUFFIX = "ResponseProjection"
DEFAULT_PARAMETRIZED_INPUT_SUFFIX = "ParametrizedInput"
DEFAULT_RESPONSE_PROJECTION_MAX_DEPTH = 3
DEFAULT_CUSTOM_SCALAR_TYPE = "String"

BUILTIN_SCALAR_MAPPING = {
    "ID": "String",
    "String": "String",
    "Int": "Integer",
    "Float": "Double",
    "Boolean": "Boolean",
}


class ConfigurationConflictError(ValueError):
    """Raised when two configuration choices would produce colliding output artifact names."""


class ApiNamePrefixStrategy(str, Enum):
    CONSTANT = "CONSTANT"
    FILE_NAME_AS_PREFIX = "FILE_NAME_AS_PREFIX"
    FOLDER_NAME_AS_PREFIX = "FOLDER_NAME_AS_PREFIX"


class ApiRootInterfaceStrategy(str, Enum):
    SINGLE_INTERFACE = "SINGLE_INTERFACE"
    INTERFACE_PER_SCHEMA = "INTERFACE_PER_SCHEMA"


class MappingConfig(BaseModel):
    """
    Options driving the schema to data model mapping.

    Every option is optional; `None` means "not set by the user". The config goes through
    `prepare_mapping_config` once before generation, after which every option has a value.
    Keys can be given in camelCase (as in configuration files) or snake_case.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid", frozen=True)

    package_name: str | None = None
    model_package_name: str | None = None
    api_package_name: str | None = None

    model_name_prefix: str | None = None
    model_name_suffix: str | None = None
    api_name_prefix: str | None = None
    api_name_suffix: str | None = None
    type_resolver_prefix: str | None = None
    type_resolver_suffix: str | None = None
    request_suffix: str | None = None
    response_suffix: str | None = None
    response_projection_suffix: str | None = None
    parametrized_input_suffix: str | None = None

    generate_builder: bool | None = None
    generate_equals_and_hash_code: bool | None = None
    generate_to_string: bool | None = None
    generate_client: bool | None = None
    generate_immutable_models: bool | None = None
    generate_apis: bool | None = None
    generate_async_api: bool | None = None
    generate_parameterized_fields_resolvers: bool | None = None
    generate_extension_fields_resolvers: bool | None = None
    generate_data_fetching_environment_argument_in_apis: bool | None = None
    generate_models_for_root_types: bool | None = None

    api_name_prefix_strategy: ApiNamePrefixStrategy | None = None
    api_root_interface_strategy: ApiRootInterfaceStrategy | None = None

    custom_types_mapping: dict[str, str] | None = None
    custom_annotations_mapping: dict[str, str] | None = None
    directive_annotations_mapping: dict[str, str] | None = None
    fields_with_resolvers: list[str] | None = None

    model_validation_annotation: str | None = None
    api_async_return_type: str | None = None
    api_async_return_list_type: str | None = None
    subscription_return_type: str | None = None
    response_projection_max_depth: int | None = None


def _default_values() -> dict[str, Any]:
    return {
        "model_validation_annotation": DEFAULT_VALIDATION_ANNOTATION,
        "api_name_suffix": DEFAULT_RESOLVER_SUFFIX,
        "type_resolver_suffix": DEFAULT_RESOLVER_SUFFIX,
        "request_suffix": DEFAULT_REQUEST_SUFFIX,
        "response_suffix": DEFAULT_RESPONSE_SUFFIX,
        "response_projection_suffix": DEFAULT_RESPONSE_PROJECTION_SUFFIX,
        "parametrized_input_suffix": DEFAULT_PARAMETRIZED_INPUT_SUFFIX,
        "generate_builder": True,
        "generate_equals_and_hash_code": False,
        "generate_to_string": False,
        "generate_client": False,
        "generate_immutable_models": False,
        "generate_apis": True,
        "generate_async_api": False,
        "generate_parameterized_fields_resolvers": True,
        "generate_extension_fields_resolvers": False,
        "generate_data_fetching_environment_argument_in_apis": False,
        "generate_models_for_root_types": False,
        "api_name_prefix_strategy": ApiNamePrefixStrategy.CONSTANT,
        "api_root_interface_strategy": ApiRootInterfaceStrategy.SINGLE_INTERFACE,
        "api_async_return_type": DEFAULT_API_ASYNC_RETURN_TYPE,
        "custom_types_mapping": {},
        "custom_annotations_mapping": {},
        "directive_annotations_mapping": {},
        "fields_with_resolvers": [],
        "response_projection_max_depth": DEFAULT_RESPONSE_PROJECTION_MAX_DEPTH,
    }


def combine(config: MappingConfig, override: MappingConfig | None) -> MappingConfig:
    """
    Combine a user configuration with an externally supplied one.

    Options set in `override` win. Mapping options are merged key by key (override keys win)
    and list options are unioned, keeping the user's entries first.
    """
    if override is None:
        return config

    updates: dict[str, Any] = {}
    for name in MappingConfig.model_fields:
        value = getattr(override, name)
        if value is None:
            continue
        current = getattr(config, name)
        if isinstance(value, dict) and current:
            updates[name] = {**current, **value}
        elif isinstance(value, list) and current:
            updates[name] = current + [item for item in value if item not in current]
        else:
            updates[name] = value

    return config.model_copy(update=updates)


def with_defaults(config: MappingConfig) -> MappingConfig:
    """Fill every unset option with its default value."""
    updates = {name: value for name, value in _default_values().items() if getattr(config, name) is None}
    if config.generate_client:
        # requests are serialized through toString()
        updates["generate_to_string"] = True
    return config.model_copy(update=updates)


def _equal_ignoring_spaces(first: str | None, second: str | None) -> bool:
    return (first or "").replace(" ", "") == (second or "").replace(" ", "")


def validate_config(config: MappingConfig) -> None:
    """
    Reject option combinations that would make two generated artifacts share a name.

    Raises:
        ConfigurationConflictError: If the configuration is inconsistent.
    """
    if (
        config.api_root_interface_strategy == ApiRootInterfaceStrategy.INTERFACE_PER_SCHEMA
        and config.api_name_prefix_strategy == ApiNamePrefixStrategy.CONSTANT
    ):
        raise ConfigurationConflictError(
            "API name prefix strategy should not be CONSTANT when the root interface strategy is "
            "INTERFACE_PER_SCHEMA: root types split across schema files would produce identical API names"
        )

    if (
        config.generate_apis
        and config.generate_models_for_root_types
        and config.api_name_prefix_strategy == ApiNamePrefixStrategy.CONSTANT
    ):
        if _equal_ignoring_spaces(config.api_name_prefix, config.model_name_prefix) and _equal_ignoring_spaces(
            config.api_name_suffix, config.model_name_suffix
        ):
            raise ConfigurationConflictError(
                "Root type models and API interfaces would share names: either disable API generation "
                "or set a different prefix/suffix for API classes and model classes"
            )
        if _equal_ignoring_spaces(config.api_name_prefix, config.type_resolver_prefix) and _equal_ignoring_spaces(
            config.api_name_suffix, config.type_resolver_suffix
        ):
            raise ConfigurationConflictError(
                "Root type resolvers and API interfaces would share names: either disable API generation "
                "or set a different prefix/suffix for API classes and type resolver classes"
            )


def replace_leading_at_sign(annotation: str | None) -> str | None:
    if annotation and annotation.startswith("@"):
        return annotation[1:]
    return annotation


def sanitize(config: MappingConfig) -> MappingConfig:
    """Strip the leading `@` of every configured annotation; templates add it back."""
    updates: dict[str, Any] = {
        "model_validation_annotation": replace_leading_at_sign(config.model_validation_annotation),
    }
    for name in ("custom_annotations_mapping", "directive_annotations_mapping"):
        mapping = getattr(config, name)
        if mapping is not None:
            updates[name] = {key: replace_leading_at_sign(value) for key, value in mapping.items()}
    return config.model_copy(update=updates)


def prepare_mapping_config(config: MappingConfig, override: MappingConfig | None = None) -> MappingConfig:
    """
    Turn a user supplied configuration into the one used for generation.

    Combines it with `override`, fills defaults, validates the result and normalizes the
    annotation strings, in that order.

    Raises:
        ConfigurationConflictError: If the combined configuration is inconsistent.
    """
    prepared = with_defaults(combine(config, override))
    validate_config(prepared)
    return sanitize(prepared)


def with_scalar_mappings(config: MappingConfig, custom_scalar_names: Iterable[str]) -> MappingConfig:
    """
    Seed type mappings for built-in scalars and the custom scalars declared in the schema.

    A mapping already present for the same key is never overwritten.
    """
    seeded = {name: DEFAULT_CUSTOM_SCALAR_TYPE for name in custom_scalar_names}
    seeded.update(BUILTIN_SCALAR_MAPPING)
    seeded.update(config.custom_types_mapping or {})
    return config.model_copy(update={"custom_types_mapping": seeded})


def load_mapping_config(config_path: Path | None) -> MappingConfig | None:
    """
    Load a mapping configuration from a YAML (or JSON) file.

    Args:
        config_path: Path to the configuration file, or None to skip loading.

    Returns:
        A validated MappingConfig, or None if config_path is None.

    Raises:
        OSError: If the file cannot be read.
        yaml.YAMLError: If the file is not valid YAML.
        TypeError: If the document root is not a mapping.
        ValidationError: If validation against MappingConfig fails.
    """
    if config_path is None:
        log.debug("No mapping config provided")
        return None

    raw: Any
    with config_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    log.debug(f"Loaded mapping config from {config_path}")

    if raw is None or raw == {}:
        return MappingConfig()

    if not isinstance(raw, dict):
        raise TypeError(f"Mapping config root must be a mapping (YAML object), got {type(raw).__name__}")

    return MappingConfig.model_validate(cast(dict[str, Any], raw))
