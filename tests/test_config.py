from pathlib import Path

import pytest
import yaml
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from gqlcodegen.model.config import (
    BUILTIN_SCALAR_MAPPING,
    ApiNamePrefixStrategy,
    ApiRootInterfaceStrategy,
    ConfigurationConflictError,
    MappingConfig,
    combine,
    load_mapping_config,
    prepare_mapping_config,
    sanitize,
    validate_config,
    with_defaults,
    with_scalar_mappings,
)
from tests.conftest import TestSchemaData


class TestCombine:
    def test_no_override_returns_config(self) -> None:
        config = MappingConfig(package_name="com.example")
        assert combine(config, None) is config

    def test_override_wins_on_scalar_options(self) -> None:
        config = MappingConfig(package_name="com.example", generate_builder=False)
        override = MappingConfig(package_name="com.override")

        combined = combine(config, override)

        assert combined.package_name == "com.override"
        assert combined.generate_builder is False

    def test_mappings_are_merged_key_by_key(self) -> None:
        config = MappingConfig(custom_types_mapping={"DateTime": "java.util.Date", "Long": "Long"})
        override = MappingConfig(custom_types_mapping={"DateTime": "java.time.OffsetDateTime"})

        combined = combine(config, override)

        assert combined.custom_types_mapping == {"DateTime": "java.time.OffsetDateTime", "Long": "Long"}

    def test_lists_are_unioned(self) -> None:
        config = MappingConfig(fields_with_resolvers=["Event", "User.friends"])
        override = MappingConfig(fields_with_resolvers=["User.friends", "Venue"])

        assert combine(config, override).fields_with_resolvers == ["Event", "User.friends", "Venue"]


class TestWithDefaults:
    def test_unset_options_get_defaults(self) -> None:
        config = with_defaults(MappingConfig())

        assert config.api_name_suffix == "Resolver"
        assert config.type_resolver_suffix == "Resolver"
        assert config.request_suffix == "Request"
        assert config.response_projection_suffix == "ResponseProjection"
        assert config.generate_builder is True
        assert config.generate_apis is True
        assert config.generate_client is False
        assert config.api_name_prefix_strategy == ApiNamePrefixStrategy.CONSTANT
        assert config.api_root_interface_strategy == ApiRootInterfaceStrategy.SINGLE_INTERFACE
        assert config.custom_types_mapping == {}
        assert config.fields_with_resolvers == []
        assert config.response_projection_max_depth == 3
        assert config.api_name_prefix is None

    def test_user_values_are_kept(self) -> None:
        config = with_defaults(MappingConfig(api_name_suffix="Api", generate_builder=False))

        assert config.api_name_suffix == "Api"
        assert config.generate_builder is False

    def test_client_generation_forces_to_string(self) -> None:
        config = with_defaults(MappingConfig(generate_client=True, generate_to_string=False))
        assert config.generate_to_string is True


class TestValidateConfig:
    @pytest.mark.parametrize("generate_apis", [True, False])
    @pytest.mark.parametrize("generate_models_for_root_types", [True, False])
    def test_interface_per_schema_with_constant_prefix_is_rejected(
        self, generate_apis: bool, generate_models_for_root_types: bool
    ) -> None:
        config = MappingConfig(
            api_root_interface_strategy=ApiRootInterfaceStrategy.INTERFACE_PER_SCHEMA,
            generate_apis=generate_apis,
            generate_models_for_root_types=generate_models_for_root_types,
            api_name_suffix="Api",
        )
        with pytest.raises(ConfigurationConflictError, match="INTERFACE_PER_SCHEMA"):
            prepare_mapping_config(config)

    def test_interface_per_schema_with_file_prefix_is_accepted(self) -> None:
        config = MappingConfig(
            api_root_interface_strategy=ApiRootInterfaceStrategy.INTERFACE_PER_SCHEMA,
            api_name_prefix_strategy=ApiNamePrefixStrategy.FILE_NAME_AS_PREFIX,
        )
        validate_config(with_defaults(config))

    def test_api_name_colliding_with_model_name(self) -> None:
        config = MappingConfig(
            generate_models_for_root_types=True,
            model_name_suffix="Resolver",
            type_resolver_suffix="TypeResolver",
        )
        with pytest.raises(ConfigurationConflictError, match="model classes"):
            prepare_mapping_config(config)

    def test_api_name_colliding_with_type_resolver_name(self) -> None:
        # default api and type resolver names are both <Type>Resolver
        config = MappingConfig(generate_models_for_root_types=True)
        with pytest.raises(ConfigurationConflictError, match="type resolver classes"):
            prepare_mapping_config(config)

    def test_collision_ignores_spaces(self) -> None:
        config = MappingConfig(
            generate_models_for_root_types=True,
            api_name_suffix=" Api ",
            model_name_suffix="Api",
        )
        with pytest.raises(ConfigurationConflictError):
            prepare_mapping_config(config)

    def test_distinct_names_are_accepted(self) -> None:
        config = prepare_mapping_config(MappingConfig(generate_models_for_root_types=True, api_name_suffix="Api"))
        assert config.generate_models_for_root_types is True

    def test_no_collision_check_without_apis(self) -> None:
        prepare_mapping_config(MappingConfig(generate_models_for_root_types=True, generate_apis=False))


class TestSanitize:
    def test_leading_at_sign_is_stripped(self) -> None:
        config = sanitize(
            MappingConfig(
                model_validation_annotation="@javax.validation.constraints.NotNull",
                custom_annotations_mapping={"Event.title": "@com.example.Trimmed", "User": "com.example.Entity"},
                directive_annotations_mapping={"size": "@Size(min={{min}})"},
            )
        )

        assert config.model_validation_annotation == "javax.validation.constraints.NotNull"
        assert config.custom_annotations_mapping == {
            "Event.title": "com.example.Trimmed",
            "User": "com.example.Entity",
        }
        assert config.directive_annotations_mapping == {"size": "Size(min={{min}})"}

    def test_prepared_config_is_frozen(self) -> None:
        config = prepare_mapping_config(MappingConfig())
        with pytest.raises(ValidationError):
            config.package_name = "com.example"  # type: ignore[misc]

    def test_override_applies_before_defaults(self) -> None:
        config = prepare_mapping_config(MappingConfig(), MappingConfig(api_name_suffix="Api"))
        assert config.api_name_suffix == "Api"
        assert config.type_resolver_suffix == "Resolver"


class TestWithScalarMappings:
    def test_builtin_and_custom_scalars_are_seeded(self) -> None:
        config = with_scalar_mappings(prepare_mapping_config(MappingConfig()), ["DateTime"])

        assert config.custom_types_mapping == {**BUILTIN_SCALAR_MAPPING, "DateTime": "String"}

    def test_user_mappings_are_not_overwritten(self) -> None:
        user_mapping = {"ID": "java.util.UUID", "DateTime": "java.time.OffsetDateTime"}
        config = prepare_mapping_config(MappingConfig(custom_types_mapping=user_mapping))

        seeded = with_scalar_mappings(config, ["DateTime"])

        assert seeded.custom_types_mapping is not None
        assert seeded.custom_types_mapping["ID"] == "java.util.UUID"
        assert seeded.custom_types_mapping["DateTime"] == "java.time.OffsetDateTime"
        assert seeded.custom_types_mapping["Int"] == "Integer"

    @given(
        user_mapping=st.dictionaries(
            st.sampled_from(["ID", "String", "Int", "Float", "Boolean", "DateTime", "Long"]),
            st.from_regex(r"[a-z]+(\.[A-Za-z]+)*", fullmatch=True),
        ),
        custom_scalars=st.lists(st.sampled_from(["DateTime", "Long", "Url"]), unique=True),
    )
    def test_seeding_is_idempotent(self, user_mapping: dict[str, str], custom_scalars: list[str]) -> None:
        config = prepare_mapping_config(MappingConfig(custom_types_mapping=user_mapping))

        seeded_once = with_scalar_mappings(config, custom_scalars)
        seeded_twice = with_scalar_mappings(seeded_once, custom_scalars)

        assert seeded_twice.custom_types_mapping == seeded_once.custom_types_mapping
        assert seeded_once.custom_types_mapping is not None
        for key, value in user_mapping.items():
            assert seeded_once.custom_types_mapping[key] == value


class TestLoadMappingConfig:
    def test_no_path(self) -> None:
        assert load_mapping_config(None) is None

    def test_camel_case_keys(self) -> None:
        config = load_mapping_config(TestSchemaData.CONFIG)

        assert config is not None
        assert config.package_name == "com.example.events"
        assert config.model_name_suffix == "DTO"
        assert config.generate_equals_and_hash_code is True
        assert config.custom_types_mapping == {"DateTime": "java.time.OffsetDateTime"}
        assert config.directive_annotations_mapping == {
            "size": "@javax.validation.constraints.Size(min={{min}}, max={{max}})"
        }

    def test_snake_case_keys_and_enums(self, tmp_path: Path) -> None:
        config_path = tmp_path / "config.yaml"
        config_path.write_text(
            yaml.safe_dump({"package_name": "com.example", "apiNamePrefixStrategy": "FOLDER_NAME_AS_PREFIX"})
        )

        config = load_mapping_config(config_path)

        assert config is not None
        assert config.package_name == "com.example"
        assert config.api_name_prefix_strategy == ApiNamePrefixStrategy.FOLDER_NAME_AS_PREFIX

    def test_empty_document(self, tmp_path: Path) -> None:
        config_path = tmp_path / "empty.yaml"
        config_path.write_text("")
        assert load_mapping_config(config_path) == MappingConfig()

    def test_json_document(self, tmp_path: Path) -> None:
        config_path = tmp_path / "config.json"
        config_path.write_text('{"generateClient": true}')

        config = load_mapping_config(config_path)

        assert config is not None
        assert config.generate_client is True

    def test_non_mapping_root(self, tmp_path: Path) -> None:
        config_path = tmp_path / "list.yaml"
        config_path.write_text("- packageName\n")
        with pytest.raises(TypeError, match="must be a mapping"):
            load_mapping_config(config_path)

    def test_unknown_option(self, tmp_path: Path) -> None:
        config_path = tmp_path / "unknown.yaml"
        config_path.write_text("generateKotlin: true\n")
        with pytest.raises(ValidationError):
            load_mapping_config(config_path)
