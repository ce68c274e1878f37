import logging
import sys
from pathlib import Path
from typing import Any

import rich_click as click
import yaml
from ariadne.exceptions import GraphQLFileSyntaxError
from graphql import GraphQLSyntaxError
from pydantic import ValidationError
from rich.traceback import install

from gqlcodegen import __version__, log
from gqlcodegen.codegen import GraphQLCodegen
from gqlcodegen.mappers.type_mapper import UnresolvedTypeShapeError
from gqlcodegen.model.config import ConfigurationConflictError, MappingConfig, load_mapping_config
from gqlcodegen.utils.schema_loader import resolve_graphql_files


class PathResolverOption(click.Option):
    def process_value(self, ctx: click.Context, value: Any) -> list[Path] | None:
        value = super().process_value(ctx, value)
        if not value:
            return None
        paths = set(value)
        return resolve_graphql_files(list(paths))


schema_option = click.option(
    "--schema",
    "-s",
    "schemas",
    type=click.Path(exists=True, path_type=Path),
    cls=PathResolverOption,
    required=True,
    multiple=True,
    help="The GraphQL schema file or directory containing schema files. Can be specified multiple times.",
)


output_dir_option = click.option(
    "--output",
    "-o",
    "output_dir",
    type=click.Path(file_okay=False, writable=True, path_type=Path),
    required=True,
    help="Output directory of the generated Java sources",
)


config_option = click.option(
    "--config",
    "-c",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML or JSON file containing the mapping configuration",
)


override_config_option = click.option(
    "--override-config",
    "override_config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Mapping configuration whose options take precedence over --config",
)


package_name_option = click.option(
    "--package-name",
    "-p",
    type=str,
    help="Java package of the generated classes (overrides packageName of the configuration)",
)


def load_config_or_exit(config_file: Path | None) -> MappingConfig | None:
    try:
        return load_mapping_config(config_file)
    except (OSError, yaml.YAMLError, TypeError, ValidationError) as e:
        log.error(f"Invalid mapping config {config_file}: {e}")
        sys.exit(1)


@click.group(context_settings={"auto_envvar_prefix": "gqlcodegen"})
@click.option(
    "-l",
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="INFO",
    help="Log level",
    show_default=True,
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Log file",
)
@click.version_option(__version__)
def cli(log_level: str, log_file: Path | None) -> None:
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setFormatter(logging.Formatter("%(asctime)s:%(levelname)s:%(message)s"))
        log.addHandler(file_handler)

    log.setLevel(log_level.upper())
    if log_level.upper() == "DEBUG":
        _ = install(show_locals=True)


@click.command()
@schema_option
@output_dir_option
@config_option
@override_config_option
@package_name_option
@click.option("--clean", is_flag=True, default=False, help="Empty the output directory before generating")
def generate(
    schemas: list[Path],
    output_dir: Path,
    config_file: Path | None,
    override_config_file: Path | None,
    package_name: str | None,
    clean: bool,
) -> None:
    """Generate Java model classes, API interfaces and client classes from GraphQL schemas."""
    mapping_config = load_config_or_exit(config_file) or MappingConfig()
    override_config = load_config_or_exit(override_config_file)
    if package_name:
        mapping_config = mapping_config.model_copy(update={"package_name": package_name})

    log.rule("GraphQL code generation")
    log.key_value("Schemas", len(schemas))
    log.key_value("Output", output_dir)

    try:
        codegen = GraphQLCodegen(schemas, output_dir, mapping_config, override_config, clean_output_dir=clean)
        written = codegen.generate()
    except ConfigurationConflictError as e:
        log.error(f"Configuration conflict: {e}")
        sys.exit(1)
    except (GraphQLFileSyntaxError, GraphQLSyntaxError) as e:
        log.error(f"Invalid schema: {e}")
        sys.exit(1)
    except UnresolvedTypeShapeError as e:
        log.error(f"Malformed schema document: {e}")
        sys.exit(1)

    log.success(f"Generated {len(written)} files in {output_dir}")


cli.add_command(generate)


if __name__ == "__main__":
    cli()
