import logging
import sys
from pathlib import Path
from typing import Any

import rich_click as click
import yaml
from ariadne.exceptions import GraphQLFileSyntaxError
from graphql import GraphQLError
from rich.traceback import install

from flowgen import __version__, log
from flowgen.config import ContextConfig, load_project_config
from flowgen.errors import GenerationError
from flowgen.generators import generate, generate_code
from flowgen.project import build_generate_args
from flowgen.source import load_schema, resolve_graphql_files


class PathResolverOption(click.Option):
    def process_value(self, ctx: click.Context, value: Any) -> list[Path] | None:
        value = super().process_value(ctx, value)
        if not value:
            return None
        return resolve_graphql_files(list(value))


schema_option = click.option(
    "--schema",
    "-s",
    "schemas",
    type=click.Path(exists=True, path_type=Path),
    cls=PathResolverOption,
    multiple=True,
    help="The GraphQL schema file or directory containing schema files. Can be specified multiple times.",
)


config_option = click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML project configuration (models, context, formatter options)",
)


optional_output_option = click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    required=False,
    help="Output file, overrides the one of the project configuration",
)


@click.group(context_settings={"auto_envvar_prefix": "flowgen"})
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


@cli.command(name="generate")
@schema_option
@config_option
@optional_output_option
@click.option(
    "--context",
    "context_reference",
    type=str,
    help="Context type as 'path/to/file.js:TypeName', overrides the one of the project configuration",
)
@click.option(
    "--format/--no-format",
    "run_formatter",
    default=True,
    help="Run the generated code through Prettier",
    show_default=True,
)
def generate_command(
    schemas: list[Path] | None,
    config: Path | None,
    output: Path | None,
    context_reference: str | None,
    run_formatter: bool,
) -> None:
    """Generate Flow resolver types from a GraphQL schema."""
    try:
        project_config = load_project_config(config)
        if context_reference:
            project_config.context = ContextConfig.model_validate(context_reference)

        schema_paths = schemas or resolve_graphql_files(project_config.schemas)
        if not schema_paths:
            raise click.UsageError("No schema given, use --schema or the 'schema' key of the project configuration")
        output = output or project_config.output
        if output is None:
            raise click.UsageError("No output file given, use --output or the 'output' key of the project configuration")

        source = load_schema(schema_paths)
        args = build_generate_args(source, project_config, output)
        code = generate_code(args) if run_formatter else generate(args)

        output.parent.mkdir(parents=True, exist_ok=True)
        _ = output.write_text(code, encoding="utf-8")
        log.success(f"Successfully generated resolver types to {output}")

    except OSError as e:
        log.error(f"File I/O error: {e}")
        sys.exit(1)
    except (GraphQLError, GraphQLFileSyntaxError, yaml.YAMLError) as e:
        log.error(f"Invalid input: {e}")
        sys.exit(1)
    except (ValueError, TypeError) as e:
        log.error(f"Invalid schema or configuration: {e}")
        sys.exit(1)
    except GenerationError as e:
        log.error(f"Inconsistent schema model: {e}")
        sys.exit(1)


if __name__ == "__main__":
    cli()
