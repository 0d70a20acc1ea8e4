"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from dataclasses import replace

import click

from schema_typing.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from schema_typing.example_synthesis import MarkupDocumentContext
from schema_typing.property_inspection import OUTPUT_FORMATS, describe_schema, render_report
from schema_typing.schema_documents import SchemaError, load_schema_document, locate_schema
from schema_typing.type_resolution import build_definition_document_resolver


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-typing")
def cli() -> None:
    """OpenAPI/Swagger schema type and example inspector."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML rendering configuration to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML rendering configuration with defaults and guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="describe")
@click.option(
    "--document",
    "document_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the OpenAPI/Swagger document (YAML or JSON)",
)
@click.option(
    "--schema",
    "pointer",
    required=True,
    help="JSON pointer (#/components/schemas/Pet) or bare schema name",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML rendering configuration",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="yaml",
    show_default=True,
    help="Output format of the report",
)
@click.option(
    "--no-generate-missing",
    "no_generate_missing",
    is_flag=True,
    default=False,
    help="Do not synthesize missing examples, whatever the configuration says.",
)
@click.option("--verbose", is_flag=True, default=False, help="Log diagnostics to stderr.")
def describe(
    document_path: str,
    pointer: str,
    config_path: str | None,
    output_format: str,
    no_generate_missing: bool,
    verbose: bool,
) -> None:
    """Print the resolved type and example of one schema and its properties."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        settings = load_configuration(config_path)
        if no_generate_missing:
            examples = replace(settings.examples, generate_missing=False)
            settings = replace(settings, examples=examples)
        node = locate_schema(load_schema_document(document_path), pointer)
    except (ConfigurationError, SchemaError) as exc:
        raise CliError(str(exc)) from exc

    report = describe_schema(
        node,
        settings,
        build_definition_document_resolver(settings),
        MarkupDocumentContext(settings.markup.language, settings.markup.anchor_prefix),
    )
    click.echo(render_report(report, output_format).rstrip("\n"))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
