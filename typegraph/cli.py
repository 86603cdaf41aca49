"""Command-line interface for typegraph."""

import logging
import sys

import click

from .config import GraphConfig
from .graph.builder import build_graph
from .graph.errors import InconsistentHierarchyError
from .output.formatter import format_graph, format_mro, format_validation_result
from .schema.errors import SchemaLoadError, SchemaValidationError
from .schema.loader import parse_model
from .schema.models import TypeModel
from .validators.cycles import check_role_cycles
from .validators.runner import validate_model_file

FORMAT_OPTION = click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)


def _load_model(path: str) -> TypeModel:
    """Load a declaration file, exiting with code 2 on failure."""
    try:
        return parse_model(path)
    except SchemaLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except SchemaValidationError as e:
        click.echo(f"Schema validation error: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
        sys.exit(2)


def _build(model: TypeModel, config: GraphConfig):
    """Build a graph, refusing declarations whose roles compose cyclically."""
    cycles = check_role_cycles(model)
    if cycles.has_errors:
        for issue in cycles.errors:
            click.echo(f"Error: {issue.message}", err=True)
        sys.exit(2)
    return build_graph(model, config)


@click.group()
@click.version_option()
@click.option(
    "--root",
    "root_name",
    envvar="TYPEGRAPH_ROOT",
    default="Mu",
    show_default=True,
    help="Name of the absolute root type",
)
@click.option(
    "--base",
    "base_name",
    envvar="TYPEGRAPH_BASE",
    default="Any",
    show_default=True,
    help="Name of the universal base given to rootless types",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, root_name: str, base_name: str, verbose: bool):
    """typegraph: build and inspect type hierarchy graphs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = GraphConfig(root_name=root_name, base_name=base_name)


@main.command()
@click.argument("declaration_file", type=click.Path(exists=True))
@FORMAT_OPTION
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Treat warnings as errors",
)
@click.pass_obj
def validate(config: GraphConfig, declaration_file: str, output_format: str, strict: bool):
    """Validate a type declaration file.

    DECLARATION_FILE is a YAML file or a declaration text file.

    Exit codes:
      0 - Validation passed
      1 - Validation failed (errors found)
      2 - File or schema error
    """
    try:
        result = validate_model_file(declaration_file, config)
    except SchemaLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except SchemaValidationError as e:
        click.echo(f"Schema validation error: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
        sys.exit(2)

    click.echo(format_validation_result(result, output_format))  # type: ignore

    if result.has_errors:
        sys.exit(1)
    elif strict and result.has_warnings:
        sys.exit(1)
    else:
        sys.exit(0)


@main.command()
@click.argument("declaration_file", type=click.Path(exists=True))
@FORMAT_OPTION
@click.pass_obj
def show(config: GraphConfig, declaration_file: str, output_format: str):
    """Print every type in dependency order, with its relations and MRO.

    Exit codes:
      0 - Success
      2 - File, schema or role cycle error
    """
    model = _load_model(declaration_file)
    graph = _build(model, config)
    click.echo(format_graph(graph, output_format))  # type: ignore
    sys.exit(0)


@main.command()
@click.argument("declaration_file", type=click.Path(exists=True))
@click.argument("type_name")
@FORMAT_OPTION
@click.pass_obj
def mro(config: GraphConfig, declaration_file: str, type_name: str, output_format: str):
    """Print the method resolution order of TYPE_NAME.

    Exit codes:
      0 - Success
      1 - The hierarchy of TYPE_NAME is inconsistent
      2 - File, schema or role cycle error, or unknown type
    """
    model = _load_model(declaration_file)
    graph = _build(model, config)

    if type_name not in graph:
        click.echo(f"Unknown type: {type_name}", err=True)
        sys.exit(2)

    try:
        output = format_mro(graph, type_name, output_format)  # type: ignore
    except InconsistentHierarchyError as e:
        click.echo(f"Inconsistent hierarchy: {e}", err=True)
        sys.exit(1)

    click.echo(output)
    sys.exit(0)


if __name__ == "__main__":
    main()
