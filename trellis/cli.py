"""Command-line interface for Trellis."""

import json
import sys

import click
from pydantic import ValidationError

from .config import get_settings
from .graph.builder import build_graph
from .graph.model_graph import ModelGraph
from .logging import set_global_log_level
from .output.formatter import (
    format_bench,
    format_dependents,
    format_diff,
    format_path_result,
)
from .relations.models import SearchOutcome
from .relations.path_finder import find_paths
from .schema.errors import LoadError, SchemaValidationError
from .schema.loader import load_record, parse_schema
from .schema.models import Schema
from .tools.annotate import annotate as annotate_model
from .tools.bench import bench as run_bench
from .tools.dependents import dependents as find_dependents
from .tools.errors import ToolError, UnknownModelError
from .tools.records import diff_objects
from .tools.required import required as required_fields

FORMAT_OPTION = click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)


def _load_schema(schema_file: str) -> tuple[Schema, ModelGraph]:
    """Parse a schema file and build its graph, exiting with code 2 on failure."""
    try:
        schema = parse_schema(schema_file)
    except LoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except SchemaValidationError as e:
        click.echo(f"Schema validation error: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
        sys.exit(2)
    return schema, build_graph(schema)


@click.group()
@click.version_option(package_name="trellis")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level for diagnostics on stderr (default: TRELLIS_LOG_LEVEL or WARNING)",
)
@click.pass_context
def main(ctx: click.Context, log_level: str | None):
    """Trellis: explore model schemas, associations and records."""
    try:
        settings = get_settings()
    except ValidationError as e:
        click.echo(f"Invalid TRELLIS_* setting: {e}", err=True)
        sys.exit(2)
    ctx.obj = settings
    set_global_log_level(log_level or settings.log_level)


@main.command()
@click.argument("schema_file", type=click.Path(exists=True))
@click.argument("source")
@click.argument("destination")
@click.option("--max-depth", type=int, default=None, help="Longest path, in associations")
@click.option("--max-steps", type=int, default=None, help="Abort after this many steps")
@click.option("--verbose", is_flag=True, default=False, help="Log search progress")
@FORMAT_OPTION
@click.pass_obj
def relations(
    settings,
    schema_file: str,
    source: str,
    destination: str,
    max_depth: int | None,
    max_steps: int | None,
    verbose: bool,
    output_format: str,
):
    """List every association path from SOURCE to DESTINATION.

    SCHEMA_FILE is the path to a YAML schema file.

    Exit codes:
      0 - At least one path found
      1 - No path found, or the search was aborted
      2 - File, schema or argument error
    """
    _, graph = _load_schema(schema_file)

    result = find_paths(
        graph,
        source,
        destination,
        max_depth=settings.max_depth if max_depth is None else max_depth,
        max_steps=settings.max_steps if max_steps is None else max_steps,
        verbose=verbose,
        progress_interval=settings.progress_interval,
    )

    if result.outcome == SearchOutcome.INVALID_ARGUMENT:
        click.echo(result.message, err=True)
        sys.exit(2)

    click.echo(format_path_result(result, output_format))  # type: ignore
    sys.exit(0 if result.found else 1)


@main.command()
@click.argument("schema_file", type=click.Path(exists=True))
@click.argument("model")
def annotate(schema_file: str, model: str):
    """Print the schema annotation of MODEL.

    Exit codes:
      0 - Success
      2 - File, schema or unknown model error
    """
    schema, _ = _load_schema(schema_file)

    try:
        lines = annotate_model(schema, model)
    except UnknownModelError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    click.echo("--- Model Annotation ---")
    click.echo("\n".join(lines))
    click.echo("---")


@main.command()
@click.argument("schema_file", type=click.Path(exists=True))
@click.argument("model")
@click.option("--verbose", is_flag=True, default=False, help="Log each dependency")
@FORMAT_OPTION
def dependents(schema_file: str, model: str, verbose: bool, output_format: str):
    """List the associations in other models that reference MODEL."""
    _, graph = _load_schema(schema_file)

    try:
        found = find_dependents(graph, model, verbose=verbose)
    except UnknownModelError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    click.echo(format_dependents(found, model, output_format))  # type: ignore


@main.command()
@click.argument("schema_file", type=click.Path(exists=True))
@click.argument("model")
@click.option(
    "--all-columns",
    is_flag=True,
    default=False,
    help="Also report NOT NULL columns, not just presence validations",
)
@FORMAT_OPTION
def required(schema_file: str, model: str, all_columns: bool, output_format: str):
    """List the fields MODEL needs to be saved, with their defaults."""
    schema, _ = _load_schema(schema_file)

    try:
        fields = required_fields(schema, model, validators_only=not all_columns)
    except UnknownModelError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    if output_format == "json":
        click.echo(json.dumps(fields, indent=2, default=str))
    elif not fields:
        click.echo(f"{model} has no required fields")
    else:
        for name, default in fields.items():
            click.echo(f"{name}: {default!r}")


@main.command()
@click.argument("record_a", type=click.Path(exists=True))
@click.argument("record_b", type=click.Path(exists=True))
@click.option("--ignore", "ignore_keys", multiple=True, help="Attribute to skip (repeatable)")
@click.option(
    "--normalize/--no-normalize",
    default=True,
    help="Compare dates and times as strings",
)
@FORMAT_OPTION
def diff(
    record_a: str,
    record_b: str,
    ignore_keys: tuple[str, ...],
    normalize: bool,
    output_format: str,
):
    """Compare the attributes of two records stored as YAML or JSON mappings.

    Exit codes:
      0 - Records match
      1 - Records differ
      2 - File error
    """
    try:
        first = load_record(record_a)
        second = load_record(record_b)
    except LoadError as e:
        click.echo(f"Error loading record: {e}", err=True)
        sys.exit(2)

    diffs = diff_objects(first, second, ignore_keys=ignore_keys, normalize=normalize)

    click.echo(format_diff(diffs, output_format))  # type: ignore
    sys.exit(1 if diffs else 0)


@main.command()
@click.argument("old")
@click.argument("new", required=False)
@click.option("-n", "iterations", type=int, default=None, help="Calls per callable")
@click.pass_obj
def bench(settings, old: str, new: str | None, iterations: int | None):
    """Time OLD (and optionally NEW), given as module:function import paths."""
    try:
        reports = run_bench(
            old,
            new,
            n=settings.bench_iterations if iterations is None else iterations,
        )
    except ToolError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    click.echo(format_bench(reports))


if __name__ == "__main__":
    main()
