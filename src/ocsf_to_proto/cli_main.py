"""Command-line interface for the ocsf-to-proto generator."""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from ocsf_to_proto import __version__
from ocsf_to_proto.models import (
    GeneratorConfig,
    LoaderError,
    OcsfSchema,
    load_generator_config,
    load_ocsf_schema,
    validate_ocsf_schema,
)

# Create Typer app
app = typer.Typer(
    name="ocsf-to-proto",
    help="Generate Protocol Buffers schemas from an exported OCSF schema.",
    add_completion=True,
    no_args_is_help=True,
)

# Rich consoles for output
console = Console()
error_console = Console(stderr=True, style="bold red")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"ocsf-to-proto version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Generate proto3 files from an OCSF schema export.

    The schema is the JSON document served by the OCSF schema server at
    /export/schema (YAML is accepted as well).
    """


def _load_schema(schema_file: Path) -> OcsfSchema:
    """Load a schema, printing errors and exiting on failure."""
    try:
        return load_ocsf_schema(schema_file)
    except LoaderError as e:
        error_console.print(f"\n[bold red]✗ Failed to load {schema_file.name}[/bold red]")
        error_console.print(str(e))
        raise typer.Exit(code=1) from None
    except ValidationError as e:
        error_console.print(f"\n[bold red]✗ Invalid schema {schema_file.name}[/bold red]")
        for error in e.errors()[:10]:
            loc = ".".join(str(x) for x in error["loc"])
            error_console.print(f"  • {loc}: {error['msg']}")
        raise typer.Exit(code=1) from None


def _load_config(config_file: Path | None) -> GeneratorConfig:
    """Load generator config, printing errors and exiting on failure."""
    try:
        return load_generator_config(config_file)
    except (LoaderError, ValidationError) as e:
        error_console.print("\n[bold red]✗ Invalid configuration[/bold red]")
        error_console.print(str(e))
        raise typer.Exit(code=1) from None


@app.command()
def validate(
    schema_file: Annotated[
        Path,
        typer.Argument(
            help="OCSF schema export (JSON/YAML) to validate.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ],
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only output errors, no success messages."),
    ] = False,
) -> None:
    """Check that a schema export can be loaded.

    Examples
    --------
        ocsf-to-proto validate ocsf-schema.json

    """
    errors = validate_ocsf_schema(schema_file)

    if errors:
        error_console.print(f"\n[bold red]✗ Validation failed for {schema_file.name}[/bold red]\n")

        table = Table(title="Schema Errors", show_header=True)
        table.add_column("#", style="dim", width=4)
        table.add_column("Location", style="cyan")
        table.add_column("Error", style="red")

        for i, error in enumerate(errors, 1):
            if ": " in error:
                loc, msg = error.split(": ", 1)
            else:
                loc, msg = "", error
            table.add_row(str(i), loc, msg)

        console.print(table)
        raise typer.Exit(code=1)

    if not quiet:
        console.print(f"\n[bold green]✓ {schema_file.name} is valid[/bold green]\n")


@app.command()
def generate(
    schema_file: Annotated[
        Path,
        typer.Argument(
            help="OCSF schema export (JSON/YAML).",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ],
    events: Annotated[
        list[str] | None,
        typer.Argument(help="Event classes to generate. Defaults to all classes."),
    ] = None,
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output directory for proto files.",
            file_okay=False,
            dir_okay=True,
            resolve_path=True,
        ),
    ] = Path("output/proto"),
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Generator configuration file (YAML/JSON).",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    root_package: Annotated[
        str | None,
        typer.Option("--root-package", help="Root proto package name."),
    ] = None,
    golang_package_prefix: Annotated[
        str | None,
        typer.Option("--golang-package-prefix", help="Prefix for go_package options."),
    ] = None,
    java_package_prefix: Annotated[
        str | None,
        typer.Option("--java-package-prefix", help="Prefix for java_package options."),
    ] = None,
    no_enum_map: Annotated[
        bool,
        typer.Option("--no-enum-map", help="Do not write enum-value-map.json."),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Map and render without writing files."),
    ] = False,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Format for diagnostics: text, table."),
    ] = "text",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-V", help="Show all diagnostics and written files."),
    ] = False,
) -> None:
    """Generate proto3 files and the enum value map.

    Examples
    --------
        ocsf-to-proto generate ocsf-schema.json
        ocsf-to-proto generate ocsf-schema.json process_activity -o proto
        ocsf-to-proto generate ocsf-schema.json --config ocsf-proto.yaml
        ocsf-to-proto generate ocsf-schema.json --dry-run --format table

    """
    from rich.progress import Progress, SpinnerColumn, TextColumn

    from ocsf_to_proto.cli.error_formatter import ReportFormatter, ReportTable
    from ocsf_to_proto.converters import EnumValueMapWriter, ProtoWriter
    from ocsf_to_proto.transform import SchemaMapper

    config = _load_config(config_file)
    overrides = {
        "root_package": root_package,
        "golang_package_prefix": golang_package_prefix,
        "java_package_prefix": java_package_prefix,
    }
    updates = {key: value for key, value in overrides.items() if value is not None}
    if no_enum_map:
        updates["enum_value_map"] = False
    try:
        config = GeneratorConfig.model_validate({**config.model_dump(), **updates})
    except ValidationError as e:
        error_console.print("\n[bold red]✗ Invalid option[/bold red]")
        error_console.print(str(e))
        raise typer.Exit(code=1) from None

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=not verbose,
    ) as progress:
        task = progress.add_task("Loading schema...", total=None)
        schema = _load_schema(schema_file)
        progress.update(task, description="[green]✓ Loaded[/green]")

        task = progress.add_task("Mapping to IR...", total=None)
        try:
            result = SchemaMapper(schema, config).map(events or None)
        except KeyError as e:
            progress.stop()
            error_console.print(f"\n[bold red]✗ {e.args[0]}[/bold red]\n")
            raise typer.Exit(code=1) from None
        progress.update(task, description="[green]✓ Mapped[/green]")

        writer = ProtoWriter()
        if dry_run:
            files = writer.render(result)
            console.print(
                f"\n[bold green]✓ Would write {len(files)} proto files to {output}[/bold green]"
            )
        else:
            task = progress.add_task("Writing proto files...", total=None)
            written = writer.write(result, output)
            if config.enum_value_map:
                enum_map = EnumValueMapWriter().write(result, output)
                if enum_map is not None:
                    written.append(enum_map)
            progress.update(task, description="[green]✓ Written[/green]")

            console.print(f"\n[bold green]✓ Wrote {len(written)} files to {output}[/bold green]")
            if verbose:
                for path in written:
                    console.print(f"  [dim]{path}[/dim]")

    console.print(
        f"  [dim]Messages: {len(result.registry.messages)}  "
        f"Enums: {len(result.registry.enums)}[/dim]\n"
    )

    report = result.report
    if report.issues:
        if output_format == "table":
            ReportTable(error_console).print_report(report)
        else:
            ReportFormatter(error_console, max_issues=None if verbose else 10).format_report(
                report
            )

    if not report.is_clean:
        raise typer.Exit(code=1)


@app.command()
def info(
    schema_file: Annotated[
        Path,
        typer.Argument(
            help="OCSF schema export (JSON/YAML) to inspect.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ],
) -> None:
    """Display a summary of a schema export.

    Examples
    --------
        ocsf-to-proto info ocsf-schema.json

    """
    schema = _load_schema(schema_file)
    _print_summary(schema)


def _print_summary(schema: OcsfSchema) -> None:
    """Print a summary of the schema."""
    table = Table(title="Schema Summary", show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Version", schema.version or "-")
    table.add_row("Classes", str(len(schema.classes)))
    table.add_row("Objects", str(len(schema.objects)))

    categories = Counter(event.category for event in schema.classes.values())
    if categories:
        table.add_row("", "")  # Spacer
        for category, count in sorted(categories.items()):
            table.add_row(f"Category: {category}", str(count))

    console.print(table)


if __name__ == "__main__":
    app()
