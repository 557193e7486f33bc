"""Command-line interface for the ontouml-to-alloy converter."""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from ontouml_to_alloy import __version__
from ontouml_to_alloy.models import (
    LoaderError,
    Project,
    load_project,
    validate_project_file,
)

# Create Typer app
app = typer.Typer(
    name="ontouml-to-alloy",
    help="Transform OntoUML models into Alloy specifications.",
    add_completion=True,
    no_args_is_help=True,
)

# Rich consoles for output
console = Console()
error_console = Console(stderr=True, style="bold red")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"ontouml-to-alloy version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Route library log records through Rich when verbose."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


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
    """Transform OntoUML JSON/YAML models into Alloy specifications.

    Models are checked against the OntoUML interchange format, validated
    for transformability and written as Alloy modules that encode the
    model's dynamics as a set of possible worlds.
    """


@app.command()
def validate(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Input JSON/YAML model to validate.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ],
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only output errors, no success messages.",
        ),
    ] = False,
    show_summary: Annotated[
        bool,
        typer.Option(
            "--summary",
            "-s",
            help="Show summary of model contents.",
        ),
    ] = False,
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Output format for validation results: text, table, tree.",
        ),
    ] = "text",
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Treat warnings as errors.",
        ),
    ] = False,
) -> None:
    """Validate an OntoUML JSON/YAML model.

    Checks the file against the interchange format and reports any
    errors found. Also checks that every element can be transformed.

    Examples
    --------
        ontouml-to-alloy validate model.json
        ontouml-to-alloy validate model.json --summary
        ontouml-to-alloy validate model.json --quiet
        ontouml-to-alloy validate model.json --format table
        ontouml-to-alloy validate model.json --strict

    """
    from ontouml_to_alloy.cli.error_formatter import ErrorFormatter, ErrorTable, ErrorTree
    from ontouml_to_alloy.validation.validator import ModelValidator

    # First validate schema
    errors = validate_project_file(input_file)

    if errors:
        error_console.print(f"\n[bold red]✗ Validation failed for {input_file.name}[/bold red]\n")

        # Create error table
        table = Table(title="Validation Errors", show_header=True)
        table.add_column("#", style="dim", width=4)
        table.add_column("Location", style="cyan")
        table.add_column("Error", style="red")

        for i, error in enumerate(errors, 1):
            # Split error into location and message if possible
            if ": " in error:
                loc, msg = error.split(": ", 1)
            else:
                loc, msg = "", error
            table.add_row(str(i), loc, msg)

        console.print(table)
        raise typer.Exit(code=1)

    # Schema valid - load model and check transformability
    try:
        project = load_project(input_file)
    except LoaderError as e:
        error_console.print(f"\n[bold red]✗ Failed to load {input_file.name}[/bold red]")
        error_console.print(str(e))
        raise typer.Exit(code=1) from None

    validator = ModelValidator(strict=strict)
    result = validator.validate(project)
    failed = not result.is_valid or (strict and bool(result.warnings))

    # Format and display validation results
    if not result.is_valid or result.warnings:
        if output_format == "table":
            ErrorTable(error_console).print_result(result)
        elif output_format == "tree":
            ErrorTree(error_console).print_result(result)
        else:
            ErrorFormatter(error_console).format_validation_result(result, input_file)

        if failed:
            raise typer.Exit(code=1)

    if not quiet:
        if result.is_valid and not result.warnings:
            console.print(f"\n[bold green]✓ {input_file.name} is valid[/bold green]\n")
        elif result.is_valid and result.warnings:
            console.print(
                f"\n[bold yellow]⚠ {input_file.name} is valid with warnings[/bold yellow]\n"
            )

        if show_summary:
            _print_summary(project)


def _print_summary(project: Project) -> None:
    """Print a summary of the model contents."""
    model = project.model
    classes = model.get_all_classes()
    relations = model.get_all_relations()

    table = Table(title="Model Summary", show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Project", project.name or "-")
    table.add_row("Model", model.name or "-")

    # Counts
    table.add_row("", "")  # Spacer
    table.add_row("Classes", str(len(classes)))
    table.add_row("Relations", str(len(relations)))
    table.add_row("Attributes", str(sum(len(c.properties) for c in classes)))
    table.add_row("Generalizations", str(len(model.get_all_generalizations())))
    table.add_row("Generalization Sets", str(len(model.get_all_generalization_sets())))

    # Stereotype breakdown
    stereotypes = Counter(c.stereotype.value if c.stereotype else "none" for c in classes)
    if stereotypes:
        table.add_row("", "")  # Spacer
        for stereotype, count in sorted(stereotypes.items()):
            table.add_row(f"«{stereotype}»", str(count))

    console.print(table)


@app.command()
def convert(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Input JSON/YAML model to convert.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output Alloy file path. Defaults to input filename with .als extension.",
            dir_okay=False,
            writable=True,
            resolve_path=True,
        ),
    ] = None,
    worlds: Annotated[
        int,
        typer.Option(
            "--worlds",
            "-w",
            min=1,
            help="Number of worlds in the multiple-worlds run command.",
        ),
    ] = 3,
    scope: Annotated[
        int,
        typer.Option(
            "--scope",
            min=1,
            help="Default scope of the run commands.",
        ),
    ] = 10,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite output file if it exists.",
        ),
    ] = False,
    validate_only: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Transform without writing output file.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-V",
            help="Show detailed conversion progress.",
        ),
    ] = False,
) -> None:
    """Convert an OntoUML JSON/YAML model to an Alloy module.

    First validates the input file, then transforms it and writes the
    Alloy specification.

    Examples
    --------
        ontouml-to-alloy convert model.json
        ontouml-to-alloy convert model.json -o custom.als
        ontouml-to-alloy convert model.json --force
        ontouml-to-alloy convert model.json --dry-run
        ontouml-to-alloy convert model.json --worlds 5 --scope 12

    """
    from ontouml_to_alloy.cli.exception_handler import handle_exceptions

    _configure_logging(verbose)

    # Determine output path
    if output is None:
        output = input_file.with_suffix(".als")

    # Check if output exists
    if output.exists() and not force and not validate_only:
        error_console.print(
            f"\n[bold red]✗ Output file already exists: {output}[/bold red]\n"
            "Use --force to overwrite."
        )
        raise typer.Exit(code=1)

    run = handle_exceptions(verbose=verbose)(_run_conversion)
    run(input_file, output, worlds, scope, validate_only, verbose)


def _run_conversion(
    input_file: Path,
    output: Path,
    worlds: int,
    scope: int,
    validate_only: bool,
    verbose: bool,
) -> None:
    """Validate, transform and write one model."""
    from rich.progress import Progress, SpinnerColumn, TextColumn
    from rich.syntax import Syntax

    from ontouml_to_alloy.converters import AlloyWriter
    from ontouml_to_alloy.transform.transformer import OntoumlToAlloyTransformer
    from ontouml_to_alloy.validation.validator import ModelValidator

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=not verbose,
    ) as progress:
        # Step 1: Load document
        task = progress.add_task("Loading model...", total=None)
        project = load_project(input_file)
        progress.update(task, description="[green]✓ Loaded[/green]")

        # Step 2: Validate
        task = progress.add_task("Validating...", total=None)
        ModelValidator().validate_and_raise(project)
        progress.update(task, description="[green]✓ Validated[/green]")

        if verbose:
            console.print(f"  [dim]Classes: {len(project.model.get_all_classes())}[/dim]")
            console.print(f"  [dim]Relations: {len(project.model.get_all_relations())}[/dim]")

        # Step 3: Transform
        task = progress.add_task("Transforming to Alloy...", total=None)
        spec = OntoumlToAlloyTransformer().transform(project)
        progress.update(task, description="[green]✓ Transformed[/green]")

        if verbose:
            console.print(f"  [dim]World fields: {len(spec.world_fields)}[/dim]")
            console.print(f"  [dim]Facts: {len(spec.facts)}[/dim]")
            console.print(f"  [dim]Functions: {len(spec.functions)}[/dim]")

        # Step 4: Write
        writer = AlloyWriter(world_scope=worlds, scope=scope)
        if validate_only:
            task = progress.add_task("Serializing (dry run)...", total=None)
            text = writer.write_text(spec)
            progress.update(task, description="[green]✓ Serialized[/green]")
            console.print(
                f"\n[bold green]✓ Would write {len(text):,} characters to {output}[/bold green]\n"
            )
            if verbose:
                console.print(Syntax(text, "alloy", line_numbers=True))
        else:
            task = progress.add_task(f"Writing {output.name}...", total=None)
            writer.write(spec, output)
            progress.update(task, description="[green]✓ Written[/green]")

            file_size = output.stat().st_size
            console.print(f"\n[bold green]✓ Wrote {file_size:,} bytes to {output}[/bold green]\n")


@app.command()
def info(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Input JSON/YAML model to inspect.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ],
) -> None:
    """Display information about an OntoUML model file.

    Examples
    --------
        ontouml-to-alloy info model.json

    """
    try:
        project = load_project(input_file)
    except Exception as e:
        error_console.print(f"\n[bold red]✗ Failed to read file: {e}[/bold red]\n")
        raise typer.Exit(code=1) from None

    console.print(
        Panel.fit(
            f"[bold]OntoUML Model[/bold]\n" f"File: {input_file}",
            title="File Info",
        )
    )

    _print_summary(project)


if __name__ == "__main__":
    app()
