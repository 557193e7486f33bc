"""Map pipeline failures to Rich error output and exit code 1.

Each stage of the conversion fails with its own exception type:

- LoaderError: the file cannot be read or parsed
- pydantic ValidationError: the file does not match the interchange format
- ValidationError: the model breaks a source-model rule
- ModelShapeError / CardinalityError: the transformer hit a defect that
  validation was skipped for
"""

from __future__ import annotations

import traceback
from collections.abc import Callable
from functools import wraps
from typing import TypeVar

import typer
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.panel import Panel

from ontouml_to_alloy.models.elements import ModelShapeError
from ontouml_to_alloy.models.loader import LoaderError
from ontouml_to_alloy.transform.cardinality import CardinalityError
from ontouml_to_alloy.validation.validator import ValidationError

T = TypeVar("T")

console = Console(stderr=True)

# (exception types, panel title, hint) for failures shown as a single panel
_PANELS: tuple[tuple[tuple[type[BaseException], ...], str, str], ...] = (
    ((LoaderError,), "Cannot Read Model", "Check the path and that the file is JSON or YAML."),
    (
        (ModelShapeError, CardinalityError),
        "Cannot Transform Model",
        "Run 'validate' to list every problem in the model.",
    ),
    ((PermissionError,), "Permission Denied", "Check file permissions and try again."),
)


def handle_exceptions(
    verbose: bool = False,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Decorate a command so pipeline errors end in exit code 1.

    With ``verbose`` the traceback of unexpected errors is printed too.
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args: object, **kwargs: object) -> T:
            try:
                return func(*args, **kwargs)
            except ValidationError as e:
                _print_rule_violations(e)
            except PydanticValidationError as e:
                _print_schema_errors(e, verbose)
            except Exception as e:
                _print_panel(e, verbose)
            raise typer.Exit(1)

        return wrapper

    return decorator


def _print_rule_violations(error: ValidationError) -> None:
    from ontouml_to_alloy.cli.error_formatter import ErrorFormatter

    ErrorFormatter(console).format_validation_result(error.result)


def _print_schema_errors(error: PydanticValidationError, verbose: bool) -> None:
    from ontouml_to_alloy.cli.pydantic_errors import (
        format_pydantic_location,
        get_suggestion_for_error,
        translate_pydantic_error,
    )

    console.print("[red bold]Schema Validation Failed[/red bold]\n")
    for err in error.errors():
        console.print(f"[red]✗[/red] {format_pydantic_location(err['loc']) or '<root>'}")
        console.print(f"  {translate_pydantic_error(err)} [dim]({err['type']})[/dim]")
        suggestion = get_suggestion_for_error(err)
        if suggestion:
            console.print(f"  [green]hint:[/green] {suggestion}")

    if verbose:
        console.print(f"\n[dim]{error}[/dim]")


def _print_panel(error: Exception, verbose: bool) -> None:
    title, hint = "Unexpected Error", "Use --verbose for the full traceback."
    for types, panel_title, panel_hint in _PANELS:
        if isinstance(error, types):
            title, hint = panel_title, panel_hint
            break

    message = str(error)
    if isinstance(error, PermissionError):
        message = f"Permission denied: {error.filename or 'unknown'}"

    console.print(Panel(f"[red]{message}[/red]\n\n{hint}", title=title, border_style="red"))
    if verbose:
        console.print(f"\n[dim]{traceback.format_exc()}[/dim]")
