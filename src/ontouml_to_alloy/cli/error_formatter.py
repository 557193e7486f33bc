"""Rich renderings of source-model validation results.

Three layouts back ``validate --format``:

- ``text``: issues listed under the element they were found on
- ``table``: one row per issue
- ``tree``: issues nested by OntoUML element type, then element
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

from ontouml_to_alloy.validation.errors import ValidationSeverity

if TYPE_CHECKING:
    from ontouml_to_alloy.validation.errors import ValidationIssue, ValidationLocation, ValidationResult

SEVERITY_STYLES = {
    ValidationSeverity.ERROR: "red",
    ValidationSeverity.WARNING: "yellow",
}

# Group label for issues without a location
MODEL_GROUP = "Model"


def _styled_code(issue: ValidationIssue) -> str:
    style = SEVERITY_STYLES[issue.severity]
    return f"[{style} bold]{issue.code}[/{style} bold]"


def _counts(result: ValidationResult) -> str:
    parts = []
    if result.errors:
        parts.append(f"[red bold]{len(result.errors)} error(s)[/red bold]")
    if result.warnings:
        parts.append(f"[yellow]{len(result.warnings)} warning(s)[/yellow]")
    return ", ".join(parts)


def _by_element(issues: list[ValidationIssue]) -> dict[ValidationLocation | None, list[ValidationIssue]]:
    grouped: dict[ValidationLocation | None, list[ValidationIssue]] = {}
    for issue in issues:
        grouped.setdefault(issue.location, []).append(issue)
    return grouped


def _element_label(location: ValidationLocation | None) -> str:
    if location is None:
        return MODEL_GROUP
    label = f"[bold]{location.path}[/bold]"
    if location.element_type:
        label += f" [dim]{location.element_type}[/dim]"
    if location.element_id:
        label += f" [dim]#{location.element_id}[/dim]"
    return label


class ErrorFormatter:
    """Prints issues grouped by the element they concern.

    Elements holding errors come first; within an element, errors precede
    warnings.
    """

    def __init__(self, console: Console | None = None, show_context: bool = True) -> None:
        self.console = console or Console(stderr=True)
        self.show_context = show_context

    def format_validation_result(self, result: ValidationResult, source_path: Path | None = None) -> None:
        if not result.issues:
            self.console.print("[green]✓ Validation passed[/green]")
            return

        failed = not result.is_valid
        header = _counts(result)
        if source_path:
            header = f"[dim]{source_path}[/dim]\n{header}"
        self.console.print(
            Panel(
                header,
                title="Validation Failed" if failed else "Validation Warnings",
                border_style="red" if failed else "yellow",
            )
        )

        ordered = [*result.errors, *result.warnings]
        for location, issues in _by_element(ordered).items():
            self.console.print(_element_label(location))
            for issue in issues:
                self._print_issue(issue)
            self.console.print()

    def _print_issue(self, issue: ValidationIssue) -> None:
        self.console.print(f"  {_styled_code(issue)} {issue.message}")
        if self.show_context:
            for key, value in issue.context.items():
                self.console.print(f"      [dim]{key} = {value!r}[/dim]")
        if issue.suggestion:
            self.console.print(f"      [green]hint:[/green] {issue.suggestion}")


class ErrorTree:
    """Prints issues as a tree: element type, then element, then issue."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True)

    def print_result(self, result: ValidationResult) -> None:
        tree = Tree(f"[bold]Validation Issues[/bold] ({_counts(result) or 'none'})")

        by_type: dict[str, list[ValidationIssue]] = {}
        for issue in result.issues:
            element_type = issue.location.element_type if issue.location else None
            by_type.setdefault(element_type or MODEL_GROUP, []).append(issue)

        for element_type in sorted(by_type):
            type_node = tree.add(f"[cyan]{element_type}[/cyan]")
            for location, issues in _by_element(by_type[element_type]).items():
                element_node = type_node.add(_element_label(location))
                for issue in issues:
                    element_node.add(f"{_styled_code(issue)} {issue.message}")

        self.console.print(tree)


class ErrorTable:
    """Prints one table row per issue."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True)

    def print_result(self, result: ValidationResult) -> None:
        table = Table(title="Validation Issues")
        table.add_column("Code", no_wrap=True)
        table.add_column("Element")
        table.add_column("Type", style="cyan")
        table.add_column("Message")
        table.add_column("Hint", style="green")

        for issue in result.issues:
            location = issue.location
            table.add_row(
                _styled_code(issue),
                location.path if location else MODEL_GROUP,
                (location.element_type or "") if location else "",
                issue.message,
                issue.suggestion or "",
            )

        self.console.print(table)
