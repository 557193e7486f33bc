"""Validation issue types.

Issues are always attached to a model element, so every location carries
the element's dotted name path, its id and its OntoUML type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ontouml_to_alloy.models.elements import OntoumlElement


class ValidationSeverity(Enum):
    """Severity level for validation issues."""

    ERROR = "error"
    WARNING = "warning"


def element_path(element: OntoumlElement) -> str:
    """Build a dotted path of names from the root package to an element.

    Unnamed elements are shown by type. The root package is omitted.
    """
    parts: list[str] = []
    current: OntoumlElement | None = element
    while current is not None and current.container is not None:
        parts.append(current.get_name() or f"<{current.type}>")
        current = current.container
    return ".".join(reversed(parts)) or (element.get_name() or f"<{element.type}>")


@dataclass(frozen=True)
class ValidationLocation:
    """Model element an issue was found on."""

    path: str
    element_id: str | None = None
    element_type: str | None = None

    @classmethod
    def of(cls, element: OntoumlElement) -> ValidationLocation:
        """Locate an issue on ``element``."""
        return cls(element_path(element), element.id, element.type)

    def __str__(self) -> str:
        if self.element_id is not None:
            return f"{self.path} (id {self.element_id})"
        return self.path


@dataclass(frozen=True)
class ValidationIssue:
    """A single validation issue.

    Attributes
    ----------
        code: Rule code, ``E`` for errors and ``W`` for warnings.
        message: What is wrong with the element.
        severity: Whether the issue blocks the transformation.
        location: The offending element.
        suggestion: How to fix the model, if known.
        context: Offending values (cardinality text, end types).

    """

    code: str
    message: str
    severity: ValidationSeverity
    location: ValidationLocation | None = None
    suggestion: str | None = None
    context: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        text = f"[{self.code}] {self.message}"
        if self.location:
            text = f"{self.location}: {text}"
        if self.suggestion:
            text += f" (hint: {self.suggestion})"
        return text


@dataclass
class ValidationResult:
    """Issues collected by one validation run."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    @property
    def is_valid(self) -> bool:
        """True when only warnings were found."""
        return not self.errors

    def add_error(
        self,
        code: str,
        message: str,
        element: OntoumlElement,
        suggestion: str | None = None,
        **context: Any,
    ) -> None:
        """Record an error on ``element``; extra keywords become context."""
        self._report(ValidationSeverity.ERROR, code, message, element, suggestion, context)

    def add_warning(
        self,
        code: str,
        message: str,
        element: OntoumlElement,
        suggestion: str | None = None,
        **context: Any,
    ) -> None:
        """Record a warning on ``element``; extra keywords become context."""
        self._report(ValidationSeverity.WARNING, code, message, element, suggestion, context)

    def _report(
        self,
        severity: ValidationSeverity,
        code: str,
        message: str,
        element: OntoumlElement,
        suggestion: str | None,
        context: dict[str, Any],
    ) -> None:
        self.issues.append(
            ValidationIssue(
                code=code,
                message=message,
                severity=severity,
                location=ValidationLocation.of(element),
                suggestion=suggestion,
                context=context,
            )
        )


class ErrorCodes:
    """Codes of the source-model rules."""

    # E0xx - Unresolved references and unsupported shapes
    E001_UNRESOLVED_PROPERTY_TYPE = "E001"
    E002_UNRESOLVED_GENERALIZATION = "E002"
    E003_NON_BINARY_RELATION = "E003"
    E004_INVALID_DERIVATION = "E004"

    # E1xx - Identity
    E100_DUPLICATE_ID = "E100"

    # E3xx - Cardinality text
    E300_INVALID_CARDINALITY = "E300"

    # W0xx - Names rewritten by the transformation
    W001_NAME_REWRITTEN = "W001"
    W002_DUPLICATE_NAME = "W002"
    W003_UNNAMED_CLASS = "W003"
