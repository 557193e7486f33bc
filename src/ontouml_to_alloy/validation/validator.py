"""Main validator combining all validation rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ontouml_to_alloy.models.project import Project
from ontouml_to_alloy.validation.base import CompositeValidator
from ontouml_to_alloy.validation.consistency_validators import (
    BinaryRelationValidator,
    CardinalityFormatValidator,
    DerivationValidator,
    NameValidator,
    UniqueIdValidator,
)
from ontouml_to_alloy.validation.errors import ValidationResult, ValidationSeverity
from ontouml_to_alloy.validation.reference_validators import (
    GeneralizationReferenceValidator,
    PropertyTypeReferenceValidator,
)

if TYPE_CHECKING:
    from ontouml_to_alloy.models.elements import Package


class ModelValidator:
    """Main validator for OntoUML models.

    Combines reference validators (for cross-reference checks) and
    consistency validators (for structural checks). Only the source
    model is checked; nothing here looks at the generated Alloy.
    """

    def __init__(self, strict: bool = False) -> None:
        """Initialize validator.

        Args:
        ----
            strict: If True, treat warnings as errors.

        """
        self.strict = strict
        self._validator = CompositeValidator(
            [
                # Reference validators
                PropertyTypeReferenceValidator(),
                GeneralizationReferenceValidator(),
                # Consistency validators
                UniqueIdValidator(),
                BinaryRelationValidator(),
                CardinalityFormatValidator(),
                DerivationValidator(),
                NameValidator(),
            ]
        )

    def validate(self, model: Project | Package) -> ValidationResult:
        """Validate a project or its root package.

        Args:
        ----
            model: The model to validate.

        Returns:
        -------
            ValidationResult with all issues found.

        """
        package = model.model if isinstance(model, Project) else model
        result = ValidationResult()
        self._validator.validate(package, result)
        return result

    def validate_and_raise(self, model: Project | Package) -> None:
        """Validate and raise exception if invalid.

        Args:
        ----
            model: The model to validate.

        Raises:
        ------
            ValidationError: If validation fails.

        """
        result = self.validate(model)

        if not result.is_valid:
            raise ValidationError(result)

        if self.strict and result.warnings:
            raise ValidationError(result)


class ValidationError(Exception):
    """Raised when validation fails."""

    def __init__(self, result: ValidationResult) -> None:
        """Initialize with validation result.

        Args:
        ----
            result: The validation result containing issues.

        """
        self.result = result
        error_count = len(result.errors)
        warning_count = len(result.warnings)

        parts = []
        if error_count:
            parts.append(f"{error_count} error(s)")
        if warning_count:
            parts.append(f"{warning_count} warning(s)")

        message = f"Validation failed: {', '.join(parts)}"
        super().__init__(message)

    def format_issues(self) -> str:
        """Format all issues as a string.

        Returns
        -------
            Formatted string with all issues.

        """
        lines = []

        for issue in self.result.errors:
            lines.append(f"ERROR: {issue}")

        for issue in self.result.warnings:
            lines.append(f"WARNING: {issue}")

        return "\n".join(lines)

    @property
    def errors_only(self) -> list[str]:
        """Get only error messages.

        Returns
        -------
            List of error message strings.

        """
        return [
            str(issue) for issue in self.result.issues if issue.severity == ValidationSeverity.ERROR
        ]
