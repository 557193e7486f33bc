"""Validation module for OntoUML models."""

from ontouml_to_alloy.validation.errors import (
    ErrorCodes,
    ValidationIssue,
    ValidationLocation,
    ValidationResult,
    ValidationSeverity,
)
from ontouml_to_alloy.validation.validator import (
    ModelValidator,
    ValidationError,
)

__all__ = [
    "ErrorCodes",
    "ModelValidator",
    "ValidationError",
    "ValidationIssue",
    "ValidationLocation",
    "ValidationResult",
    "ValidationSeverity",
]
