"""Base validator class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ontouml_to_alloy.validation.errors import ValidationResult

if TYPE_CHECKING:
    from ontouml_to_alloy.models.elements import Package


class BaseValidator(ABC):
    """Base class for validators."""

    @abstractmethod
    def validate(
        self,
        model: Package,
        result: ValidationResult,
    ) -> None:
        """Validate the model and add issues to result.

        Args:
        ----
            model: The root package to validate.
            result: The result object to add issues to.

        """
        ...


class CompositeValidator(BaseValidator):
    """Combines multiple validators."""

    def __init__(self, validators: list[BaseValidator] | None = None) -> None:
        """Initialize with optional list of validators.

        Args:
        ----
            validators: List of validators to combine.

        """
        self.validators = validators or []

    def add(self, validator: BaseValidator) -> None:
        """Add a validator.

        Args:
        ----
            validator: Validator to add.

        """
        self.validators.append(validator)

    def validate(
        self,
        model: Package,
        result: ValidationResult,
    ) -> None:
        """Run all validators.

        Args:
        ----
            model: The root package to validate.
            result: The result object to add issues to.

        """
        for validator in self.validators:
            validator.validate(model, result)
