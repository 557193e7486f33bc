"""Validators for references between model elements."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ontouml_to_alloy.validation.base import BaseValidator
from ontouml_to_alloy.validation.errors import ErrorCodes, ValidationResult

if TYPE_CHECKING:
    from ontouml_to_alloy.models.elements import Package


class PropertyTypeReferenceValidator(BaseValidator):
    """Validates that every property is typed by an existing element."""

    def validate(
        self,
        model: Package,
        result: ValidationResult,
    ) -> None:
        """Check property type references of attributes and relation ends."""
        for property_ in model.get_all_properties():
            if property_.get_property_type() is not None:
                continue

            if property_.property_type is None:
                message = f"Property '{property_.name or ''}' has no type"
                suggestion = "Set 'propertyType' to the id of a class"
            else:
                message = (
                    f"Property '{property_.name or ''}' references unknown element "
                    f"'{property_.property_type.id}'"
                )
                suggestion = "Check that the referenced class or relation exists in the model"

            result.add_error(
                code=ErrorCodes.E001_UNRESOLVED_PROPERTY_TYPE,
                message=message,
                element=property_,
                suggestion=suggestion,
            )


class GeneralizationReferenceValidator(BaseValidator):
    """Validates generalization ends and generalization set members."""

    def validate(
        self,
        model: Package,
        result: ValidationResult,
    ) -> None:
        """Check that generalizations and sets point at existing elements."""
        for generalization in model.get_all_generalizations():
            for end, resolved in (
                ("general", generalization.get_general()),
                ("specific", generalization.get_specific()),
            ):
                if resolved is None:
                    result.add_error(
                        code=ErrorCodes.E002_UNRESOLVED_GENERALIZATION,
                        message=f"Generalization has no resolvable {end} element",
                        element=generalization,
                        suggestion=f"Set '{end}' to the id of a class or relation",
                    )

        for generalization_set in model.get_all_generalization_sets():
            missing = len(generalization_set.generalizations) - len(
                generalization_set.get_generalizations()
            )
            if missing:
                result.add_error(
                    code=ErrorCodes.E002_UNRESOLVED_GENERALIZATION,
                    message=f"Generalization set references {missing} unknown generalization(s)",
                    element=generalization_set,
                    suggestion="Check the ids listed in 'generalizations'",
                )
