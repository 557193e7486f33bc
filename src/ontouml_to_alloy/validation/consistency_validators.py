"""Validators for model consistency checks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ontouml_to_alloy.models.elements import Class, Relation
from ontouml_to_alloy.transform.cardinality import CardinalityError, parse_cardinality
from ontouml_to_alloy.transform.naming import DEFAULT_NAMING_RULES, NamingRules
from ontouml_to_alloy.validation.base import BaseValidator
from ontouml_to_alloy.validation.errors import ErrorCodes, ValidationResult, element_path

if TYPE_CHECKING:
    from ontouml_to_alloy.models.elements import Package


class UniqueIdValidator(BaseValidator):
    """Validates that element ids are unique."""

    def validate(
        self,
        model: Package,
        result: ValidationResult,
    ) -> None:
        """Check for duplicate element ids."""
        seen: dict[str, str] = {}

        for element in model.get_all_contents():
            if element.id in seen:
                result.add_error(
                    code=ErrorCodes.E100_DUPLICATE_ID,
                    message=f"Duplicate id '{element.id}', already used by {seen[element.id]}",
                    element=element,
                    suggestion="References resolve to the first element with an id",
                )
            else:
                seen[element.id] = element_path(element)


class BinaryRelationValidator(BaseValidator):
    """Validates that relations have exactly two ends."""

    def validate(
        self,
        model: Package,
        result: ValidationResult,
    ) -> None:
        """Check relation arity."""
        for relation in model.get_all_relations():
            if not relation.is_binary():
                result.add_error(
                    code=ErrorCodes.E003_NON_BINARY_RELATION,
                    message=f"Relation has {len(relation.properties)} end(s), expected 2",
                    element=relation,
                    suggestion="Only binary relations can be transformed",
                )


class CardinalityFormatValidator(BaseValidator):
    """Validates cardinality text of all properties."""

    def validate(
        self,
        model: Package,
        result: ValidationResult,
    ) -> None:
        """Check that cardinalities parse."""
        for property_ in model.get_all_properties():
            try:
                parse_cardinality(property_.cardinality)
            except CardinalityError as e:
                result.add_error(
                    code=ErrorCodes.E300_INVALID_CARDINALITY,
                    message=str(e),
                    element=property_,
                    suggestion="Use forms like '1', '0..1', '1..*' or '2..5'",
                    cardinality=property_.cardinality,
                )


class DerivationValidator(BaseValidator):
    """Validates that derivations go from a relation to a class."""

    def validate(
        self,
        model: Package,
        result: ValidationResult,
    ) -> None:
        """Check derivation relation ends."""
        for relation in model.get_all_relations():
            if not relation.has_derivation_stereotype() or not relation.is_binary():
                continue

            source = relation.get_source()
            target = relation.get_target()
            if isinstance(source, Relation) and isinstance(target, Class):
                continue

            result.add_error(
                code=ErrorCodes.E004_INVALID_DERIVATION,
                message="Derivation must go from a material relation to a relator class",
                element=relation,
                source_type=type(source).__name__,
                target_type=type(target).__name__,
            )


class NameValidator(BaseValidator):
    """Warns about names that will change in the Alloy output."""

    def __init__(self, rules: NamingRules = DEFAULT_NAMING_RULES) -> None:
        """Initialize with the identifier grammar to check against.

        Args:
        ----
            rules: Naming rules used by the transformer.

        """
        self.rules = rules

    def validate(
        self,
        model: Package,
        result: ValidationResult,
    ) -> None:
        """Check names of classes, relations and properties."""
        named = [*model.get_all_classes(), *model.get_all_relations(), *model.get_all_properties()]

        for element in named:
            name = element.get_name()
            if name is None:
                if isinstance(element, Class):
                    result.add_warning(
                        code=ErrorCodes.W003_UNNAMED_CLASS,
                        message="Class has no name",
                        element=element,
                        suggestion="A name derived from the element type will be generated",
                    )
                continue

            stripped = self.rules.strip_forbidden(name)
            if stripped != name or self.rules.is_reserved(stripped) or stripped[:1].isdigit():
                result.add_warning(
                    code=ErrorCodes.W001_NAME_REWRITTEN,
                    message=f"Name '{name}' is not a valid Alloy identifier and will be rewritten",
                    element=element,
                    suggestion="Use letters, digits and underscores, starting with a letter",
                )

        by_name: dict[str, list[Class]] = {}
        for class_ in model.get_all_classes():
            if class_.get_name():
                by_name.setdefault(class_.get_name(), []).append(class_)
        for name, classes in by_name.items():
            if len(classes) > 1:
                # Reported on the first class that will receive a suffix
                result.add_warning(
                    code=ErrorCodes.W002_DUPLICATE_NAME,
                    message=f"{len(classes)} classes are named '{name}'; numeric suffixes will be added",
                    element=classes[1],
                )
