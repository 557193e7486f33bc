"""Tests for consistency validators."""

import pytest

from ontouml_to_alloy.models import Package, Project, Property, RelationStereotype
from ontouml_to_alloy.transform.naming import NamingRules
from ontouml_to_alloy.validation import ErrorCodes, ValidationResult
from ontouml_to_alloy.validation.consistency_validators import (
    BinaryRelationValidator,
    CardinalityFormatValidator,
    DerivationValidator,
    NameValidator,
    UniqueIdValidator,
)


class TestUniqueIdValidator:
    """Tests for UniqueIdValidator."""

    def test_unique(self, car_rental: Project, result: ValidationResult) -> None:
        """Test a model without duplicate ids."""
        UniqueIdValidator().validate(car_rental.model, result)
        assert result.issues == []

    def test_duplicate(self, result: ValidationResult) -> None:
        """Test duplicate ids are reported once per extra element."""
        package = Package.model_validate(
            {
                "type": "Package",
                "contents": [
                    {"type": "Class", "id": "c1", "name": "Person"},
                    {"type": "Class", "id": "c1", "name": "Car"},
                ],
            }
        )
        UniqueIdValidator().validate(package, result)

        assert len(result.errors) == 1
        assert result.errors[0].code == ErrorCodes.E100_DUPLICATE_ID
        assert "Person" in result.errors[0].message


class TestBinaryRelationValidator:
    """Tests for BinaryRelationValidator."""

    def test_binary(self, car_rental: Project, result: ValidationResult) -> None:
        """Test binary relations pass."""
        BinaryRelationValidator().validate(car_rental.model, result)
        assert result.is_valid

    def test_ternary(self, package: Package, result: ValidationResult) -> None:
        """Test relations with three ends fail."""
        person = package.create_kind("Person")
        relation = package.create_binary_relation(person, person, "among")
        relation.properties.append(Property())

        BinaryRelationValidator().validate(package, result)
        assert result.errors[0].code == ErrorCodes.E003_NON_BINARY_RELATION
        assert "3 end(s)" in result.errors[0].message


class TestCardinalityFormatValidator:
    """Tests for CardinalityFormatValidator."""

    def test_valid(self, car_rental: Project, result: ValidationResult) -> None:
        """Test well-formed cardinalities."""
        CardinalityFormatValidator().validate(car_rental.model, result)
        assert result.is_valid

    def test_malformed(self, broken: Project, result: ValidationResult) -> None:
        """Test malformed cardinalities keep the offending text as context."""
        CardinalityFormatValidator().validate(broken.model, result)

        issue = result.errors[0]
        assert issue.code == ErrorCodes.E300_INVALID_CARDINALITY
        assert issue.context == {"cardinality": "one or two"}

    def test_inverted_bounds(self, package: Package, result: ValidationResult) -> None:
        """Test lower bounds above upper bounds."""
        person = package.create_kind("Person")
        person.create_attribute(package.create_datatype("Text"), "name", "3..1")
        CardinalityFormatValidator().validate(package, result)
        assert "exceeds" in result.errors[0].message


class TestDerivationValidator:
    """Tests for DerivationValidator."""

    def test_valid(self, car_rental: Project, result: ValidationResult) -> None:
        """Test a derivation from a material relation to a relator."""
        DerivationValidator().validate(car_rental.model, result)
        assert result.is_valid

    def test_between_classes(self, package: Package, result: ValidationResult) -> None:
        """Test derivations between classes are rejected."""
        person = package.create_kind("Person")
        package.create_binary_relation(person, person, stereotype=RelationStereotype.DERIVATION)

        DerivationValidator().validate(package, result)
        issue = result.errors[0]
        assert issue.code == ErrorCodes.E004_INVALID_DERIVATION
        assert issue.context == {"source_type": "Class", "target_type": "Class"}


class TestNameValidator:
    """Tests for NameValidator."""

    def test_rewritten_name(self, car_rental: Project, result: ValidationResult) -> None:
        """Test names with forbidden characters produce a warning."""
        NameValidator().validate(car_rental.model, result)

        assert result.is_valid
        assert [issue.code for issue in result.warnings] == [ErrorCodes.W001_NAME_REWRITTEN]
        assert "Car Rental" in result.warnings[0].message

    @pytest.mark.parametrize("name", ["sig", "1st", "a-b"])
    def test_rewritten_variants(self, package: Package, result: ValidationResult, name: str) -> None:
        """Test reserved, digit-leading and stripped names."""
        package.create_kind(name)
        NameValidator().validate(package, result)
        assert result.warnings[0].code == ErrorCodes.W001_NAME_REWRITTEN

    def test_unnamed_class(self, package: Package, result: ValidationResult) -> None:
        """Test unnamed classes produce a warning, unnamed ends do not."""
        unnamed = package.create_kind()
        package.create_binary_relation(unnamed, unnamed, "self")

        NameValidator().validate(package, result)
        assert [issue.code for issue in result.warnings] == [ErrorCodes.W003_UNNAMED_CLASS]

    def test_duplicate_names(self, package: Package, result: ValidationResult) -> None:
        """Test same-named classes produce one warning."""
        package.create_kind("Person")
        renamed = package.create_kind("Person")

        NameValidator().validate(package, result)
        assert [issue.code for issue in result.warnings] == [ErrorCodes.W002_DUPLICATE_NAME]
        assert "2 classes" in result.warnings[0].message
        assert result.warnings[0].location.element_id == renamed.id

    def test_custom_rules(self, package: Package, result: ValidationResult) -> None:
        """Test the validator uses the given naming rules."""
        package.create_kind("Person")
        NameValidator(NamingRules(reserved_keywords=frozenset({"Person"}))).validate(package, result)
        assert result.warnings[0].code == ErrorCodes.W001_NAME_REWRITTEN
