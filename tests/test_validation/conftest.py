"""Shared test fixtures for validation tests."""

import pytest

from ontouml_to_alloy.models import Package, Project
from ontouml_to_alloy.validation import ValidationResult
from tests.fixtures.sample_models import BROKEN_PROJECT, CAR_RENTAL_PROJECT


@pytest.fixture
def result() -> ValidationResult:
    """Return an empty validation result."""
    return ValidationResult()


@pytest.fixture
def package() -> Package:
    """Return an empty root package."""
    return Package(name="Model")


@pytest.fixture
def car_rental() -> Project:
    """Return the parsed car rental project."""
    return Project.model_validate(CAR_RENTAL_PROJECT)


@pytest.fixture
def broken() -> Project:
    """Return a project with an unresolved type and a bad cardinality."""
    return Project.model_validate(BROKEN_PROJECT)
