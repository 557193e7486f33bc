"""Shared test fixtures for model tests."""

from typing import Any

import pytest


@pytest.fixture
def person_class() -> dict[str, Any]:
    """Return a kind with one attribute typed by a datatype."""
    return {
        "type": "Class",
        "id": "person",
        "name": "Person",
        "stereotype": "kind",
        "restrictedTo": ["functional-complex"],
        "properties": [
            {
                "type": "Property",
                "id": "person.birth",
                "name": "birthDate",
                "propertyType": {"id": "date", "type": "Class"},
                "cardinality": "1",
                "isReadOnly": True,
            }
        ],
    }


@pytest.fixture
def date_class() -> dict[str, Any]:
    """Return a datatype class."""
    return {
        "type": "Class",
        "id": "date",
        "name": "Date",
        "stereotype": "datatype",
        "restrictedTo": ["abstract"],
    }


@pytest.fixture
def package_data(person_class: dict[str, Any], date_class: dict[str, Any]) -> dict[str, Any]:
    """Return a package with classes, a relation and a generalization."""
    return {
        "type": "Package",
        "id": "root",
        "name": "Model",
        "contents": [
            person_class,
            date_class,
            {
                "type": "Class",
                "id": "student",
                "name": "Student",
                "stereotype": "role",
            },
            {
                "type": "Package",
                "id": "nested",
                "name": "Nested",
                "contents": [
                    {
                        "type": "Class",
                        "id": "school",
                        "name": "School",
                        "stereotype": "kind",
                    },
                    {
                        "type": "Relation",
                        "id": "studies-at",
                        "name": "studiesAt",
                        "stereotype": "material",
                        "properties": [
                            {
                                "type": "Property",
                                "id": "studies-at.source",
                                "propertyType": {"id": "student", "type": "Class"},
                                "cardinality": "0..*",
                            },
                            {
                                "type": "Property",
                                "id": "studies-at.target",
                                "propertyType": {"id": "school", "type": "Class"},
                                "cardinality": "1",
                            },
                        ],
                    },
                ],
            },
            {
                "type": "Generalization",
                "id": "student-person",
                "general": {"id": "person", "type": "Class"},
                "specific": {"id": "student", "type": "Class"},
            },
            {
                "type": "GeneralizationSet",
                "id": "gs",
                "isDisjoint": True,
                "isComplete": False,
                "generalizations": [{"id": "student-person", "type": "Generalization"}],
            },
        ],
    }
