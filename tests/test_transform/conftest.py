"""Shared test fixtures for transform tests."""

import pytest

from ontouml_to_alloy.models import (
    Class,
    ClassStereotype,
    OntologicalNature,
    Package,
    Relation,
    RelationStereotype,
)
from ontouml_to_alloy.transform.context import TransformationContext


@pytest.fixture
def package() -> Package:
    """Return an empty root package."""
    return Package(name="Model")


@pytest.fixture
def context(package: Package) -> TransformationContext:
    """Return a fresh transformation context over the package fixture."""
    return TransformationContext(model=package)


@pytest.fixture
def person(package: Package) -> Class:
    """Return a kind named Person."""
    return package.create_kind("Person")


@pytest.fixture
def text(package: Package) -> Class:
    """Return a datatype named Text."""
    return package.create_datatype("Text")


@pytest.fixture
def rental(package: Package) -> dict[str, Class | Relation]:
    """Return a relator with two mediations and a derived material relation."""
    customer = package.create_kind("Customer")
    car = package.create_kind("Car")
    relator = package.create_class("Rental", ClassStereotype.RELATOR, [OntologicalNature.RELATOR])

    involves_customer = package.create_binary_relation(
        relator, customer, "involvesCustomer", RelationStereotype.MEDIATION, "1..*", "1"
    )
    involves_car = package.create_binary_relation(
        relator, car, "involvesCar", RelationStereotype.MEDIATION, "1..*", "1"
    )
    rents = package.create_binary_relation(
        customer, car, "rents", RelationStereotype.MATERIAL, "1..*", "0..*"
    )
    derivation = package.create_binary_relation(rents, relator, stereotype=RelationStereotype.DERIVATION)

    return {
        "customer": customer,
        "car": car,
        "relator": relator,
        "involves_customer": involves_customer,
        "involves_car": involves_car,
        "rents": rents,
        "derivation": derivation,
    }
