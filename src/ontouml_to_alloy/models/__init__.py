"""Pydantic models for the OntoUML JSON/YAML interchange format.

These models are used for:

- Parsing and validating OntoUML project files
- Type-safe navigation of classes, relations, properties and generalizations
- Building models programmatically (tests, callers embedding the library)

Primary Entry Points:
    load_project(path): Load and validate a JSON/YAML file
    validate_project_file(path): Validate and return list of errors
    Project: Root model for the entire document

Example:
-------
    >>> from ontouml_to_alloy.models import load_project
    >>> project = load_project("car-rental.json")
    >>> print(f"Classes: {len(project.model.get_all_classes())}")

Model Hierarchy:
    Project (root)
    └── Package
        ├── Package (nested)
        ├── Class
        │   ├── Property (attributes)
        │   └── EnumerationLiteral
        ├── Relation
        │   └── Property (source end, target end)
        ├── Generalization
        └── GeneralizationSet


"""

from ontouml_to_alloy.models.common import (
    CardinalityText,
    MultilingualText,
    parse_cardinality_text,
    parse_multilingual_text,
)
from ontouml_to_alloy.models.elements import (
    Class,
    EnumerationLiteral,
    Generalization,
    GeneralizationSet,
    ModelShapeError,
    OntoumlElement,
    OntoumlReference,
    Package,
    Property,
    Relation,
)
from ontouml_to_alloy.models.enums import (
    AggregationKind,
    ClassStereotype,
    OntologicalNature,
    OntoumlType,
    RelationStereotype,
)
from ontouml_to_alloy.models.loader import (
    LoaderError,
    load_project,
    load_yaml_file,
    validate_project_file,
)
from ontouml_to_alloy.models.project import Project

__all__ = [
    # Common types
    "CardinalityText",
    "MultilingualText",
    "parse_cardinality_text",
    "parse_multilingual_text",
    # Enumerations
    "AggregationKind",
    "ClassStereotype",
    "OntologicalNature",
    "OntoumlType",
    "RelationStereotype",
    # Elements
    "Class",
    "EnumerationLiteral",
    "Generalization",
    "GeneralizationSet",
    "ModelShapeError",
    "OntoumlElement",
    "OntoumlReference",
    "Package",
    "Property",
    "Relation",
    "Project",
    # Loader utilities
    "LoaderError",
    "load_project",
    "load_yaml_file",
    "validate_project_file",
]
