"""Transformation from OntoUML models to Alloy fragments.

This module provides:
- OntoumlToAlloyTransformer: Main transformer class
- NameRegistry / NamingRules: Identifier normalization and aliases
- Cardinality helpers: Multiplicity to keyword translation
- Per-element transformers for classes, relations, properties and
  generalizations
"""

from ontouml_to_alloy.transform.cardinality import (
    Cardinality,
    CardinalityError,
    get_cardinality_keyword,
    get_custom_cardinality,
    is_custom_cardinality,
    parse_cardinality,
)
from ontouml_to_alloy.transform.context import TransformationContext
from ontouml_to_alloy.transform.naming import (
    DEFAULT_NAMING_RULES,
    FORBIDDEN_CHARACTERS,
    RESERVED_KEYWORDS,
    NameRegistry,
    NamingRules,
)
from ontouml_to_alloy.transform.property_transformer import (
    PropertyCategory,
    classify_property,
    transform_property,
)
from ontouml_to_alloy.transform.queries import (
    get_derivation_relator,
    get_ternary_relator,
    holds_between_datatypes,
    is_material_connected_to_derivation,
)
from ontouml_to_alloy.transform.transformer import OntoumlToAlloyTransformer

__all__ = [
    "Cardinality",
    "CardinalityError",
    "DEFAULT_NAMING_RULES",
    "FORBIDDEN_CHARACTERS",
    "NameRegistry",
    "NamingRules",
    "OntoumlToAlloyTransformer",
    "PropertyCategory",
    "RESERVED_KEYWORDS",
    "TransformationContext",
    "classify_property",
    "get_cardinality_keyword",
    "get_custom_cardinality",
    "get_derivation_relator",
    "get_ternary_relator",
    "holds_between_datatypes",
    "is_custom_cardinality",
    "is_material_connected_to_derivation",
    "parse_cardinality",
    "transform_property",
]
