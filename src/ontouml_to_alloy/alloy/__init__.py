"""Alloy target representation.

The transformation does not build an Alloy syntax tree. It collects
self-contained text fragments (fields, facts, functions, signatures) in an
AlloySpecification, which the writer assembles into a module:

1. World-indexed field declarations and World constraints
2. Named fact blocks and accessor functions
3. Datatype and enumeration signatures
4. Visible selectors for the default visualization
"""

from ontouml_to_alloy.alloy.fragments import (
    INDENT,
    AlloyDatatype,
    AlloyEnum,
    AlloyFact,
    AlloyFunction,
)
from ontouml_to_alloy.alloy.specification import AlloySpecification

__all__ = [
    "INDENT",
    "AlloyDatatype",
    "AlloyEnum",
    "AlloyFact",
    "AlloyFunction",
    "AlloySpecification",
]
