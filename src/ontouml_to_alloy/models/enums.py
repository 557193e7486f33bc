"""Enumerations for OntoUML element kinds, stereotypes and natures."""

from __future__ import annotations

from enum import Enum


class OntoumlType(str, Enum):
    """Kind tag carried by every element in the interchange format."""

    PROJECT = "Project"
    PACKAGE = "Package"
    CLASS = "Class"
    RELATION = "Relation"
    PROPERTY = "Property"
    GENERALIZATION = "Generalization"
    GENERALIZATION_SET = "GeneralizationSet"
    LITERAL = "Literal"


class ClassStereotype(str, Enum):
    """OntoUML class stereotypes."""

    # Sortals
    KIND = "kind"
    SUBKIND = "subkind"
    ROLE = "role"
    PHASE = "phase"
    COLLECTIVE = "collective"
    QUANTITY = "quantity"
    RELATOR = "relator"
    QUALITY = "quality"
    MODE = "mode"
    HISTORICAL_ROLE = "historicalRole"

    # Non-sortals
    CATEGORY = "category"
    MIXIN = "mixin"
    ROLE_MIXIN = "roleMixin"
    PHASE_MIXIN = "phaseMixin"
    HISTORICAL_ROLE_MIXIN = "historicalRoleMixin"

    # Perdurants and higher-order
    EVENT = "event"
    SITUATION = "situation"
    TYPE = "type"

    # Values
    ABSTRACT = "abstract"
    DATATYPE = "datatype"
    ENUMERATION = "enumeration"


class RelationStereotype(str, Enum):
    """OntoUML relation stereotypes."""

    MATERIAL = "material"
    DERIVATION = "derivation"
    COMPARATIVE = "comparative"
    MEDIATION = "mediation"
    CHARACTERIZATION = "characterization"
    EXTERNAL_DEPENDENCE = "externalDependence"
    COMPONENT_OF = "componentOf"
    MEMBER_OF = "memberOf"
    SUB_COLLECTION_OF = "subCollectionOf"
    SUB_QUANTITY_OF = "subQuantityOf"
    INSTANTIATION = "instantiation"
    TERMINATION = "termination"
    PARTICIPATIONAL = "participational"
    PARTICIPATION = "participation"
    HISTORICAL_DEPENDENCE = "historicalDependence"
    CREATION = "creation"
    MANIFESTATION = "manifestation"
    BRINGS_ABOUT = "bringsAbout"
    TRIGGERS = "triggers"


class OntologicalNature(str, Enum):
    """Ontological natures a class may be restricted to."""

    FUNCTIONAL_COMPLEX = "functional-complex"
    COLLECTIVE = "collective"
    QUANTITY = "quantity"
    RELATOR = "relator"
    INTRINSIC_MODE = "intrinsic-mode"
    EXTRINSIC_MODE = "extrinsic-mode"
    QUALITY = "quality"
    EVENT = "event"
    SITUATION = "situation"
    TYPE = "type"
    ABSTRACT = "abstract"


class AggregationKind(str, Enum):
    """Aggregation kind of a property (relation end)."""

    NONE = "NONE"
    SHARED = "SHARED"
    COMPOSITE = "COMPOSITE"


RIGID_STEREOTYPES = frozenset(
    {
        ClassStereotype.KIND,
        ClassStereotype.SUBKIND,
        ClassStereotype.COLLECTIVE,
        ClassStereotype.QUANTITY,
        ClassStereotype.RELATOR,
        ClassStereotype.QUALITY,
        ClassStereotype.MODE,
        ClassStereotype.CATEGORY,
    }
)

ANTI_RIGID_STEREOTYPES = frozenset(
    {
        ClassStereotype.ROLE,
        ClassStereotype.PHASE,
        ClassStereotype.ROLE_MIXIN,
        ClassStereotype.PHASE_MIXIN,
        ClassStereotype.HISTORICAL_ROLE,
        ClassStereotype.HISTORICAL_ROLE_MIXIN,
    }
)

SEMI_RIGID_STEREOTYPES = frozenset({ClassStereotype.MIXIN})

# Sortals that supply an identity principle (kinds in the broad sense)
ULTIMATE_SORTAL_STEREOTYPES = frozenset(
    {
        ClassStereotype.KIND,
        ClassStereotype.COLLECTIVE,
        ClassStereotype.QUANTITY,
        ClassStereotype.RELATOR,
        ClassStereotype.QUALITY,
        ClassStereotype.MODE,
    }
)

SUBSTANTIAL_NATURES = frozenset(
    {
        OntologicalNature.FUNCTIONAL_COMPLEX,
        OntologicalNature.COLLECTIVE,
        OntologicalNature.QUANTITY,
    }
)

MOMENT_NATURES = frozenset(
    {
        OntologicalNature.RELATOR,
        OntologicalNature.INTRINSIC_MODE,
        OntologicalNature.EXTRINSIC_MODE,
        OntologicalNature.QUALITY,
    }
)

# Default nature implied by a stereotype when restrictedTo is not given
STEREOTYPE_DEFAULT_NATURE: dict[ClassStereotype, OntologicalNature] = {
    ClassStereotype.KIND: OntologicalNature.FUNCTIONAL_COMPLEX,
    ClassStereotype.COLLECTIVE: OntologicalNature.COLLECTIVE,
    ClassStereotype.QUANTITY: OntologicalNature.QUANTITY,
    ClassStereotype.RELATOR: OntologicalNature.RELATOR,
    ClassStereotype.QUALITY: OntologicalNature.QUALITY,
    ClassStereotype.MODE: OntologicalNature.INTRINSIC_MODE,
    ClassStereotype.EVENT: OntologicalNature.EVENT,
    ClassStereotype.SITUATION: OntologicalNature.SITUATION,
    ClassStereotype.TYPE: OntologicalNature.TYPE,
    ClassStereotype.ABSTRACT: OntologicalNature.ABSTRACT,
    ClassStereotype.DATATYPE: OntologicalNature.ABSTRACT,
    ClassStereotype.ENUMERATION: OntologicalNature.ABSTRACT,
}
