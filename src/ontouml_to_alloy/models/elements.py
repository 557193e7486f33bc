"""Models for OntoUML model elements.

Elements are parsed from the OntoUML JSON interchange format. After a
package is validated, references (property types, generalization ends)
are resolved against the package contents and every element receives a
back-reference to its container.

Elements compare and hash by identity: two classes with the same name are
still two different elements.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Annotated, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PrivateAttr, model_validator

from ontouml_to_alloy.models.common import (
    CardinalityText,
    MultilingualText,
    new_element_id,
    none_to_empty_list,
)
from ontouml_to_alloy.models.enums import (
    ANTI_RIGID_STEREOTYPES,
    MOMENT_NATURES,
    RIGID_STEREOTYPES,
    SEMI_RIGID_STEREOTYPES,
    STEREOTYPE_DEFAULT_NATURE,
    SUBSTANTIAL_NATURES,
    ULTIMATE_SORTAL_STEREOTYPES,
    AggregationKind,
    ClassStereotype,
    OntologicalNature,
    OntoumlType,
    RelationStereotype,
)


class ModelShapeError(Exception):
    """Raised when the model structure cannot be navigated as required."""


class OntoumlReference(BaseModel):
    """Reference to another element by id.

    Example:
    -------
        ```json
        {"id": "k1", "type": "Class"}
        ```

    """

    model_config = ConfigDict(extra="ignore")

    id: str
    type: OntoumlType | None = None


class OntoumlElement(BaseModel):
    """Base class of all OntoUML elements."""

    model_config = ConfigDict(
        # Allow population by field name AND alias
        populate_by_name=True,
        # Interchange files carry diagram/layout data we do not need
        extra="ignore",
    )

    type: str
    id: Annotated[str, Field(default_factory=new_element_id)]
    name: Annotated[MultilingualText, Field(default=None)]
    description: Annotated[MultilingualText, Field(default=None)]

    _container: OntoumlElement | None = PrivateAttr(default=None)

    def __eq__(self, other: object) -> bool:
        """Compare by identity."""
        return self is other

    def __hash__(self) -> int:
        """Hash by identity so elements can key dictionaries."""
        return id(self)

    @property
    def container(self) -> OntoumlElement | None:
        """The element that owns this one (None for a root package)."""
        return self._container

    def get_name(self) -> str | None:
        """Return the element name, treating an empty string as no name."""
        return self.name or None

    def _resolve(self, index: dict[str, OntoumlElement]) -> None:
        """Resolve id references against the model index."""

    def _children(self) -> Iterator[OntoumlElement]:
        """Yield directly owned elements."""
        yield from ()


class EnumerationLiteral(OntoumlElement):
    """A literal of an enumeration class."""

    type: Literal["Literal"] = "Literal"


class Property(OntoumlElement):
    """An attribute of a class or an end of a relation.

    Example:
    -------
        ```json
        {
          "type": "Property",
          "name": "birthDate",
          "propertyType": {"id": "dt1", "type": "Class"},
          "cardinality": "1",
          "isReadOnly": true
        }
        ```

    """

    type: Literal["Property"] = "Property"
    property_type: Annotated[
        OntoumlReference | None,
        Field(default=None, alias="propertyType", description="Reference to the type"),
    ]
    cardinality: Annotated[CardinalityText, Field(default=None)]
    is_ordered: Annotated[bool, Field(default=False, alias="isOrdered")]
    is_read_only: Annotated[bool, Field(default=False, alias="isReadOnly")]
    is_derived: Annotated[bool, Field(default=False, alias="isDerived")]
    aggregation_kind: Annotated[
        AggregationKind | None,
        Field(default=None, alias="aggregationKind"),
    ]
    stereotype: str | None = None

    _type_element: Class | Relation | None = PrivateAttr(default=None)

    def get_property_type(self) -> Class | Relation | None:
        """Return the resolved type of this property."""
        return self._type_element

    def set_property_type(self, element: Class | Relation) -> None:
        """Point this property at a type element."""
        self.property_type = OntoumlReference(id=element.id, type=OntoumlType(element.type))
        self._type_element = element

    def is_attribute(self) -> bool:
        """Check whether this property is owned by a class."""
        return isinstance(self._container, Class)

    def is_relation_end(self) -> bool:
        """Check whether this property is an end of a relation."""
        return isinstance(self._container, Relation)

    def get_opposite_end(self) -> Property:
        """Return the other end of the owning relation.

        Raises
        ------
            ModelShapeError: If this property is not an end of a binary relation.

        """
        relation = self._container
        if not isinstance(relation, Relation):
            raise ModelShapeError(f"Property '{self.name}' ({self.id}) is not a relation end")

        source_end = relation.get_source_end()
        return relation.get_target_end() if source_end is self else source_end

    def _resolve(self, index: dict[str, OntoumlElement]) -> None:
        if self.property_type is None:
            self._type_element = None
            return

        element = index.get(self.property_type.id)
        self._type_element = element if isinstance(element, (Class, Relation)) else None


class Class(OntoumlElement):
    """An OntoUML class.

    Example:
    -------
        ```json
        {
          "type": "Class",
          "name": "Person",
          "stereotype": "kind",
          "restrictedTo": ["functional-complex"],
          "properties": []
        }
        ```

    """

    type: Literal["Class"] = "Class"
    stereotype: ClassStereotype | None = None
    restricted_to: Annotated[
        list[OntologicalNature],
        BeforeValidator(none_to_empty_list),
        Field(default_factory=list, alias="restrictedTo"),
    ]
    is_abstract: Annotated[bool, Field(default=False, alias="isAbstract")]
    properties: Annotated[
        list[Property],
        BeforeValidator(none_to_empty_list),
        Field(default_factory=list, description="Attributes of the class"),
    ]
    literals: Annotated[
        list[EnumerationLiteral],
        BeforeValidator(none_to_empty_list),
        Field(default_factory=list, description="Literals of an enumeration"),
    ]

    def has_datatype_stereotype(self) -> bool:
        """Check for the datatype stereotype."""
        return self.stereotype == ClassStereotype.DATATYPE

    def has_enumeration_stereotype(self) -> bool:
        """Check for the enumeration stereotype."""
        return self.stereotype == ClassStereotype.ENUMERATION

    def has_rigid_stereotype(self) -> bool:
        """Check for a rigid stereotype (kind, subkind, category, ...)."""
        return self.stereotype in RIGID_STEREOTYPES

    def has_anti_rigid_stereotype(self) -> bool:
        """Check for an anti-rigid stereotype (role, phase, ...)."""
        return self.stereotype in ANTI_RIGID_STEREOTYPES

    def has_semi_rigid_stereotype(self) -> bool:
        """Check for a semi-rigid stereotype (mixin)."""
        return self.stereotype in SEMI_RIGID_STEREOTYPES

    def is_ultimate_sortal(self) -> bool:
        """Check whether the class provides an identity principle."""
        return self.stereotype in ULTIMATE_SORTAL_STEREOTYPES

    def get_natures(self) -> list[OntologicalNature]:
        """Return the natures the class is restricted to.

        Falls back to the nature implied by the stereotype when the
        class does not list any.
        """
        if self.restricted_to:
            return list(self.restricted_to)

        if self.stereotype in STEREOTYPE_DEFAULT_NATURE:
            return [STEREOTYPE_DEFAULT_NATURE[self.stereotype]]

        return []

    def get_nature_signature(self) -> str:
        """Return the base signature instances of this class belong to.

        Returns
        -------
            "Object" for substantials, "Aspect" for moments and
            "Endurant" when natures are mixed or unknown.

        """
        natures = set(self.get_natures())
        if natures and natures <= SUBSTANTIAL_NATURES:
            return "Object"
        if natures and natures <= MOMENT_NATURES:
            return "Aspect"
        return "Endurant"

    def create_attribute(
        self,
        property_type: Class,
        name: str | None = None,
        cardinality: str | None = None,
        is_ordered: bool = False,
        is_read_only: bool = False,
    ) -> Property:
        """Create an attribute owned by this class.

        Args:
        ----
            property_type: The class typing the attribute.
            name: Attribute name.
            cardinality: Multiplicity such as "1" or "0..*".
            is_ordered: Whether values form a sequence.
            is_read_only: Whether the value is immutable.

        Returns:
        -------
            The new attribute.

        """
        attribute = Property(
            name=name,
            cardinality=cardinality,
            is_ordered=is_ordered,
            is_read_only=is_read_only,
        )
        attribute.set_property_type(property_type)
        attribute._container = self
        self.properties.append(attribute)
        return attribute

    def _children(self) -> Iterator[OntoumlElement]:
        yield from self.properties
        yield from self.literals


class Relation(OntoumlElement):
    """An OntoUML relation between two classes (or a relation and a class).

    The first property is the source end, the second the target end.
    """

    type: Literal["Relation"] = "Relation"
    stereotype: RelationStereotype | None = None
    properties: Annotated[
        list[Property],
        BeforeValidator(none_to_empty_list),
        Field(default_factory=list, description="Relation ends (source, target)"),
    ]

    def is_binary(self) -> bool:
        """Check whether the relation has exactly two ends."""
        return len(self.properties) == 2

    def get_source_end(self) -> Property:
        """Return the source end.

        Raises
        ------
            ModelShapeError: If the relation has no ends.

        """
        if not self.properties:
            raise ModelShapeError(f"Relation '{self.name}' ({self.id}) has no ends")
        return self.properties[0]

    def get_target_end(self) -> Property:
        """Return the target end.

        Raises
        ------
            ModelShapeError: If the relation has fewer than two ends.

        """
        if len(self.properties) < 2:
            raise ModelShapeError(f"Relation '{self.name}' ({self.id}) has no target end")
        return self.properties[1]

    def get_source(self) -> Class | Relation | None:
        """Return the type of the source end."""
        return self.get_source_end().get_property_type()

    def get_target(self) -> Class | Relation | None:
        """Return the type of the target end."""
        return self.get_target_end().get_property_type()

    def has_material_stereotype(self) -> bool:
        """Check for the material stereotype."""
        return self.stereotype == RelationStereotype.MATERIAL

    def has_derivation_stereotype(self) -> bool:
        """Check for the derivation stereotype."""
        return self.stereotype == RelationStereotype.DERIVATION

    def has_mediation_stereotype(self) -> bool:
        """Check for the mediation stereotype."""
        return self.stereotype == RelationStereotype.MEDIATION

    def has_characterization_stereotype(self) -> bool:
        """Check for the characterization stereotype."""
        return self.stereotype == RelationStereotype.CHARACTERIZATION

    def _children(self) -> Iterator[OntoumlElement]:
        yield from self.properties


class Generalization(OntoumlElement):
    """Generalization between a general and a specific element."""

    type: Literal["Generalization"] = "Generalization"
    general: OntoumlReference | None = None
    specific: OntoumlReference | None = None

    _general: Class | Relation | None = PrivateAttr(default=None)
    _specific: Class | Relation | None = PrivateAttr(default=None)

    def get_general(self) -> Class | Relation | None:
        """Return the resolved general element."""
        return self._general

    def get_specific(self) -> Class | Relation | None:
        """Return the resolved specific element."""
        return self._specific

    def involves_classes(self) -> bool:
        """Check whether both ends are classes."""
        return isinstance(self._general, Class) and isinstance(self._specific, Class)

    def involves_relations(self) -> bool:
        """Check whether both ends are relations."""
        return isinstance(self._general, Relation) and isinstance(self._specific, Relation)

    def _resolve(self, index: dict[str, OntoumlElement]) -> None:
        self._general = _lookup(index, self.general)
        self._specific = _lookup(index, self.specific)


class GeneralizationSet(OntoumlElement):
    """A set of generalizations sharing the same general element."""

    type: Literal["GeneralizationSet"] = "GeneralizationSet"
    is_disjoint: Annotated[bool, Field(default=False, alias="isDisjoint")]
    is_complete: Annotated[bool, Field(default=False, alias="isComplete")]
    generalizations: Annotated[
        list[OntoumlReference],
        BeforeValidator(none_to_empty_list),
        Field(default_factory=list),
    ]
    categorizer: OntoumlReference | None = None

    _generalizations: list[Generalization] = PrivateAttr(default_factory=list)

    def get_generalizations(self) -> list[Generalization]:
        """Return the resolved generalizations."""
        return list(self._generalizations)

    def get_general(self) -> Class | Relation | None:
        """Return the general element shared by the set."""
        for generalization in self._generalizations:
            general = generalization.get_general()
            if general is not None:
                return general
        return None

    def get_specifics(self) -> list[Class | Relation]:
        """Return the specific elements of the set."""
        return [
            specific
            for generalization in self._generalizations
            if (specific := generalization.get_specific()) is not None
        ]

    def _resolve(self, index: dict[str, OntoumlElement]) -> None:
        self._generalizations = [
            element
            for reference in self.generalizations
            if isinstance(element := index.get(reference.id), Generalization)
        ]


class Package(OntoumlElement):
    """A package holding classes, relations, generalizations and packages."""

    type: Literal["Package"] = "Package"
    contents: Annotated[
        list[PackageContent],
        BeforeValidator(none_to_empty_list),
        Field(default_factory=list),
    ]

    @model_validator(mode="after")
    def _link_contents(self) -> Package:
        """Resolve references and container links within this package."""
        self.resolve_references()
        return self

    def resolve_references(self) -> None:
        """Resolve id references and set container back-references.

        Runs over the whole subtree. Unresolvable references are left
        as None for validation to report.
        """
        index: dict[str, OntoumlElement] = {self.id: self}
        for element in self.get_all_contents():
            index.setdefault(element.id, element)

        self._link_children()

        for element in self.get_all_contents():
            element._resolve(index)

    def _link_children(self) -> None:
        for content in self.contents:
            content._container = self
            if isinstance(content, Package):
                content._link_children()
                continue
            for child in content._children():
                child._container = content

    def _children(self) -> Iterator[OntoumlElement]:
        yield from self.contents

    def get_all_contents(self) -> list[OntoumlElement]:
        """Return every element below this package in document order."""
        result: list[OntoumlElement] = []

        def visit(element: OntoumlElement) -> None:
            for child in element._children():
                result.append(child)
                visit(child)

        visit(self)
        return result

    def get_all_classes(self) -> list[Class]:
        """Return all classes, including those in nested packages."""
        return [e for e in self.get_all_contents() if isinstance(e, Class)]

    def get_all_relations(self) -> list[Relation]:
        """Return all relations, including those in nested packages."""
        return [e for e in self.get_all_contents() if isinstance(e, Relation)]

    def get_all_properties(self) -> list[Property]:
        """Return all attributes and relation ends."""
        return [e for e in self.get_all_contents() if isinstance(e, Property)]

    def get_all_generalizations(self) -> list[Generalization]:
        """Return all generalizations."""
        return [e for e in self.get_all_contents() if isinstance(e, Generalization)]

    def get_all_generalization_sets(self) -> list[GeneralizationSet]:
        """Return all generalization sets."""
        return [e for e in self.get_all_contents() if isinstance(e, GeneralizationSet)]

    def _add(self, content: PackageContent) -> None:
        content._container = self
        self.contents.append(content)

    def create_package(self, name: str | None = None) -> Package:
        """Create a nested package."""
        package = Package(name=name)
        self._add(package)
        return package

    def create_class(
        self,
        name: str | None = None,
        stereotype: ClassStereotype | None = None,
        restricted_to: list[OntologicalNature] | None = None,
        is_abstract: bool = False,
    ) -> Class:
        """Create a class in this package.

        Args:
        ----
            name: Class name.
            stereotype: OntoUML class stereotype.
            restricted_to: Natures the class is restricted to.
            is_abstract: Whether the class is abstract.

        Returns:
        -------
            The new class.

        """
        _class = Class(
            name=name,
            stereotype=stereotype,
            restricted_to=restricted_to or [],
            is_abstract=is_abstract,
        )
        self._add(_class)
        return _class

    def create_kind(self, name: str | None = None) -> Class:
        """Create a kind of functional complexes."""
        return self.create_class(
            name, ClassStereotype.KIND, [OntologicalNature.FUNCTIONAL_COMPLEX]
        )

    def create_datatype(self, name: str | None = None) -> Class:
        """Create a datatype class."""
        return self.create_class(name, ClassStereotype.DATATYPE, [OntologicalNature.ABSTRACT])

    def create_enumeration(self, name: str | None = None, literals: list[str] | None = None) -> Class:
        """Create an enumeration class with the given literal names."""
        enumeration = self.create_class(
            name, ClassStereotype.ENUMERATION, [OntologicalNature.ABSTRACT]
        )
        for literal_name in literals or []:
            literal = EnumerationLiteral(name=literal_name)
            literal._container = enumeration
            enumeration.literals.append(literal)
        return enumeration

    def create_binary_relation(
        self,
        source: Class | Relation,
        target: Class | Relation,
        name: str | None = None,
        stereotype: RelationStereotype | None = None,
        source_cardinality: str | None = None,
        target_cardinality: str | None = None,
    ) -> Relation:
        """Create a binary relation from source to target.

        Args:
        ----
            source: Type of the source end.
            target: Type of the target end.
            name: Relation name.
            stereotype: OntoUML relation stereotype.
            source_cardinality: Multiplicity of the source end.
            target_cardinality: Multiplicity of the target end.

        Returns:
        -------
            The new relation.

        """
        relation = Relation(name=name, stereotype=stereotype)
        for end_type, cardinality in (
            (source, source_cardinality),
            (target, target_cardinality),
        ):
            end = Property(cardinality=cardinality)
            end.set_property_type(end_type)
            end._container = relation
            relation.properties.append(end)

        self._add(relation)
        return relation

    def create_generalization(
        self,
        general: Class | Relation,
        specific: Class | Relation,
        name: str | None = None,
    ) -> Generalization:
        """Create a generalization from specific to general."""
        generalization = Generalization(
            name=name,
            general=OntoumlReference(id=general.id, type=OntoumlType(general.type)),
            specific=OntoumlReference(id=specific.id, type=OntoumlType(specific.type)),
        )
        generalization._general = general
        generalization._specific = specific
        self._add(generalization)
        return generalization

    def create_generalization_set(
        self,
        generalizations: list[Generalization],
        is_disjoint: bool = False,
        is_complete: bool = False,
        name: str | None = None,
    ) -> GeneralizationSet:
        """Create a generalization set over existing generalizations."""
        generalization_set = GeneralizationSet(
            name=name,
            is_disjoint=is_disjoint,
            is_complete=is_complete,
            generalizations=[
                OntoumlReference(id=g.id, type=OntoumlType.GENERALIZATION)
                for g in generalizations
            ],
        )
        generalization_set._generalizations = list(generalizations)
        self._add(generalization_set)
        return generalization_set


def _lookup(
    index: dict[str, OntoumlElement],
    reference: OntoumlReference | None,
) -> Class | Relation | None:
    """Look up a reference that must point at a class or relation."""
    if reference is None:
        return None
    element = index.get(reference.id)
    return element if isinstance(element, (Class, Relation)) else None


PackageContent = Annotated[
    Package | Class | Relation | Generalization | GeneralizationSet,
    Field(discriminator="type"),
]

Package.model_rebuild()
