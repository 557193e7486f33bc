"""Per-run transformation state."""

from __future__ import annotations

from dataclasses import dataclass, field

from ontouml_to_alloy.alloy.specification import AlloySpecification
from ontouml_to_alloy.models.elements import ModelShapeError, OntoumlElement, Package, Relation
from ontouml_to_alloy.transform.naming import NameRegistry
from ontouml_to_alloy.transform.queries import is_value_type

# Alias seed for relations without a name
UNNAMED_RELATION_ALIAS = "relation"


@dataclass
class TransformationContext:
    """State shared by all transformation steps of one run.

    A context is created fresh for every run and never reused, so
    sequential runs cannot see each other's names or fragments.

    Attributes
    ----------
        model: Root package being transformed.
        names: Registry of normalized names and aliases.
        specification: Accumulated Alloy fragments.

    """

    model: Package
    names: NameRegistry = field(default_factory=NameRegistry)
    specification: AlloySpecification = field(default_factory=AlloySpecification)
    _transformed: set[OntoumlElement] = field(default_factory=set, init=False, repr=False)
    _relations: list[Relation] | None = field(default=None, init=False, repr=False)

    @property
    def relations(self) -> list[Relation]:
        """All relations of the model, computed once per run."""
        if self._relations is None:
            self._relations = self.model.get_all_relations()
        return self._relations

    def claim(self, element: OntoumlElement) -> bool:
        """Mark an element as transformed.

        Returns
        -------
            True the first time an element is claimed, False afterwards.

        """
        if element in self._transformed:
            return False
        self._transformed.add(element)
        return True

    def normalize(self, element: OntoumlElement | None, role: str = "element") -> str:
        """Normalize an element that must exist.

        Args:
        ----
            element: Element to normalize.
            role: What the element is, for the error message.

        Raises:
        ------
            ModelShapeError: If the element is missing.

        """
        if element is None:
            raise ModelShapeError(f"Cannot normalize missing {role}")
        return self.names.normalize_name(element)

    def relation_name(self, relation: Relation) -> str:
        """Return the field name of a relation.

        Named relations use their normalized name, unnamed ones an alias
        seeded with "relation".
        """
        if relation.get_name():
            return self.names.normalize_name(relation)
        return self.names.get_valid_alias(relation, UNNAMED_RELATION_ALIAS)

    def type_reference(self, element: OntoumlElement | None, role: str = "type") -> str:
        """Return the type expression for instances of an element.

        World classes are referenced through World (``World.Person``),
        value types by their signature (``Date``).
        """
        name = self.element_name(element, role)
        return name if is_value_type(element) else f"World.{name}"

    def domain(self, element: OntoumlElement | None, role: str = "type") -> str:
        """Return the quantification domain inside a world ``w``."""
        name = self.element_name(element, role)
        return name if is_value_type(element) else f"w.{name}"

    def element_name(self, element: OntoumlElement | None, role: str = "element") -> str:
        """Return the identifier of a class or relation.

        Every site referring to a relation as a type goes through here so
        unnamed relations resolve to the same alias as their field.
        """
        if isinstance(element, Relation):
            return self.relation_name(element)
        return self.normalize(element, role)
