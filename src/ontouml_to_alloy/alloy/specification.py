"""Accumulated Alloy specification.

This module defines the container collecting every fragment emitted
during one transformation run, ready for the writer to serialize.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ontouml_to_alloy.alloy.fragments import (
    AlloyDatatype,
    AlloyEnum,
    AlloyFact,
    AlloyFunction,
)


@dataclass
class AlloySpecification:
    """Complete set of Alloy fragments produced by a transformation.

    The specification is mutable (not frozen) to allow building it
    incrementally during transformation. Collections keep insertion
    order and allow duplicates, so output is stable across runs.

    Attributes
    ----------
        name: Model name used in the module header.
        world_fields: Field declarations of the World signature.
        world_constraints: Constraints appended to the World signature.
        facts: Fact blocks in emission order.
        functions: Accessor functions in emission order.
        visible: Selectors shown by the default visualization.
        relation_properties: Constraints gathered into one
            ``relationProperties`` fact.
        datatypes: Datatype signatures keyed by normalized name.
        enums: Enumeration signatures.

    """

    name: str = "main"

    world_fields: list[str] = field(default_factory=list)
    world_constraints: list[str] = field(default_factory=list)

    facts: list[AlloyFact] = field(default_factory=list)
    functions: list[AlloyFunction] = field(default_factory=list)
    visible: list[str] = field(default_factory=list)
    relation_properties: list[str] = field(default_factory=list)

    datatypes: dict[str, AlloyDatatype] = field(default_factory=dict)
    enums: list[AlloyEnum] = field(default_factory=list)

    def add_world_field(self, declaration: str) -> None:
        """Add a world-indexed field declaration.

        Args:
        ----
            declaration: Declaration such as ``Person: set exists:>Object``.

        """
        self.world_fields.append(declaration)

    def add_world_constraint(self, constraint: str) -> None:
        """Add a constraint to the World signature fact block."""
        self.world_constraints.append(constraint)

    def add_fact(self, fact: AlloyFact) -> None:
        """Add a fact block."""
        self.facts.append(fact)

    def add_fun(self, function: AlloyFunction) -> None:
        """Add a function."""
        self.functions.append(function)

    def add_visible(self, selector: str) -> None:
        """Register a selector for the default visualization."""
        self.visible.append(selector)

    def add_relation_property(self, constraint: str) -> None:
        """Add a constraint to the ``relationProperties`` fact."""
        self.relation_properties.append(constraint)

    def add_datatype(self, datatype: AlloyDatatype) -> None:
        """Add a datatype signature keyed by its name."""
        self.datatypes[datatype.name] = datatype

    def add_enum(self, enum: AlloyEnum) -> None:
        """Add an enumeration signature."""
        self.enums.append(enum)

    def get_datatype(self, name: str) -> AlloyDatatype | None:
        """Get a datatype signature by normalized name.

        Args:
        ----
            name: The normalized datatype name.

        Returns:
        -------
            The datatype if found, None otherwise.

        """
        return self.datatypes.get(name)

    def get_facts(self, name: str) -> list[AlloyFact]:
        """Get all facts with the given label.

        Args:
        ----
            name: Fact label such as "multiplicity".

        Returns:
        -------
            Matching facts in emission order.

        """
        return [fact for fact in self.facts if fact.name == name]

    def get_function(self, name: str) -> AlloyFunction | None:
        """Get a function by name.

        Args:
        ----
            name: The function name.

        Returns:
        -------
            The function if found, None otherwise.

        """
        for function in self.functions:
            if function.name == name:
                return function
        return None
