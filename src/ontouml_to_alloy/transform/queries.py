"""Classification queries over relations."""

from __future__ import annotations

from ontouml_to_alloy.models.elements import Class, Relation


def is_value_type(element: object) -> bool:
    """Check whether an element is a datatype or enumeration class.

    Instances of value types are not world-relative.
    """
    return isinstance(element, Class) and (
        element.has_datatype_stereotype() or element.has_enumeration_stereotype()
    )


def holds_between_datatypes(relation: Relation) -> bool:
    """Check whether both ends of a relation are typed by datatypes."""
    if not relation.is_binary():
        return False

    source = relation.get_source()
    target = relation.get_target()
    return (
        isinstance(source, Class)
        and isinstance(target, Class)
        and source.has_datatype_stereotype()
        and target.has_datatype_stereotype()
    )


def get_derivations_of(relation: Relation, relations: list[Relation]) -> list[Relation]:
    """Return the derivation relations whose source is the given relation."""
    return [
        candidate
        for candidate in relations
        if candidate.has_derivation_stereotype()
        and candidate.properties
        and candidate.get_source() is relation
    ]


def is_material_connected_to_derivation(relation: Relation, relations: list[Relation]) -> bool:
    """Check whether a material relation is derived from a relator.

    Args:
    ----
        relation: The relation to classify.
        relations: All relations of the model.

    Returns:
    -------
        True when the relation is material and the source of at least
        one derivation relation.

    """
    return relation.has_material_stereotype() and bool(get_derivations_of(relation, relations))


def get_derivation_relator(relation: Relation, relations: list[Relation]) -> Class | None:
    """Return the relator class a material relation is derived from."""
    for derivation in get_derivations_of(relation, relations):
        if not derivation.is_binary():
            continue
        relator = derivation.get_target()
        if isinstance(relator, Class):
            return relator
    return None


def get_mediations_of(relator: Class, relations: list[Relation]) -> list[Relation]:
    """Return the mediation relations leaving a relator."""
    return [
        relation
        for relation in relations
        if relation.has_mediation_stereotype()
        and relation.is_binary()
        and relation.get_source() is relator
    ]


def get_ternary_relator(relation: Relation, relations: list[Relation]) -> Class | None:
    """Return the relator through which a material relation is stored.

    A material relation connected to a derivation with a resolvable relator
    is declared as a ternary field and navigated with ``select13``. Any
    other relation yields None and stays binary.
    """
    if not is_material_connected_to_derivation(relation, relations):
        return None
    return get_derivation_relator(relation, relations)
