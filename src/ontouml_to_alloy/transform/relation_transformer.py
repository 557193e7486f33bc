"""Relation transformation.

Emits the field backing each relation. Accessors and multiplicity facts
of the relation ends are emitted by the property transformer.
"""

from __future__ import annotations

from ontouml_to_alloy.alloy.fragments import AlloyFact
from ontouml_to_alloy.models.elements import Class, ModelShapeError, Relation
from ontouml_to_alloy.transform.cardinality import get_declaration_keyword
from ontouml_to_alloy.transform.context import TransformationContext
from ontouml_to_alloy.transform.property_transformer import (
    add_datatype_multiplicity,
    datatype_field_declaration,
    get_or_add_datatype,
)
from ontouml_to_alloy.transform.queries import (
    get_mediations_of,
    get_ternary_relator,
    holds_between_datatypes,
)


def transform_relation(context: TransformationContext, relation: Relation) -> None:
    """Emit the field (or fact) representing a relation.

    Raises
    ------
        ModelShapeError: If the relation does not have exactly two ends.

    """
    if not context.claim(relation):
        return

    if not relation.is_binary():
        raise ModelShapeError(
            f"Relation '{relation.name}' ({relation.id}) has {len(relation.properties)} ends, expected 2"
        )

    if holds_between_datatypes(relation):
        _transform_datatype_relation(context, relation)
    elif relation.has_derivation_stereotype():
        _transform_derivation(context, relation)
    else:
        _transform_world_relation(context, relation)


def _transform_datatype_relation(context: TransformationContext, relation: Relation) -> None:
    relation_name = context.relation_name(relation)
    source_name = context.normalize(relation.get_source(), "relation source")
    target_name = context.normalize(relation.get_target(), "relation target")
    cardinality = relation.get_target_end().cardinality

    datatype = get_or_add_datatype(context, source_name)
    datatype.add_field(datatype_field_declaration(relation_name, cardinality, target_name))
    add_datatype_multiplicity(context, source_name, relation_name, cardinality)


def _transform_derivation(context: TransformationContext, derivation: Relation) -> None:
    """Tie a derived material relation to the mediations of its relator.

    Two instances are related through a relator in some world exactly when
    the relator mediates both of them in that world.
    """
    material = derivation.get_source()
    relator = derivation.get_target()
    if not isinstance(material, Relation) or not material.is_binary():
        raise ModelShapeError(
            f"Derivation '{derivation.name}' ({derivation.id}) does not derive a binary relation"
        )
    if not isinstance(relator, Class):
        raise ModelShapeError(f"Derivation '{derivation.name}' ({derivation.id}) has no relator")

    mediations = get_mediations_of(relator, context.relations)
    if not mediations or get_ternary_relator(material, context.relations) is None:
        return

    material_name = context.relation_name(material)
    source = context.domain(material.get_source(), "relation source")
    target = context.domain(material.get_target(), "relation target")
    relator_domain = context.domain(relator, "relator")
    mediation_fields = " + ".join(f"w.{context.relation_name(m)}" for m in mediations)

    context.specification.add_fact(
        AlloyFact(
            "derivation",
            (
                f"all w: World, x: {source}, r: {relator_domain}, y: {target} | "
                f"x -> r -> y in w.{material_name} iff x + y in r.({mediation_fields})",
            ),
        )
    )


def _transform_world_relation(context: TransformationContext, relation: Relation) -> None:
    spec = context.specification
    source_end = relation.get_source_end()
    target_end = relation.get_target_end()

    name = context.relation_name(relation)
    source_name = context.element_name(relation.get_source(), "relation source")
    target_name = context.element_name(relation.get_target(), "relation target")

    relator = get_ternary_relator(relation, context.relations)
    if relator is not None:
        relator_name = context.normalize(relator, "relator")
        spec.add_world_field(
            f"{name}: set {source_name} set -> set {relator_name} set -> set {target_name}"
        )
        return

    if source_end.is_ordered or target_end.is_ordered:
        spec.add_world_field(f"{name}: set {source_name} set -> set Int set -> set {target_name}")
        spec.add_fact(AlloyFact("ordering", _ordering_constraints(context, relation, name)))
        return

    source_keyword = get_declaration_keyword(source_end.cardinality)
    target_keyword = get_declaration_keyword(target_end.cardinality)
    spec.add_world_field(
        f"{name}: set {source_name} {source_keyword} -> {target_keyword} {target_name}"
    )


def _ordering_constraints(context: TransformationContext, relation: Relation, name: str) -> tuple[str, ...]:
    constraints = []
    if relation.get_target_end().is_ordered:
        source = context.domain(relation.get_source(), "relation source")
        constraints.append(f"all w: World, x: {source} | isSeq[x.(w.{name})]")
    if relation.get_source_end().is_ordered:
        target = context.domain(relation.get_target(), "relation target")
        constraints.append(f"all w: World, y: {target} | isSeq[~((w.{name}).y)]")
    return tuple(constraints)
