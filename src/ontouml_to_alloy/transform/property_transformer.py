"""Property transformation.

Each property (class attribute or relation end) is classified once into a
PropertyCategory and handed to the matching handler. Handlers only append
fragments to the specification and reserve identifiers; they return
nothing.

World-relative properties are encoded with an explicit World parameter:
the field lives on the World signature, and the accessor function takes
both the instance and the world it is looked up in.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from ontouml_to_alloy.alloy.fragments import AlloyDatatype, AlloyFact, AlloyFunction
from ontouml_to_alloy.models.elements import Class, ModelShapeError, OntoumlElement, Property, Relation
from ontouml_to_alloy.transform.cardinality import (
    get_custom_cardinality,
    get_declaration_keyword,
    is_custom_cardinality,
)
from ontouml_to_alloy.transform.context import TransformationContext
from ontouml_to_alloy.transform.queries import (
    get_ternary_relator,
    holds_between_datatypes,
    is_value_type,
)


class PropertyCategory(str, Enum):
    """How a property is represented in Alloy."""

    DATATYPE_ATTRIBUTE = "datatype-attribute"
    DATATYPE_RELATION_END = "datatype-relation-end"
    ORDERED_ATTRIBUTE = "ordered-attribute"
    GENERAL_ATTRIBUTE = "general-attribute"
    RELATION_SOURCE_END = "relation-source-end"
    RELATION_TARGET_END = "relation-target-end"
    SKIP = "skip"


def classify_property(property_: Property) -> PropertyCategory:
    """Decide how a property is transformed.

    Args:
    ----
        property_: Attribute or relation end.

    Returns:
    -------
        The property category, in precedence order: datatype attribute,
        end of a relation between datatypes, ordered attribute, general
        attribute, end of a derivation (skipped), source end, target end.

    Raises:
    ------
        ModelShapeError: If the property has no class or relation owner.

    """
    owner = property_.container

    if isinstance(owner, Class):
        if owner.has_datatype_stereotype():
            return PropertyCategory.DATATYPE_ATTRIBUTE
        if property_.is_ordered:
            return PropertyCategory.ORDERED_ATTRIBUTE
        return PropertyCategory.GENERAL_ATTRIBUTE

    if isinstance(owner, Relation):
        if holds_between_datatypes(owner):
            return PropertyCategory.DATATYPE_RELATION_END
        if owner.has_derivation_stereotype():
            return PropertyCategory.SKIP
        if owner.get_source_end() is property_:
            return PropertyCategory.RELATION_SOURCE_END
        return PropertyCategory.RELATION_TARGET_END

    raise ModelShapeError(f"Property '{property_.name}' ({property_.id}) has no class or relation owner")


def transform_property(context: TransformationContext, property_: Property) -> None:
    """Emit the Alloy fragments of a property, once per property."""
    category = classify_property(property_)
    if not context.claim(property_):
        return
    _HANDLERS[category](context, property_)


def datatype_field_declaration(name: str, cardinality: str | None, type_name: str) -> str:
    """Build an inline datatype field declaration.

    The keyword is omitted when no cardinality is given, leaving Alloy's
    default of exactly one value.
    """
    if cardinality is None:
        return f"{name}: {type_name}"
    return f"{name}: {get_declaration_keyword(cardinality)} {type_name}"


def add_datatype_multiplicity(
    context: TransformationContext,
    datatype_name: str,
    field_name: str,
    cardinality: str | None,
) -> None:
    """Emit a multiplicity fact for a custom datatype field."""
    if not is_custom_cardinality(cardinality):
        return
    _add_multiplicity(context, f"all x: {datatype_name}", f"#x.{field_name}", cardinality)


def get_or_add_datatype(context: TransformationContext, name: str) -> AlloyDatatype:
    """Return the datatype signature with the given name, creating it if needed."""
    datatype = context.specification.get_datatype(name)
    if datatype is None:
        datatype = AlloyDatatype(name)
        context.specification.add_datatype(datatype)
    return datatype


def _add_multiplicity(
    context: TransformationContext,
    quantifier: str,
    measure: str,
    cardinality: str | None,
) -> None:
    lower, upper = get_custom_cardinality(cardinality)

    bounds = []
    if lower is not None:
        bounds.append(f"{measure}>={lower}")
    if upper is not None:
        bounds.append(f"{measure}<={upper}")
    if not bounds:
        return

    context.specification.add_fact(
        AlloyFact("multiplicity", (f"{quantifier} | {' and '.join(bounds)}",))
    )


def _immutability(context: TransformationContext, owner: OntoumlElement | None, projection: str) -> str:
    """Build a constraint fixing ``projection`` across all pairs of worlds.

    ``projection`` contains a ``{w}`` placeholder for the world.
    """
    owner_name = context.element_name(owner, "owner")
    domain = owner_name if is_value_type(owner) else f"w1.{owner_name} & w2.{owner_name}"
    return (
        f"all w1, w2: World, x: {domain} | "
        f"{projection.format(w='w1')} = {projection.format(w='w2')}"
    )


def _accessor(
    alias: str,
    instance_type: str,
    result_type: str,
    body: str,
) -> AlloyFunction:
    return AlloyFunction(
        name=alias,
        parameters=(("x", instance_type), ("w", "World")),
        return_type=f"set {result_type}",
        body=body,
    )


def _transform_datatype_attribute(context: TransformationContext, attribute: Property) -> None:
    attribute_name = context.normalize(attribute)
    owner_name = context.normalize(attribute.container, "owner")
    type_name = context.normalize(attribute.get_property_type(), "attribute type")

    datatype = get_or_add_datatype(context, owner_name)
    datatype.add_field(datatype_field_declaration(attribute_name, attribute.cardinality, type_name))
    add_datatype_multiplicity(context, datatype.name, attribute_name, attribute.cardinality)


def _transform_ordered_attribute(context: TransformationContext, attribute: Property) -> None:
    spec = context.specification
    owner = attribute.container
    value_type = attribute.get_property_type()

    attribute_name = context.normalize(attribute)
    owner_name = context.normalize(owner, "owner")
    type_name = context.normalize(value_type, "attribute type")
    alias = context.names.get_valid_alias(attribute, attribute_name)

    spec.add_world_field(f"{attribute_name}: set {owner_name} set -> set Int set -> set {type_name}")
    spec.add_fact(
        AlloyFact(
            "ordering",
            (
                f"all w: World, x: w.{owner_name} | isSeq[x.(w.{attribute_name})]",
                f"all w: World, x: w.{owner_name}, i: Int | lone i.(x.(w.{attribute_name}))",
            ),
        )
    )
    spec.add_fun(
        _accessor(
            alias,
            context.type_reference(owner, "owner"),
            context.type_reference(value_type, "attribute type"),
            f"Int.(x.(w.{attribute_name}))",
        )
    )

    if attribute.is_read_only:
        spec.add_relation_property(_immutability(context, owner, f"x.({{w}}.{attribute_name})"))


def _transform_general_attribute(context: TransformationContext, attribute: Property) -> None:
    spec = context.specification
    owner = attribute.container
    value_type = attribute.get_property_type()

    attribute_name = context.normalize(attribute)
    owner_name = context.normalize(owner, "owner")
    type_name = context.normalize(value_type, "attribute type")
    keyword = get_declaration_keyword(attribute.cardinality)
    alias = context.names.get_valid_alias(attribute, attribute_name)

    spec.add_world_field(f"{attribute_name}: set {owner_name} set -> {keyword} {type_name}")
    spec.add_fun(
        _accessor(
            alias,
            context.type_reference(owner, "owner"),
            context.type_reference(value_type, "attribute type"),
            f"x.(w.{attribute_name})",
        )
    )

    if attribute.is_read_only:
        spec.add_relation_property(_immutability(context, owner, f"{alias}[x,{{w}}]"))

    if is_custom_cardinality(attribute.cardinality):
        _add_multiplicity(
            context,
            f"all w: World, x: {context.domain(owner, 'owner')}",
            f"#{alias}[x,w]",
            attribute.cardinality,
        )

    spec.add_visible(f"select13[{attribute_name}]")


def _transform_relation_end(context: TransformationContext, end: Property, is_source: bool) -> None:
    """Emit the accessor and constraints of one relation end.

    The accessor takes an instance of the opposite end's type and returns
    the instances at this end.
    """
    spec = context.specification
    relation = end.container
    if not isinstance(relation, Relation):
        raise ModelShapeError(f"Property '{end.name}' ({end.id}) is not a relation end")

    opposite = end.get_opposite_end()
    end_type = end.get_property_type()
    opposite_type = opposite.get_property_type()

    relation_name = context.relation_name(relation)
    end_type_name = context.element_name(end_type, "relation end type")
    end_name = context.normalize(end) if end.get_name() else end_type_name
    alias = context.names.get_valid_alias(end, end_name)

    derived = get_ternary_relator(relation, context.relations) is not None
    if derived or end.is_ordered or opposite.is_ordered:
        navigated = f"select13[w.{relation_name}]"
    else:
        navigated = f"w.{relation_name}"

    spec.add_fun(
        _accessor(
            alias,
            context.type_reference(opposite_type, "relation end type"),
            context.type_reference(end_type, "relation end type"),
            f"({navigated}).x" if is_source else f"x.({navigated})",
        )
    )

    immutable = end.is_read_only
    if not is_source:
        immutable = (
            immutable
            or relation.has_mediation_stereotype()
            or relation.has_characterization_stereotype()
        )
    if immutable:
        spec.add_relation_property(_immutability(context, opposite_type, f"{alias}[x,{{w}}]"))

    if derived or is_custom_cardinality(end.cardinality):
        _add_multiplicity(
            context,
            f"all w: World, x: {context.domain(opposite_type, 'relation end type')}",
            f"#{alias}[x,w]",
            end.cardinality,
        )


def _transform_relation_source_end(context: TransformationContext, end: Property) -> None:
    _transform_relation_end(context, end, is_source=True)


def _transform_relation_target_end(context: TransformationContext, end: Property) -> None:
    _transform_relation_end(context, end, is_source=False)


def _skip(context: TransformationContext, property_: Property) -> None:
    """Nothing to emit: the owning relation is represented elsewhere."""


_HANDLERS: dict[PropertyCategory, Callable[[TransformationContext, Property], None]] = {
    PropertyCategory.DATATYPE_ATTRIBUTE: _transform_datatype_attribute,
    PropertyCategory.DATATYPE_RELATION_END: _skip,
    PropertyCategory.ORDERED_ATTRIBUTE: _transform_ordered_attribute,
    PropertyCategory.GENERAL_ATTRIBUTE: _transform_general_attribute,
    PropertyCategory.RELATION_SOURCE_END: _transform_relation_source_end,
    PropertyCategory.RELATION_TARGET_END: _transform_relation_target_end,
    PropertyCategory.SKIP: _skip,
}
