"""Class transformation.

Datatypes become signatures inside Datatype, enumerations become enum
signatures and every other class becomes a World field holding its
instances in each world.
"""

from __future__ import annotations

from itertools import combinations

from ontouml_to_alloy.alloy.fragments import AlloyEnum, AlloyFact
from ontouml_to_alloy.models.elements import Class
from ontouml_to_alloy.transform.context import TransformationContext
from ontouml_to_alloy.transform.property_transformer import get_or_add_datatype


def transform_class(context: TransformationContext, class_: Class) -> None:
    """Emit the signature or world field of a class."""
    if not context.claim(class_):
        return

    spec = context.specification
    name = context.normalize(class_)

    if class_.has_datatype_stereotype():
        get_or_add_datatype(context, name)
        return

    if class_.has_enumeration_stereotype():
        literals = tuple(context.normalize(literal) for literal in class_.literals)
        spec.add_enum(AlloyEnum(name, literals))
        return

    nature = class_.get_nature_signature()
    spec.add_world_field(f"{name}: set exists:>{nature}")

    if class_.has_rigid_stereotype():
        spec.add_fact(AlloyFact("rigid", (f"rigidity[{name},{nature},exists]",)))
    elif class_.has_anti_rigid_stereotype():
        spec.add_fact(AlloyFact("antirigid", (f"antirigidity[{name},{nature},exists]",)))


def add_class_constraints(context: TransformationContext, classes: list[Class]) -> None:
    """Emit constraints spanning several classes.

    Must run after all properties and relations were transformed, since
    datatype identity depends on the collected datatype fields.

    Args:
    ----
        context: Transformation context.
        classes: All classes of the model.

    """
    _add_ultimate_sortal_constraints(context, classes)
    _add_abstract_class_constraints(context, classes)
    _add_datatype_constraints(context, classes)


def _add_ultimate_sortal_constraints(context: TransformationContext, classes: list[Class]) -> None:
    spec = context.specification

    sortals_by_nature: dict[str, list[str]] = {}
    for class_ in classes:
        if class_.is_ultimate_sortal():
            nature = class_.get_nature_signature()
            sortals_by_nature.setdefault(nature, []).append(context.normalize(class_))

    for nature, names in sortals_by_nature.items():
        spec.add_world_constraint(f"exists:>{nature} in {'+'.join(names)}")

    sortals = [name for names in sortals_by_nature.values() for name in names]
    if len(sortals) > 1:
        spec.add_fact(
            AlloyFact("disjointKinds", tuple(f"no {a} & {b}" for a, b in combinations(sortals, 2)))
        )


def _add_abstract_class_constraints(context: TransformationContext, classes: list[Class]) -> None:
    specifics: dict[Class, list[str]] = {}
    for generalization in context.model.get_all_generalizations():
        general = generalization.get_general()
        specific = generalization.get_specific()
        if generalization.involves_classes() and general.is_abstract:
            specifics.setdefault(general, []).append(context.normalize(specific))

    constraints = [
        f"{context.normalize(class_)} = {'+'.join(specifics[class_])}"
        for class_ in classes
        if class_ in specifics
    ]
    if constraints:
        context.specification.add_fact(AlloyFact("abstractClasses", tuple(constraints)))


def _add_datatype_constraints(context: TransformationContext, classes: list[Class]) -> None:
    spec = context.specification

    names = [context.normalize(c) for c in classes if c.has_datatype_stereotype()]
    if not names:
        return

    constraints = [f"Datatype = {'+'.join(names)}"]
    for name in names:
        datatype = spec.get_datatype(name)
        if datatype is None or not datatype.fields:
            continue
        differences = " or ".join(f"x.{field} != y.{field}" for field in datatype.field_names)
        constraints.append(f"all x, y: {name} | x != y implies ({differences})")

    spec.add_fact(AlloyFact("additionalDatatypeFacts", tuple(constraints)))
