"""Generalization and generalization set transformation."""

from __future__ import annotations

from itertools import combinations

from ontouml_to_alloy.alloy.fragments import AlloyFact
from ontouml_to_alloy.models.elements import Generalization, GeneralizationSet, ModelShapeError
from ontouml_to_alloy.transform.context import TransformationContext


def transform_generalization(context: TransformationContext, generalization: Generalization) -> None:
    """Emit ``Specific in General``.

    Raises
    ------
        ModelShapeError: If either end is unresolved.

    """
    if not context.claim(generalization):
        return

    general = generalization.get_general()
    specific = generalization.get_specific()
    if general is None or specific is None:
        raise ModelShapeError(
            f"Generalization '{generalization.name}' ({generalization.id}) has an unresolved end"
        )

    general_name = context.element_name(general)
    specific_name = context.element_name(specific)
    context.specification.add_fact(
        AlloyFact("generalization", (f"{specific_name} in {general_name}",))
    )


def transform_generalization_set(context: TransformationContext, generalization_set: GeneralizationSet) -> None:
    """Emit disjointness and completeness constraints of a set."""
    if not context.claim(generalization_set):
        return

    specifics = [context.element_name(s) for s in generalization_set.get_specifics()]
    if not specifics:
        return

    constraints = []
    if generalization_set.is_disjoint:
        constraints.extend(f"no {a} & {b}" for a, b in combinations(specifics, 2))

    general = generalization_set.get_general()
    if generalization_set.is_complete and general is not None:
        constraints.append(f"{context.element_name(general)} = {'+'.join(specifics)}")

    if constraints:
        context.specification.add_fact(AlloyFact("generalizationSet", tuple(constraints)))
