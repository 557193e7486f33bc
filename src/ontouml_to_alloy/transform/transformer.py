"""Main OntoUML to Alloy transformer."""

from __future__ import annotations

import logging

from ontouml_to_alloy.alloy.specification import AlloySpecification
from ontouml_to_alloy.models.elements import Package
from ontouml_to_alloy.models.project import Project
from ontouml_to_alloy.transform.class_transformer import add_class_constraints, transform_class
from ontouml_to_alloy.transform.context import TransformationContext
from ontouml_to_alloy.transform.generalization_transformer import (
    transform_generalization,
    transform_generalization_set,
)
from ontouml_to_alloy.transform.naming import DEFAULT_NAMING_RULES, NameRegistry, NamingRules
from ontouml_to_alloy.transform.property_transformer import transform_property
from ontouml_to_alloy.transform.relation_transformer import transform_relation

logger = logging.getLogger(__name__)

# Module name used when the model has no usable name
DEFAULT_MODULE_NAME = "main"


class OntoumlToAlloyTransformer:
    """Transform an OntoUML model into an Alloy specification.

    This is the main entry point for converting a validated Project (or
    its root Package) into an AlloySpecification ready for writing.
    Every call to transform() starts from a fresh context, so one
    transformer can be reused for any number of models.

    Usage:
        transformer = OntoumlToAlloyTransformer()
        spec = transformer.transform(project)
    """

    def __init__(self, naming_rules: NamingRules = DEFAULT_NAMING_RULES) -> None:
        """Initialize the transformer.

        Args:
        ----
            naming_rules: Identifier grammar used for normalization.

        """
        self._naming_rules = naming_rules

    def create_context(self, model: Package, module_name: str = DEFAULT_MODULE_NAME) -> TransformationContext:
        """Create a fresh context for one run over ``model``."""
        return TransformationContext(
            model=model,
            names=NameRegistry(rules=self._naming_rules),
            specification=AlloySpecification(name=module_name),
        )

    def transform(self, model: Project | Package) -> AlloySpecification:
        """Transform a project or package to an AlloySpecification.

        Args:
        ----
            model: Validated project, or its root package.

        Returns:
        -------
            The accumulated Alloy fragments.

        Raises:
        ------
            ModelShapeError: If the model cannot be navigated (missing
                types, unresolved ends, non-binary relations).
            CardinalityError: If a cardinality is malformed.

        """
        if isinstance(model, Project):
            package = model.model
            module_name = self._module_name(model.name or package.name)
        else:
            package = model
            module_name = self._module_name(package.name)

        context = self.create_context(package, module_name)
        classes = package.get_all_classes()

        logger.debug("Transforming %d classes", len(classes))
        for class_ in classes:
            transform_class(context, class_)

        self._process_generalizations(context)
        self._process_relations(context)
        self._process_properties(context)

        add_class_constraints(context, classes)

        spec = context.specification
        logger.info(
            "Transformed model '%s': %d world fields, %d facts, %d functions",
            module_name,
            len(spec.world_fields),
            len(spec.facts),
            len(spec.functions),
        )
        return spec

    def _process_generalizations(self, context: TransformationContext) -> None:
        """Process generalizations and generalization sets."""
        for generalization in context.model.get_all_generalizations():
            transform_generalization(context, generalization)

        for generalization_set in context.model.get_all_generalization_sets():
            transform_generalization_set(context, generalization_set)

    def _process_relations(self, context: TransformationContext) -> None:
        """Process relations into world fields and derivation facts."""
        logger.debug("Transforming %d relations", len(context.relations))
        for relation in context.relations:
            transform_relation(context, relation)

    def _process_properties(self, context: TransformationContext) -> None:
        """Process attributes and relation ends in package order."""
        properties = context.model.get_all_properties()
        logger.debug("Transforming %d properties", len(properties))
        for property_ in properties:
            transform_property(context, property_)

    def _module_name(self, name: str | None) -> str:
        """Derive a legal module name from the model name."""
        candidate = self._naming_rules.strip_forbidden(name or "")
        if not candidate or not candidate[0].isalpha() or self._naming_rules.is_reserved(candidate):
            return DEFAULT_MODULE_NAME
        return candidate
