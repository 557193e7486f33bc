"""Converters for writing Alloy modules.

This package provides the final stage of the conversion pipeline:
serializing an AlloySpecification into Alloy source text.

Module Layout:
    1. Module header and library imports
    2. Base signatures (Endurant, Object, Aspect, Datatype)
    3. World signature with world fields and constraints
    4. Ontological predicates, datatypes, enums, facts and functions
    5. Run commands for one and several worlds

Example:
-------
    >>> from ontouml_to_alloy.converters import AlloyWriter
    >>> from ontouml_to_alloy.transform import OntoumlToAlloyTransformer
    >>>
    >>> spec = OntoumlToAlloyTransformer().transform(project)
    >>> AlloyWriter(world_scope=4).write(spec, Path("model.als"))
    >>>
    >>> # Get text without writing to file
    >>> text = AlloyWriter().write_text(spec)


"""

from ontouml_to_alloy.converters.alloy_writer import AlloyWriter, convert_ontouml_to_alloy

__all__ = [
    "AlloyWriter",
    "convert_ontouml_to_alloy",
]
