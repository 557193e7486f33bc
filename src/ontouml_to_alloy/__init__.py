"""ontouml-to-alloy: Transform OntoUML conceptual models into Alloy specifications.

This package provides tools for:
- Loading and validating OntoUML JSON/YAML models
- Transforming them into Alloy fragments with a possible-worlds encoding
- Writing complete Alloy modules ready for the Alloy Analyzer

Quick Start:
    >>> from ontouml_to_alloy.models import load_project
    >>> from ontouml_to_alloy.transform import OntoumlToAlloyTransformer
    >>> from ontouml_to_alloy.converters import AlloyWriter
    >>>
    >>> project = load_project("car-rental.json")
    >>> spec = OntoumlToAlloyTransformer().transform(project)
    >>> AlloyWriter().write(spec, "car-rental.als")

Modules:
    models: Pydantic models for the OntoUML interchange format
    transform: OntoUML to Alloy transformation
    alloy: Alloy fragments and the accumulated specification
    converters: Alloy module writer
    validation: Model validation beyond schema
    cli: Command-line interface
"""

__version__ = "0.1.0"
