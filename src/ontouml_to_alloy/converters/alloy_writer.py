"""Write Alloy modules from an accumulated specification.

The generated module encodes a time-varying OntoUML model as a set of
possible worlds: every world holds the endurants existing in it and the
extension of each class and relation in that world.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ontouml_to_alloy.alloy.fragments import INDENT, AlloyFact

if TYPE_CHECKING:
    from ontouml_to_alloy.alloy.specification import AlloySpecification

logger = logging.getLogger(__name__)

# Alloy library modules the generated text depends on
LIBRARY_IMPORTS = ("util/relation", "util/sequniv", "util/ternary")

# Signatures shared by every generated module
BASE_SIGNATURES = """abstract sig Endurant {}

sig Object extends Endurant {}

sig Aspect extends Endurant {}

sig Datatype {}"""

# Ontological meta-properties referenced by rigid/antirigid facts
ONTOLOGICAL_PREDICATES = f"""pred rigidity [Class: univ->univ, Nature: univ, Exists: univ->univ] {{
{INDENT}all w1: World, p: univ | p in w1.Class implies all w2: World | p in w2.Exists implies p in w2.Class
}}

pred antirigidity [Class: univ->univ, Nature: univ, Exists: univ->univ] {{
{INDENT}all p: Nature | p in World.Class implies some w: World | p in w.Exists and p not in w.Class
}}"""

# Every endurant exists in at least one world
EXISTENCE_FACT = AlloyFact("additionalFacts", ("Endurant = World.exists",))

DEFAULT_SCOPE = 10
DEFAULT_WORLD_SCOPE = 3
DEFAULT_INT_BITWIDTH = 7


class AlloyWriter:
    """Serialize an AlloySpecification to Alloy source text.

    Usage:
        writer = AlloyWriter()
        writer.write(spec, Path("model.als"))

    Or for in-memory conversion:
        text = writer.write_text(spec)
    """

    def __init__(
        self,
        world_scope: int = DEFAULT_WORLD_SCOPE,
        scope: int = DEFAULT_SCOPE,
        int_bitwidth: int = DEFAULT_INT_BITWIDTH,
    ) -> None:
        """Initialize the Alloy writer.

        Args:
        ----
            world_scope: Number of worlds in the multiple-worlds run.
            scope: Default scope of both run commands.
            int_bitwidth: Integer bitwidth of both run commands.

        Raises:
        ------
            ValueError: If a scope or the bitwidth is not positive.

        """
        for option, value in (
            ("world_scope", world_scope),
            ("scope", scope),
            ("int_bitwidth", int_bitwidth),
        ):
            if value < 1:
                raise ValueError(f"{option} must be positive, got {value}")

        self._world_scope = world_scope
        self._scope = scope
        self._int_bitwidth = int_bitwidth

    def write(self, spec: AlloySpecification, output_path: Path) -> None:
        """Write the specification to an .als file.

        Args:
        ----
            spec: The accumulated specification.
            output_path: Path for the output file.

        """
        text = self.write_text(spec)
        output_path.write_text(text, encoding="utf-8")
        logger.info("Wrote %d characters to %s", len(text), output_path)

    def write_text(self, spec: AlloySpecification) -> str:
        """Serialize the specification to Alloy source text.

        Args:
        ----
            spec: The accumulated specification.

        Returns:
        -------
            The complete Alloy module, ending with a newline.

        """
        sections = [
            f"module {spec.name}",
            "\n".join(f"open {library}" for library in LIBRARY_IMPORTS),
            BASE_SIGNATURES,
            self._world_signature(spec),
            ONTOLOGICAL_PREDICATES,
            EXISTENCE_FACT.render(),
        ]
        sections.extend(datatype.render() for datatype in spec.datatypes.values())
        sections.extend(enum.render() for enum in spec.enums)
        sections.extend(fact.render() for fact in spec.facts)

        if spec.relation_properties:
            sections.append(AlloyFact("relationProperties", tuple(spec.relation_properties)).render())

        sections.extend(function.render() for function in spec.functions)
        sections.append(self._visible_function(spec))
        sections.append(self._run_commands())

        return "\n\n".join(sections) + "\n"

    def _world_signature(self, spec: AlloySpecification) -> str:
        """Build the World signature with its fields and constraints."""
        fields = ["exists: some Endurant", *spec.world_fields]
        text = "sig World {\n" + ",\n".join(INDENT + f for f in fields) + "\n}"

        if spec.world_constraints:
            text += "{\n" + "\n".join(INDENT + c for c in spec.world_constraints) + "\n}"

        return text

    def _visible_function(self, spec: AlloySpecification) -> str:
        """Build the selector listing what the visualizer shows by default."""
        selectors = " + ".join(["exists", *spec.visible])
        return f"fun visible : World -> univ {{\n{INDENT}{selectors}\n}}"

    def _run_commands(self) -> str:
        bounds = f"{self._int_bitwidth} Int"
        return (
            f"run singleWorld {{}} for {self._scope} but 1 World, {bounds}\n\n"
            f"run multipleWorlds {{}} for {self._scope} but {self._world_scope} World, {bounds}"
        )


def convert_ontouml_to_alloy(
    input_path: Path,
    output_path: Path,
    world_scope: int = DEFAULT_WORLD_SCOPE,
    scope: int = DEFAULT_SCOPE,
) -> None:
    """High-level function to convert an OntoUML file to Alloy.

    This is a convenience function that handles the full pipeline:
    1. Load and validate the JSON/YAML project
    2. Transform to an AlloySpecification
    3. Write the .als file

    Args:
    ----
        input_path: Input JSON/YAML project file path.
        output_path: Output .als file path.
        world_scope: Number of worlds in the multiple-worlds run.
        scope: Default scope of the run commands.

    Raises:
    ------
        LoaderError: If the input file cannot be read.
        pydantic.ValidationError: If the input is invalid.
        ModelShapeError: If the model cannot be transformed.

    """
    from ontouml_to_alloy.models.loader import load_project
    from ontouml_to_alloy.transform.transformer import OntoumlToAlloyTransformer

    project = load_project(input_path)
    spec = OntoumlToAlloyTransformer().transform(project)

    writer = AlloyWriter(world_scope=world_scope, scope=scope)
    writer.write(spec, output_path)
