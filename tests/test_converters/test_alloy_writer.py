"""Tests for the Alloy module writer."""

from collections.abc import Callable
from pathlib import Path

import pytest

from ontouml_to_alloy.alloy import AlloyDatatype, AlloyEnum, AlloyFact, AlloyFunction, AlloySpecification
from ontouml_to_alloy.converters import AlloyWriter, convert_ontouml_to_alloy
from ontouml_to_alloy.converters.alloy_writer import BASE_SIGNATURES, LIBRARY_IMPORTS
from ontouml_to_alloy.models import LoaderError, ModelShapeError
from tests.fixtures.sample_models import BROKEN_PROJECT


@pytest.fixture
def spec() -> AlloySpecification:
    """Return a small specification touching every section."""
    spec = AlloySpecification(name="rental")
    spec.add_world_field("Person: set exists:>Object")
    spec.add_world_field("name: set Person set -> one String")
    spec.add_world_constraint("exists:>Object in Person")
    spec.add_fact(AlloyFact("rigid", ("rigidity[Person,Object,exists]",)))
    spec.add_fun(AlloyFunction("name1", (("x", "World.Person"), ("w", "World")), "set String", "x.(w.name)"))
    spec.add_visible("select13[name]")
    spec.add_relation_property("all w1, w2: World, x: w1.Person & w2.Person | name1[x,w1] = name1[x,w2]")
    spec.add_datatype(AlloyDatatype("String"))
    spec.add_enum(AlloyEnum("Color", ("red", "blue")))
    return spec


class TestAlloyWriter:
    """Tests for AlloyWriter."""

    def test_header_and_imports(self, spec: AlloySpecification) -> None:
        """Test the module header and library imports come first."""
        text = AlloyWriter().write_text(spec)
        lines = text.splitlines()

        assert lines[0] == "module rental"
        assert lines[2:5] == [f"open {library}" for library in LIBRARY_IMPORTS]
        assert BASE_SIGNATURES in text

    def test_world_signature(self, spec: AlloySpecification) -> None:
        """Test world fields and constraints."""
        text = AlloyWriter().write_text(spec)
        assert (
            "sig World {\n"
            "        exists: some Endurant,\n"
            "        Person: set exists:>Object,\n"
            "        name: set Person set -> one String\n"
            "}{\n"
            "        exists:>Object in Person\n"
            "}"
        ) in text

    def test_world_without_constraints(self) -> None:
        """Test the World signature of an empty specification."""
        text = AlloyWriter().write_text(AlloySpecification())
        assert "sig World {\n        exists: some Endurant\n}\n\n" in text
        assert "relationProperties" not in text

    def test_fixed_sections(self, spec: AlloySpecification) -> None:
        """Test predicates and the existence fact are always present."""
        text = AlloyWriter().write_text(spec)
        assert "pred rigidity [Class: univ->univ, Nature: univ, Exists: univ->univ] {" in text
        assert "pred antirigidity [Class: univ->univ, Nature: univ, Exists: univ->univ] {" in text
        assert "fact additionalFacts {\n        Endurant = World.exists\n}" in text

    def test_fragments(self, spec: AlloySpecification) -> None:
        """Test every fragment is rendered."""
        text = AlloyWriter().write_text(spec)
        assert "sig String in Datatype {}" in text
        assert "enum Color { red, blue }" in text
        assert "fact rigid {\n        rigidity[Person,Object,exists]\n}" in text
        assert "fun name1 [x: World.Person, w: World] : set String {" in text
        assert (
            "fact relationProperties {\n"
            "        all w1, w2: World, x: w1.Person & w2.Person | name1[x,w1] = name1[x,w2]\n"
            "}"
        ) in text
        assert "fun visible : World -> univ {\n        exists + select13[name]\n}" in text

    def test_section_order(self, spec: AlloySpecification) -> None:
        """Test sections appear in a fixed order."""
        text = AlloyWriter().write_text(spec)
        markers = [
            "module rental",
            "open util/relation",
            "abstract sig Endurant",
            "sig World {",
            "pred rigidity",
            "fact additionalFacts",
            "sig String in Datatype",
            "enum Color",
            "fact rigid",
            "fact relationProperties",
            "fun name1",
            "fun visible",
            "run singleWorld",
        ]
        positions = [text.index(marker) for marker in markers]
        assert positions == sorted(positions)

    def test_run_commands(self, spec: AlloySpecification) -> None:
        """Test default run commands."""
        text = AlloyWriter().write_text(spec)
        assert text.endswith(
            "run singleWorld {} for 10 but 1 World, 7 Int\n\n"
            "run multipleWorlds {} for 10 but 3 World, 7 Int\n"
        )

    def test_custom_scopes(self, spec: AlloySpecification) -> None:
        """Test scopes are configurable."""
        text = AlloyWriter(world_scope=5, scope=12, int_bitwidth=8).write_text(spec)
        assert "run singleWorld {} for 12 but 1 World, 8 Int" in text
        assert "run multipleWorlds {} for 12 but 5 World, 8 Int" in text

    @pytest.mark.parametrize("option", ["world_scope", "scope", "int_bitwidth"])
    def test_invalid_scope(self, option: str) -> None:
        """Test non-positive scopes are rejected."""
        with pytest.raises(ValueError, match=option):
            AlloyWriter(**{option: 0})

    def test_deterministic(self, spec: AlloySpecification) -> None:
        """Test writing twice gives the same text."""
        writer = AlloyWriter()
        assert writer.write_text(spec) == writer.write_text(spec)

    def test_write_file(self, spec: AlloySpecification, tmp_path: Path) -> None:
        """Test writing to a file."""
        output = tmp_path / "rental.als"
        writer = AlloyWriter()
        writer.write(spec, output)
        assert output.read_text(encoding="utf-8") == writer.write_text(spec)


class TestConvertOntoumlToAlloy:
    """Tests for convert_ontouml_to_alloy function."""

    def test_convert(self, car_rental_file: Path, tmp_path: Path) -> None:
        """Test the convenience pipeline writes a module."""
        output = tmp_path / "out.als"
        convert_ontouml_to_alloy(car_rental_file, output, world_scope=4, scope=8)

        text = output.read_text(encoding="utf-8")
        assert text.startswith("module CarRental\n")
        assert "run multipleWorlds {} for 8 but 4 World, 7 Int" in text

    def test_missing_input(self, tmp_path: Path) -> None:
        """Test loader errors propagate."""
        with pytest.raises(LoaderError):
            convert_ontouml_to_alloy(tmp_path / "missing.json", tmp_path / "out.als")

    def test_untransformable_model(self, write_model: Callable[..., Path], tmp_path: Path) -> None:
        """Test models with unresolved types fail to transform."""
        output = tmp_path / "out.als"
        with pytest.raises(ModelShapeError):
            convert_ontouml_to_alloy(write_model(BROKEN_PROJECT), output)
        assert not output.exists()
