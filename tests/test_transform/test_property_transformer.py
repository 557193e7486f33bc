"""Tests for property transformation."""

from typing import Any

import pytest

from ontouml_to_alloy.alloy.fragments import AlloyFact
from ontouml_to_alloy.models import Class, ModelShapeError, Package, Property, RelationStereotype
from ontouml_to_alloy.transform.context import TransformationContext
from ontouml_to_alloy.transform.property_transformer import (
    PropertyCategory,
    classify_property,
    datatype_field_declaration,
    transform_property,
)


class TestClassifyProperty:
    """Tests for classify_property function."""

    def test_datatype_attribute(self, package: Package, text: Class) -> None:
        """Test attributes of datatypes."""
        address = package.create_datatype("Address")
        attribute = address.create_attribute(text, "street", is_ordered=True)
        assert classify_property(attribute) == PropertyCategory.DATATYPE_ATTRIBUTE

    def test_ordered_attribute(self, person: Class, text: Class) -> None:
        """Test ordered attributes of world classes."""
        attribute = person.create_attribute(text, "tags", is_ordered=True)
        assert classify_property(attribute) == PropertyCategory.ORDERED_ATTRIBUTE

    def test_general_attribute(self, person: Class, text: Class) -> None:
        """Test plain attributes of world classes."""
        attribute = person.create_attribute(text, "name")
        assert classify_property(attribute) == PropertyCategory.GENERAL_ATTRIBUTE

    def test_relation_ends(self, package: Package, person: Class) -> None:
        """Test source and target ends."""
        relation = package.create_binary_relation(person, person, "knows")
        source, target = relation.properties
        assert classify_property(source) == PropertyCategory.RELATION_SOURCE_END
        assert classify_property(target) == PropertyCategory.RELATION_TARGET_END

    def test_datatype_relation_end(self, package: Package, text: Class) -> None:
        """Test ends of relations between datatypes."""
        relation = package.create_binary_relation(package.create_datatype("Date"), text)
        assert classify_property(relation.properties[0]) == PropertyCategory.DATATYPE_RELATION_END

    def test_derivation_end(self, rental: dict[str, Any]) -> None:
        """Test derivation ends are skipped."""
        derivation = rental["derivation"]
        assert classify_property(derivation.properties[0]) == PropertyCategory.SKIP
        assert classify_property(derivation.properties[1]) == PropertyCategory.SKIP

    def test_orphan_property(self) -> None:
        """Test properties without an owner cannot be classified."""
        with pytest.raises(ModelShapeError, match="no class or relation owner"):
            classify_property(Property(name="orphan"))


class TestDatatypeFieldDeclaration:
    """Tests for datatype_field_declaration function."""

    @pytest.mark.parametrize(
        ("cardinality", "expected"),
        [
            (None, "street: Text"),
            ("1", "street: one Text"),
            ("0..1", "street: lone Text"),
            ("1..*", "street: some Text"),
            ("2..3", "street: set Text"),
        ],
    )
    def test_declaration(self, cardinality: str | None, expected: str) -> None:
        """Test keywords of inline datatype fields."""
        assert datatype_field_declaration("street", cardinality, "Text") == expected


class TestGeneralAttribute:
    """Tests for attributes of world classes."""

    def test_field_and_accessor(self, context: TransformationContext, person: Class, text: Class) -> None:
        """Test the world field, accessor and visible selector."""
        attribute = person.create_attribute(text, "name", "1")
        transform_property(context, attribute)
        spec = context.specification

        assert spec.world_fields == ["name: set Person set -> one Text"]
        function = spec.get_function("name1")
        assert function is not None
        assert function.render() == (
            "fun name1 [x: World.Person, w: World] : set Text {\n        x.(w.name)\n}"
        )
        assert spec.visible == ["select13[name]"]
        assert spec.relation_properties == []
        assert spec.facts == []

    def test_read_only(self, context: TransformationContext, person: Class, text: Class) -> None:
        """Test read-only attributes are fixed across worlds."""
        attribute = person.create_attribute(text, "name", "1", is_read_only=True)
        transform_property(context, attribute)

        assert context.specification.relation_properties == [
            "all w1, w2: World, x: w1.Person & w2.Person | name1[x,w1] = name1[x,w2]"
        ]

    def test_custom_cardinality(self, context: TransformationContext, person: Class, text: Class) -> None:
        """Test custom multiplicities produce a multiplicity fact."""
        attribute = person.create_attribute(text, "nicknames", "2..5")
        transform_property(context, attribute)
        spec = context.specification

        assert spec.world_fields == ["nicknames: set Person set -> set Text"]
        assert spec.facts == [
            AlloyFact(
                "multiplicity",
                ("all w: World, x: w.Person | #nicknames1[x,w]>=2 and #nicknames1[x,w]<=5",),
            )
        ]

    def test_upper_bound_only(self, context: TransformationContext, person: Class, text: Class) -> None:
        """Test a zero lower bound is not constrained."""
        transform_property(context, person.create_attribute(text, "nicknames", "0..3"))
        facts = context.specification.get_facts("multiplicity")
        assert facts[0].constraints == ("all w: World, x: w.Person | #nicknames1[x,w]<=3",)

    def test_world_class_type(self, context: TransformationContext, package: Package, person: Class) -> None:
        """Test attributes typed by world classes reference World."""
        car = package.create_kind("Car")
        transform_property(context, person.create_attribute(car, "car", "0..1"))
        function = context.specification.functions[0]
        assert function.return_type == "set World.Car"
        assert context.specification.world_fields == ["car: set Person set -> lone Car"]

    def test_transformed_once(self, context: TransformationContext, person: Class, text: Class) -> None:
        """Test a property is emitted only once."""
        attribute = person.create_attribute(text, "name")
        transform_property(context, attribute)
        transform_property(context, attribute)
        assert len(context.specification.functions) == 1

    def test_missing_type(self, context: TransformationContext, person: Class, text: Class) -> None:
        """Test an unresolved type raises."""
        attribute = person.create_attribute(text, "name")
        attribute._type_element = None
        with pytest.raises(ModelShapeError, match="attribute type"):
            transform_property(context, attribute)


class TestOrderedAttribute:
    """Tests for ordered attributes."""

    def test_sequence_encoding(self, context: TransformationContext, person: Class, text: Class) -> None:
        """Test ordered attributes are indexed by Int."""
        attribute = person.create_attribute(text, "tags", "0..*", is_ordered=True)
        transform_property(context, attribute)
        spec = context.specification

        assert spec.world_fields == ["tags: set Person set -> set Int set -> set Text"]
        assert spec.get_facts("ordering") == [
            AlloyFact(
                "ordering",
                (
                    "all w: World, x: w.Person | isSeq[x.(w.tags)]",
                    "all w: World, x: w.Person, i: Int | lone i.(x.(w.tags))",
                ),
            )
        ]
        function = spec.get_function("tags1")
        assert function is not None
        assert function.body == "Int.(x.(w.tags))"
        assert spec.visible == []

    def test_read_only(self, context: TransformationContext, person: Class, text: Class) -> None:
        """Test read-only ordered attributes fix the whole sequence."""
        attribute = person.create_attribute(text, "tags", is_ordered=True, is_read_only=True)
        transform_property(context, attribute)

        assert context.specification.relation_properties == [
            "all w1, w2: World, x: w1.Person & w2.Person | x.(w1.tags) = x.(w2.tags)"
        ]


class TestDatatypeAttribute:
    """Tests for attributes of datatypes."""

    def test_inline_field(self, context: TransformationContext, package: Package, text: Class) -> None:
        """Test datatype attributes become signature fields."""
        address = package.create_datatype("Address")
        transform_property(context, address.create_attribute(text, "street", "1"))
        transform_property(context, address.create_attribute(text, "number"))

        datatype = context.specification.get_datatype("Address")
        assert datatype is not None
        assert datatype.fields == ["street: one Text", "number: Text"]
        assert context.specification.world_fields == []
        assert context.specification.functions == []

    def test_custom_cardinality(self, context: TransformationContext, package: Package, text: Class) -> None:
        """Test custom multiplicities on datatype fields."""
        address = package.create_datatype("Address")
        transform_property(context, address.create_attribute(text, "lines", "2..3"))

        assert context.specification.get_datatype("Address").fields == ["lines: set Text"]
        assert context.specification.get_facts("multiplicity") == [
            AlloyFact("multiplicity", ("all x: Address | #x.lines>=2 and #x.lines<=3",))
        ]


class TestRelationEnds:
    """Tests for relation end accessors."""

    def test_plain_relation(self, context: TransformationContext, package: Package, person: Class) -> None:
        """Test accessors of an ordinary relation."""
        car = package.create_kind("Car")
        relation = package.create_binary_relation(
            person, car, "owns", RelationStereotype.MATERIAL, "0..1", "0..*"
        )
        for end in relation.properties:
            transform_property(context, end)
        spec = context.specification

        source = spec.get_function("Person1")
        target = spec.get_function("Car1")
        assert source is not None
        assert target is not None
        assert source.parameters == (("x", "World.Car"), ("w", "World"))
        assert source.return_type == "set World.Person"
        assert source.body == "(w.owns).x"
        assert target.parameters == (("x", "World.Person"), ("w", "World"))
        assert target.body == "x.(w.owns)"
        assert spec.relation_properties == []
        assert spec.facts == []

    def test_named_end(self, context: TransformationContext, package: Package, person: Class) -> None:
        """Test named ends are used as alias base."""
        relation = package.create_binary_relation(person, person, "knows")
        relation.properties[1].name = "friend"
        transform_property(context, relation.properties[1])
        assert context.specification.get_function("friend1") is not None

    def test_mediation_target_immutable(self, context: TransformationContext, rental: dict[str, Any]) -> None:
        """Test mediated entities do not change across worlds."""
        for end in rental["involves_customer"].properties:
            transform_property(context, end)

        assert context.specification.relation_properties == [
            "all w1, w2: World, x: w1.Rental & w2.Rental | Customer1[x,w1] = Customer1[x,w2]"
        ]

    def test_read_only_source(self, context: TransformationContext, package: Package, person: Class) -> None:
        """Test a read-only source end is immutable."""
        car = package.create_kind("Car")
        relation = package.create_binary_relation(person, car, "owns")
        relation.properties[0].is_read_only = True
        transform_property(context, relation.properties[0])

        assert context.specification.relation_properties == [
            "all w1, w2: World, x: w1.Car & w2.Car | Person1[x,w1] = Person1[x,w2]"
        ]

    def test_derived_relation(self, context: TransformationContext, rental: dict[str, Any]) -> None:
        """Test ends of a derived material relation project the relator away."""
        for end in rental["rents"].properties:
            transform_property(context, end)
        spec = context.specification

        assert spec.get_function("Customer1").body == "(select13[w.rents]).x"
        assert spec.get_function("Car1").body == "x.(select13[w.rents])"
        assert spec.get_facts("multiplicity") == [
            AlloyFact("multiplicity", ("all w: World, x: w.Car | #Customer1[x,w]>=1",))
        ]

    def test_derived_relation_without_relator(
        self, context: TransformationContext, package: Package, person: Class
    ) -> None:
        """Test ends of a binary material relation navigate the field directly."""
        knows = package.create_binary_relation(person, person, "knows", RelationStereotype.MATERIAL)
        likes = package.create_binary_relation(person, person, "likes", RelationStereotype.MATERIAL)
        package.create_binary_relation(knows, likes, stereotype=RelationStereotype.DERIVATION)

        transform_property(context, knows.properties[0])
        assert context.specification.functions[0].body == "(w.knows).x"
        assert context.specification.facts == []

    def test_ordered_end(self, context: TransformationContext, package: Package, person: Class) -> None:
        """Test ordered ends navigate through the projection."""
        relation = package.create_binary_relation(person, person, "follows")
        relation.properties[1].is_ordered = True
        transform_property(context, relation.properties[0])
        assert context.specification.functions[0].body == "(select13[w.follows]).x"

    def test_custom_end_cardinality(self, context: TransformationContext, package: Package, person: Class) -> None:
        """Test custom end multiplicities produce facts."""
        car = package.create_kind("Car")
        relation = package.create_binary_relation(person, car, "owns", target_cardinality="1..4")
        transform_property(context, relation.properties[1])

        assert context.specification.get_facts("multiplicity") == [
            AlloyFact("multiplicity", ("all w: World, x: w.Person | #Car1[x,w]>=1 and #Car1[x,w]<=4",))
        ]

    def test_skipped_ends(self, context: TransformationContext, rental: dict[str, Any]) -> None:
        """Test derivation ends produce nothing."""
        for end in rental["derivation"].properties:
            transform_property(context, end)
        spec = context.specification
        assert spec.functions == []
        assert spec.facts == []
