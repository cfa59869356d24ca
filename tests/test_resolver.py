import pytest

from swagger2apis.transform.resolver import (
    ArrayShape,
    MapShape,
    ObjectShape,
    PrimitiveShape,
    ReferenceShape,
    classify,
    resolve,
    resolve_text,
)
from swagger2apis.transform.types import (
    ArrayOf,
    MapOf,
    ObjectAnonymous,
    Primitive,
    Reference,
    Unknown,
)


class TestClassify:
    def test_reference_wins_over_type(self):
        assert classify({"$ref": "#/definitions/User", "type": "object"}) == ReferenceShape("#/definitions/User")

    def test_additional_properties(self):
        assert isinstance(classify({"type": "object", "additionalProperties": {"type": "string"}}), MapShape)

    def test_array(self):
        assert classify({"type": "array", "items": {"type": "string"}}) == ArrayShape({"type": "string"})

    def test_object(self):
        assert classify({"type": "object"}) == ObjectShape()
        assert classify({"properties": {"a": {"type": "string"}}}) == ObjectShape()

    def test_non_mapping_node(self):
        assert classify(None) == PrimitiveShape(None)
        assert classify("string") == PrimitiveShape(None)


class TestReferences:
    def test_reference_resolves_to_interface_name(self):
        assert resolve({"$ref": "#/definitions/User"}) == Reference(name="IUser")

    def test_same_segment_same_name(self):
        a = resolve({"$ref": "#/definitions/用户"})
        b = resolve({"$ref": "other.json#/definitions/用户"})
        assert a == b == Reference(name="IYongHu")

    def test_malformed_reference_still_named(self):
        assert resolve({"$ref": "User"}) == Reference(name="IUser")


class TestMaps:
    def test_map_of_array_of_reference(self):
        node = {
            "type": "object",
            "additionalProperties": {"type": "array", "items": {"$ref": "#/definitions/Item"}},
        }
        assert resolve(node) == MapOf(
            key=Primitive(name="string"),
            value=ArrayOf(item=Reference(name="IItem")),
        )
        assert resolve_text(node) == "Record<string,IItem[]>"

    def test_map_of_array_of_primitive(self):
        node = {"additionalProperties": {"type": "array", "items": {"type": "integer"}}}
        assert resolve_text(node) == "Record<string,number[]>"

    def test_non_array_values_are_plain_object(self):
        assert resolve({"additionalProperties": {"type": "string"}}) == ObjectAnonymous()
        assert resolve({"additionalProperties": True}) == ObjectAnonymous()


class TestArrays:
    @pytest.mark.parametrize(
        "items",
        [
            {"type": "string"},
            {"$ref": "#/definitions/Pet"},
            {"type": "array", "items": {"type": "boolean"}},
            {"type": "unheard-of"},
        ],
    )
    def test_array_resolves_its_items(self, items):
        assert resolve({"type": "array", "items": items}) == ArrayOf(item=resolve(items))

    def test_generic_pair_becomes_map(self):
        node = {"type": "array", "items": {"$ref": "#/definitions/Map«string,Item»"}}
        assert resolve(node) == MapOf(key=Primitive(name="string"), value=Primitive(name="Item"))
        assert resolve_text(node) == "Record<string,Item>"

    def test_generic_pair_maps_java_names(self):
        node = {"type": "array", "items": {"$ref": "#/definitions/Map«String,Long»"}}
        assert resolve_text(node) == "Record<string,number>"

    def test_nested_generic_is_not_a_pair(self):
        node = {"type": "array", "items": {"$ref": "#/definitions/Map«string,List«Item»»"}}
        assert resolve(node) == ArrayOf(item=Reference(name="IMapstringListItem"))

    def test_missing_items(self):
        assert resolve({"type": "array"}) == ArrayOf(item=Unknown())
        assert resolve_text({"type": "array"}) == "any[]"


class TestPrimitives:
    @pytest.mark.parametrize(
        "declared, expected",
        [
            ("integer", "number"),
            ("number", "number"),
            ("string", "string"),
            ("boolean", "boolean"),
            ("file", "File"),
        ],
    )
    def test_primitive_table(self, declared, expected):
        assert resolve({"type": declared}) == Primitive(name=expected)

    def test_object_type(self):
        assert resolve_text({"type": "object"}) == "object"

    def test_unknown_type(self):
        assert resolve({"type": "mystery"}) == Unknown()
        assert resolve_text({"type": "mystery"}) == ""

    def test_absent_schema(self):
        assert resolve(None) == Unknown()
        assert resolve({}) == Unknown()
