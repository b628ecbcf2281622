"""Unit tests for schema_walker/syntax/checkers.py through the built-in dialects."""
import pytest

from schema_walker.pointer import JsonPointer
from schema_walker.syntax.helpers import canonical, has_duplicates, node_type, type_matches


def _pointers(collector):
    return [str(p) for p in collector]


def _single_error(report):
    errors = report.errors
    assert len(errors) == 1, [m.message for m in errors]
    return errors[0]


# --- helpers ---------------------------------------------------------------


@pytest.mark.parametrize(
    "value,expected",
    [(None, "null"), (True, "boolean"), (3, "integer"), (1.5, "number"), ("x", "string"), ([], "array"), ({}, "object")],
)
def test_node_type(value, expected):
    assert node_type(value) == expected


def test_number_accepts_integer_but_not_boolean():
    assert type_matches(3, ["number"])
    assert not type_matches(True, ["number", "integer"])
    assert not type_matches(1.5, ["integer"])


def test_json_equality_for_duplicates():
    assert canonical(1) == canonical(1.0)
    assert canonical(True) != canonical(1)
    assert has_duplicates([{"a": 1, "b": 2}, {"b": 2, "a": 1}])
    assert not has_duplicates([1, True, "1", [1]])


# --- type mismatch ---------------------------------------------------------


def test_incorrect_type_reports_found_and_expected(v4, run_checker):
    collector, report = run_checker(v4, "minItems", {"minItems": "3"})
    error = _single_error(report)
    assert collector == []
    assert error.get("keyword") == "minItems"
    assert error.get("found") == "string"
    assert error.get("expected") == ["integer"]
    assert error.get("value") == "3"
    assert error.get("domain") == "syntax"
    assert error.get("schema") == {"loadingURI": "#", "pointer": ""}
    assert 'keyword "minItems" has incorrect type' in error.message


def test_boolean_is_not_an_integer(v4, run_checker):
    _, report = run_checker(v4, "maxLength", {"maxLength": True})
    assert _single_error(report).get("found") == "boolean"


def test_integer_is_a_number(v4, run_checker):
    _, report = run_checker(v4, "minimum", {"minimum": 3})
    assert len(report) == 0


# --- scalar keywords -------------------------------------------------------


def test_negative_count(v4, run_checker):
    _, report = run_checker(v4, "minItems", {"minItems": -1})
    error = _single_error(report)
    assert error.get("value") == -1
    assert "zero or positive" in error.message


@pytest.mark.parametrize("value,errors", [(0, 1), (-2, 1), (0.5, 0), (3, 0)])
def test_multiple_of_must_be_positive(v4, run_checker, value, errors):
    _, report = run_checker(v4, "multipleOf", {"multipleOf": value})
    assert len(report.errors) == errors


def test_divisible_by_in_draftv3(v3, run_checker):
    _, report = run_checker(v3, "divisibleBy", {"divisibleBy": 0})
    assert len(report.errors) == 1


def test_exclusive_needs_its_bound(v4, run_checker):
    _, report = run_checker(v4, "exclusiveMinimum", {"exclusiveMinimum": True})
    assert _single_error(report).get("pair") == "minimum"

    _, report = run_checker(v4, "exclusiveMaximum", {"exclusiveMaximum": True, "maximum": 3})
    assert len(report) == 0


def test_invalid_pattern(v4, run_checker):
    _, report = run_checker(v4, "pattern", {"pattern": "("})
    assert _single_error(report).get("value") == "("


def test_schema_uri_must_be_absolute(v4, run_checker):
    _, report = run_checker(v4, "$schema", {"$schema": "draft-04/schema#"})
    assert "absolute URI" in _single_error(report).message

    _, report = run_checker(v4, "$schema", {"$schema": "http://json-schema.org/draft-04/schema#"})
    assert len(report) == 0


def test_invalid_id(v4, run_checker):
    _, report = run_checker(v4, "id", {"id": "has space"})
    assert "not a valid URI" in _single_error(report).message


# --- enum / required -------------------------------------------------------


@pytest.mark.parametrize(
    "value,errors",
    [
        ([], 1),
        ([1, 1.0], 1),
        ([{"a": 1, "b": 2}, {"b": 2, "a": 1}], 1),
        ([1, True, "1", None], 0),
    ],
)
def test_enum(v4, run_checker, value, errors):
    _, report = run_checker(v4, "enum", {"enum": value})
    assert len(report.errors) == errors


def test_enum_is_non_empty_in_draftv3(v3, run_checker):
    _, report = run_checker(v3, "enum", {"enum": []})
    assert len(report.errors) == 1


def test_required_draftv4(v4, run_checker):
    _, report = run_checker(v4, "required", {"required": []})
    assert "must not be empty" in _single_error(report).message

    _, report = run_checker(v4, "required", {"required": ["a", 1]})
    error = _single_error(report)
    assert error.get("index") == 1
    assert error.get("found") == "integer"

    _, report = run_checker(v4, "required", {"required": ["a", "a"]})
    assert "must be unique" in _single_error(report).message


def test_required_draftv3_is_boolean(v3, run_checker):
    _, report = run_checker(v3, "required", {"required": True})
    assert len(report) == 0

    _, report = run_checker(v3, "required", {"required": ["a"]})
    assert _single_error(report).get("expected") == ["boolean"]


# --- subschema keywords ----------------------------------------------------


def test_items_single_schema(v4, run_checker):
    collector, report = run_checker(v4, "items", {"items": {}})
    assert _pointers(collector) == ["/items"]
    assert len(report) == 0


def test_items_array_collects_object_elements(v4, run_checker):
    collector, report = run_checker(v4, "items", {"items": [{}, 3, {"type": "string"}]})
    assert _pointers(collector) == ["/items/0", "/items/2"]
    error = _single_error(report)
    assert error.get("index") == 1
    assert error.get("expected") == ["object"]


def test_items_empty_array(v4, v3, run_checker):
    _, report = run_checker(v4, "items", {"items": []})
    assert len(report.errors) == 1

    _, report = run_checker(v3, "items", {"items": []})
    assert len(report) == 0


@pytest.mark.parametrize("keyword", ["allOf", "anyOf", "oneOf"])
def test_schema_arrays(v4, run_checker, keyword):
    _, report = run_checker(v4, keyword, {keyword: []})
    assert len(report.errors) == 1

    collector, report = run_checker(v4, keyword, {keyword: [{}, {}]})
    assert _pointers(collector) == [f"/{keyword}/0", f"/{keyword}/1"]
    assert len(report) == 0


def test_properties_sorted_members(v4, run_checker):
    collector, report = run_checker(v4, "properties", {"properties": {"b": {}, "a": {}, "c": 1}})
    assert _pointers(collector) == ["/properties/a", "/properties/b"]
    error = _single_error(report)
    assert error.get("name") == "c"
    assert error.get("found") == "integer"


def test_definitions(v4, run_checker):
    collector, _ = run_checker(v4, "definitions", {"definitions": {"x": {}, "a/b": {}}})
    assert collector == [JsonPointer(("definitions", "a/b")), JsonPointer(("definitions", "x"))]


def test_pattern_properties_invalid_name_still_collected(v4, run_checker):
    collector, report = run_checker(v4, "patternProperties", {"patternProperties": {"[": {}, "^a": {}}})
    assert _pointers(collector) == ["/patternProperties/[", "/patternProperties/^a"]
    assert _single_error(report).get("name") == "["


@pytest.mark.parametrize("keyword", ["additionalItems", "additionalProperties"])
def test_schema_or_boolean(v4, run_checker, keyword):
    collector, report = run_checker(v4, keyword, {keyword: False})
    assert collector == []
    assert len(report) == 0

    collector, _ = run_checker(v4, keyword, {keyword: {}})
    assert _pointers(collector) == [f"/{keyword}"]

    _, report = run_checker(v4, keyword, {keyword: "no"})
    assert len(report.errors) == 1


def test_not(v4, run_checker):
    collector, _ = run_checker(v4, "not", {"not": {}})
    assert _pointers(collector) == ["/not"]

    _, report = run_checker(v4, "not", {"not": []})
    assert len(report.errors) == 1


def test_dependencies_draftv4(v4, run_checker):
    schema = {
        "dependencies": {
            "a": ["b"],
            "c": {},
            "d": [],
            "e": "f",
            "g": ["x", "x"],
            "h": [1],
        }
    }
    collector, report = run_checker(v4, "dependencies", schema)
    assert _pointers(collector) == ["/dependencies/c"]
    assert [m.get("name") for m in report.errors] == ["d", "e", "g", "h"]


def test_dependencies_draftv3(v3, run_checker):
    collector, report = run_checker(v3, "dependencies", {"dependencies": {"a": "b", "c": [], "d": {}, "e": 1}})
    assert _pointers(collector) == ["/dependencies/d"]
    error = _single_error(report)
    assert error.get("name") == "e"
    assert error.get("expected") == ["array", "object", "string"]


def test_type_draftv4(v4, run_checker):
    _, report = run_checker(v4, "type", {"type": "strin"})
    error = _single_error(report)
    assert error.get("value") == "strin"
    assert "any" not in error.get("valid")

    for value in (["string", "string"], [], "any", [{}]):
        _, report = run_checker(v4, "type", {"type": value})
        assert len(report.errors) == 1, value

    collector, report = run_checker(v4, "type", {"type": ["string", "null"]})
    assert collector == []
    assert len(report) == 0


@pytest.mark.parametrize("keyword", ["type", "disallow"])
def test_type_draftv3_collects_schemas(v3, run_checker, keyword):
    collector, report = run_checker(v3, keyword, {keyword: ["any", {"type": "string"}]})
    assert _pointers(collector) == [f"/{keyword}/1"]
    assert len(report) == 0

    _, report = run_checker(v3, keyword, {keyword: [3]})
    assert _single_error(report).get("expected") == ["object", "string"]


def test_extends_draftv3(v3, run_checker):
    collector, _ = run_checker(v3, "extends", {"extends": {}})
    assert _pointers(collector) == ["/extends"]

    collector, _ = run_checker(v3, "extends", {"extends": [{}, {}]})
    assert _pointers(collector) == ["/extends/0", "/extends/1"]


# --- $ref ------------------------------------------------------------------


def test_ref_collects_local_object_targets(v4, run_checker):
    schema = {"$ref": "#/definitions/a", "definitions": {"a": {}, "n": 3}}
    collector, report = run_checker(v4, "$ref", schema)
    assert _pointers(collector) == ["/definitions/a"]
    assert len(report) == 0


def test_ref_to_root(v4, run_checker):
    collector, _ = run_checker(v4, "$ref", {"$ref": "#"})
    assert collector == [JsonPointer.root()]


@pytest.mark.parametrize(
    "ref",
    ["#/definitions/n", "#/missing", "other.json#/definitions/a", "http://example.com/schema#", "#foo"],
)
def test_ref_not_collected(v4, run_checker, ref):
    collector, report = run_checker(v4, "$ref", {"$ref": ref, "definitions": {"a": {}, "n": 3}})
    assert collector == []
    assert len(report.errors) == 0


def test_ref_invalid_uri(v4, run_checker):
    collector, report = run_checker(v4, "$ref", {"$ref": "#/a b"})
    assert collector == []
    assert len(report.errors) == 1
