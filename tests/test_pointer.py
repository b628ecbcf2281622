"""Unit tests for schema_walker/pointer.py."""
import pytest

from schema_walker.exceptions import InvalidPointerError
from schema_walker.pointer import JsonPointer


def test_root_is_empty():
    root = JsonPointer.root()
    assert root.tokens == ()
    assert root.is_root
    assert str(root) == ""
    assert root.parent is None


def test_append_returns_new_pointer():
    root = JsonPointer.root()
    child = root.append("properties").append("a")
    assert root.tokens == ()
    assert child.tokens == ("properties", "a")
    assert child.parent == JsonPointer(("properties",))
    assert child.last == "a"


def test_append_stringifies_indices():
    assert JsonPointer.root().append("items").append(0) == JsonPointer(("items", "0"))


def test_parse_and_str_use_rfc6901_escapes():
    pointer = JsonPointer.parse("/a~1b/c~0d")
    assert pointer.tokens == ("a/b", "c~d")
    assert str(pointer) == "/a~1b/c~0d"


@pytest.mark.parametrize("text", ["a/b", "/bad~2escape", "/trailing~"])
def test_parse_rejects_malformed(text):
    with pytest.raises(InvalidPointerError):
        JsonPointer.parse(text)


def test_from_fragment_decodes_percent_escapes():
    assert JsonPointer.from_fragment("#/definitions/a%20b") == JsonPointer(("definitions", "a b"))
    assert JsonPointer.from_fragment("#") == JsonPointer.root()


def test_equality_and_hash_are_structural():
    a = JsonPointer.parse("/properties/a")
    b = JsonPointer.root().append("properties").append("a")
    assert a == b
    assert a is not b
    assert len({a, b}) == 1


def test_sorting_is_by_tokens():
    pointers = [JsonPointer.parse(p) for p in ["/b", "/a/c", "", "/a"]]
    assert [str(p) for p in sorted(pointers)] == ["", "/a", "/a/c", "/b"]


def test_is_parent_of():
    parent = JsonPointer.parse("/properties")
    assert parent.is_parent_of(JsonPointer.parse("/properties/a"))
    assert not parent.is_parent_of(parent)
    assert not parent.is_parent_of(JsonPointer.parse("/items"))


def test_resolve_objects_and_arrays():
    document = {"items": [{"type": "string"}, {"type": "integer"}], "a/b": 1}
    assert JsonPointer.parse("/items/1/type").resolve(document) == "integer"
    assert JsonPointer.parse("/a~1b").resolve(document) == 1
    assert JsonPointer.root().resolve(document) is document


@pytest.mark.parametrize("text", ["/missing", "/items/2", "/items/01", "/items/-", "/items/-1", "/items/0/type/x", "/items/0/type/0"])
def test_resolve_failures(text):
    document = {"items": [{"type": "string"}, {}]}
    with pytest.raises(InvalidPointerError):
        JsonPointer.parse(text).resolve(document)


def test_parse_rejects_non_strings():
    with pytest.raises(InvalidPointerError):
        JsonPointer.parse(["a"])


def test_from_fragment_keeps_escaped_slashes():
    pointer = JsonPointer.from_fragment("#/definitions/a~1b")
    assert pointer.tokens == ("definitions", "a/b")
    assert pointer.resolve({"definitions": {"a/b": {}}}) == {}
