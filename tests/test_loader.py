"""Tests for schema_walker/file_io/: document loading, builtins and source locations."""
import json
from pathlib import Path

import pytest

from schema_walker.exceptions import DocumentLoadError
from schema_walker.file_io import (
    SourceLocation,
    available_builtins,
    build_source_map,
    format_source,
    load_builtin,
    load_document,
    load_document_from_string,
    lookup_source,
    source_for_message,
)
from schema_walker.file_io.builtin import clear_cache
from schema_walker.file_io.source_location import message_pointer
from schema_walker.report import ProcessingMessage

JSON_SCHEMA = """{
  "type": "object",
  "properties": {
    "a": {"type": "strin"}
  }
}
"""

YAML_SCHEMA = """type: object
properties:
  a:
    type: strin
items:
  - {}
  - type: string
"""


def test_load_json_file(tmp_path):
    path = tmp_path / "schema.json"
    path.write_text(JSON_SCHEMA, encoding="utf-8")
    loaded = load_document(path)
    assert loaded.document == json.loads(JSON_SCHEMA)
    assert loaded.loading_uri == path.resolve().as_uri()
    assert loaded.source_map[""]["line"] == 1
    assert loaded.source_map["/properties"]["line"] == 3
    assert loaded.source_map["/properties/a/type"]["line"] == 4


def test_load_yaml_file(tmp_path):
    path = tmp_path / "schema.yaml"
    path.write_text(YAML_SCHEMA, encoding="utf-8")
    loaded = load_document(path)
    assert loaded.document["properties"]["a"] == {"type": "strin"}
    assert loaded.source_map["/properties/a/type"] == {"line": 4, "column": 11}
    assert loaded.source_map["/items/1/type"]["line"] == 7


@pytest.mark.parametrize("name", ["schema.txt", "missing.json"])
def test_load_rejects_bad_paths(tmp_path, name):
    path = tmp_path / name
    if name.endswith(".txt"):
        path.write_text("{}", encoding="utf-8")
    with pytest.raises(DocumentLoadError):
        load_document(path)


def test_load_directory_is_an_error(tmp_path):
    with pytest.raises(DocumentLoadError):
        load_document(tmp_path)


def test_malformed_content():
    with pytest.raises(DocumentLoadError):
        load_document_from_string("{", fmt="json")
    with pytest.raises(DocumentLoadError):
        load_document_from_string("a: [", fmt="yaml")
    with pytest.raises(DocumentLoadError):
        load_document_from_string("{}", fmt="toml")


def test_source_map_of_unparsable_text_is_empty():
    assert build_source_map("a: [") == {}
    assert build_source_map("") == {}


def test_builtins_are_private_copies():
    assert available_builtins() == ["draftv3", "draftv4"]
    first = load_builtin("draftv4")
    assert first.loading_uri == "http://json-schema.org/draft-04/schema#"
    first.document["properties"].clear()
    assert load_builtin("draftv4").document["properties"]


def test_unknown_builtin():
    with pytest.raises(DocumentLoadError):
        load_builtin("draftv7")


def test_message_pointer_points_at_keyword():
    message = ProcessingMessage("x").put("schema", {"loadingURI": "#", "pointer": "/properties/a"})
    assert message_pointer(message) == "/properties/a"
    message.put("keyword", "a/b")
    assert message_pointer(message) == "/properties/a/a~1b"
    assert message_pointer(ProcessingMessage("no schema")) is None


def test_lookup_source():
    source_map = {"/type": {"line": 2, "column": 3}}
    assert lookup_source(source_map, "/type") == SourceLocation(pointer="/type", line=2, column=3)
    assert lookup_source(source_map, "/other") == SourceLocation(pointer="/other")
    assert lookup_source(None, "/type") == SourceLocation(pointer="/type")


def test_source_for_message_and_format(tmp_path, monkeypatch):
    monkeypatch.setenv("SCHEMA_WALKER_SOURCE_ROOT", str(tmp_path))
    file_path = tmp_path / "schemas" / "a.yaml"
    message = ProcessingMessage("x").put("schema", {"loadingURI": "#", "pointer": "/properties/a"}).put("keyword", "type")
    loc = source_for_message(message, file_path, {"/properties/a/type": {"line": 4, "column": 11}})
    assert loc.line == 4
    expected_path = str(Path("schemas") / "a.yaml")
    assert format_source(loc) == f" (source= {expected_path}:4:11  pointer=/properties/a/type)"


def test_format_source_without_file():
    assert format_source(None) == ""
    assert format_source(SourceLocation()) == ""
    assert format_source(SourceLocation(pointer="")) == " (pointer=/)"


def test_clear_builtin_cache():
    load_builtin("draftv3")
    clear_cache()
    assert load_builtin("draftv3").document["$schema"] == "http://json-schema.org/draft-03/schema#"


def test_yaml_dates_stay_strings():
    loaded = load_document_from_string(
        "type: string\ndefault: 2020-01-01\nexamples:\n  - 2021-06-01T10:00:00Z\n", fmt="yaml"
    )
    assert loaded.document["default"] == "2020-01-01"
    assert loaded.document["examples"] == ["2021-06-01T10:00:00Z"]
    assert loaded.source_map["/default"]["line"] == 2


@pytest.mark.parametrize(
    "content",
    [
        "properties:\n  200: {}\n  ok: {}\n",
        "properties:\n  200: {}\n",
        "enum:\n  - {true: 1}\n",
    ],
)
def test_yaml_non_string_keys_are_rejected(content):
    with pytest.raises(DocumentLoadError, match="Non-string key"):
        load_document_from_string(content, fmt="yaml")


def test_yaml_quoted_numeric_key_is_accepted():
    loaded = load_document_from_string("properties:\n  '200': {}\n", fmt="yaml")
    assert loaded.document == {"properties": {"200": {}}}
    assert "/properties/200" in loaded.source_map


def test_yaml_tagged_values_are_rejected():
    with pytest.raises(DocumentLoadError, match="/default"):
        load_document_from_string("default: !!timestamp 2020-01-01\n", fmt="yaml")
    with pytest.raises(DocumentLoadError, match="/enum/0"):
        load_document_from_string("enum:\n  - !!binary aGVsbG8=\n", fmt="yaml")
