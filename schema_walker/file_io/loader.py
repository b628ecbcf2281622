# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Schema document loader with source location tracking."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from ..exceptions import DocumentLoadError
from ..pointer import JsonPointer

logger = logging.getLogger(__name__)

SourceMap = Dict[str, Dict[str, int]]

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"
_JSON_SCALARS = (str, int, float, bool, type(None))


class JsonCompatibleLoader(yaml.SafeLoader):
    """SafeLoader that leaves unquoted dates and times as strings."""


JsonCompatibleLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


@dataclass(frozen=True)
class LoadedDocument:
    """A decoded schema document and where it came from.

    source_map keys are JSON pointer strings (e.g. "/properties/a"), values
    contain 1-based line/column.
    """

    document: Any
    loading_uri: str = ""
    source_map: SourceMap = field(default_factory=dict)


def build_source_map(content: str) -> SourceMap:
    """Build a mapping from JSON pointers to 1-based line/column.

    This uses PyYAML's node tree (yaml.compose), which also accepts most JSON
    documents, so locations are tracked without changing the decoded data.
    """
    source_map: SourceMap = {}

    try:
        root = yaml.compose(content, Loader=JsonCompatibleLoader)
    except yaml.YAMLError:
        # No locations then; decoding errors are reported by the loader itself.
        return source_map

    if root is None:
        return source_map

    def _record(pointer: JsonPointer, node) -> None:
        mark = getattr(node, "start_mark", None)
        if mark is None:
            return
        # PyYAML uses 0-based line/column
        source_map[str(pointer)] = {"line": int(mark.line) + 1, "column": int(mark.column) + 1}

    def _walk(node, pointer: JsonPointer) -> None:
        _record(pointer, node)

        if isinstance(node, yaml.nodes.MappingNode):
            for key_node, value_node in node.value:
                key = getattr(key_node, "value", None)
                if key is None:
                    continue
                _walk(value_node, pointer.append(str(key)))
        elif isinstance(node, yaml.nodes.SequenceNode):
            for idx, item_node in enumerate(node.value):
                _walk(item_node, pointer.append(idx))

    _walk(root, JsonPointer.root())
    return source_map


def load_document_from_string(content: str, fmt: str = "json", loading_uri: str = "") -> LoadedDocument:
    """Decode *content* as JSON or YAML.

    Raises:
        DocumentLoadError: If the content cannot be decoded
    """
    try:
        if fmt == "json":
            document = json.loads(content)
        elif fmt == "yaml":
            document = yaml.load(content, Loader=JsonCompatibleLoader)
        else:
            raise DocumentLoadError(f"Unsupported document format: '{fmt}'")
    except json.JSONDecodeError as exc:
        raise DocumentLoadError(f"Failed to parse JSON document {loading_uri or '<string>'}: {exc}")
    except yaml.YAMLError as exc:
        raise DocumentLoadError(f"Failed to parse YAML document {loading_uri or '<string>'}: {exc}")

    _check_json_value(document, JsonPointer.root(), loading_uri)
    return LoadedDocument(document=document, loading_uri=loading_uri, source_map=build_source_map(content))


def _check_json_value(value: Any, pointer: JsonPointer, loading_uri: str) -> None:
    """Reject decoded values a JSON document cannot hold.

    YAML allows non-string mapping keys and tagged values such as ``!!binary``
    or ``!!timestamp``; schemas are walked as JSON, so these fail the load.
    """
    source = loading_uri or "<string>"
    if isinstance(value, dict):
        for key, member in value.items():
            if not isinstance(key, str):
                raise DocumentLoadError(
                    f"Non-string key {key!r} ({type(key).__name__}) at '{pointer}' in {source}; "
                    "quote the key to use it as an object member name"
                )
            _check_json_value(member, pointer.append(key), loading_uri)
    elif isinstance(value, list):
        for idx, item in enumerate(value):
            _check_json_value(item, pointer.append(idx), loading_uri)
    elif not isinstance(value, _JSON_SCALARS):
        raise DocumentLoadError(f"Value at '{pointer}' in {source} is not a JSON value: {type(value).__name__}")


def load_document(file_path: Union[str, Path]) -> LoadedDocument:
    """Load a schema document from a ``.json``, ``.yaml`` or ``.yml`` file.

    Raises:
        DocumentLoadError: If the file is missing, unreadable or cannot be decoded
    """
    path = Path(file_path)

    if not path.exists():
        raise DocumentLoadError(f"Schema file not found: {path}")

    if not path.is_file():
        raise DocumentLoadError(f"Path is not a file: {path}")

    suffix = path.suffix.lower()
    if suffix in JSON_SUFFIXES:
        fmt = "json"
    elif suffix in YAML_SUFFIXES:
        fmt = "yaml"
    else:
        raise DocumentLoadError(
            f"Unsupported schema file extension '{suffix}': {path}. "
            f"Expected one of: {', '.join(JSON_SUFFIXES + YAML_SUFFIXES)}"
        )

    logger.debug(f"Loading schema document: {path}")
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DocumentLoadError(f"Failed to read schema file {path}: {exc}")

    return load_document_from_string(content, fmt=fmt, loading_uri=path.resolve().as_uri())
