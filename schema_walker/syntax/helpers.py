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

"""JSON value helpers shared by the syntax checkers."""

from __future__ import annotations

import re
from typing import Any, Hashable, Iterable, Tuple
from urllib.parse import urlsplit

# JSON types as named by JSON Schema
NULL = "null"
BOOLEAN = "boolean"
INTEGER = "integer"
NUMBER = "number"
STRING = "string"
ARRAY = "array"
OBJECT = "object"

PRIMITIVE_TYPES: Tuple[str, ...] = (ARRAY, BOOLEAN, INTEGER, NULL, NUMBER, OBJECT, STRING)

_URI_FORBIDDEN_RE = re.compile(r"[\s\"<>\\^`{|}]")


def node_type(value: Any) -> str:
    """Return the JSON type name of a decoded JSON value."""
    if value is None:
        return NULL
    if isinstance(value, bool):
        return BOOLEAN
    if isinstance(value, int):
        return INTEGER
    if isinstance(value, float):
        return NUMBER
    if isinstance(value, str):
        return STRING
    if isinstance(value, list):
        return ARRAY
    if isinstance(value, dict):
        return OBJECT
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def type_matches(value: Any, expected: Iterable[str]) -> bool:
    found = node_type(value)
    for name in expected:
        if found == name or (name == NUMBER and found == INTEGER):
            return True
    return False


def canonical(value: Any) -> Hashable:
    """Hashable form of a JSON value following JSON equality.

    Numbers compare by value (``1`` equals ``1.0``), booleans never equal numbers,
    and member order of objects does not matter.
    """
    if isinstance(value, bool):
        return (BOOLEAN, value)
    if isinstance(value, (int, float)):
        return (NUMBER, value)
    if isinstance(value, list):
        return (ARRAY, tuple(canonical(item) for item in value))
    if isinstance(value, dict):
        return (OBJECT, frozenset((key, canonical(item)) for key, item in value.items()))
    return (node_type(value), value)


def has_duplicates(values: Iterable[Any]) -> bool:
    seen = set()
    for value in values:
        key = canonical(value)
        if key in seen:
            return True
        seen.add(key)
    return False


def is_valid_regex(pattern: str) -> bool:
    # Python's re dialect stands in for ECMA 262 here.
    try:
        re.compile(pattern)
    except re.error:
        return False
    return True


def is_valid_uri_reference(value: str) -> bool:
    if _URI_FORBIDDEN_RE.search(value):
        return False
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    if parts.scheme and not re.match(r"^[A-Za-z][A-Za-z0-9+.-]*$", parts.scheme):
        return False
    return True


def is_absolute_uri(value: str) -> bool:
    return bool(urlsplit(value).scheme)
