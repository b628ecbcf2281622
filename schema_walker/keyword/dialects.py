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

"""Built-in dialects (draft v3 and draft v4) and dialect lookup."""

import logging
from functools import lru_cache
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..exceptions import InvalidDialectError
from ..syntax import checkers as syntax
from ..syntax.helpers import ARRAY, BOOLEAN, INTEGER, NULL, NUMBER, OBJECT, STRING
from .descriptor import DialectDescriptor, TraversalShape

logger = logging.getLogger(__name__)

NONE = TraversalShape.NONE
SINGLE = TraversalShape.SINGLE
MAP = TraversalShape.MAP_OF_NAMED
LIST = TraversalShape.LIST_OF_ORDERED

ANY_TYPE = (ARRAY, BOOLEAN, INTEGER, NULL, NUMBER, OBJECT, STRING)

DRAFTV3_URI = "http://json-schema.org/draft-03/schema#"
DRAFTV4_URI = "http://json-schema.org/draft-04/schema#"

KeywordEntry = Tuple[str, syntax.SyntaxChecker, TraversalShape]


def _common_entries() -> List[KeywordEntry]:
    return [
        ("$schema", syntax.URISyntaxChecker("$schema", absolute=True), NONE),
        ("id", syntax.URISyntaxChecker("id"), NONE),
        ("$ref", syntax.RefSyntaxChecker("$ref"), NONE),
        ("title", syntax.TypeOnlySyntaxChecker("title", STRING), NONE),
        ("description", syntax.TypeOnlySyntaxChecker("description", STRING), NONE),
        ("default", syntax.TypeOnlySyntaxChecker("default", *ANY_TYPE), NONE),
        ("format", syntax.TypeOnlySyntaxChecker("format", STRING), NONE),
        # numbers
        ("minimum", syntax.NumericSyntaxChecker("minimum"), NONE),
        ("maximum", syntax.NumericSyntaxChecker("maximum"), NONE),
        ("exclusiveMinimum", syntax.ExclusiveSyntaxChecker("exclusiveMinimum", "minimum"), NONE),
        ("exclusiveMaximum", syntax.ExclusiveSyntaxChecker("exclusiveMaximum", "maximum"), NONE),
        # strings
        ("minLength", syntax.PositiveIntegerSyntaxChecker("minLength"), NONE),
        ("maxLength", syntax.PositiveIntegerSyntaxChecker("maxLength"), NONE),
        ("pattern", syntax.PatternSyntaxChecker("pattern"), NONE),
        # arrays
        ("additionalItems", syntax.SchemaOrBooleanSyntaxChecker("additionalItems"), SINGLE),
        ("minItems", syntax.PositiveIntegerSyntaxChecker("minItems"), NONE),
        ("maxItems", syntax.PositiveIntegerSyntaxChecker("maxItems"), NONE),
        ("uniqueItems", syntax.TypeOnlySyntaxChecker("uniqueItems", BOOLEAN), NONE),
        # objects
        ("additionalProperties", syntax.SchemaOrBooleanSyntaxChecker("additionalProperties"), SINGLE),
        ("properties", syntax.SchemaMapSyntaxChecker("properties"), MAP),
        ("patternProperties", syntax.SchemaMapSyntaxChecker("patternProperties", regex_names=True), MAP),
        # any instance type
        ("enum", syntax.EnumSyntaxChecker("enum"), NONE),
    ]


def _draftv3_entries() -> List[KeywordEntry]:
    return _common_entries() + [
        ("divisibleBy", syntax.DivisorSyntaxChecker("divisibleBy"), NONE),
        ("items", syntax.SchemaOrSchemaArraySyntaxChecker("items"), LIST),
        ("required", syntax.TypeOnlySyntaxChecker("required", BOOLEAN), NONE),
        ("dependencies", syntax.DependenciesSyntaxChecker("dependencies", draft_v3=True), MAP),
        ("type", syntax.TypeKeywordSyntaxChecker("type", draft_v3=True), LIST),
        ("disallow", syntax.TypeKeywordSyntaxChecker("disallow", draft_v3=True), LIST),
        ("extends", syntax.SchemaOrSchemaArraySyntaxChecker("extends"), LIST),
    ]


def _draftv4_entries() -> List[KeywordEntry]:
    return _common_entries() + [
        ("multipleOf", syntax.DivisorSyntaxChecker("multipleOf"), NONE),
        ("items", syntax.SchemaOrSchemaArraySyntaxChecker("items", allow_empty=False), LIST),
        ("minProperties", syntax.PositiveIntegerSyntaxChecker("minProperties"), NONE),
        ("maxProperties", syntax.PositiveIntegerSyntaxChecker("maxProperties"), NONE),
        ("required", syntax.RequiredSyntaxChecker("required"), NONE),
        ("definitions", syntax.SchemaMapSyntaxChecker("definitions"), MAP),
        ("dependencies", syntax.DependenciesSyntaxChecker("dependencies"), MAP),
        ("type", syntax.TypeKeywordSyntaxChecker("type"), NONE),
        ("allOf", syntax.SchemaArraySyntaxChecker("allOf"), LIST),
        ("anyOf", syntax.SchemaArraySyntaxChecker("anyOf"), LIST),
        ("oneOf", syntax.SchemaArraySyntaxChecker("oneOf"), LIST),
        ("not", syntax.SchemaSyntaxChecker("not"), SINGLE),
    ]


def build_dialect(name: str, entries: List[KeywordEntry]) -> DialectDescriptor:
    """Assemble a descriptor from (keyword, checker, shape) entries.

    Raises:
        InvalidDialectError: If a keyword appears twice
    """
    checkers: Dict[str, syntax.SyntaxChecker] = {}
    shapes: Dict[str, TraversalShape] = {}
    for keyword, checker, shape in entries:
        if keyword in shapes:
            raise InvalidDialectError(f"Keyword '{keyword}' is declared twice in dialect '{name}'")
        checkers[keyword] = checker
        shapes[keyword] = shape
    return DialectDescriptor(name, shapes.keys(), checkers, shapes)


@lru_cache(maxsize=None)
def draftv3() -> DialectDescriptor:
    return build_dialect("draftv3", _draftv3_entries())


@lru_cache(maxsize=None)
def draftv4() -> DialectDescriptor:
    return build_dialect("draftv4", _draftv4_entries())


_DIALECTS: Dict[str, Callable[[], DialectDescriptor]] = {
    "draftv3": draftv3,
    "draftv4": draftv4,
}

_SCHEMA_URIS: Dict[str, str] = {
    DRAFTV3_URI: "draftv3",
    DRAFTV4_URI: "draftv4",
}


def available_dialects() -> List[str]:
    return sorted(_DIALECTS)


def get_dialect(name: str) -> DialectDescriptor:
    """Return the built-in dialect called *name*.

    Raises:
        InvalidDialectError: If no such dialect exists
    """
    try:
        factory = _DIALECTS[name]
    except KeyError:
        raise InvalidDialectError(f"Unknown dialect: '{name}'. Valid dialects: {available_dialects()}")
    return factory()


def _normalize_schema_uri(uri: str) -> str:
    uri = uri.strip()
    if uri.startswith("https://"):
        uri = "http://" + uri[len("https://"):]
    if not uri.endswith("#"):
        uri += "#"
    return uri


def dialect_for_schema(document: Any, default: str = "draftv4") -> DialectDescriptor:
    """Pick the dialect declared by the document's ``$schema``, else *default*."""
    declared: Optional[str] = None
    if isinstance(document, dict) and isinstance(document.get("$schema"), str):
        declared = _SCHEMA_URIS.get(_normalize_schema_uri(document["$schema"]))
        if declared is None:
            logger.warning(f"Unrecognized $schema '{document['$schema']}', using dialect '{default}'")
    return get_dialect(declared or default)
