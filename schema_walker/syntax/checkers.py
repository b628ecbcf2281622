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

"""Syntax checkers, one family per kind of keyword value.

A checker validates the value of a single keyword at the current tree location.
Violations are logged as errors into the report; checkers never raise for them
and never recurse. Subschema locations found in a well-formed value are appended
to the collector so the walker can schedule them.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Sequence, Tuple

from ..exceptions import InvalidPointerError
from ..messages.catalog import MessageCatalog
from ..pointer import JsonPointer
from ..report import ProcessingMessage, ProcessingReport
from ..tree import SchemaTree
from .helpers import (
    ARRAY,
    BOOLEAN,
    INTEGER,
    NUMBER,
    OBJECT,
    PRIMITIVE_TYPES,
    STRING,
    has_duplicates,
    is_absolute_uri,
    is_valid_regex,
    is_valid_uri_reference,
    node_type,
    type_matches,
)

logger = logging.getLogger(__name__)

Collector = List[JsonPointer]


class SyntaxChecker(ABC):
    """Abstract base checker for one keyword.

    Subclasses declare the JSON types the keyword value may have; a value of any
    other type is reported with ``common.incorrectType`` before ``check_value``
    is reached.
    """

    def __init__(self, keyword: str, *valid_types: str):
        if not valid_types:
            raise ValueError(f"Checker for '{keyword}' must accept at least one type")
        self.keyword = keyword
        self.valid_types: Tuple[str, ...] = tuple(sorted(valid_types))

    def check_syntax(
        self,
        collector: Collector,
        catalog: MessageCatalog,
        report: ProcessingReport,
        tree: SchemaTree,
    ) -> None:
        value = tree.node[self.keyword]
        if not type_matches(value, self.valid_types):
            report.error(
                self.new_message(
                    tree,
                    catalog,
                    "common.incorrectType",
                    found=node_type(value),
                    expected=list(self.valid_types),
                ).put("value", value)
            )
            return
        self.check_value(collector, catalog, report, tree, value)

    @abstractmethod
    def check_value(
        self,
        collector: Collector,
        catalog: MessageCatalog,
        report: ProcessingReport,
        tree: SchemaTree,
        value: Any,
    ) -> None:
        """Check a value already known to have one of the valid types."""

    def new_message(self, tree: SchemaTree, catalog: MessageCatalog, key: str, **arguments: Any) -> ProcessingMessage:
        message = ProcessingMessage(catalog.format(key, keyword=self.keyword, **arguments))
        message.put("domain", "syntax").put("schema", tree.as_context()).put("keyword", self.keyword)
        for name, argument in arguments.items():
            message.put(name, argument)
        return message

    def keyword_pointer(self, tree: SchemaTree) -> JsonPointer:
        return tree.pointer.append(self.keyword)

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self.keyword}')"


class TypeOnlySyntaxChecker(SyntaxChecker):
    """Keywords whose only constraint is the JSON type of their value."""

    def check_value(self, collector, catalog, report, tree, value):
        pass


class URISyntaxChecker(SyntaxChecker):
    def __init__(self, keyword: str, absolute: bool = False):
        super().__init__(keyword, STRING)
        self.absolute = absolute

    def check_value(self, collector, catalog, report, tree, value):
        self.check_uri(catalog, report, tree, value)

    def check_uri(self, catalog, report, tree, value: str) -> bool:
        if not is_valid_uri_reference(value):
            report.error(self.new_message(tree, catalog, "common.uri.invalid", value=value))
            return False
        if self.absolute and not is_absolute_uri(value):
            report.error(self.new_message(tree, catalog, "common.uri.notAbsolute", value=value))
            return False
        return True


class RefSyntaxChecker(URISyntaxChecker):
    """``$ref``: a URI reference.

    References to a location of the same document (``#`` or ``#/a/b``) that
    resolve to an object are collected; anything else is left to the external
    resolver.
    """

    def __init__(self, keyword: str = "$ref"):
        super().__init__(keyword, absolute=False)

    def check_value(self, collector, catalog, report, tree, value):
        if not self.check_uri(catalog, report, tree, value) or not value.startswith("#"):
            return

        try:
            target = JsonPointer.from_fragment(value)
            node = target.resolve(tree.root)
        except InvalidPointerError as exc:
            logger.debug(f"Reference '{value}' at '{tree.pointer}' is not a local pointer: {exc}")
            return
        if isinstance(node, dict):
            collector.append(target)


class PatternSyntaxChecker(SyntaxChecker):
    def __init__(self, keyword: str = "pattern"):
        super().__init__(keyword, STRING)

    def check_value(self, collector, catalog, report, tree, value):
        if not is_valid_regex(value):
            report.error(self.new_message(tree, catalog, "common.regex.invalid", value=value))


class PositiveIntegerSyntaxChecker(SyntaxChecker):
    """Length and count limits (``maxItems``, ``minLength``, ...)."""

    def __init__(self, keyword: str):
        super().__init__(keyword, INTEGER)

    def check_value(self, collector, catalog, report, tree, value):
        if value < 0:
            report.error(self.new_message(tree, catalog, "common.integer.negative", value=value))


class DivisorSyntaxChecker(SyntaxChecker):
    def __init__(self, keyword: str):
        super().__init__(keyword, INTEGER, NUMBER)

    def check_value(self, collector, catalog, report, tree, value):
        if value <= 0:
            report.error(self.new_message(tree, catalog, "common.divisor.notPositive", value=value))


class NumericSyntaxChecker(SyntaxChecker):
    def __init__(self, keyword: str):
        super().__init__(keyword, INTEGER, NUMBER)

    def check_value(self, collector, catalog, report, tree, value):
        pass


class ExclusiveSyntaxChecker(SyntaxChecker):
    """``exclusiveMinimum``/``exclusiveMaximum``: a boolean that needs its bound."""

    def __init__(self, keyword: str, pair: str):
        super().__init__(keyword, BOOLEAN)
        self.pair = pair

    def check_value(self, collector, catalog, report, tree, value):
        if self.pair not in tree.node:
            report.error(self.new_message(tree, catalog, "exclusive.missingPair", pair=self.pair))


class EnumSyntaxChecker(SyntaxChecker):
    def __init__(self, keyword: str = "enum"):
        super().__init__(keyword, ARRAY)

    def check_value(self, collector, catalog, report, tree, value):
        if not value:
            report.error(self.new_message(tree, catalog, "common.array.empty"))
            return
        if has_duplicates(value):
            report.error(self.new_message(tree, catalog, "common.array.duplicateElements").put("value", value))


class RequiredSyntaxChecker(SyntaxChecker):
    """Draft v4 ``required``: a non-empty array of unique strings."""

    def __init__(self, keyword: str = "required"):
        super().__init__(keyword, ARRAY)

    def check_value(self, collector, catalog, report, tree, value):
        if not value:
            report.error(self.new_message(tree, catalog, "common.array.empty"))
            return

        valid = True
        for index, element in enumerate(value):
            if not isinstance(element, str):
                valid = False
                report.error(
                    self.new_message(
                        tree,
                        catalog,
                        "common.array.element.incorrectType",
                        index=index,
                        found=node_type(element),
                        expected=[STRING],
                    )
                )
        if valid and has_duplicates(value):
            report.error(self.new_message(tree, catalog, "common.array.duplicateElements").put("value", value))


def _check_schema_elements(
    checker: SyntaxChecker,
    collector: Collector,
    catalog: MessageCatalog,
    report: ProcessingReport,
    tree: SchemaTree,
    elements: Sequence[Any],
) -> None:
    base = checker.keyword_pointer(tree)
    for index, element in enumerate(elements):
        if not isinstance(element, dict):
            report.error(
                checker.new_message(
                    tree,
                    catalog,
                    "common.array.element.incorrectType",
                    index=index,
                    found=node_type(element),
                    expected=[OBJECT],
                )
            )
            continue
        collector.append(base.append(index))


class SchemaOrSchemaArraySyntaxChecker(SyntaxChecker):
    """``items`` and draft v3 ``extends``: one schema or an array of schemas."""

    def __init__(self, keyword: str, allow_empty: bool = True):
        super().__init__(keyword, ARRAY, OBJECT)
        self.allow_empty = allow_empty

    def check_value(self, collector, catalog, report, tree, value):
        if isinstance(value, dict):
            collector.append(self.keyword_pointer(tree))
            return
        if not value and not self.allow_empty:
            report.error(self.new_message(tree, catalog, "common.array.empty"))
            return
        _check_schema_elements(self, collector, catalog, report, tree, value)


class SchemaArraySyntaxChecker(SyntaxChecker):
    """``allOf``, ``anyOf``, ``oneOf``: a non-empty array of schemas."""

    def __init__(self, keyword: str):
        super().__init__(keyword, ARRAY)

    def check_value(self, collector, catalog, report, tree, value):
        if not value:
            report.error(self.new_message(tree, catalog, "common.array.empty"))
            return
        _check_schema_elements(self, collector, catalog, report, tree, value)


class SchemaMapSyntaxChecker(SyntaxChecker):
    """``properties``, ``definitions``, ``patternProperties``: named schemas.

    With ``regex_names`` set every member name must be a valid regular expression.
    """

    def __init__(self, keyword: str, regex_names: bool = False):
        super().__init__(keyword, OBJECT)
        self.regex_names = regex_names

    def check_value(self, collector, catalog, report, tree, value):
        base = self.keyword_pointer(tree)
        for name in sorted(value):
            member = value[name]
            if self.regex_names and not is_valid_regex(name):
                report.error(self.new_message(tree, catalog, "patternProperties.member.invalidRegex", name=name))
            if not isinstance(member, dict):
                report.error(
                    self.new_message(
                        tree,
                        catalog,
                        "common.schemaMap.member.incorrectType",
                        name=name,
                        found=node_type(member),
                        expected=[OBJECT],
                    )
                )
                continue
            collector.append(base.append(name))


class SchemaOrBooleanSyntaxChecker(SyntaxChecker):
    """``additionalItems``, ``additionalProperties``."""

    def __init__(self, keyword: str):
        super().__init__(keyword, BOOLEAN, OBJECT)

    def check_value(self, collector, catalog, report, tree, value):
        if isinstance(value, dict):
            collector.append(self.keyword_pointer(tree))


class SchemaSyntaxChecker(SyntaxChecker):
    """Keywords holding exactly one schema (``not``)."""

    def __init__(self, keyword: str):
        super().__init__(keyword, OBJECT)

    def check_value(self, collector, catalog, report, tree, value):
        collector.append(self.keyword_pointer(tree))


class DependenciesSyntaxChecker(SyntaxChecker):
    """``dependencies``: property dependencies and schema dependencies.

    Draft v4 property dependencies are non-empty arrays of unique strings; draft
    v3 also accepts a single string and does not constrain the array further.
    """

    def __init__(self, keyword: str = "dependencies", draft_v3: bool = False):
        super().__init__(keyword, OBJECT)
        self.draft_v3 = draft_v3
        if draft_v3:
            self.value_types: Tuple[str, ...] = (ARRAY, OBJECT, STRING)
        else:
            self.value_types = (ARRAY, OBJECT)

    def check_value(self, collector, catalog, report, tree, value):
        base = self.keyword_pointer(tree)
        for name in sorted(value):
            dependency = value[name]
            if isinstance(dependency, dict):
                collector.append(base.append(name))
            elif isinstance(dependency, list):
                self._check_property_array(catalog, report, tree, name, dependency)
            elif not (self.draft_v3 and isinstance(dependency, str)):
                report.error(
                    self.new_message(
                        tree,
                        catalog,
                        "dependencies.value.incorrectType",
                        name=name,
                        found=node_type(dependency),
                        expected=list(self.value_types),
                    )
                )

    def _check_property_array(self, catalog, report, tree, name: str, dependency: List[Any]) -> None:
        if not dependency and not self.draft_v3:
            report.error(self.new_message(tree, catalog, "dependencies.array.empty", name=name))
            return

        valid = True
        for index, element in enumerate(dependency):
            if not isinstance(element, str):
                valid = False
                report.error(
                    self.new_message(
                        tree,
                        catalog,
                        "dependencies.array.element.incorrectType",
                        name=name,
                        index=index,
                        found=node_type(element),
                    )
                )
        if valid and not self.draft_v3 and has_duplicates(dependency):
            report.error(self.new_message(tree, catalog, "dependencies.array.duplicateElements", name=name))


class TypeKeywordSyntaxChecker(SyntaxChecker):
    """``type`` (both drafts) and draft v3 ``disallow``.

    Draft v3 accepts ``any`` as a type name, allows empty arrays and allows
    schemas as array elements; those schemas are collected.
    """

    def __init__(self, keyword: str, draft_v3: bool = False):
        super().__init__(keyword, ARRAY, STRING)
        self.draft_v3 = draft_v3
        names: Iterable[str] = PRIMITIVE_TYPES + ("any",) if draft_v3 else PRIMITIVE_TYPES
        self.type_names: Tuple[str, ...] = tuple(sorted(names))

    def check_value(self, collector, catalog, report, tree, value):
        if isinstance(value, str):
            self._check_name(catalog, report, tree, value)
            return

        if not value and not self.draft_v3:
            report.error(self.new_message(tree, catalog, "common.array.empty"))
            return

        base = self.keyword_pointer(tree)
        expected = [OBJECT, STRING] if self.draft_v3 else [STRING]
        valid = True
        for index, element in enumerate(value):
            if isinstance(element, str):
                valid = self._check_name(catalog, report, tree, element) and valid
            elif self.draft_v3 and isinstance(element, dict):
                collector.append(base.append(index))
            else:
                valid = False
                report.error(
                    self.new_message(
                        tree,
                        catalog,
                        "common.array.element.incorrectType",
                        index=index,
                        found=node_type(element),
                        expected=expected,
                    )
                )
        if valid and has_duplicates(value):
            report.error(self.new_message(tree, catalog, "common.array.duplicateElements").put("value", value))

    def _check_name(self, catalog, report, tree, name: str) -> bool:
        if name in self.type_names:
            return True
        report.error(
            self.new_message(tree, catalog, "type.unknownType", value=name, valid=list(self.type_names))
        )
        return False
