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

"""Dialect descriptors: which keywords a JSON Schema draft knows and how to walk them."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping

from ..exceptions import InvalidDialectError
from ..syntax.checkers import SyntaxChecker


class TraversalShape(Enum):
    """Where a keyword's value holds subschemas."""

    NONE = "none"
    SINGLE = "single"
    MAP_OF_NAMED = "map_of_named"
    LIST_OF_ORDERED = "list_of_ordered"


class DialectDescriptor:
    """Immutable registry of one dialect's keywords.

    Every supported keyword declares a traversal shape (``NONE`` for keywords
    without subschemas). Checkers and shapes may only be registered for
    supported keywords.
    """

    __slots__ = ("_name", "_supported", "_checkers", "_shapes")

    def __init__(
        self,
        name: str,
        supported_keywords: Iterable[str],
        checkers: Mapping[str, SyntaxChecker],
        shapes: Mapping[str, TraversalShape],
    ):
        """Build a descriptor.

        Args:
            name: Dialect name (e.g. "draftv4")
            supported_keywords: Keywords the dialect recognizes
            checkers: Syntax checker per keyword
            shapes: Traversal shape per keyword

        Raises:
            InvalidDialectError: If the three tables are inconsistent
        """
        supported = frozenset(supported_keywords)

        unsupported_checkers = sorted(set(checkers) - supported)
        if unsupported_checkers:
            raise InvalidDialectError(
                f"Dialect '{name}' registers checkers for unsupported keywords: {unsupported_checkers}"
            )

        unsupported_shapes = sorted(set(shapes) - supported)
        if unsupported_shapes:
            raise InvalidDialectError(
                f"Dialect '{name}' declares traversal shapes for unsupported keywords: {unsupported_shapes}"
            )

        missing_shapes = sorted(supported - set(shapes))
        if missing_shapes:
            raise InvalidDialectError(
                f"Dialect '{name}' has keywords without a traversal shape: {missing_shapes}"
            )

        for keyword, checker in checkers.items():
            if checker.keyword != keyword:
                raise InvalidDialectError(
                    f"Dialect '{name}' registers checker for '{checker.keyword}' under keyword '{keyword}'"
                )

        self._name = name
        self._supported = supported
        self._checkers = MappingProxyType({k: checkers[k] for k in sorted(checkers)})
        self._shapes = MappingProxyType({k: shapes[k] for k in sorted(shapes)})

    @property
    def name(self) -> str:
        return self._name

    @property
    def supported_keywords(self) -> frozenset:
        return self._supported

    @property
    def checkers(self) -> Mapping[str, SyntaxChecker]:
        """Checkers by keyword, iterating in sorted keyword order."""
        return self._checkers

    @property
    def shapes(self) -> Mapping[str, TraversalShape]:
        """Traversal shapes by keyword, iterating in sorted keyword order."""
        return self._shapes

    def subschema_keywords(self):
        return [k for k, shape in self._shapes.items() if shape is not TraversalShape.NONE]

    def __repr__(self) -> str:
        return f"DialectDescriptor('{self._name}', {len(self._supported)} keywords)"
