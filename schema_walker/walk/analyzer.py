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

"""Syntax analysis listener."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, FrozenSet, List, Optional, Set

from ..keyword.descriptor import DialectDescriptor
from ..keyword.dialects import dialect_for_schema
from ..messages.catalog import MessageCatalog, default_catalog
from ..pointer import JsonPointer
from ..report import ProcessingMessage, ProcessingReport
from ..syntax.helpers import node_type
from ..tree import SchemaTree
from .listener import SchemaListener
from .walker import SchemaWalker

logger = logging.getLogger(__name__)


class SchemaAnalyzer(SchemaListener[FrozenSet[JsonPointer]]):
    """Checks the syntax of every visited schema and records visited locations.

    At each location: a non-object value is reported as not a schema; member
    names unknown to the dialect are reported once as a warning; every present
    keyword with a checker is checked, in sorted keyword order.
    """

    def __init__(self, descriptor: DialectDescriptor, catalog: Optional[MessageCatalog] = None):
        self.descriptor = descriptor
        self.catalog = catalog if catalog is not None else default_catalog()
        self._visited: Set[JsonPointer] = set()

    def entering_path(self, pointer: JsonPointer, report: ProcessingReport) -> None:
        self._visited.add(pointer)

    def visiting(self, tree: SchemaTree, report: ProcessingReport) -> List[JsonPointer]:
        node = tree.node
        collected: List[JsonPointer] = []

        if not isinstance(node, dict):
            message = ProcessingMessage(self.catalog.format("core.notASchema", found=node_type(node)))
            message.put("domain", "syntax").put("schema", tree.as_context()).put("found", node_type(node))
            report.error(message)
            return collected

        fields = set(node)
        unknown = sorted(fields - self.descriptor.supported_keywords)
        if unknown:
            message = ProcessingMessage(self.catalog.format("core.unknownKeywords", ignored=unknown))
            message.put("domain", "syntax").put("schema", tree.as_context()).put("ignored", unknown)
            report.warn(message)

        for keyword, checker in self.descriptor.checkers.items():
            if keyword not in fields:
                continue
            checker.check_syntax(collected, self.catalog, report, tree)

        logger.debug(f"Visited '{tree.pointer}': {len(collected)} subschema(s) found")
        return collected

    def exiting_path(self, pointer: JsonPointer, report: ProcessingReport) -> None:
        pass

    def get_value(self) -> FrozenSet[JsonPointer]:
        return frozenset(self._visited)


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of :func:`analyze_schema`."""

    dialect: str
    visited: FrozenSet[JsonPointer]
    report: ProcessingReport

    @property
    def is_valid(self) -> bool:
        return self.report.is_success()


def analyze_schema(
    document: Any,
    dialect: Optional[DialectDescriptor] = None,
    catalog: Optional[MessageCatalog] = None,
    report: Optional[ProcessingReport] = None,
    loading_uri: str = "",
) -> AnalysisResult:
    """Walk *document* with a :class:`SchemaAnalyzer`.

    Args:
        document: Decoded schema document; it is not modified
        dialect: Dialect to enforce; chosen from ``$schema`` when omitted
        catalog: Message catalog; the bundled one when omitted
        report: Report to log into; a new one when omitted
        loading_uri: URI the document was loaded from

    Returns:
        AnalysisResult with the visited locations and the report
    """
    if dialect is None:
        dialect = dialect_for_schema(document)
    if report is None:
        report = ProcessingReport()

    tree = SchemaTree(document, loading_uri=loading_uri)
    listener = SchemaAnalyzer(dialect, catalog)
    SchemaWalker(dialect).walk(tree, listener, report)
    return AnalysisResult(dialect=dialect.name, visited=listener.get_value(), report=report)
