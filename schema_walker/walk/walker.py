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

"""Depth-first schema walker.

The walker owns the traversal: it decides which locations are visited, in which
order, and guarantees each location is processed at most once per walk even
when local references form cycles. Keyword knowledge lives in the dialect
descriptor and in the listener.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ..keyword.descriptor import DialectDescriptor, TraversalShape
from ..pointer import JsonPointer
from ..report import ProcessingReport
from ..tree import SchemaTree
from .listener import SchemaListener

logger = logging.getLogger(__name__)


class VisitState(Enum):
    NOT_VISITED = "not_visited"
    ENTERING = "entering"
    VISITING = "visiting"
    EXITING = "exiting"
    VISITED = "visited"


class SchemaWalker:
    """Walks a schema tree for one dialect.

    The walker itself holds no per-walk state and can be reused; each call to
    :meth:`walk` needs its own listener and report.
    """

    def __init__(self, descriptor: DialectDescriptor):
        self.descriptor = descriptor

    def walk(self, tree: SchemaTree, listener: SchemaListener, report: ProcessingReport) -> None:
        """Walk *tree* depth-first, driving *listener*.

        Raises:
            ProcessingException: If a callback raises one; the walk stops at once.
        """
        states: Dict[JsonPointer, VisitState] = {}
        stack: List[Tuple[SchemaTree, Optional[JsonPointer]]] = [(tree, None)]

        logger.debug(f"Starting walk of '{tree.loading_uri or '#'}' with dialect '{self.descriptor.name}'")
        while stack:
            current, origin = stack.pop()
            pointer = current.pointer
            state = states.get(pointer, VisitState.NOT_VISITED)
            if state is VisitState.VISITED:
                logger.debug(f"Skipping already visited location '{pointer}' (reached from '{origin}')")
                continue

            states[pointer] = VisitState.ENTERING
            listener.entering_path(pointer, report)

            states[pointer] = VisitState.VISITING
            discovered = listener.visiting(current, report)
            children = self._children(current, discovered)

            states[pointer] = VisitState.EXITING
            listener.exiting_path(pointer, report)

            states[pointer] = VisitState.VISITED
            for child in reversed(children):
                if states.get(child) is not VisitState.VISITED:
                    stack.append((current.with_pointer(child), pointer))

        logger.debug(f"Walk finished: {len(states)} location(s) visited")

    def _children(self, tree: SchemaTree, discovered) -> List[JsonPointer]:
        candidates = self.shape_children(tree)
        if discovered is None:
            return candidates

        found = list(dict.fromkeys(discovered))
        allowed = set(found)
        known = set(candidates)
        children = [pointer for pointer in candidates if pointer in allowed]
        children.extend(pointer for pointer in found if pointer not in known)
        return children

    def shape_children(self, tree: SchemaTree) -> List[JsonPointer]:
        """Subschema locations implied by the dialect's traversal shapes.

        Keywords are taken in sorted order; named members in lexicographic order;
        array elements in array order. Only object values are schema candidates.
        """
        node = tree.node
        if not isinstance(node, dict):
            return []

        base = tree.pointer
        children: List[JsonPointer] = []
        for keyword, shape in self.descriptor.shapes.items():
            if shape is TraversalShape.NONE or keyword not in node:
                continue
            value = node[keyword]
            children.extend(self._expand(base.append(keyword), shape, value))
        return children

    @staticmethod
    def _expand(pointer: JsonPointer, shape: TraversalShape, value: Any) -> List[JsonPointer]:
        if shape is TraversalShape.SINGLE:
            return [pointer] if isinstance(value, dict) else []

        if shape is TraversalShape.MAP_OF_NAMED:
            if not isinstance(value, dict):
                return []
            return [pointer.append(name) for name in sorted(value) if isinstance(value[name], dict)]

        if shape is TraversalShape.LIST_OF_ORDERED:
            # a single schema is accepted where a list is expected (items, extends)
            if isinstance(value, dict):
                return [pointer]
            if not isinstance(value, list):
                return []
            return [pointer.append(index) for index, item in enumerate(value) if isinstance(item, dict)]

        return []
