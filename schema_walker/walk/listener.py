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

"""Listener interface driven by :class:`SchemaWalker`."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterable, Optional, TypeVar

from ..pointer import JsonPointer
from ..report import ProcessingReport
from ..tree import SchemaTree

T = TypeVar("T")


class SchemaListener(ABC, Generic[T]):
    """An analysis run over a schema walk, producing a value of type ``T``.

    A listener instance belongs to a single walk. Callbacks may log diagnostics
    into the report; raising :class:`ProcessingException` aborts the walk.
    """

    def entering_path(self, pointer: JsonPointer, report: ProcessingReport) -> None:
        """Called before a location is visited."""

    @abstractmethod
    def visiting(self, tree: SchemaTree, report: ProcessingReport) -> Optional[Iterable[JsonPointer]]:
        """Called once per location.

        Returns:
            None to let the walker schedule children from the dialect's traversal
            shapes alone, or the subschema pointers this listener found. Found
            pointers restrict the shape-derived children to those listed and may
            add locations the shapes do not know about (local references).
        """

    def exiting_path(self, pointer: JsonPointer, report: ProcessingReport) -> None:
        """Called after a location is visited."""

    @abstractmethod
    def get_value(self) -> T:
        """Result of the analysis; only complete once the walk has returned."""
