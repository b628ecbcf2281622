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

"""Immutable views into a schema document."""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from ..exceptions import InvalidPointerError, NotATreeError
from ..pointer import JsonPointer


class SchemaTree:
    """A schema document paired with a current location.

    Navigation returns new trees sharing the same root document; the root is
    never copied nor mutated. The resolution scope is carried as an opaque URI
    string so that an external resolver can dereference ``$ref`` later.
    """

    __slots__ = ("_root", "_pointer", "_loading_uri", "_resolution_scope")

    def __init__(
        self,
        root: Any,
        pointer: Optional[JsonPointer] = None,
        loading_uri: str = "",
        resolution_scope: Optional[str] = None,
    ):
        self._root = root
        self._pointer = pointer if pointer is not None else JsonPointer.root()
        self._loading_uri = loading_uri
        if resolution_scope is None:
            resolution_scope = loading_uri or self._root_id(root)
        self._resolution_scope = resolution_scope

    @staticmethod
    def _root_id(root: Any) -> str:
        if isinstance(root, dict) and isinstance(root.get("id"), str):
            return root["id"]
        return ""

    @property
    def root(self) -> Any:
        return self._root

    @property
    def pointer(self) -> JsonPointer:
        return self._pointer

    @property
    def loading_uri(self) -> str:
        return self._loading_uri

    @property
    def resolution_scope(self) -> str:
        return self._resolution_scope

    @property
    def node(self) -> Any:
        """The JSON value at the current location.

        Raises:
            NotATreeError: If the location does not exist in the document. Locations
                are derived from the document itself, so this means the walker or a
                listener was misused.
        """
        try:
            return self._pointer.resolve(self._root)
        except InvalidPointerError as exc:
            raise NotATreeError(f"Location '{self._pointer}' is not part of the schema tree: {exc}") from exc

    def append(self, token: Union[str, int]) -> "SchemaTree":
        return self.with_pointer(self._pointer.append(token))

    def with_pointer(self, pointer: JsonPointer) -> "SchemaTree":
        return SchemaTree(
            self._root,
            pointer,
            loading_uri=self._loading_uri,
            resolution_scope=self._resolution_scope,
        )

    def with_scope(self, resolution_scope: str) -> "SchemaTree":
        return SchemaTree(
            self._root,
            self._pointer,
            loading_uri=self._loading_uri,
            resolution_scope=resolution_scope,
        )

    def as_context(self) -> Dict[str, str]:
        """Location description placed in diagnostic contexts."""
        return {"loadingURI": self._loading_uri or "#", "pointer": str(self._pointer)}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SchemaTree):
            return NotImplemented
        return (
            self._root is other._root
            and self._pointer == other._pointer
            and self._resolution_scope == other._resolution_scope
        )

    def __hash__(self) -> int:
        return hash((id(self._root), self._pointer, self._resolution_scope))

    def __repr__(self) -> str:
        return f"SchemaTree(loadingURI='{self._loading_uri or '#'}', pointer='{self._pointer}')"
