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

"""JSON Pointer (RFC 6901) values used to address locations in a schema document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union
from urllib.parse import unquote

import jsonpointer

from .exceptions import InvalidPointerError


@dataclass(frozen=True, order=True)
class JsonPointer:
    """An immutable sequence of reference tokens.

    Equality, hashing and ordering are defined by the token tuple, so pointers
    can be used as set members and dictionary keys and sorted deterministically.
    Parsing, escaping and token lookup are done by the ``jsonpointer`` package.
    """

    tokens: Tuple[str, ...] = ()

    @classmethod
    def root(cls) -> "JsonPointer":
        return cls(())

    @classmethod
    def parse(cls, text: str) -> "JsonPointer":
        """Parse the string form of a pointer (e.g. ``/properties/a~1b``).

        Raises:
            InvalidPointerError: If the text is not a valid JSON pointer.
        """
        if not isinstance(text, str):
            raise InvalidPointerError(f"Pointer must be a string, got {type(text).__name__}")
        try:
            parsed = jsonpointer.JsonPointer(text)
        except jsonpointer.JsonPointerException as exc:
            raise InvalidPointerError(f"Invalid JSON pointer '{text}': {exc}") from exc
        return cls(tuple(parsed.parts))

    @classmethod
    def from_fragment(cls, fragment: str) -> "JsonPointer":
        """Parse a URI fragment such as ``#/definitions/a`` or ``/definitions/a``."""
        if fragment.startswith("#"):
            fragment = fragment[1:]
        return cls.parse(unquote(fragment))

    def append(self, token: Union[str, int]) -> "JsonPointer":
        return JsonPointer(self.tokens + (str(token),))

    @property
    def is_root(self) -> bool:
        return not self.tokens

    @property
    def parent(self) -> Optional["JsonPointer"]:
        if self.is_root:
            return None
        return JsonPointer(self.tokens[:-1])

    @property
    def last(self) -> Optional[str]:
        return self.tokens[-1] if self.tokens else None

    def is_parent_of(self, other: "JsonPointer") -> bool:
        """Return True if *other* is strictly below this pointer."""
        size = len(self.tokens)
        return len(other.tokens) > size and other.tokens[:size] == self.tokens

    def resolve(self, document: Any) -> Any:
        """Return the value this pointer addresses in *document*.

        Each token is an object member lookup or an array index lookup. Only
        JSON containers are traversed: strings are not indexed and the "-"
        end-of-array token never resolves.

        Raises:
            InvalidPointerError: If a token does not address an existing member or index.
        """
        library_pointer = jsonpointer.JsonPointer.from_parts(self.tokens)
        node = document
        for depth, token in enumerate(self.tokens):
            if not isinstance(node, (dict, list)):
                raise InvalidPointerError(
                    f"Cannot resolve token '{token}' of '{self}' against a {type(node).__name__} value"
                )
            if isinstance(node, list) and (token == "-" or (len(token) > 1 and token.startswith("0"))):
                raise InvalidPointerError(f"Token '{token}' is not an array index in '{self}'")
            try:
                node = library_pointer.walk(node, token)
            except jsonpointer.JsonPointerException as exc:
                raise InvalidPointerError(
                    f"Cannot resolve '{self}' at '{JsonPointer(self.tokens[:depth])}': {exc}"
                ) from exc
        return node

    def __str__(self) -> str:
        return jsonpointer.JsonPointer.from_parts(self.tokens).path

    def __repr__(self) -> str:
        return f"JsonPointer('{self}')"
