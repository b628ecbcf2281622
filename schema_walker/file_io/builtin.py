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

"""Bundled meta-schemas, taken from the jsonschema distribution."""

import copy
from typing import Dict, List

import jsonschema

from ..exceptions import DocumentLoadError
from .loader import LoadedDocument

_VALIDATORS = {
    "draftv3": jsonschema.Draft3Validator,
    "draftv4": jsonschema.Draft4Validator,
}

# Cache of copies handed out, keyed by name
_BUILTIN_CACHE: Dict[str, dict] = {}


def available_builtins() -> List[str]:
    return sorted(_VALIDATORS)


def load_builtin(name: str) -> LoadedDocument:
    """Return a private copy of the meta-schema called *name*.

    Raises:
        DocumentLoadError: If no such meta-schema is bundled
    """
    try:
        validator = _VALIDATORS[name]
    except KeyError:
        raise DocumentLoadError(f"Unknown builtin schema: '{name}'. Available: {available_builtins()}")

    if name not in _BUILTIN_CACHE:
        _BUILTIN_CACHE[name] = copy.deepcopy(validator.META_SCHEMA)

    document = copy.deepcopy(_BUILTIN_CACHE[name])
    loading_uri = document.get("id", "") if isinstance(document, dict) else ""
    return LoadedDocument(document=document, loading_uri=loading_uri)


def clear_cache() -> None:
    """Clear the builtin cache. Useful for testing."""
    _BUILTIN_CACHE.clear()
