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

"""Message catalog: YAML bundles of Jinja2 message templates."""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml
from jinja2 import Environment, StrictUndefined, TemplateError, Undefined

from ..exceptions import MessageCatalogError

logger = logging.getLogger(__name__)

BUNDLE_DIR = Path(__file__).parent
DEFAULT_BUNDLES = ("core", "syntax")


def tojson_filter(value: Any) -> str:
    """Jinja2 filter rendering a value as compact JSON."""
    if isinstance(value, Undefined):
        # rendering an undefined argument raises UndefinedError
        return str(value)
    return json.dumps(value, sort_keys=True)


class MessageCatalog:
    """Read-only mapping of message keys to templates.

    ``get_message`` returns the raw template; ``format`` renders it with named
    arguments. Rendering is strict: a template referencing an argument that was
    not supplied is an error.
    """

    def __init__(self, messages: Mapping[str, str]):
        self._messages: Dict[str, str] = dict(messages)
        self.env = Environment(
            undefined=StrictUndefined,
            keep_trailing_newline=False,
            autoescape=False,
        )
        self.env.filters["tojson"] = tojson_filter

    def __contains__(self, key: str) -> bool:
        return key in self._messages

    def keys(self):
        return sorted(self._messages)

    def get_message(self, key: str) -> str:
        try:
            return self._messages[key]
        except KeyError:
            raise MessageCatalogError(f"Message key not found in catalog: '{key}'")

    def format(self, key: str, **arguments: Any) -> str:
        template = self.get_message(key)
        try:
            return self.env.from_string(template).render(**arguments)
        except TemplateError as exc:
            raise MessageCatalogError(f"Failed to render message '{key}': {exc}") from exc


def _load_bundle(name: str) -> Dict[str, str]:
    path = BUNDLE_DIR / f"{name}.yaml"
    if not path.is_file():
        raise MessageCatalogError(f"Message bundle not found: {path}")

    logger.debug(f"Loading message bundle: {path}")
    try:
        with open(path, "r", encoding="utf-8") as stream:
            data = yaml.safe_load(stream)
    except yaml.YAMLError as exc:
        raise MessageCatalogError(f"Failed to parse message bundle {path}: {exc}")

    if not isinstance(data, dict):
        raise MessageCatalogError(f"Message bundle {path} must be a mapping of key to template")

    messages: Dict[str, str] = {}
    for key, template in data.items():
        if not isinstance(template, str):
            raise MessageCatalogError(f"Message '{key}' in bundle {path} must be a string")
        messages[str(key)] = template.strip()
    return messages


@lru_cache(maxsize=None)
def load_catalog(*bundles: str) -> MessageCatalog:
    """Load and merge the named bundles; later bundles override earlier ones."""
    messages: Dict[str, str] = {}
    for name in bundles:
        messages.update(_load_bundle(name))
    return MessageCatalog(messages)


def default_catalog() -> MessageCatalog:
    return load_catalog(*DEFAULT_BUNDLES)
