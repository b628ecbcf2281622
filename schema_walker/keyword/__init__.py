"""Keyword registries for the supported JSON Schema drafts."""

from .descriptor import DialectDescriptor, TraversalShape
from .dialects import (
    DRAFTV3_URI,
    DRAFTV4_URI,
    available_dialects,
    build_dialect,
    dialect_for_schema,
    draftv3,
    draftv4,
    get_dialect,
)

__all__ = [
    "DRAFTV3_URI",
    "DRAFTV4_URI",
    "DialectDescriptor",
    "TraversalShape",
    "available_dialects",
    "build_dialect",
    "dialect_for_schema",
    "draftv3",
    "draftv4",
    "get_dialect",
]
