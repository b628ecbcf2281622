"""File I/O related utilities.

This package groups small modules that load schema documents and format
file-backed diagnostics.
"""

from .builtin import available_builtins, load_builtin
from .loader import LoadedDocument, build_source_map, load_document, load_document_from_string
from .source_location import SourceLocation, format_source, lookup_source, source_for_message

__all__ = [
    "LoadedDocument",
    "build_source_map",
    "load_document",
    "load_document_from_string",
    "available_builtins",
    "load_builtin",
    "SourceLocation",
    "lookup_source",
    "source_for_message",
    "format_source",
]
