from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Dict, Optional

import jsonpointer

from ..report import ProcessingMessage


@dataclass(frozen=True)
class SourceLocation:
    file_path: Optional[Path] = None
    pointer: Optional[str] = None
    line: Optional[int] = None  # 1-based
    column: Optional[int] = None  # 1-based


def lookup_source(source_map: Optional[Dict[str, Dict[str, int]]], pointer: Optional[str]) -> SourceLocation:
    if not source_map or pointer is None:
        return SourceLocation(pointer=pointer)

    entry = source_map.get(pointer)
    if not entry:
        return SourceLocation(pointer=pointer)

    return SourceLocation(
        pointer=pointer,
        line=entry.get("line"),
        column=entry.get("column"),
    )


def message_pointer(message: ProcessingMessage) -> Optional[str]:
    """Pointer of the schema a diagnostic refers to, if it carries one.

    Keyword diagnostics point at the keyword member itself so that the source
    location is the offending value rather than the enclosing schema.
    """
    schema: Any = message.get("schema")
    if not isinstance(schema, dict) or "pointer" not in schema:
        return None
    pointer = schema["pointer"]
    keyword = message.get("keyword")
    if isinstance(keyword, str):
        pointer = f"{pointer}/{jsonpointer.escape(keyword)}"
    return pointer


def source_for_message(
    message: ProcessingMessage,
    file_path: Optional[Path],
    source_map: Optional[Dict[str, Dict[str, int]]],
) -> SourceLocation:
    loc = lookup_source(source_map, message_pointer(message))
    return SourceLocation(file_path=file_path, pointer=loc.pointer, line=loc.line, column=loc.column)


def _infer_workspace_root(path: Path) -> Optional[Path]:
    """Infer a reasonable root to make paths relative."""

    env_root = os.environ.get("SCHEMA_WALKER_SOURCE_ROOT")
    if env_root:
        return Path(env_root)

    try:
        return Path.cwd()
    except OSError:
        return None


def _format_file_path(path: Path) -> str:
    root = _infer_workspace_root(path)
    if not root:
        return str(path)

    try:
        return str(path.resolve().relative_to(root.resolve()))
    except ValueError:
        return str(path)


def format_source(loc: Optional[SourceLocation]) -> str:
    if not loc:
        return ""

    parts = []
    if loc.file_path is not None:
        file_path = _format_file_path(loc.file_path)
        if loc.line is not None and loc.column is not None:
            parts.append(f"source= {file_path}:{loc.line}:{loc.column} ")
        elif loc.line is not None:
            parts.append(f"source= {file_path}:{loc.line} ")
        else:
            parts.append(f"source= {file_path} ")

    if loc.pointer is not None:
        parts.append(f"pointer={loc.pointer or '/'}")

    if not parts:
        return ""

    return " (" + " ".join(parts) + ")"
