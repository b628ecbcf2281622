#!/usr/bin/env python3
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

"""CLI entry point for syntax-checking JSON Schema documents."""

import argparse
import json
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from ..config import walker_config
from ..exceptions import DocumentLoadError, InvalidDialectError, ProcessingException
from ..file_io import (
    LoadedDocument,
    available_builtins,
    format_source,
    load_builtin,
    load_document,
    source_for_message,
)
from ..file_io.source_location import message_pointer
from ..keyword import available_dialects, dialect_for_schema, get_dialect
from ..messages import default_catalog
from ..report import LogLevel, ProcessingMessage
from ..walk import analyze_schema

logger = logging.getLogger(__name__)

SCHEMA_SUFFIXES = ('.json', '.yaml', '.yml')


@dataclass
class DocumentCheck:
    """Outcome of checking one document."""
    label: str
    file_path: Optional[Path] = None
    dialect: Optional[str] = None
    source_map: Dict[str, Dict[str, int]] = field(default_factory=dict)
    messages: List[ProcessingMessage] = field(default_factory=list)
    failure: Optional[str] = None

    @property
    def errors(self) -> List[ProcessingMessage]:
        return [m for m in self.messages if m.level >= LogLevel.ERROR]

    @property
    def warnings(self) -> List[ProcessingMessage]:
        return [m for m in self.messages if m.level == LogLevel.WARNING]

    @property
    def failed(self) -> bool:
        return self.failure is not None or bool(self.errors)

    def location(self, message: ProcessingMessage) -> str:
        return format_source(source_for_message(message, self.file_path, self.source_map))


def find_schema_files(paths: List[str]) -> List[Path]:
    """Find all JSON/YAML schema files in given paths."""
    schema_files = []

    for path_str in paths:
        path = Path(path_str)

        if not path.exists():
            print(f"Warning: Path does not exist: {path}", file=sys.stderr)
            continue

        if path.is_file():
            schema_files.append(path)
        elif path.is_dir():
            for suffix in SCHEMA_SUFFIXES:
                schema_files.extend(path.rglob(f'*{suffix}'))
        else:
            print(f"Warning: Path is neither file nor directory: {path}", file=sys.stderr)

    return sorted(set(schema_files))


def check_document(
    loaded: LoadedDocument,
    label: str,
    file_path: Optional[Path],
    dialect_name: Optional[str],
    mirror: bool = False,
) -> DocumentCheck:
    """Analyze one loaded document; fatal walk errors are recorded, not raised."""
    result = DocumentCheck(label=label, file_path=file_path, source_map=loaded.source_map)
    catalog = default_catalog()

    if dialect_name:
        dialect = get_dialect(dialect_name)
    else:
        dialect = dialect_for_schema(loaded.document, default=walker_config.dialect)
    result.dialect = dialect.name

    report = walker_config.new_report(mirror_to_logging=mirror)
    try:
        analyze_schema(loaded.document, dialect=dialect, catalog=catalog, report=report, loading_uri=loaded.loading_uri)
    except ProcessingException as exc:
        pointer = ""
        if exc.processing_message is not None:
            pointer = message_pointer(exc.processing_message) or ""
        result.failure = catalog.format("core.walkAborted", pointer=pointer or "/", reason=str(exc))
    result.messages = list(report.messages)
    return result


def check_targets(
    paths: List[str],
    builtins: List[str],
    dialect_name: Optional[str],
    mirror: bool = False,
) -> List[DocumentCheck]:
    results: List[DocumentCheck] = []

    for name in builtins:
        try:
            loaded = load_builtin(name)
        except DocumentLoadError as e:
            results.append(DocumentCheck(label=f"builtin:{name}", failure=str(e)))
            continue
        results.append(check_document(loaded, f"builtin:{name}", None, dialect_name, mirror))

    for file_path in find_schema_files(paths):
        try:
            loaded = load_document(file_path)
        except DocumentLoadError as e:
            results.append(DocumentCheck(label=str(file_path), file_path=file_path, failure=str(e)))
            continue
        results.append(check_document(loaded, str(file_path), file_path, dialect_name, mirror))

    return results


def _print_json(results: List[DocumentCheck]) -> None:
    output = {
        'documents': len(results),
        'errors': sum(len(r.errors) for r in results),
        'warnings': sum(len(r.warnings) for r in results),
        'results': [
            {
                'document': r.label,
                'dialect': r.dialect,
                'failure': r.failure,
                'messages': [m.as_dict() for m in r.messages],
            }
            for r in results
        ]
    }
    print(json.dumps(output, indent=2, default=str))


def _print_github_actions(results: List[DocumentCheck]) -> None:
    for result in results:
        if result.failure:
            print(f"::error file={result.label}::{result.failure}")
        for message in result.messages:
            if message.level < LogLevel.WARNING:
                continue
            kind = 'error' if message.level >= LogLevel.ERROR else 'warning'
            loc = source_for_message(message, result.file_path, result.source_map)
            print(f"::{kind} file={result.label},line={loc.line or 1}::{message.message}")


def _print_human(results: List[DocumentCheck]) -> None:
    for result in results:
        if not (result.failure or result.messages):
            continue
        print(f"\n{result.label}:")
        if result.failure:
            print(f"  FATAL: {result.failure}")
        for message in result.messages:
            print(f"  {message.level.name}: {message.message}{result.location(message)}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the schema checker CLI."""
    parser = argparse.ArgumentParser(
        description='Check the syntax of JSON Schema documents',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        'paths',
        nargs='*',
        default=None,
        help='Schema files or directories to check',
    )
    parser.add_argument(
        '--builtin',
        action='append',
        default=[],
        choices=available_builtins(),
        help='Also check a bundled meta-schema (may be repeated)',
    )
    parser.add_argument(
        '--dialect',
        choices=available_dialects(),
        default=None,
        help='Dialect to enforce (default: from $schema, then SCHEMA_WALKER_DIALECT)',
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json', 'github-actions'],
        default='human',
        help='Output format (default: human)',
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Trace the walk and mirror diagnostics to the log',
    )

    args = parser.parse_args(argv)
    if args.verbose:
        walker_config.log_level = 'DEBUG'
    walker_config.set_logging()

    if not args.paths and not args.builtin:
        print("No schema documents given.", file=sys.stderr)
        sys.exit(1)

    try:
        walker_config.new_report()
    except ValueError as e:
        print(f"Error: invalid report configuration: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        results = check_targets(args.paths or [], args.builtin, args.dialect, mirror=args.verbose)
    except InvalidDialectError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if not results:
        print("No schema documents found.", file=sys.stderr)
        sys.exit(1)

    if args.format == 'json':
        _print_json(results)
    elif args.format == 'github-actions':
        _print_github_actions(results)
    else:  # human-readable
        _print_human(results)

    # Exit with error code if any document failed
    if any(r.failed for r in results):
        sys.exit(1)
    if args.format == 'human':
        print("Schema check succeeded with no errors.")
    sys.exit(0)


if __name__ == '__main__':
    main()
