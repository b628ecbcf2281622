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

"""JSON Schema syntax checking by walking the schema tree."""

__version__ = "0.1.0"

from .exceptions import (
    DocumentLoadError,
    InvalidDialectError,
    InvalidPointerError,
    MessageCatalogError,
    NotATreeError,
    ProcessingException,
    SchemaWalkerError,
)
from .keyword import DialectDescriptor, TraversalShape, dialect_for_schema, draftv3, draftv4, get_dialect
from .messages import MessageCatalog, default_catalog
from .pointer import JsonPointer
from .report import LogLevel, LoggingProcessingReport, ProcessingMessage, ProcessingReport
from .tree import SchemaTree
from .walk import AnalysisResult, SchemaAnalyzer, SchemaListener, SchemaWalker, analyze_schema

__all__ = [
    "AnalysisResult",
    "DialectDescriptor",
    "DocumentLoadError",
    "InvalidDialectError",
    "InvalidPointerError",
    "JsonPointer",
    "LogLevel",
    "LoggingProcessingReport",
    "MessageCatalog",
    "MessageCatalogError",
    "NotATreeError",
    "ProcessingException",
    "ProcessingMessage",
    "ProcessingReport",
    "SchemaAnalyzer",
    "SchemaListener",
    "SchemaTree",
    "SchemaWalker",
    "SchemaWalkerError",
    "TraversalShape",
    "analyze_schema",
    "default_catalog",
    "dialect_for_schema",
    "draftv3",
    "draftv4",
    "get_dialect",
]
