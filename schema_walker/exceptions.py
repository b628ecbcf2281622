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

"""Custom exceptions for the schema walker."""


class SchemaWalkerError(Exception):
    """Base exception for schema-walker related errors."""
    pass


class ProcessingException(SchemaWalkerError):
    """Fatal error raised from a walk callback; aborts the whole walk."""

    def __init__(self, message: str, processing_message=None):
        super().__init__(message)
        self.processing_message = processing_message


class NotATreeError(ProcessingException):
    """Exception raised when a tree location does not exist in its document."""
    pass


class InvalidPointerError(SchemaWalkerError):
    """Exception raised for malformed or unresolvable JSON pointers."""
    pass


class InvalidDialectError(SchemaWalkerError):
    """Exception raised for inconsistent dialect definitions."""
    pass


class MessageCatalogError(SchemaWalkerError):
    """Exception raised for missing message bundles, keys or bad templates."""
    pass


class DocumentLoadError(SchemaWalkerError):
    """Exception raised when a schema document cannot be loaded."""
    pass
