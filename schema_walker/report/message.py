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

"""Diagnostic messages and their levels."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any, Dict, Optional


class LogLevel(IntEnum):
    """Severity of a diagnostic. ``NONE`` is only meaningful as a threshold."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    FATAL = 4
    NONE = 5

    @classmethod
    def parse(cls, value: str) -> "LogLevel":
        name = value.strip().upper()
        if name == "WARN":
            name = "WARNING"
        elif name == "CRITICAL":
            name = "FATAL"
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Unknown log level: '{value}'. Valid levels: {[lvl.name for lvl in cls]}")

    def to_logging(self) -> int:
        return _LOGGING_LEVELS[self]


_LOGGING_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.FATAL: logging.CRITICAL,
    LogLevel.NONE: logging.CRITICAL + 10,
}


class ProcessingMessage:
    """A single diagnostic: a level, a rendered text and a context mapping.

    The level is assigned by the report the message is logged into.
    """

    def __init__(self, message: str = "", level: LogLevel = LogLevel.INFO):
        self.message = message
        self.level = level
        self.context: Dict[str, Any] = {}

    def set_message(self, message: str) -> "ProcessingMessage":
        self.message = message
        return self

    def set_level(self, level: LogLevel) -> "ProcessingMessage":
        self.level = level
        return self

    def put(self, key: str, value: Any) -> "ProcessingMessage":
        self.context[key] = value
        return self

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        return self.context.get(key, default)

    def as_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"level": self.level.name.lower(), "message": self.message}
        for key, value in self.context.items():
            data[key] = value
        return data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProcessingMessage):
            return NotImplemented
        return (self.level, self.message, self.context) == (other.level, other.message, other.context)

    def __repr__(self) -> str:
        return f"ProcessingMessage(level={self.level.name}, message={self.message!r}, context={self.context!r})"

    def __str__(self) -> str:
        return f"{self.level.name.lower()}: {self.message}"
