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

"""Diagnostic collection for schema walks."""

import logging
from typing import Iterator, List, Optional, Tuple

from ..exceptions import ProcessingException
from .message import LogLevel, ProcessingMessage


class ProcessingReport:
    """Ordered, append-only collection of diagnostics.

    Messages below ``log_level`` are discarded when logged. When a message at or
    above ``exception_threshold`` is logged the report becomes ``escalated``; if
    ``raise_on_threshold`` is set it also raises :class:`ProcessingException`,
    which aborts a walk in progress.
    """

    def __init__(
        self,
        log_level: LogLevel = LogLevel.INFO,
        exception_threshold: LogLevel = LogLevel.FATAL,
        raise_on_threshold: bool = True,
    ):
        """Initialize the report.

        Args:
            log_level: Minimum level of retained messages
            exception_threshold: Level from which the report escalates
            raise_on_threshold: Whether escalation raises ProcessingException
        """
        self.log_level = log_level
        self.exception_threshold = exception_threshold
        self.raise_on_threshold = raise_on_threshold
        self._messages: List[ProcessingMessage] = []
        self._current_level = LogLevel.DEBUG
        self._escalated = False

    @property
    def messages(self) -> Tuple[ProcessingMessage, ...]:
        return tuple(self._messages)

    @property
    def current_level(self) -> LogLevel:
        """Highest level logged so far, including discarded messages."""
        return self._current_level

    @property
    def escalated(self) -> bool:
        return self._escalated

    def is_success(self) -> bool:
        return self._current_level < LogLevel.ERROR

    def log(self, level: LogLevel, message: ProcessingMessage) -> None:
        """Log *message* at *level*.

        Raises:
            ProcessingException: If the level reaches the exception threshold and
                ``raise_on_threshold`` is set.
        """
        message.set_level(level)
        if level > self._current_level:
            self._current_level = level
        if level >= self.log_level:
            self._messages.append(message)
            self._on_logged(message)
        if level >= self.exception_threshold:
            self._escalated = True
            if self.raise_on_threshold:
                raise ProcessingException(message.message, processing_message=message)

    def _on_logged(self, message: ProcessingMessage) -> None:
        pass

    def debug(self, message: ProcessingMessage) -> None:
        self.log(LogLevel.DEBUG, message)

    def info(self, message: ProcessingMessage) -> None:
        self.log(LogLevel.INFO, message)

    def warn(self, message: ProcessingMessage) -> None:
        self.log(LogLevel.WARNING, message)

    def error(self, message: ProcessingMessage) -> None:
        self.log(LogLevel.ERROR, message)

    def fatal(self, message: ProcessingMessage) -> None:
        self.log(LogLevel.FATAL, message)

    def merge_from(self, other: "ProcessingReport") -> None:
        """Relog every message of *other* into this report, in order."""
        for message in other.messages:
            self.log(message.level, message)

    def filter(self, level: LogLevel) -> List[ProcessingMessage]:
        return [m for m in self._messages if m.level == level]

    @property
    def errors(self) -> List[ProcessingMessage]:
        return [m for m in self._messages if m.level >= LogLevel.ERROR]

    @property
    def warnings(self) -> List[ProcessingMessage]:
        return self.filter(LogLevel.WARNING)

    def __iter__(self) -> Iterator[ProcessingMessage]:
        return iter(tuple(self._messages))

    def __len__(self) -> int:
        return len(self._messages)


class LoggingProcessingReport(ProcessingReport):
    """Report that also emits every retained message through :mod:`logging`."""

    def __init__(
        self,
        log_level: LogLevel = LogLevel.INFO,
        exception_threshold: LogLevel = LogLevel.FATAL,
        raise_on_threshold: bool = True,
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(log_level, exception_threshold, raise_on_threshold)
        self.logger = logger or logging.getLogger("schema_walker.report")

    def _on_logged(self, message: ProcessingMessage) -> None:
        pointer = ""
        schema = message.get("schema")
        if isinstance(schema, dict):
            pointer = schema.get("pointer", "")
        location = f" (pointer={pointer or '/'})" if schema is not None else ""
        self.logger.log(message.level.to_logging(), f"{message.message}{location}")
