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

"""Configuration management for schema walks."""

import os
import logging
from dataclasses import dataclass

from .report import LogLevel, LoggingProcessingReport, ProcessingReport
from .utils.logging_utils import configure_split_stream_logging


@dataclass
class WalkerConfig:
    """Configuration class for schema walks and the command line tool."""
    log_level: str = "INFO"
    print_level: str = "WARNING"
    dialect: str = "draftv4"
    report_level: str = "INFO"
    exception_threshold: str = "FATAL"

    @classmethod
    def from_env(cls) -> 'WalkerConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv('SCHEMA_WALKER_LOG_LEVEL', 'INFO'),
            print_level=os.getenv('SCHEMA_WALKER_PRINT_LEVEL', 'WARNING'),
            dialect=os.getenv('SCHEMA_WALKER_DIALECT', 'draftv4'),
            report_level=os.getenv('SCHEMA_WALKER_REPORT_LEVEL', 'INFO'),
            exception_threshold=os.getenv('SCHEMA_WALKER_EXCEPTION_THRESHOLD', 'FATAL'),
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.INFO)
        stderr_level = getattr(logging, self.print_level.upper(), logging.WARNING)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        configure_split_stream_logging(level=level, stderr_level=stderr_level, formatter=formatter)

        return logging.getLogger('schema_walker')

    def new_report(self, mirror_to_logging: bool = False) -> ProcessingReport:
        """Create a report using the configured levels.

        Raises:
            ValueError: If a configured level name is unknown
        """
        log_level = LogLevel.parse(self.report_level)
        threshold = LogLevel.parse(self.exception_threshold)
        if mirror_to_logging:
            return LoggingProcessingReport(log_level=log_level, exception_threshold=threshold)
        return ProcessingReport(log_level=log_level, exception_threshold=threshold)


# Global configuration instance
walker_config = WalkerConfig.from_env()
