"""Diagnostic reporting.

Recoverable problems found while walking a schema are collected here instead
of being raised.
"""

from .message import LogLevel, ProcessingMessage
from .processing_report import LoggingProcessingReport, ProcessingReport

__all__ = ["LogLevel", "ProcessingMessage", "ProcessingReport", "LoggingProcessingReport"]
