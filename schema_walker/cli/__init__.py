"""Command line interface for checking schema documents."""

from .check import DocumentCheck, check_document, check_targets, main

__all__ = ["DocumentCheck", "check_document", "check_targets", "main"]
