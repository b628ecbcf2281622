"""Schema tree views."""

from .schema_tree import SchemaTree

__all__ = ["SchemaTree"]
