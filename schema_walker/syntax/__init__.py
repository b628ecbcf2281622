"""Keyword syntax checkers."""

from .checkers import (
    DependenciesSyntaxChecker,
    DivisorSyntaxChecker,
    EnumSyntaxChecker,
    ExclusiveSyntaxChecker,
    NumericSyntaxChecker,
    PatternSyntaxChecker,
    PositiveIntegerSyntaxChecker,
    RefSyntaxChecker,
    RequiredSyntaxChecker,
    SchemaArraySyntaxChecker,
    SchemaMapSyntaxChecker,
    SchemaOrBooleanSyntaxChecker,
    SchemaOrSchemaArraySyntaxChecker,
    SchemaSyntaxChecker,
    SyntaxChecker,
    TypeKeywordSyntaxChecker,
    TypeOnlySyntaxChecker,
    URISyntaxChecker,
)

__all__ = [
    "SyntaxChecker",
    "TypeOnlySyntaxChecker",
    "URISyntaxChecker",
    "RefSyntaxChecker",
    "PatternSyntaxChecker",
    "PositiveIntegerSyntaxChecker",
    "DivisorSyntaxChecker",
    "NumericSyntaxChecker",
    "ExclusiveSyntaxChecker",
    "EnumSyntaxChecker",
    "RequiredSyntaxChecker",
    "SchemaOrSchemaArraySyntaxChecker",
    "SchemaArraySyntaxChecker",
    "SchemaMapSyntaxChecker",
    "SchemaOrBooleanSyntaxChecker",
    "SchemaSyntaxChecker",
    "DependenciesSyntaxChecker",
    "TypeKeywordSyntaxChecker",
]
