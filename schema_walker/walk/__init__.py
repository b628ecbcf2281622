"""Schema walking: the walker, its listener interface and the syntax analyzer."""

from .analyzer import AnalysisResult, SchemaAnalyzer, analyze_schema
from .listener import SchemaListener
from .walker import SchemaWalker, VisitState

__all__ = [
    "AnalysisResult",
    "SchemaAnalyzer",
    "SchemaListener",
    "SchemaWalker",
    "VisitState",
    "analyze_schema",
]
