"""
Core Models Package

Immutable, validated data models shared by the scanner, search engine
and spell checker.

All models in this package are frozen dataclasses. This ensures:
1. No accidental mutation between a search and a later replace
2. Safe to pass between threads
3. Can be used as dict keys or in sets
"""

from .positions import Position
from .math_span import MathSpan
from .search import SearchMatch, SearchOutcome, SourceFile
from .spelling import SpellIssue

__all__ = [
    "Position",
    "MathSpan",
    "SourceFile",
    "SearchMatch",
    "SearchOutcome",
    "SpellIssue",
]
