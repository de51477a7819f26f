"""
Core Package

Shared data models for the scanner, search engine and spell checker.
"""

from .models import (
    MathSpan,
    Position,
    SearchMatch,
    SearchOutcome,
    SourceFile,
    SpellIssue,
)

__all__ = [
    "Position",
    "MathSpan",
    "SourceFile",
    "SearchMatch",
    "SearchOutcome",
    "SpellIssue",
]
