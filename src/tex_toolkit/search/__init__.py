"""
Search Module.

Literal and regex search across named buffers, with position-stable
replacement.
"""

from .config import SearchOptions
from .engine import (
    InvalidPatternError,
    compile_pattern,
    iter_line_matches,
    search,
    search_with_outcome,
)
from .replace import replace_all, replace_one

__all__ = [
    "SearchOptions",
    "InvalidPatternError",
    "compile_pattern",
    "iter_line_matches",
    "search",
    "search_with_outcome",
    "replace_one",
    "replace_all",
]
