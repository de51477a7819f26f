"""
Spell Check Module.

Dictionary-based spell checking for LaTeX prose, with edit-distance
suggestions and a caller-side ignore list.
"""

from .checker import check_spelling, should_ignore
from .config import SpellCheckConfig
from .dictionary import ALL_MISSPELLINGS, match_case
from .ignore_list import (
    IgnoreList,
    add_to_ignore_list,
    clear_ignore_list,
    filter_ignored,
    is_ignored,
    session_ignore_list,
)
from .suggestions import (
    EditDistanceScorer,
    SuggestionScorer,
    levenshtein_distance,
    suggest,
)

__all__ = [
    "check_spelling",
    "should_ignore",
    "SpellCheckConfig",
    "ALL_MISSPELLINGS",
    "match_case",
    "IgnoreList",
    "add_to_ignore_list",
    "clear_ignore_list",
    "filter_ignored",
    "is_ignored",
    "session_ignore_list",
    "EditDistanceScorer",
    "SuggestionScorer",
    "levenshtein_distance",
    "suggest",
]
