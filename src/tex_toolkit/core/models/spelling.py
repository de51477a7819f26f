"""
Module: spelling

Purpose:
    Provides the SpellIssue dataclass - one flagged token from the
    spell checker, with its location and ordered suggestions.

Dependencies:
    - dataclasses (std)

Used By:
    - spellcheck.checker
    - spellcheck.ignore_list: Caller-side filtering
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True, slots=True)
class SpellIssue:
    """
    A likely misspelled word.

    Attributes:
        word: Surface form as found in the document (case preserved)
        line: 1-based line number
        start_column: 1-based start column
        end_column: 1-based end column (exclusive)
        suggestions: Candidate corrections, best first

    Invariants:
        - line >= 1
        - start_column >= 1
        - end_column - start_column == len(word)

    Example:
        >>> issue = SpellIssue("teh", 1, 9, 12, ("the",))
        >>> issue.best_suggestion
        'the'
    """

    word: str
    line: int
    start_column: int
    end_column: int
    suggestions: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate location on construction."""
        if self.line < 1:
            raise ValueError(f"line must be 1-based: {self.line}")
        if self.start_column < 1:
            raise ValueError(f"start_column must be 1-based: {self.start_column}")
        if self.end_column - self.start_column != len(self.word):
            raise ValueError(
                f"Column range [{self.start_column}, {self.end_column}) "
                f"does not fit word {self.word!r}"
            )

    @property
    def best_suggestion(self) -> str | None:
        return self.suggestions[0] if self.suggestions else None

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "word": self.word,
            "line": self.line,
            "start_column": self.start_column,
            "end_column": self.end_column,
            "suggestions": list(self.suggestions),
        }
