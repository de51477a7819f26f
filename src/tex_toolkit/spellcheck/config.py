"""
Module: spellcheck.config

Purpose:
    Configuration dataclass for the spell checker.
    Immutable configuration with validation on construction.

Key Classes:
    - SpellCheckConfig: Word-length, suggestion-count and distance limits

Dependencies:
    - dataclasses (std)

Used By:
    - spellcheck.checker
    - spellcheck.suggestions
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SpellCheckConfig:
    """
    Configuration for spell checking (immutable).

    Attributes:
        min_word_length: Words shorter than this are never flagged
        max_suggestions: Upper bound on suggestions returned by suggest()
        max_edit_distance: Largest edit distance accepted by the fallback

    Invariants:
        - min_word_length >= 1
        - max_suggestions >= 1
        - max_edit_distance >= 0

    Example:
        >>> SpellCheckConfig().max_suggestions
        5
    """

    min_word_length: int = 3
    max_suggestions: int = 5
    max_edit_distance: int = 2

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.min_word_length < 1:
            raise ValueError(f"min_word_length must be positive: {self.min_word_length}")
        if self.max_suggestions < 1:
            raise ValueError(f"max_suggestions must be positive: {self.max_suggestions}")
        if self.max_edit_distance < 0:
            raise ValueError(
                f"max_edit_distance must be non-negative: {self.max_edit_distance}"
            )


DEFAULT_CONFIG = SpellCheckConfig()
