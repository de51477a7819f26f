"""
Module: spellcheck.suggestions

Purpose:
    Correction candidates for arbitrary words. Exact dictionary hits are
    answered directly; everything else goes to a pluggable scorer, by
    default an edit-distance ranking over the dictionary's correct
    spellings.

Key Classes:
    - SuggestionScorer: Protocol for fallback scorers
    - EditDistanceScorer: Levenshtein-based fallback

Key Functions:
    - levenshtein_distance(): Single-character insert/delete/substitute distance
    - suggest(): Ordered, case-matched suggestions for a word

Dependencies:
    - .dictionary: Correction tables and case matching
    - .config: SpellCheckConfig limits

Used By:
    - spellcheck.checker (direct lookups)
    - cli: `suggest` subcommand
"""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol, Sequence, Tuple

from .config import DEFAULT_CONFIG, SpellCheckConfig
from .dictionary import correct_spellings, lookup, match_case

logger = logging.getLogger(__name__)


def levenshtein_distance(a: str, b: str) -> int:
    """
    Minimum number of single-character edits turning a into b.

    Example:
        >>> levenshtein_distance("kitten", "sitting")
        3
    """
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous_row = list(range(len(b) + 1))
    for i, ca in enumerate(a):
        current_row = [i + 1]
        for j, cb in enumerate(b):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (ca != cb)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row
    return previous_row[-1]


class SuggestionScorer(Protocol):
    """Ranks replacement candidates for a word that has no direct correction."""

    def rank(self, word: str) -> List[Tuple[str, int]]:
        """Return (candidate, score) pairs, best first. Lower score is better."""
        ...


class EditDistanceScorer:
    """
    Rank candidates by Levenshtein distance to the lowercased word.

    Candidates further than `max_distance` are dropped. Ties keep the
    candidates' original order.

    Example:
        >>> EditDistanceScorer(["theorem", "the"]).rank("theorm")
        [('theorem', 1)]
    """

    def __init__(
        self,
        candidates: Optional[Sequence[str]] = None,
        max_distance: int = DEFAULT_CONFIG.max_edit_distance,
    ) -> None:
        self.candidates = list(candidates) if candidates is not None else correct_spellings()
        self.max_distance = max_distance

    def rank(self, word: str) -> List[Tuple[str, int]]:
        lower = word.lower()
        scored = []
        for candidate in self.candidates:
            distance = levenshtein_distance(lower, candidate)
            if distance <= self.max_distance:
                scored.append((candidate, distance))
        scored.sort(key=lambda item: item[1])
        return scored


def suggest(
    word: str,
    scorer: Optional[SuggestionScorer] = None,
    config: Optional[SpellCheckConfig] = None,
) -> List[str]:
    """
    Suggest corrections for a word.

    A direct dictionary hit returns that single correction. Otherwise the
    scorer's ranking is truncated to `config.max_suggestions`.

    Args:
        word: Word as typed (case is used to capitalize suggestions)
        scorer: Fallback ranking; defaults to EditDistanceScorer
        config: Limits; defaults to SpellCheckConfig()

    Returns:
        Suggestions, best first, each case-matched to `word`

    Example:
        >>> suggest("Teh")
        ['The']
    """
    if not word:
        return []
    config = config or DEFAULT_CONFIG

    direct = lookup(word)
    if direct is not None:
        return [match_case(word, direct)]

    if scorer is None:
        scorer = EditDistanceScorer(max_distance=config.max_edit_distance)
    ranked = scorer.rank(word)[:config.max_suggestions]
    logger.debug(f"Fallback produced {len(ranked)} suggestions for {word!r}")
    return [match_case(word, candidate) for candidate, _ in ranked]
