"""
Module: spellcheck.checker

Purpose:
    Flag likely misspelled prose words in LaTeX source. A pure function of
    the document text; every call recomputes the full issue list and the
    ignore list is never consulted here.

Key Functions:
    - should_ignore(): Technical-token heuristics (acronyms, variables, ...)
    - check_spelling(): SpellIssue list for a document

Dependencies:
    - re: Ignore heuristics
    - .markup: Line-local markup stripping and tokenizing
    - .dictionary: Direct corrections

Used By:
    - cli: `spell` subcommand
    - UI layers that render clickable suggestions
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from tex_toolkit.core.models import SpellIssue

from .config import DEFAULT_CONFIG, SpellCheckConfig
from .dictionary import lookup, match_case
from .markup import iter_prose_words

logger = logging.getLogger(__name__)

IGNORE_PATTERNS = (
    re.compile(r"^\\[a-zA-Z]+\*?$"),  # LaTeX command
    re.compile(r"^[0-9]+$"),  # number
    re.compile(r"^[a-zA-Z]$"),  # single letter
    re.compile(r"^[A-Z]+$"),  # acronym
    re.compile(r"^[a-z]+[0-9]+$"),  # variable name like x1
    re.compile(r"^[A-Z][a-z]*[A-Z]"),  # CamelCase
)


def should_ignore(word: str) -> bool:
    """
    Check whether a token looks technical rather than prose.

    Example:
        >>> should_ignore("NASA"), should_ignore("LaTeX"), should_ignore("teh")
        (True, True, False)
    """
    return any(pattern.search(word) for pattern in IGNORE_PATTERNS)


def check_spelling(
    document: str,
    config: Optional[SpellCheckConfig] = None,
) -> List[SpellIssue]:
    """
    Find known misspellings in the prose of a LaTeX document.

    Comments, same-line math and command tokens are stripped before
    tokenizing. Reported columns refer to the original source line.

    Args:
        document: Full LaTeX source text
        config: Limits; defaults to SpellCheckConfig()

    Returns:
        Issues in document order, each with a single case-matched suggestion

    Example:
        >>> [(i.word, i.suggestions) for i in check_spelling("This is teh document.")]
        [('teh', ('the',))]
    """
    config = config or DEFAULT_CONFIG
    issues: List[SpellIssue] = []

    for line, start, word in iter_prose_words(document):
        if should_ignore(word):
            continue
        if len(word) < config.min_word_length:
            continue

        correction = lookup(word)
        if correction is None:
            continue

        issues.append(
            SpellIssue(
                word=word,
                line=line,
                start_column=start + 1,
                end_column=start + len(word) + 1,
                suggestions=(match_case(word, correction),),
            )
        )

    logger.debug(f"Spell check found {len(issues)} issues")
    return issues
