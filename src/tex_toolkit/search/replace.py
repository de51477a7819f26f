"""
Module: search.replace

Purpose:
    Apply replacements for matches found by search.engine. Replacement
    text is inserted literally; match offsets are never re-adjusted, so
    callers re-run the search after replacing.

Key Functions:
    - replace_one(): Splice one match in a buffer
    - replace_all(): Splice every match, grouped by file

Dependencies:
    - collections (std)
    - tex_toolkit.core.models: SearchMatch, SourceFile

Used By:
    - workspace.corpus: write_back() persists the results
    - cli: `replace` subcommand
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, Iterable, List

from tex_toolkit.core.models import SearchMatch, SourceFile

from .engine import CorpusItem

logger = logging.getLogger(__name__)


def _splice(line: str, match: SearchMatch, replacement: str) -> str:
    return line[:match.match_start] + replacement + line[match.match_end:]


def replace_one(content: str, match: SearchMatch, replacement: str) -> str:
    """
    Replace a single match inside a buffer.

    Args:
        content: Full buffer text the match was found in
        match: Match to replace
        replacement: Literal replacement text

    Returns:
        New buffer text. Unchanged if the match's line no longer exists.

    Example:
        >>> m = SearchMatch("1", "a.tex", 1, 5, "The qick fox", 4, 8)
        >>> replace_one("The qick fox", m, "quick")
        'The quick fox'
    """
    lines = content.split("\n")
    index = match.line - 1
    if index >= len(lines):
        logger.debug(f"Line {match.line} out of range in {match.file_name}; nothing replaced")
        return content

    lines[index] = _splice(lines[index], match, replacement)
    return "\n".join(lines)


def replace_all(
    corpus: Iterable[CorpusItem],
    matches: Iterable[SearchMatch],
    replacement: str,
) -> Dict[str, str]:
    """
    Replace every match, file by file.

    Matches are applied in descending (line, match_start) order so that
    offsets of matches still pending on the same line stay valid.

    Args:
        corpus: Buffers the matches were found in
        matches: Matches to replace (any order, any mix of files)
        replacement: Literal replacement text

    Returns:
        Dict mapping file_id -> new content for every affected file.
        Files missing from the corpus, or empty, are skipped.
    """
    by_file: Dict[str, List[SearchMatch]] = defaultdict(list)
    for match in matches:
        by_file[match.file_id].append(match)

    sources = {}
    for item in corpus:
        source = SourceFile.coerce(item)
        sources[source.file_id] = source

    results: Dict[str, str] = {}
    for file_id, file_matches in by_file.items():
        source = sources.get(file_id)
        if source is None or not source.content:
            logger.debug(f"Skipping {file_id}: not in corpus or empty")
            continue

        lines = source.content.split("\n")
        for match in sorted(file_matches, key=lambda m: m.sort_key, reverse=True):
            index = match.line - 1
            if index >= len(lines):
                continue
            lines[index] = _splice(lines[index], match, replacement)

        results[file_id] = "\n".join(lines)
        logger.debug(f"Replaced {len(file_matches)} matches in {source.file_name}")

    return results
