"""
Module: search.engine

Purpose:
    Locate every occurrence of a literal or regex pattern across a corpus
    of named text buffers, line by line.

Key Functions:
    - compile_pattern(): Build the regex for a pattern + options
    - search(): Matches as a list (invalid pattern -> empty list)
    - search_with_outcome(): Matches plus pattern error, as a SearchOutcome

Dependencies:
    - re: Pattern compilation and matching
    - tex_toolkit.core.models: SearchMatch, SearchOutcome, SourceFile

Used By:
    - search.replace: Replacement targets
    - workspace / cli: Project-wide search
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, Iterator, List, Mapping, Union

from tex_toolkit.core.models import SearchMatch, SearchOutcome, SourceFile

from .config import SearchOptions

logger = logging.getLogger(__name__)

CorpusItem = Union[SourceFile, Mapping[str, Any]]


class InvalidPatternError(ValueError):
    """Raised when a regex pattern fails to compile."""

    def __init__(self, pattern: str, reason: str):
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


def compile_pattern(
    pattern: str,
    use_regex: bool = False,
    case_sensitive: bool = False,
) -> re.Pattern:
    """
    Compile a search pattern.

    Args:
        pattern: Search text or regular expression
        use_regex: Interpret pattern as a regex (otherwise escaped)
        case_sensitive: Disable re.IGNORECASE

    Returns:
        Compiled pattern

    Raises:
        InvalidPatternError: If use_regex is True and the pattern is invalid
    """
    options = SearchOptions(use_regex=use_regex, case_sensitive=case_sensitive)
    source = pattern if options.use_regex else re.escape(pattern)
    try:
        return re.compile(source, options.flags)
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e


def iter_line_matches(compiled: re.Pattern, line: str) -> Iterator[re.Match]:
    """
    Yield successive matches in a single line.

    Each search resumes at the previous match's end. A zero-length match
    moves the cursor forward by one so the scan always terminates.
    """
    pos = 0
    length = len(line)
    while pos <= length:
        match = compiled.search(line, pos)
        if match is None:
            return
        yield match
        end = match.end()
        pos = end + 1 if end == match.start() else end


def _search_file(compiled: re.Pattern, source: SourceFile) -> List[SearchMatch]:
    if not source.content:
        return []

    matches: List[SearchMatch] = []
    for line_index, line_content in enumerate(source.content.split("\n")):
        for match in iter_line_matches(compiled, line_content):
            matches.append(
                SearchMatch(
                    file_id=source.file_id,
                    file_name=source.file_name,
                    line=line_index + 1,
                    column=match.start() + 1,
                    line_content=line_content,
                    match_start=match.start(),
                    match_end=match.end(),
                )
            )
    return matches


def search_with_outcome(
    corpus: Iterable[CorpusItem],
    pattern: str,
    use_regex: bool = False,
    case_sensitive: bool = False,
) -> SearchOutcome:
    """
    Search a corpus and report pattern errors explicitly.

    Args:
        corpus: SourceFile objects or mappings with file id/name/content
        pattern: Search text or regular expression
        use_regex: Interpret pattern as a regex
        case_sensitive: Match case exactly

    Returns:
        SearchOutcome with matches in corpus order. Empty when the pattern
        is blank. `error` is set (and matches empty) when the pattern fails
        to compile.

    Example:
        >>> outcome = search_with_outcome([SourceFile("1", "a.tex", "x(")], "(", use_regex=True)
        >>> outcome.ok
        False
    """
    if not pattern.strip():
        return SearchOutcome()

    try:
        compiled = compile_pattern(pattern, use_regex, case_sensitive)
    except InvalidPatternError as e:
        logger.debug(f"Search aborted: {e}")
        return SearchOutcome(error=e.reason)

    matches: List[SearchMatch] = []
    file_count = 0
    for item in corpus:
        source = SourceFile.coerce(item)
        file_count += 1
        matches.extend(_search_file(compiled, source))

    logger.debug(f"Pattern {pattern!r} matched {len(matches)} times in {file_count} files")
    return SearchOutcome(matches=tuple(matches))


def search(
    corpus: Iterable[CorpusItem],
    pattern: str,
    use_regex: bool = False,
    case_sensitive: bool = False,
) -> List[SearchMatch]:
    """
    Find all occurrences of a pattern across a corpus.

    An invalid regex yields an empty list rather than raising; use
    search_with_outcome() to tell the two cases apart.

    Args:
        corpus: SourceFile objects or mappings with file id/name/content
        pattern: Search text or regular expression
        use_regex: Interpret pattern as a regex
        case_sensitive: Match case exactly

    Returns:
        Matches ordered by file (corpus order), line, then offset

    Example:
        >>> corpus = [SourceFile("1", "main.tex", "The fox\\nthe dog")]
        >>> [(m.line, m.column) for m in search(corpus, "the")]
        [(1, 1), (2, 1)]
    """
    return list(search_with_outcome(corpus, pattern, use_regex, case_sensitive).matches)
