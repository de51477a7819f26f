"""
Module: search

Purpose:
    Data models for multi-file search. Immutable dataclasses representing
    corpus buffers, located matches and the tagged search outcome.

Key Classes:
    - SourceFile: One named text buffer in a corpus
    - SearchMatch: One located occurrence of a pattern
    - SearchOutcome: Matches plus an optional pattern error

Dependencies:
    - dataclasses (std)

Used By:
    - search.engine: Produces SearchMatch / SearchOutcome
    - search.replace: Consumes SearchMatch
    - workspace.corpus: Produces SourceFile
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple, Union


@dataclass(frozen=True, slots=True)
class SourceFile:
    """
    A named text buffer.

    Attributes:
        file_id: Stable identifier (e.g. relative path "chapters/intro.tex")
        file_name: Display name (e.g. "intro.tex")
        content: Full buffer text
    """

    file_id: str
    file_name: str
    content: str = ""

    @classmethod
    def coerce(cls, item: Union[SourceFile, Mapping[str, Any]]) -> SourceFile:
        """
        Build a SourceFile from either an instance or a plain mapping.

        Accepts both snake_case (file_id) and camelCase (fileId) keys so
        editor payloads can be passed through unchanged.

        Example:
            >>> SourceFile.coerce({"fileId": "1", "fileName": "main.tex", "content": "x"})
            SourceFile(file_id='1', file_name='main.tex', content='x')
        """
        if isinstance(item, SourceFile):
            return item
        file_id = item.get("file_id", item.get("fileId"))
        if file_id is None:
            raise ValueError("Corpus entry is missing a file id")
        file_name = item.get("file_name", item.get("fileName", str(file_id)))
        return cls(
            file_id=str(file_id),
            file_name=str(file_name),
            content=item.get("content") or "",
        )


@dataclass(frozen=True, slots=True)
class SearchMatch:
    """
    One occurrence of a search pattern.

    Attributes:
        file_id: Identifier of the source buffer
        file_name: Display name of the source buffer
        line: 1-based line number
        column: 1-based start column
        line_content: Full text of the containing line
        match_start: 0-based start offset within line_content
        match_end: 0-based end offset (exclusive) within line_content

    Invariants:
        - line >= 1
        - 0 <= match_start <= match_end <= len(line_content)
        - column == match_start + 1

    Example:
        >>> m = SearchMatch("1", "main.tex", 1, 5, "The fox", 4, 7)
        >>> m.matched_text
        'fox'
    """

    file_id: str
    file_name: str
    line: int
    column: int
    line_content: str
    match_start: int
    match_end: int

    def __post_init__(self) -> None:
        """Validate match offsets on construction."""
        if self.line < 1:
            raise ValueError(f"line must be 1-based: {self.line}")
        if not 0 <= self.match_start <= self.match_end <= len(self.line_content):
            raise ValueError(
                f"Invalid match range [{self.match_start}, {self.match_end}) "
                f"for line of length {len(self.line_content)}"
            )
        if self.column != self.match_start + 1:
            raise ValueError(
                f"column {self.column} does not match start offset {self.match_start}"
            )

    @property
    def matched_text(self) -> str:
        """Get the text covered by this match."""
        return self.line_content[self.match_start:self.match_end]

    @property
    def is_zero_length(self) -> bool:
        return self.match_start == self.match_end

    @property
    def sort_key(self) -> Tuple[int, int]:
        """(line, match_start) tuple for ordering matches within a file."""
        return (self.line, self.match_start)

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "file_id": self.file_id,
            "file_name": self.file_name,
            "line": self.line,
            "column": self.column,
            "line_content": self.line_content,
            "match_start": self.match_start,
            "match_end": self.match_end,
        }


@dataclass(frozen=True)
class SearchOutcome:
    """
    Result of a search invocation that keeps pattern errors visible.

    `search()` collapses an invalid pattern into an empty list; this type
    lets callers tell "no matches" apart from "pattern did not compile".

    Attributes:
        matches: Matches in corpus order (file, then line, then offset)
        error: Compilation error message, or None when the pattern was valid

    Example:
        >>> outcome = SearchOutcome(error="unterminated character set")
        >>> outcome.ok
        False
    """

    matches: Tuple[SearchMatch, ...] = field(default_factory=tuple)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        """True when the pattern compiled (regardless of match count)."""
        return self.error is None

    @property
    def is_empty(self) -> bool:
        return len(self.matches) == 0

    @property
    def total_matches(self) -> int:
        return len(self.matches)

    @property
    def files_matched(self) -> Tuple[str, ...]:
        """File ids with at least one match, in first-seen order."""
        return tuple(dict.fromkeys(m.file_id for m in self.matches))
