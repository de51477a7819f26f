"""
Module: spellcheck.ignore_list

Purpose:
    Words the user has dismissed. The checker never reads this list;
    callers filter issues with it after checking.

Key Classes:
    - IgnoreList: Set of lowercased words

Key Functions:
    - add_to_ignore_list() / is_ignored() / clear_ignore_list():
      Process-wide session list
    - filter_ignored(): Drop ignored issues from a check result

Used By:
    - workspace.ignore_store: Persistence between sessions
    - cli: `spell` / `ignore` subcommands
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from tex_toolkit.core.models import SpellIssue


class IgnoreList:
    """
    Case-insensitive set of dismissed words.

    Example:
        >>> ignored = IgnoreList(["Teh"])
        >>> ignored.contains("TEH")
        True
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words = {w.lower() for w in words if w}

    def add(self, word: str) -> None:
        if word:
            self._words.add(word.lower())

    def discard(self, word: str) -> None:
        self._words.discard(word.lower())

    def contains(self, word: str) -> bool:
        return word.lower() in self._words

    def clear(self) -> None:
        self._words.clear()

    def filter_issues(self, issues: Iterable[SpellIssue]) -> List[SpellIssue]:
        """Return issues whose word is not ignored, order preserved."""
        return [issue for issue in issues if not self.contains(issue.word)]

    def to_list(self) -> List[str]:
        """Sorted words, for serialization."""
        return sorted(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __iter__(self) -> Iterator[str]:
        return iter(self.to_list())

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"IgnoreList({self.to_list()!r})"


# Session-wide list, lives until cleared or process exit
_session_ignore_list = IgnoreList()


def session_ignore_list() -> IgnoreList:
    """Get the process-wide ignore list."""
    return _session_ignore_list


def add_to_ignore_list(word: str) -> None:
    _session_ignore_list.add(word)


def is_ignored(word: str) -> bool:
    return _session_ignore_list.contains(word)


def clear_ignore_list() -> None:
    _session_ignore_list.clear()


def filter_ignored(
    issues: Iterable[SpellIssue],
    ignore_list: Optional[IgnoreList] = None,
) -> List[SpellIssue]:
    """
    Drop issues for ignored words.

    Args:
        issues: Result of check_spelling()
        ignore_list: List to filter with; defaults to the session list

    Returns:
        Remaining issues in their original order
    """
    if ignore_list is None:
        ignore_list = _session_ignore_list
    return ignore_list.filter_issues(issues)
