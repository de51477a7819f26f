"""
Module: spellcheck.markup

Purpose:
    Line-local LaTeX markup stripping for spell checking. Each removed
    region is overwritten with spaces of the same length, so character
    offsets in the stripped line still point at the source line.

    Math that spans several lines is not recognised here; only delimiter
    pairs that open and close on the same line are blanked.

Key Functions:
    - strip_comment(): Drop everything from the first unescaped %
    - strip_latex_line(): Full stripping pipeline for one line
    - iter_prose_words(): (line, start, word) candidates for a document

Dependencies:
    - re: Pattern-based stripping

Used By:
    - spellcheck.checker
"""

from __future__ import annotations

import re
from typing import Iterator, Tuple

# Even run of backslashes (possibly none); the delimiter after it is live
UNESCAPED_LEAD = r"(?<!\\)(?P<lead>(?:\\\\)*)"

COMMENT_RE = re.compile(UNESCAPED_LEAD + r"%")

MATH_PATTERNS = (
    re.compile(UNESCAPED_LEAD + r"\$\$[^$]*\$\$"),
    re.compile(UNESCAPED_LEAD + r"\$[^$]*(?<!\\)\$"),
    re.compile(r"\\\[[^\]]*\\\]"),
    re.compile(r"\\\([^)]*\\\)"),
)

# Commands whose brace argument is never prose
NON_PROSE_COMMANDS = (
    "documentclass",
    "usepackage",
    "begin",
    "end",
    "label",
    "ref",
    "cite",
    "includegraphics",
)
NON_PROSE_COMMAND_RE = re.compile(
    r"\\(?:" + "|".join(NON_PROSE_COMMANDS) + r")\{[^}]*\}"
)

COMMAND_RE = re.compile(r"\\[a-zA-Z]+\*?(?:\[[^\]]*\])?(?:\{[^}]*\})?")
BRACKET_RE = re.compile(r"[{}\[\]]")
WORD_RE = re.compile(r"\b[a-zA-Z]+\b", re.ASCII)


def _blank(match: re.Match) -> str:
    return " " * (match.end() - match.start())


def _blank_after_lead(match: re.Match) -> str:
    lead = match.group("lead")
    return lead + " " * (match.end() - match.start() - len(lead))


def strip_comment(line: str) -> str:
    """
    Remove a trailing comment.

    A percent sign preceded by an odd number of backslashes (\\%) is
    literal text. After a line break (\\\\) the backslashes pair up and
    the % starts a comment again.

    Example:
        >>> strip_comment("50\\\\% done % todo")
        '50\\\\% done '
    """
    match = COMMENT_RE.search(line)
    return line[:match.end() - 1] if match else line


def strip_math(line: str) -> str:
    """Blank same-line $$..$$, $..$, \\[..\\] and \\(..\\) regions."""
    for pattern in MATH_PATTERNS:
        repl = _blank_after_lead if "lead" in pattern.groupindex else _blank
        line = pattern.sub(repl, line)
    return line


def strip_commands(line: str) -> str:
    """Blank non-prose commands with their argument, then any remaining command token."""
    line = NON_PROSE_COMMAND_RE.sub(_blank, line)
    return COMMAND_RE.sub(_blank, line)


def strip_latex_line(line: str) -> str:
    """
    Run the full stripping pipeline on one line.

    Order: comments, math, commands, then brace/bracket punctuation.
    The result is never longer than the input and keeps the offsets of
    every surviving character.

    Example:
        >>> strip_latex_line("See $x$ in \\\\ref{fig}.")
        'See     in          .'
    """
    line = strip_comment(line)
    line = strip_math(line)
    line = strip_commands(line)
    return BRACKET_RE.sub(" ", line)


def iter_prose_words(document: str) -> Iterator[Tuple[int, int, str]]:
    """
    Yield candidate words from a document.

    Yields:
        (line_number, start_offset, word) with a 1-based line number and a
        0-based offset into the original line
    """
    for line_index, line in enumerate(document.split("\n")):
        stripped = strip_latex_line(line)
        if not stripped.strip():
            continue
        for match in WORD_RE.finditer(stripped):
            yield line_index + 1, match.start(), match.group(0)
