"""
Module: math_scan.scanner

Purpose:
    Classify LaTeX source into prose and math regions. Walks the document
    character by character with a three-state machine and emits one
    MathSpan per closed delimiter pair.

Key Classes:
    - ScanState: PROSE / IN_INLINE_MATH / IN_DISPLAY_MATH
    - MathScanner: Stateful walker over a document

Key Functions:
    - scan_math_spans(): Ordered list of spans for a document
    - iter_math_spans(): Generator form of scan_math_spans()
    - find_span_at_position(): Span containing a cursor position

Dependencies:
    - enum (std)
    - tex_toolkit.core.models: MathSpan, Position

Used By:
    - cli: `math` subcommand
    - Rendering layers that preview the expression under the cursor
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterator, List, Optional, Sequence

from tex_toolkit.core.models import MathSpan, Position

logger = logging.getLogger(__name__)


class ScanState(Enum):
    """Scanner state while walking a document."""

    PROSE = "prose"
    IN_INLINE_MATH = "inline"
    IN_DISPLAY_MATH = "display"

    @property
    def in_math(self) -> bool:
        return self is not ScanState.PROSE


class MathScanner:
    """
    Single-pass math delimiter scanner.

    Recognised delimiters:
        - Display: $$...$$ and \\[...\\]
        - Inline: $...$ and \\(...\\)

    A `$` preceded by a backslash never opens or closes inline math.
    Spans still open at the end of the document are discarded.

    Example:
        >>> spans = list(MathScanner("see $a+b$ and $$c$$").spans())
        >>> [(s.content, s.is_display) for s in spans]
        [('a+b', False), ('c', True)]
    """

    def __init__(self, document: str) -> None:
        self._lines = document.split("\n")
        self._state = ScanState.PROSE
        self._start = Position(0, 0)
        self._buffer: List[str] = []

    @property
    def state(self) -> ScanState:
        return self._state

    def spans(self) -> Iterator[MathSpan]:
        """Yield spans in document order."""
        for line_num, line in enumerate(self._lines):
            yield from self._scan_line(line_num, line)
            if self._state.in_math:
                self._buffer.append("\n")

        if self._state.in_math:
            logger.debug(
                f"Discarding unterminated {self._state.value} math opened at "
                f"line {self._start.line + 1}, column {self._start.column + 1}"
            )
            self._state = ScanState.PROSE
            self._buffer = []

    def _scan_line(self, line_num: int, line: str) -> Iterator[MathSpan]:
        col = 0
        length = len(line)
        while col < length:
            pair = line[col:col + 2]
            char = line[col]
            escaped = col > 0 and line[col - 1] == "\\"

            if self._state is ScanState.PROSE:
                if pair == "$$" and not escaped:
                    self._open(ScanState.IN_DISPLAY_MATH, line_num, col)
                    col += 2
                    continue
                if pair == "\\[":
                    self._open(ScanState.IN_DISPLAY_MATH, line_num, col)
                    col += 2
                    continue
                if char == "$" and not escaped:
                    self._open(ScanState.IN_INLINE_MATH, line_num, col)
                    col += 1
                    continue
                if pair == "\\(":
                    self._open(ScanState.IN_INLINE_MATH, line_num, col)
                    col += 2
                    continue
                col += 1
                continue

            if self._state is ScanState.IN_DISPLAY_MATH:
                if pair in ("$$", "\\]"):
                    yield self._close(line_num, col + 2)
                    col += 2
                    continue
            else:
                if char == "$" and not escaped:
                    yield self._close(line_num, col + 1)
                    col += 1
                    continue
                if pair == "\\)":
                    yield self._close(line_num, col + 2)
                    col += 2
                    continue

            self._buffer.append(char)
            col += 1

    def _open(self, state: ScanState, line_num: int, col: int) -> None:
        self._state = state
        self._start = Position(line_num, col)
        self._buffer = []

    def _close(self, line_num: int, end_col: int) -> MathSpan:
        span = MathSpan(
            start=self._start,
            end=Position(line_num, end_col),
            content="".join(self._buffer).strip(),
            is_display=self._state is ScanState.IN_DISPLAY_MATH,
        )
        self._state = ScanState.PROSE
        self._buffer = []
        return span


def iter_math_spans(document: str) -> Iterator[MathSpan]:
    """
    Lazily yield math spans for a document.

    Args:
        document: Full LaTeX source text

    Yields:
        MathSpan objects in document order
    """
    return MathScanner(document).spans()


def scan_math_spans(document: str) -> List[MathSpan]:
    """
    Find every closed math region in a document.

    Args:
        document: Full LaTeX source text

    Returns:
        Non-overlapping spans ordered by position. Unterminated math at the
        end of the document produces no span.

    Example:
        >>> scan_math_spans("$a$")[0].content
        'a'
        >>> scan_math_spans("$unterminated")
        []
    """
    spans = list(iter_math_spans(document))
    logger.debug(f"Found {len(spans)} math spans")
    return spans


# Short alias matching the editor-facing name
scan = scan_math_spans


def find_span_at_position(
    spans: Sequence[MathSpan],
    line: int,
    column: int,
) -> Optional[MathSpan]:
    """
    Return the first span containing a zero-indexed position.

    Args:
        spans: Spans from scan_math_spans(), in document order
        line: Zero-indexed line
        column: Zero-indexed column

    Returns:
        The containing span, or None when the position is in prose
    """
    for span in spans:
        if span.contains(line, column):
            return span
    return None
