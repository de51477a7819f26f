"""
Module: math_span

Purpose:
    Provides the MathSpan dataclass - one delimited math region found by
    the math-region scanner.

Key Functions:
    - MathSpan.contains(line, column): Check if a position is inside the span
    - MathSpan.to_dict(): Serialize for JSON

Dependencies:
    - dataclasses (std)
    - .positions.Position

Used By:
    - math_scan.scanner
    - cli: `math` subcommand
"""

from __future__ import annotations

from dataclasses import dataclass

from .positions import Position


@dataclass(frozen=True, slots=True)
class MathSpan:
    """
    A single inline or display math region.

    `start` points at the first opening delimiter character. `end` points
    one past the last closing delimiter character, so a cursor placed
    directly after `$x$` still resolves to that span.

    Attributes:
        start: Position of the opening delimiter
        end: Position just after the closing delimiter
        content: Text between the delimiters, newlines retained, trimmed
        is_display: True for $$...$$ and \\[...\\], False for $...$ and \\(...\\)

    Invariants:
        - start <= end

    Example:
        >>> span = MathSpan(Position(0, 0), Position(0, 3), "a", False)
        >>> span.contains(0, 3)
        True
    """

    start: Position
    end: Position
    content: str
    is_display: bool

    def __post_init__(self) -> None:
        """Validate span ordering."""
        if self.end < self.start:
            raise ValueError(
                f"Span end {self.end} cannot precede start {self.start}"
            )

    def contains(self, line: int, column: int) -> bool:
        """
        Check whether a zero-indexed position lies within the span.

        Both ends are inclusive.
        """
        after_start = line > self.start.line or (
            line == self.start.line and column >= self.start.column
        )
        before_end = line < self.end.line or (
            line == self.end.line and column <= self.end.column
        )
        return after_start and before_end

    @property
    def is_multiline(self) -> bool:
        return self.end.line > self.start.line

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "start": self.start.to_dict(),
            "end": self.end.to_dict(),
            "content": self.content,
            "is_display": self.is_display,
        }
