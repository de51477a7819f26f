"""
Module: positions

Purpose:
    Provides the Position dataclass - a zero-indexed (line, column) pair
    used to mark where math spans start and end in a document.

Key Functions:
    - Position.to_dict(): Serialize for JSON
    - Position.from_dict(data): Deserialize from JSON

Dependencies:
    - dataclasses (std)

Used By:
    - core.models.math_span.MathSpan
    - math_scan.scanner
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """
    Zero-indexed location in a document.

    Ordering compares line first, then column, so positions sort in
    document order.

    Attributes:
        line: Line index (0 = first line)
        column: Character index within the line (0 = first character)

    Invariants:
        - line >= 0
        - column >= 0

    Example:
        >>> Position(0, 5) < Position(1, 0)
        True
    """

    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate position on construction."""
        if self.line < 0:
            raise ValueError(f"line cannot be negative: {self.line}")
        if self.column < 0:
            raise ValueError(f"column cannot be negative: {self.column}")

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {"line": self.line, "column": self.column}

    @classmethod
    def from_dict(cls, data: dict) -> Position:
        """Deserialize from a dict produced by to_dict()."""
        return cls(line=int(data["line"]), column=int(data["column"]))
