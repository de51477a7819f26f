"""
Math Scan Module.

Locates inline and display math regions in LaTeX source.
"""

from .scanner import (
    MathScanner,
    ScanState,
    find_span_at_position,
    iter_math_spans,
    scan,
    scan_math_spans,
)

__all__ = [
    "MathScanner",
    "ScanState",
    "find_span_at_position",
    "iter_math_spans",
    "scan",
    "scan_math_spans",
]
