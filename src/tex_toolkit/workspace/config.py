"""
Module: workspace.config

Purpose:
    Configuration for building a corpus from a project directory.

Key Classes:
    - WorkspaceConfig: File extensions, hidden-file policy, encoding

Used By:
    - workspace.corpus
    - cli
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

DEFAULT_EXTENSIONS: Tuple[str, ...] = (".tex", ".bib", ".sty", ".cls")


@dataclass(frozen=True)
class WorkspaceConfig:
    """
    Settings for project directory traversal (immutable).

    Attributes:
        extensions: File suffixes to include (lowercase, with leading dot)
        include_hidden: Whether to descend into dot-files and dot-directories
        encoding: Text encoding used for reading and writing

    Invariants:
        - extensions is non-empty and every entry starts with "."

    Example:
        >>> WorkspaceConfig().accepts_suffix(".TEX")
        True
    """

    extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS
    include_hidden: bool = False
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not self.extensions:
            raise ValueError("extensions must not be empty")
        bad = [ext for ext in self.extensions if not ext.startswith(".")]
        if bad:
            raise ValueError(f"extensions must start with '.': {bad}")

    def accepts_suffix(self, suffix: str) -> bool:
        return suffix.lower() in {ext.lower() for ext in self.extensions}
