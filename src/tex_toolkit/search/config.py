"""
Module: search.config

Purpose:
    Configuration dataclass for search invocations.

Key Classes:
    - SearchOptions: Regex / case-sensitivity switches

Dependencies:
    - dataclasses (std)
    - re (std)

Used By:
    - search.engine
    - cli: `search` / `replace` subcommands
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class SearchOptions:
    """
    Switches controlling how a pattern is interpreted (immutable).

    Attributes:
        use_regex: Treat the pattern as a regular expression. When False
            every regex metacharacter is escaped first.
        case_sensitive: Match case exactly. When False the pattern is
            compiled with re.IGNORECASE.

    Example:
        >>> SearchOptions(case_sensitive=True).flags
        0
    """

    use_regex: bool = False
    case_sensitive: bool = False

    @property
    def flags(self) -> int:
        """re flags implied by these options."""
        return 0 if self.case_sensitive else re.IGNORECASE
