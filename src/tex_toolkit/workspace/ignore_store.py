"""
Persistent ignore-list storage.

Keeps dismissed spell-check words between sessions in a small JSON file:

    {"version": 1, "words": ["latexmk", "teh"]}

Any malformed data results in a graceful fallback to an empty list,
never a crash.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import portalocker

from tex_toolkit.spellcheck.ignore_list import IgnoreList

from .file_locking import locked_file, locked_read_modify_write_json

logger = logging.getLogger(__name__)


class IgnoreListStore:
    """JSON-backed store for an IgnoreList."""

    CURRENT_VERSION = 1

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._load_error: Optional[str] = None

    @property
    def load_error(self) -> Optional[str]:
        """Reason the last load() fell back to an empty list, if any."""
        return self._load_error

    def load(self) -> IgnoreList:
        """Read the stored list. Missing or corrupt files yield an empty list."""
        self._load_error = None
        if not self.path.exists():
            return IgnoreList()

        try:
            with locked_file(self.path, 'r', portalocker.LOCK_SH) as f:
                content = f.read()
            data = json.loads(content) if content.strip() else {}
        except json.JSONDecodeError as e:
            self._load_error = f"Ignore list is corrupted: {e}"
            logger.warning(f"{self._load_error} ({self.path})")
            return IgnoreList()
        except OSError as e:
            self._load_error = f"Failed to read ignore list: {e}"
            logger.warning(self._load_error)
            return IgnoreList()

        words = data.get("words", []) if isinstance(data, dict) else []
        if not isinstance(words, list):
            self._load_error = "Ignore list 'words' is not a list"
            logger.warning(f"{self._load_error} ({self.path})")
            return IgnoreList()

        return IgnoreList(w for w in words if isinstance(w, str))

    def save(self, ignore_list: IgnoreList) -> None:
        """Overwrite the stored list."""
        def _replace(_existing: Dict[str, Any]) -> Dict[str, Any]:
            return {"version": self.CURRENT_VERSION, "words": ignore_list.to_list()}

        self._write(_replace)
        logger.debug(f"Saved {len(ignore_list)} ignored words to {self.path}")

    def add(self, word: str) -> IgnoreList:
        """Add one word, merging with whatever is already on disk."""
        def _merge(existing: Dict[str, Any]) -> Dict[str, Any]:
            current = existing.get("words", []) if isinstance(existing, dict) else []
            merged = IgnoreList(w for w in current if isinstance(w, str))
            merged.add(word)
            return {"version": self.CURRENT_VERSION, "words": merged.to_list()}

        data = self._write(_merge)
        return IgnoreList(data["words"])

    def _write(self, modifier) -> Dict[str, Any]:
        try:
            return locked_read_modify_write_json(self.path, modifier)
        except json.JSONDecodeError:
            # Corrupt file: start over rather than refuse to save
            logger.warning(f"Resetting corrupted ignore list at {self.path}")
            with locked_file(self.path, 'r+', portalocker.LOCK_EX) as f:
                f.truncate(0)
            return locked_read_modify_write_json(self.path, modifier)
