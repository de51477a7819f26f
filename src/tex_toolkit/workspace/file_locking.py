"""
Module: workspace.file_locking

Purpose:
    Locked access to project sources and the persisted ignore list, so an
    editor and the command line can work on one project directory without
    losing each other's writes. portalocker keeps the locks portable
    across Linux, macOS and Windows.

Key Functions:
    - locked_file: Open a file with a shared or exclusive lock held
    - locked_write_text: Replace a source file's text in place
    - locked_read_modify_write_json: Update a JSON document atomically

Dependencies:
    - portalocker: Advisory file locks

Used By:
    - workspace.corpus: load_file(), write_back()
    - workspace.ignore_store: IgnoreListStore
"""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Any, Callable, Dict, Iterator

import portalocker

logger = logging.getLogger(__name__)

JsonDict = Dict[str, Any]


@contextmanager
def locked_file(
    path: Path,
    mode: str = 'r',
    lock_type: int = portalocker.LOCK_EX,
    encoding: str = 'utf-8',
) -> Iterator[IO[str]]:
    """
    Open a text file and hold a lock on it for the duration of the block.

    Line endings are passed through untouched (newline=''), so CRLF
    sources survive a load/replace/write cycle byte for byte. Read modes
    create a missing file first, which lets 'r+' double as "open or create".

    Args:
        path: File to open; parent directories are created as needed
        mode: Text open mode ('r', 'r+', 'w', ...)
        lock_type: portalocker.LOCK_SH for readers, LOCK_EX for writers
        encoding: Source encoding

    Example:
        >>> with locked_file(Path("main.tex"), 'r', portalocker.LOCK_SH) as f:
        ...     source = f.read()
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if 'r' in mode and not path.exists():
        path.touch()

    with open(path, mode, encoding=encoding, newline='') as handle:
        portalocker.lock(handle, lock_type)
        try:
            yield handle
        finally:
            portalocker.unlock(handle)


def locked_write_text(path: Path, text: str, encoding: str = 'utf-8') -> None:
    """
    Overwrite a file with new text under an exclusive lock.

    The file is locked before it is truncated; opening with 'w' would
    empty it while another process might still be reading.
    """
    with locked_file(path, 'r+', portalocker.LOCK_EX, encoding) as handle:
        handle.seek(0)
        handle.truncate()
        handle.write(text)

    logger.debug(f"Wrote {len(text)} characters to {Path(path).name}")


def locked_read_modify_write_json(
    path: Path,
    modifier: Callable[[JsonDict], JsonDict],
    default: Callable[[], JsonDict] = dict,
) -> JsonDict:
    """
    Apply `modifier` to a JSON document while holding an exclusive lock.

    Two sessions adding ignored words at the same time both see each
    other's additions, because the read and the write happen under one lock.

    Args:
        path: JSON file; a missing or blank file reads as `default()`
        modifier: Receives the current document, returns the new one
        default: Factory for the starting document

    Returns:
        The document as written

    Raises:
        json.JSONDecodeError: If the file holds invalid JSON

    Example:
        >>> locked_read_modify_write_json(
        ...     Path("ignore.json"),
        ...     lambda doc: {**doc, "words": sorted({*doc.get("words", []), "teh"})},
        ... )
        {'words': ['teh']}
    """
    with locked_file(path, 'r+', portalocker.LOCK_EX) as handle:
        raw = handle.read()
        current = json.loads(raw) if raw.strip() else default()

        updated = modifier(current)

        handle.seek(0)
        handle.truncate()
        json.dump(updated, handle, indent=2, ensure_ascii=False)

    return updated
