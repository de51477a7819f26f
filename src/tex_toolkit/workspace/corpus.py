"""
Module: workspace.corpus

Purpose:
    Bridge between a project directory on disk and the in-memory corpus
    the search engine and spell checker work on.

Key Functions:
    - load_file(): Read one file as a SourceFile
    - load_corpus(): Read every matching file under a project root
    - write_back(): Persist replaced buffers under file locks

Dependencies:
    - portalocker (via .file_locking): Locked reads and writes
    - tex_toolkit.core.models: SourceFile

Used By:
    - cli: `search`, `replace`, `spell` and `math` subcommands
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional

import portalocker

from tex_toolkit.core.models import SourceFile

from .config import WorkspaceConfig
from .file_locking import locked_file, locked_write_text

logger = logging.getLogger(__name__)


def _file_id(path: Path, root: Optional[Path]) -> str:
    if root is None:
        return path.name
    return path.relative_to(root).as_posix()


def load_file(
    path: Path,
    root: Optional[Path] = None,
    config: Optional[WorkspaceConfig] = None,
) -> SourceFile:
    """
    Read a single file into a SourceFile.

    Args:
        path: File to read
        root: Project root; the file id is the POSIX path relative to it.
            When None the file id is the bare file name.
        config: Encoding settings; defaults to WorkspaceConfig()

    Returns:
        SourceFile with the file's full text

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid text in the encoding
    """
    config = config or WorkspaceConfig()
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"No such file: {path}")

    with locked_file(path, 'r', portalocker.LOCK_SH, config.encoding) as f:
        content = f.read()

    return SourceFile(
        file_id=_file_id(path, Path(root) if root is not None else None),
        file_name=path.name,
        content=content,
    )


def _is_hidden(path: Path, root: Path) -> bool:
    return any(part.startswith(".") for part in path.relative_to(root).parts)


def load_corpus(
    root: Path,
    config: Optional[WorkspaceConfig] = None,
) -> List[SourceFile]:
    """
    Load every matching file under a project root.

    Files are visited in sorted path order so the corpus (and therefore
    search results) is deterministic. Files that cannot be decoded are
    skipped with a warning.

    Args:
        root: Project directory
        config: Traversal settings; defaults to WorkspaceConfig()

    Returns:
        SourceFile list, ids relative to root

    Raises:
        NotADirectoryError: If root is not a directory

    Example:
        >>> [f.file_id for f in load_corpus(Path("thesis"))]
        ['chapters/intro.tex', 'main.tex', 'refs.bib']
    """
    config = config or WorkspaceConfig()
    root = Path(root)
    if not root.is_dir():
        raise NotADirectoryError(f"Not a project directory: {root}")

    corpus: List[SourceFile] = []
    for path in sorted(root.rglob("*")):
        if not path.is_file() or not config.accepts_suffix(path.suffix):
            continue
        if not config.include_hidden and _is_hidden(path, root):
            continue
        try:
            corpus.append(load_file(path, root, config))
        except UnicodeDecodeError as e:
            logger.warning(f"Skipping {path.relative_to(root)}: not valid {config.encoding} ({e.reason})")

    logger.info(f"Loaded {len(corpus)} files from {root}")
    return corpus


def write_back(
    root: Path,
    new_contents: Dict[str, str],
    config: Optional[WorkspaceConfig] = None,
) -> List[Path]:
    """
    Write replaced buffers back to disk.

    Args:
        root: Project directory the file ids are relative to
        new_contents: Mapping of file_id -> new content, as returned by
            search.replace_all()
        config: Encoding settings; defaults to WorkspaceConfig()

    Returns:
        Paths that were written, in file id order

    Raises:
        ValueError: If a file id points outside the project root
    """
    config = config or WorkspaceConfig()
    root = Path(root).resolve()
    written: List[Path] = []
    for file_id in sorted(new_contents):
        target = (root / file_id).resolve()
        if root not in target.parents:
            raise ValueError(f"Refusing to write outside project root: {file_id}")
        locked_write_text(target, new_contents[file_id], config.encoding)
        written.append(target)

    logger.info(f"Wrote {len(written)} files under {root}")
    return written
