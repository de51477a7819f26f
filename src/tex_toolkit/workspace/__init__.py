"""
Workspace Module.

Loads project directories into corpora, writes replacements back and
persists the spell-check ignore list.
"""

from .config import WorkspaceConfig
from .corpus import load_corpus, load_file, write_back
from .file_locking import locked_file, locked_read_modify_write_json, locked_write_text
from .ignore_store import IgnoreListStore

__all__ = [
    "WorkspaceConfig",
    "load_corpus",
    "load_file",
    "write_back",
    "locked_file",
    "locked_read_modify_write_json",
    "locked_write_text",
    "IgnoreListStore",
]
