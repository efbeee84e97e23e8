"""
Local context store: a markdown file and a directory of downloaded images.
"""

from localctx.localcontext.clearer import ClearOutcome, ContextClearer, ContextStoreState, classify
from localctx.localcontext.store import ContextStore, FileStat, LocalFileSystem

__all__ = [
    "ClearOutcome",
    "ContextClearer",
    "ContextStore",
    "ContextStoreState",
    "FileStat",
    "LocalFileSystem",
    "classify",
]
