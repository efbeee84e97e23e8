"""
Filesystem access for the local context store.

The store is a markdown file plus a directory of downloaded images, both
under one root directory. Every call here is a coroutine that runs the
blocking os call in a worker thread, so a slow disk never stalls the
event loop. A missing path surfaces as FileNotFoundError; every other
failure is left as the OSError the os module raised.
"""

import asyncio
import logging
import os
import stat
from dataclasses import dataclass
from typing import List

from localctx.core.config import ContextSettings

logger = logging.getLogger("localctx")


@dataclass(frozen=True)
class FileStat:
    size: int
    is_directory: bool


class LocalFileSystem:
    """Async wrapper over the os calls the context store needs"""

    async def stat(self, path: str) -> FileStat:
        result = await asyncio.to_thread(os.stat, path)
        return FileStat(size=result.st_size, is_directory=stat.S_ISDIR(result.st_mode))

    async def readdir(self, path: str) -> List[str]:
        return await asyncio.to_thread(os.listdir, path)

    async def write_file(self, path: str, content: str) -> None:
        await asyncio.to_thread(_write_text, path, content)

    async def delete_file(self, path: str) -> None:
        await asyncio.to_thread(os.remove, path)

    async def read_text(self, path: str) -> str:
        return await asyncio.to_thread(_read_text, path)


def _write_text(path: str, content: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)


def _read_text(path: str) -> str:
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


class ContextStore:
    """
    The pair (context file, images directory) rooted at one directory.

    Args:
        settings: Where the store lives on disk
        fs: Filesystem collaborator, LocalFileSystem unless a test swaps it
    """

    def __init__(self, settings: ContextSettings, fs=None):
        self.settings = settings
        self.fs = fs if fs is not None else LocalFileSystem()

    @property
    def root_dir(self) -> str:
        return self.settings.context_dir

    @property
    def context_file_path(self) -> str:
        return self.settings.context_file_path

    @property
    def images_dir_path(self) -> str:
        return self.settings.images_dir_path

    @property
    def context_file_name(self) -> str:
        return self.settings.context_file_name

    async def read_context(self) -> str:
        """
        Return the context file text, or "" when the file is missing.
        """
        try:
            return await self.fs.read_text(self.context_file_path)
        except FileNotFoundError:
            logger.info(f"No local context file at {self.context_file_path}")
            return ""

    async def context_file_size(self) -> int:
        """Size of the context file in bytes, -1 when it does not exist"""
        try:
            stats = await self.fs.stat(self.context_file_path)
        except FileNotFoundError:
            return -1
        return stats.size

    async def list_images(self) -> List[str]:
        """Entries of the images directory, [] when it does not exist"""
        try:
            return sorted(await self.fs.readdir(self.images_dir_path))
        except FileNotFoundError:
            return []
