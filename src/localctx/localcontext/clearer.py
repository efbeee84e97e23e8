"""
Clearing of the local context store.

Clearing happens in two halves: ContextClearer gathers a ContextStoreState
from disk, then classify() turns that state into an outcome and the text
shown to the user. Only the HAS_CONTENT outcome touches the disk.
"""

import asyncio
import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from localctx.core.commands import CommandResult
from localctx.localcontext.store import ContextStore

logger = logging.getLogger("localctx")

NOTHING_TO_CLEAR_MESSAGE = "Local context directory does not exist; nothing to clear."
ALREADY_EMPTY_MESSAGE = "Local context is already empty. Nothing to clear."
NOT_A_DIRECTORY_MESSAGE = "Error: Context images path exists but is not a directory."
FILE_CLEARED_MESSAGE = "Local context file has been cleared."


class ClearOutcome(Enum):
    NOTHING_TO_CLEAR = "nothing_to_clear"
    ALREADY_EMPTY = "already_empty"
    INCOMPLETE_BUT_EMPTY = "incomplete_but_empty"
    HAS_CONTENT = "has_content"


@dataclass
class ContextStoreState:
    """Snapshot of the store taken at the start of a clear request"""
    file_exists: bool = False
    file_is_empty: bool = True
    dir_exists: bool = False
    dir_is_empty: bool = True
    image_count: int = 0
    # Entries seen while counting, reused as the deletion targets
    image_files: List[str] = field(default_factory=list)


def missing_parts(state: ContextStoreState, context_file_name: str) -> List[str]:
    missing = []
    if not state.file_exists:
        missing.append(f"{context_file_name} file")
    if not state.dir_exists:
        missing.append("images directory")
    return missing


def classify(state: ContextStoreState, context_file_name: str) -> Tuple[ClearOutcome, str]:
    """
    Decide what a clear request should do for the given store state.

    For HAS_CONTENT the returned message describes the clearing as if it
    succeeded; the caller only reports it after the writes went through.

    Args:
        state: Store snapshot
        context_file_name: Name used when describing a missing file

    Returns:
        Tuple of (outcome, message)
    """
    if state.file_exists and state.file_is_empty and state.dir_exists and state.dir_is_empty:
        return ClearOutcome.ALREADY_EMPTY, ALREADY_EMPTY_MESSAGE

    missing = missing_parts(state, context_file_name)
    if missing and state.file_is_empty and state.dir_is_empty:
        return (
            ClearOutcome.INCOMPLETE_BUT_EMPTY,
            f"Local context is incomplete (missing: {' and '.join(missing)}), but there was nothing to clear.",
        )

    messages = []
    if not state.file_is_empty:
        messages.append(FILE_CLEARED_MESSAGE)
    if not state.dir_is_empty:
        messages.append(f"Deleted {state.image_count} downloaded image(s).")
    if missing:
        messages.append(f"(Warning: The context was incomplete, missing the {' and '.join(missing)}.)")
    return ClearOutcome.HAS_CONTENT, " ".join(messages)


class ContextClearer:
    """Empties the context file and deletes downloaded images"""

    def __init__(self, store: ContextStore):
        self.store = store
        self.fs = store.fs

    async def clear(self) -> CommandResult:
        try:
            return await self._clear()
        except Exception as e:
            logger.error(f"Error clearing local context: {e}")
            return CommandResult.error(f"Failed to clear local context: {e}")

    async def _clear(self) -> CommandResult:
        try:
            await self.fs.stat(self.store.root_dir)
        except FileNotFoundError:
            return CommandResult.info(NOTHING_TO_CLEAR_MESSAGE)

        state = ContextStoreState()

        try:
            file_stats = await self.fs.stat(self.store.context_file_path)
            state.file_exists = True
            state.file_is_empty = file_stats.size == 0
        except FileNotFoundError:
            pass

        try:
            dir_stats = await self.fs.stat(self.store.images_dir_path)
            state.dir_exists = True
            if not dir_stats.is_directory:
                return CommandResult.error(NOT_A_DIRECTORY_MESSAGE)
            state.image_files = await self.fs.readdir(self.store.images_dir_path)
            state.image_count = len(state.image_files)
            state.dir_is_empty = state.image_count == 0
        except FileNotFoundError:
            pass

        outcome, message = classify(state, self.store.context_file_name)
        logger.info(f"Clear local context: {outcome.value} ({state})")
        if outcome != ClearOutcome.HAS_CONTENT:
            return CommandResult.info(message)

        if not state.file_is_empty:
            await self.fs.write_file(self.store.context_file_path, "")
        if not state.dir_is_empty:
            await asyncio.gather(*(
                self.fs.delete_file(os.path.join(self.store.images_dir_path, name))
                for name in state.image_files
            ))
        return CommandResult.info(message)
