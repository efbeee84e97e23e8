#!/usr/bin/env python3

"""
ClearContext command implementation for the localctx terminal.
"""

from typing import Any, List

from localctx.core.commands import CommandResult
from localctx.localcontext.clearer import ContextClearer


async def handle_clearcontext(app: Any, args: List[str]) -> CommandResult:
    """
    Handle the /clearcontext command to empty the local context file and
    delete downloaded images.

    Args:
        app: The Application instance
        args: Command arguments (unused)
    """
    app.logger.info(f"Clearing local context in {app.context_store.root_dir}")
    clearer = ContextClearer(app.context_store)
    return await clearer.clear()
