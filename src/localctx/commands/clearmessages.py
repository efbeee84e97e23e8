#!/usr/bin/env python3

"""
ClearMessages command implementation for the localctx terminal.
"""

from typing import Any, List

from localctx.core.commands import CommandResult


async def handle_clearmessages(app: Any, args: List[str]) -> CommandResult:
    """
    Handle the /clearmessages command to clear conversation history.

    Args:
        app: The Application instance
        args: Command arguments (unused)
    """
    count = len(app.state.messages)
    app.state.clear_messages()
    return CommandResult.info(f"Cleared {count} message(s) from conversation history.")
