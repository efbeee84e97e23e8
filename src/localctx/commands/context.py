#!/usr/bin/env python3

"""
Local context command implementation for the localctx terminal.
"""

from typing import Any, List, Optional

from localctx.core.commands import CommandResult
from localctx.file_utils import format_size
from localctx.llm_requests import estimate_tokens
from localctx.ui.ui import PrintType


async def handle_context(app: Any, args: List[str]) -> Optional[CommandResult]:
    """
    Handle the /context command for managing local context injection.

    Commands:
        /context enable - Include the local context file in prompts
        /context disable - Stop including the local context file in prompts
        /context status - Show whether local context is on and what it holds
        /context help - Show usage information

    Args:
        app: The Application instance
        args: Command arguments
    """
    if len(args) < 2:
        _show_usage(app)
        return None

    command = args[1].lower()

    if command == "enable":
        return _set_enabled(app, True)
    elif command == "disable":
        return _set_enabled(app, False)
    elif command == "status":
        await _show_status(app)
    else:
        _show_usage(app)
    return None


def _set_enabled(app: Any, enabled: bool) -> CommandResult:
    app.state.set_enable_local_context(enabled)
    app.ui.local_context_changed(enabled)
    context_file = app.context_store.context_file_path
    if enabled:
        return CommandResult.info(
            f"Local context enabled. Content from {context_file} will be included in prompts."
        )
    return CommandResult.info(
        f"Local context disabled. Content from {context_file} will NOT be included in prompts."
    )


def _show_usage(app: Any) -> None:
    app.ui.print_text("Local Context Command Usage:", PrintType.HEADER)
    app.ui.print_text(
        "/context enable - Include the local context file in prompts", PrintType.INFO
    )
    app.ui.print_text(
        "/context disable - Stop including the local context file in prompts", PrintType.INFO
    )
    app.ui.print_text(
        "/context status - Show whether local context is on and what it holds", PrintType.INFO
    )
    app.ui.print_text("/context help - Show this usage information", PrintType.INFO)


async def _show_status(app: Any) -> None:
    """
    Show the current status of the local context store.

    Args:
        app: The Application instance
    """
    store = app.context_store
    size = await store.context_file_size()
    images = await store.list_images()

    app.ui.print_text("Local Context Status:", PrintType.HEADER)
    app.ui.print_text(f"Context enabled: {app.state.use_local_context}", PrintType.INFO)
    if size < 0:
        app.ui.print_text(f"Context file: {store.context_file_path} (missing)", PrintType.WARNING)
    else:
        app.ui.print_text(f"Context file: {store.context_file_path} ({format_size(size)})", PrintType.INFO)
        if size > 0:
            text = await store.read_context()
            app.ui.print_text(f"Estimated tokens: {estimate_tokens(text)}", PrintType.INFO)
    app.ui.print_text(f"Downloaded images: {len(images)}", PrintType.INFO)
