#!/usr/bin/env python3

"""
Exit command implementation for the localctx terminal.
"""

from typing import Any, List

from localctx.ui.ui import PrintType


async def handle_exit(app: Any, args: List[str]):
    """
    Handle the /exit command to terminate the application.

    Args:
        app: The Application instance
        args: Command arguments (unused)
    """
    app.logger.info("User requested exit via /exit command")
    app.ui.print_text("Exiting localctx terminal...", print_type=PrintType.INFO)

    # Signal the main loop to exit
    app.state.running = False
    await app.ui.signal_exit()

    return "EXIT"
