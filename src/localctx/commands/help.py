#!/usr/bin/env python3

"""
Help command implementation for the localctx terminal.
"""

from typing import Any, List

from localctx.ui.ui import COLORS, PrintType


def format_command_with_args(command, args=None):
    """
    Format a command with grey arguments that are not bold.

    Args:
        command: The base command (e.g., "/help")
        args: Optional arguments to add in grey (e.g., "<enable|disable>")

    Returns:
        Formatted command string with grey arguments
    """
    if args:
        grey_args = f"{COLORS['RESET']}{COLORS['BRIGHT_BLACK']}{args}"
        return f"{command} {grey_args}"
    return command


COMMAND_ARGS = {
    "/context": "<enable|disable|status>",
}


async def handle_help(app: Any, args: List[str]):
    """
    Handle the /help command to display available commands.
    """
    handler = app.command_handler
    app.ui.print_text("Commands:", PrintType.HEADER)
    for name in sorted(handler.get_commands()):
        app.ui.print_text(
            f"  {format_command_with_args(name, COMMAND_ARGS.get(name))}",
            print_type=PrintType.COMMAND,
            end=""
        )
        app.ui.print_text(f" - {handler.get_description(name)}")
    app.ui.print_text("Anything that does not start with / is sent to the model.", PrintType.INFO)
