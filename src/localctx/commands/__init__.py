"""
Command implementations for the localctx terminal.
"""

from localctx.commands.clearcontext import handle_clearcontext
from localctx.commands.clearmessages import handle_clearmessages
from localctx.commands.context import handle_context
from localctx.commands.exit import handle_exit
from localctx.commands.help import handle_help

__all__ = [
    "handle_clearcontext",
    "handle_clearmessages",
    "handle_context",
    "handle_exit",
    "handle_help",
]
