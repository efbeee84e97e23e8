import logging
import traceback
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Literal

from pydantic import BaseModel

from localctx.ui.ui import PrintType

logger = logging.getLogger("localctx")


class CommandResult(BaseModel):
    """Message a command hands back to the dispatcher for rendering"""
    type: Literal["message"] = "message"
    message_type: Literal["info", "error"]
    content: str

    @classmethod
    def info(cls, content: str) -> "CommandResult":
        return cls(message_type="info", content=content)

    @classmethod
    def error(cls, content: str) -> "CommandResult":
        return cls(message_type="error", content=content)

    def is_error(self) -> bool:
        return self.message_type == "error"


@dataclass
class Command:
    text: str


CommandFunc = Callable[[Any, List[str]], Awaitable[Any]]


class CommandHandler:
    """Registry and dispatcher for slash commands"""

    def __init__(self, app: Any):
        self.app = app
        self.commands: Dict[str, CommandFunc] = {}
        self._descriptions: Dict[str, str] = {}

    def register_command(self, name: str, handler: CommandFunc, description: str = "") -> None:
        """Register a handler under "/name" """
        if not name.startswith("/"):
            name = f"/{name}"
        self.commands[name.lower()] = handler
        self._descriptions[name.lower()] = description

    def get_commands(self) -> Dict[str, CommandFunc]:
        return self.commands

    def get_description(self, name: str) -> str:
        return self._descriptions.get(name, "")

    async def execute(self, cmd: str, cmd_parts: List[str]) -> Any:
        """
        Run the handler for cmd and render a returned CommandResult.

        Args:
            cmd: Lower-cased command name including the slash
            cmd_parts: The full whitespace-split input

        Returns:
            Whatever the handler returned, e.g. "EXIT" or a CommandResult
        """
        handler = self.commands.get(cmd)
        if handler is None:
            logger.warning(f"Unknown command attempted: {cmd}")
            self.app.ui.print_text(f"Unknown command: {cmd}", print_type=PrintType.ERROR)
            self.app.ui.print_text("Type /help for available commands", print_type=PrintType.INFO)
            return None

        try:
            result = await handler(self.app, cmd_parts)
        except Exception as e:
            logger.error(f"Error handling command {cmd}: {e}")
            logger.error(traceback.format_exc())
            self.app.ui.print_text(f"Error: {e}", print_type=PrintType.ERROR)
            return None

        if isinstance(result, CommandResult):
            self.render_result(result)
        return result

    def render_result(self, result: CommandResult) -> None:
        print_type = PrintType.ERROR if result.is_error() else PrintType.INFO
        self.app.ui.print_text(result.content, print_type=print_type)
