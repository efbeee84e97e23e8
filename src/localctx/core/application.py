import logging
from typing import Any, Optional

from localctx.commands import (handle_clearcontext, handle_clearmessages, handle_context,
                               handle_exit, handle_help)
from localctx.core.clients import APIClients
from localctx.core.commands import Command, CommandHandler
from localctx.core.config import Settings
from localctx.core.state import AppState
from localctx.file_utils import LOCALCTX_DIR
from localctx.llm_requests import stream_request
from localctx.localcontext.store import ContextStore
from localctx.logger import setup_logger
from localctx.message_builder import MessageBuilder
from localctx.ui.ui import PrintType
from localctx.ui.ui_wrapper import UiWrapper


class Application:
    def __init__(self, settings: Settings, log_dir: str = LOCALCTX_DIR):
        # Initialize core components
        self.logger: logging.Logger = setup_logger(log_dir)
        self.state = AppState(settings)
        self.state.clients = APIClients()
        self.context_store = ContextStore(settings.context)
        self.ui: UiWrapper = UiWrapper()

    def setup(self):
        self._initialize_commands()
        self.state.clients.initialize(self.state.settings.api_key, self.state.settings.base_url)
        self.logger.info(f"Local context store: {self.context_store.root_dir}")

    def _initialize_commands(self) -> None:
        """Initialize command handlers"""
        self.command_handler = CommandHandler(self)
        self.command_handler.register_command("/clearcontext", handle_clearcontext,
                                              "Clear the local context file and downloaded images")
        self.command_handler.register_command("/context", handle_context,
                                              "Manage local context in prompts")
        self.command_handler.register_command("/clearmessages", handle_clearmessages,
                                              "Clear conversation history")
        self.command_handler.register_command("/help", handle_help, "Show this help message")
        self.command_handler.register_command("/exit", handle_exit, "Exit the terminal")

    async def handle_command(self, command: Command) -> Any:
        cmd_parts = command.text.split()
        if not cmd_parts:
            return None

        cmd = cmd_parts[0].lower()

        # Logging command
        self.logger.info(f"Command received: {cmd}")
        return await self.command_handler.execute(cmd, cmd_parts)

    async def process_input(self, user_input: str) -> Any:
        """Route a line of input to a command or to the model"""
        text = user_input.strip()
        if not text:
            return None
        if text.startswith("/"):
            return await self.handle_command(Command(text))
        return await self.send_message(text)

    async def send_message(self, content: str, print_stream: bool = True) -> Optional[str]:
        """
        Send a message to the model, including local context when enabled.

        Args:
            content: The message content to send
            print_stream: Whether to print the stream response to terminal (default: True)

        Returns:
            str: The response text from the model, None on failure
        """
        self.logger.info(f"Sending message to model {self.state.model}")

        # History stores the plain user text, without the local context section
        history = list(self.state.messages)
        builder = MessageBuilder()
        if history:
            builder.add_historical_messages(history)
        builder.start_user_section(content)

        if self.state.use_local_context:
            try:
                local_context = await self.context_store.read_context()
            except OSError as e:
                self.logger.error(f"Failed to read local context: {e}")
                self.ui.print_text(f"Could not read local context, sending without it: {e}", PrintType.WARNING)
                local_context = ""
            if local_context.strip():
                builder.set_local_context(self.context_store.context_file_name, local_context)
            else:
                self.logger.info("Local context enabled but the context file is empty")

        builder.finalize_user_section()
        messages = builder.build()

        self.ui.print_text(f"\n{self.state.model} is processing request...", PrintType.PROCESSING)

        try:
            response_text = await stream_request(self, self.state.model, messages, print_stream=print_stream)
        except Exception as e:
            error_msg = str(e)
            self.logger.error(f"Error in send_message: {error_msg}")
            self.ui.print_text(f"Error: {error_msg}", PrintType.ERROR)
            return None

        self.logger.info("Successfully received response from model")
        self.state.messages = history
        self.state.add_message("user", content)
        self.state.add_message("assistant", response_text)
        return response_text
