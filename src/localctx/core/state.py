from typing import Any, Dict, List

from localctx.core.config import Settings


class AppState:
    """Central class for managing application state"""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.model: str = settings.model

        # API clients
        self.clients: Any = None  # Will be initialized with APIClients

        # Chat history for the session
        self.messages: List[Dict[str, str]] = []

        # Context management
        self.use_local_context: bool = settings.context.enabled_by_default

        # Runtime state
        self.running: bool = True

    def set_enable_local_context(self, enabled: bool) -> None:
        """Toggle injection of the local context file into prompts"""
        self.use_local_context = enabled

    def add_message(self, role: str, content: str) -> None:
        self.messages.append({"role": role, "content": content})

    def clear_messages(self) -> None:
        self.messages.clear()

    def __repr__(self) -> str:
        return f"<AppState:\nModel: {self.model}\nMessages: {len(self.messages)}\nLocal context: {self.use_local_context}\nRunning: {self.running}\n>"
