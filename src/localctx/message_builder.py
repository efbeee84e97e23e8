from typing import Dict, List


class MessageBuilder:
    def __init__(self):
        self.messages: List[Dict[str, str]] = []
        self.local_context: str = ""
        self.local_context_name: str = ""
        self._current_user_content: List[str] = []

    def add_user_message(self, content: str) -> None:
        """Add a user message to the conversation"""
        self.messages.append({"role": "user", "content": content})

    def add_historical_messages(self, messages: List[Dict[str, str]]) -> None:
        """Carry earlier turns of the conversation forward"""
        self.messages.extend(dict(msg) for msg in messages)

    def set_local_context(self, name: str, content: str) -> None:
        """Attach the local context file text to the next user message"""
        self.local_context_name = name
        self.local_context = content

    def start_user_section(self, base_text: str = "") -> None:
        """Begin constructing a user message with context"""
        self._current_user_content = [base_text]

    def _build_local_context_section(self) -> str:
        if not self.local_context.strip():
            return ""
        return f"\n\nLOCAL CONTEXT ({self.local_context_name}):\n{self.local_context}"

    def finalize_user_section(self) -> None:
        """Finalize and add the user message to messages"""
        if not self._current_user_content:
            return

        full_content = "".join(self._current_user_content)
        full_content += self._build_local_context_section()

        self.add_user_message(full_content)
        self._current_user_content = []
        self.local_context = ""

    def build(self) -> List[Dict[str, str]]:
        """Return the fully constructed message list"""
        return self.messages.copy()
