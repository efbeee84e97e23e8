from localctx.ui.ui import terminal_print, PrintType
from localctx.ui.ui_wrapper import UiWrapper
from typing import Any, Optional

class CliEvents(UiWrapper):
    def __init__(self):
        super().__init__()
        self.ui_name = "cli"

    def print_text(self, message: Any, print_type: PrintType = PrintType.INFO, end: str = "\n", prefix: Optional[str] = None, flush: bool = False):
        terminal_print(message, print_type, end, prefix, flush)

    def print_stream(self, message: str):
        """print a stream of text"""
        terminal_print(message, PrintType.LLM, end="", flush=True)

    async def signal_exit(self):
        # The REPL loop polls app.state.running, nothing else to tear down
        pass

    def local_context_changed(self, enabled: bool):
        # Plain terminal has no status bar to refresh
        pass
