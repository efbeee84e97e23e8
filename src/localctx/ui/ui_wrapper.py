from typing import Any, Optional
from localctx.ui.ui import PrintType

class UiWrapper:
    def __init__(self):
        self.ui_name = ""

    def print_text(self, message: Any, print_type: PrintType = PrintType.INFO, end: str = "\n", prefix: Optional[str] = None, flush: bool = False):
        """Override this method in subclasses"""
        raise NotImplementedError("Subclasses must implement print_text()")

    def print_stream(self, message: str):
        """print a stream of text"""
        raise NotImplementedError("Subclasses must implement print_stream()")

    async def signal_exit(self):
        """
        Signal to the UI that it should exit the application

        This method is called when the application needs to shut down.
        Each UI implementation should handle this appropriately.
        """
        raise NotImplementedError("Subclasses must implement signal_exit()")

    def local_context_changed(self, enabled: bool):
        """
        Signal to the UI that local context injection was switched on or off
        """
        raise NotImplementedError("Subclasses must implement local_context_changed()")
