import logging
from typing import Optional

from openai import AsyncOpenAI

# Get the global logger instance
logger = logging.getLogger("localctx")


class APIClients:
    """Hold the OpenAI compatible client used for chat requests"""

    def __init__(self):
        self.openai: Optional[AsyncOpenAI] = None
        self._initialized = False

    def initialize(self, api_key: Optional[str], base_url: Optional[str] = None) -> None:
        """Create the client if a key is available"""
        if self._initialized:
            return
        if not api_key:
            logger.info("APIClients initialize: no api key found")
            return

        self.openai = AsyncOpenAI(api_key=api_key, base_url=base_url)
        logger.info(f"Initialized OpenAI client (base_url: {base_url or 'default'})")
        self._initialized = True
