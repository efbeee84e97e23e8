import time
from typing import Any, Dict, List

import tiktoken

from localctx.ui.ui import PrintType

_token_encoder = None


def estimate_tokens(text: str) -> int:
    """Rough token count for text using the cl100k_base encoding"""
    global _token_encoder
    if _token_encoder is None:
        _token_encoder = tiktoken.get_encoding("cl100k_base")
    return len(_token_encoder.encode(text))


async def stream_request(app: Any, model: str, messages: List[Dict[str, str]], print_stream: bool = True) -> str:
    """
    Stream a chat completion and return the full response text.

    Args:
        app: The Application instance
        model: Model name passed to the API
        messages: Chat messages to send
        print_stream: Whether to echo chunks to the UI as they arrive

    Raises:
        ValueError: if no API client is configured
    """
    client = app.state.clients.openai
    if client is None:
        raise ValueError("No API key configured. Set OPENAI_API_KEY in your environment or .env file.")

    start_time = time.time()
    app.logger.info(f"Sending request to {model} with {len(messages)} messages")

    stream = await client.chat.completions.create(
        model=model,
        messages=messages,
        stream=True,
    )

    response_text = ""
    first_chunk = True
    chunk_count = 0
    async for chunk in stream:
        if first_chunk:
            if print_stream:
                app.ui.print_text(f"Receiving response from {model}...", PrintType.PROCESSING)
            app.logger.info(f"Started receiving response from {model}")
            first_chunk = False

        chunk_count += 1
        if chunk.choices and chunk.choices[0].delta.content:
            chunk_text = chunk.choices[0].delta.content
            response_text += chunk_text
            if print_stream:
                app.ui.print_stream(chunk_text)

    if print_stream:
        app.ui.print_text("")

    elapsed = round(time.time() - start_time, 2)
    app.logger.info(f"Response from {model} complete: {chunk_count} chunks in {elapsed}s")
    return response_text
