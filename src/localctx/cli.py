import argparse
import asyncio
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from localctx.core.application import Application
from localctx.core.config import load_settings
from localctx.file_utils import HISTORY_FILE, get_env_path
from localctx.ui.cli_events import CliEvents
from localctx.ui.ui import COLORS, PrintType, terminal_print

# Cross-platform readline support
try:
    import readline
    READLINE_AVAILABLE = True
except ImportError:
    READLINE_AVAILABLE = False


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="localctx - a terminal assistant with a local context store."
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version information and exit."
    )
    parser.add_argument(
        "--context-dir",
        help="Root directory of the local context store (default: ~/.localctx_context)."
    )
    parser.add_argument(
        "--model",
        help="Chat model to use."
    )
    parser.add_argument(
        "--enable-context",
        action="store_true",
        default=None,
        help="Start with local context included in prompts."
    )
    parser.add_argument(
        "input",
        nargs='*',
        help="A command or prompt to run once. If not provided, starts the REPL."
    )
    return parser.parse_args(argv)


def setup_readline(logger) -> None:
    """Load readline history so previous inputs are available with the arrow keys"""
    if not READLINE_AVAILABLE:
        return
    try:
        if os.path.exists(HISTORY_FILE):
            readline.read_history_file(HISTORY_FILE)
        readline.set_history_length(1000)
    except OSError as e:
        logger.error(f"Failed to load history file: {e}")


def save_readline_history(logger) -> None:
    if not READLINE_AVAILABLE:
        return
    try:
        readline.write_history_file(HISTORY_FILE)
    except OSError as e:
        logger.error(f"Failed to write history file: {e}")


async def get_user_input() -> str:
    """Read a line without blocking the event loop"""
    prompt = f"{COLORS['BRIGHT_BLUE']}> {COLORS['RESET']}"
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, lambda: input(prompt))


async def run_repl(app: Application) -> None:
    terminal_print("localctx terminal. Type /help for commands.", PrintType.HEADER)
    state = "enabled" if app.state.use_local_context else "disabled"
    terminal_print(f"Local context is {state} ({app.context_store.context_file_path})", PrintType.INFO)

    setup_readline(app.logger)
    try:
        while app.state.running:
            try:
                user_input = await get_user_input()
            except EOFError:
                break
            result = await app.process_input(user_input)
            if result == "EXIT":
                break
    finally:
        save_readline_history(app.logger)


def run_cli(argv: Optional[List[str]] = None):
    """
    Entry point for the console script.
    Supports both interactive REPL mode and one-shot execution.
    """
    args = parse_args(argv)

    if args.version:
        from localctx import __version__
        terminal_print(f"localctx v{__version__}", PrintType.INFO)
        return

    env_path = get_env_path()
    if os.path.exists(env_path):
        load_dotenv(dotenv_path=env_path)

    try:
        settings = load_settings(
            context_dir=args.context_dir,
            model=args.model,
            enable_context=args.enable_context,
        )
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(2)

    app = Application(settings)
    app.ui = CliEvents()
    app.setup()

    if args.input:
        # One-shot mode: run the given command or prompt and exit
        try:
            asyncio.run(app.process_input(" ".join(args.input)))
        except Exception as e:
            print(f"An error occurred during one-shot execution: {e}", file=sys.stderr)
            sys.exit(1)
        return

    try:
        asyncio.run(run_repl(app))
    except KeyboardInterrupt:
        terminal_print("\nExiting localctx terminal...", PrintType.INFO)


if __name__ == "__main__":
    run_cli()
