import os

# Base directory for localctx runtime files (logs)
LOCALCTX_DIR = os.path.join(os.path.expanduser("~"), ".localctx")

# Default location of the local context store
DEFAULT_CONTEXT_DIR = os.path.join(os.path.expanduser("~"), ".localctx_context")
DEFAULT_CONTEXT_FILE_NAME = "context.md"
DEFAULT_IMAGES_DIR_NAME = "images"

HISTORY_FILE = os.path.join(os.path.expanduser("~"), ".localctx_history")


def get_env_path() -> str:
    """
    Get the path to the .env file used by localctx.

    A .env in the current working directory wins over the one in LOCALCTX_DIR.

    Returns:
        Path to the .env file
    """
    local_env = os.path.join(os.getcwd(), ".env")
    if os.path.exists(local_env):
        return local_env
    return os.path.join(LOCALCTX_DIR, ".env")


def format_size(num_bytes: int) -> str:
    """Human readable byte count"""
    if num_bytes < 1024:
        return f"{num_bytes} B"
    if num_bytes < 1024 * 1024:
        return f"{num_bytes / 1024:.1f} KB"
    return f"{num_bytes / (1024 * 1024):.1f} MB"
