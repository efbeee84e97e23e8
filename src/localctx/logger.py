"""
Logging setup for localctx.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

LOG_FILE_NAME = "localctx.log"


def setup_logger(log_dir: str, level: int = logging.INFO) -> logging.Logger:
    """
    Configure the shared "localctx" logger with a rotating file handler.

    Terminal output goes through terminal_print, so nothing is attached to
    stdout here. Calling this more than once reuses the existing handler.

    Args:
        log_dir: Directory that receives localctx.log
        level: Logging level for the application logger

    Returns:
        The configured logger
    """
    logger = logging.getLogger("localctx")
    logger.setLevel(level)

    if logger.handlers:
        return logger

    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, LOG_FILE_NAME)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=5 * 1024 * 1024,  # 5 MB
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
    logger.propagate = False

    return logger
