"""
================================================================================
Storefront Tools Common Utilities
================================================================================

Logging setup shared by the pytest session and the test runner.

Exports:
    - init_logger: Initialize loguru with standard settings
    - ensure_directory: Create a directory if missing

Environment:
    - LOG_LEVEL: Console and file log level (default INFO)
    - LOG_FILE:  Optional log file path, rotated at 10 MB

Usage:
    from storefront_tools.common import init_logger

    init_logger()
    init_logger(level="DEBUG", log_file="reports/logs/run.log")

================================================================================
"""

import os
import sys
from typing import Optional

from loguru import logger


DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# ============================================================
# Logging Setup
# ============================================================

_logger_initialized = False


def init_logger(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    log_file: Optional[str] = None,
) -> None:
    """
    Initializes the loguru logger with standard settings.

    Subsequent calls are no-ops.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to LOG_LEVEL.
        format_string: Log format string. Uses default if not provided.
        log_file: Optional file path to write logs to. Defaults to LOG_FILE.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    # Remove default handler
    logger.remove()

    level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    format_string = format_string or DEFAULT_FORMAT

    logger.add(
        sys.stderr,
        format=format_string,
        level=level,
        colorize=True,
    )

    log_file = log_file or os.getenv("LOG_FILE")
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            ensure_directory(log_dir)

        logger.add(
            log_file,
            format=format_string,
            level=level,
            rotation="10 MB",
            retention="7 days",
        )

    _logger_initialized = True
    logger.debug("Logger initialized successfully")


# ============================================================
# Common Utilities
# ============================================================

def ensure_directory(path: str) -> str:
    """
    Ensures a directory exists, creating it if necessary.

    Returns:
        The path (for chaining)
    """
    os.makedirs(path, exist_ok=True)
    return path


__all__ = [
    "ensure_directory",
    "init_logger",
]
