"""Centralized logging configuration for the list-bench project."""

import logging
import sys
from typing import Optional


def setup_logging(
    level: int = logging.WARNING,
    format_string: Optional[str] = None,
    handler_type: str = "stream"
) -> logging.Logger:
    """
    Set up centralized logging configuration for the project.

    Records go to stderr: stdout is reserved for the results table.

    Args:
        level: Logging level (default: WARNING)
        format_string: Custom format string (optional)
        handler_type: Type of handler - "stream" or "none"

    Returns:
        Configured logger instance
    """
    if format_string is None:
        format_string = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

    logger = logging.getLogger("list_bench")

    # Avoid duplicate configuration; only our own handlers count, not root's
    if logger.handlers:
        logger.setLevel(level)
        return logger

    formatter = logging.Formatter(format_string)

    if handler_type == "stream":
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    # Set level and prevent propagation to root logger
    logger.setLevel(level)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (usually __name__)

    Returns:
        Logger instance
    """
    # Ensure base logging is set up
    if not logging.getLogger("list_bench").handlers:
        setup_logging()

    return logging.getLogger(f"list_bench.{name}")


def get_test_logger(name: str) -> logging.Logger:
    """Get a logger for tests with appropriate configuration."""
    logger = logging.getLogger(f"Tests.{name}")

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(message)s')
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False

    return logger
