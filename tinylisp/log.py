"""Logging configuration for the command line driver."""
import logging
import sys
from typing import Optional, TextIO


def setup_logging(level: str = "WARNING", stream: Optional[TextIO] = None) -> None:
    """
    Configure logging for a tinylisp session.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        stream: Where log records go; defaults to stderr so results on
            stdout stay clean.
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=stream or sys.stderr,
        force=True,
    )
    logging.getLogger(__name__).debug("Logging initialized at %s level", level.upper())
