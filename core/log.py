"""Logging setup for command-line use."""

import logging
import sys
from typing import Union

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

_handler = None

def initialize_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Send log records at or above a level to stderr.

    Calling again replaces the previously installed handler.

    Args:
        level: Level name or number

    Returns:
        logging.Logger: The configured root logger
    """
    global _handler

    if isinstance(level, str):
        level = level.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {level}")

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(_handler)
    root.setLevel(level)
    return root
