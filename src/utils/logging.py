"""
Logging utilities for the Forever Box bot.
"""

import logging
import sys
from typing import Optional


_logger: Optional[logging.Logger] = None


def get_logger() -> logging.Logger:
    """Get the application logger, initializing if needed."""
    global _logger
    if _logger is None:
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s | %(levelname)-8s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S',
            stream=sys.stdout
        )
        _logger = logging.getLogger("foreverbox")
    return _logger


logger = get_logger()
