"""
Root logger setup shared by the API and the CLI runner.
"""

import logging
import sys


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure the root logger with a single stdout handler."""
    logger = logging.getLogger()
    logger.setLevel(level.upper())

    # Drop existing handlers (avoid duplicates on re-init)
    if logger.handlers:
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    console_handler.setLevel(level.upper())
    logger.addHandler(console_handler)

    return logger
