"""
Logging setup for the Flight Booking service.
"""

import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging to output to the console.

    Sets the root logger level and attaches one formatted stdout handler.
    Calling it again only updates the level.

    Args:
        level: Log level name (e.g. "INFO", "DEBUG").
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers:
        if getattr(handler, "stream", None) is sys.stdout:
            handler.setLevel(level)
            return

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)
