"""
Logging configuration for the application.
Provides consistent logging across all modules.
"""
import logging
import sys


class TextFormatter(logging.Formatter):
    """Text formatter for human-readable logs."""

    def __init__(self):
        super().__init__(
            fmt='%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )


def setup_logging(level: str = "INFO") -> None:
    """
    Setup application logging.
    Called once at application startup.

    Args:
        level: Log level name (e.g. "INFO", "DEBUG")
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers so repeated calls don't duplicate output
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(TextFormatter())
    root_logger.addHandler(console_handler)

    # Driver chatter is only useful when debugging
    logging.getLogger("pymongo").setLevel(max(log_level, logging.WARNING))
