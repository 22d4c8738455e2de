"""
This module sets up console logging for the application.
"""
import logging

from pickup_schedule.config import LOG_LEVEL


def setup_logging(level: str = LOG_LEVEL) -> None:
    """
    Configures the root logger to write to the console.
    """
    # Get the root logger
    logger = logging.getLogger()
    logger.setLevel(level.upper())

    # Remove any existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level.upper())
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # requests logs every connection at DEBUG through urllib3
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    logging.info(f"Logging configured at level {level.upper()}.")
