"""Structured JSON logging setup."""

import logging

from pythonjsonlogger import jsonlogger

logger = logging.getLogger(__name__)


def configure_logging(log_level: str = "INFO") -> None:
    """Route every logger through a single JSON console handler.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    level_str = (log_level or "INFO").upper()
    level = getattr(logging, level_str, logging.INFO)

    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(name)s %(levelname)s %(message)s",
        timestamp=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logger.debug(f"JSON logging configured at {level_str} level")
