"""Logging configuration helpers."""

import logging


def configure_logging(level: str = "INFO") -> None:
    """Configure the birthday_api logger with a single stream handler."""
    logger = logging.getLogger("birthday_api")
    logger.setLevel(getattr(logging, level, logging.INFO))
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
