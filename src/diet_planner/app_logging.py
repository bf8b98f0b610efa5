"""Logging configuration helpers."""

import logging

APP_LOGGER_NAME = "diet_planner"
LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(
    logger_name: str = APP_LOGGER_NAME, level: int = logging.INFO
) -> logging.Logger:
    """Attach a single stderr handler to the named logger and return it.

    Repeated calls only update the level.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
