"""Logging setup for the command line front end."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str | int = "WARNING", stream=None) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Calling it again replaces the handler instead of adding another one.

    Args:
        level: Log level name or number
        stream: Output stream (default stderr)

    Returns:
        The configured `vecrace` logger
    """
    if isinstance(level, str):
        level = level.upper()
    logger = logging.getLogger("vecrace")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(handler)
    return logger
