# File: mdmp4rev/core/logging_setup.py

import logging
import sys

_LOGGER_NAME = "mdmp4rev"


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)


def _build_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s - %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Attaches a single stderr handler to the package logger.
    Safe to call repeatedly: previous handlers are replaced, not stacked.
    """
    logger = get_logger()
    logger.setLevel(level)
    logger.propagate = False
    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_build_formatter())
    logger.addHandler(handler)
    return logger
