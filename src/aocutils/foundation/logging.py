from __future__ import annotations

import logging

LOGGER_NAME = "aocutils"


def configure_aocutils_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Send aocutils messages to stderr during an interactive session.

    Does nothing when the root or ``aocutils`` logger already has a handler. Called when the
    shell helpers build their dispatcher; library modules only create loggers.
    """
    aoc_logger = logging.getLogger(LOGGER_NAME)
    if logging.getLogger().handlers or aoc_logger.handlers:
        return aoc_logger
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("[%(name)s] %(message)s"))
    aoc_logger.addHandler(handler)
    aoc_logger.setLevel(level)
    aoc_logger.propagate = False
    return aoc_logger


__all__ = ["LOGGER_NAME", "configure_aocutils_logging"]
