from __future__ import annotations

import logging

import aocutils
from aocutils.foundation import version
from aocutils.foundation.logging import LOGGER_NAME, configure_aocutils_logging


def test_configure_logging_attaches_handler_once(monkeypatch):
    root = logging.getLogger()
    aoc_logger = logging.getLogger(LOGGER_NAME)
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(aoc_logger, "handlers", [])
    monkeypatch.setattr(aoc_logger, "propagate", True)
    monkeypatch.setattr(aoc_logger, "level", logging.NOTSET)

    configured = configure_aocutils_logging(level=logging.DEBUG)
    configure_aocutils_logging(level=logging.DEBUG)

    assert configured is aoc_logger
    assert len(aoc_logger.handlers) == 1
    assert aoc_logger.level == logging.DEBUG
    assert aoc_logger.propagate is False


def test_configure_logging_respects_existing_handlers(monkeypatch):
    root = logging.getLogger()
    aoc_logger = logging.getLogger(LOGGER_NAME)
    monkeypatch.setattr(root, "handlers", [logging.NullHandler()])
    monkeypatch.setattr(aoc_logger, "handlers", [])

    configure_aocutils_logging()

    assert aoc_logger.handlers == []


def test_version_is_a_string():
    assert isinstance(version.get_version(), str)
    assert aocutils.__version__ == version.get_version()
