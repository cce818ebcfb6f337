"""Tests for logging configuration."""

import logging

from fitness_tracker.app_logging import LOGGER_NAME, configure_logging


def test_configure_logging_adds_single_handler() -> None:
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()

    configure_logging()
    configure_logging()

    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_configure_logging_applies_level() -> None:
    logger = logging.getLogger(LOGGER_NAME)

    configure_logging("debug")
    assert logger.level == logging.DEBUG

    configure_logging("WARNING")
    assert logger.level == logging.WARNING
    configure_logging()
