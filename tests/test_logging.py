"""Tests for :mod:`docinspect.utils.logging`."""

from __future__ import annotations

import logging

import pytest

from docinspect.config import LOG_LEVEL_ENV
from docinspect.utils import logging as logging_utils
from docinspect.utils.logging import configure_logging, get_logger


@pytest.fixture()
def package_logger(monkeypatch):
    logger = get_logger()
    handlers = list(logger.handlers)
    level = logger.level
    monkeypatch.setattr(logging_utils, "_CONFIGURED", False)
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_get_logger_nests_under_package() -> None:
    assert get_logger().name == "docinspect"
    assert get_logger("gui").name == "docinspect.gui"
    assert get_logger("docinspect.io").name == "docinspect.io"


def test_level_read_from_environment(package_logger, monkeypatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")

    logger = configure_logging()

    assert logger is package_logger
    assert logger.level == logging.DEBUG


def test_unknown_level_name_falls_back_to_warning(package_logger, monkeypatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, "nonsense")

    assert configure_logging().level == logging.WARNING


def test_explicit_level_overrides_environment(package_logger, monkeypatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")

    assert configure_logging(logging.ERROR).level == logging.ERROR


def test_handler_attached_once(package_logger) -> None:
    before = len(package_logger.handlers)

    configure_logging("INFO")
    configure_logging("DEBUG")

    assert len(package_logger.handlers) == before + 1
    assert package_logger.level == logging.DEBUG
