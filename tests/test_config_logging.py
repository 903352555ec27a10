"""Tests for process logging configuration."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from src.config.logging import HELPERS_LOGGER, configure_logging


@pytest.fixture(autouse=True)
def _restore_helpers_level() -> Iterator[None]:
    helpers = logging.getLogger(HELPERS_LOGGER)
    previous = helpers.level
    yield
    helpers.setLevel(previous)


def test_helper_loggers_follow_requested_level() -> None:
    configure_logging("debug")

    assert logging.getLogger(HELPERS_LOGGER).level == logging.DEBUG
    assert logging.getLogger("src.web.query").isEnabledFor(logging.DEBUG)


def test_level_falls_back_to_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "error")
    configure_logging()

    assert logging.getLogger(HELPERS_LOGGER).level == logging.ERROR
    assert not logging.getLogger("src.forms.validator").isEnabledFor(logging.WARNING)
