"""Shared fixtures for jsonpb_generator tests."""

from __future__ import annotations

import logging

import pytest

from jsonpb_generator.config import ENV_DUMP, ENV_GOFMT, ENV_LOG_LEVEL

from .helpers import RecordingFormatter


@pytest.fixture
def formatter() -> RecordingFormatter:
    return RecordingFormatter()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's JSONPB_* settings out of the tests."""
    for key in (ENV_GOFMT, ENV_LOG_LEVEL, ENV_DUMP):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def restore_plugin_logger():
    """Undo configure_logging() so caplog keeps seeing plugin records."""
    logger = logging.getLogger("jsonpb_generator")
    saved = (logger.handlers[:], logger.level, logger.propagate)
    yield
    logger.handlers[:], logger.level, logger.propagate = saved
