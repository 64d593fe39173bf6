"""Fixtures shared by the logging tests."""

import logging

import pytest

from app.config import Settings, get_settings
from app.core.logging.builder import setup_logging, stop_queue_logging


@pytest.fixture
def make_log_settings():
    """
    Return a factory building real Settings with logging overrides,
    e.g. `make_log_settings(LOG_TO_STDOUT=False, LOG_DIR=tmp_path)`.
    """

    def _build(**overrides) -> Settings:
        return Settings(**overrides)

    return _build


@pytest.fixture(autouse=True)
def restore_logging(request):
    """Put the session's logging configuration back after each test."""
    yield

    stop_queue_logging()
    setup_logging(get_settings())

    caplog_plugin = request.config.pluginmanager.getplugin("logging-plugin")
    handler = getattr(caplog_plugin, "caplog_handler", None)
    if handler is not None:
        logging.getLogger().addHandler(handler)
