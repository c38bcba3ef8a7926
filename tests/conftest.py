import logging
import os

import pytest

from orientql.settings import main as settings_main


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from ORIENTQL_ variables and the settings singleton."""
    for key in list(os.environ):
        if key.upper().startswith("ORIENTQL_"):
            monkeypatch.delenv(key)

    settings_main._settings = None
    yield
    settings_main._settings = None


@pytest.fixture
def restore_orientql_logger():
    """Undo setup_logging side effects on the package logger."""
    orientql_logger = logging.getLogger("orientql")
    handlers = list(orientql_logger.handlers)
    level = orientql_logger.level
    propagate = orientql_logger.propagate
    yield orientql_logger
    orientql_logger.handlers = handlers
    orientql_logger.setLevel(level)
    orientql_logger.propagate = propagate

