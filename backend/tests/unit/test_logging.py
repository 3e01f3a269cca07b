# backend/tests/unit/test_logging.py

import logging
import pytest
import structlog

from sanctuary.config.settings import settings
from sanctuary.utils.logging import setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()


@pytest.mark.parametrize("environment, renderer", [
    ("development", structlog.dev.ConsoleRenderer),
    ("production", structlog.processors.JSONRenderer),
])
def test_setup_logging_installs_structlog_formatter(mocker, root_logger, environment, renderer):
    mocker.patch.object(settings, "environment", environment)
    mocker.patch.object(settings, "log_level", "DEBUG")
    setup_logging()

    handler = root_logger.handlers[-1]
    assert isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)
    assert isinstance(handler.formatter.processors[-1], renderer)
    assert root_logger.level == logging.DEBUG


def test_explicit_arguments_override_settings(mocker, root_logger):
    mocker.patch.object(settings, "environment", "development")
    setup_logging(level="warning", json_logs=True)

    handler = root_logger.handlers[-1]
    assert isinstance(handler.formatter.processors[-1], structlog.processors.JSONRenderer)
    assert root_logger.level == logging.WARNING
