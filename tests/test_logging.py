"""
Unit tests: logging setup
"""
import logging
from pathlib import Path

import pytest

from suggestion_portal.config import PortalSettings
from suggestion_portal.infra.logging import LoggerManager, configure_from_settings, get_logger


@pytest.fixture
def clean_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    LoggerManager.reset()
    yield root
    # only what LoggerManager adds; pytest swaps its own handlers per phase
    for h in list(root.handlers):
        if h not in handlers and type(h) in (logging.FileHandler, logging.StreamHandler):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    LoggerManager.reset()


def test_same_logger_is_returned(clean_logging):
    assert get_logger("suggestion_portal.x") is get_logger("suggestion_portal.x")


def test_settings_apply_level_and_file_once(clean_logging, tmp_path):
    log_file = tmp_path / "logs" / "portal.log"
    settings = PortalSettings(log_level="DEBUG", log_file=str(log_file))

    configure_from_settings(settings)
    configure_from_settings(settings)

    file_handlers = [
        h for h in clean_logging.handlers
        if isinstance(h, logging.FileHandler) and Path(h.baseFilename) == log_file
    ]
    assert len(file_handlers) == 1
    assert clean_logging.level == logging.DEBUG

    get_logger("suggestion_portal.test").info("hello")
    file_handlers[0].flush()
    assert "hello" in log_file.read_text(encoding="utf-8")
