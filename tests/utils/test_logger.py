"""Tests for the application logger utility."""

from __future__ import annotations

import logging
import logging.handlers

from tasklist.utils.logger import get_logger, reset_logging, setup_logging


def test_get_logger_namespaces():
    assert get_logger().name == "tasklist"
    assert get_logger("tasklist").name == "tasklist"
    assert get_logger("tasklist.services.persistence").name == "tasklist.services.persistence"
    assert get_logger("persistence").name == "tasklist.persistence"


def test_setup_logging_creates_log_file(tmp_path):
    logger = setup_logging("DEBUG", log_dir=tmp_path)
    get_logger("test").debug("hello from test")
    for handler in logger.handlers:
        handler.flush()

    log_file = tmp_path / "tasklist.log"
    assert log_file.exists()
    content = log_file.read_text(encoding="utf-8")
    assert "hello from test" in content
    assert "[tasklist.test]" in content


def test_setup_logging_adds_handler_once(tmp_path):
    setup_logging("INFO", log_dir=tmp_path)
    logger = setup_logging("WARNING", log_dir=tmp_path)

    handlers = [
        h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)
    ]
    assert len(handlers) == 1
    assert logger.level == logging.WARNING
    assert logger.propagate is False


def test_reset_logging_detaches(tmp_path):
    setup_logging("INFO", log_dir=tmp_path)
    reset_logging()
    logger = get_logger()
    assert logger.handlers == []
    assert logger.propagate is True
