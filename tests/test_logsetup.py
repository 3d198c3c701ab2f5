"""Tests for llmdoc.lib.logsetup module."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from llmdoc.lib.logsetup import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestSetupLogging:
    """Test setup_logging function."""

    def test_console_only(self):
        setup_logging(console_level="warning")
        root = logging.getLogger()

        assert len(root.handlers) == 1
        assert root.handlers[0].level == logging.WARNING
        assert root.level == logging.WARNING

    def test_verbose_forces_debug(self):
        setup_logging(console_level="error", verbose=True)
        assert logging.getLogger().handlers[0].level == logging.DEBUG

    def test_rotating_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "llmdoc.log"
        setup_logging(console_level="info", log_file=log_file, file_level="debug")
        root = logging.getLogger()

        file_handlers = [h for h in root.handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].maxBytes == 20 * 1024 * 1024
        assert file_handlers[0].backupCount == 5
        assert root.level == logging.DEBUG

        logging.getLogger("llmdoc.test").debug("written to file")
        file_handlers[0].flush()
        assert "written to file" in log_file.read_text()

    def test_repeat_calls_do_not_duplicate(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger().handlers) == 1
