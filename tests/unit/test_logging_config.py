from __future__ import annotations

import importlib
import logging
from contextlib import contextmanager

import pytest


@pytest.fixture
def logging_module(monkeypatch, tmp_path):
    from lsdetect import logging_config

    importlib.reload(logging_config)
    monkeypatch.setenv("LSDETECT_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("LOG_APPEND", raising=False)
    return logging_config


@contextmanager
def bare_root_logger():
    """Detach pytest's capture handlers so setup_logging sees an unconfigured root."""
    root = logging.getLogger()
    saved_handlers = root.handlers
    saved_level = root.level
    root.handlers = []
    try:
        yield root
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def _file_handlers(root: logging.Logger) -> list:
    return [h for h in root.handlers if isinstance(h, logging.FileHandler)]


def test_console_only_without_service_name(logging_module):
    with bare_root_logger() as root:
        logging_module.setup_logging()

        assert len(root.handlers) == 1
        assert not _file_handlers(root)
        assert root.handlers[0].level == logging.DEBUG
        assert root.level == logging.INFO


def test_user_friendly_console_is_quiet(logging_module):
    with bare_root_logger() as root:
        logging_module.setup_logging(user_friendly=True)

        handler = root.handlers[0]
        assert handler.level == logging.WARNING
        assert handler.formatter._fmt == "%(message)s"


def test_service_name_adds_file_handler(logging_module, tmp_path):
    log_path = tmp_path / "logs" / "detector.log"

    with bare_root_logger() as root:
        logging_module.setup_logging("detector")

        file_handlers = _file_handlers(root)
        assert len(file_handlers) == 1
        assert file_handlers[0].baseFilename == str(log_path)
        assert file_handlers[0].mode == "w"
        assert log_path.exists()


def test_log_append_mode(logging_module, monkeypatch):
    monkeypatch.setenv("LOG_APPEND", "1")

    with bare_root_logger() as root:
        logging_module.setup_logging("detector")

        assert _file_handlers(root)[0].mode == "a"


def test_second_call_is_skipped_when_configured(logging_module):
    with bare_root_logger() as root:
        logging_module.setup_logging("detector")
        handlers = list(root.handlers)

        logging_module.setup_logging("detector")

        assert root.handlers == handlers


def test_adding_service_reconfigures_console_only_setup(logging_module):
    with bare_root_logger() as root:
        logging_module.setup_logging()
        logging_module.setup_logging("detector")

        assert len(root.handlers) == 2
        assert len(_file_handlers(root)) == 1
