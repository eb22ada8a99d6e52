import logging

import pytest
from pythonjsonlogger.json import JsonFormatter
from rich.logging import RichHandler

from clparams.utils import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_cli(tmp_path):
    log_file = tmp_path / "clparams.log"
    setup_logging(mode="cli", log_filename=str(log_file))
    root = logging.getLogger()
    assert any(isinstance(handler, RichHandler) for handler in root.handlers)
    assert any(isinstance(handler, logging.FileHandler) for handler in root.handlers)

    logging.getLogger("clparams").debug("written to file")
    for handler in root.handlers:
        handler.flush()
    assert "written to file" in log_file.read_text(encoding="UTF-8")


def test_setup_logging_json_from_env(monkeypatch):
    monkeypatch.setenv("CLPARAMS_LOG_MODE", "json")
    setup_logging(log_filename=None)
    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JsonFormatter)


def test_setup_logging_json_file(tmp_path):
    log_file = tmp_path / "clparams.json.log"
    setup_logging(mode="cli", log_filename=str(log_file), json_log_to_file=True)
    file_handlers = [
        handler
        for handler in logging.getLogger().handlers
        if isinstance(handler, logging.FileHandler)
    ]
    assert isinstance(file_handlers[0].formatter, JsonFormatter)


def test_setup_logging_invalid_mode():
    with pytest.raises(ValueError):
        setup_logging(mode="xml", log_filename=None)
