import json
import logging
import sys

import pytest

from todo_persistence.logging_config import JSONFormatter, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _own_handlers():
    return [h for h in logging.getLogger().handlers if h.get_name() == "todo_persistence"]


def test_json_format(capsys):
    setup_logging("DEBUG", "json")
    logging.getLogger("todo_persistence.db").debug("Saved todo id=%s", 7)

    line = capsys.readouterr().err.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["level"] == "DEBUG"
    assert record["logger"] == "todo_persistence.db"
    assert record["message"] == "Saved todo id=7"
    assert "timestamp" in record
    assert "exception" not in record


def test_json_format_includes_exception():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())
    data = json.loads(JSONFormatter().format(record))
    assert data["message"] == "failed"
    assert "RuntimeError: boom" in data["exception"]


def test_text_format(capsys):
    setup_logging("INFO", "text")
    logging.getLogger("todo_persistence.main").info("hello")
    assert "INFO todo_persistence.main: hello" in capsys.readouterr().err


def test_reconfigure_replaces_handler():
    setup_logging("INFO", "text")
    setup_logging("WARNING", "json")
    handlers = _own_handlers()
    assert len(handlers) == 1
    assert isinstance(handlers[0].formatter, JSONFormatter)
    assert logging.getLogger().level == logging.WARNING


def test_app_configures_logging_on_startup():
    from fastapi.testclient import TestClient

    from todo_persistence.main import app

    assert _own_handlers() == []
    with TestClient(app):
        assert len(_own_handlers()) == 1
