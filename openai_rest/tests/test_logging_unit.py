"""Unit coverage for structured logging utilities and helpers."""

from __future__ import annotations

import json
import logging

from openai_rest.base.log_support import JsonFormatter
from openai_rest.base.logging import (
    BASE_LOGGER_NAME,
    LogContext,
    configure_logger,
    get_logger,
    log_event,
)


def test_child_loggers_propagate_without_handlers():
    child = get_logger("openai_rest.unit")
    assert child.handlers == []  # nosec B101 - asserts are appropriate in unit tests
    assert child.propagate is True  # nosec B101
    base = logging.getLogger(BASE_LOGGER_NAME)
    assert base.propagate is False  # nosec B101
    assert len(base.handlers) >= 1  # nosec B101


def test_env_level_applies_to_base_logger(monkeypatch):
    base = logging.getLogger(BASE_LOGGER_NAME)
    previous = base.level
    monkeypatch.setenv("OPENAI_REST_LOG_LEVEL", "error")
    try:
        get_logger("openai_rest.unit.env")
        assert base.level == logging.ERROR  # nosec B101
    finally:
        base.setLevel(previous)


def test_log_event_drops_none_fields(debug_events):
    logger = logging.getLogger("openai_rest.unit.events")
    ctx = LogContext(method="GET", path="models", extra={"request_id": None, "attempt": 1})
    log_event(logger, "http.request", ctx, status=200, category=None)
    payload = debug_events.events()[-1]
    assert payload == {"event": "http.request", "method": "GET", "path": "models", "attempt": 1, "status": 200}  # nosec B101


def test_log_event_respects_level():
    logger = get_logger("openai_rest.unit.quiet")
    handler_records = []

    class _Collect(logging.Handler):
        def emit(self, record):
            handler_records.append(record)

    handler = _Collect()
    base = logging.getLogger(BASE_LOGGER_NAME)
    previous = base.level
    base.addHandler(handler)
    base.setLevel(logging.WARNING)
    try:
        log_event(logger, "http.request")
    finally:
        base.removeHandler(handler)
        base.setLevel(previous)
    assert handler_records == []  # nosec B101


def test_json_formatter_hoists_json_message() -> None:
    formatter = JsonFormatter()
    record = logging.LogRecord(
        name="openai_rest.http",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=0,
        msg=json.dumps({"event": "http.request", "path": "models"}),
        args=(),
        exc_info=None,
    )
    data = json.loads(formatter.format(record))
    assert data["event"] == "http.request"  # nosec B101
    assert data["path"] == "models"  # nosec B101
    assert data["level"] == "DEBUG"  # nosec B101
    assert "msg" not in data  # nosec B101


def test_json_formatter_keeps_plain_messages() -> None:
    formatter = JsonFormatter()
    record = logging.LogRecord("openai_rest", logging.WARNING, __file__, 0, "plain %s", ("text",), None)
    data = json.loads(formatter.format(record))
    assert data["msg"] == "plain text"  # nosec B101
    assert data["logger"] == "openai_rest"  # nosec B101


def test_configure_logger_file_handler(tmp_path):
    target = tmp_path / "logs" / "client.log"
    base = logging.getLogger(BASE_LOGGER_NAME)
    previous = base.level
    try:
        logger = configure_logger(level="INFO", file_path=str(target))
        logger.info("written to file")
        for h in logger.handlers:
            h.flush()
        line = target.read_text(encoding="utf-8").strip().splitlines()[-1]
        assert json.loads(line)["msg"] == "written to file"  # nosec B101
        configure_logger(file_path=str(target))
        managed = [h for h in logger.handlers if getattr(h, "_openai_rest_file_handler", False)]
        assert len(managed) == 1  # nosec B101
    finally:
        configure_logger(level=previous, file_path=None)
    assert not [h for h in base.handlers if getattr(h, "_openai_rest_file_handler", False)]  # nosec B101


def test_base_logger_setup_keeps_existing_handlers():
    base = logging.getLogger(BASE_LOGGER_NAME)
    saved_handlers = list(base.handlers)
    saved_flag = base.__dict__.get("_openai_rest_logger_initialized")
    previous = base.level
    custom = logging.NullHandler()
    try:
        base.__dict__.pop("_openai_rest_logger_initialized", None)
        base.addHandler(custom)
        get_logger("openai_rest.unit.handlers")
        assert custom in base.handlers  # nosec B101
        console = [h for h in base.handlers if getattr(h, "_openai_rest_console_handler", False)]
        assert len(console) == 1  # nosec B101
    finally:
        base.handlers[:] = saved_handlers
        base.setLevel(previous)
        if saved_flag is not None:
            base._openai_rest_logger_initialized = saved_flag
        else:
            base.__dict__.pop("_openai_rest_logger_initialized", None)
