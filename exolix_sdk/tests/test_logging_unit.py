"""Unit coverage for structured logging utilities and helpers."""

from __future__ import annotations

import io
import json
import logging
import sys

from exolix_sdk.base.log_support import JsonFormatter
from exolix_sdk.base.logging import LogContext, configure_logger, get_logger, log_event


def _capture(monkeypatch) -> io.StringIO:
    """Point the shared logger at a private stream for the duration of a test."""
    base_logger = get_logger()
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.setLevel(logging.DEBUG)
    monkeypatch.setattr(base_logger, "handlers", [handler])
    return stream


def test_get_logger_env_overrides_level(monkeypatch, capsys):
    monkeypatch.setenv("EXOLIX_LOG_LEVEL", "ERROR")
    logger = get_logger(name="exolix.test", json_mode=True, level=logging.DEBUG)
    # INFO log shouldn't appear
    logger.info("hello")
    out = capsys.readouterr().err
    assert out == ""  # nosec B101 - asserts are appropriate in unit tests
    # ERROR should be emitted as JSON
    logger.error("fail")
    out = capsys.readouterr().err
    data = json.loads(out.strip())
    assert data["level"] == "ERROR"  # nosec B101 - asserts are appropriate in unit tests
    assert data["logger"] == "exolix.test"  # nosec B101


def test_log_event_merges_context_and_drops_none(monkeypatch, capsys):
    monkeypatch.setenv("EXOLIX_LOG_LEVEL", "INFO")
    logger = get_logger(name="exolix.test2")
    ctx = LogContext(method="GET", url="https://api.test/v2/rate", request_id="r1", extra={"attempt": None})
    log_event(logger, "request.error", ctx, level=logging.WARNING, status=404, error_code=None, kind="structured")
    data = json.loads(capsys.readouterr().err.strip())
    assert data["event"] == "request.error"  # nosec B101
    assert data["method"] == "GET" and data["request_id"] == "r1"  # nosec B101
    assert data["status"] == 404  # nosec B101
    assert "error_code" not in data and "attempt" not in data  # nosec B101


def test_log_event_keep_none_and_level_gate(monkeypatch):
    stream = _capture(monkeypatch)
    logger = get_logger(name="exolix.test3")
    configure_logger(level="WARNING")
    log_event(logger, "request.start", level=logging.DEBUG)
    assert stream.getvalue() == ""  # nosec B101 - below the configured level

    log_event(logger, "request.error", level=logging.ERROR, keep_none=True, status=None)
    payload = json.loads(stream.getvalue().strip())
    assert payload == {"event": "request.error", "status": None}  # nosec B101


def test_json_formatter_hoists_json_message() -> None:
    """Ensure the formatter hoists JSON message keys without double escaping."""

    formatter = JsonFormatter()
    record = logging.LogRecord(
        name="exolix.test.json",
        level=logging.INFO,
        pathname=__file__,
        lineno=0,
        msg=json.dumps({"event": "request.cancelled", "reason": "request timed out"}),
        args=(),
        exc_info=None,
    )
    payload = json.loads(formatter.format(record))
    assert payload["event"] == "request.cancelled"  # nosec B101 - validates hoisting
    assert payload["reason"] == "request timed out"  # nosec B101
    assert payload["level"] == "INFO" and payload["logger"] == "exolix.test.json"  # nosec B101


def test_json_formatter_plain_message_and_exception() -> None:
    formatter = JsonFormatter()
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.getLogger("exolix.test.exc").makeRecord(
            "exolix.test.exc", logging.ERROR, __file__, 0, "plain %s", ("text",), sys.exc_info()
        )
    payload = json.loads(formatter.format(record))
    assert payload["msg"] == "plain text"  # nosec B101
    assert "ValueError: boom" in payload["exc"]  # nosec B101


def test_child_logger_uses_parent_handler_without_duplicates(monkeypatch) -> None:
    """Verify child loggers propagate to the base handler without duplicate lines."""

    stream = _capture(monkeypatch)
    logger = get_logger(name="exolix.test.child", json_mode=False)
    configure_logger(level=logging.INFO)
    logger.info("alpha")
    lines = [ln for ln in stream.getvalue().splitlines() if ln]
    assert lines == ["alpha"]  # nosec B101 - ensures single emission


def test_child_logger_respects_warning_level(monkeypatch) -> None:
    """Validate that INFO logs are suppressed when the base level is WARNING."""

    stream = _capture(monkeypatch)
    logger = get_logger(name="exolix.test.levels", json_mode=False)
    configure_logger(level=logging.WARNING)

    logger.info("hidden")
    assert stream.getvalue() == ""  # nosec B101 - INFO suppressed

    logger.error("visible")
    lines = [ln for ln in stream.getvalue().splitlines() if ln]
    assert lines == ["visible"]  # nosec B101 - ERROR allowed


def test_configure_logger_manages_file_handler(monkeypatch, tmp_path) -> None:
    _capture(monkeypatch)
    path = tmp_path / "logs" / "exolix.log"
    logger = configure_logger(level="INFO", file_path=str(path))
    configure_logger(level="INFO", file_path=str(path))  # same path is not attached twice
    file_handlers = [h for h in logger.handlers if getattr(h, "_exolix_file_handler", False)]
    assert len(file_handlers) == 1  # nosec B101

    log_event(logger, "request.success", status=200)
    file_handlers[0].flush()
    line = json.loads(path.read_text(encoding="utf-8").strip())
    assert line["event"] == "request.success"  # nosec B101

    configure_logger(file_path=None)
    assert not any(getattr(h, "_exolix_file_handler", False) for h in logger.handlers)  # nosec B101
