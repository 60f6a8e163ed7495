"""Unit coverage for structured logging utilities and helpers."""

from __future__ import annotations

import io
import json
import logging

from explorer_network.base.logging import (
    LogContext,
    configure_logger,
    get_logger,
    normalized_log_event,
)
from explorer_network.base.log_support import JsonFormatter


def test_get_logger_env_overrides_level(monkeypatch, capsys):
    monkeypatch.setenv("EXPLORER_LOG_LEVEL", "ERROR")
    logger = get_logger(name="explorer_network.test", json_mode=True, level=logging.DEBUG)
    logger.info("hello")
    assert capsys.readouterr().err == ""  # nosec B101 - asserts are appropriate in unit tests
    logger.error("fail")
    data = json.loads(capsys.readouterr().err.strip())
    assert data["level"] == "ERROR"  # nosec B101


def test_normalized_log_event_hoists_payload(monkeypatch, capsys):
    monkeypatch.delenv("EXPLORER_LOG_LEVEL", raising=False)
    logger = get_logger(name="explorer_network.test2", json_mode=True)
    ctx = LogContext(service="main", endpoint="comic", request_id="r1")
    normalized_log_event(logger, "fetch.completed", ctx, phase="fetch", status=200, detail=None)

    data = json.loads(capsys.readouterr().err.strip())
    assert data["event"] == "fetch.completed"  # nosec B101
    assert data["structured"] is True and data["phase"] == "fetch"  # nosec B101
    assert data["service"] == "main" and data["request_id"] == "r1"  # nosec B101
    assert data["status"] == 200  # nosec B101
    assert "error_code" not in data and "detail" not in data  # nosec B101
    assert "msg" not in data  # nosec B101 - raw JSON string is not duplicated


def test_json_formatter_keeps_plain_messages() -> None:
    record = logging.LogRecord(
        name="explorer_network.test.json",
        level=logging.INFO,
        pathname=__file__,
        lineno=0,
        msg="plain %s",
        args=("text",),
        exc_info=None,
    )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "plain text"  # nosec B101
    assert payload["logger"] == "explorer_network.test.json"  # nosec B101


def test_child_logger_respects_warning_level(monkeypatch) -> None:
    monkeypatch.delenv("EXPLORER_LOG_LEVEL", raising=False)
    logger = get_logger(name="explorer_network.test.levels", json_mode=False)
    base_logger = logging.getLogger("explorer_network")
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(handler, "_explorer_console_handler", True)
    base_logger.handlers[:] = [handler]

    configure_logger(level=logging.WARNING)
    stream.truncate(0)
    stream.seek(0)

    logger.info("hidden")
    logger.error("visible")
    handler.flush()
    lines = [ln for ln in stream.getvalue().splitlines() if ln]
    assert lines == ["visible"]  # nosec B101


def test_configure_logger_file_handler(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("EXPLORER_LOG_LEVEL", raising=False)
    path = tmp_path / "logs" / "network.log"
    logger = configure_logger(level="INFO", file_path=str(path))
    try:
        get_logger("explorer_network.test.file").warning("to file")
        for h in logger.handlers:
            h.flush()
        assert "to file" in path.read_text(encoding="utf-8")  # nosec B101
    finally:
        configure_logger(file_path=None)
    assert not any(getattr(h, "_explorer_file_handler", False) for h in logger.handlers)  # nosec B101
