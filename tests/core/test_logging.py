from __future__ import annotations

import json
import logging
import sys

from pagi_external.core.logging import JsonFormatter, _logging_config


def _record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="pagi.llm",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_tolerates_missing_extra_fields() -> None:
    payload = json.loads(JsonFormatter().format(_record()))

    assert payload["message"] == "hello"
    assert payload["logger"] == "pagi.llm"
    assert payload["level"] == "INFO"
    assert "model" not in payload
    assert "status_code" not in payload
    assert "exception" not in payload


def test_formatter_includes_call_metadata() -> None:
    payload = json.loads(
        JsonFormatter().format(
            _record(model="openai/gpt-4o-mini", status_code=200, duration_ms=12.5, outcome="success")
        )
    )

    assert payload["model"] == "openai/gpt-4o-mini"
    assert payload["status_code"] == 200
    assert payload["duration_ms"] == 12.5
    assert payload["outcome"] == "success"


def test_formatter_renders_exception() -> None:
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = _record()
        record.exc_info = sys.exc_info()

    payload = json.loads(JsonFormatter().format(record))

    assert "RuntimeError: boom" in payload["exception"]


def test_logging_config_routes_root_to_json_stdout() -> None:
    config = _logging_config("DEBUG")

    assert config["root"] == {"level": "DEBUG", "handlers": ["stdout"]}
    assert config["formatters"]["json"]["()"] is JsonFormatter
    assert config["handlers"]["stdout"]["stream"] == "ext://sys.stdout"
