"""JSON log output for applications embedding pagi_external.

Library loggers (`pagi.llm`, `pagi.config`, `pagi.integrations`, `pagi.bootstrap`)
attach call metadata as `extra` fields; this formatter lifts those fields into
the JSON line. Prompts, completions and credentials are never passed in.
"""

from __future__ import annotations

import json
import logging
import logging.config
import os
from datetime import UTC, datetime
from typing import Any

# Metadata keys the library may attach; others on the record are ignored.
METADATA_FIELDS = ("model", "status_code", "duration_ms", "outcome", "integration", "env_var")


class JsonFormatter(logging.Formatter):
    """One JSON object per record; metadata keys appear only when the record carries them."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            {key: record.__dict__[key] for key in METADATA_FIELDS if key in record.__dict__}
        )

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def _logging_config(level: str) -> dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"json": {"()": JsonFormatter}},
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "stream": "ext://sys.stdout",
            }
        },
        "root": {"level": level, "handlers": ["stdout"]},
    }


def setup_logging(level: str | None = None) -> None:
    """Route all logging to stdout as JSON. `level` falls back to $LOG_LEVEL, then INFO."""
    logging.config.dictConfig(_logging_config((level or os.getenv("LOG_LEVEL", "INFO")).upper()))
