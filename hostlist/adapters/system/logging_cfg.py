# /hostlist/adapters/system/logging_cfg.py
from __future__ import annotations

import json
import logging
import sys
from typing import IO, Any


class JSONHandler(logging.StreamHandler):
    """One JSON object per record; structured fields come from ``extra={"extra": {...}}``."""

    def emit(self, record: logging.LogRecord) -> None:
        payload: dict[str, Any] = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        try:
            self.stream.write(json.dumps(payload, default=str) + "\n")
            self.flush()
        except Exception:
            self.handleError(record)


def configure_logger(level: int | str = logging.WARNING, stream: IO[str] | None = None) -> None:
    # stdout carries host names, so logs default to stderr
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(JSONHandler(stream=stream or sys.stderr))
