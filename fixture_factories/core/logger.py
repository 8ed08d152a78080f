"""Structured logging configuration for the CLI and the pytest plugin."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

PACKAGE_LOGGER = "fixture_factories"


class JSONFormatter(logging.Formatter):
    """Render log records as JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        extra_keys = {"model", "path", "connection", "tables"}
        for key in extra_keys:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        return json.dumps(payload, default=str)


def _resolve_level(level: str | int) -> int | str:
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        return resolved if isinstance(resolved, int) else level.upper()
    return level


def configure_logging(level: str | int = "INFO") -> None:
    """Configure the root logger with JSON-formatted stderr output.

    Console output of the CLI goes to stdout, so log lines are kept on
    stderr to stay out of redirected listings.
    """

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONFormatter())
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(_resolve_level(level))


def set_package_level(level: str | int) -> None:
    """Adjust verbosity of the package loggers only."""
    logging.getLogger(PACKAGE_LOGGER).setLevel(_resolve_level(level))


__all__ = ["JSONFormatter", "configure_logging", "set_package_level"]
