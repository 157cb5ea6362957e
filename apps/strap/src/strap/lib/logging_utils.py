"""Debug tracing for strap.

Tracing is off unless STRAP_DEBUG is set. When enabled, structured events go
to stderr as human-readable blocks:

    === command_lookup ===
    level: DEBUG
    logger: strap
    command: build
    found: True
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from ..constants import APP_NAME

_LOGGER = logging.getLogger(APP_NAME)

_PREFERRED_KEY_ORDER = ["ts", "level", "logger"]


def _to_log_safe(value: Any) -> Any:
    """Convert values to JSON-serializable, log-safe representations."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, dict):
        return {str(k): _to_log_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_to_log_safe(v) for v in value]
    return str(value)


class StructuredTextFormatter(logging.Formatter):
    """Format log records as `=== event ===` blocks of `key: value` lines."""

    @staticmethod
    def _format_value(value: Any) -> str:
        if isinstance(value, (list, dict)):
            return json.dumps(value, ensure_ascii=False)
        return str(value).replace("\n", "\\n")

    @staticmethod
    def _ordered_keys(data: dict[str, Any]) -> list[str]:
        preferred = [k for k in _PREFERRED_KEY_ORDER if data.get(k) is not None]
        remaining = sorted(
            k for k in data if k not in _PREFERRED_KEY_ORDER and data[k] is not None
        )
        return preferred + remaining

    def format(self, record: logging.LogRecord) -> str:
        base: dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
        }

        message = record.getMessage()
        parsed = None
        if message.startswith("{") and message.endswith("}"):
            try:
                parsed = json.loads(message)
            except json.JSONDecodeError:
                parsed = None

        if isinstance(parsed, dict):
            base.update(parsed)
        else:
            base["event"] = record.name
            base["message"] = message

        event_name = str(base.pop("event", record.name))
        lines = [f"=== {event_name} ==="]
        for key in self._ordered_keys(base):
            lines.append(f"{key}: {self._format_value(base[key])}")

        if record.exc_info:
            lines.append("traceback:")
            lines.append(self.formatException(record.exc_info))

        return "\n".join(lines)


def setup_logging(debug: bool, stream: TextIO | None = None) -> None:
    """Enable stderr tracing when debug is set, otherwise silence logging."""
    if debug:
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(StructuredTextFormatter())
        logging.disable(logging.NOTSET)
        logging.basicConfig(level=logging.DEBUG, handlers=[handler], force=True)
    else:
        logging.disable(logging.CRITICAL)


def log_event(event: str, level: int = logging.DEBUG, **fields: Any) -> None:
    """Emit a structured log event."""
    if not _LOGGER.isEnabledFor(level):
        return
    payload: dict[str, Any] = {
        "ts": datetime.now().astimezone().isoformat(),
        "event": event,
    }
    for key, value in fields.items():
        payload[key] = _to_log_safe(value)
    _LOGGER.log(level, json.dumps(payload, ensure_ascii=False, separators=(",", ":")))
