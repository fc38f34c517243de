"""Structured logging: one JSON object per line."""

from __future__ import annotations

import json
import sys
import time
import uuid
from typing import Any, Optional


class StructuredLogger:
    """Writes session events as JSON lines tagged with a trace id."""

    def __init__(self, trace_id: Optional[str] = None, output=None, *, enabled: bool = True):
        self.trace_id = trace_id or uuid.uuid4().hex[:8]
        self.enabled = enabled
        self._output = output

    def _emit(self, event: str, fields: dict[str, Any]) -> None:
        if not self.enabled:
            return
        record = {"event": event, "trace_id": self.trace_id, "timestamp": time.time(), **fields}
        stream = self._output or sys.stderr
        stream.write(json.dumps(record, ensure_ascii=False, default=str) + "\n")
        stream.flush()

    def action(self, name: str, **extra: Any) -> None:
        self._emit("action", {"action": name, **extra})

    def warning(self, source: str, message: str, **extra: Any) -> None:
        self._emit("warning", {"source": source, "message": message, **extra})

    def error(self, source: str, error: str, **extra: Any) -> None:
        self._emit("error", {"source": source, "error": error, **extra})

    def summary(self, **extra: Any) -> None:
        self._emit("summary", extra)


# Process-wide logger, silent until a caller opts in.
_logger: Optional[StructuredLogger] = None


def get_logger(trace_id: Optional[str] = None, *, enabled: Optional[bool] = None) -> StructuredLogger:
    global _logger
    replace = _logger is None or bool(trace_id and trace_id != _logger.trace_id)
    if replace:
        _logger = StructuredLogger(trace_id=trace_id, enabled=False)
    if enabled is not None:
        _logger.enabled = enabled
    return _logger


def reset_logger() -> None:
    global _logger
    _logger = None


__all__ = ["StructuredLogger", "get_logger", "reset_logger"]
