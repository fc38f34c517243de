"""Infrastructure helpers."""

from greenpath.infrastructure.logging import StructuredLogger, get_logger, reset_logger

__all__ = ["StructuredLogger", "get_logger", "reset_logger"]
