"""
Structured Logging Utilities

Attach entity context (job_id, company_handle, ...) to service log lines.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any


def format_context(context: Mapping[str, Any]) -> str:
    """Render context as ``key=value`` pairs, skipping unset values."""
    return " | ".join(f"{key}={value}" for key, value in context.items() if value is not None)


class StructuredLoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter that prefixes every message with entity context.

    Usage:
        logger = get_structured_logger(__name__, job_id=42)
        logger.info("Updated job")  # "[job_id=42] Updated job"
    """

    def __init__(self, logger: logging.Logger, **context: Any):
        super().__init__(logger, context)

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        context_str = format_context(self.extra)
        if context_str:
            msg = f"[{context_str}] {msg}"
        return msg, kwargs


def get_structured_logger(name: str, **context: Any) -> StructuredLoggerAdapter:
    """
    Get a structured logger with context.

    Args:
        name: Logger name (typically __name__)
        **context: Context fields (e.g., job_id=42, company_handle="acme")

    Returns:
        StructuredLoggerAdapter instance
    """
    return StructuredLoggerAdapter(logging.getLogger(name), **context)


def log_with_context(logger: logging.Logger, level: int, msg: str, **context: Any) -> None:
    """Log a single message with ad-hoc context fields."""
    context_str = format_context(context)
    logger.log(level, f"[{context_str}] {msg}" if context_str else msg)
