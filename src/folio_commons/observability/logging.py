"""Observability – structlog setup for the site's Python services.

Events are dotted snake case (``view_report.flush_failed``) with structured
keyword fields. ``configure_logging`` routes structlog through the stdlib
root logger and renders one JSON object per line, with auth headers,
cookies and visitor ids redacted.
"""
from __future__ import annotations

import logging
from typing import Any

import structlog

__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter", "configure_logging", "get_logger"]

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset(
    {"authorization", "cookie", "set-cookie", "token", "password", "visitor_id"}
)


class SensitiveFieldsFilter:
    """structlog processor replacing sensitive values with ``[REDACTED]`` at any depth."""

    REDACTED = "[REDACTED]"

    def __init__(self, fields: frozenset[str] | None = None) -> None:
        self._fields = frozenset(f.lower() for f in (fields or DEFAULT_SENSITIVE_FIELDS))

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for key, value in data.items():
            if key.lower() in self._fields:
                out[key] = self.REDACTED
            elif isinstance(value, dict):
                out[key] = self.redact(value)
            else:
                out[key] = value
        return out

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        return self.redact(event_dict)


def configure_logging(level: int = logging.INFO, *, sensitive_fields: frozenset[str] | None = None) -> None:
    """Install the JSON pipeline on the root logger; replaces existing root handlers."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            SensitiveFieldsFilter(sensitive_fields),
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(ensure_ascii=False),
            ],
        )
    )
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)


def get_logger(name: str | None = None, **bound: Any) -> Any:
    """structlog logger for *name*, with *bound* fields attached."""
    logger = structlog.get_logger(name)
    return logger.bind(**bound) if bound else logger
