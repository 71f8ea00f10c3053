"""Observability – structlog configuration and logger access."""

from folio_commons.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    SensitiveFieldsFilter,
    configure_logging,
    get_logger,
)

__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter", "configure_logging", "get_logger"]
