"""Kernel errors.

Hierarchy::

    FolioError
    ├── ConfigError                 settings could not be loaded or are invalid
    └── TransportError              an HTTP exchange failed (status or network)
        └── TransportTimeoutError   the exchange ran past its deadline

The filter engine raises none of these; the view reporter catches
``TransportError`` (and anything else) at flush time and only logs it.
"""

from __future__ import annotations

import json
from typing import Any

__all__ = ["ConfigError", "FolioError", "TransportError", "TransportTimeoutError"]


class FolioError(Exception):
    """Root error carrying a machine-readable ``code`` and a ``detail`` dict."""

    default_code: str = "folio_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.detail:
            payload["detail"] = self.detail
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code!r}, {self.message!r})"


class ConfigError(FolioError):
    default_code = "config_error"


class TransportError(FolioError):
    """The view report endpoint (or any HTTP peer) could not be reached or said no."""

    default_code = "transport_error"

    def __init__(
        self,
        method: str,
        url: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"{method} {url} failed", **kwargs)
        self.method = method
        self.url = url
        self.status_code = status_code


class TransportTimeoutError(TransportError):
    default_code = "transport_timeout"
