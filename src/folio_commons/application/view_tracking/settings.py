"""View tracking – settings for the reporter and the ingest side."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from folio_commons.application.view_tracking.item import VIEW_API_URL
from folio_commons.config.settings import Settings
from folio_commons.config.errors import InvalidSettingValueError

__all__ = ["ViewIngestSettings", "ViewReportSettings"]


@dataclasses.dataclass
class ViewReportSettings(Settings):
    """Client-side reporter settings, read from ``VIEW_REPORT_*``."""

    _prefix: ClassVar[str] = "VIEW_REPORT"

    url: str = VIEW_API_URL
    interval_ms: int = 3000
    base_url: str = ""
    timeout: float = 10.0

    def _validate(self) -> None:
        if self.interval_ms <= 0:
            raise InvalidSettingValueError("interval_ms", self.interval_ms, "must be positive")
        if self.timeout <= 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be positive")

    @property
    def interval(self) -> float:
        return self.interval_ms / 1000


@dataclasses.dataclass
class ViewIngestSettings(Settings):
    """Receiving-side settings, read from ``VIEW_*``."""

    _prefix: ClassVar[str] = "VIEW"

    dedupe_window_minutes: int = 30
    count_bots: bool = False
    set_visitor_cookie: bool = True
    client_ip_placeholder: str = "0.0.0.0"
    log_client_ip_debug: bool = False
