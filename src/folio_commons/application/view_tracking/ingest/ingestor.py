"""View ingest – ViewIngestor, the pure core of ``POST /api/view/report``."""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from folio_commons.application.view_tracking.ingest.bot_filter import is_bot_user_agent
from folio_commons.application.view_tracking.ingest.client_ip import resolve_client_ip
from folio_commons.application.view_tracking.ingest.dedupe import build_dedupe_key
from folio_commons.application.view_tracking.ingest.items import normalize_view_item, parse_target_id
from folio_commons.application.view_tracking.ingest.store import InMemorySeenKeyStore, SeenKeyStore
from folio_commons.application.view_tracking.ingest.visitor import (
    VisitorIdentity,
    parse_cookie_header,
    resolve_visitor_identity,
)
from folio_commons.application.view_tracking.settings import ViewIngestSettings
from folio_commons.kernel.clock import Clock, SystemClock
from folio_commons.observability.logging import get_logger

__all__ = ["IngestReport", "ViewIngestor", "ViewOutcome"]


@dataclasses.dataclass(frozen=True)
class ViewOutcome:
    """Result for one reported item."""

    accepted: bool
    duplicate: bool
    type: str
    id: int
    reason: str | None = None
    ip: str | None = None
    ip_quality: str | None = None
    is_bot: bool = False
    counted: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {k: v for k, v in dataclasses.asdict(self).items() if v is not None}


@dataclasses.dataclass(frozen=True)
class IngestReport:
    results: list[ViewOutcome]
    visitor: VisitorIdentity | None = None

    @property
    def processed(self) -> int:
        return len(self.results)

    @property
    def inserted(self) -> int:
        return sum(1 for r in self.results if r.accepted)

    @property
    def duplicates(self) -> int:
        return sum(1 for r in self.results if r.duplicate)

    def to_dict(self) -> dict[str, Any]:
        """Response body for the report endpoint."""
        return {
            "success": True,
            "data": [r.to_dict() for r in self.results],
            "meta": {
                "processed": self.processed,
                "inserted": self.inserted,
                "duplicates": self.duplicates,
            },
        }


class ViewIngestor:
    """Validate, classify and dedupe a batch of reported views.

    Persisting view rows and bumping per-resource counters belong to the
    caller; ``ViewOutcome.counted`` says whether a counter should move.
    """

    def __init__(
        self,
        settings: ViewIngestSettings | None = None,
        *,
        store: SeenKeyStore | None = None,
        clock: Clock | None = None,
        logger: Any = None,
    ) -> None:
        self._settings = settings or ViewIngestSettings()
        self._store = store if store is not None else InMemorySeenKeyStore()
        self._clock = clock or SystemClock()
        self._log = logger or get_logger(__name__)

    async def ingest(
        self,
        items: Any,
        *,
        headers: Mapping[str, Any],
        cookies: Mapping[str, str] | None = None,
        remote_addr: str | None = None,
    ) -> IngestReport:
        if not isinstance(items, list) or not items:
            return IngestReport(results=[])

        lowered = {str(k).lower(): v for k, v in headers.items()}
        user_agent = str(lowered.get("user-agent") or "")
        if cookies is None:
            cookies = parse_cookie_header(lowered.get("cookie"))

        client_ip = resolve_client_ip(
            lowered,
            remote_addr=remote_addr,
            placeholder=self._settings.client_ip_placeholder,
        )
        if self._settings.log_client_ip_debug:
            self._log.info(
                "view_ingest.client_ip",
                storable_ip=client_ip.storable_ip,
                ip_quality=client_ip.ip_quality,
                **client_ip.debug,
            )

        visitor = resolve_visitor_identity(
            cookies,
            client_ip.storable_ip,
            user_agent,
            set_cookie=self._settings.set_visitor_cookie,
        )
        is_bot = is_bot_user_agent(user_agent)
        now = self._clock.now()

        results: list[ViewOutcome] = []
        for raw in items:
            view = normalize_view_item(raw)
            if view is None:
                fields = raw if isinstance(raw, dict) else {}
                results.append(
                    ViewOutcome(
                        accepted=False,
                        duplicate=False,
                        type=str(fields.get("type") or ""),
                        id=parse_target_id(fields.get("id") or 0),
                        reason="invalid_item",
                    )
                )
                continue

            key = build_dedupe_key(
                view.target_type,
                view.target_id,
                view.path,
                visitor.identity,
                now=now,
                window_minutes=self._settings.dedupe_window_minutes,
            )
            fresh = await self._store.add(key)
            results.append(
                ViewOutcome(
                    accepted=fresh,
                    duplicate=not fresh,
                    type=view.target_type,
                    id=view.target_id,
                    ip=client_ip.storable_ip,
                    ip_quality=client_ip.ip_quality,
                    is_bot=is_bot,
                    counted=fresh and (not is_bot or self._settings.count_bots),
                )
            )

        report = IngestReport(results=results, visitor=visitor)
        self._log.debug(
            "view_ingest.batch",
            processed=report.processed,
            inserted=report.inserted,
            duplicates=report.duplicates,
        )
        return report
