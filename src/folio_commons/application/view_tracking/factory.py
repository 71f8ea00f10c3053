"""View tracking – composition root for the reporter."""
from __future__ import annotations

from typing import Any

from folio_commons.adapters.http import HttpxHttpClient
from folio_commons.application.view_tracking.reporter import ViewReporter
from folio_commons.application.view_tracking.settings import ViewReportSettings
from folio_commons.application.view_tracking.transport import HttpViewTransport, TokenProvider
from folio_commons.config.settings import EnvSettingsLoader

__all__ = ["build_view_reporter"]


def build_view_reporter(
    settings: ViewReportSettings | None = None,
    *,
    token_provider: TokenProvider | None = None,
    client: HttpxHttpClient | None = None,
    logger: Any = None,
) -> ViewReporter:
    """Wire settings → HTTP client → transport → reporter.

    *settings* default to ``VIEW_REPORT_*`` environment variables. A client
    built here is closed by ``ViewReporter.aclose``; a passed-in *client* is not.
    """
    settings = settings or EnvSettingsLoader().load(ViewReportSettings)
    owns_client = client is None
    if client is None:
        client = HttpxHttpClient(base_url=settings.base_url, timeout=settings.timeout)
    transport = HttpViewTransport(
        client,
        url=settings.url,
        token_provider=token_provider,
        owns_client=owns_client,
    )
    return ViewReporter(transport, interval=settings.interval, logger=logger)
