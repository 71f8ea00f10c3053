"""Application view tracking – batched view reporting."""
from folio_commons.application.view_tracking.factory import build_view_reporter
from folio_commons.application.view_tracking.item import REPORT_INTERVAL, VIEW_API_URL, ViewItem, make_key
from folio_commons.application.view_tracking.reporter import ViewReporter
from folio_commons.application.view_tracking.settings import ViewIngestSettings, ViewReportSettings
from folio_commons.application.view_tracking.tracker import ViewTracker
from folio_commons.application.view_tracking.transport import HttpViewTransport, TokenProvider, ViewTransport

__all__ = [
    "HttpViewTransport",
    "REPORT_INTERVAL",
    "TokenProvider",
    "VIEW_API_URL",
    "ViewIngestSettings",
    "ViewItem",
    "ViewReportSettings",
    "ViewReporter",
    "ViewTracker",
    "ViewTransport",
    "build_view_reporter",
    "make_key",
]
