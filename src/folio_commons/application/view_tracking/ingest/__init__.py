"""View tracking ingest – receiving-side rules for reported views."""
from folio_commons.application.view_tracking.ingest.bot_filter import BOT_USER_AGENT_RE, is_bot_user_agent
from folio_commons.application.view_tracking.ingest.client_ip import (
    DEFAULT_PLACEHOLDER_IP,
    ClientIp,
    is_public_ip,
    normalize_ip,
    resolve_client_ip,
)
from folio_commons.application.view_tracking.ingest.dedupe import (
    DEFAULT_DEDUPE_WINDOW_MINUTES,
    build_dedupe_key,
    time_bucket,
)
from folio_commons.application.view_tracking.ingest.ingestor import IngestReport, ViewIngestor, ViewOutcome
from folio_commons.application.view_tracking.ingest.items import NormalizedView, normalize_view_item, parse_target_id
from folio_commons.application.view_tracking.ingest.store import InMemorySeenKeyStore, SeenKeyStore
from folio_commons.application.view_tracking.ingest.visitor import (
    VISITOR_COOKIE_MAX_AGE,
    VISITOR_COOKIE_NAME,
    VisitorIdentity,
    build_fallback_visitor_hash,
    parse_cookie_header,
    resolve_visitor_identity,
)

__all__ = [
    "BOT_USER_AGENT_RE",
    "DEFAULT_DEDUPE_WINDOW_MINUTES",
    "DEFAULT_PLACEHOLDER_IP",
    "VISITOR_COOKIE_MAX_AGE",
    "VISITOR_COOKIE_NAME",
    "ClientIp",
    "InMemorySeenKeyStore",
    "IngestReport",
    "NormalizedView",
    "SeenKeyStore",
    "ViewIngestor",
    "ViewOutcome",
    "VisitorIdentity",
    "build_dedupe_key",
    "build_fallback_visitor_hash",
    "is_bot_user_agent",
    "is_public_ip",
    "normalize_ip",
    "normalize_view_item",
    "parse_target_id",
    "parse_cookie_header",
    "resolve_client_ip",
    "resolve_visitor_identity",
    "time_bucket",
]
