"""View ingest – visitor identity from the ``vid`` cookie or an IP/UA hash."""
from __future__ import annotations

import dataclasses
import hashlib
import uuid
from typing import Mapping
from urllib.parse import unquote

from folio_commons.application.view_tracking.ingest.client_ip import DEFAULT_PLACEHOLDER_IP

__all__ = [
    "VISITOR_COOKIE_MAX_AGE",
    "VISITOR_COOKIE_NAME",
    "VisitorIdentity",
    "build_fallback_visitor_hash",
    "parse_cookie_header",
    "resolve_visitor_identity",
]

VISITOR_COOKIE_NAME = "vid"
VISITOR_COOKIE_MAX_AGE = 365 * 24 * 60 * 60  # seconds


@dataclasses.dataclass(frozen=True)
class VisitorIdentity:
    """Who viewed: the cookie id when present, the IP/UA hash as a fallback.

    ``issue_cookie`` tells the HTTP layer to set ``vid`` on the response.
    """

    visitor_id: str | None
    fallback_hash: str
    issue_cookie: bool = False

    @property
    def identity(self) -> str:
        return self.visitor_id or self.fallback_hash


def build_fallback_visitor_hash(ip: str | None, user_agent: str | None) -> str:
    payload = f"{ip or DEFAULT_PLACEHOLDER_IP}|{user_agent or ''}"
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def parse_cookie_header(header: str | None) -> dict[str, str]:
    cookies: dict[str, str] = {}
    for segment in (header or "").split(";"):
        name, sep, value = segment.partition("=")
        name = name.strip()
        if sep and name:
            cookies[name] = unquote(value.strip())
    return cookies


def resolve_visitor_identity(
    cookies: Mapping[str, str],
    storable_ip: str | None,
    user_agent: str | None,
    *,
    set_cookie: bool = True,
) -> VisitorIdentity:
    existing = cookies.get(VISITOR_COOKIE_NAME) or None
    return VisitorIdentity(
        visitor_id=existing or str(uuid.uuid4()),
        fallback_hash=build_fallback_visitor_hash(storable_ip, user_agent),
        issue_cookie=existing is None and set_cookie,
    )
