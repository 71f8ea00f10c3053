"""View ingest – dedupe key over a sliding time bucket."""
from __future__ import annotations

import hashlib
from datetime import datetime

__all__ = ["DEFAULT_DEDUPE_WINDOW_MINUTES", "build_dedupe_key", "time_bucket"]

DEFAULT_DEDUPE_WINDOW_MINUTES = 30


def time_bucket(now: datetime, window_minutes: int = DEFAULT_DEDUPE_WINDOW_MINUTES) -> int:
    """Index of the window containing *now*; non-positive windows use the default."""
    if window_minutes <= 0:
        window_minutes = DEFAULT_DEDUPE_WINDOW_MINUTES
    bucket_ms = window_minutes * 60 * 1000
    return int(now.timestamp() * 1000) // bucket_ms


def build_dedupe_key(
    target_type: str | None,
    target_id: int | None,
    path: str | None,
    visitor_identity: str | None,
    *,
    now: datetime,
    window_minutes: int = DEFAULT_DEDUPE_WINDOW_MINUTES,
) -> str:
    """One view per visitor, target and path within a window."""
    payload = "|".join(
        [
            target_type or "unknown",
            str(int(target_id or 0)),
            path or "",
            visitor_identity or "unknown",
            str(time_bucket(now, window_minutes)),
        ]
    )
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()
