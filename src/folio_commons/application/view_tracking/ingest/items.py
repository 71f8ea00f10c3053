"""View ingest – validation of reported items."""
from __future__ import annotations

import dataclasses
from typing import Any

__all__ = ["MAX_TYPE_LENGTH", "NormalizedView", "normalize_view_item", "parse_target_id"]

MAX_TYPE_LENGTH = 20


@dataclasses.dataclass(frozen=True)
class NormalizedView:
    target_type: str
    target_id: int
    path: str


def parse_target_id(raw: Any) -> int:
    """Lenient integer id: leading digits of strings, 0 when none."""
    if isinstance(raw, bool):
        return int(raw)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw)
    text = str(raw if raw is not None else 0).strip()
    digits = ""
    for i, ch in enumerate(text):
        if ch.isdigit() or (i == 0 and ch in "+-"):
            digits += ch
        else:
            break
    try:
        return int(digits)
    except ValueError:
        return 0


def normalize_view_item(raw: Any) -> NormalizedView | None:
    """Coerce a reported ``{type, id, path}``; ``None`` when ``type`` is missing.

    ``id`` is parsed leniently from its leading digits ("12abc" -> 12) and
    falls back to 0.
    """
    if not isinstance(raw, dict):
        return None
    type_ = str(raw.get("type") or "").strip()
    if not type_:
        return None
    return NormalizedView(
        target_type=type_[:MAX_TYPE_LENGTH],
        target_id=parse_target_id(raw.get("id", 0)),
        path=str(raw.get("path") or "").strip(),
    )
