"""Application search – distinct values for filter dropdowns."""
from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, TypeVar

from folio_commons.application.search.engine import as_mapping

T = TypeVar("T")

__all__ = ["unique_values"]


def unique_values(
    data: Iterable[T],
    key: str,
    *,
    key_fn: Callable[[T], Mapping[str, Any]] | None = None,
) -> list[str]:
    """Distinct string values of *key*, in first-seen order; non-strings are skipped."""
    to_fields = key_fn or as_mapping
    seen: dict[str, None] = {}
    for item in data:
        value = to_fields(item).get(key)
        if isinstance(value, str):
            seen.setdefault(value, None)
    return list(seen)
