"""Application search – per-key filter predicates.

A predicate decides whether one item satisfies one ``(key, value)`` filter.
The engine looks predicates up by filter key and falls back to strict
equality, so rules such as "a status label maps onto a boolean column" live
here instead of in the matching loop.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping

__all__ = [
    "DRAFT_LABELS",
    "FilterPredicate",
    "FilterPredicates",
    "PUBLISHED_LABELS",
    "default_predicates",
    "equals",
    "published_status_predicate",
]

FilterPredicate = Callable[[Mapping[str, Any], str, str], bool]

PUBLISHED_LABELS: tuple[str, ...] = ("已发布",)
DRAFT_LABELS: tuple[str, ...] = ("草稿",)


def equals(item: Mapping[str, Any], key: str, value: str) -> bool:
    """Strict equality, no type coercion (``1 != "1"``)."""
    return item.get(key) == value


def published_status_predicate(
    published_labels: Iterable[str] = PUBLISHED_LABELS,
    draft_labels: Iterable[str] = DRAFT_LABELS,
    field: str = "published",
) -> FilterPredicate:
    """Match status labels against a boolean *field* instead of the key itself.

    A value in *published_labels* requires ``item[field] is True``; a value in
    *draft_labels* requires ``item[field] is False``. Any other value falls back
    to :func:`equals` on the filter key.
    """
    published = frozenset(published_labels)
    drafts = frozenset(draft_labels)

    def _predicate(item: Mapping[str, Any], key: str, value: str) -> bool:
        if value in published:
            return item.get(field) is True
        if value in drafts:
            return item.get(field) is False
        return equals(item, key, value)

    return _predicate


class FilterPredicates:
    """Registry of filter predicates keyed by filter key."""

    def __init__(
        self,
        predicates: Mapping[str, FilterPredicate] | None = None,
        default: FilterPredicate = equals,
    ) -> None:
        self._predicates: dict[str, FilterPredicate] = dict(predicates or {})
        self._default = default

    def register(self, key: str, predicate: FilterPredicate) -> "FilterPredicates":
        self._predicates[key] = predicate
        return self

    def unregister(self, key: str) -> None:
        self._predicates.pop(key, None)

    def resolve(self, key: str) -> FilterPredicate:
        return self._predicates.get(key, self._default)

    def __contains__(self, key: object) -> bool:
        return key in self._predicates


def default_predicates() -> FilterPredicates:
    """Registry used when an engine is built without one: ``status`` label mapping."""
    return FilterPredicates({"status": published_status_predicate()})
