"""Application search – FilteredData, an in-memory filter/search/pagination engine."""
from __future__ import annotations

import math
from dataclasses import replace
from types import MappingProxyType
from typing import Any, Callable, Generic, Mapping, Sequence, TypeVar

from folio_commons.application.pagination import Page
from folio_commons.application.search.predicates import FilterPredicates, default_predicates
from folio_commons.application.search.query import FilterConfig, QueryState

T = TypeVar("T")

__all__ = ["FilteredData", "as_mapping"]


def as_mapping(item: Any) -> Mapping[str, Any]:
    """Default ``key_fn``: dicts pass through, objects expose ``__dict__``."""
    return item if isinstance(item, Mapping) else vars(item)


def _text_matches(value: Any, needle: str) -> bool:
    if isinstance(value, str):
        return needle in value.lower()
    if isinstance(value, (list, tuple)):
        return any(isinstance(v, str) and needle in v.lower() for v in value)
    return False


class FilteredData(Generic[T]):
    """Derive a filtered, paginated view of a caller-supplied collection.

    The engine owns its :class:`QueryState` and changes it only through the
    setters below. ``filtered_data`` is memoised on (data, search text,
    filters); changing only the page never recomputes it.

    Typical usage::

        listing = FilteredData(blogs, FilterConfig(search_fields=["title", "tags"], items_per_page=9))
        listing.handle_search("python")
        listing.set_filter("category", "notes")
        for blog in listing.current_page_data:
            ...
    """

    def __init__(
        self,
        data: Sequence[T],
        config: FilterConfig,
        *,
        predicates: FilterPredicates | None = None,
        key_fn: Callable[[T], Mapping[str, Any]] | None = None,
    ) -> None:
        self._data: Sequence[T] = data
        self._config = config
        self._predicates = predicates if predicates is not None else default_predicates()
        self._key_fn: Callable[[T], Mapping[str, Any]] = key_fn or as_mapping
        self._state = QueryState(filters=dict(config.initial_filters))
        self._data_version = 0
        self._memo_key: tuple[Any, ...] | None = None
        self._memo: list[T] = []

    # ------------------------------------------------------------------
    # Read-only view
    # ------------------------------------------------------------------

    @property
    def config(self) -> FilterConfig:
        return self._config

    @property
    def state(self) -> QueryState:
        return self._state

    @property
    def search_query(self) -> str:
        return self._state.search_query

    @property
    def filters(self) -> Mapping[str, str]:
        return MappingProxyType(dict(self._state.filters))

    @property
    def current_page(self) -> int:
        return self._state.current_page

    @property
    def data(self) -> Sequence[T]:
        return self._data

    @property
    def filtered_data(self) -> list[T]:
        key = (self._data_version, self._state.search_query, self._state.filter_key())
        if key != self._memo_key:
            self._memo = [item for item in self._data if self._matches(item)]
            self._memo_key = key
        return list(self._memo)

    @property
    def total_pages(self) -> int:
        return math.ceil(len(self.filtered_data) / self._config.items_per_page)

    @property
    def current_page_data(self) -> list[T]:
        size = self._config.items_per_page
        start = (self._state.current_page - 1) * size
        return self.filtered_data[start:start + size]

    def page(self) -> Page[T]:
        """Current page as a :class:`Page` with navigation properties."""
        return Page.of(
            self.filtered_data,
            page=self._state.current_page,
            size=self._config.items_per_page,
        )

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def set_data(self, data: Sequence[T]) -> None:
        """Replace the source collection; search and filters are kept, the page is re-clamped."""
        self._data = data
        self._data_version += 1
        page = min(self._state.current_page, max(1, self.total_pages))
        if page != self._state.current_page:
            self._state = replace(self._state, current_page=page)

    def set_current_page(self, page: int) -> None:
        """Jump to *page*, clamped to ``[1, max(1, total_pages)]``."""
        page = min(max(1, int(page)), max(1, self.total_pages))
        self._state = replace(self._state, current_page=page)

    def set_search_query(self, query: str) -> None:
        """Echo the raw search text without moving the page."""
        self._state = replace(self._state, search_query=query)

    def handle_search(self, query: str) -> None:
        """Apply a search and go back to the first page."""
        self._state = replace(self._state, search_query=query, current_page=1)

    def set_filter(self, key: str, value: str) -> None:
        """Merge ``{key: value}`` into the filters and go back to the first page.

        An empty *value* keeps the key but constrains nothing.
        """
        filters = {**self._state.filters, key: value}
        self._state = replace(self._state, filters=filters, current_page=1)

    def clear_filters(self) -> None:
        self._state = QueryState()

    # ------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------

    def _matches(self, item: T) -> bool:
        fields = self._key_fn(item)
        return self._matches_search(fields) and self._matches_filters(fields)

    def _matches_search(self, fields: Mapping[str, Any]) -> bool:
        needle = self._state.search_query.lower()
        if not needle:
            return True
        return any(_text_matches(fields.get(name), needle) for name in self._config.search_fields)

    def _matches_filters(self, fields: Mapping[str, Any]) -> bool:
        for key, value in self._state.filters.items():
            if not value:
                continue
            if not self._predicates.resolve(key)(fields, key, value):
                return False
        return True
