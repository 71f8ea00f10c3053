"""Application search – FilterConfig and QueryState value objects."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Sequence

__all__ = ["FilterConfig", "QueryState"]


@dataclass(frozen=True)
class FilterConfig:
    """Static configuration of one :class:`FilteredData` engine.

    ``items_per_page`` below 1 is normalised to 1 rather than rejected, so a
    misconfigured listing still renders.
    """

    search_fields: Sequence[str] = ()
    items_per_page: int = 10
    initial_filters: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "search_fields", tuple(dict.fromkeys(self.search_fields)))
        object.__setattr__(self, "items_per_page", max(1, int(self.items_per_page)))
        object.__setattr__(self, "initial_filters", MappingProxyType(dict(self.initial_filters)))


@dataclass(frozen=True)
class QueryState:
    """Snapshot of the mutable query: search text, filters, 1-based page."""

    search_query: str = ""
    filters: Mapping[str, str] = field(default_factory=dict)
    current_page: int = 1

    def filter_key(self) -> tuple[tuple[str, str], ...]:
        """Hashable form of ``filters`` used for memoisation."""
        return tuple(sorted(self.filters.items()))
