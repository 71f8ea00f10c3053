"""Application pagination – Page."""
from __future__ import annotations

import dataclasses
import math
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class Page(Generic[T]):
    """Offset-based page of results with computed navigation properties."""

    items: list[T]
    total: int
    page: int
    size: int

    @property
    def total_pages(self) -> int:
        if self.size <= 0 or self.total <= 0:
            return 0
        return math.ceil(self.total / self.size)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @classmethod
    def of(cls, all_items: Sequence[T], *, page: int, size: int) -> "Page[T]":
        """Build a :class:`Page` by slicing *all_items* at 1-based *page*."""
        start = (page - 1) * size
        return cls(
            items=list(all_items[start:start + size]),
            total=len(all_items),
            page=page,
            size=size,
        )


__all__ = ["Page"]
