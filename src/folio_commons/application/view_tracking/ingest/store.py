"""View ingest – SeenKeyStore port and in-memory implementation."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = ["InMemorySeenKeyStore", "SeenKeyStore"]


@runtime_checkable
class SeenKeyStore(Protocol):
    """Port: remember dedupe keys. ``add`` is insert-if-absent."""

    async def add(self, key: str) -> bool:
        """Return ``True`` if *key* was new, ``False`` if already present."""
        ...


class InMemorySeenKeyStore:
    """Set-backed store for tests and single-process deployments."""

    def __init__(self) -> None:
        self._keys: set[str] = set()

    async def add(self, key: str) -> bool:
        if key in self._keys:
            return False
        self._keys.add(key)
        return True

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def __len__(self) -> int:
        return len(self._keys)
