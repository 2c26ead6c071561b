"""Process-scoped expiring map.

Entries carry their own expiry; expired entries are dropped only when
``purge_expired`` runs (callers do this opportunistically on access).
State lives as long as the process and is not shared across replicas;
use the Redis store for multi-instance deployments.
"""

from datetime import datetime
from typing import Generic, TypeVar

V = TypeVar("V")


class ExpiringMap(Generic[V]):
    """Key -> (value, expires_at) map with lazy pruning."""

    def __init__(self) -> None:
        self._entries: dict[str, tuple[V, datetime]] = {}

    def set(self, key: str, value: V, expires_at: datetime) -> None:
        self._entries[key] = (value, expires_at)

    def pop(self, key: str) -> V | None:
        """Remove and return a value (single use). None if absent."""
        entry = self._entries.pop(key, None)
        return entry[0] if entry else None

    def purge_expired(self, now: datetime) -> int:
        """Drop every entry whose expiry is before ``now``. Returns count dropped."""
        expired = [k for k, (_, expires_at) in self._entries.items() if expires_at < now]
        for k in expired:
            del self._entries[k]
        return len(expired)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
