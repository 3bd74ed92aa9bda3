from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable


@dataclass
class _StoredPayload:
    value: bytes
    expires_at: datetime


class MemoryClaimsStore:
    """
    In-process store for tests and single-worker deployments.
    Expired entries are dropped when read and on every write.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._entries: dict[str, _StoredPayload] = {}
        self._clock = clock or self._current_time

    @staticmethod
    def _current_time() -> datetime:
        return datetime.now(timezone.utc)

    def _purge_expired(self, now: datetime) -> None:
        expired = [key for key, entry in self._entries.items() if now >= entry.expires_at]
        for key in expired:
            del self._entries[key]

    def get(self, key: str) -> bytes | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() >= entry.expires_at:
            self._entries.pop(key, None)
            return None
        return entry.value

    def set(self, key: str, value: bytes, expires_at: datetime) -> None:
        self._purge_expired(self._clock())
        self._entries[key] = _StoredPayload(value=value, expires_at=expires_at)

    def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    def __len__(self) -> int:
        return len(self._entries)
