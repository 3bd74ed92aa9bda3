from __future__ import annotations

from datetime import datetime
from typing import Protocol


class ClaimsStore(Protocol):
    """Byte-oriented key/value store with absolute per-entry expiration."""

    def get(self, key: str) -> bytes | None:
        """Return the stored payload, or None when absent or expired."""

    def set(self, key: str, value: bytes, expires_at: datetime) -> None:
        """Store `value` until the absolute time `expires_at`."""

    def delete(self, key: str) -> None:
        """Remove `key` if present."""
