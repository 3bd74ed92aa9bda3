from __future__ import annotations

from datetime import datetime
from os import environ

import redis


class RedisClaimsStore:
    """
    Keeps cached claim payloads in Redis, letting Redis expire each entry
    at its absolute expiration time.
    Use a dedicated Redis DB or a cache key prefix.
    """

    def __init__(
        self,
        redis_url: str | None = None,
        redis_client: redis.Redis | None = None,
    ) -> None:
        self._redis_client = redis_client or redis.from_url(  # type: ignore
            redis_url or environ.get("REDIS_URL", "redis://localhost:6379/0")
        )

    def get(self, key: str) -> bytes | None:
        value = self._redis_client.get(key)
        if value is None:
            return None
        if isinstance(value, str):
            return value.encode("utf-8")
        return bytes(value)

    def set(self, key: str, value: bytes, expires_at: datetime) -> None:
        # PXAT keeps millisecond precision of the absolute expiration.
        self._redis_client.set(key, value, pxat=int(expires_at.timestamp() * 1000))

    def delete(self, key: str) -> None:
        self._redis_client.delete(key)
