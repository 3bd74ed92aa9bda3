from __future__ import annotations

from contextlib import suppress
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Callable

import structlog

from claimcache.codecs import DEFAULT_CODEC, ClaimCodec
from claimcache.policies import EXPIRATION_CLAIM, cap_expiration, find_claim, token_expiry
from claimcache.schema import Claim, ClaimSet
from claimcache.settings import CacheSettings
from claimcache.stores import ClaimsStore

from ._cache_key import build_cache_key


class PutOutcome(str, Enum):
    """What `ClaimsCache.put` did with a claim set."""

    WRITTEN = "written"
    NOT_CACHEABLE = "not_cacheable"
    ALREADY_EXPIRED = "already_expired"
    NO_LIFETIME = "no_lifetime"

    @property
    def skipped(self) -> bool:
        return self is not PutOutcome.WRITTEN


class ClaimsCache:
    """
    Caches introspection claim sets keyed by the token they describe.

    Entries expire at the token's own `exp` or after `max_duration`,
    whichever comes first. Claim sets without `exp` and tokens that have
    already expired are skipped, never written.
    """

    def __init__(
        self,
        store: ClaimsStore,
        codec: ClaimCodec | None = None,
        settings: CacheSettings | None = None,
        clock: Callable[[], datetime] | None = None,
        logger: Any | None = None,
    ) -> None:
        self.store = store
        self.codec = codec or DEFAULT_CODEC
        self.settings = settings or CacheSettings()
        self.clock = clock or self._current_time
        self.logger = logger or structlog.get_logger(__name__)

    @staticmethod
    def _current_time() -> datetime:
        return datetime.now(timezone.utc)

    def _log(self, level: str, event: str, **fields: Any) -> None:
        with suppress(Exception):
            getattr(self.logger, level)(event, **fields)

    def get(self, token: str) -> list[Claim] | None:
        """
        Return the cached claims for `token`, or None on a cache miss.
        Raises ClaimDecodeError if the stored payload is corrupt.
        """
        payload = self.store.get(build_cache_key(token, self.settings))
        return self.codec.decode(payload)

    def put(
        self,
        token: str,
        claims: ClaimSet,
        max_duration: timedelta | None = None,
    ) -> PutOutcome:
        """
        Cache `claims` for `token` until its bounded expiration.
        Raises MalformedExpirationClaimError if the `exp` claim is not an epoch integer.
        """
        if max_duration is None:
            max_duration = self.settings.cache_duration

        exp_claim = find_claim(claims, EXPIRATION_CLAIM)
        if exp_claim is None:
            self._log("warning", "claims_not_cacheable", reason="no exp claim in introspection response")
            return PutOutcome.NOT_CACHEABLE

        now = self.clock()
        expiry = token_expiry(exp_claim)
        self._log("debug", "token_expiration", token_expires_at=expiry.isoformat())

        expires_at = cap_expiration(expiry, now, max_duration)
        if expires_at is None:
            return PutOutcome.ALREADY_EXPIRED
        if expires_at <= now:
            return PutOutcome.NO_LIFETIME

        payload = self.codec.encode(claims)
        self.store.set(build_cache_key(token, self.settings), payload, expires_at)
        self._log("debug", "cache_expiration_set", expires_at=expires_at.isoformat())
        return PutOutcome.WRITTEN

    def remove(self, token: str) -> None:
        """Drop any cached claims for `token`."""
        self.store.delete(build_cache_key(token, self.settings))
