from __future__ import annotations


class ClaimCacheError(Exception):
    """Base class for every error raised by claimcache."""


class MalformedExpirationClaimError(ClaimCacheError):
    """
    The `exp` claim of an introspection response is not an integer number
    of seconds since the Unix epoch.

    This points at a data-quality problem upstream, unlike a missing or
    already elapsed `exp`, which are ordinary cache skips.
    """

    def __init__(self, value: str) -> None:
        super().__init__(f"Expiration claim value {value!r} is not a valid epoch timestamp")
        self.value = value


class ClaimEncodeError(ClaimCacheError):
    """A claim could not be serialized into a cache payload."""


class ClaimDecodeError(ClaimCacheError):
    """A cached payload is corrupt, truncated, or of an unknown shape."""


class CacheConfigurationError(ClaimCacheError):
    """Cache settings are missing or invalid."""
