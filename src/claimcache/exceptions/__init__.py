from ._errors import (
    CacheConfigurationError,
    ClaimCacheError,
    ClaimDecodeError,
    ClaimEncodeError,
    MalformedExpirationClaimError,
)

__all__ = [
    "CacheConfigurationError",
    "ClaimCacheError",
    "ClaimDecodeError",
    "ClaimEncodeError",
    "MalformedExpirationClaimError",
]
