from claimcache.codecs import DEFAULT_CODEC, ClaimCodec, CodecSettings
from claimcache.exceptions import (
    CacheConfigurationError,
    ClaimCacheError,
    ClaimDecodeError,
    ClaimEncodeError,
    MalformedExpirationClaimError,
)
from claimcache.policies import compute_expiration
from claimcache.schema import Claim, ClaimSet, ClaimValueType, claims_from_introspection
from claimcache.services import ClaimsCache, PutOutcome
from claimcache.settings import CacheSettings
from claimcache.stores import ClaimsStore, MemoryClaimsStore, RedisClaimsStore

__all__ = [
    "DEFAULT_CODEC",
    "CacheConfigurationError",
    "CacheSettings",
    "Claim",
    "ClaimCacheError",
    "ClaimCodec",
    "ClaimDecodeError",
    "ClaimEncodeError",
    "ClaimSet",
    "ClaimValueType",
    "ClaimsCache",
    "ClaimsStore",
    "CodecSettings",
    "MalformedExpirationClaimError",
    "MemoryClaimsStore",
    "PutOutcome",
    "RedisClaimsStore",
    "claims_from_introspection",
    "compute_expiration",
]
