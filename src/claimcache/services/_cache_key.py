from __future__ import annotations

from cryptography.hazmat.primitives import hashes

from claimcache.settings import CacheSettings


def build_cache_key(token: str, settings: CacheSettings) -> str:
    """Derive the store key for `token`, hashing it when configured to."""
    if not settings.hash_keys:
        return f"{settings.key_prefix}{token}"
    digest = hashes.Hash(hashes.SHA256())
    digest.update(token.encode("utf-8"))
    return f"{settings.key_prefix}{digest.finalize().hex()}"
