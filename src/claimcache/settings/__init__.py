from ._cache_settings import CacheSettings

__all__ = ["CacheSettings"]
