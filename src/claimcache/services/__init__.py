from ._cache_key import build_cache_key
from ._claims_cache import ClaimsCache, PutOutcome

__all__ = ["ClaimsCache", "PutOutcome", "build_cache_key"]
