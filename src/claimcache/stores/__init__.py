from ._claims_store import ClaimsStore
from ._memory_claims_store import MemoryClaimsStore
from ._redis_claims_store import RedisClaimsStore

__all__ = ["ClaimsStore", "MemoryClaimsStore", "RedisClaimsStore"]
