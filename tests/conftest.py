from datetime import datetime, timedelta, timezone

from dotenv import load_dotenv
from pytest import fixture

from claimcache.codecs import ClaimCodec, CodecSettings
from claimcache.services import ClaimsCache
from claimcache.settings import CacheSettings
from claimcache.stores import MemoryClaimsStore

# Load all env variables.
load_dotenv()

NOW = datetime.fromtimestamp(1000, timezone.utc)


@fixture
def clock() -> "FixedClock":
    """Controllable clock starting at epoch + 1000s."""
    return FixedClock(NOW)


@fixture(scope="session")
def codec() -> ClaimCodec:
    """Codec shared across the test session, built once."""
    return ClaimCodec(CodecSettings())


@fixture
def store(clock: "FixedClock") -> MemoryClaimsStore:
    return MemoryClaimsStore(clock=clock)


@fixture
def claims_cache(store: MemoryClaimsStore, codec: ClaimCodec, clock: "FixedClock") -> ClaimsCache:
    """Claims cache over an in-memory store with a one hour ceiling."""
    return ClaimsCache(
        store=store,
        codec=codec,
        settings=CacheSettings(cache_duration=timedelta(seconds=3600)),
        clock=clock,
    )


class FixedClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now += timedelta(seconds=seconds)
