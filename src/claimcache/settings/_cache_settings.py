from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from os import environ
from typing import Mapping

from claimcache.exceptions import CacheConfigurationError

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class CacheSettings:
    """
    Settings for caching introspection results.

    Attributes:
        cache_duration (timedelta): Upper bound on how long a claim set stays cached,
            regardless of the token's own expiry (default: 5 minutes).
        key_prefix (str): Prefix prepended to every cache key (default: "").
        hash_keys (bool): Store the SHA-256 of the token instead of the raw token
            as the cache key (default: False).

    Example:
    ```
        settings = CacheSettings(
            cache_duration=timedelta(minutes=10),
            key_prefix="introspection:",
            hash_keys=True,
        )
    ```
    """

    cache_duration: timedelta = timedelta(minutes=5)
    key_prefix: str = ""
    hash_keys: bool = False

    def __post_init__(self) -> None:
        if self.cache_duration < timedelta(0):
            raise CacheConfigurationError(
                f"cache_duration must not be negative, got {self.cache_duration}"
            )

    @classmethod
    def from_environ(cls, env: Mapping[str, str] | None = None) -> CacheSettings:
        """
        Example environment:
        - CLAIMS_CACHE_DURATION_SECONDS = "600"
        - CLAIMS_CACHE_KEY_PREFIX = "introspection:"
        - CLAIMS_CACHE_HASH_KEYS = "true"
        """
        env = environ if env is None else env
        defaults = cls()

        raw_duration = env.get("CLAIMS_CACHE_DURATION_SECONDS")
        if raw_duration is None:
            cache_duration = defaults.cache_duration
        else:
            try:
                cache_duration = timedelta(seconds=int(raw_duration))
            except ValueError as error:
                raise CacheConfigurationError(
                    f"CLAIMS_CACHE_DURATION_SECONDS is set to '{raw_duration}', "
                    "but it must be a whole number of seconds, for example:\n\n"
                    "    CLAIMS_CACHE_DURATION_SECONDS = '300'"
                ) from error

        raw_hash_keys = env.get("CLAIMS_CACHE_HASH_KEYS", "").strip().lower()
        if raw_hash_keys in _TRUE_VALUES:
            hash_keys = True
        elif raw_hash_keys in _FALSE_VALUES:
            hash_keys = False
        else:
            raise CacheConfigurationError(
                f"CLAIMS_CACHE_HASH_KEYS is set to '{raw_hash_keys}', "
                "but it must be a boolean flag, for example:\n\n"
                "    CLAIMS_CACHE_HASH_KEYS = 'true'"
            )

        return cls(
            cache_duration=cache_duration,
            key_prefix=env.get("CLAIMS_CACHE_KEY_PREFIX", defaults.key_prefix),
            hash_keys=hash_keys,
        )
