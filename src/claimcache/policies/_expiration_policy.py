from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

from claimcache.exceptions import MalformedExpirationClaimError
from claimcache.schema import Claim, ClaimSet

EXPIRATION_CLAIM = "exp"
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_EPOCH_SECONDS = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)


def find_claim(claims: ClaimSet, claim_type: str) -> Claim | None:
    """Return the first claim of `claim_type`, later duplicates are ignored."""
    return next((claim for claim in claims if claim.type == claim_type), None)


def token_expiry(claim: Claim) -> datetime:
    """Read an `exp` claim as an aware UTC datetime."""
    try:
        if not _EPOCH_SECONDS.fullmatch(claim.value):
            raise ValueError("exp must be ASCII decimal digits")
        seconds = int(claim.value)
        return EPOCH + timedelta(seconds=seconds)
    except (TypeError, ValueError, OverflowError) as error:
        raise MalformedExpirationClaimError(claim.value) from error


def cap_expiration(
    expires_at: datetime,
    now: datetime,
    max_duration: timedelta,
) -> datetime | None:
    """
    Bound a token expiry by the cache ceiling.

    Returns `None` once the token has expired, otherwise the earlier of the
    token's own expiry and `now + max_duration`.
    """
    if now.tzinfo is None:
        raise ValueError("now must be timezone-aware")
    if expires_at <= now:
        return None
    return min(expires_at, now + max_duration)


def compute_expiration(
    claims: ClaimSet,
    now: datetime,
    max_duration: timedelta,
) -> datetime | None:
    """
    Absolute expiration for caching `claims`, or `None` when they must not
    be cached (no `exp` claim, or the token already expired).

    Raises MalformedExpirationClaimError if `exp` is not an epoch integer.

    Example:
    ```
        now = datetime.fromtimestamp(1000, timezone.utc)
        compute_expiration([Claim("exp", "5000")], now, timedelta(seconds=3600))
        # -> datetime.fromtimestamp(4600, timezone.utc)
    ```
    """
    claim = find_claim(claims, EXPIRATION_CLAIM)
    if claim is None:
        return None
    return cap_expiration(token_expiry(claim), now, max_duration)
