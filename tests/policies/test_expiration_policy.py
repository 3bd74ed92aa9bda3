from datetime import datetime, timedelta, timezone

from pytest import mark, raises

from claimcache.exceptions import MalformedExpirationClaimError
from claimcache.policies import EPOCH, cap_expiration, compute_expiration, find_claim, token_expiry
from claimcache.schema import Claim

NOW = datetime.fromtimestamp(1000, timezone.utc)
HOUR = timedelta(seconds=3600)


def at(seconds: int) -> datetime:
    return datetime.fromtimestamp(seconds, timezone.utc)


def test_ceiling_caps_far_future_expiry() -> None:
    """exp=5000 with a one hour ceiling from t=1000 expires at 4600."""
    assert compute_expiration([Claim("exp", "5000")], NOW, HOUR) == at(4600)


def test_token_expiry_wins_when_sooner_than_ceiling() -> None:
    assert compute_expiration([Claim("exp", "2000")], NOW, HOUR) == at(2000)


def test_expiry_equal_to_ceiling() -> None:
    assert compute_expiration([Claim("exp", "4600")], NOW, HOUR) == at(4600)


@mark.parametrize("exp", ["500", "1000", "0", "-20"])
def test_expired_token_is_not_cacheable(exp: str) -> None:
    """Tokens expiring at or before now get no expiration."""
    assert compute_expiration([Claim("exp", exp)], NOW, HOUR) is None


def test_missing_exp_is_not_cacheable() -> None:
    assert compute_expiration([Claim("sub", "alice")], NOW, HOUR) is None


def test_empty_claim_set_is_not_cacheable() -> None:
    assert compute_expiration([], NOW, HOUR) is None


def test_zero_max_duration_expires_now() -> None:
    """A zero ceiling still yields a value, equal to now."""
    assert compute_expiration([Claim("exp", "5000")], NOW, timedelta(0)) == NOW


def test_only_first_exp_claim_is_used() -> None:
    claims = [Claim("exp", "2000"), Claim("exp", "500"), Claim("exp", "garbage")]

    assert find_claim(claims, "exp") is claims[0]
    assert compute_expiration(claims, NOW, HOUR) == at(2000)


@mark.parametrize(
    "value",
    ["", "soon", "1.5", "0x10", "99999999999999999999999", "5_000", "\u0665\u0660\u0660\u0660"],
)
def test_malformed_exp_raises(value: str) -> None:
    """Unparseable exp is an error, not a skip."""
    with raises(MalformedExpirationClaimError) as error:
        compute_expiration([Claim("exp", value)], NOW, HOUR)

    assert error.value.value == value


def test_token_expiry_is_utc() -> None:
    expiry = token_expiry(Claim("exp", "1699999999"))

    assert expiry == EPOCH + timedelta(seconds=1699999999)
    assert expiry.tzinfo is not None


def test_cap_expiration_requires_aware_now() -> None:
    with raises(ValueError):
        cap_expiration(at(5000), datetime(1970, 1, 1, 0, 16, 40), HOUR)


def test_non_utc_now_is_normalised() -> None:
    """Comparisons are made on absolute instants, not wall-clock fields."""
    plus_two = timezone(timedelta(hours=2))
    now = NOW.astimezone(plus_two)

    assert compute_expiration([Claim("exp", "5000")], now, HOUR) == at(4600)


def test_signed_and_padded_exp_is_accepted() -> None:
    assert token_expiry(Claim("exp", " +5000 ")) == at(5000)
