from ._expiration_policy import (
    EPOCH,
    EXPIRATION_CLAIM,
    cap_expiration,
    compute_expiration,
    find_claim,
    token_expiry,
)

__all__ = [
    "EPOCH",
    "EXPIRATION_CLAIM",
    "cap_expiration",
    "compute_expiration",
    "find_claim",
    "token_expiry",
]
