from ._claim import (
    VALUE_PARSERS,
    Claim,
    ClaimSet,
    ClaimValueType,
    claims_from_introspection,
)

__all__ = [
    "VALUE_PARSERS",
    "Claim",
    "ClaimSet",
    "ClaimValueType",
    "claims_from_introspection",
]
