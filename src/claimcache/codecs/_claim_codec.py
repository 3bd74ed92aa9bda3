from __future__ import annotations

import json
from typing import Any

from claimcache.exceptions import ClaimDecodeError, ClaimEncodeError
from claimcache.schema import VALUE_PARSERS, Claim, ClaimSet, ClaimValueType

from ._codec_settings import CodecSettings


class ClaimCodec:
    """
    Serializes claim sets into storage-agnostic bytes and back.

    Each claim is written as a `{"type", "value", "valueType"}` record inside
    a versioned JSON envelope. Values are checked against their declared type
    through `VALUE_PARSERS` in both directions.
    """

    def __init__(self, settings: CodecSettings | None = None) -> None:
        self.settings = settings or CodecSettings()

    def encode(self, claims: ClaimSet) -> bytes:
        records = [self._encode_claim(claim) for claim in claims]
        envelope = {"version": self.settings.version, "claims": records}
        return json.dumps(envelope, separators=(",", ":")).encode(self.settings.encoding)

    def decode(self, payload: bytes | None) -> list[Claim] | None:
        """
        Return the claim set stored in `payload`.

        `None` (nothing stored) decodes to `None`, which is not the same as an
        empty claim set. Anything unreadable raises `ClaimDecodeError`.
        """
        if payload is None:
            return None

        try:
            envelope = json.loads(payload.decode(self.settings.encoding))
        except (UnicodeDecodeError, ValueError, RecursionError) as error:
            raise ClaimDecodeError(f"Cached payload is not valid JSON: {error}") from error

        if not isinstance(envelope, dict):
            raise ClaimDecodeError("Cached payload is not a claim envelope")
        if envelope.get("version") != self.settings.version:
            raise ClaimDecodeError(
                f"Unsupported payload version {envelope.get('version')!r}, "
                f"expected {self.settings.version}"
            )
        records = envelope.get("claims")
        if not isinstance(records, list):
            raise ClaimDecodeError("Cached payload has no claim list")

        return [self._decode_claim(record) for record in records]

    @staticmethod
    def _encode_claim(claim: Claim) -> dict[str, str]:
        if not isinstance(claim.type, str) or not isinstance(claim.value, str):
            raise ClaimEncodeError(f"Claim {claim!r} must have text type and value")
        try:
            value_type = ClaimValueType(claim.value_type)
            VALUE_PARSERS[value_type](claim.value)
        except (ValueError, RecursionError) as error:
            raise ClaimEncodeError(
                f"Claim {claim.type!r} value does not match its type {claim.value_type!r}"
            ) from error
        return {"type": claim.type, "value": claim.value, "valueType": value_type.value}

    @staticmethod
    def _decode_claim(record: Any) -> Claim:
        if not isinstance(record, dict):
            raise ClaimDecodeError(f"Claim record {record!r} is not an object")

        claim_type = record.get("type")
        value = record.get("value")
        if not isinstance(claim_type, str) or not isinstance(value, str):
            raise ClaimDecodeError(f"Claim record {record!r} is missing a text type or value")

        try:
            value_type = ClaimValueType(record.get("valueType"))
            VALUE_PARSERS[value_type](value)
        except (ValueError, RecursionError) as error:
            raise ClaimDecodeError(
                f"Claim record {record!r} has an unknown or mismatched value type"
            ) from error
        return Claim(claim_type, value, value_type)


DEFAULT_CODEC = ClaimCodec()
