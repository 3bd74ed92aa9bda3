from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Mapping, Sequence


class ClaimValueType(str, Enum):
    """Tag describing how the text value of a claim should be read."""

    STRING = "string"
    INTEGER = "integer"
    DOUBLE = "double"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    JSON = "json"


def _parse_boolean(value: str) -> bool:
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValueError(f"{value!r} is not 'true' or 'false'")


VALUE_PARSERS: dict[ClaimValueType, Callable[[str], Any]] = {
    ClaimValueType.STRING: str,
    ClaimValueType.INTEGER: int,
    ClaimValueType.DOUBLE: float,
    ClaimValueType.BOOLEAN: _parse_boolean,
    ClaimValueType.DATETIME: datetime.fromisoformat,
    ClaimValueType.JSON: json.loads,
}


@dataclass(frozen=True)
class Claim:
    """
    A single fact about an authenticated subject.

    The value is always kept as text; `value_type` tells readers how to
    interpret it (see `typed_value`).

    Example:
    ```
        Claim("sub", "alice")
        Claim("exp", "1699999999", ClaimValueType.INTEGER)
        Claim.of("active", True)
    ```
    """

    type: str
    value: str
    value_type: ClaimValueType = ClaimValueType.STRING

    @classmethod
    def of(cls, claim_type: str, value: Any) -> Claim:
        """Build a claim from a JSON-compatible Python value."""
        # bool is a subclass of int, check it first.
        if isinstance(value, bool):
            return cls(claim_type, "true" if value else "false", ClaimValueType.BOOLEAN)
        if isinstance(value, int):
            return cls(claim_type, str(value), ClaimValueType.INTEGER)
        if isinstance(value, float):
            return cls(claim_type, repr(value), ClaimValueType.DOUBLE)
        if isinstance(value, datetime):
            return cls(claim_type, value.isoformat(), ClaimValueType.DATETIME)
        if isinstance(value, str):
            return cls(claim_type, value)
        return cls(
            claim_type,
            json.dumps(value, separators=(",", ":"), sort_keys=True),
            ClaimValueType.JSON,
        )

    @property
    def typed_value(self) -> Any:
        """Return the value converted according to `value_type`."""
        return VALUE_PARSERS[self.value_type](self.value)


ClaimSet = Sequence[Claim]


def claims_from_introspection(response: Mapping[str, Any]) -> list[Claim]:
    """
    Flatten a decoded introspection response into an ordered claim set.

    Array members become one claim each, objects become `json` claims and
    null values are dropped.
    """
    claims: list[Claim] = []
    for claim_type, value in response.items():
        if value is None:
            continue
        if isinstance(value, list):
            claims.extend(Claim.of(claim_type, item) for item in value if item is not None)
        else:
            claims.append(Claim.of(claim_type, value))
    return claims
