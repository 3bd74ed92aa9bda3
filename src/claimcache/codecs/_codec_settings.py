from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CodecSettings:
    """
    Settings for the claim payload format.

    Build one instance at process start and share it; it is never mutated.

    Attributes:
        version (int): Envelope version written to, and required from, payloads (default: 1).
        encoding (str): Text encoding of the JSON payload (default: "utf-8").
    """

    version: int = 1
    encoding: str = "utf-8"
