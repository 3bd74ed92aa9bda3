from ._claim_codec import DEFAULT_CODEC, ClaimCodec
from ._codec_settings import CodecSettings

__all__ = ["DEFAULT_CODEC", "ClaimCodec", "CodecSettings"]
