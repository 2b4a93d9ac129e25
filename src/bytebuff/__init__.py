"""
bytebuff - byte buffers for binary wire formats.

Buff is a fixed-length byte sequence convertible to and from numbers, text,
hex, bit-strings, JSON, base64, base64url, base58check and bech32. Stream
reads a Buff field by field, including varint length-prefixed fields.
"""

from .enums import *
from .buff import Buff
from .stream import Stream
from .codec import encode_varint, decode_varint, varint_size, hash_bytes, hmac_bytes
from .encoding import Bech32Payload
from .runtime.config import BuffConfig, DEFAULT_CONFIG
from .runtime.errors import *

__version__ = "1.0.0"
__all__ = [
    # Core types
    "Buff",
    "Stream",

    # Options
    "Endian",
    "PadSide",
    "HashType",
    "HmacType",
    "SourceKind",
    "BuffConfig",
    "DEFAULT_CONFIG",

    # Codec
    "encode_varint",
    "decode_varint",
    "varint_size",
    "hash_bytes",
    "hmac_bytes",
    "Bech32Payload",

    # Errors
    "ErrorCode",
    "BuffError",
    "SizeExceededError",
    "InvalidPrefixError",
    "ValueTooLargeError",
    "OffsetOverflowError",
    "EncodingError",
    "MalformedEncodingError",
]
