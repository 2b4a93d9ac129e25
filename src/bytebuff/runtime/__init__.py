"""Runtime helpers for bytebuff"""

from .errors import (
    ErrorCode,
    BuffError,
    SizeExceededError,
    InvalidPrefixError,
    ValueTooLargeError,
    OffsetOverflowError,
    EncodingError,
    MalformedEncodingError,
)
from .config import BuffConfig, DEFAULT_CONFIG, resolve_endian, resolve_pad_side

__all__ = [
    "ErrorCode",
    "BuffError",
    "SizeExceededError",
    "InvalidPrefixError",
    "ValueTooLargeError",
    "OffsetOverflowError",
    "EncodingError",
    "MalformedEncodingError",
    "BuffConfig",
    "DEFAULT_CONFIG",
    "resolve_endian",
    "resolve_pad_side",
]
