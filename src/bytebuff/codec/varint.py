"""
Varint Codec

CompactSize-style length prefix: one marker byte selects a 1, 2, 4 or 8 byte
integer. Multi-byte forms are big-endian unless little-endian is requested.

    value < 0xFD          ->  value
    value < 0x10000       ->  0xFD + uint16
    value < 0x100000000   ->  0xFE + uint32
    value < 2^64          ->  0xFF + uint64
"""

import struct
from typing import Optional, Tuple, Union

from ..enums import Endian
from ..runtime.config import resolve_endian
from ..runtime.errors import SizeExceededError, ValueTooLargeError

PREFIX_U16 = 0xFD
PREFIX_U32 = 0xFE
PREFIX_U64 = 0xFF

# marker byte -> (struct code, payload width)
_FORMS = {
    PREFIX_U16: ("H", 2),
    PREFIX_U32: ("I", 4),
    PREFIX_U64: ("Q", 8),
}


def _order(endian: Optional[Union[Endian, str]]) -> str:
    return ">" if resolve_endian(endian) is Endian.BIG else "<"


def _prefix_for(value: int) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Varint value must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueTooLargeError(f"Varint cannot be negative: {value}", {"value": value})
    if value < PREFIX_U16:
        return None
    if value < 0x10000:
        return PREFIX_U16
    if value < 0x100000000:
        return PREFIX_U32
    if value < 0x10000000000000000:
        return PREFIX_U64
    raise ValueTooLargeError(f"Value is too large: {value}", {"value": value})


def encode_varint(value: int, endian: Optional[Union[Endian, str]] = None) -> bytes:
    """
    Encode a non-negative integer as a varint.

    Args:
        value: Integer in [0, 2^64)
        endian: Byte order of the multi-byte forms (default big-endian)

    Returns:
        Encoded bytes (1, 3, 5 or 9 bytes)

    Raises:
        ValueTooLargeError: If value is negative or at least 2^64
    """
    prefix = _prefix_for(value)
    if prefix is None:
        return bytes([value])
    code, _ = _FORMS[prefix]
    return bytes([prefix]) + struct.pack(_order(endian) + code, value)


def varint_size(value: int) -> int:
    """Number of bytes encode_varint(value) produces."""
    prefix = _prefix_for(value)
    return 1 if prefix is None else 1 + _FORMS[prefix][1]


def decode_varint(data: bytes, endian: Optional[Union[Endian, str]] = None) -> Tuple[int, int]:
    """
    Decode a varint from the start of a byte sequence.

    Args:
        data: Bytes beginning with a varint
        endian: Byte order of the multi-byte forms (default big-endian)

    Returns:
        Tuple of (value, bytes consumed)

    Raises:
        SizeExceededError: If data ends before the varint does
    """
    data = bytes(data)
    if not data:
        raise SizeExceededError(1, 0)

    prefix = data[0]
    if prefix not in _FORMS:
        return prefix, 1

    code, width = _FORMS[prefix]
    if len(data) - 1 < width:
        raise SizeExceededError(width, len(data) - 1)
    (value,) = struct.unpack_from(_order(endian) + code, data, 1)
    return value, 1 + width


__all__ = [
    "PREFIX_U16",
    "PREFIX_U32",
    "PREFIX_U64",
    "encode_varint",
    "decode_varint",
    "varint_size",
]
