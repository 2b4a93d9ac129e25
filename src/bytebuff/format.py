"""
Representation converters.

Pure functions moving between ``bytes`` and the other representations a Buff
understands. Integers are converted in little-endian natural order with
minimal length; callers flip the result for big-endian use.
"""

from __future__ import annotations
import json
import re
from collections.abc import Iterable
from typing import Any

from .canonjson import dumps_canonical, loads
from .runtime.errors import EncodingError, MalformedEncodingError, ValueTooLargeError

MAX_NUM = 2 ** 64 - 1
MAX_NUM_BYTES = 8

_HEX_RE = re.compile(r"(?:[0-9a-fA-F]{2})*")
_BIN_RE = re.compile(r"(?:[01]{8})*")


def str_to_bytes(text: str) -> bytes:
    """Encode text as UTF-8."""
    if not isinstance(text, str):
        raise TypeError(f"Expected a string, got {type(text).__name__}")
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodingError(f"Text is not encodable as UTF-8: {e.reason}", cause=e) from e


def bytes_to_str(data: bytes) -> str:
    """Decode UTF-8 bytes, rejecting invalid sequences."""
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedEncodingError(f"Invalid UTF-8 at byte {e.start}", cause=e) from e


def hex_to_bytes(text: str) -> bytes:
    """
    Decode a hex string.

    Accepts upper or lower case digits; the string must have even length and
    contain nothing else (no prefix, no whitespace).
    """
    if not isinstance(text, str) or not _HEX_RE.fullmatch(text):
        raise MalformedEncodingError(f"Invalid hex string: {text!r}")
    return bytes.fromhex(text)


def bytes_to_hex(data: bytes) -> str:
    """Encode bytes as lowercase hex."""
    return bytes(data).hex()


def bin_to_bytes(text: str) -> bytes:
    """Decode a bit-string (most significant bit first, 8 bits per byte)."""
    if not isinstance(text, str) or not _BIN_RE.fullmatch(text):
        raise MalformedEncodingError(f"Invalid bit string: {text!r}")
    return bytes(int(text[i:i + 8], 2) for i in range(0, len(text), 8))


def bytes_to_bin(data: bytes) -> str:
    """Encode bytes as a bit-string."""
    return "".join(f"{b:08b}" for b in bytes(data))


def _check_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueTooLargeError(f"Negative values are not supported: {value}", {"value": value})
    return value


def num_to_bytes(value: int) -> bytes:
    """
    Convert a fixed-width unsigned integer to little-endian bytes.

    Args:
        value: Integer in [0, 2^64)

    Returns:
        Minimal little-endian bytes (at least one byte)

    Raises:
        ValueTooLargeError: If value is negative or does not fit in 64 bits
    """
    value = _check_int(value)
    if value > MAX_NUM:
        raise ValueTooLargeError(f"Value is too large: {value}", {"value": value})
    return big_to_bytes(value)


def bytes_to_num(data: bytes) -> int:
    """Read little-endian bytes as a fixed-width (at most 64-bit) integer."""
    data = bytes(data)
    if len(data) > MAX_NUM_BYTES:
        raise ValueTooLargeError(
            f"Number is wider than {MAX_NUM_BYTES} bytes: {len(data)}",
            {"length": len(data)},
        )
    return int.from_bytes(data, "little")


def big_to_bytes(value: int) -> bytes:
    """Convert an arbitrary-precision unsigned integer to little-endian bytes."""
    value = _check_int(value)
    length = max(1, (value.bit_length() + 7) // 8)
    return value.to_bytes(length, "little")


def bytes_to_big(data: bytes) -> int:
    """Read little-endian bytes as an arbitrary-precision integer."""
    return int.from_bytes(bytes(data), "little")


def json_to_bytes(value: Any) -> bytes:
    """Serialize a JSON value as canonical UTF-8 bytes."""
    try:
        text = dumps_canonical(value)
    except (TypeError, ValueError, RecursionError) as e:
        raise EncodingError(f"Value is not JSON serializable: {e}", cause=e) from e
    return str_to_bytes(text)


def bytes_to_json(data: bytes) -> Any:
    """Parse UTF-8 JSON bytes."""
    text = bytes_to_str(data)
    try:
        return loads(text)
    except json.JSONDecodeError as e:
        raise MalformedEncodingError(f"Invalid JSON: {e.msg}", {"position": e.pos}, e) from e


def buffer(data: Any) -> bytes:
    """
    Coerce a byte-like source into bytes.

    Accepts bytes, bytearray, memoryview, objects implementing ``__bytes__``
    (such as Buff) and iterables of ints in 0..255. Strings and integers are
    rejected; they must go through an explicit converter so their meaning
    (hex, UTF-8, number) is never guessed.

    Raises:
        TypeError: For unsupported source types
        MalformedEncodingError: For iterables holding values outside 0..255
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, (str, int)):
        raise TypeError(
            f"Cannot coerce {type(data).__name__} to bytes; use an explicit source kind"
        )
    if hasattr(data, "__bytes__"):
        return bytes(data)
    if isinstance(data, Iterable):
        values = list(data)
        for v in values:
            if isinstance(v, bool) or not isinstance(v, int):
                raise TypeError(f"Byte values must be integers, got {type(v).__name__}")
        try:
            return bytes(values)
        except ValueError as e:
            raise MalformedEncodingError(f"Byte value out of range: {e}", cause=e) from e
    raise TypeError(f"Unsupported byte source: {type(data).__name__}")


__all__ = [
    "MAX_NUM",
    "str_to_bytes",
    "bytes_to_str",
    "hex_to_bytes",
    "bytes_to_hex",
    "bin_to_bytes",
    "bytes_to_bin",
    "num_to_bytes",
    "bytes_to_num",
    "big_to_bytes",
    "bytes_to_big",
    "json_to_bytes",
    "bytes_to_json",
    "buffer",
]
