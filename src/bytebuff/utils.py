"""
Array helpers: sizing, joining and random generation of byte sequences.
"""

import os
from typing import Iterable, Optional, Union

from .enums import PadSide
from .runtime.config import resolve_pad_side


def pad_array(data: bytes, size: int, side: Optional[Union[PadSide, str]] = None) -> bytes:
    """
    Resize a byte sequence to exactly ``size`` bytes.

    LEFT prepends zeros when growing and drops leading bytes when shrinking,
    which keeps the value of a big-endian integer. RIGHT appends zeros and
    drops trailing bytes.

    Args:
        data: Bytes to resize
        size: Target length
        side: Which end to pad or cut (default from config)

    Returns:
        Bytes of length ``size``

    Raises:
        ValueError: If size is negative
    """
    if size < 0:
        raise ValueError(f"Array size cannot be negative: {size}")

    data = bytes(data)
    side = resolve_pad_side(side)
    diff = size - len(data)

    if diff >= 0:
        fill = bytes(diff)
        return fill + data if side is PadSide.LEFT else data + fill

    if side is PadSide.LEFT:
        return data[-size:] if size else b""
    return data[:size]


def join_array(chunks: Iterable[bytes]) -> bytes:
    """Concatenate byte sequences in order."""
    return b"".join(bytes(chunk) for chunk in chunks)


def random_bytes(size: int) -> bytes:
    """
    Generate cryptographically random bytes.

    Args:
        size: Number of bytes

    Returns:
        ``size`` bytes from os.urandom
    """
    if size < 0:
        raise ValueError(f"Random size cannot be negative: {size}")
    return os.urandom(size)


__all__ = ["pad_array", "join_array", "random_bytes"]
