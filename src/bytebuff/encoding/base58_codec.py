"""Base58 with a 4-byte double-SHA256 checksum (base58check)."""

import base58

from ..runtime.errors import MalformedEncodingError


def b58chk_encode(data: bytes) -> str:
    """Encode bytes as base58check."""
    return base58.b58encode_check(bytes(data)).decode("ascii")


def b58chk_decode(text: str) -> bytes:
    """
    Decode base58check, verifying the checksum.

    Raises:
        MalformedEncodingError: On foreign characters or checksum mismatch
    """
    try:
        return base58.b58decode_check(text)
    except ValueError as e:
        raise MalformedEncodingError(f"Invalid base58check string: {e}", cause=e) from e


__all__ = ["b58chk_encode", "b58chk_decode"]
