"""
Bech32 encoding of a versioned byte payload.

The first 5-bit word carries the version (0..16); the payload follows,
regrouped from 8-bit to 5-bit words. Checksumming and the 90 character limit
are those of BIP-173.
"""

from typing import NamedTuple, Optional

from bech32 import bech32_decode as _decode_words
from bech32 import bech32_encode as _encode_words
from bech32 import convertbits

from ..runtime.errors import EncodingError, MalformedEncodingError

MAX_LENGTH = 90
MAX_VERSION = 16


class Bech32Payload(NamedTuple):
    """Decoded bech32 string."""
    hrp: str
    version: int
    data: bytes


def _check_hrp(hrp: str) -> str:
    if not isinstance(hrp, str) or not 1 <= len(hrp) <= 83:
        raise EncodingError(f"Invalid human-readable prefix: {hrp!r}")
    if any(ord(c) < 33 or ord(c) > 126 for c in hrp):
        raise EncodingError(f"Invalid character in human-readable prefix: {hrp!r}")
    return hrp.lower()


def bech32_encode(data: bytes, hrp: str, version: int = 0) -> str:
    """
    Encode bytes as bech32.

    Args:
        data: Payload bytes
        hrp: Human-readable prefix
        version: Witness version, 0..16

    Returns:
        Lowercase bech32 string

    Raises:
        EncodingError: On an invalid prefix or version, or a result longer
            than 90 characters
    """
    hrp = _check_hrp(hrp)
    if isinstance(version, bool) or not isinstance(version, int) or not 0 <= version <= MAX_VERSION:
        raise EncodingError(f"Invalid bech32 version: {version!r}")

    words = convertbits(list(bytes(data)), 8, 5)
    text = _encode_words(hrp, [version] + words)
    if len(text) > MAX_LENGTH:
        raise EncodingError(
            f"Bech32 string exceeds {MAX_LENGTH} characters: {len(text)}",
            details={"length": len(text), "payload": len(data)},
        )
    return text


def bech32_decode(text: str, hrp: Optional[str] = None) -> Bech32Payload:
    """
    Decode a bech32 string.

    Args:
        text: Bech32 string
        hrp: Expected human-readable prefix, if it should be checked

    Returns:
        Bech32Payload(hrp, version, data)

    Raises:
        MalformedEncodingError: On any checksum, charset, length or prefix error
    """
    if not isinstance(text, str):
        raise MalformedEncodingError(f"Bech32 input must be a string, got {type(text).__name__}")

    found_hrp, words = _decode_words(text)
    if found_hrp is None or not words:
        raise MalformedEncodingError(f"Invalid bech32 string: {text!r}")
    if hrp is not None and found_hrp != hrp.lower():
        raise MalformedEncodingError(
            f"Unexpected bech32 prefix: {found_hrp!r}",
            details={"expected": hrp, "found": found_hrp},
        )

    version = words[0]
    if version > MAX_VERSION:
        raise MalformedEncodingError(f"Invalid bech32 version: {version}")

    decoded = convertbits(words[1:], 5, 8, False)
    if decoded is None:
        raise MalformedEncodingError(f"Invalid bech32 padding: {text!r}")

    return Bech32Payload(found_hrp, version, bytes(decoded))


__all__ = ["Bech32Payload", "bech32_encode", "bech32_decode"]
