"""
Base64 and base64url text encodings.

Standard base64 is padded and decoded strictly. base64url output is unpadded;
its decoder accepts input with or without padding.
"""

import base64
import re

from ..runtime.errors import MalformedEncodingError

_B64URL_RE = re.compile(r"[A-Za-z0-9_-]*={0,2}")


def b64_encode(data: bytes) -> str:
    """Encode bytes as padded standard base64."""
    return base64.b64encode(bytes(data)).decode("ascii")


def b64_decode(text: str) -> bytes:
    """
    Decode standard base64.

    Raises:
        MalformedEncodingError: On foreign characters or bad padding
    """
    try:
        return base64.b64decode(text, validate=True)
    except ValueError as e:
        raise MalformedEncodingError(f"Invalid base64 string: {e}", cause=e) from e


def b64url_encode(data: bytes) -> str:
    """Encode bytes as unpadded URL-safe base64."""
    return base64.urlsafe_b64encode(bytes(data)).rstrip(b"=").decode("ascii")


def b64url_decode(text: str) -> bytes:
    """
    Decode URL-safe base64, padded or not.

    Raises:
        MalformedEncodingError: On foreign characters or impossible lengths
    """
    if not isinstance(text, str) or not _B64URL_RE.fullmatch(text):
        raise MalformedEncodingError(f"Invalid base64url string: {text!r}")

    body = text.rstrip("=")
    if len(body) % 4 == 1:
        raise MalformedEncodingError(f"Invalid base64url length: {len(body)}")
    if text != body and len(text) % 4 != 0:
        raise MalformedEncodingError("Invalid base64url padding")

    padded = body + "=" * (-len(body) % 4)
    try:
        return base64.urlsafe_b64decode(padded)
    except ValueError as e:
        raise MalformedEncodingError(f"Invalid base64url string: {e}", cause=e) from e


__all__ = ["b64_encode", "b64_decode", "b64url_encode", "b64url_decode"]
