"""
Text encodings for byte payloads.

- base64_codec.py: standard and URL-safe base64
- base58_codec.py: base58check
- bech32_codec.py: bech32 with a version word
"""

from .base64_codec import b64_encode, b64_decode, b64url_encode, b64url_decode
from .base58_codec import b58chk_encode, b58chk_decode
from .bech32_codec import Bech32Payload, bech32_encode, bech32_decode

__all__ = [
    "b64_encode",
    "b64_decode",
    "b64url_encode",
    "b64url_decode",
    "b58chk_encode",
    "b58chk_decode",
    "Bech32Payload",
    "bech32_encode",
    "bech32_decode",
]
