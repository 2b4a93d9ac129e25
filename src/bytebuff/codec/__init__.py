"""
Binary codec helpers shared by Buff and Stream.

Key components:
- varint.py: CompactSize-style length prefix (big-endian by default)
- hashes.py: digest and HMAC helpers
"""

from .hashes import (
    sha256_bytes,
    sha512_bytes,
    ripemd160_bytes,
    double_sha256,
    hash160,
    hash_bytes,
    hmac_bytes,
)
from .varint import encode_varint, decode_varint, varint_size

__all__ = [
    "sha256_bytes",
    "sha512_bytes",
    "ripemd160_bytes",
    "double_sha256",
    "hash160",
    "hash_bytes",
    "hmac_bytes",
    "encode_varint",
    "decode_varint",
    "varint_size",
]
