"""
Enumerations shared across bytebuff.

String-valued so callers may pass either the member or its plain value
(``"be"``, ``"sha256"``, ...).
"""

from enum import Enum


class Endian(str, Enum):
    """Byte order used when reading a byte sequence as a single integer."""
    BIG = "be"
    LITTLE = "le"


class PadSide(str, Enum):
    """Which end of a byte sequence is padded or truncated to reach a size."""
    LEFT = "left"
    RIGHT = "right"


class HashType(str, Enum):
    """Digest algorithms available for Buff.to_hash()."""
    SHA256 = "sha256"
    SHA512 = "sha512"
    RIPEMD160 = "ripe160"
    HASH256 = "hash256"
    HASH160 = "hash160"


class HmacType(str, Enum):
    """Hash functions available for Buff.to_hmac()."""
    SHA256 = "sha256"
    SHA512 = "sha512"


class SourceKind(str, Enum):
    """Source kinds accepted by Buff.create()."""
    NUM = "num"
    BIG = "big"
    BIN = "bin"
    RAW = "raw"
    STR = "str"
    HEX = "hex"
    BYTES = "bytes"
    JSON = "json"
    BASE64 = "base64"
    B64URL = "b64url"
    BECH32 = "bech32"
    B58CHK = "b58chk"
    RANDOM = "random"


__all__ = [
    "Endian",
    "PadSide",
    "HashType",
    "HmacType",
    "SourceKind",
]
