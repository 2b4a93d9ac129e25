"""
Hash Functions

Digest and HMAC helpers behind Buff.to_hash() and Buff.to_hmac().
SHA-2 comes from hashlib, RIPEMD-160 from pycryptodome (OpenSSL 3 builds of
hashlib frequently lack it) and HMAC from cryptography.
"""

import hashlib
import logging
from typing import Optional, Union

from Crypto.Hash import RIPEMD160
from cryptography.hazmat.primitives import hashes, hmac

from ..enums import HashType, HmacType
from ..runtime.config import DEFAULT_CONFIG

logger = logging.getLogger(__name__)

_HMAC_ALGORITHMS = {
    HmacType.SHA256: hashes.SHA256,
    HmacType.SHA512: hashes.SHA512,
}


def sha256_bytes(input_bytes: bytes) -> bytes:
    """
    Compute SHA-256 hash of input bytes.

    Args:
        input_bytes: Input bytes to hash

    Returns:
        SHA-256 hash as bytes (32 bytes)
    """
    return hashlib.sha256(input_bytes).digest()


def sha512_bytes(input_bytes: bytes) -> bytes:
    """Compute SHA-512 hash of input bytes (64 bytes)."""
    return hashlib.sha512(input_bytes).digest()


def ripemd160_bytes(input_bytes: bytes) -> bytes:
    """Compute RIPEMD-160 hash of input bytes (20 bytes)."""
    return RIPEMD160.new(input_bytes).digest()


def double_sha256(data: bytes) -> bytes:
    """
    Calculate double SHA256 hash.

    Args:
        data: Data to hash

    Returns:
        SHA256(SHA256(data))
    """
    return sha256_bytes(sha256_bytes(data))


def hash160(data: bytes) -> bytes:
    """RIPEMD160(SHA256(data)), as used for address payloads."""
    return ripemd160_bytes(sha256_bytes(data))


_HASH_FUNCTIONS = {
    HashType.SHA256: sha256_bytes,
    HashType.SHA512: sha512_bytes,
    HashType.RIPEMD160: ripemd160_bytes,
    HashType.HASH256: double_sha256,
    HashType.HASH160: hash160,
}


def hash_bytes(data: bytes, hash_type: Optional[Union[HashType, str]] = None) -> bytes:
    """
    Digest data with the selected algorithm.

    Args:
        data: Bytes to hash
        hash_type: Algorithm selector (default from config, sha256)

    Returns:
        Digest bytes

    Raises:
        ValueError: If hash_type is not a known selector
    """
    selected = DEFAULT_CONFIG.hash_type if hash_type is None else HashType(hash_type)
    return _HASH_FUNCTIONS[selected](bytes(data))


def hmac_bytes(key: bytes, data: bytes, hmac_type: Union[HmacType, str]) -> bytes:
    """
    Compute an HMAC digest.

    Args:
        key: Secret key
        data: Message bytes
        hmac_type: Hash function selector

    Returns:
        HMAC digest bytes

    Raises:
        ValueError: If hmac_type is not a known selector
    """
    selected = HmacType(hmac_type)
    mac = hmac.HMAC(bytes(key), _HMAC_ALGORITHMS[selected]())
    mac.update(bytes(data))
    digest = mac.finalize()
    logger.debug("hmac-%s over %d bytes", selected.value, len(data))
    return digest


__all__ = [
    "sha256_bytes",
    "sha512_bytes",
    "ripemd160_bytes",
    "double_sha256",
    "hash160",
    "hash_bytes",
    "hmac_bytes",
]
