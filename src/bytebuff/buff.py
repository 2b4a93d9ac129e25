"""
Buff: a fixed-length byte sequence with conversions.

A Buff owns a bytearray and behaves as a read-only sequence of ints. Every
transformation returns a new Buff; ``write`` is the one in-place operation.
Values are built from an explicit source kind, either through the matching
``from_*`` classmethod or through ``Buff.create(kind, value)``.
"""

from __future__ import annotations
import logging
from collections.abc import Sequence
from typing import Any, Iterable, Iterator, List, Optional, Union, TYPE_CHECKING

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from . import format as fmt
from .codec.hashes import hash_bytes, hmac_bytes
from .codec.varint import encode_varint
from .encoding import (
    b58chk_decode,
    b58chk_encode,
    b64_decode,
    b64_encode,
    b64url_decode,
    b64url_encode,
    bech32_decode,
    bech32_encode,
)
from .enums import Endian, HashType, HmacType, PadSide, SourceKind
from .runtime.config import DEFAULT_CONFIG, resolve_endian
from .runtime.errors import BuffError, OffsetOverflowError, ValueTooLargeError
from .utils import join_array, pad_array, random_bytes

if TYPE_CHECKING:
    from .stream import Stream

logger = logging.getLogger(__name__)

EndianArg = Optional[Union[Endian, str]]

_NUMERIC_FACTORIES = {
    SourceKind.NUM: "from_num",
    SourceKind.BIG: "from_big",
}

_FACTORIES = {
    SourceKind.BIN: "from_bin",
    SourceKind.RAW: "from_raw",
    SourceKind.STR: "from_str",
    SourceKind.HEX: "from_hex",
    SourceKind.BYTES: "from_bytes",
    SourceKind.JSON: "from_json",
    SourceKind.BASE64: "from_base64",
    SourceKind.B64URL: "from_b64url",
    SourceKind.BECH32: "from_bech32",
    SourceKind.B58CHK: "from_b58chk",
}


class Buff(Sequence):
    """
    Fixed-length byte sequence.

    Args:
        data: Any byte-like source (bytes, bytearray, memoryview, Buff, or an
            iterable of ints in 0..255)
        size: Optional target length; the bytes are padded or truncated to it
        side: End to pad or truncate (default from config, left)
    """

    __slots__ = ("_data",)
    __hash__ = None  # mutable through write()

    def __init__(self, data: Any, size: Optional[int] = None, *,
                 side: Optional[Union[PadSide, str]] = None):
        raw = fmt.buffer(data)
        if size is not None:
            raw = pad_array(raw, size, side)
        self._data = bytearray(raw)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def create(cls, kind: Union[SourceKind, str], value: Any = None,
               size: Optional[int] = None, *, endian: EndianArg = None) -> Buff:
        """
        Build a Buff from a value tagged with its source kind.

        Args:
            kind: Source kind of value
            value: The source value (omitted for RANDOM)
            size: Optional target length
            endian: Byte order, NUM and BIG sources only

        Returns:
            New Buff

        Raises:
            TypeError: If value or endian does not apply to the kind
        """
        kind = SourceKind(kind)
        if kind is SourceKind.RANDOM:
            if value is not None:
                raise TypeError("Random buffers take no source value")
            return cls.random(size)
        if kind in _NUMERIC_FACTORIES:
            return getattr(cls, _NUMERIC_FACTORIES[kind])(value, size, endian)
        if endian is not None:
            raise TypeError(f"endian does not apply to {kind.value} sources")
        return getattr(cls, _FACTORIES[kind])(value, size)

    @classmethod
    def _from_le_int(cls, raw: bytes, size: Optional[int], endian: EndianArg) -> Buff:
        # raw is minimal little-endian; sizing must keep the value intact
        order = resolve_endian(endian)
        if size is not None:
            used = len(raw.rstrip(b"\x00"))
            if used > size:
                raise ValueTooLargeError(
                    f"Value needs {used} bytes, more than size {size}",
                    {"needed": used, "size": size},
                )
            raw = pad_array(raw, size, PadSide.RIGHT)
        if order is Endian.BIG:
            raw = raw[::-1]
        return cls(raw)

    @classmethod
    def from_num(cls, value: int, size: Optional[int] = None, endian: EndianArg = None) -> Buff:
        """Buff from an unsigned integer below 2^64 (big-endian by default)."""
        return cls._from_le_int(fmt.num_to_bytes(value), size, endian)

    @classmethod
    def from_big(cls, value: int, size: Optional[int] = None, endian: EndianArg = None) -> Buff:
        """Buff from an unsigned integer of any size (big-endian by default)."""
        return cls._from_le_int(fmt.big_to_bytes(value), size, endian)

    @classmethod
    def from_bin(cls, text: str, size: Optional[int] = None) -> Buff:
        return cls(fmt.bin_to_bytes(text), size)

    @classmethod
    def from_raw(cls, data: Union[bytes, bytearray, memoryview], size: Optional[int] = None) -> Buff:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"Expected raw bytes, got {type(data).__name__}")
        return cls(data, size)

    @classmethod
    def from_str(cls, text: str, size: Optional[int] = None) -> Buff:
        return cls(fmt.str_to_bytes(text), size)

    @classmethod
    def from_hex(cls, text: str, size: Optional[int] = None) -> Buff:
        return cls(fmt.hex_to_bytes(text), size)

    @classmethod
    def from_bytes(cls, data: Any, size: Optional[int] = None) -> Buff:
        return cls(data, size)

    @classmethod
    def from_json(cls, value: Any, size: Optional[int] = None) -> Buff:
        return cls(fmt.json_to_bytes(value), size)

    @classmethod
    def from_base64(cls, text: str, size: Optional[int] = None) -> Buff:
        return cls(b64_decode(text), size)

    @classmethod
    def from_b64url(cls, text: str, size: Optional[int] = None) -> Buff:
        return cls(b64url_decode(text), size)

    @classmethod
    def from_bech32(cls, text: str, size: Optional[int] = None, *, hrp: Optional[str] = None) -> Buff:
        """Buff from the payload of a bech32 string (prefix and version dropped)."""
        return cls(bech32_decode(text, hrp).data, size)

    @classmethod
    def from_b58chk(cls, text: str, size: Optional[int] = None) -> Buff:
        return cls(b58chk_decode(text), size)

    @classmethod
    def random(cls, size: Optional[int] = None) -> Buff:
        """Buff of cryptographically random bytes (32 by default)."""
        if size is None:
            size = DEFAULT_CONFIG.random_size
        logger.debug("Generating %d random bytes", size)
        return cls(random_bytes(size), size)

    @classmethod
    def of(cls, *values: int) -> Buff:
        return cls(values)

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, key):
        if isinstance(key, slice):
            return Buff(self._data[key])
        return self._data[key]

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __contains__(self, item: Any) -> bool:
        if isinstance(item, Buff):
            item = bytes(item)
        elif isinstance(item, int) and not 0 <= item <= 0xFF:
            return False
        return item in self._data

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Buff):
            return self._data == other._data
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self._data == bytes(other)
        return NotImplemented

    def __add__(self, other: Any) -> Buff:
        return self.append(other)

    def __repr__(self) -> str:
        return f"Buff('{self.hex}')"

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    @property
    def arr(self) -> List[int]:
        return list(self._data)

    @property
    def num(self) -> int:
        return self.to_num()

    @property
    def big(self) -> int:
        return self.to_big()

    @property
    def str(self) -> str:
        return self.to_str()

    @property
    def hex(self) -> str:
        return self.to_hex()

    @property
    def raw(self) -> bytes:
        return self.to_bytes()

    @property
    def bin(self) -> str:
        return self.to_bin()

    @property
    def b58chk(self) -> str:
        return self.to_b58chk()

    @property
    def base64(self) -> str:
        return self.to_base64()

    @property
    def b64url(self) -> str:
        return self.to_b64url()

    @property
    def digest(self) -> Buff:
        """Digest with the default hash (sha256)."""
        return self.to_hash()

    @property
    def id(self) -> str:
        """Lowercase hex of the default digest."""
        return self.to_hash().hex

    @property
    def stream(self) -> Stream:
        """A new Stream over a copy of these bytes."""
        from .stream import Stream
        return Stream(self)

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def _le(self, endian: EndianArg) -> bytes:
        data = bytes(self._data)
        return data[::-1] if resolve_endian(endian) is Endian.BIG else data

    def to_num(self, endian: EndianArg = None) -> int:
        """
        Read the bytes as an unsigned integer of at most 64 bits.

        Raises:
            ValueTooLargeError: If the buffer is longer than 8 bytes
        """
        return fmt.bytes_to_num(self._le(endian))

    def to_big(self, endian: EndianArg = None) -> int:
        """Read the bytes as an unsigned integer of any size."""
        return fmt.bytes_to_big(self._le(endian))

    def to_bin(self) -> str:
        return fmt.bytes_to_bin(self._data)

    def to_hash(self, hash_type: Optional[Union[HashType, str]] = None) -> Buff:
        return Buff(hash_bytes(bytes(self._data), hash_type))

    def to_hmac(self, key: Any, hmac_type: Union[HmacType, str]) -> Buff:
        """
        HMAC of these bytes.

        Args:
            key: Byte-like secret key
            hmac_type: Hash function, "sha256" or "sha512"
        """
        return Buff(hmac_bytes(fmt.buffer(key), bytes(self._data), hmac_type))

    def to_json(self) -> Any:
        return fmt.bytes_to_json(self._data)

    def to_bech32(self, hrp: str, version: Optional[int] = None) -> str:
        """
        Encode as bech32 with a leading version word.

        The whole string is capped at 90 characters, so the payload may hold
        at most (82 - len(hrp)) * 5 // 8 bytes: 50 bytes for hrp "bc".

        Raises:
            EncodingError: If the encoded string would exceed 90 characters
        """
        if version is None:
            version = DEFAULT_CONFIG.bech32_version
        return bech32_encode(bytes(self._data), hrp, version)

    def to_str(self) -> str:
        return fmt.bytes_to_str(self._data)

    def to_hex(self) -> str:
        return fmt.bytes_to_hex(self._data)

    def to_bytes(self) -> bytes:
        return bytes(self._data)

    def to_b58chk(self) -> str:
        return b58chk_encode(bytes(self._data))

    def to_base64(self) -> str:
        return b64_encode(bytes(self._data))

    def to_b64url(self) -> str:
        return b64url_encode(bytes(self._data))

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def prepend(self, data: Any) -> Buff:
        """Return data followed by these bytes."""
        return Buff.join([Buff(data), self])

    def append(self, data: Any) -> Buff:
        """Return these bytes followed by data."""
        return Buff.join([self, Buff(data)])

    def slice(self, start: Optional[int] = None, end: Optional[int] = None) -> Buff:
        """Copy of the half-open range [start, end), clamped to the buffer."""
        return Buff(self._data[start:end])

    def subarray(self, begin: Optional[int] = None, end: Optional[int] = None) -> Buff:
        """Same as slice(); the result is a copy, not a view."""
        return Buff(self._data[begin:end])

    def reverse(self) -> Buff:
        return Buff(self._data[::-1])

    def write(self, data: Any, offset: int = 0) -> None:
        """
        Overwrite bytes in place starting at offset.

        Raises:
            OffsetOverflowError: If offset is negative or the data would run
                past the end of the buffer
        """
        chunk = fmt.buffer(data)
        if offset < 0 or offset + len(chunk) > len(self._data):
            raise OffsetOverflowError(offset, len(chunk), len(self._data))
        self._data[offset:offset + len(chunk)] = chunk

    def prefix_size(self, endian: EndianArg = None) -> Buff:
        """Varint of the length followed by the bytes themselves."""
        return Buff.join([encode_varint(len(self._data), endian), self])

    @staticmethod
    def join(chunks: Iterable[Any]) -> Buff:
        """Concatenate byte-like sources in order."""
        return Buff(join_array(fmt.buffer(chunk) for chunk in chunks))

    @staticmethod
    def varint(value: int, endian: EndianArg = None) -> Buff:
        """
        Varint encoding of value.

        Raises:
            ValueTooLargeError: If value is negative or at least 2^64
        """
        return Buff(encode_varint(value, endian))

    @staticmethod
    def encode(text: str) -> bytes:
        return fmt.str_to_bytes(text)

    @staticmethod
    def decode(data: Any) -> str:
        return fmt.bytes_to_str(fmt.buffer(data))

    # ------------------------------------------------------------------
    # Pydantic
    # ------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        """Validate from bytes or hex; serialize to hex in JSON mode."""
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.hex,
                when_used="json",
            ),
        )

    @classmethod
    def _validate(cls, value: Any) -> Buff:
        if isinstance(value, cls):
            return value
        try:
            if isinstance(value, str):
                return cls.from_hex(value)
            return cls(value)
        except (TypeError, BuffError) as e:
            raise ValueError(f"Invalid Buff: {e}") from e


__all__ = ["Buff"]
