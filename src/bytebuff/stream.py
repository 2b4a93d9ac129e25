"""
Stream - sequential reader over a byte buffer.

Consumes a private copy of its source from left to right. ``peek`` looks
ahead without moving the cursor; ``read`` consumes. A ``read`` without a size
first decodes a varint length prefix and then consumes that many bytes.
"""

from __future__ import annotations
import logging
from typing import Any, Optional, Tuple, Union

from . import format as fmt
from .buff import Buff
from .codec.varint import PREFIX_U16, decode_varint
from .enums import Endian
from .runtime.errors import InvalidPrefixError, SizeExceededError

logger = logging.getLogger(__name__)


class Stream:
    """
    Sequential reader with strict bounds checking.

    Args:
        data: Any byte-like source; it is copied, so reading never alters it
    """

    def __init__(self, data: Any):
        self._buf = fmt.buffer(data)
        self._off = 0

    @property
    def size(self) -> int:
        """Number of bytes remaining."""
        return len(self._buf) - self._off

    @property
    def data(self) -> Buff:
        """Copy of the remaining bytes."""
        return Buff(self._buf[self._off:])

    @property
    def eof(self) -> bool:
        """True once every byte has been consumed."""
        return self._off >= len(self._buf)

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"Stream(size={self.size})"

    def peek(self, size: int) -> Buff:
        """
        Return the next ``size`` bytes without consuming them.

        Args:
            size: Number of bytes to look at

        Returns:
            New Buff holding the bytes

        Raises:
            SizeExceededError: If size is negative or more than remain
        """
        if size < 0 or size > self.size:
            raise SizeExceededError(size, self.size)
        return Buff(self._buf[self._off:self._off + size])

    def read(self, size: Optional[int] = None) -> Buff:
        """
        Consume bytes.

        Args:
            size: Number of bytes to read; when omitted a varint length
                prefix is read first and gives the size

        Returns:
            New Buff holding the consumed bytes (prefix excluded)

        Raises:
            SizeExceededError: If more bytes are requested than remain; the
                cursor does not move, prefix included
        """
        if size is None:
            size, consumed = self._decode_size(None)
            if consumed + size > self.size:
                raise SizeExceededError(size, self.size - consumed)
            self._off += consumed
        chunk = self.peek(size)
        self._off += size
        return chunk

    def read_num(self, size: int, endian: Optional[Union[Endian, str]] = None) -> int:
        """Consume ``size`` bytes and return them as an unsigned integer."""
        return self.read(size).to_num(endian)

    def read_size(self, endian: Optional[Union[Endian, str]] = None) -> int:
        """
        Consume one varint and return its value.

        Args:
            endian: Byte order of the multi-byte forms (default big-endian)

        Returns:
            Decoded integer

        Raises:
            SizeExceededError: If the stream ends inside the varint
            InvalidPrefixError: If the leading byte matches no known form
        """
        value, consumed = self._decode_size(endian)
        self._off += consumed
        return value

    def _decode_size(self, endian: Optional[Union[Endian, str]]) -> Tuple[int, int]:
        # Decodes without moving the cursor.
        value, consumed = decode_varint(self._buf[self._off:], endian)
        if consumed == 1 and value >= PREFIX_U16:
            logger.debug("Rejecting varint prefix %r at offset %d", value, self._off)
            raise InvalidPrefixError(value, {"offset": self._off})
        if consumed > 1:
            logger.debug("Decoded varint 0x%02x -> %d", self._buf[self._off], value)
        return value, consumed


__all__ = ["Stream"]
