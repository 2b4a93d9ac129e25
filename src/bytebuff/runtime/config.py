"""
Conversion defaults for bytebuff.

Every option a conversion accepts is listed on BuffConfig with its default.
Functions taking ``endian=None`` (and friends) fall back to DEFAULT_CONFIG.
"""

from dataclasses import dataclass
from typing import Optional, Union

from ..enums import Endian, HashType, PadSide


@dataclass(frozen=True)
class BuffConfig:
    """Default options for buffer conversions."""
    endian: Endian = Endian.BIG
    pad_side: PadSide = PadSide.LEFT
    hash_type: HashType = HashType.SHA256
    random_size: int = 32
    bech32_version: int = 0


DEFAULT_CONFIG = BuffConfig()


def resolve_endian(endian: Optional[Union[Endian, str]] = None) -> Endian:
    """Map an endian argument (member, "be"/"le", or None) to an Endian."""
    if endian is None:
        return DEFAULT_CONFIG.endian
    return Endian(endian)


def resolve_pad_side(side: Optional[Union[PadSide, str]] = None) -> PadSide:
    """Map a pad side argument to a PadSide, defaulting to the config."""
    if side is None:
        return DEFAULT_CONFIG.pad_side
    return PadSide(side)


__all__ = [
    "BuffConfig",
    "DEFAULT_CONFIG",
    "resolve_endian",
    "resolve_pad_side",
]
