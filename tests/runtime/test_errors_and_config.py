"""
Error model and configuration tests.
"""

import dataclasses

import pytest

from bytebuff import Buff, Stream
from bytebuff.enums import Endian, HashType, PadSide
from bytebuff.runtime.config import DEFAULT_CONFIG, BuffConfig, resolve_endian, resolve_pad_side
from bytebuff.runtime.errors import (
    BuffError,
    EncodingError,
    ErrorCode,
    InvalidPrefixError,
    MalformedEncodingError,
    OffsetOverflowError,
    SizeExceededError,
    ValueTooLargeError,
)


class TestErrorModel:
    """Test error codes, hierarchy and rendering."""

    @pytest.mark.parametrize("error,code", [
        (SizeExceededError(5, 4), ErrorCode.SIZE_EXCEEDED),
        (InvalidPrefixError(0x100), ErrorCode.INVALID_PREFIX),
        (ValueTooLargeError("too large"), ErrorCode.VALUE_TOO_LARGE),
        (OffsetOverflowError(2, 3, 4), ErrorCode.OFFSET_OVERFLOW),
        (EncodingError("bad value"), ErrorCode.ENCODING_ERROR),
        (MalformedEncodingError(), ErrorCode.MALFORMED_ENCODING),
    ])
    def test_codes(self, error, code):
        assert isinstance(error, BuffError)
        assert error.code == code
        assert error.to_dict()["code"] == code.value

    def test_codes_are_failures(self):
        assert all(code > 0 for code in ErrorCode)

    def test_malformed_is_encoding_error(self):
        assert issubclass(MalformedEncodingError, EncodingError)

    def test_str_includes_details_and_cause(self):
        cause = ValueError("inner")
        err = MalformedEncodingError("outer", {"pos": 3}, cause)
        text = str(err)
        assert text.startswith("[MALFORMED_ENCODING] outer")
        assert "Details: {'pos': 3}" in text
        assert "Caused by: inner" in text
        assert err.to_dict() == {
            "code": ErrorCode.MALFORMED_ENCODING.value,
            "message": "outer",
            "details": {"pos": 3},
            "cause": "inner",
        }

    def test_size_exceeded_details(self):
        err = SizeExceededError(10, 2)
        assert err.details == {"size": 10, "remaining": 2}
        assert err.message == "Size greater than stream: 10 > 2"

    def test_offset_overflow_details(self):
        with pytest.raises(OffsetOverflowError) as exc_info:
            Buff(bytes(2)).write(b"\x00\x00", 1)
        assert exc_info.value.details == {"offset": 1, "length": 2, "capacity": 2}

    def test_decoder_failures_chain_cause(self):
        with pytest.raises(MalformedEncodingError) as exc_info:
            Buff.from_base64("@@@@")
        assert exc_info.value.__cause__ is exc_info.value.cause

    def test_errors_propagate_from_stream(self):
        with pytest.raises(BuffError):
            Stream(b"").read(1)


class TestConfig:
    """Test default options and their resolution."""

    def test_defaults(self):
        assert DEFAULT_CONFIG == BuffConfig()
        assert DEFAULT_CONFIG.endian is Endian.BIG
        assert DEFAULT_CONFIG.pad_side is PadSide.LEFT
        assert DEFAULT_CONFIG.hash_type is HashType.SHA256
        assert DEFAULT_CONFIG.random_size == 32
        assert DEFAULT_CONFIG.bech32_version == 0

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.endian = Endian.LITTLE

    @pytest.mark.parametrize("value,expected", [
        (None, Endian.BIG),
        ("be", Endian.BIG),
        ("le", Endian.LITTLE),
        (Endian.LITTLE, Endian.LITTLE),
    ])
    def test_resolve_endian(self, value, expected):
        assert resolve_endian(value) is expected

    def test_resolve_endian_invalid(self):
        with pytest.raises(ValueError):
            resolve_endian("middle")
        with pytest.raises(ValueError):
            Buff.from_hex("0102").to_num("network")

    def test_resolve_pad_side(self):
        assert resolve_pad_side(None) is PadSide.LEFT
        assert resolve_pad_side("right") is PadSide.RIGHT
