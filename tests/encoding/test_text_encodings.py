"""
Text encoding tests: base64, base64url, base58check and bech32, through both
the codec modules and the Buff views.
"""

import pytest

from bytebuff import Buff
from bytebuff.encoding import (
    b58chk_decode,
    b58chk_encode,
    b64_decode,
    b64_encode,
    b64url_decode,
    b64url_encode,
    bech32_decode,
    bech32_encode,
)
from bytebuff.runtime.errors import EncodingError, ErrorCode, MalformedEncodingError

SAMPLES = [
    b"",
    b"\x00",
    b"\x00\x00\x01",
    b"abc",
    bytes(range(256)),
    b"\xff" * 33,
]


class TestBase64:
    """Test standard and URL-safe base64."""

    def test_vectors(self):
        assert Buff.from_str("abc").base64 == "YWJj"
        assert Buff.from_hex("fbff").base64 == "+/8="
        assert Buff.from_hex("fbff").b64url == "-_8"
        assert Buff.from_str("ab").to_base64() == "YWI="
        assert Buff.from_str("ab").to_b64url() == "YWI"

    @pytest.mark.parametrize("data", SAMPLES)
    def test_round_trip(self, data):
        assert b64_decode(b64_encode(data)) == data
        assert b64url_decode(b64url_encode(data)) == data
        assert Buff.from_base64(Buff(data).base64) == data
        assert Buff.from_b64url(Buff(data).b64url) == data

    def test_b64url_accepts_padding(self):
        assert b64url_decode("YWI=") == b"ab"
        assert b64url_decode("YWI") == b"ab"

    @pytest.mark.parametrize("text", ["YWJ", "YW=j", "-_8=", "YWJj!", "é"])
    def test_base64_malformed(self, text):
        with pytest.raises(MalformedEncodingError) as exc_info:
            b64_decode(text)
        assert exc_info.value.code == ErrorCode.MALFORMED_ENCODING

    @pytest.mark.parametrize("text", ["+/8=", "Y", "YWJjZ", "YW=", "YWJj!", "a=b"])
    def test_b64url_malformed(self, text):
        with pytest.raises(MalformedEncodingError):
            b64url_decode(text)


class TestBase58Check:
    """Test base58 with checksum."""

    def test_burn_address_vector(self):
        assert Buff(bytes(21)).b58chk == "1111111111111111111114oLvT2"

    @pytest.mark.parametrize("data", SAMPLES)
    def test_round_trip(self, data):
        assert b58chk_decode(b58chk_encode(data)) == data
        assert Buff.from_b58chk(Buff(data).to_b58chk()) == data

    def test_bad_checksum(self):
        with pytest.raises(MalformedEncodingError):
            b58chk_decode("1111111111111111111114oLvT3")

    @pytest.mark.parametrize("text", ["0OIl", "abc", ""])
    def test_malformed(self, text):
        with pytest.raises(MalformedEncodingError):
            Buff.from_b58chk(text)


class TestBech32:
    """Test bech32 with a version word, using BIP-173 vectors."""

    ADDRESS = "bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4"
    PROGRAM = "751e76e8199196d454941c45d1b3a323f1433bd6"

    def test_encode_vector(self):
        assert Buff.from_hex(self.PROGRAM).to_bech32("bc") == self.ADDRESS
        assert Buff.from_hex(self.PROGRAM).to_bech32("bc", 0) == self.ADDRESS

    def test_decode_vector(self):
        payload = bech32_decode(self.ADDRESS)
        assert payload.hrp == "bc"
        assert payload.version == 0
        assert payload.data.hex() == self.PROGRAM

    def test_decode_uppercase(self):
        assert Buff.from_bech32(self.ADDRESS.upper()).hex == self.PROGRAM

    def test_expected_prefix(self):
        assert Buff.from_bech32(self.ADDRESS, hrp="bc").hex == self.PROGRAM
        with pytest.raises(MalformedEncodingError):
            Buff.from_bech32(self.ADDRESS, hrp="tb")

    @pytest.mark.parametrize("size", [0, 1, 20, 32, 50])
    @pytest.mark.parametrize("version", [0, 1, 16])
    def test_round_trip(self, size, version):
        data = bytes((i * 7) & 0xFF for i in range(size))
        text = bech32_encode(data, "bc", version)
        assert bech32_decode(text, "bc") == ("bc", version, data)
        assert Buff.from_bech32(text) == data

    @pytest.mark.parametrize("text", [
        "bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t5",
        "bc1qw508d6qejxtdg4y5r3zarvary0c5xw7Kv8f3t4",
        "bc1",
        "qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4",
        "bc1" + "q" * 100,
    ])
    def test_malformed(self, text):
        with pytest.raises(MalformedEncodingError):
            bech32_decode(text)

    def test_non_string_input(self):
        with pytest.raises(MalformedEncodingError):
            bech32_decode(b"bc1")

    def test_payload_bound(self):
        """Test that 50 bytes is the largest payload under hrp "bc"."""
        data = bytes(range(50))
        text = Buff(data).to_bech32("bc")
        assert len(text) == 90
        assert Buff.from_bech32(text) == data
        with pytest.raises(EncodingError):
            Buff(bytes(51)).to_bech32("bc")

    def test_payload_too_long(self):
        with pytest.raises(EncodingError) as exc_info:
            Buff(bytes(60)).to_bech32("bc")
        assert not isinstance(exc_info.value, MalformedEncodingError)

    @pytest.mark.parametrize("version", [-1, 17, True, "0"])
    def test_invalid_version(self, version):
        with pytest.raises(EncodingError):
            bech32_encode(b"\x00", "bc", version)

    @pytest.mark.parametrize("hrp", ["", "b c", "x" * 84])
    def test_invalid_prefix(self, hrp):
        with pytest.raises(EncodingError):
            bech32_encode(b"\x00", hrp)
