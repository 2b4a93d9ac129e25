"""
Test bootstrap:
- Make src/ and tests/ importable when the package is not installed
- Shared buffers and payloads used across the test modules
"""
import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
TESTS = ROOT / "tests"

for path in (SRC, TESTS):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))


@pytest.fixture
def deadbeef():
    """Four byte buffer 'deadbeef'."""
    from bytebuff import Buff
    return Buff.from_hex("deadbeef")


@pytest.fixture
def payload_20():
    """Deterministic 20-byte payload (address sized)."""
    return bytes(range(20))


@pytest.fixture
def payload_32():
    """Deterministic 32-byte payload (hash sized)."""
    return bytes(range(100, 132))


@pytest.fixture
def framed_message():
    """
    A length-prefixed record: 1-byte tag, varint-prefixed name, 4-byte
    big-endian amount, varint-prefixed memo.
    """
    from bytebuff import Buff
    return Buff.join([
        Buff.of(0x01),
        Buff.from_str("alice").prefix_size(),
        Buff.from_num(1000, 4),
        Buff.from_str("x" * 300).prefix_size(),
    ])
