"""Test basic imports from the package."""


def test_main_import():
    """Test that the main package imports successfully."""
    import bytebuff
    assert bytebuff.__version__ == "1.0.0"
    assert hasattr(bytebuff, 'Buff')
    assert hasattr(bytebuff, 'Stream')


def test_codec_import():
    """Test codec module imports."""
    import bytebuff.codec as codec
    assert hasattr(codec, 'encode_varint')
    assert hasattr(codec, 'hash_bytes')


def test_encoding_import():
    """Test encoding module imports."""
    import bytebuff.encoding as encoding
    assert hasattr(encoding, 'bech32_encode')
    assert hasattr(encoding, 'b58chk_decode')


def test_runtime_import():
    """Test runtime module imports."""
    import bytebuff.runtime as runtime
    assert hasattr(runtime, 'BuffError')
    assert hasattr(runtime, 'BuffConfig')


def test_public_api_surface():
    """Test that everything in __all__ resolves."""
    import bytebuff
    for name in bytebuff.__all__:
        assert getattr(bytebuff, name) is not None, name
