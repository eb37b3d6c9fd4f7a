"""
Basic import tests to verify all modules can be imported.
"""


def test_import_package():
    """Test the package exports import."""
    from tokdecode import (  # noqa: F401
        ConfigurationMismatch,
        DecoderWrapper,
        Sequence,
        load_decoder,
    )


def test_import_decoders():
    """Test every decoder class imports."""
    from tokdecode.decoders import (  # noqa: F401
        CTC,
        BPEDecoder,
        ByteFallback,
        ByteLevel,
        Fuse,
        Metaspace,
        Replace,
        Strip,
        WordPiece,
    )


def test_import_detokenizer():
    """Test the detokenizer module imports."""
    from tokdecode.detokenizer import (  # noqa: F401
        Detokenizer,
        StreamingDetokenizer,
        load_detokenizer,
    )
