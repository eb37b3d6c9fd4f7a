"""
tokdecode: decoding pipelines that turn token strings back into text.
"""

from tokdecode.config import load_decoder, save_decoder
from tokdecode.decoders import (
    CTC,
    BPEDecoder,
    ByteFallback,
    ByteLevel,
    Decoder,
    DecoderWrapper,
    Fuse,
    Metaspace,
    Replace,
    Sequence,
    Strip,
    WordPiece,
)
from tokdecode.detokenizer import Detokenizer, StreamingDetokenizer, load_detokenizer
from tokdecode.errors import ConfigurationMismatch, DecodeError, TokdecodeError

__version__ = "0.1.0"

__all__ = [
    "BPEDecoder",
    "ByteFallback",
    "ByteLevel",
    "CTC",
    "ConfigurationMismatch",
    "DecodeError",
    "Decoder",
    "DecoderWrapper",
    "Detokenizer",
    "Fuse",
    "Metaspace",
    "Replace",
    "Sequence",
    "StreamingDetokenizer",
    "Strip",
    "TokdecodeError",
    "WordPiece",
    "load_decoder",
    "load_detokenizer",
    "save_decoder",
]
