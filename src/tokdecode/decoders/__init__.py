"""
Decoding strategies that turn token strings back into text.

Every strategy can be used on its own or lifted into a
:class:`DecoderWrapper`, the closed sum type used wherever "any decoder" is
accepted, and which owns the (de)serialization contract.
"""

from tokdecode.decoders.base import Decoder
from tokdecode.decoders.bpe import BPEDecoder
from tokdecode.decoders.byte_fallback import ByteFallback
from tokdecode.decoders.byte_level import ByteLevel
from tokdecode.decoders.ctc import CTC
from tokdecode.decoders.fuse import Fuse
from tokdecode.decoders.metaspace import Metaspace
from tokdecode.decoders.replace import Replace, ReplacePattern
from tokdecode.decoders.sequence import Sequence
from tokdecode.decoders.strip import Strip
from tokdecode.decoders.wordpiece import WordPiece
from tokdecode.decoders.wrapper import DECODER_CLASSES, AnyDecoder, DecoderWrapper

__all__ = [
    "AnyDecoder",
    "BPEDecoder",
    "ByteFallback",
    "ByteLevel",
    "CTC",
    "DECODER_CLASSES",
    "Decoder",
    "DecoderWrapper",
    "Fuse",
    "Metaspace",
    "Replace",
    "ReplacePattern",
    "Sequence",
    "Strip",
    "WordPiece",
]
