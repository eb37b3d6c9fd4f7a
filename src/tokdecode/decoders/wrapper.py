"""
The closed set of decoders, and the ordered matching used to load them.
"""

from __future__ import annotations

import json
from typing import Any, Mapping, Union

from pydantic import ConfigDict, Field, RootModel, ValidationError, model_validator

from tokdecode.decoders.base import Decoder
from tokdecode.decoders.bpe import BPEDecoder
from tokdecode.decoders.byte_fallback import ByteFallback
from tokdecode.decoders.byte_level import ByteLevel
from tokdecode.decoders.ctc import CTC
from tokdecode.decoders.fuse import Fuse
from tokdecode.decoders.metaspace import Metaspace
from tokdecode.decoders.replace import Replace
from tokdecode.decoders.sequence import Sequence
from tokdecode.decoders.strip import Strip
from tokdecode.decoders.wordpiece import WordPiece
from tokdecode.errors import NO_VARIANT_MATCHED, ConfigurationMismatch
from tokdecode.logging import get_logger

logger = get_logger(__name__)

# Configuration objects are matched against these, first match wins.
DECODER_CLASSES: tuple[type[Decoder], ...] = (
    BPEDecoder,
    ByteLevel,
    WordPiece,
    Metaspace,
    CTC,
    Sequence,
    Replace,
    Fuse,
    Strip,
    ByteFallback,
)

AnyDecoder = Union[
    BPEDecoder,
    ByteLevel,
    WordPiece,
    Metaspace,
    CTC,
    Sequence,
    Replace,
    Fuse,
    Strip,
    ByteFallback,
]


class DecoderWrapper(RootModel):
    """
    Holds exactly one decoder from the closed set and forwards to it.

    Loading a configuration object tries every decoder in
    :data:`DECODER_CLASSES` order and keeps the first one whose schema
    accepts it. The ``type`` field does not short-circuit the search but
    every decoder requires it, so an object without one never matches.
    Field values must already have their JSON type; nothing is coerced.
    """

    model_config = ConfigDict(frozen=True)

    root: AnyDecoder = Field(union_mode="left_to_right")

    @model_validator(mode="before")
    @classmethod
    def _require_discriminant(cls, data: Any) -> Any:
        if isinstance(data, Mapping) and "type" not in data:
            raise ValueError(NO_VARIANT_MATCHED)
        return data

    @classmethod
    def wrap(cls, decoder: Decoder | "DecoderWrapper") -> "DecoderWrapper":
        """Lift ``decoder`` into a wrapper; wrappers are returned as they are."""
        if isinstance(decoder, DecoderWrapper):
            return decoder
        return cls(decoder)

    @property
    def decoder(self) -> Decoder:
        return self.root

    @property
    def decoder_type(self) -> str:
        return self.root.type

    def decode_chain(self, tokens: list[str]) -> list[str]:
        return self.root.decode_chain(tokens)

    def decode(self, tokens: list[str]) -> str:
        return self.root.decode(tokens)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DecoderWrapper":
        """
        Load a decoder from its configuration object.

        Raises:
            ConfigurationMismatch: If no decoder accepts ``data``.
        """
        try:
            wrapper = cls.model_validate(data, strict=True)
        except ValidationError as exc:
            logger.debug("Decoder configuration rejected: %s", exc)
            raise ConfigurationMismatch() from exc
        logger.debug("Loaded %s decoder", wrapper.decoder_type)
        return wrapper

    @classmethod
    def from_json(cls, text: str | bytes) -> "DecoderWrapper":
        return cls.from_dict(json.loads(text))

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


Sequence.model_rebuild()
DecoderWrapper.model_rebuild()
