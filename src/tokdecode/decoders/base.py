"""
Base class shared by every decoding strategy.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Mapping

from pydantic import BaseModel, ConfigDict, ValidationError

from tokdecode.errors import ConfigurationMismatch

if TYPE_CHECKING:
    from tokdecode.decoders.wrapper import DecoderWrapper


class Decoder(BaseModel, ABC):
    """
    A decoding strategy: maps a list of token strings to a list of strings.

    Subclasses declare a ``type`` field typed as a one-value ``Literal`` that
    names the strategy on the wire, followed by their own parameters in the
    order they are serialized. Instances are immutable.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @abstractmethod
    def decode_chain(self, tokens: list[str]) -> list[str]:
        """Transform ``tokens`` into a new list of strings."""

    def decode(self, tokens: list[str]) -> str:
        """Decode ``tokens`` and concatenate the result into the final text."""
        return "".join(self.decode_chain(tokens))

    @classmethod
    def decoder_type(cls) -> str:
        """The discriminant this strategy is serialized under."""
        return cls.model_fields["type"].default

    def wrap(self) -> "DecoderWrapper":
        """Lift this strategy into a :class:`DecoderWrapper`."""
        from tokdecode.decoders.wrapper import DecoderWrapper

        return DecoderWrapper(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Decoder":
        """
        Build this strategy from its configuration object.

        The ``type`` field is mandatory and must name this strategy. Values
        are validated strictly: ``"1"`` is not an integer and ``0`` is not a
        boolean.

        Raises:
            ConfigurationMismatch: If ``data`` does not fit this strategy's schema.
        """
        if not isinstance(data, Mapping) or "type" not in data:
            raise ConfigurationMismatch()
        try:
            return cls.model_validate(dict(data), strict=True)
        except ValidationError as exc:
            raise ConfigurationMismatch() from exc

    @classmethod
    def from_json(cls, text: str | bytes) -> "Decoder":
        return cls.from_dict(json.loads(text))

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
