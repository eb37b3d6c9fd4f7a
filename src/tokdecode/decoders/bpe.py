from __future__ import annotations

from typing import Any, Literal

from pydantic import model_validator

from tokdecode.decoders.base import Decoder

# Discriminant written by older releases.
_LEGACY_TYPE = "BPEDecoder"


class BPEDecoder(Decoder):
    """Turns the end-of-word ``suffix`` back into whitespace."""

    type: Literal["BPE"] = "BPE"
    suffix: str = "</w>"

    @model_validator(mode="before")
    @classmethod
    def _accept_legacy_type(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("type") == _LEGACY_TYPE:
            data = {**data, "type": "BPE"}
        return data

    def decode_chain(self, tokens: list[str]) -> list[str]:
        last = len(tokens) - 1
        return [
            token.replace(self.suffix, "" if i == last else " ")
            for i, token in enumerate(tokens)
        ]
