from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from tokdecode.decoders.base import Decoder

if TYPE_CHECKING:
    from tokdecode.decoders.wrapper import DecoderWrapper


class Sequence(Decoder):
    """
    Apply several decoders one after the other.

    The output of each decoder is the input of the next, in declaration order.
    An empty ``decoders`` list returns the tokens unchanged. Any error raised
    by a nested decoder aborts the whole chain.
    """

    type: Literal["Sequence"] = "Sequence"
    decoders: list["DecoderWrapper"]

    def decode_chain(self, tokens: list[str]) -> list[str]:
        tokens = list(tokens)
        for decoder in self.decoders:
            tokens = decoder.decode_chain(tokens)
        return tokens
