from __future__ import annotations

from typing import Literal

from tokdecode.decoders.base import Decoder


class Fuse(Decoder):
    """Joins every token into a single string."""

    type: Literal["Fuse"] = "Fuse"

    def decode_chain(self, tokens: list[str]) -> list[str]:
        if not tokens:
            return []
        return ["".join(tokens)]
