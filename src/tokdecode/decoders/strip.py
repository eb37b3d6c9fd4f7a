from __future__ import annotations

from typing import Literal

from pydantic import Field

from tokdecode.decoders.base import Decoder


class Strip(Decoder):
    """Removes up to ``start`` leading and ``stop`` trailing ``content`` characters from each token."""

    type: Literal["Strip"] = "Strip"
    content: str = Field(default=" ", min_length=1, max_length=1)
    start: int = Field(default=0, ge=0)
    stop: int = Field(default=0, ge=0)

    def _strip(self, token: str) -> str:
        start_cut = 0
        while start_cut < min(self.start, len(token)) and token[start_cut] == self.content:
            start_cut += 1

        stop_cut = len(token)
        while (
            len(token) - stop_cut < self.stop
            and stop_cut > start_cut
            and token[stop_cut - 1] == self.content
        ):
            stop_cut -= 1

        return token[start_cut:stop_cut]

    def decode_chain(self, tokens: list[str]) -> list[str]:
        return [self._strip(token) for token in tokens]
