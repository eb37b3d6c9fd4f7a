from __future__ import annotations

from itertools import groupby
from typing import Literal

from tokdecode.decoders.base import Decoder
from tokdecode.decoders.wordpiece import cleanup as wordpiece_cleanup


class CTC(Decoder):
    """Collapses CTC output: merges repeats, drops padding, restores word breaks."""

    type: Literal["CTC"] = "CTC"
    pad_token: str = "<pad>"
    word_delimiter_token: str = "|"
    cleanup: bool = True

    def decode_chain(self, tokens: list[str]) -> list[str]:
        decoded: list[str] = []
        for token, _ in groupby(tokens):
            token = token.replace(self.pad_token, "")
            if self.cleanup:
                token = wordpiece_cleanup(token).replace(self.word_delimiter_token, " ")
            if token:
                decoded.append(token)
        return decoded
