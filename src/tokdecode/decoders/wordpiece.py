from __future__ import annotations

from typing import Literal

from tokdecode.decoders.base import Decoder

_CLEANUP_REPLACEMENTS = (
    (" .", "."),
    (" ?", "?"),
    (" !", "!"),
    (" ,", ","),
    (" ' ", "'"),
    (" n't", "n't"),
    (" 'm", "'m"),
    (" do not", " don't"),
    (" 's", "'s"),
    (" 've", "'ve"),
    (" 're", "'re"),
)


def cleanup(text: str) -> str:
    """Collapse the spaces English tokenization leaves around punctuation and contractions."""
    for dirty, clean in _CLEANUP_REPLACEMENTS:
        text = text.replace(dirty, clean)
    return text


class WordPiece(Decoder):
    """Joins continuation pieces marked with ``prefix`` onto the previous word."""

    type: Literal["WordPiece"] = "WordPiece"
    prefix: str = "##"
    cleanup: bool = True

    def decode_chain(self, tokens: list[str]) -> list[str]:
        decoded: list[str] = []
        for i, token in enumerate(tokens):
            if i != 0:
                if token.startswith(self.prefix):
                    token = token[len(self.prefix):]
                else:
                    token = f" {token}"
            if self.cleanup:
                token = cleanup(token)
            decoded.append(token)
        return decoded
