"""
ByteFallback decoding: rebuilds characters a vocabulary stored as raw bytes.
"""

from __future__ import annotations

import re
from typing import Literal

from tokdecode.decoders.base import Decoder

_BYTE_TOKEN = re.compile(r"<0x([0-9A-Fa-f]{2})>")
_REPLACEMENT_CHAR = "�"


def _flush(pending: bytearray, out: list[str]) -> None:
    if not pending:
        return
    try:
        out.append(pending.decode("utf-8"))
    except UnicodeDecodeError:
        out.extend(_REPLACEMENT_CHAR for _ in pending)
    pending.clear()


class ByteFallback(Decoder):
    """
    Convert runs of ``<0xHH>`` tokens back into text.

    A run that is not valid UTF-8 becomes one U+FFFD per byte token; every
    other token passes through untouched.
    """

    type: Literal["ByteFallback"] = "ByteFallback"

    def decode_chain(self, tokens: list[str]) -> list[str]:
        decoded: list[str] = []
        pending = bytearray()
        for token in tokens:
            match = _BYTE_TOKEN.fullmatch(token)
            if match is not None:
                pending.append(int(match.group(1), 16))
                continue
            _flush(pending, decoded)
            decoded.append(token)
        _flush(pending, decoded)
        return decoded
