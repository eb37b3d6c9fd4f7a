"""
ByteLevel decoding: undoes the GPT-2 byte-to-unicode mapping.
"""

from __future__ import annotations

from typing import Literal

from tokdecode.decoders.base import Decoder


def _make_byte_encoder() -> dict[int, str]:
    """
    Create the GPT-2 style byte encoder.

    Printable bytes map to themselves; every other byte maps to a code point
    from 256 upwards, in byte order. The space character (0x20) maps to 'Ġ'
    (U+0120).
    """
    byte_encoder: dict[int, str] = {}
    n = 0

    for i in range(256):
        if 33 <= i <= 126 or 161 <= i <= 172 or 174 <= i <= 255:
            byte_encoder[i] = chr(i)
        else:
            byte_encoder[i] = chr(256 + n)
            n += 1

    return byte_encoder


BYTE_ENCODER = _make_byte_encoder()
BYTE_DECODER = {v: k for k, v in BYTE_ENCODER.items()}


def _token_bytes(token: str) -> bytes:
    byte_arr = bytearray()
    for char in token:
        byte_val = BYTE_DECODER.get(char)
        if byte_val is None:
            # Not a byte-level token (e.g. an added special token).
            return token.encode("utf-8")
        byte_arr.append(byte_val)
    return bytes(byte_arr)


class ByteLevel(Decoder):
    """
    Reassemble the original text from byte-level tokens.

    Only ``decode_chain`` matters here; ``add_prefix_space``, ``trim_offsets``
    and ``use_regex`` are carried so that a configuration shared with the
    pre-tokenizer round-trips unchanged.
    """

    type: Literal["ByteLevel"] = "ByteLevel"
    add_prefix_space: bool = True
    trim_offsets: bool = True
    use_regex: bool = True

    def decode_chain(self, tokens: list[str]) -> list[str]:
        if not tokens:
            return []
        data = b"".join(_token_bytes(token) for token in tokens)
        return [data.decode("utf-8", errors="replace")]
