"""
Metaspace decoding (SentencePiece style word boundaries).
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, model_validator

from tokdecode.decoders.base import Decoder

PrependScheme = Literal["always", "never", "first"]


class Metaspace(Decoder):
    """
    Replace the ``replacement`` marker with spaces.

    Markers in the first token are dropped instead of becoming spaces unless
    ``prepend_scheme`` is ``"never"``.

    Older configurations describe the prepend behavior with a boolean
    ``add_prefix_space``; it is translated to ``prepend_scheme`` on load and
    never written back. Both fields may appear together only when they agree.
    """

    type: Literal["Metaspace"] = "Metaspace"
    replacement: str = Field(min_length=1, max_length=1)
    prepend_scheme: PrependScheme = "always"
    split: bool = True

    @model_validator(mode="before")
    @classmethod
    def _migrate_add_prefix_space(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        add_prefix_space = data.pop("add_prefix_space", None)
        if add_prefix_space is not None and not isinstance(add_prefix_space, bool):
            raise ValueError("add_prefix_space must be a boolean")

        prepend_scheme = data.get("prepend_scheme")
        if prepend_scheme is None:
            data["prepend_scheme"] = "never" if add_prefix_space is False else "always"
        elif add_prefix_space is not None and add_prefix_space != (prepend_scheme != "never"):
            raise ValueError(
                f"add_prefix_space={add_prefix_space} contradicts prepend_scheme={prepend_scheme!r}"
            )
        return data

    def decode_chain(self, tokens: list[str]) -> list[str]:
        decoded: list[str] = []
        for i, token in enumerate(tokens):
            if i == 0 and self.prepend_scheme != "never":
                token = token.replace(self.replacement, "")
            decoded.append(token.replace(self.replacement, " "))
        return decoded
