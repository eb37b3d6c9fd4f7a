"""
Replace decoding: substitutes a literal string or a regular expression.
"""

from __future__ import annotations

import re
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_serializer, model_validator

from tokdecode.decoders.base import Decoder


class ReplacePattern(BaseModel):
    """Either ``{"String": ...}`` or ``{"Regex": ...}``."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    string: Optional[str] = Field(default=None, alias="String")
    regex: Optional[str] = Field(default=None, alias="Regex")

    @model_validator(mode="before")
    @classmethod
    def _from_plain_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"String": data}
        return data

    @model_validator(mode="after")
    def _exactly_one(self) -> "ReplacePattern":
        if (self.string is None) == (self.regex is None):
            raise ValueError("pattern must hold exactly one of 'String' or 'Regex'")
        if self.regex is not None:
            try:
                re.compile(self.regex)
            except re.error as exc:
                raise ValueError(f"invalid regex {self.regex!r}: {exc}") from exc
        return self

    @model_serializer
    def _serialize(self) -> dict[str, str]:
        if self.regex is not None:
            return {"Regex": self.regex}
        return {"String": self.string}


class Replace(Decoder):
    """Replace every match of ``pattern`` in each token with ``content``."""

    type: Literal["Replace"] = "Replace"
    pattern: ReplacePattern
    content: str

    _regex: Optional[re.Pattern[str]] = PrivateAttr(default=None)

    def model_post_init(self, __context: Any) -> None:
        if self.pattern.regex is not None:
            self._regex = re.compile(self.pattern.regex)

    def _replace(self, token: str) -> str:
        if self._regex is not None:
            return self._regex.sub(lambda _: self.content, token)
        return token.replace(self.pattern.string, self.content)

    def decode_chain(self, tokens: list[str]) -> list[str]:
        return [self._replace(token) for token in tokens]
