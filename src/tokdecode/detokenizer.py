"""
Token id to text conversion on top of a configured decoder.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Optional, Sequence

from tokdecode.config import TOKENIZER_FILENAME, read_json
from tokdecode.decoders import Decoder, DecoderWrapper
from tokdecode.errors import DecodeError
from tokdecode.logging import get_logger

logger = get_logger(__name__)

_REPLACEMENT_CHAR = "�"


class Detokenizer:
    """Maps token ids to token strings and runs them through a decoder."""

    def __init__(
        self,
        vocab: dict[str, int],
        decoder: Decoder | DecoderWrapper | None = None,
        special_tokens: Optional[Iterable[str]] = None,
    ):
        """
        Args:
            vocab: Dictionary mapping token strings to token IDs
            decoder: Decoder applied to the token strings; without one the
                tokens are joined with single spaces
            special_tokens: Token strings dropped when skip_special_tokens is set
        """
        self.vocab = vocab
        self.id_to_token: dict[int, str] = {v: k for k, v in vocab.items()}
        self.decoder = DecoderWrapper.wrap(decoder) if decoder is not None else None
        self.special_tokens: set[str] = set(special_tokens or ())

    def convert_ids_to_tokens(
        self,
        token_ids: Sequence[int] | int,
        skip_special_tokens: bool = False,
    ) -> list[str]:
        if isinstance(token_ids, int):
            token_ids = [token_ids]

        tokens: list[str] = []
        for token_id in token_ids:
            if token_id not in self.id_to_token:
                raise ValueError(
                    f"Token ID {token_id} not found in vocabulary. "
                    f"Vocabulary size: {len(self.vocab)}."
                )
            token_str = self.id_to_token[token_id]
            if skip_special_tokens and token_str in self.special_tokens:
                continue
            tokens.append(token_str)
        return tokens

    def decode_tokens(self, tokens: list[str]) -> str:
        if self.decoder is None:
            return " ".join(tokens)
        return self.decoder.decode(tokens)

    def decode(
        self,
        token_ids: Sequence[int] | int,
        skip_special_tokens: bool = True,
    ) -> str:
        """Decode token IDs to text."""
        return self.decode_tokens(
            self.convert_ids_to_tokens(token_ids, skip_special_tokens=skip_special_tokens)
        )

    def stream(self, skip_special_tokens: bool = True) -> "StreamingDetokenizer":
        return StreamingDetokenizer(self, skip_special_tokens=skip_special_tokens)

    @property
    def vocab_size(self) -> int:
        return len(self.vocab)


class StreamingDetokenizer:
    """
    Incremental decoding for generation loops.

    Each new id is decoded together with the ids of the previous segment so
    that decoders which depend on position (leading markers, word prefixes)
    see the same context they would in a full decode. Text ending in an
    incomplete UTF-8 sequence is held back until more ids arrive.
    """

    def __init__(self, detokenizer: Detokenizer, skip_special_tokens: bool = True):
        self.detokenizer = detokenizer
        self.skip_special_tokens = skip_special_tokens
        self.reset()

    def reset(self) -> None:
        """Reset the detokenizer state."""
        self.tokens: list[int] = []
        self.text: str = ""
        self.last_segment: str = ""
        self._context: list[int] = []
        self._pending: list[int] = []
        self._prefix: str = ""

    def _decode(self, token_ids: list[int]) -> str:
        return self.detokenizer.decode(token_ids, skip_special_tokens=self.skip_special_tokens)

    def _emit(self, decoded: str) -> None:
        if not decoded.startswith(self._prefix):
            raise DecodeError(
                f"Streaming decode diverged: {decoded!r} does not extend {self._prefix!r}"
            )
        segment = decoded[len(self._prefix):]
        self.text += segment
        self.last_segment = segment
        self._context = self._pending
        self._pending = []
        self._prefix = self._decode(self._context)

    def add_token(self, token_id: int) -> str:
        """Add a token to the stream and return the newly decoded text."""
        self.tokens.append(token_id)
        self._pending.append(token_id)
        decoded = self._decode(self._context + self._pending)
        if len(decoded) > len(self._prefix) and not decoded.endswith(_REPLACEMENT_CHAR):
            self._emit(decoded)
        else:
            self.last_segment = ""
        return self.last_segment

    def finalize(self) -> str:
        """Flush whatever is still held back, replacement characters included."""
        self.last_segment = ""
        if self._pending:
            self._emit(self._decode(self._context + self._pending))
        return self.last_segment


def _read_vocab(model_config: dict[str, Any]) -> dict[str, int]:
    vocab = model_config.get("vocab", {})
    if isinstance(vocab, list):
        # Unigram models store [piece, score] pairs ordered by id.
        return {entry[0]: idx for idx, entry in enumerate(vocab)}
    return dict(vocab)


def load_detokenizer(model_path: str | Path) -> Detokenizer:
    """
    Build a Detokenizer from a tokenizer.json file or a directory holding one.

    Raises:
        FileNotFoundError: If tokenizer.json is not found
        ValueError: If the vocabulary is missing
        ConfigurationMismatch: If the decoder configuration matches no decoder
    """
    path = Path(model_path)
    if path.is_dir():
        path = path / TOKENIZER_FILENAME
    if not path.exists():
        raise FileNotFoundError(f"tokenizer.json not found at {path}")

    tokenizer_data = read_json(path)

    vocab = _read_vocab(tokenizer_data.get("model", {}))
    if not vocab:
        raise ValueError("Vocabulary not found in tokenizer.json")

    special_tokens: set[str] = set()
    for token_info in tokenizer_data.get("added_tokens", []):
        if isinstance(token_info, dict):
            content = token_info.get("content", "")
            token_id = token_info.get("id")
            if token_id is not None:
                vocab[content] = token_id
                if token_info.get("special", False):
                    special_tokens.add(content)

    decoder_config = tokenizer_data.get("decoder")
    decoder = DecoderWrapper.from_dict(decoder_config) if decoder_config is not None else None
    logger.debug(
        "Loaded detokenizer from %s (vocab=%d, decoder=%s)",
        path,
        len(vocab),
        decoder.decoder_type if decoder is not None else None,
    )
    return Detokenizer(vocab=vocab, decoder=decoder, special_tokens=special_tokens)
