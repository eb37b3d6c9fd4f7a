from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from tokdecode.decoders import Decoder, DecoderWrapper
from tokdecode.errors import ConfigurationMismatch
from tokdecode.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_DIR = "configs"
CONFIG_DIR_ENV = "TOKDECODE_CONFIG_DIR"
TOKENIZER_FILENAME = "tokenizer.json"


def resolve_config_path(path: str | Path, config_dir: str | Path | None = None) -> Path:
    """
    Resolve a decoder config path.

    Absolute and existing paths are returned unchanged; otherwise the path is
    looked up under ``config_dir`` (or ``$TOKDECODE_CONFIG_DIR``, default
    ``configs``). Falls back to the original path when nothing matches.
    """
    candidate = Path(path)
    if candidate.is_absolute():
        return candidate
    if candidate.exists():
        return candidate
    base_dir = Path(config_dir or os.getenv(CONFIG_DIR_ENV, DEFAULT_CONFIG_DIR))
    fallback = base_dir / candidate
    if fallback.exists():
        return fallback
    return candidate


def read_json(path: str | Path) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def extract_decoder_config(data: dict[str, Any]) -> dict[str, Any]:
    """
    Return the decoder configuration object held in ``data``.

    ``data`` is either a decoder configuration itself or a full
    tokenizer.json document, whose decoder lives under the ``"decoder"`` key.

    Raises:
        ConfigurationMismatch: If a tokenizer.json carries no decoder.
    """
    if isinstance(data, dict) and "model" in data and "type" not in data:
        decoder_config = data.get("decoder")
        if decoder_config is None:
            raise ConfigurationMismatch("tokenizer.json does not define a decoder")
        return decoder_config
    return data


def load_decoder(path: str | Path, config_dir: str | Path | None = None) -> DecoderWrapper:
    """
    Load a decoder from a JSON file.

    Args:
        path: A decoder config file, a tokenizer.json, or a model directory
            containing tokenizer.json.
        config_dir: Directory searched for relative paths that do not exist.

    Returns:
        DecoderWrapper holding the configured decoder.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigurationMismatch: If the configuration matches no decoder.
    """
    resolved = resolve_config_path(path, config_dir)
    if resolved.is_dir():
        resolved = resolved / TOKENIZER_FILENAME
    if not resolved.exists():
        raise FileNotFoundError(f"Decoder config not found at {resolved}")

    decoder = DecoderWrapper.from_dict(extract_decoder_config(read_json(resolved)))
    logger.debug("Loaded %s decoder from %s", decoder.decoder_type, resolved)
    return decoder


def save_decoder(decoder: Decoder | DecoderWrapper, path: str | Path) -> Path:
    """Write ``decoder`` to ``path`` in canonical layout and return the path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(DecoderWrapper.wrap(decoder).to_json(), encoding="utf-8")
    logger.debug("Saved decoder to %s", path)
    return path
