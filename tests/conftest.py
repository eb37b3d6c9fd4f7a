"""
Pytest configuration and shared fixtures for tokdecode tests.
"""
import json
from pathlib import Path

import pytest

# Llama-style decoder: SentencePiece markers plus byte fallback.
LLAMA_DECODER = {
    "type": "Sequence",
    "decoders": [
        {"type": "Replace", "pattern": {"String": "▁"}, "content": " "},
        {"type": "ByteFallback"},
        {"type": "Fuse"},
        {"type": "Strip", "content": " ", "start": 1, "stop": 0},
    ],
}


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Returns a temporary directory for test output."""
    return tmp_path


@pytest.fixture
def sample_tokenizer_data() -> dict:
    """Returns a minimal tokenizer.json document."""
    return {
        "version": "1.0",
        "added_tokens": [
            {"id": 0, "content": "<s>", "special": True},
        ],
        "normalizer": None,
        "pre_tokenizer": None,
        "model": {
            "type": "BPE",
            "vocab": {
                "<s>": 0,
                "▁Hello": 1,
                "▁world": 2,
                "!": 3,
                "<0xE5>": 4,
                "<0x8F>": 5,
                "<0xAB>": 6,
            },
            "merges": [],
        },
        "decoder": LLAMA_DECODER,
    }


@pytest.fixture
def model_dir(temp_dir: Path, sample_tokenizer_data: dict) -> Path:
    """Returns a model directory containing tokenizer.json."""
    path = temp_dir / "model"
    path.mkdir()
    (path / "tokenizer.json").write_text(
        json.dumps(sample_tokenizer_data, ensure_ascii=False), encoding="utf-8"
    )
    return path


@pytest.fixture
def metaspace_config_file(temp_dir: Path) -> Path:
    """Returns a standalone decoder config written in the legacy Metaspace schema."""
    path = temp_dir / "decoder.json"
    path.write_text(
        json.dumps(
            {"type": "Metaspace", "replacement": "▁", "add_prefix_space": True},
            ensure_ascii=False,
        ),
        encoding="utf-8",
    )
    return path
