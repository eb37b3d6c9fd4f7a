"""
Unit tests for the config module.

Tests loading decoders from config files, tokenizer.json documents and model
directories, and saving them back in canonical layout.
"""
import json
from pathlib import Path

import pytest

from tokdecode.config import (
    extract_decoder_config,
    load_decoder,
    resolve_config_path,
    save_decoder,
)
from tokdecode.decoders import DecoderWrapper, Fuse, Metaspace, Sequence
from tokdecode.errors import ConfigurationMismatch


class TestLoadDecoder:
    """Test decoder loading from JSON files."""

    def test_load_standalone_config(self, metaspace_config_file: Path):
        """Test loading a standalone decoder config."""
        decoder = load_decoder(metaspace_config_file)
        assert isinstance(decoder.decoder, Metaspace)
        assert decoder.decoder.prepend_scheme == "always"

    def test_load_from_tokenizer_json(self, model_dir: Path):
        """Test loading the decoder entry of a tokenizer.json."""
        decoder = load_decoder(model_dir / "tokenizer.json")
        assert decoder.decoder_type == "Sequence"
        assert decoder.decode(["▁Hello", "▁world"]) == "Hello world"

    def test_load_from_model_directory(self, model_dir: Path):
        """Test loading from a directory holding tokenizer.json."""
        decoder = load_decoder(model_dir)
        assert isinstance(decoder.decoder, Sequence)
        assert len(decoder.decoder.decoders) == 4

    def test_missing_file(self, temp_dir: Path):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_decoder(temp_dir / "missing.json")

    def test_tokenizer_without_decoder(self, temp_dir: Path, sample_tokenizer_data: dict):
        """Test a tokenizer.json with a null decoder is rejected."""
        sample_tokenizer_data["decoder"] = None
        path = temp_dir / "tokenizer.json"
        path.write_text(json.dumps(sample_tokenizer_data), encoding="utf-8")
        with pytest.raises(ConfigurationMismatch):
            load_decoder(path)

    def test_invalid_config(self, temp_dir: Path):
        """Test an unknown decoder type is rejected."""
        path = temp_dir / "bad.json"
        path.write_text('{"type":"Nope"}', encoding="utf-8")
        with pytest.raises(ConfigurationMismatch):
            load_decoder(path)


class TestResolveConfigPath:
    """Test config path resolution."""

    def test_existing_path_unchanged(self, metaspace_config_file: Path):
        """Test an existing path is returned as given."""
        assert resolve_config_path(metaspace_config_file) == metaspace_config_file

    def test_relative_path_uses_config_dir(self, temp_dir: Path, metaspace_config_file: Path):
        """Test a relative path is looked up in the config directory."""
        resolved = resolve_config_path("decoder.json", config_dir=temp_dir)
        assert resolved == temp_dir / "decoder.json"

    def test_relative_path_uses_env(self, monkeypatch, temp_dir: Path, metaspace_config_file: Path):
        """Test TOKDECODE_CONFIG_DIR sets the config directory."""
        monkeypatch.setenv("TOKDECODE_CONFIG_DIR", str(temp_dir))
        decoder = load_decoder("decoder.json")
        assert isinstance(decoder.decoder, Metaspace)

    def test_unresolved_path_falls_back(self, temp_dir: Path):
        """Test an unresolvable path is returned unchanged."""
        assert resolve_config_path("nowhere.json", config_dir=temp_dir) == Path("nowhere.json")


class TestExtractDecoderConfig:
    """Test decoder config extraction."""

    def test_plain_decoder_config(self):
        """Test a decoder config is returned as is."""
        assert extract_decoder_config({"type": "Fuse"}) == {"type": "Fuse"}

    def test_tokenizer_document(self, sample_tokenizer_data: dict):
        """Test the decoder entry is taken from a tokenizer.json document."""
        assert extract_decoder_config(sample_tokenizer_data) == sample_tokenizer_data["decoder"]


class TestSaveDecoder:
    """Test decoder saving."""

    def test_save_writes_canonical_layout(self, temp_dir: Path, metaspace_config_file: Path):
        """Test saving writes compact canonical JSON."""
        path = save_decoder(load_decoder(metaspace_config_file), temp_dir / "out" / "decoder.json")
        assert path.read_text(encoding="utf-8") == (
            '{"type":"Metaspace","replacement":"▁","prepend_scheme":"always","split":true}'
        )

    def test_save_accepts_plain_decoder(self, temp_dir: Path):
        """Test a plain decoder can be saved and loaded back."""
        path = save_decoder(Fuse(), temp_dir / "fuse.json")
        assert load_decoder(path) == DecoderWrapper(Fuse())
