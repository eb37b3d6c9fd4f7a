"""
Unit tests for the tokdecode command line.
"""
from pathlib import Path

from tokdecode.cli import build_parser, main


class TestCli:
    """Test the tokdecode command."""

    def test_parser_requires_command(self):
        """Test the parser reads the subcommand and path."""
        parser = build_parser()
        args = parser.parse_args(["normalize", "decoder.json"])
        assert args.command == "normalize"
        assert args.path == "decoder.json"

    def test_normalize_migrates_legacy_config(self, capsys, metaspace_config_file: Path):
        """Test normalize prints a legacy config in canonical layout."""
        assert main(["normalize", str(metaspace_config_file)]) == 0
        out = capsys.readouterr().out.strip()
        assert out == '{"type":"Metaspace","replacement":"▁","prepend_scheme":"always","split":true}'

    def test_decode_tokens(self, capsys, metaspace_config_file: Path):
        """Test decode prints the joined text."""
        assert main(["decode", str(metaspace_config_file), "▁Hey", "▁friend!"]) == 0
        assert capsys.readouterr().out.strip() == "Hey friend!"

    def test_decode_chain(self, capsys, metaspace_config_file: Path):
        """Test --chain prints one decoded piece per line."""
        assert main(["decode", "--chain", str(metaspace_config_file), "▁Hey", "▁friend!"]) == 0
        assert capsys.readouterr().out.rstrip("\n").split("\n") == ["Hey", " friend!"]

    def test_decode_ids(self, capsys, model_dir: Path):
        """Test --ids decodes through the tokenizer.json vocabulary."""
        assert main(["decode", "--ids", str(model_dir), "0", "1", "2", "3"]) == 0
        assert capsys.readouterr().out.strip() == "Hello world!"

    def test_missing_file_fails(self, temp_dir: Path):
        """Test a missing config exits with status 1."""
        assert main(["normalize", str(temp_dir / "missing.json")]) == 1

    def test_invalid_config_fails(self, temp_dir: Path):
        """Test a config that matches no decoder exits with status 1."""
        path = temp_dir / "bad.json"
        path.write_text("{}", encoding="utf-8")
        assert main(["normalize", str(path)]) == 1
