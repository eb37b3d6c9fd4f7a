from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from tokdecode.config import load_decoder
from tokdecode.detokenizer import load_detokenizer
from tokdecode.errors import TokdecodeError
from tokdecode.logging import get_logger, set_level

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="tokdecode",
        description="Inspect decoder configurations and decode tokens.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    normalize = subparsers.add_parser(
        "normalize",
        help="Load a decoder config and print it in canonical layout.",
    )
    normalize.add_argument(
        "path",
        help="Decoder JSON file, tokenizer.json, or model directory.",
    )

    decode = subparsers.add_parser(
        "decode",
        help="Decode token strings (or ids with --ids) to text.",
    )
    decode.add_argument(
        "path",
        help="Decoder JSON file, tokenizer.json, or model directory.",
    )
    decode.add_argument(
        "tokens",
        nargs="*",
        help="Tokens to decode.",
    )
    decode.add_argument(
        "--ids",
        action="store_true",
        help="Treat tokens as integer ids (requires a tokenizer.json).",
    )
    decode.add_argument(
        "--keep-special-tokens",
        action="store_true",
        help="Keep special tokens when decoding ids.",
    )
    decode.add_argument(
        "--chain",
        action="store_true",
        help="Print each decoded piece on its own line instead of the joined text.",
    )
    return parser


def _run_decode(args: argparse.Namespace) -> str:
    if args.ids:
        detokenizer = load_detokenizer(args.path)
        token_ids = [int(token) for token in args.tokens]
        tokens = detokenizer.convert_ids_to_tokens(
            token_ids, skip_special_tokens=not args.keep_special_tokens
        )
        if args.chain and detokenizer.decoder is not None:
            return "\n".join(detokenizer.decoder.decode_chain(tokens))
        return detokenizer.decode_tokens(tokens)

    decoder = load_decoder(args.path)
    if args.chain:
        return "\n".join(decoder.decode_chain(args.tokens))
    return decoder.decode(args.tokens)


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.debug:
        set_level(logging.DEBUG)

    try:
        if args.command == "normalize":
            output = load_decoder(args.path).to_json()
        else:
            output = _run_decode(args)
    except (FileNotFoundError, TokdecodeError, ValueError) as exc:
        logger.error("%s", exc)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
