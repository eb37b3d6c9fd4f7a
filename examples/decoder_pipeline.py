#!/usr/bin/env python3
"""
Decoder pipeline example.

This example builds a Llama-style decoder chain, saves it, loads it back and
decodes a few tokens with it.
"""

from tokdecode import ByteFallback, DecoderWrapper, Fuse, Replace, Sequence, Strip


def main():
    decoder = DecoderWrapper(
        Sequence(
            decoders=[
                Replace(pattern="▁", content=" "),
                ByteFallback(),
                Fuse(),
                Strip(content=" ", start=1, stop=0),
            ]
        )
    )

    config = decoder.to_json()
    print(f"Config: {config}")

    loaded = DecoderWrapper.from_json(config)
    tokens = ["▁Hello", "▁world", "<0x21>"]
    print(f"Tokens: {tokens}")
    print(f"Chain:  {loaded.decode_chain(tokens)}")
    print(f"Text:   {loaded.decode(tokens)}")


if __name__ == "__main__":
    main()
