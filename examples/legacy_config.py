#!/usr/bin/env python3
"""
Legacy configuration example.

Decoder configurations written by older releases still load; saving them
writes the current layout.
"""

from tokdecode import ConfigurationMismatch, DecoderWrapper


def main():
    old = '{"type":"Metaspace","replacement":"▁","add_prefix_space":true}'
    decoder = DecoderWrapper.from_json(old)
    print(f"Old: {old}")
    print(f"New: {decoder.to_json()}")
    print(f"Decoded: {decoder.decode(['▁Hey', '▁friend!'])}")

    try:
        DecoderWrapper.from_json('{"replacement":"▁"}')
    except ConfigurationMismatch as exc:
        print(f"Rejected: {exc}")


if __name__ == "__main__":
    main()
