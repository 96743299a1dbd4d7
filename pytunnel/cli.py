#!/usr/bin/env python3
"""
Command line front end

    pytunnel encode [FILE] [--compress]
    pytunnel decode [FILE] [--decompress]

Input defaults to stdin; encoded text goes to stdout followed by a newline,
decoded bytes go to stdout unchanged.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .codec import DecodeError, decode, describe_error, encode
from .utils.compression import compress_data, decompress_data, is_compressed
from .utils.logging_config import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pytunnel",
        description="Encode binary data as chat-safe Base32768 text and back"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    enc = commands.add_parser("encode", help="bytes -> text")
    enc.add_argument("file", nargs="?", help="Input file (default: stdin)")
    enc.add_argument("--compress", action="store_true", help="zlib-compress before encoding")

    dec = commands.add_parser("decode", help="text -> bytes")
    dec.add_argument("file", nargs="?", help="Input file (default: stdin)")
    dec.add_argument("--decompress", action="store_true", help="zlib-inflate after decoding")
    dec.add_argument("--max-size", type=int, default=10 * 1024 * 1024,
                     help="Maximum inflated size in bytes")
    return parser


def _read_input(path: Optional[str]) -> bytes:
    if path is None:
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def run_encode(args) -> int:
    data = _read_input(args.file)
    if args.compress:
        data = compress_data(data)
    text = encode(data)
    logger.debug(f"Encoded {len(data)} bytes into {len(text)} symbols")
    sys.stdout.write(text + "\n")
    return 0


def run_decode(args) -> int:
    try:
        text = _read_input(args.file).decode("utf-8").strip()
    except UnicodeDecodeError as e:
        logger.debug(f"Input is not UTF-8: {e}")
        print("error: input is not UTF-8 text", file=sys.stderr)
        return 1

    try:
        data = decode(text)
    except DecodeError as e:
        logger.debug(f"Decode failed: {e!r}")
        print(f"error: {describe_error(e)}", file=sys.stderr)
        return 1

    if args.decompress:
        if not is_compressed(data):
            print("error: payload is not zlib data", file=sys.stderr)
            return 1
        data = decompress_data(data, args.max_size)
        if data is None:
            print("error: payload is not valid zlib data", file=sys.stderr)
            return 1

    sys.stdout.buffer.write(data)
    sys.stdout.flush()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        configure_logging(logging.DEBUG)

    if args.command == "encode":
        return run_encode(args)
    return run_decode(args)


if __name__ == "__main__":
    sys.exit(main())
