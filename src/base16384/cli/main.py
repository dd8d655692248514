"""Main CLI entry point for base16384."""

from __future__ import annotations

import argparse
import binascii
import logging
import sys

from .. import __version__
from ..codec import decode, encode
from ..exceptions import Base16384Error
from .analyze import analyze_length

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the base16384 CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="base16384: Base16384 Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  base16384 --encode "hello"              Encode UTF-8 text
  base16384 --encode 00ff10 --hex         Encode hex bytes
  base16384 --decode "栙擆羼㴅"            Decode to UTF-8 text
  base16384 --analyze 1000                Show layout for 1000 input bytes
  base16384 --version                     Show version
        """,
    )

    action = parser.add_mutually_exclusive_group()
    action.add_argument("--encode", metavar="TEXT", type=str, help="Encode TEXT")
    action.add_argument("--decode", metavar="TEXT", type=str, help="Decode Base16384 TEXT")
    action.add_argument(
        "--analyze",
        metavar="LENGTH",
        type=int,
        help="Show the encoded layout for an input of LENGTH bytes",
    )

    parser.add_argument(
        "--hex",
        action="store_true",
        help="Treat --encode input and --decode output as hexadecimal",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--version",
        action="version",
        version=f"base16384 {__version__}",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        _setup_logging(logging.DEBUG)

    try:
        if args.encode is not None:
            print(_encode_text(args.encode, args.hex))
            return 0

        if args.decode is not None:
            print(_decode_text(args.decode, args.hex))
            return 0

        if args.analyze is not None:
            if args.analyze < 0:
                print(f"Error: LENGTH must be >= 0, got {args.analyze}", file=sys.stderr)
                return 1
            analyze_length(args.analyze)
            return 0
    except (Base16384Error, ValueError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # If no command specified, show help
    parser.print_help()
    return 0


def _encode_text(text: str, as_hex: bool) -> str:
    data = binascii.unhexlify(text) if as_hex else text.encode("utf-8")
    encoded = encode(data)
    logger.debug("Encoded %d bytes into %d bytes", len(data), len(encoded))
    return encoded.decode("utf-16-be")


def _decode_text(text: str, as_hex: bool) -> str:
    encoded = text.encode("utf-16-be")
    data = decode(encoded)
    logger.debug("Decoded %d bytes into %d bytes", len(encoded), len(data))
    if as_hex:
        return data.hex()
    return data.decode("utf-8", errors="replace")


def _setup_logging(level: int) -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root = logging.getLogger("base16384")
    root.addHandler(handler)
    root.setLevel(level)


if __name__ == "__main__":
    sys.exit(main())
