"""Main CLI entry point for oscwire."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .. import __version__
from ..exceptions import OscwireError
from .commands import dump_file, dump_hex, encode_command

logger = logging.getLogger("oscwire")


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the oscwire CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="oscwire",
        description="oscwire: Open Sound Control message codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  oscwire --dump message.bin                 Dump a raw message file
  oscwire --hex 2f70696e670000002c000000     Dump a message given as hex
  oscwire --encode /mixer/volume if 3 0.5    Encode a message, print hex
  oscwire --version                          Show version
        """,
    )

    parser.add_argument(
        "--dump",
        metavar="FILE",
        type=str,
        help="Print a one-line dump of the raw message in FILE",
    )

    parser.add_argument(
        "--hex",
        metavar="HEX",
        type=str,
        help="Print a one-line dump of a message given as hex",
    )

    parser.add_argument(
        "--encode",
        metavar="ARG",
        nargs="+",
        help="Encode ADDRESS TAGS [VALUE ...] and print the bytes as hex",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Require a null-terminated, padded address when decoding",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"oscwire {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        # Handle --dump
        if args.dump:
            file_path = Path(args.dump)
            if not file_path.exists():
                print(f"Error: File not found: {file_path}", file=sys.stderr)
                return 1
            dump_file(file_path, strict=args.strict)
            return 0

        # Handle --hex
        if args.hex:
            dump_hex(args.hex, strict=args.strict)
            return 0

        # Handle --encode
        if args.encode:
            if len(args.encode) < 2:
                print("Error: --encode needs ADDRESS and TAGS", file=sys.stderr)
                return 1
            address, type_tags, *tokens = args.encode
            encode_command(address, type_tags, tokens)
            return 0
    except (OscwireError, ValueError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
