"""Main CLI entry point for pgcube."""

from __future__ import annotations

import argparse
import sys

from loguru import logger

from .. import __version__
from ..cli.analyze import analyze_payload, parse_hex
from ..codec.config import CodecConfig
from ..codec.handler import CubeCodec
from ..exceptions import CubeError


def main() -> int:
    """Main entry point for the pgcube CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="pgcube: binary protocol codec for the database cube type",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pgcube --decode 800000033ff0...       Decode a hex payload and show its layout
  pgcube --version                      Show version
        """,
    )

    parser.add_argument(
        "--decode",
        metavar="HEX",
        type=str,
        help="Decode a binary cube payload given as hex and show its layout",
    )

    parser.add_argument(
        "--max-dimensions",
        metavar="N",
        type=int,
        default=None,
        help="Largest dimension count accepted while decoding (default 100)",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log codec diagnostics to stderr",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"pgcube {__version__}",
    )

    args = parser.parse_args()

    if args.verbose:
        logger.remove()
        logger.add(sys.stderr, level="DEBUG")
        logger.enable("pgcube")

    # Handle --decode
    if args.decode is not None:
        try:
            data = parse_hex(args.decode)
        except ValueError as e:
            print(f"Error: invalid hex payload: {e}", file=sys.stderr)
            return 1

        try:
            config = CodecConfig()
            if args.max_dimensions is not None:
                config = CodecConfig(max_dimensions=args.max_dimensions)
            analyze_payload(data, CubeCodec(config))
            return 0
        except (CubeError, ValueError) as e:
            print(f"Error decoding payload: {e}", file=sys.stderr)
            return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
