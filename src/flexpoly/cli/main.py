"""Main CLI entry point for flexpoly."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from .. import __version__
from ..cli.analyze import analyze_polyline
from ..codec.decoder import decode
from ..codec.encoder import encode
from ..codec.header import peek_header
from ..config import EncodingOptions
from ..exceptions import FlexpolyError


def _load_coordinates(source: str) -> Any:
    if source == "-":
        return json.load(sys.stdin)
    with Path(source).open(encoding="utf-8") as handle:
        return json.load(handle)


def _run_encode(args: argparse.Namespace) -> int:
    if args.encode != "-" and not Path(args.encode).exists():
        print(f"Error: File not found: {args.encode}", file=sys.stderr)
        return 1

    try:
        coordinates = _load_coordinates(args.encode)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.encode}: {e}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Cannot read {args.encode}: {e}", file=sys.stderr)
        return 1

    if not isinstance(coordinates, list):
        print("Error: Expected a JSON array of [lat, lng] or [lat, lng, z] arrays", file=sys.stderr)
        return 1

    options = EncodingOptions(
        precision=args.precision,
        third_dimension=args.third_dim,
        third_dimension_precision=args.third_dim_precision,
    )
    print(encode(coordinates, options=options))
    return 0


def _run_decode(args: argparse.Namespace) -> int:
    header = peek_header(args.decode)
    points = decode(args.decode)
    if header.has_third_dimension:
        rows = [[p.lat, p.lng, p.z] for p in points]
    else:
        rows = [[p.lat, p.lng] for p in points]
    print(json.dumps(rows))
    return 0


def main() -> int:
    """Main entry point for the flexpoly CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="flexpoly: Flexible Polyline Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  flexpoly --encode route.json                      Encode a JSON array of [lat, lng]
  flexpoly --encode - --third-dim altitude \\
           --third-dim-precision 2 < track.json     Encode [lat, lng, alt] from stdin
  flexpoly --decode BFoz5xJ67i1B1B7PzIhaxL7Y        Decode to JSON
  flexpoly --inspect BFoz5xJ67i1B1B7PzIhaxL7Y       Show header and size breakdown
  flexpoly --version                                Show version
        """,
    )

    action = parser.add_mutually_exclusive_group()
    action.add_argument(
        "--encode",
        metavar="FILE",
        type=str,
        help="Encode coordinates from a JSON file ('-' for stdin)",
    )
    action.add_argument(
        "--decode",
        metavar="POLYLINE",
        type=str,
        help="Decode a polyline and print its coordinates as JSON",
    )
    action.add_argument(
        "--inspect",
        metavar="POLYLINE",
        type=str,
        help="Show the header and size breakdown of a polyline",
    )

    parser.add_argument(
        "--precision",
        type=int,
        default=5,
        help="Decimal digits kept for latitude/longitude (0-15, default 5)",
    )
    parser.add_argument(
        "--third-dim",
        type=str,
        default="absent",
        help="Third dimension kind: absent, level, altitude, elevation, "
        "reserved1, reserved2, custom1, custom2 (default absent)",
    )
    parser.add_argument(
        "--third-dim-precision",
        type=int,
        default=0,
        help="Decimal digits kept for the third dimension (0-15, default 0)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"flexpoly {__version__}",
    )

    args = parser.parse_args()

    try:
        if args.encode:
            return _run_encode(args)
        if args.decode is not None:
            return _run_decode(args)
        if args.inspect is not None:
            analyze_polyline(args.inspect)
            return 0
    except FlexpolyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
