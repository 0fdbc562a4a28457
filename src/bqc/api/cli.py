"""
Command-line interface for BQC.

Thin wrapper over encode/decode for ad-hoc conversion and checking.
"""
from __future__ import annotations

import argparse
import os
import sys

from ..core.codec import decode, encode, series_range, series_tokens
from ..core.errors import BQCError, MalformedToken
from ..core.series import parse_series_label

DEFAULT_VALIDATE_LIMIT = int(os.environ.get("BQC_VALIDATE_LIMIT", "5000"))

# Values listed when no command is given
DEMO_VALUES = [0, 2, 36, 37, 38, 39, 40, 76, 77, 78, 79, 80, 117, 118, 119, 120]


def _parse_series(text: str) -> int:
    """Accept a series index ("27") or a label ("zb")."""
    if text.isascii() and text.isdigit():
        return int(text)
    s, rest = parse_series_label(text)
    if rest:
        raise MalformedToken(f"Not a series label: {text!r}")
    return s


def cmd_demo(args: argparse.Namespace) -> int:
    """Print a few sample conversions."""
    for n in DEMO_VALUES:
        token = encode(n)
        print(f"{n:>4} -> {token:<10} -> {decode(token)}")
    return 0


def cmd_encode(args: argparse.Namespace) -> int:
    """Encode integers to tokens."""
    for n in args.numbers:
        token = encode(n)
        print(f"{n} -> {token}" if args.verbose else token)
    return 0


def cmd_decode(args: argparse.Namespace) -> int:
    """Decode tokens to integers."""
    for token in args.tokens:
        n = decode(token)
        print(f"{token} -> {n}" if args.verbose else n)
    return 0


def cmd_table(args: argparse.Namespace) -> int:
    """List every token of one series."""
    s = _parse_series(args.series)
    first, last = series_range(s)
    print(f"Series {s}: {first}..{last}")
    for n, token in zip(range(first, last + 1), series_tokens(s)):
        print(f"  {n:>4}  {token}")
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Run the codec self-test harness."""
    from ..engine.validate import run_validation

    passed = run_validation(args.limit, verbose=args.verbose, log_file=args.log_file)
    return 0 if passed else 1


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="bqc",
        description="Balanced Quad Carry - integer <-> token conversion",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Encode command
    encode_parser = subparsers.add_parser("encode", help="Encode integers")
    encode_parser.add_argument("numbers", nargs="+", type=int, help="Integers >= 0")
    encode_parser.set_defaults(func=cmd_encode)

    # Decode command
    decode_parser = subparsers.add_parser("decode", help="Decode tokens")
    decode_parser.add_argument("tokens", nargs="+", help="Tokens like c7_8_8_8")
    decode_parser.set_defaults(func=cmd_decode)

    # Table command
    table_parser = subparsers.add_parser("table", help="List a whole series")
    table_parser.add_argument("series", help="Series label (a..zz) or index (0..51)")
    table_parser.set_defaults(func=cmd_table)

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Run the self-test harness")
    validate_parser.add_argument(
        "--limit",
        type=int,
        default=DEFAULT_VALIDATE_LIMIT,
        help="Upper bound of the round-trip range (default: %(default)s)",
    )
    validate_parser.add_argument("--log-file", help="Also write the report here")
    validate_parser.set_defaults(func=cmd_validate)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        return cmd_demo(args)

    try:
        return args.func(args)
    except BQCError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
