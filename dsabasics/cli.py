"""Command-line front end: primality checks and frequency counts."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from dsabasics.arith import is_prime
from dsabasics.search import count_frequency

DEFAULT_VALUES = (2, 2, 2, 3, 4, 5, 6, 6, 6, 6, 6, 6, 8, 9, 10)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dsabasics", description="Small data-structure and algorithm exercises."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    prime = commands.add_parser("prime", help="tell whether a number is prime")
    prime.add_argument("number", type=int)

    frequency = commands.add_parser(
        "frequency", help="count an element in a sorted list of integers"
    )
    frequency.add_argument("element", type=int)
    frequency.add_argument(
        "values",
        type=int,
        nargs="*",
        help="sorted integers to search (a built-in list when omitted)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command given in ``argv`` and return the exit status."""
    args = _build_parser().parse_args(argv)
    if args.command == "prime":
        if is_prime(args.number):
            print("Given Number is Prime")
        else:
            print("Given number is Not a Prime")
        return 0

    values = sorted(args.values) if args.values else list(DEFAULT_VALUES)
    count = count_frequency(values, args.element)
    print(f"The frequency of element {args.element} is: {count}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())