"""Command-line front end for the Goedel number encoder.

    goedel 9 81 230                  # 512, 768, 108
    goedel 230 --offset 1            # 3240
    goedel 230 --reverse             # 675
    goedel --range 0 1000 --collisions
    goedel --range 1 5000 --plot growth.png
"""

from __future__ import annotations

import argparse
import logging
import sys

from .cache import PowerCache
from .config import DEFAULT_OFFSET, lift_int_str_limit
from .encoder import as_non_negative_int, encode_many
from .errors import InvalidArgument

logger = logging.getLogger(__name__)


def _parse_int(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise InvalidArgument("n", token) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="goedel", description="Calculate Goedel numbers of non-negative integers")
    parser.add_argument("numbers", nargs="*", help="Integers to encode")
    parser.add_argument("--offset", type=int, default=DEFAULT_OFFSET, help="Added to every digit before exponentiation")
    parser.add_argument("--reverse", action="store_true", help="Pair primes with digits right to left")
    parser.add_argument("--range", nargs=2, type=int, metavar=("START", "STOP"), help="Encode START <= n < STOP")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--collisions", action="store_true", help="Report inputs that share a Goedel number")
    mode.add_argument("--plot", nargs="?", const="", metavar="FILE", help="Plot encoding length (saved to FILE if given)")
    parser.add_argument("--no-progress", action="store_true", help="Disable the progress bar")
    parser.add_argument("-q", "--quiet", action="store_true", help="Print bare Goedel numbers, or collision groups without the summary")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def run(args: argparse.Namespace) -> None:
    offset = as_non_negative_int(args.offset, "offset")
    cache = PowerCache()

    if args.range:
        start, stop = args.range
        numbers = list(range(as_non_negative_int(start), stop))
        progress = not args.no_progress
    else:
        numbers = [as_non_negative_int(_parse_int(tok)) for tok in args.numbers]
        progress = False
    logger.debug("encoding %d numbers (offset=%d, reverse=%s)", len(numbers), offset, args.reverse)

    if args.collisions:
        from .analysis import find_collisions

        collisions = find_collisions(numbers, offset, args.reverse, cache, progress)
        for g, ns in sorted(collisions.items()):
            print(f"{g}: {', '.join(map(str, ns))}")
        if not args.quiet:
            print(f"{len(collisions)} colliding encodings among {len(numbers)} inputs")
    elif args.plot is not None:
        from .analysis import plot_growth

        plot_growth(numbers, offset, args.reverse, cache, args.plot or None, progress)
    else:
        for n, g in zip(numbers, encode_many(numbers, offset, args.reverse, cache, progress)):
            print(g if args.quiet else f"{n} -> {g}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        lift_int_str_limit()
    except ValueError as e:
        parser.error(str(e))

    if not args.numbers and not args.range:
        parser.error("give at least one number or --range START STOP")

    try:
        run(args)
    except InvalidArgument as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
