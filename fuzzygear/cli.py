"""Command line entry point printing the inferred gear."""

from __future__ import annotations

import argparse
import math
import sys

from fuzzygear.shift import GearShift


def _round_half_away(x: float) -> float:
    return math.copysign(math.floor(abs(x) + 0.5), x)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fuzzy gear shift advisor")
    parser.add_argument("-v", type=int, default=0, dest="velocity", help="Velocity (0-200)")
    parser.add_argument("-r", type=int, default=0, dest="rpm", help="Rpm (0-8000)")
    parser.add_argument("-t", type=int, default=0, dest="throttle", help="Throttle (0-100)")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse inputs, infer the gear and print it with its rounded value."""
    args = _build_parser().parse_args(argv)
    gear = GearShift(args.velocity, args.rpm, args.throttle).shift()
    sys.stdout.write(f"{gear:g} {_round_half_away(gear):g}")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())