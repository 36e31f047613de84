"""Command-line demo — print the cone boundaries for a cone number and direction.

Usage:
  conespan 4                              # four cones starting at (1, 0)
  conespan 5 0 1                          # five cones starting straight up
  conespan 7 --strategy exact             # exact algebraic boundaries
  conespan 7 --strategy exact --evalf 20  # ... printed as 20-digit decimals
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import Any

import mpmath as mp
import sympy as sp
from dotenv import load_dotenv

from conespan.config import settings
from conespan.engine.registry import create_computer, get_registry
from conespan.utils.direction import Direction

logger = logging.getLogger(__name__)

USAGE_EXIT_STATUS = 1


class _ArgumentParser(argparse.ArgumentParser):
    """argparse that prints the usage line and exits with status 1 on bad input."""

    def error(self, message: str):
        self.print_usage(sys.stdout)
        self.exit(USAGE_EXIT_STATUS, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="conespan",
        description="Compute the boundary directions of n equal cones, counterclockwise.",
    )
    parser.add_argument("cone_number", type=int, help="Number of cones (at least 2)")
    parser.add_argument(
        "direction",
        type=float,
        nargs="*",
        metavar="dx dy",
        help="Initial direction (default: 1 0)",
    )
    parser.add_argument(
        "--strategy",
        choices=get_registry().names(),
        default=None,
        help=f"Boundary computation (default: {settings.default_strategy})",
    )
    parser.add_argument(
        "--evalf",
        type=int,
        nargs="?",
        const=settings.evalf_digits,
        default=None,
        metavar="DIGITS",
        help="Print components as decimals with this many significant digits",
    )
    return parser


# Extra digits carried through evaluation so the last printed digit is rounded.
_GUARD_DIGITS = 10


def format_component(value: Any, digits: int | None = None) -> str:
    """One component as text.

    Without ``digits``, numbers and closed-form radicals print as-is and
    implicit algebraic roots (CRootOf) print as decimals.
    """
    if digits is None:
        if not (isinstance(value, sp.Basic) and value.has(sp.CRootOf)):
            return str(value)
        digits = settings.evalf_digits
    with mp.workdps(digits + _GUARD_DIGITS):
        x = mp.mpf(str(sp.N(value, digits + _GUARD_DIGITS)))
        return mp.nstr(x, digits, strip_zeros=False)


def format_direction(direction: Direction, digits: int | None = None) -> str:
    return f"{format_component(direction.dx, digits)} {format_component(direction.dy, digits)}"


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.cone_number < 2:
        parser.error("The number of cones should be larger than 1!")
    if len(args.direction) not in (0, 2):
        parser.error("the initial direction needs exactly two components")
    if args.evalf is not None and args.evalf < 1:
        parser.error("--evalf needs a positive number of digits")

    try:
        initial_direction = Direction(*args.direction) if args.direction else Direction(1, 0)
    except ValueError as e:
        parser.error(str(e))

    computer = create_computer(args.strategy)
    logger.info(
        "Computing %d cone boundaries from (%s) with %s",
        args.cone_number,
        initial_direction,
        computer.name,
    )
    rays = computer.compute(args.cone_number, initial_direction)

    for i, ray in enumerate(rays):
        print(f"Ray {i}: {format_direction(ray, args.evalf)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
