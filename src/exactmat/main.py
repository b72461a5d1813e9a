"""Command-line interface for the exactmat integer matrix library.

The parser definitions are delegated to the individual CLI modules under
``exactmat.cli`` so the entry point stays lightweight.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from exactmat.cli import algebra, arithmetic
from exactmat.core.errors import IntegerOverflow, MatrixError, NotInvertible

LOG = logging.getLogger(__name__)

EXIT_DIMENSION = 2
EXIT_NOT_INVERTIBLE = 3
EXIT_OVERFLOW = 4


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="exactmat", description="exact int64 matrix algebra")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--json", action="store_true", help="print results as JSON")
    parser.add_argument(
        "--max-order",
        type=int,
        default=None,
        help="refuse determinant/inverse above this matrix order",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    algebra.register_subparsers(sub)
    arithmetic.register_subparsers(sub)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return int(args.func(args))
    except NotInvertible as exc:
        LOG.debug("command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_NOT_INVERTIBLE
    except IntegerOverflow as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_OVERFLOW
    except MatrixError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_DIMENSION


if __name__ == "__main__":
    raise SystemExit(main())
