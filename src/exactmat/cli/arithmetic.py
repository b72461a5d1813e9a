"""CLI wiring for two-operand arithmetic."""

from __future__ import annotations

import argparse

from exactmat.cli.utils import emit, parse_matrix


def cmd_add(args: argparse.Namespace) -> int:
    return emit(args, args.lhs + args.rhs)


def cmd_sub(args: argparse.Namespace) -> int:
    return emit(args, args.lhs - args.rhs)


def cmd_mul(args: argparse.Namespace) -> int:
    return emit(args, args.lhs * args.rhs)


def register_subparsers(subparsers: argparse._SubParsersAction) -> None:
    for name, func, help_text in (
        ("add", cmd_add, "elementwise sum"),
        ("sub", cmd_sub, "elementwise difference"),
        ("mul", cmd_mul, "matrix product"),
    ):
        parser = subparsers.add_parser(name, help=help_text)
        parser.add_argument("lhs", type=parse_matrix, help="left operand as JSON rows")
        parser.add_argument("rhs", type=parse_matrix, help="right operand as JSON rows")
        parser.set_defaults(func=func)
