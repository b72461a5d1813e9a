"""CLI wiring for single-matrix operations: determinant, inverse and transforms."""

from __future__ import annotations

import argparse

from exactmat.cli.utils import check_order, emit, parse_matrix


def cmd_det(args: argparse.Namespace) -> int:
    check_order(args, args.matrix)
    return emit(args, args.matrix.det())


def cmd_inv(args: argparse.Namespace) -> int:
    check_order(args, args.matrix)
    return emit(args, args.matrix.inv())


def cmd_adj(args: argparse.Namespace) -> int:
    check_order(args, args.matrix)
    return emit(args, args.matrix.adjugate())


def cmd_transpose(args: argparse.Namespace) -> int:
    return emit(args, args.matrix.transpose())


def cmd_minor(args: argparse.Namespace) -> int:
    return emit(args, args.matrix.minor(args.row, args.col))


def register_subparsers(subparsers: argparse._SubParsersAction) -> None:
    matrix_help = "matrix as JSON rows, e.g. '[[1,2],[3,4]]'"

    det = subparsers.add_parser("det", help="exact determinant")
    det.add_argument("matrix", type=parse_matrix, help=matrix_help)
    det.set_defaults(func=cmd_det)

    inv = subparsers.add_parser("inv", help="integer inverse (truncating division)")
    inv.add_argument("matrix", type=parse_matrix, help=matrix_help)
    inv.set_defaults(func=cmd_inv)

    adj = subparsers.add_parser("adj", help="adjugate (transposed cofactor matrix)")
    adj.add_argument("matrix", type=parse_matrix, help=matrix_help)
    adj.set_defaults(func=cmd_adj)

    transpose = subparsers.add_parser("transpose", help="transpose")
    transpose.add_argument("matrix", type=parse_matrix, help=matrix_help)
    transpose.set_defaults(func=cmd_transpose)

    minor = subparsers.add_parser("minor", help="drop one row and one column")
    minor.add_argument("matrix", type=parse_matrix, help=matrix_help)
    minor.add_argument("--row", type=int, required=True, help="row to exclude (0-based)")
    minor.add_argument("--col", type=int, required=True, help="column to exclude (0-based)")
    minor.set_defaults(func=cmd_minor)
