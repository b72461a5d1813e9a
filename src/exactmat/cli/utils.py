"""Shared helpers for CLI modules."""

from __future__ import annotations

import argparse
import json

import sympy as sp

from exactmat.model.matrix import Matrix


def pprint_matrix(matrix: sp.Matrix) -> None:
    sp.pprint(matrix, use_unicode=True)  # type: ignore[operator]


def parse_matrix(text: str) -> Matrix:
    """argparse ``type=`` hook turning a JSON array of integer rows into a Matrix."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise argparse.ArgumentTypeError(f"not valid JSON: {exc.msg}") from exc
    if not isinstance(data, list) or not all(isinstance(row, list) for row in data):
        raise argparse.ArgumentTypeError("expected a JSON array of rows, e.g. [[1,2],[3,4]]")
    try:
        return Matrix.from_rows(data)
    except (TypeError, ValueError, OverflowError) as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def emit(args: argparse.Namespace, result: Matrix | int) -> int:
    if args.json:
        print(json.dumps(result.to_rows() if isinstance(result, Matrix) else result))
    elif isinstance(result, Matrix):
        pprint_matrix(result.to_sympy())
    else:
        print(result)
    return 0


def check_order(args: argparse.Namespace, matrix: Matrix) -> None:
    if args.max_order is not None and matrix.rows > args.max_order:
        raise SystemExit(f"matrix order {matrix.rows} exceeds --max-order {args.max_order}")
