"""Command line demonstration of matrix operations on a matrix read from a file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from sqmatrix.matrix import Matrix


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sqmatrix",
        description="Load a square matrix from a file and show operations on it.",
    )
    parser.add_argument(
        "filename",
        nargs="?",
        help="matrix file; asked for interactively when omitted",
    )
    return parser


def _ask_filename() -> str:
    answer = input("Enter filename: ").split()
    if not answer:
        raise ValueError("no filename given")
    return answer[0]


def _report(original: Matrix) -> None:
    out = sys.stdout
    out.write("Matrix loaded:\n")
    out.write(str(original))

    out.write("\nMatrix + Matrix:\n")
    out.write(str(original + original))

    out.write("\nMatrix * Matrix:\n")
    out.write(str(original * original))

    out.write(f"\nMajor Diagonal Sum: {original.sum_diagonal_major()}\n")
    out.write(f"Minor Diagonal Sum: {original.sum_diagonal_minor()}\n")

    swapped_rows = original.copy()
    swapped_rows.swap_rows(0, 1)
    out.write("\nAfter swapping rows 0 and 1:\n")
    out.write(str(swapped_rows))

    swapped_cols = original.copy()
    swapped_cols.swap_cols(0, 1)
    out.write("\nAfter swapping cols 0 and 1:\n")
    out.write(str(swapped_cols))

    changed = original.copy()
    changed[0, 0] = 999
    out.write("\nAfter setting (0, 0) to 999:\n")
    out.write(str(changed))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration; return the process exit status."""
    args = _build_parser().parse_args(argv)
    try:
        filename = args.filename if args.filename is not None else _ask_filename()
    except (EOFError, ValueError):
        sys.stdout.write("\n")
        print("error: no filename given", file=sys.stderr)
        return 1

    try:
        matrix = Matrix.load(filename)
    except OSError:
        print("error: Failed to open file.", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    try:
        _report(matrix)
    except IndexError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())