"""Square integer matrices."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from os import PathLike
from typing import Union

StrPath = Union[str, "PathLike[str]"]


class Matrix:
    """An N x N matrix of integers."""

    __slots__ = ("_rows",)
    __hash__ = None  # mutable

    def __init__(self, data: Iterable[Iterable[int]] = ()) -> None:
        rows = [[operator.index(value) for value in row] for row in data]
        n = len(rows)
        for row in rows:
            if len(row) != n:
                raise ValueError(f"matrix must be square: expected rows of length {n}")
        self._rows = rows

    @classmethod
    def zeros(cls, n: int) -> Matrix:
        """Return an n x n matrix filled with zeros."""
        n = operator.index(n)
        if n < 0:
            raise ValueError("matrix size must not be negative")
        return cls([0] * n for _ in range(n))

    @classmethod
    def load(cls, path: StrPath) -> Matrix:
        """Read a matrix from a text file: its size N, then N*N integers."""
        with open(path, encoding="utf-8") as handle:
            tokens = handle.read().split()
        if not tokens:
            raise ValueError("matrix file is empty")
        try:
            n = int(tokens[0])
            values = [int(token) for token in tokens[1:]]
        except ValueError as exc:
            raise ValueError(f"malformed matrix file: {exc}") from None
        if n < 0:
            raise ValueError("matrix size must not be negative")
        if len(values) < n * n:
            raise ValueError(f"matrix file holds {len(values)} values, expected {n * n}")
        return cls(values[i * n:(i + 1) * n] for i in range(n))

    @property
    def size(self) -> int:
        """The dimension N of the matrix."""
        return len(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def _check_index(self, i: int, j: int, message: str) -> None:
        n = len(self._rows)
        if not (0 <= i < n and 0 <= j < n):
            raise IndexError(message)

    @staticmethod
    def _split_key(key: tuple[int, int]) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("matrix indices must be a pair (row, column)")
        return operator.index(key[0]), operator.index(key[1])

    def __getitem__(self, key: tuple[int, int]) -> int:
        i, j = self._split_key(key)
        self._check_index(i, j, "Index out of bounds")
        return self._rows[i][j]

    def __setitem__(self, key: tuple[int, int], value: int) -> None:
        i, j = self._split_key(key)
        self._check_index(i, j, "Index out of bounds")
        self._rows[i][j] = operator.index(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    def _require_same_size(self, other: Matrix) -> None:
        if len(self) != len(other):
            raise ValueError(f"matrix sizes differ: {len(self)} and {len(other)}")

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_size(other)
        return Matrix(
            [a + b for a, b in zip(mine, theirs)]
            for mine, theirs in zip(self._rows, other._rows)
        )

    def __mul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_size(other)
        columns = list(zip(*other._rows))
        return Matrix(
            [sum(a * b for a, b in zip(row, column)) for column in columns]
            for row in self._rows
        )

    def rows(self) -> Iterator[tuple[int, ...]]:
        """Yield each row as a tuple."""
        for row in self._rows:
            yield tuple(row)

    def sum_diagonal_major(self) -> int:
        """Sum of the diagonal from top-left to bottom-right."""
        return sum(row[i] for i, row in enumerate(self._rows))

    def sum_diagonal_minor(self) -> int:
        """Sum of the diagonal from top-right to bottom-left."""
        return sum(row[-1 - i] for i, row in enumerate(self._rows))

    def swap_rows(self, r1: int, r2: int) -> None:
        """Exchange rows r1 and r2 in place."""
        r1, r2 = operator.index(r1), operator.index(r2)
        self._check_index(r1, r2, "Row index out of bounds")
        self._rows[r1], self._rows[r2] = self._rows[r2], self._rows[r1]

    def swap_cols(self, c1: int, c2: int) -> None:
        """Exchange columns c1 and c2 in place."""
        c1, c2 = operator.index(c1), operator.index(c2)
        self._check_index(c1, c2, "Column index out of bounds")
        for row in self._rows:
            row[c1], row[c2] = row[c2], row[c1]

    def __str__(self) -> str:
        return "".join(
            "".join(f"{value} " for value in row) + "\n" for row in self._rows
        )

    def __repr__(self) -> str:
        return f"Matrix({self._rows!r})"

    def copy(self) -> Matrix:
        """Return an independent copy."""
        return Matrix(self._rows)