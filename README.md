# sqmatrix

A small library for square integer matrices, with a command-line demo.

## Installation

    pip install .

## Library use

    from sqmatrix.matrix import Matrix

    m = Matrix([[0, 0, 8], [6, 7, 8], [4, 1, 6]])
    m.size                  # 3 (also len(m))
    m[1, 2]                 # 8
    m[0, 0] = 5             # set a value
    total = m + m           # element-wise sum
    product = m * m         # matrix product
    m.sum_diagonal_major()  # top-left to bottom-right
    m.sum_diagonal_minor()  # top-right to bottom-left
    m.swap_rows(0, 1)       # in place
    m.swap_cols(0, 2)       # in place
    list(m.rows())          # rows as tuples
    other = m.copy()        # independent copy
    other == m              # True
    print(m)                # each value followed by a space, one row per line

Other constructors:

- `Matrix.zeros(n)` builds an n×n matrix of zeros (a negative `n` raises
  `ValueError`).
- `Matrix.load(path)` reads a matrix from a text file (see below).

Errors:

- `Matrix(data)` raises `ValueError` if the rows do not form a square.
- An index outside the matrix, in `m[i, j]`, `swap_rows` or `swap_cols`,
  raises `IndexError`.
- Adding or multiplying matrices of different sizes raises `ValueError`.
- `Matrix.load` raises `OSError` if the file cannot be opened, and
  `ValueError` if it is empty, holds something that is not an integer, gives a
  negative size, or has fewer than `n * n` values.

Matrices are mutable and therefore not hashable.

## File format

The first number is the size `n`, followed by `n * n` integers in row order,
separated by any whitespace. Values past the first `n * n` are ignored.

    3
    1 2 3
    4 5 6
    7 8 9

## Command line

    sqmatrix [FILENAME]

Without a file name the command asks for one (`Enter filename: `). It loads
the matrix and prints it, its sum with itself, its square, both diagonal sums,
and the results of swapping rows 0 and 1, swapping columns 0 and 1, and
setting entry (0, 0) to 999; each of these last three starts again from the
loaded matrix.

If no file name is given, the file cannot be opened or read as a matrix, or
the matrix is too small for the swaps (fewer than two rows), an error is
printed to standard error and the command exits with status 1.

## Tests

    pip install .[test]
    pytest