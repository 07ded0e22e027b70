################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of dense_linalg
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Whitespace-separated text format for matrices and sample sets.

Multiply problem layout:

    m n l
    <m lines of n values>   matrix A
    <n lines of l values>   matrix B

Matrix layout (also the output format):

    rows cols
    <rows lines of cols values>
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator
from typing import Optional
from typing import TextIO

import numpy as np
from numpy.typing import NDArray

from dense_linalg.errors import InvalidDimensionError
from dense_linalg.errors import MalformedInputError
from dense_linalg.matrix.dense_matrix import DenseMatrix
from dense_linalg.matrix.dense_matrix import Layout


# Significant digits needed for a double to round-trip through text
ROUND_TRIP_DIGITS: int = 17


class TokenStream:
    """Lazily yields whitespace-separated tokens from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._tokens: Iterator[str] = self._iter_tokens(stream)

    @staticmethod
    def _iter_tokens(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def next_token(self) -> Optional[str]:
        """Return the next token, or None when the stream is exhausted."""
        return next(self._tokens, None)


@dataclass(frozen=True)
class MultiplyProblem:
    """Operands of C = A * B, both row-major.

    Attributes:
        a: Left operand, m x n
        b: Right operand, n x l
    """

    a: DenseMatrix
    b: DenseMatrix


def read_dimensions(tokens: TokenStream, names: tuple[str, ...]) -> tuple[int, ...]:
    """Read one positive integer per name.

    A non-numeric token is malformed input reported against the "header"
    at (0, index); a missing or non-positive value is an invalid dimension.
    """
    values: list[int] = []
    for index, name in enumerate(names):
        token: Optional[str] = tokens.next_token()
        if token is None:
            raise InvalidDimensionError(
                f"Invalid dimensions: missing {name}, expected positive integers "
                f"{' '.join(names)}"
            )
        try:
            value: int = int(token)
        except ValueError as exc:
            raise MalformedInputError(
                "header", 0, index, f"{name}={token!r} is not an integer"
            ) from exc
        if value <= 0:
            raise InvalidDimensionError(
                f"Invalid dimensions: {name}={value} must be positive"
            )
        values.append(value)
    return tuple(values)


def read_matrix(
    tokens: TokenStream, rows: int, cols: int, name: str = "M"
) -> DenseMatrix:
    """Read rows * cols finite values in row-major order."""
    if rows <= 0 or cols <= 0:
        raise InvalidDimensionError(
            f"Matrix {name} dimensions must be positive, got {rows}x{cols}"
        )
    # Grows with the tokens actually present, so a short input fails at the
    # first missing value whatever the declared size
    values: list[float] = []
    for i in range(rows):
        for j in range(cols):
            values.append(_read_value(tokens, name, i, j))
    return DenseMatrix(
        rows=rows,
        cols=cols,
        data=np.array(values, dtype=np.float64),
        layout=Layout.ROW_MAJOR,
    )


def read_multiply_problem(stream: TextIO) -> MultiplyProblem:
    """Parse the header "m n l" followed by A (m x n) and B (n x l)."""
    tokens: TokenStream = TokenStream(stream)
    rows_a, shared, cols_b = read_dimensions(tokens, ("m", "n", "l"))
    a: DenseMatrix = read_matrix(tokens, rows_a, shared, "A")
    b: DenseMatrix = read_matrix(tokens, shared, cols_b, "B")
    return MultiplyProblem(a=a, b=b)


def read_sized_matrix(stream: TextIO, name: str = "M") -> DenseMatrix:
    """Parse a matrix preceded by its "rows cols" header."""
    tokens: TokenStream = TokenStream(stream)
    rows, cols = read_dimensions(tokens, ("rows", "cols"))
    return read_matrix(tokens, rows, cols, name)


def read_samples(
    stream: TextIO, name: str = "samples"
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Parse "x y" pairs, one per non-blank line."""
    xs: list[float] = []
    ys: list[float] = []
    for line in stream:
        fields: list[str] = line.split()
        if not fields:
            continue
        row: int = len(xs)
        if len(fields) != 2:
            raise MalformedInputError(
                name, row, min(len(fields), 2), "expected exactly two values"
            )
        xs.append(_parse_value(fields[0], name, row, 0))
        ys.append(_parse_value(fields[1], name, row, 1))
    return np.asarray(xs, dtype=np.float64), np.asarray(ys, dtype=np.float64)


def format_value(value: float, digits: int = ROUND_TRIP_DIGITS) -> str:
    """Format a double with the given number of significant digits."""
    return f"{value:.{digits}g}"


def format_fixed(value: float, decimals: int) -> str:
    """Format a double with a fixed number of decimals."""
    return f"{value:.{decimals}f}"


def format_matrix(matrix: DenseMatrix, digits: int = ROUND_TRIP_DIGITS) -> str:
    """Return the "rows cols" text form of a row-major matrix."""
    matrix.require_layout(Layout.ROW_MAJOR, "matrix")
    lines: list[str] = [f"{matrix.rows} {matrix.cols}"]
    for i in range(matrix.rows):
        row: NDArray[np.float64] = matrix.data[i * matrix.cols : (i + 1) * matrix.cols]
        lines.append(" ".join(format_value(float(value), digits) for value in row))
    return "\n".join(lines) + "\n"


def _read_value(tokens: TokenStream, name: str, row: int, col: int) -> float:
    token: Optional[str] = tokens.next_token()
    if token is None:
        raise MalformedInputError(name, row, col, "unexpected end of input")
    return _parse_value(token, name, row, col)


def _parse_value(token: str, name: str, row: int, col: int) -> float:
    try:
        value: float = float(token)
    except ValueError as exc:
        raise MalformedInputError(name, row, col, f"{token!r} is not a number") from exc
    if not math.isfinite(value):
        raise MalformedInputError(name, row, col, f"{token!r} is not finite")
    return value
