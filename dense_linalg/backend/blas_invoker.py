################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of dense_linalg
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Dense matrix products through the BLAS level 2 and 3 routines.

All operands must be tagged column-major. Results are fresh column-major
matrices; no routine ever accumulates into prior output contents.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray
from scipy.linalg import blas

from dense_linalg.errors import InvalidDimensionError
from dense_linalg.matrix.dense_matrix import DenseMatrix
from dense_linalg.matrix.dense_matrix import Layout


_LOG: logging.Logger = logging.getLogger(__name__)


def multiply(a: DenseMatrix, b: DenseMatrix) -> DenseMatrix:
    """Return C = A * B for A (m x n) and B (n x l)."""
    a.require_layout(Layout.COLUMN_MAJOR, "A")
    b.require_layout(Layout.COLUMN_MAJOR, "B")
    if a.cols != b.rows:
        raise InvalidDimensionError(
            f"Shared dimension mismatch: A is {a.rows}x{a.cols}, "
            f"B is {b.rows}x{b.cols}"
        )

    _LOG.debug("dgemm: m=%d n=%d k=%d", a.rows, b.cols, a.cols)
    c: NDArray[np.float64] = blas.dgemm(
        alpha=1.0,
        a=fortran_array(a),
        b=fortran_array(b),
        beta=0.0,
        trans_a=0,
        trans_b=0,
    )
    return _from_fortran(c, a.rows, b.cols)


def multiply_transposed(a: DenseMatrix, b: DenseMatrix) -> DenseMatrix:
    """Return C = A^T * B for A (m x n) and B (m x l)."""
    a.require_layout(Layout.COLUMN_MAJOR, "A")
    b.require_layout(Layout.COLUMN_MAJOR, "B")
    if a.rows != b.rows:
        raise InvalidDimensionError(
            f"Shared dimension mismatch: A^T is {a.cols}x{a.rows}, "
            f"B is {b.rows}x{b.cols}"
        )

    _LOG.debug("dgemm^T: m=%d n=%d k=%d", a.cols, b.cols, a.rows)
    c: NDArray[np.float64] = blas.dgemm(
        alpha=1.0,
        a=fortran_array(a),
        b=fortran_array(b),
        beta=0.0,
        trans_a=1,
        trans_b=0,
    )
    return _from_fortran(c, a.cols, b.cols)


def matvec_transposed(a: DenseMatrix, x: DenseMatrix) -> DenseMatrix:
    """Return y = A^T * x for A (m x n) and a column vector x (m x 1)."""
    a.require_layout(Layout.COLUMN_MAJOR, "A")
    x.require_layout(Layout.COLUMN_MAJOR, "x")
    if x.cols != 1:
        raise InvalidDimensionError(f"x must be a column vector, got {x.rows}x{x.cols}")
    if a.rows != x.rows:
        raise InvalidDimensionError(
            f"Shared dimension mismatch: A^T is {a.cols}x{a.rows}, "
            f"x has {x.rows} rows"
        )

    _LOG.debug("dgemv^T: m=%d n=%d", a.rows, a.cols)
    y: NDArray[np.float64] = blas.dgemv(
        alpha=1.0,
        a=fortran_array(a),
        x=np.array(x.data, dtype=np.float64),
        beta=0.0,
        trans=1,
    )
    return _from_fortran(y, a.cols, 1)


def fortran_array(matrix: DenseMatrix) -> NDArray[np.float64]:
    """Return a writable Fortran-ordered 2D copy of a column-major buffer."""
    matrix.require_layout(Layout.COLUMN_MAJOR, "matrix")
    return np.array(
        matrix.data.reshape((matrix.rows, matrix.cols), order="F"),
        dtype=np.float64,
        order="F",
    )


def _from_fortran(result: NDArray[np.float64], rows: int, cols: int) -> DenseMatrix:
    """Wrap a routine's output in a new column-major matrix."""
    grid: NDArray[np.float64] = np.asarray(result, dtype=np.float64).reshape(
        (rows, cols), order="F"
    )
    return DenseMatrix(
        rows=rows,
        cols=cols,
        data=grid.flatten(order="F"),
        layout=Layout.COLUMN_MAJOR,
    )
