################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of dense_linalg
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""LAPACK solve, least-squares and decomposition routines.

The underlying routines overwrite their array arguments. Every wrapper here
hands them private copies and returns newly allocated matrices, so the
caller's operands are never modified.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from scipy.linalg import lapack

from dense_linalg.backend.blas_invoker import fortran_array
from dense_linalg.backend.lapack_status import check_status
from dense_linalg.errors import InvalidDimensionError
from dense_linalg.matrix.dense_matrix import DenseMatrix
from dense_linalg.matrix.dense_matrix import Layout


_LOG: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LeastSquaresSolution:
    """Result of min ||A X - B||_2 for a full-rank A.

    Attributes:
        x: Solution, n x nrhs, column-major
        residual_sum_of_squares: Per right-hand side, only meaningful when
            m > n (zero otherwise)
    """

    x: DenseMatrix
    residual_sum_of_squares: NDArray[np.float64]


@dataclass(frozen=True)
class SingularValueDecomposition:
    """Full SVD A = U * Sigma * V^T.

    Attributes:
        u: Left singular vectors, m x m, column-major
        s: Singular values in descending order, length min(m, n)
        vt: Right singular vectors transposed, n x n, column-major
    """

    u: DenseMatrix
    s: NDArray[np.float64]
    vt: DenseMatrix


def solve(a: DenseMatrix, b: DenseMatrix) -> DenseMatrix:
    """Solve A X = B for square A using LU with partial pivoting (dgesv)."""
    a.require_layout(Layout.COLUMN_MAJOR, "A")
    b.require_layout(Layout.COLUMN_MAJOR, "B")
    if a.rows != a.cols:
        raise InvalidDimensionError(f"A must be square, got {a.rows}x{a.cols}")
    if b.rows != a.rows:
        raise InvalidDimensionError(
            f"B must have {a.rows} rows to match A, got {b.rows}"
        )

    _LOG.debug("dgesv: n=%d nrhs=%d", a.rows, b.cols)
    _lu, _piv, x, info = lapack.dgesv(
        _private_copy(a), _private_copy(b), overwrite_a=1, overwrite_b=1
    )
    check_status("dgesv", info)
    return _wrap(x, a.rows, b.cols)


def least_squares(a: DenseMatrix, b: DenseMatrix) -> LeastSquaresSolution:
    """Solve min ||A X - B||_2 through a QR factorization (dgels)."""
    a.require_layout(Layout.COLUMN_MAJOR, "A")
    b.require_layout(Layout.COLUMN_MAJOR, "B")
    if b.rows != a.rows:
        raise InvalidDimensionError(
            f"B must have {a.rows} rows to match A, got {b.rows}"
        )

    m: int = a.rows
    n: int = a.cols
    nrhs: int = b.cols
    # dgels needs room for the n-row solution when the system is wide
    ldb: int = max(m, n)
    rhs: NDArray[np.float64] = np.zeros((ldb, nrhs), dtype=np.float64, order="F")
    rhs[:m, :] = fortran_array(b)

    _LOG.debug("dgels: m=%d n=%d nrhs=%d", m, n, nrhs)
    _qr, x, info = lapack.dgels(
        _private_copy(a), rhs, trans="N", overwrite_a=1, overwrite_b=1
    )
    check_status("dgels", info)

    solution: NDArray[np.float64] = np.asarray(x, dtype=np.float64)
    if m > n:
        rss: NDArray[np.float64] = np.sum(solution[n:m, :] ** 2, axis=0)
    else:
        rss = np.zeros(nrhs, dtype=np.float64)
    return LeastSquaresSolution(
        x=_wrap(solution[:n, :], n, nrhs),
        residual_sum_of_squares=rss,
    )


def svd(a: DenseMatrix) -> SingularValueDecomposition:
    """Compute the full singular value decomposition (dgesvd)."""
    a.require_layout(Layout.COLUMN_MAJOR, "A")

    _LOG.debug("dgesvd: m=%d n=%d", a.rows, a.cols)
    u, s, vt, info = lapack.dgesvd(
        _private_copy(a), compute_uv=1, full_matrices=1, overwrite_a=1
    )
    check_status("dgesvd", info)
    return SingularValueDecomposition(
        u=_wrap(u, a.rows, a.rows),
        s=np.array(s, dtype=np.float64),
        vt=_wrap(vt, a.cols, a.cols),
    )


def _private_copy(matrix: DenseMatrix) -> NDArray[np.float64]:
    """Return a writable Fortran-ordered copy the routine may overwrite."""
    return fortran_array(matrix)


def _wrap(result: NDArray[np.float64], rows: int, cols: int) -> DenseMatrix:
    grid: NDArray[np.float64] = np.asarray(result, dtype=np.float64).reshape(
        (rows, cols), order="F"
    )
    return DenseMatrix.from_array(grid, layout=Layout.COLUMN_MAJOR)
