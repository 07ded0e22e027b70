################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of dense_linalg
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Singular value decomposition with a reconstruction check."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from dense_linalg.backend import blas_invoker
from dense_linalg.backend import lapack_invoker
from dense_linalg.matrix.dense_matrix import DenseMatrix
from dense_linalg.matrix.dense_matrix import Layout
from dense_linalg.matrix.layout import to_column_major
from dense_linalg.matrix.layout import to_row_major
from dense_linalg.report.diagnostics import max_abs_difference
from dense_linalg.report.reporter import Reporter


_LOG: logging.Logger = logging.getLogger(__name__)

# Matrix decomposed when no input file is given
DEFAULT_MATRIX: tuple[tuple[float, ...], ...] = (
    (1.0, -0.8),
    (0.0, 1.0),
)


@dataclass(frozen=True)
class SvdCheck:
    """Decomposition of A and the quality of U * Sigma * V^T.

    Attributes:
        matrix: Original A, row-major
        decomposition: Factors returned by the decomposition
        reconstruction: U * Sigma * V^T, row-major
        max_error: Largest |reconstruction - A| over all elements
    """

    matrix: DenseMatrix
    decomposition: lapack_invoker.SingularValueDecomposition
    reconstruction: DenseMatrix
    max_error: float

    @property
    def singular_values(self) -> NDArray[np.float64]:
        """Return the singular values in descending order."""
        return self.decomposition.s


def sigma_matrix(s: NDArray[np.float64], rows: int, cols: int) -> DenseMatrix:
    """Return the rows x cols column-major matrix with s on its diagonal."""
    sigma: NDArray[np.float64] = np.zeros((rows, cols), dtype=np.float64)
    count: int = min(rows, cols, len(s))
    sigma[np.arange(count), np.arange(count)] = s[:count]
    return DenseMatrix.from_array(sigma, layout=Layout.COLUMN_MAJOR)


def decompose_and_reconstruct(matrix: DenseMatrix) -> SvdCheck:
    """Decompose a row-major matrix and rebuild it from its factors."""
    matrix.require_layout(Layout.ROW_MAJOR, "A")
    decomposition: lapack_invoker.SingularValueDecomposition = lapack_invoker.svd(
        to_column_major(matrix)
    )

    sigma: DenseMatrix = sigma_matrix(decomposition.s, matrix.rows, matrix.cols)
    u_sigma: DenseMatrix = blas_invoker.multiply(decomposition.u, sigma)
    rebuilt: DenseMatrix = to_row_major(blas_invoker.multiply(u_sigma, decomposition.vt))

    max_error: float = max_abs_difference(matrix, rebuilt)
    _LOG.debug(
        "SVD of %dx%d matrix, reconstruction error %r",
        matrix.rows,
        matrix.cols,
        max_error,
    )
    return SvdCheck(
        matrix=matrix,
        decomposition=decomposition,
        reconstruction=rebuilt,
        max_error=max_error,
    )


def report_svd(check: SvdCheck, reporter: Reporter) -> None:
    """Emit singular values, both factors, the reconstruction and its error."""
    u: DenseMatrix = check.decomposition.u
    vt: DenseMatrix = check.decomposition.vt

    reporter.emit_text("Singular values S:")
    for index, value in enumerate(check.singular_values):
        reporter.emit_scalar(f"  S[{index}]", float(value))

    reporter.emit_text("")
    reporter.emit_matrix(u, title=f"Matrix U ({u.rows}x{u.cols}):")
    reporter.emit_text("")
    reporter.emit_matrix(vt, title=f"Matrix V^T ({vt.rows}x{vt.cols}):")
    reporter.emit_text("")
    reporter.emit_matrix(
        check.reconstruction, title="Reconstructed A (U * Sigma * V^T):"
    )
    reporter.emit_text("")
    reporter.emit_scalar("Max error |A_rec - A_orig|", check.max_error)
