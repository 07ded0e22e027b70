################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of dense_linalg
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Best-fit line y = a x + b through the normal equations.

With design matrix A = [x 1], the coefficients theta = [a, b] solve

    (A^T A) theta = A^T y

A^T A and A^T y come from the BLAS product routines and the 2 x 2 system is
solved by LU factorization. A singular A^T A (for example, all x equal) is
reported as a numerical failure.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from dense_linalg.backend import blas_invoker
from dense_linalg.backend import lapack_invoker
from dense_linalg.matrix.dense_matrix import DenseMatrix
from dense_linalg.pipelines.polynomial_design import as_samples
from dense_linalg.pipelines.polynomial_design import column_vector
from dense_linalg.pipelines.polynomial_design import evaluate_polynomial
from dense_linalg.pipelines.polynomial_design import polynomial_design
from dense_linalg.report.diagnostics import FitResiduals
from dense_linalg.report.diagnostics import fit_residuals
from dense_linalg.report.reporter import Reporter
from dense_linalg.report.reporter import Table


_LOG: logging.Logger = logging.getLogger(__name__)

# Sample x values used when no data file is given
DEFAULT_X: tuple[float, ...] = (1.0, 2.0, 3.0, 4.0)
# Sample y values used when no data file is given
DEFAULT_Y: tuple[float, ...] = (2.0, 2.0, 4.0, 5.0)


@dataclass(frozen=True)
class LinearFit:
    """Fitted line and its residuals.

    Attributes:
        slope: Coefficient a
        intercept: Coefficient b
        x: Sample abscissae
        y: Sample observations
        residuals: Prediction errors at the samples
    """

    slope: float
    intercept: float
    x: NDArray[np.float64]
    y: NDArray[np.float64]
    residuals: FitResiduals

    def predict(self, x: float | NDArray[np.float64]) -> NDArray[np.float64]:
        """Evaluate the fitted line."""
        return evaluate_polynomial((self.slope, self.intercept), x)


def fit_line(
    x: Sequence[float] | NDArray[np.float64],
    y: Sequence[float] | NDArray[np.float64],
) -> LinearFit:
    """Fit y = a x + b by solving the normal equations."""
    xs, ys = as_samples(x, y, degree=1)
    design: DenseMatrix = polynomial_design(xs, degree=1)

    gram: DenseMatrix = blas_invoker.multiply_transposed(design, design)
    moment: DenseMatrix = blas_invoker.matvec_transposed(design, column_vector(ys))
    theta: DenseMatrix = lapack_invoker.solve(gram, moment)

    slope: float = theta.element(0, 0)
    intercept: float = theta.element(1, 0)
    _LOG.debug("Line fit over %d samples: a=%r b=%r", xs.size, slope, intercept)

    predicted: NDArray[np.float64] = evaluate_polynomial((slope, intercept), xs)
    return LinearFit(
        slope=slope,
        intercept=intercept,
        x=xs,
        y=ys,
        residuals=fit_residuals(ys, predicted),
    )


def residual_table(
    x: NDArray[np.float64], y: NDArray[np.float64], residuals: FitResiduals
) -> Table:
    """Tabulate x, y, y_hat and err for every sample."""
    return Table.from_rows(
        ("x", "y", "y_hat", "err"),
        [
            (float(xi), float(yi), float(y_hat), float(err))
            for xi, yi, y_hat, err in zip(
                x, y, residuals.predicted, residuals.errors
            )
        ],
    )


def report_linear_fit(fit: LinearFit, reporter: Reporter) -> None:
    """Emit coefficients, per-point predictions, SSE and MSE."""
    reporter.emit_text("Best-fit line (normal equations):")
    reporter.emit_text("y = a*x + b")
    reporter.emit_scalar("a", fit.slope)
    reporter.emit_scalar("b", fit.intercept)
    reporter.emit_text("")
    reporter.emit_text("Points and predictions:")
    reporter.export_table(residual_table(fit.x, fit.y, fit.residuals))
    reporter.emit_text("")
    reporter.emit_scalar("SSE", fit.residuals.sse)
    reporter.emit_scalar("MSE", fit.residuals.mse)
