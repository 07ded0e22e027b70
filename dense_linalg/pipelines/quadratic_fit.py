################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of dense_linalg
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Least-squares quadratic y = a x^2 + b x + c through a QR factorization.

min ||A theta - y||_2 is solved directly from A = [x^2 x 1] without forming
A^T A, which is better conditioned than the normal equations.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from dense_linalg.backend import lapack_invoker
from dense_linalg.matrix.dense_matrix import DenseMatrix
from dense_linalg.pipelines.linear_fit import residual_table
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
DEFAULT_X: tuple[float, ...] = (0.0, 1.0, 2.0, 3.0, 4.0, 5.0)
# Sample y values used when no data file is given
DEFAULT_Y: tuple[float, ...] = (1.2, 2.0, 2.9, 4.1, 5.8, 8.2)

# Column names of the exported curve table
CURVE_HEADERS: tuple[str, ...] = ("x_pts", "y_pts", "x_fit", "y_fit")


@dataclass(frozen=True)
class QuadraticFit:
    """Fitted parabola and its residuals.

    Attributes:
        a: Coefficient of x^2
        b: Coefficient of x
        c: Constant term
        x: Sample abscissae
        y: Sample observations
        residuals: Prediction errors at the samples
        qr_residual_sum_of_squares: Residual sum of squares reported by the
            QR solve, equal to residuals.sse up to rounding
    """

    a: float
    b: float
    c: float
    x: NDArray[np.float64]
    y: NDArray[np.float64]
    residuals: FitResiduals
    qr_residual_sum_of_squares: float

    @property
    def coefficients(self) -> tuple[float, float, float]:
        """Return (a, b, c)."""
        return (self.a, self.b, self.c)

    def predict(self, x: float | NDArray[np.float64]) -> NDArray[np.float64]:
        """Evaluate the fitted parabola."""
        return evaluate_polynomial(self.coefficients, x)


def fit_quadratic(
    x: Sequence[float] | NDArray[np.float64],
    y: Sequence[float] | NDArray[np.float64],
) -> QuadraticFit:
    """Fit y = a x^2 + b x + c by QR least squares."""
    xs, ys = as_samples(x, y, degree=2)
    design: DenseMatrix = polynomial_design(xs, degree=2)

    solution: lapack_invoker.LeastSquaresSolution = lapack_invoker.least_squares(
        design, column_vector(ys)
    )
    a: float = solution.x.element(0, 0)
    b: float = solution.x.element(1, 0)
    c: float = solution.x.element(2, 0)
    _LOG.debug("Quadratic fit over %d samples: a=%r b=%r c=%r", xs.size, a, b, c)

    predicted: NDArray[np.float64] = evaluate_polynomial((a, b, c), xs)
    return QuadraticFit(
        a=a,
        b=b,
        c=c,
        x=xs,
        y=ys,
        residuals=fit_residuals(ys, predicted),
        qr_residual_sum_of_squares=float(solution.residual_sum_of_squares[0]),
    )


def curve_table(fit: QuadraticFit, steps: int) -> Table:
    """Tabulate the samples next to the curve on a uniform grid.

    The grid spans the first to the last sample x and has max(steps, len(x))
    points, so every observed point gets a row. The first len(x) rows carry
    the observed points; the remaining rows leave those cells empty.
    """
    if steps < 2:
        raise ValueError("steps must be at least 2")
    count: int = max(steps, int(fit.x.size))
    x_min: float = float(fit.x[0])
    x_max: float = float(fit.x[-1])
    grid: NDArray[np.float64] = x_min + (
        np.arange(count, dtype=np.float64) / float(count - 1)
    ) * (x_max - x_min)
    curve: NDArray[np.float64] = fit.predict(grid)

    rows: list[tuple[Optional[float], ...]] = []
    for i in range(count):
        x_pt: Optional[float] = None
        y_pt: Optional[float] = None
        if i < fit.x.size:
            x_pt = float(fit.x[i])
            y_pt = float(fit.y[i])
        rows.append((x_pt, y_pt, float(grid[i]), float(curve[i])))
    return Table.from_rows(CURVE_HEADERS, rows)


def report_quadratic_fit(fit: QuadraticFit, reporter: Reporter) -> None:
    """Emit coefficients, per-point predictions, SSE and MSE."""
    reporter.emit_text("Quadratic model (least squares with DGELS/QR):")
    reporter.emit_text("y = a*x^2 + b*x + c")
    reporter.emit_scalar("a", fit.a)
    reporter.emit_scalar("b", fit.b)
    reporter.emit_scalar("c", fit.c)
    reporter.emit_text("")
    reporter.emit_text("Points and predictions:")
    reporter.export_table(residual_table(fit.x, fit.y, fit.residuals))
    reporter.emit_text("")
    reporter.emit_scalar("SSE", fit.residuals.sse)
    reporter.emit_scalar("MSE", fit.residuals.mse)


def report_plot_hint(csv_path: str, reporter: Reporter) -> None:
    """Emit an Octave snippet that plots the exported curve."""
    reporter.emit_text("")
    reporter.emit_text(f"Wrote {csv_path} for plotting (points and curve).")
    reporter.emit_text("Octave (example):")
    for line in (
        f'data = csvread("{csv_path}", 1, 0);',
        "x_pts = data(:,1);",
        "y_pts = data(:,2);",
        "x_fit = data(:,3);",
        "y_fit = data(:,4);",
        'plot(x_pts, y_pts, "o"); hold on;',
        'plot(x_fit, y_fit, "-");',
        "grid on;",
        'xlabel("x");',
        'ylabel("y");',
        'title("Quadratic fit");',
        'legend("Data", "Fit");',
    ):
        reporter.emit_text(f"  {line}")
