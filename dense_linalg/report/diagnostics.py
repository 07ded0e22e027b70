################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of dense_linalg
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Derived quality measures reported alongside numeric results."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from dense_linalg.errors import InvalidDimensionError
from dense_linalg.matrix.dense_matrix import DenseMatrix


@dataclass(frozen=True)
class FitResiduals:
    """Prediction errors of a fitted model.

    Attributes:
        predicted: Model output y_hat at each sample
        errors: y_hat - y at each sample
        sse: Sum of squared errors
        mse: Mean squared error, sse / sample count
    """

    predicted: NDArray[np.float64]
    errors: NDArray[np.float64]
    sse: float
    mse: float


def max_abs_difference(expected: DenseMatrix, actual: DenseMatrix) -> float:
    """Return the largest elementwise |actual - expected|, layout agnostic."""
    if expected.shape != actual.shape:
        raise InvalidDimensionError(
            f"Cannot compare {expected.rows}x{expected.cols} "
            f"with {actual.rows}x{actual.cols}"
        )
    diff: NDArray[np.float64] = np.abs(actual.to_array() - expected.to_array())
    return float(np.max(diff))


def fit_residuals(
    observed: NDArray[np.float64], predicted: NDArray[np.float64]
) -> FitResiduals:
    """Compute errors, SSE and MSE between observations and predictions."""
    y: NDArray[np.float64] = np.asarray(observed, dtype=np.float64)
    y_hat: NDArray[np.float64] = np.asarray(predicted, dtype=np.float64)
    if y.shape != y_hat.shape or y.ndim != 1:
        raise InvalidDimensionError("observed and predicted must be equal-length 1D")
    if y.size == 0:
        raise InvalidDimensionError("at least one sample is required")

    errors: NDArray[np.float64] = y_hat - y
    sse: float = float(np.sum(errors * errors))
    return FitResiduals(
        predicted=y_hat,
        errors=errors,
        sse=sse,
        mse=sse / float(y.size),
    )
