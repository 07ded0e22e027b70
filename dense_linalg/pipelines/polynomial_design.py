################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of dense_linalg
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Design matrices and evaluation for polynomial least-squares models."""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from dense_linalg.errors import InvalidDimensionError
from dense_linalg.matrix.dense_matrix import DenseMatrix
from dense_linalg.matrix.dense_matrix import Layout


def as_samples(
    x: Sequence[float] | NDArray[np.float64],
    y: Sequence[float] | NDArray[np.float64],
    degree: int,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Validate a sample set for a fit of the given degree."""
    xs: NDArray[np.float64] = np.array(x, dtype=np.float64)
    ys: NDArray[np.float64] = np.array(y, dtype=np.float64)
    if xs.ndim != 1 or ys.ndim != 1 or xs.shape != ys.shape:
        raise InvalidDimensionError("x and y must be 1D sequences of equal length")
    if xs.size < degree + 1:
        raise InvalidDimensionError(
            f"A degree {degree} fit needs at least {degree + 1} samples, "
            f"got {xs.size}"
        )
    if not (np.all(np.isfinite(xs)) and np.all(np.isfinite(ys))):
        raise InvalidDimensionError("samples must be finite")
    return xs, ys


def polynomial_design(x: NDArray[np.float64], degree: int) -> DenseMatrix:
    """Return the column-major design matrix [x^degree ... x 1]."""
    xs: NDArray[np.float64] = np.asarray(x, dtype=np.float64)
    columns: list[NDArray[np.float64]] = [
        xs**power for power in range(degree, -1, -1)
    ]
    # Columns are stored one after another: element (i, j) at j * m + i
    return DenseMatrix(
        rows=xs.size,
        cols=degree + 1,
        data=np.concatenate(columns),
        layout=Layout.COLUMN_MAJOR,
    )


def column_vector(values: NDArray[np.float64]) -> DenseMatrix:
    """Return values as an m x 1 column-major matrix."""
    data: NDArray[np.float64] = np.asarray(values, dtype=np.float64)
    return DenseMatrix(
        rows=data.size, cols=1, data=data, layout=Layout.COLUMN_MAJOR
    )


def evaluate_polynomial(
    coefficients: Sequence[float] | NDArray[np.float64],
    x: float | NDArray[np.float64],
) -> NDArray[np.float64]:
    """Evaluate a polynomial given highest power first (Horner's rule)."""
    xs: NDArray[np.float64] = np.asarray(x, dtype=np.float64)
    result: NDArray[np.float64] = np.zeros_like(xs)
    for coefficient in coefficients:
        result = result * xs + float(coefficient)
    return result
