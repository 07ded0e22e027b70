################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of dense_linalg
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for residual and reconstruction diagnostics."""

from __future__ import annotations

import numpy as np
import pytest

from dense_linalg.errors import InvalidDimensionError
from dense_linalg.matrix.dense_matrix import DenseMatrix
from dense_linalg.matrix.dense_matrix import Layout
from dense_linalg.report.diagnostics import FitResiduals
from dense_linalg.report.diagnostics import fit_residuals
from dense_linalg.report.diagnostics import max_abs_difference


def test_max_abs_difference_across_layouts() -> None:
    """Matrices are compared element by element whatever their layout."""
    values: np.ndarray = np.array([[1.0, 2.0], [3.0, 4.0]])
    expected: DenseMatrix = DenseMatrix.from_array(values)
    shifted: np.ndarray = values.copy()
    shifted[1, 0] -= 0.25
    actual: DenseMatrix = DenseMatrix.from_array(shifted, Layout.COLUMN_MAJOR)
    assert max_abs_difference(expected, actual) == pytest.approx(0.25)
    assert max_abs_difference(
        expected, DenseMatrix.from_array(values, Layout.COLUMN_MAJOR)
    ) == 0.0


def test_max_abs_difference_shape_mismatch() -> None:
    """Different shapes cannot be compared."""
    with pytest.raises(InvalidDimensionError):
        max_abs_difference(
            DenseMatrix.from_array(np.ones((2, 2))),
            DenseMatrix.from_array(np.ones((2, 1))),
        )


def test_fit_residuals() -> None:
    """Errors are y_hat - y; SSE and MSE follow."""
    residuals: FitResiduals = fit_residuals(
        np.array([2.0, 2.0, 4.0, 5.0]), np.array([1.6, 2.7, 3.8, 4.9])
    )
    assert np.allclose(residuals.errors, [-0.4, 0.7, -0.2, -0.1])
    assert residuals.sse == pytest.approx(0.70)
    assert residuals.mse == pytest.approx(0.175)


def test_fit_residuals_rejects_bad_shapes() -> None:
    """Observations and predictions must be matching, non-empty vectors."""
    with pytest.raises(InvalidDimensionError):
        fit_residuals(np.ones(3), np.ones(2))
    with pytest.raises(InvalidDimensionError):
        fit_residuals(np.ones((2, 2)), np.ones((2, 2)))
    with pytest.raises(InvalidDimensionError):
        fit_residuals(np.array([]), np.array([]))
