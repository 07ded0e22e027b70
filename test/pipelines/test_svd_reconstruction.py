################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of dense_linalg
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for the SVD reconstruction check."""

from __future__ import annotations

import io

import numpy as np
import pytest

from dense_linalg.errors import LayoutMismatchError
from dense_linalg.matrix.dense_matrix import DenseMatrix
from dense_linalg.matrix.dense_matrix import Layout
from dense_linalg.pipelines.svd_reconstruction import DEFAULT_MATRIX
from dense_linalg.pipelines.svd_reconstruction import SvdCheck
from dense_linalg.pipelines.svd_reconstruction import decompose_and_reconstruct
from dense_linalg.pipelines.svd_reconstruction import report_svd
from dense_linalg.pipelines.svd_reconstruction import sigma_matrix
from dense_linalg.report.reporter import ConsoleReporter


def test_default_matrix() -> None:
    """The built-in matrix has unit determinant and rebuilds accurately."""
    check: SvdCheck = decompose_and_reconstruct(DenseMatrix.from_rows(DEFAULT_MATRIX))
    s: np.ndarray = check.singular_values
    assert s[0] == pytest.approx(1.47703, abs=1e-4)
    assert s[1] == pytest.approx(0.67703, abs=1e-4)
    assert s[0] * s[1] == pytest.approx(1.0)
    assert check.max_error < 1e-12
    assert check.reconstruction.layout is Layout.ROW_MAJOR


@pytest.mark.parametrize("shape", [(3, 2), (2, 3), (4, 4)])
def test_rectangular_reconstruction(shape: tuple[int, int]) -> None:
    """Tall, wide and square matrices rebuild from their factors."""
    rng: np.random.Generator = np.random.default_rng(sum(shape))
    a: np.ndarray = rng.normal(size=shape)
    check: SvdCheck = decompose_and_reconstruct(DenseMatrix.from_array(a))
    assert check.max_error < 1e-12
    assert np.allclose(check.reconstruction.to_array(), a)
    assert np.allclose(check.singular_values, np.linalg.svd(a, compute_uv=False))


def test_requires_row_major() -> None:
    """The check starts from a row-major matrix."""
    with pytest.raises(LayoutMismatchError):
        decompose_and_reconstruct(
            DenseMatrix.from_array(np.eye(2), Layout.COLUMN_MAJOR)
        )


def test_sigma_matrix() -> None:
    """Singular values sit on the diagonal of a rows x cols matrix."""
    sigma: DenseMatrix = sigma_matrix(np.array([3.0, 2.0]), 3, 2)
    assert sigma.layout is Layout.COLUMN_MAJOR
    assert np.array_equal(sigma.to_array(), [[3.0, 0.0], [0.0, 2.0], [0.0, 0.0]])


def test_report() -> None:
    """The report lists singular values, factors and the error."""
    stream: io.StringIO = io.StringIO()
    check: SvdCheck = decompose_and_reconstruct(DenseMatrix.from_rows(DEFAULT_MATRIX))
    with ConsoleReporter(stream=stream, decimals=8, column_width=14) as reporter:
        report_svd(check, reporter)
    text: str = stream.getvalue()
    assert "Singular values S:" in text
    assert "  S[0] = 1.4770" in text
    assert "Matrix U (2x2):" in text
    assert "Matrix V^T (2x2):" in text
    assert "Max error |A_rec - A_orig| = " in text
