################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of dense_linalg
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Conversion between row-major and column-major storage.

Values are copied verbatim, so converting forth and back reproduces the
original buffer bit for bit. Outputs are always freshly allocated.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from dense_linalg.errors import InvalidDimensionError
from dense_linalg.matrix.dense_matrix import DenseMatrix
from dense_linalg.matrix.dense_matrix import Layout


def row_major_to_column_major(
    buffer: Sequence[float] | NDArray[np.float64], rows: int, cols: int
) -> NDArray[np.float64]:
    """Return a new column-major buffer for a row-major rows x cols buffer."""
    grid: NDArray[np.float64] = _as_grid(buffer, rows, cols)
    # flatten() always copies, even for single-row or single-column inputs
    return grid.flatten(order="F")


def column_major_to_row_major(
    buffer: Sequence[float] | NDArray[np.float64], rows: int, cols: int
) -> NDArray[np.float64]:
    """Return a new row-major buffer for a column-major rows x cols buffer."""
    grid: NDArray[np.float64] = _as_grid(buffer, cols, rows)
    return grid.flatten(order="F")


def to_column_major(matrix: DenseMatrix) -> DenseMatrix:
    """Convert a row-major matrix to column-major storage."""
    matrix.require_layout(Layout.ROW_MAJOR, "input")
    return DenseMatrix(
        rows=matrix.rows,
        cols=matrix.cols,
        data=row_major_to_column_major(matrix.data, matrix.rows, matrix.cols),
        layout=Layout.COLUMN_MAJOR,
    )


def to_row_major(matrix: DenseMatrix) -> DenseMatrix:
    """Convert a column-major matrix to row-major storage."""
    matrix.require_layout(Layout.COLUMN_MAJOR, "input")
    return DenseMatrix(
        rows=matrix.rows,
        cols=matrix.cols,
        data=column_major_to_row_major(matrix.data, matrix.rows, matrix.cols),
        layout=Layout.ROW_MAJOR,
    )


def _as_grid(
    buffer: Sequence[float] | NDArray[np.float64], outer: int, inner: int
) -> NDArray[np.float64]:
    """View a flat buffer as an outer x inner C-ordered grid."""
    if outer <= 0 or inner <= 0:
        raise InvalidDimensionError(
            f"Dimensions must be positive, got {outer}x{inner}"
        )
    flat: NDArray[np.float64] = np.asarray(buffer, dtype=np.float64).ravel()
    if flat.size != outer * inner:
        raise InvalidDimensionError(
            f"Buffer holds {flat.size} elements, expected {outer * inner}"
        )
    return flat.reshape((outer, inner))
