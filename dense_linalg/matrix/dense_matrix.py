################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of dense_linalg
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Dense double-precision matrix tagged with its physical layout."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from dense_linalg.errors import InvalidDimensionError
from dense_linalg.errors import LayoutMismatchError


class Layout(enum.Enum):
    """Physical ordering of a matrix in linear storage."""

    # Element (i, j) at offset i * cols + j
    ROW_MAJOR = "row_major"
    # Element (i, j) at offset j * rows + i
    COLUMN_MAJOR = "column_major"


@dataclass(frozen=True)
class DenseMatrix:
    """Immutable rows x cols matrix backed by a flat float64 buffer.

    Attributes:
        rows: Number of rows, positive
        cols: Number of columns, positive
        data: Flat buffer of exactly rows * cols elements
        layout: Physical ordering of data
    """

    rows: int
    cols: int
    data: NDArray[np.float64]
    layout: Layout

    def __post_init__(self) -> None:
        """Validate dimensions and freeze a private copy of the buffer."""
        if isinstance(self.rows, bool) or not isinstance(self.rows, (int, np.integer)):
            raise InvalidDimensionError("rows must be an integer")
        if isinstance(self.cols, bool) or not isinstance(self.cols, (int, np.integer)):
            raise InvalidDimensionError("cols must be an integer")
        if self.rows <= 0 or self.cols <= 0:
            raise InvalidDimensionError(
                f"Matrix dimensions must be positive, got {self.rows}x{self.cols}"
            )
        if not isinstance(self.layout, Layout):
            raise LayoutMismatchError("layout must be a Layout value")

        buffer: NDArray[np.float64] = np.array(self.data, dtype=np.float64).ravel()
        if buffer.size != self.rows * self.cols:
            raise InvalidDimensionError(
                f"Buffer holds {buffer.size} elements, "
                f"expected {self.rows * self.cols}"
            )
        buffer.setflags(write=False)
        object.__setattr__(self, "rows", int(self.rows))
        object.__setattr__(self, "cols", int(self.cols))
        object.__setattr__(self, "data", buffer)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> DenseMatrix:
        """Build a row-major matrix from nested row sequences."""
        array: NDArray[np.float64] = np.asarray(rows, dtype=np.float64)
        if array.ndim != 2:
            raise InvalidDimensionError("rows must form a rectangular 2D array")
        return cls.from_array(array)

    @classmethod
    def from_array(
        cls, array: NDArray[np.float64], layout: Layout = Layout.ROW_MAJOR
    ) -> DenseMatrix:
        """Store a 2D array using the requested physical layout."""
        mat: NDArray[np.float64] = np.asarray(array, dtype=np.float64)
        if mat.ndim != 2:
            raise InvalidDimensionError("array must be 2D")
        order: str = "C" if layout is Layout.ROW_MAJOR else "F"
        return cls(
            rows=mat.shape[0],
            cols=mat.shape[1],
            data=mat.flatten(order=order),
            layout=layout,
        )

    @property
    def shape(self) -> tuple[int, int]:
        """Return (rows, cols)."""
        return (self.rows, self.cols)

    @property
    def leading_dimension(self) -> int:
        """Return the stride along the non-contiguous axis."""
        if self.layout is Layout.COLUMN_MAJOR:
            return self.rows
        return self.cols

    def offset(self, i: int, j: int) -> int:
        """Return the linear offset of element (i, j)."""
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(f"({i},{j}) outside {self.rows}x{self.cols} matrix")
        if self.layout is Layout.COLUMN_MAJOR:
            return j * self.rows + i
        return i * self.cols + j

    def element(self, i: int, j: int) -> float:
        """Return element (i, j) regardless of layout."""
        return float(self.data[self.offset(i, j)])

    def to_array(self) -> NDArray[np.float64]:
        """Return a fresh 2D array indexed as [i, j]."""
        order: str = "C" if self.layout is Layout.ROW_MAJOR else "F"
        return self.data.reshape((self.rows, self.cols), order=order).copy()

    def require_layout(self, layout: Layout, name: str) -> None:
        """Raise LayoutMismatchError unless the matrix uses the given layout."""
        if self.layout is not layout:
            raise LayoutMismatchError(
                f"{name} must be {layout.value}, got {self.layout.value}"
            )
