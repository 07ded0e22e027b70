################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of dense_linalg
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Result reporters for console and file destinations.

Every reporter can format results as text and export tables. The console
variant prints fixed-precision, human-readable output immediately. The file
variant buffers round-trip precision output and only writes it when closed
without error, so a failed run never leaves an output file behind.
"""

from __future__ import annotations

import abc
import csv
import io
import os
import sys
from dataclasses import dataclass
from types import TracebackType
from typing import Optional
from typing import Sequence
from typing import TextIO

from dense_linalg.matrix.dense_matrix import DenseMatrix
from dense_linalg.matrix.dense_matrix import Layout
from dense_linalg.matrix.layout import to_row_major
from dense_linalg.storage.persistence import write_text
from dense_linalg.storage.text_format import ROUND_TRIP_DIGITS
from dense_linalg.storage.text_format import format_fixed
from dense_linalg.storage.text_format import format_matrix
from dense_linalg.storage.text_format import format_value


# Fixed decimals for console reports
CONSOLE_DECIMALS: int = 10


@dataclass(frozen=True)
class Table:
    """Column-oriented numeric table; None marks an empty cell.

    Attributes:
        headers: Column names
        rows: Row tuples, each with one entry per header
    """

    headers: tuple[str, ...]
    rows: tuple[tuple[Optional[float], ...], ...]

    def __post_init__(self) -> None:
        """Validate that every row matches the header width."""
        for index, row in enumerate(self.rows):
            if len(row) != len(self.headers):
                raise ValueError(
                    f"row {index} has {len(row)} cells, expected {len(self.headers)}"
                )

    @classmethod
    def from_rows(
        cls, headers: Sequence[str], rows: Sequence[Sequence[Optional[float]]]
    ) -> Table:
        """Build a table from arbitrary sequences."""
        return cls(
            headers=tuple(headers),
            rows=tuple(tuple(row) for row in rows),
        )


class Reporter(abc.ABC):
    """Destination for numeric results."""

    def __enter__(self) -> Reporter:
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        if exc_type is None:
            self.close()
        else:
            self.discard()

    @abc.abstractmethod
    def format_value(self, value: float) -> str:
        """Return the destination's textual form of a double."""

    @abc.abstractmethod
    def emit_text(self, text: str) -> None:
        """Emit a line of free text."""

    @abc.abstractmethod
    def emit_matrix(self, matrix: DenseMatrix, title: Optional[str] = None) -> None:
        """Emit a matrix in natural (row-major) order."""

    @abc.abstractmethod
    def export_table(self, table: Table) -> None:
        """Emit a table of values."""

    def emit_scalar(self, name: str, value: float) -> None:
        """Emit a named value."""
        self.emit_text(f"{name} = {self.format_value(value)}")

    def close(self) -> None:
        """Finish the report."""

    def discard(self) -> None:
        """Abandon the report after a failure."""

    @staticmethod
    def _natural(matrix: DenseMatrix) -> DenseMatrix:
        if matrix.layout is Layout.COLUMN_MAJOR:
            return to_row_major(matrix)
        return matrix


class ConsoleReporter(Reporter):
    """Fixed-precision report written straight to a text stream."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        decimals: int = CONSOLE_DECIMALS,
        column_width: int = 0,
    ) -> None:
        self._stream: TextIO = stream if stream is not None else sys.stdout
        self._decimals: int = decimals
        self._column_width: int = column_width

    def format_value(self, value: float) -> str:
        return format_fixed(value, self._decimals)

    def emit_text(self, text: str) -> None:
        self._stream.write(text + "\n")

    def emit_matrix(self, matrix: DenseMatrix, title: Optional[str] = None) -> None:
        natural: DenseMatrix = self._natural(matrix)
        if title is not None:
            self.emit_text(title)
        for i in range(natural.rows):
            cells: list[str] = [
                self.format_value(natural.element(i, j)).rjust(self._column_width)
                for j in range(natural.cols)
            ]
            self.emit_text(" ".join(cells))

    def export_table(self, table: Table) -> None:
        for row in table.rows:
            cells: list[str] = [
                f"{header}={self.format_value(value)}"
                for header, value in zip(table.headers, row)
                if value is not None
            ]
            self.emit_text("  ".join(cells))

    def close(self) -> None:
        self._stream.flush()


class FileReporter(Reporter):
    """Round-trip precision report written to a file when closed."""

    def __init__(
        self,
        path: str | os.PathLike[str],
        digits: int = ROUND_TRIP_DIGITS,
        atomic_write: bool = True,
    ) -> None:
        self._path: str = os.fspath(path)
        self._digits: int = digits
        self._atomic_write: bool = atomic_write
        self._buffer: io.StringIO = io.StringIO()
        self._closed: bool = False

    @property
    def path(self) -> str:
        """Return the destination path."""
        return self._path

    def format_value(self, value: float) -> str:
        return format_value(value, self._digits)

    def emit_text(self, text: str) -> None:
        self._buffer.write(text + "\n")

    def emit_matrix(self, matrix: DenseMatrix, title: Optional[str] = None) -> None:
        if title is not None:
            self.emit_text(title)
        self._buffer.write(format_matrix(self._natural(matrix), self._digits))

    def export_table(self, table: Table) -> None:
        writer = csv.writer(self._buffer, lineterminator="\n")
        writer.writerow(table.headers)
        for row in table.rows:
            writer.writerow(
                ["" if value is None else self.format_value(value) for value in row]
            )

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        write_text(self._path, self._buffer.getvalue(), atomic_write=self._atomic_write)

    def discard(self) -> None:
        self._closed = True
        self._buffer = io.StringIO()
