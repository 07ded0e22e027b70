################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of dense_linalg
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for loading and saving matrix files."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from dense_linalg.errors import MatrixIOError
from dense_linalg.matrix.dense_matrix import DenseMatrix
from dense_linalg.storage.persistence import load_matrix
from dense_linalg.storage.persistence import load_multiply_problem
from dense_linalg.storage.persistence import load_samples
from dense_linalg.storage.persistence import write_text
from dense_linalg.storage.text_format import MultiplyProblem
from dense_linalg.storage.text_format import format_matrix


def test_save_and_load_matrix(tmp_path: Path) -> None:
    """A saved matrix loads back unchanged."""
    matrix: DenseMatrix = DenseMatrix.from_rows([[1.5, -2.25, 1e-300]])
    path: Path = tmp_path / "m.txt"
    write_text(path, format_matrix(matrix))
    loaded: DenseMatrix = load_matrix(path)
    assert loaded.data.tobytes() == matrix.data.tobytes()
    assert not list(tmp_path.glob(".*tmp*"))


def test_save_without_atomic_write(tmp_path: Path) -> None:
    """Direct writes produce the same text."""
    matrix: DenseMatrix = DenseMatrix.from_rows([[1.0, 2.0]])
    path: Path = tmp_path / "m.txt"
    write_text(path, format_matrix(matrix), atomic_write=False)
    assert path.read_text(encoding="utf-8") == "1 2\n1 2\n"


def test_load_missing_input(tmp_path: Path) -> None:
    """A missing input file is an I/O error naming the path."""
    missing: Path = tmp_path / "missing.txt"
    with pytest.raises(MatrixIOError) as excinfo:
        load_multiply_problem(missing)
    assert excinfo.value.path == str(missing)


def test_save_into_missing_directory(tmp_path: Path) -> None:
    """An unopenable output path is an I/O error and leaves nothing behind."""
    target: Path = tmp_path / "nope" / "out.txt"
    with pytest.raises(MatrixIOError):
        write_text(target, format_matrix(DenseMatrix.from_rows([[1.0]])))
    assert not target.exists()


def test_load_multiply_problem(tmp_path: Path) -> None:
    """Operands are read from disk."""
    path: Path = tmp_path / "in.txt"
    path.write_text("1 2 1\n1 2\n3\n4\n", encoding="utf-8")
    problem: MultiplyProblem = load_multiply_problem(path)
    assert problem.a.shape == (1, 2)
    assert np.array_equal(problem.b.data, [3.0, 4.0])


def test_load_samples(tmp_path: Path) -> None:
    """Sample files are read as two arrays."""
    path: Path = tmp_path / "data.txt"
    path.write_text("0 1.2\n1 2.0\n", encoding="utf-8")
    x, y = load_samples(path)
    assert np.array_equal(x, [0.0, 1.0])
    assert np.array_equal(y, [1.2, 2.0])
