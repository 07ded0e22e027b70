################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of dense_linalg
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Path-level loading and saving of matrices and sample sets."""

from __future__ import annotations

import os
from pathlib import Path

import numpy as np
from numpy.typing import NDArray

from dense_linalg.errors import MatrixIOError
from dense_linalg.matrix.dense_matrix import DenseMatrix
from dense_linalg.storage.text_format import MultiplyProblem
from dense_linalg.storage.text_format import read_multiply_problem
from dense_linalg.storage.text_format import read_samples
from dense_linalg.storage.text_format import read_sized_matrix


def load_multiply_problem(path: str | os.PathLike[str]) -> MultiplyProblem:
    """Load the operands of a multiply problem from a text file."""
    path_obj: Path = Path(os.fspath(path))
    try:
        with path_obj.open("r", encoding="utf-8") as handle:
            return read_multiply_problem(handle)
    except OSError as exc:
        raise MatrixIOError(
            f"Could not open input file: {path_obj}", str(path_obj)
        ) from exc


def load_matrix(path: str | os.PathLike[str], name: str = "A") -> DenseMatrix:
    """Load a "rows cols" matrix file."""
    path_obj: Path = Path(os.fspath(path))
    try:
        with path_obj.open("r", encoding="utf-8") as handle:
            return read_sized_matrix(handle, name)
    except OSError as exc:
        raise MatrixIOError(
            f"Could not open input file: {path_obj}", str(path_obj)
        ) from exc


def load_samples(
    path: str | os.PathLike[str],
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Load "x y" sample pairs from a text file."""
    path_obj: Path = Path(os.fspath(path))
    try:
        with path_obj.open("r", encoding="utf-8") as handle:
            return read_samples(handle)
    except OSError as exc:
        raise MatrixIOError(
            f"Could not open data file: {path_obj}", str(path_obj)
        ) from exc


def write_text(
    path: str | os.PathLike[str],
    text: str,
    *,
    atomic_write: bool = True,
) -> None:
    """Write text to a file, via a temporary sibling when atomic."""
    path_obj: Path = Path(os.fspath(path))
    tmp_path: Path = path_obj.with_name(f".{path_obj.name}.tmp.{os.getpid()}")
    try:
        if atomic_write:
            with tmp_path.open("w", encoding="utf-8", newline="") as handle:
                handle.write(text)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_path, path_obj)
        else:
            path_obj.write_text(text, encoding="utf-8")
    except OSError as exc:
        if atomic_write:
            tmp_path.unlink(missing_ok=True)
        raise MatrixIOError(
            f"Could not open output file: {path_obj}", str(path_obj)
        ) from exc
