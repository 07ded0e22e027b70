################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of dense_linalg
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for the dense-svd command line."""

from __future__ import annotations

from pathlib import Path

import pytest

from dense_linalg.cli.svd_cli import main
from dense_linalg.errors import EXIT_MALFORMED_INPUT
from dense_linalg.errors import EXIT_SUCCESS


def test_default_matrix(capsys: pytest.CaptureFixture[str]) -> None:
    """The built-in matrix decomposes and reports its error."""
    assert main([]) == EXIT_SUCCESS
    out: str = capsys.readouterr().out
    assert "Singular values S:" in out
    assert "Reconstructed A (U * Sigma * V^T):" in out
    assert "Max error |A_rec - A_orig| = 0.00000000" in out


def test_matrix_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """A rectangular matrix can be read from a file."""
    path: Path = tmp_path / "a.txt"
    path.write_text("3 2\n1 2\n3 4\n5 6\n", encoding="utf-8")
    assert main([str(path)]) == EXIT_SUCCESS
    out: str = capsys.readouterr().out
    assert "Matrix U (3x3):" in out
    assert "Matrix V^T (2x2):" in out


def test_malformed_matrix_file(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """A bad token reports the element position."""
    path: Path = tmp_path / "a.txt"
    path.write_text("2 2\n1 2\n3\n", encoding="utf-8")
    assert main([str(path)]) == EXIT_MALFORMED_INPUT
    assert "Error reading matrix A at (1,1)" in capsys.readouterr().err
