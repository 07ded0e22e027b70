################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of dense_linalg
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for the dense-linear-fit and dense-quadratic-fit command lines."""

from __future__ import annotations

from pathlib import Path

import pytest

from dense_linalg.cli import linear_fit_cli
from dense_linalg.cli import quadratic_fit_cli
from dense_linalg.errors import EXIT_INVALID_DIMENSION
from dense_linalg.errors import EXIT_NUMERIC_FAILURE
from dense_linalg.errors import EXIT_SUCCESS
from dense_linalg.errors import EXIT_USAGE


def test_linear_fit_defaults(capsys: pytest.CaptureFixture[str]) -> None:
    """The built-in samples print a = 1.1 and b = 0.5."""
    assert linear_fit_cli.main([]) == EXIT_SUCCESS
    out: str = capsys.readouterr().out
    assert "a = 1.1000000000" in out
    assert "b = 0.5000000000" in out
    assert "SSE = 0.7000000000" in out


def test_linear_fit_data_file(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Samples can come from a file."""
    data: Path = tmp_path / "line.txt"
    data.write_text("0 1\n1 3\n\n2 5\n", encoding="utf-8")
    assert linear_fit_cli.main(["--data", str(data)]) == EXIT_SUCCESS
    out: str = capsys.readouterr().out
    assert "a = 2.0000000000" in out
    assert "b = 1.0000000000" in out


def test_linear_fit_singular(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Identical abscissae report a numerical failure."""
    data: Path = tmp_path / "line.txt"
    data.write_text("2 1\n2 3\n", encoding="utf-8")
    assert linear_fit_cli.main(["--data", str(data)]) == EXIT_NUMERIC_FAILURE
    assert "dgesv" in capsys.readouterr().err


def test_linear_fit_too_few(tmp_path: Path) -> None:
    """A single sample cannot define a line."""
    data: Path = tmp_path / "line.txt"
    data.write_text("2 1\n", encoding="utf-8")
    assert linear_fit_cli.main(["--data", str(data)]) == EXIT_INVALID_DIMENSION


def test_quadratic_fit_exports_csv(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """The curve CSV is written and the plot hint points at it."""
    csv_path: Path = tmp_path / "curve.csv"
    assert quadratic_fit_cli.main(["--csv", str(csv_path)]) == EXIT_SUCCESS

    lines: list[str] = csv_path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "x_pts,y_pts,x_fit,y_fit"
    assert len(lines) == 201
    assert [float(v) for v in lines[1].split(",")[:3]] == [0.0, 1.2, 0.0]
    assert lines[7].startswith(",,")

    out: str = capsys.readouterr().out
    assert "Quadratic model" in out
    assert f'csvread("{csv_path}", 1, 0)' in out


def test_quadratic_fit_config_steps(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """The YAML file sets the curve path and resolution."""
    monkeypatch.chdir(tmp_path)
    config: Path = tmp_path / "params.yaml"
    config.write_text("fit:\n  csv_path: q.csv\n  csv_steps: 10\n", encoding="utf-8")
    assert quadratic_fit_cli.main(["--config", str(config)]) == EXIT_SUCCESS
    assert len((tmp_path / "q.csv").read_text(encoding="utf-8").splitlines()) == 11


def test_quadratic_fit_no_csv(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """--no-csv skips the export and the plot hint."""
    monkeypatch.chdir(tmp_path)
    assert quadratic_fit_cli.main(["--no-csv"]) == EXIT_SUCCESS
    assert list(tmp_path.iterdir()) == []
    assert "Octave" not in capsys.readouterr().out


def test_quadratic_fit_conflicting_flags() -> None:
    """--csv and --no-csv cannot be combined."""
    assert quadratic_fit_cli.main(["--csv", "a.csv", "--no-csv"]) == EXIT_USAGE
