################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of dense_linalg
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for the normal-equation line fit."""

from __future__ import annotations

import io

import numpy as np
import pytest

from dense_linalg.errors import InvalidDimensionError
from dense_linalg.errors import LinearAlgebraNumericFailure
from dense_linalg.pipelines.linear_fit import DEFAULT_X
from dense_linalg.pipelines.linear_fit import DEFAULT_Y
from dense_linalg.pipelines.linear_fit import LinearFit
from dense_linalg.pipelines.linear_fit import fit_line
from dense_linalg.pipelines.linear_fit import report_linear_fit
from dense_linalg.report.reporter import ConsoleReporter


def test_fit_default_samples() -> None:
    """The built-in samples give a = 1.1 and b = 0.5."""
    fit: LinearFit = fit_line(DEFAULT_X, DEFAULT_Y)
    assert fit.slope == pytest.approx(1.1)
    assert fit.intercept == pytest.approx(0.5)
    assert np.allclose(fit.residuals.predicted, [1.6, 2.7, 3.8, 4.9])
    assert fit.residuals.sse == pytest.approx(0.70)
    assert fit.residuals.mse == pytest.approx(0.175)


def test_fit_exact_line() -> None:
    """Collinear samples are recovered with zero error."""
    x: np.ndarray = np.linspace(-3.0, 3.0, 7)
    fit: LinearFit = fit_line(x, -2.0 * x + 4.0)
    assert fit.slope == pytest.approx(-2.0)
    assert fit.intercept == pytest.approx(4.0)
    assert fit.residuals.sse == pytest.approx(0.0, abs=1e-20)
    assert fit.predict(10.0) == pytest.approx(-16.0)


def test_fit_matches_polyfit() -> None:
    """Noisy samples agree with numpy.polyfit."""
    rng: np.random.Generator = np.random.default_rng(5)
    x: np.ndarray = np.linspace(0.0, 10.0, 25)
    y: np.ndarray = 0.3 * x - 1.0 + rng.normal(scale=0.2, size=x.size)
    fit: LinearFit = fit_line(x, y)
    assert np.allclose((fit.slope, fit.intercept), np.polyfit(x, y, 1))


def test_fit_identical_x_is_singular() -> None:
    """Samples sharing one x make A^T A singular."""
    with pytest.raises(LinearAlgebraNumericFailure):
        fit_line([2.0, 2.0, 2.0], [1.0, 2.0, 3.0])


def test_fit_too_few_samples() -> None:
    """A line needs two samples."""
    with pytest.raises(InvalidDimensionError):
        fit_line([1.0], [1.0])


def test_report_lines() -> None:
    """The report lists the coefficients, each point and the error sums."""
    stream: io.StringIO = io.StringIO()
    with ConsoleReporter(stream=stream, decimals=4) as reporter:
        report_linear_fit(fit_line(DEFAULT_X, DEFAULT_Y), reporter)
    lines: list[str] = stream.getvalue().splitlines()
    assert "a = 1.1000" in lines
    assert "b = 0.5000" in lines
    assert "x=1.0000  y=2.0000  y_hat=1.6000  err=-0.4000" in lines
    assert "SSE = 0.7000" in lines
    assert "MSE = 0.1750" in lines
