################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of dense_linalg
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for the parameter schema."""

from __future__ import annotations

import dataclasses

import pytest

from dense_linalg.config.linalg_params import FIT_CSV_STEPS
from dense_linalg.config.linalg_params import OUTPUT_FILE_DIGITS
from dense_linalg.config.linalg_params import LinalgParams
from dense_linalg.config.linalg_params import LinalgParamsError


def test_defaults_validate() -> None:
    """The default tree is valid."""
    params: LinalgParams = LinalgParams.defaults()
    params.validate()
    assert params.output.file_digits == OUTPUT_FILE_DIGITS
    assert params.fit.csv_steps == FIT_CSV_STEPS


def test_nested_dict() -> None:
    """The nested dict mirrors the namespaces."""
    nested: dict[str, object] = LinalgParams.defaults().as_nested_dict()
    assert set(nested) == {"output", "svd", "fit"}
    assert nested["fit"] == {
        "export_csv": True,
        "csv_path": "fit.csv",
        "csv_steps": 200,
    }


def test_replace_namespace() -> None:
    """Replacing a namespace leaves the others untouched."""
    params: LinalgParams = LinalgParams.defaults()
    updated: LinalgParams = params.replace(
        svd=dataclasses.replace(params.svd, column_width=20)
    )
    assert updated.svd.column_width == 20
    assert updated.output == params.output
    assert params.svd.column_width != 20


@pytest.mark.parametrize(
    ("namespace", "field", "value"),
    [
        ("output", "file_digits", 0),
        ("output", "console_decimals", -1),
        ("output", "atomic_write", 1),
        ("svd", "column_width", -3),
        ("fit", "csv_path", ""),
        ("fit", "csv_steps", 1),
        ("fit", "csv_steps", True),
    ],
)
def test_validate_rejects(namespace: str, field: str, value: object) -> None:
    """Out-of-range values fail validation."""
    params: LinalgParams = LinalgParams.defaults()
    section: object = dataclasses.replace(getattr(params, namespace), **{field: value})
    with pytest.raises(LinalgParamsError):
        params.replace(**{namespace: section}).validate()
