################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of dense_linalg
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Structured configuration schema for the linear-algebra programs."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any


# Significant digits written to output files
OUTPUT_FILE_DIGITS: int = 17
# Fixed decimals printed in console reports
OUTPUT_CONSOLE_DECIMALS: int = 10
# Write output files through a temporary file and rename
OUTPUT_ATOMIC_WRITE: bool = True

# Fixed decimals printed for SVD factors
SVD_CONSOLE_DECIMALS: int = 8
# Minimum printed width of each SVD matrix column
SVD_COLUMN_WIDTH: int = 14

# Export the fitted curve as CSV
FIT_EXPORT_CSV: bool = True
# Path of the fitted curve CSV
FIT_CSV_PATH: str = "fit.csv"
# Number of grid points on the fitted curve
FIT_CSV_STEPS: int = 200


class LinalgParamsError(Exception):
    """Raised when parameter values violate basic constraints."""


def _require_int(value: int, name: str) -> None:
    """Require an integer that is not a bool."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise LinalgParamsError(f"{name} must be an int")


def _require_positive_int(value: int, name: str) -> None:
    """Require a positive integer."""
    _require_int(value, name)
    if value <= 0:
        raise LinalgParamsError(f"{name} must be positive")


def _require_non_negative_int(value: int, name: str) -> None:
    """Require a non-negative integer."""
    _require_int(value, name)
    if value < 0:
        raise LinalgParamsError(f"{name} must be non-negative")


@dataclass(frozen=True)
class OutputParams:
    """Number formatting and file output parameters."""

    # Significant digits written to output files
    file_digits: int = OUTPUT_FILE_DIGITS
    # Fixed decimals printed in console reports
    console_decimals: int = OUTPUT_CONSOLE_DECIMALS
    # Write output files through a temporary file and rename
    atomic_write: bool = OUTPUT_ATOMIC_WRITE


@dataclass(frozen=True)
class SvdParams:
    """Console layout for the SVD report."""

    # Fixed decimals printed for SVD factors
    console_decimals: int = SVD_CONSOLE_DECIMALS
    # Minimum printed width of each matrix column
    column_width: int = SVD_COLUMN_WIDTH


@dataclass(frozen=True)
class FitParams:
    """Curve-fitting export parameters."""

    # Export the fitted curve as CSV
    export_csv: bool = FIT_EXPORT_CSV
    # Path of the fitted curve CSV
    csv_path: str = FIT_CSV_PATH
    # Number of grid points on the fitted curve
    csv_steps: int = FIT_CSV_STEPS


@dataclass(frozen=True)
class LinalgParams:
    """Complete configuration tree."""

    output: OutputParams
    svd: SvdParams
    fit: FitParams

    @classmethod
    def defaults(cls) -> LinalgParams:
        """Return the default parameter tree."""
        return cls(
            output=OutputParams(),
            svd=SvdParams(),
            fit=FitParams(),
        )

    def validate(self) -> None:
        """Validate parameter invariants."""
        _require_positive_int(self.output.file_digits, "output.file_digits")
        _require_non_negative_int(
            self.output.console_decimals, "output.console_decimals"
        )
        if not isinstance(self.output.atomic_write, bool):
            raise LinalgParamsError("output.atomic_write must be a bool")

        _require_non_negative_int(self.svd.console_decimals, "svd.console_decimals")
        _require_non_negative_int(self.svd.column_width, "svd.column_width")

        if not isinstance(self.fit.export_csv, bool):
            raise LinalgParamsError("fit.export_csv must be a bool")
        if not self.fit.csv_path:
            raise LinalgParamsError("fit.csv_path must be set")
        # At least both end points of the curve
        _require_positive_int(self.fit.csv_steps, "fit.csv_steps")
        if self.fit.csv_steps < 2:
            raise LinalgParamsError("fit.csv_steps must be at least 2")

    def replace(self, **namespace_overrides: Any) -> LinalgParams:
        """Return a modified copy of the parameters."""
        return replace(self, **namespace_overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a nested dict representation for debugging."""
        return _dataclass_to_dict(self)


def _dataclass_to_dict(value: Any) -> Any:
    """Convert dataclasses into plain Python values."""
    if hasattr(value, "__dataclass_fields__"):
        return {
            field.name: _dataclass_to_dict(getattr(value, field.name))
            for field in fields(value)
        }
    return value
