################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of dense_linalg
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""High-level configuration wrapper for the linear-algebra programs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from dense_linalg.config.linalg_params import LinalgParams
from dense_linalg.config.linalg_params import LinalgParamsError


# Doubles need 17 significant digits to survive a text round trip
MIN_FILE_DIGITS: int = 17

# Human-readable console precision range
CONSOLE_DECIMALS_RANGE: range = range(8, 11)


class LinalgConfigError(Exception):
    """Raised when configuration validation fails."""


@dataclass(frozen=True)
class LinalgConfig:
    """Convenience wrapper around linear-algebra parameters."""

    params: LinalgParams

    def __init__(self, params: LinalgParams) -> None:
        """Initialize the configuration wrapper and validate."""
        object.__setattr__(self, "params", params)
        self.validate()

    def validate(self) -> None:
        """Validate parameter invariants and cross-namespace policies."""
        try:
            self.params.validate()
        except LinalgParamsError as exc:
            raise LinalgConfigError(str(exc)) from exc

        if self.params.output.file_digits < MIN_FILE_DIGITS:
            raise LinalgConfigError(
                f"output.file_digits must be at least {MIN_FILE_DIGITS}"
            )

        if self.params.output.console_decimals not in CONSOLE_DECIMALS_RANGE:
            raise LinalgConfigError("output.console_decimals must be between 8 and 10")

        if self.params.svd.console_decimals not in CONSOLE_DECIMALS_RANGE:
            raise LinalgConfigError("svd.console_decimals must be between 8 and 10")

        if Path(self.params.fit.csv_path).suffix.lower() != ".csv":
            raise LinalgConfigError("fit.csv_path must end with .csv")

    def file_digits(self) -> int:
        """Return the significant digits used for file output."""
        return self.params.output.file_digits

    def console_decimals(self) -> int:
        """Return the fixed decimals used for console reports."""
        return self.params.output.console_decimals

    def atomic_write(self) -> bool:
        """Return whether output files are written atomically."""
        return self.params.output.atomic_write
