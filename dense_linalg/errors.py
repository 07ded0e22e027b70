################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of dense_linalg
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Error taxonomy shared by every dense linear-algebra program.

Each error carries the process exit code the command line maps it to, so the
entry points never need to inspect error types individually.
"""

from __future__ import annotations

from typing import Optional


# Successful run
EXIT_SUCCESS: int = 0
# Wrong command line or invalid configuration
EXIT_USAGE: int = 1
# Missing or unparsable token in a matrix or sample stream
EXIT_MALFORMED_INPUT: int = 2
# Non-positive or mismatched dimensions
EXIT_INVALID_DIMENSION: int = 3
# Input or output path could not be opened
EXIT_IO: int = 4
# A routine rejected an argument (caller bug)
EXIT_INVALID_ARGUMENT: int = 5
# A routine reported a numerical failure
EXIT_NUMERIC_FAILURE: int = 6


class DenseLinalgError(Exception):
    """Base class for all errors raised by dense_linalg."""

    exit_code: int = EXIT_USAGE


class MalformedInputError(DenseLinalgError):
    """Raised when an input token is missing or is not a finite number.

    Attributes:
        matrix: Name of the matrix (or data set) being read
        row: Zero-based row of the failing element
        col: Zero-based column of the failing element
    """

    exit_code = EXIT_MALFORMED_INPUT

    def __init__(self, matrix: str, row: int, col: int, reason: str = "") -> None:
        self.matrix: str = matrix
        self.row: int = row
        self.col: int = col
        message: str = f"Error reading matrix {matrix} at ({row},{col})"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class InvalidDimensionError(DenseLinalgError):
    """Raised for non-positive dimensions or a shared-dimension mismatch."""

    exit_code = EXIT_INVALID_DIMENSION


class MatrixIOError(DenseLinalgError):
    """Raised when an input or output path cannot be opened."""

    exit_code = EXIT_IO

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        self.path: Optional[str] = path
        super().__init__(message)


class LinearAlgebraInvalidArgument(DenseLinalgError):
    """Raised when a routine reports a negative status code.

    Attributes:
        routine: Name of the routine that rejected the call
        position: 1-based index of the offending parameter
    """

    exit_code = EXIT_INVALID_ARGUMENT

    def __init__(self, routine: str, position: int) -> None:
        self.routine: str = routine
        self.position: int = position
        super().__init__(f"{routine}: illegal argument at position {position}")


class LayoutMismatchError(DenseLinalgError):
    """Raised when a matrix is passed with the wrong physical layout."""

    exit_code = EXIT_INVALID_ARGUMENT


class LinearAlgebraNumericFailure(DenseLinalgError):
    """Raised when a routine reports a positive status code.

    Attributes:
        routine: Name of the routine that failed
        info: Routine-specific positive status code
    """

    exit_code = EXIT_NUMERIC_FAILURE

    def __init__(self, routine: str, info: int, detail: str = "") -> None:
        self.routine: str = routine
        self.info: int = info
        message: str = f"{routine}: numerical failure (info={info})"
        if detail:
            message = f"{routine}: {detail} (info={info})"
        super().__init__(message)
