################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of dense_linalg
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Interpretation of LAPACK "info" status codes."""

from __future__ import annotations

from dense_linalg.errors import LinearAlgebraInvalidArgument
from dense_linalg.errors import LinearAlgebraNumericFailure


# Human-readable meaning of a positive info code per routine
NUMERIC_FAILURE_DETAIL: dict[str, str] = {
    "dgesv": "matrix is singular, U(info,info) is exactly zero",
    "dgels": "design matrix does not have full rank",
    "dgesvd": "bidiagonal QR iteration did not converge",
}


def check_status(routine: str, info: int) -> None:
    """Raise the matching error for a non-zero status code.

    Args:
        routine: Name of the routine that produced the status
        info: 0 on success, -i when argument i was illegal, positive on a
            routine-specific numerical failure
    """
    status: int = int(info)
    if status < 0:
        raise LinearAlgebraInvalidArgument(routine, -status)
    if status > 0:
        raise LinearAlgebraNumericFailure(
            routine, status, NUMERIC_FAILURE_DETAIL.get(routine, "")
        )
