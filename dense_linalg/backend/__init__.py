################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of dense_linalg
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Wrappers around the BLAS and LAPACK routines
"""

from __future__ import annotations
