################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of dense_linalg
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Dense matrix values and layout conversion."""

from dense_linalg.matrix.dense_matrix import DenseMatrix
from dense_linalg.matrix.dense_matrix import Layout


__all__ = ["DenseMatrix", "Layout"]
