################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of dense_linalg
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Dense linear-algebra drivers over BLAS and LAPACK."""
