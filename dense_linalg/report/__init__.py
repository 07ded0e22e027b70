################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of dense_linalg
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Result reporters and diagnostics."""

from dense_linalg.report.reporter import ConsoleReporter
from dense_linalg.report.reporter import FileReporter
from dense_linalg.report.reporter import Reporter
from dense_linalg.report.reporter import Table


__all__ = ["ConsoleReporter", "FileReporter", "Reporter", "Table"]
