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
Entry point for the SVD reconstruction check
"""

import argparse
import sys
from typing import Optional

from dense_linalg.cli.cli_support import ArgumentParser
from dense_linalg.cli.cli_support import add_common_arguments
from dense_linalg.cli.cli_support import run_program
from dense_linalg.config.linalg_config import LinalgConfig
from dense_linalg.matrix.dense_matrix import DenseMatrix
from dense_linalg.pipelines.svd_reconstruction import DEFAULT_MATRIX
from dense_linalg.pipelines.svd_reconstruction import SvdCheck
from dense_linalg.pipelines.svd_reconstruction import decompose_and_reconstruct
from dense_linalg.pipelines.svd_reconstruction import report_svd
from dense_linalg.report.reporter import ConsoleReporter
from dense_linalg.storage.persistence import load_matrix


################################################################################
# Entry point
################################################################################


def _parse_args(args: Optional[list[str]] = None) -> argparse.Namespace:
    parser = ArgumentParser(
        prog="dense-svd",
        description="Decompose A = U * Sigma * V^T and check the reconstruction",
    )
    parser.add_argument(
        "matrix",
        nargs="?",
        default=None,
        help="Matrix file: 'rows cols', then A (built-in 2x2 matrix otherwise)",
    )
    add_common_arguments(parser)
    return parser.parse_args(args=args)


def _run(options: argparse.Namespace, config: LinalgConfig) -> None:
    matrix: DenseMatrix
    if options.matrix is not None:
        matrix = load_matrix(options.matrix, "A")
    else:
        matrix = DenseMatrix.from_rows(DEFAULT_MATRIX)

    check: SvdCheck = decompose_and_reconstruct(matrix)
    with ConsoleReporter(
        decimals=config.params.svd.console_decimals,
        column_width=config.params.svd.column_width,
    ) as reporter:
        report_svd(check, reporter)


def main(args: Optional[list[str]] = None) -> int:
    return run_program(_parse_args, _run, args)


if __name__ == "__main__":
    sys.exit(main())
