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
Entry point for C = A * B between matrices read from a text file
"""

import argparse
import sys
from typing import Optional

from dense_linalg.cli.cli_support import ArgumentParser
from dense_linalg.cli.cli_support import add_common_arguments
from dense_linalg.cli.cli_support import run_program
from dense_linalg.config.linalg_config import LinalgConfig
from dense_linalg.matrix.dense_matrix import DenseMatrix
from dense_linalg.pipelines.multiply_pipeline import run_multiply


################################################################################
# Entry point
################################################################################


def _parse_args(args: Optional[list[str]] = None) -> argparse.Namespace:
    parser = ArgumentParser(
        prog="dense-matmul",
        description="Multiply A (m x n) by B (n x l) and write C (m x l)",
    )
    parser.add_argument("input", help="Input file: 'm n l', then A, then B")
    parser.add_argument("output", help="Output file: 'm l', then C")
    add_common_arguments(parser)
    return parser.parse_args(args=args)


def _run(options: argparse.Namespace, config: LinalgConfig) -> None:
    product: DenseMatrix = run_multiply(options.input, options.output, config)
    print(f"OK: C = A*B with DGEMM. Dimensions: ({product.rows}x{product.cols})")


def main(args: Optional[list[str]] = None) -> int:
    return run_program(_parse_args, _run, args)


if __name__ == "__main__":
    sys.exit(main())
