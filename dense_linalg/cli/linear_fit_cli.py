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
Entry point for the best-fit line through the normal equations
"""

import argparse
import sys
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from dense_linalg.cli.cli_support import ArgumentParser
from dense_linalg.cli.cli_support import add_common_arguments
from dense_linalg.cli.cli_support import run_program
from dense_linalg.config.linalg_config import LinalgConfig
from dense_linalg.pipelines.linear_fit import DEFAULT_X
from dense_linalg.pipelines.linear_fit import DEFAULT_Y
from dense_linalg.pipelines.linear_fit import LinearFit
from dense_linalg.pipelines.linear_fit import fit_line
from dense_linalg.pipelines.linear_fit import report_linear_fit
from dense_linalg.report.reporter import ConsoleReporter
from dense_linalg.storage.persistence import load_samples


################################################################################
# Entry point
################################################################################


def _parse_args(args: Optional[list[str]] = None) -> argparse.Namespace:
    parser = ArgumentParser(
        prog="dense-linear-fit",
        description="Fit y = a*x + b by solving the normal equations",
    )
    parser.add_argument(
        "--data",
        default=None,
        help="File with one 'x y' pair per line (built-in samples otherwise)",
    )
    add_common_arguments(parser)
    return parser.parse_args(args=args)


def _run(options: argparse.Namespace, config: LinalgConfig) -> None:
    x: NDArray[np.float64]
    y: NDArray[np.float64]
    if options.data is not None:
        x, y = load_samples(options.data)
    else:
        x = np.array(DEFAULT_X, dtype=np.float64)
        y = np.array(DEFAULT_Y, dtype=np.float64)

    fit: LinearFit = fit_line(x, y)
    with ConsoleReporter(decimals=config.console_decimals()) as reporter:
        report_linear_fit(fit, reporter)


def main(args: Optional[list[str]] = None) -> int:
    return run_program(_parse_args, _run, args)


if __name__ == "__main__":
    sys.exit(main())
