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
Entry point for the least-squares quadratic fit with CSV export
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
from dense_linalg.config.linalg_params import FitParams
from dense_linalg.pipelines.quadratic_fit import DEFAULT_X
from dense_linalg.pipelines.quadratic_fit import DEFAULT_Y
from dense_linalg.pipelines.quadratic_fit import QuadraticFit
from dense_linalg.pipelines.quadratic_fit import curve_table
from dense_linalg.pipelines.quadratic_fit import fit_quadratic
from dense_linalg.pipelines.quadratic_fit import report_plot_hint
from dense_linalg.pipelines.quadratic_fit import report_quadratic_fit
from dense_linalg.report.reporter import ConsoleReporter
from dense_linalg.report.reporter import FileReporter
from dense_linalg.storage.persistence import load_samples


################################################################################
# Entry point
################################################################################


def _parse_args(args: Optional[list[str]] = None) -> argparse.Namespace:
    parser = ArgumentParser(
        prog="dense-quadratic-fit",
        description="Fit y = a*x^2 + b*x + c by QR least squares",
    )
    parser.add_argument(
        "--data",
        default=None,
        help="File with one 'x y' pair per line (built-in samples otherwise)",
    )
    csv_group = parser.add_mutually_exclusive_group()
    csv_group.add_argument(
        "--csv",
        default=None,
        help="Path of the exported curve CSV (overrides fit.csv_path)",
    )
    csv_group.add_argument(
        "--no-csv",
        action="store_true",
        help="Skip the CSV export",
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

    fit: QuadraticFit = fit_quadratic(x, y)
    fit_params: FitParams = config.params.fit
    export_csv: bool = fit_params.export_csv and not options.no_csv
    csv_path: str = options.csv if options.csv is not None else fit_params.csv_path

    with ConsoleReporter(decimals=config.console_decimals()) as console:
        report_quadratic_fit(fit, console)
        if export_csv:
            with FileReporter(
                csv_path,
                digits=config.file_digits(),
                atomic_write=config.atomic_write(),
            ) as table_file:
                table_file.export_table(curve_table(fit, fit_params.csv_steps))
            report_plot_hint(csv_path, console)


def main(args: Optional[list[str]] = None) -> int:
    return run_program(_parse_args, _run, args)


if __name__ == "__main__":
    sys.exit(main())
