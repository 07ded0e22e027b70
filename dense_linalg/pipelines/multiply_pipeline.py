################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of dense_linalg
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""General dense matrix multiply: read, reorder, multiply, reorder back, write."""

from __future__ import annotations

import logging
import os
from typing import Optional

from dense_linalg.backend import blas_invoker
from dense_linalg.config.linalg_config import LinalgConfig
from dense_linalg.config.linalg_params import LinalgParams
from dense_linalg.errors import InvalidDimensionError
from dense_linalg.matrix.dense_matrix import DenseMatrix
from dense_linalg.matrix.dense_matrix import Layout
from dense_linalg.matrix.layout import to_column_major
from dense_linalg.matrix.layout import to_row_major
from dense_linalg.report.reporter import FileReporter
from dense_linalg.storage.persistence import load_multiply_problem
from dense_linalg.storage.text_format import MultiplyProblem


_LOG: logging.Logger = logging.getLogger(__name__)


def multiply_row_major(a: DenseMatrix, b: DenseMatrix) -> DenseMatrix:
    """Return the row-major product of two row-major matrices.

    The shared dimension is checked before any buffer is reordered, so a
    mismatch never reaches the BLAS routine.
    """
    a.require_layout(Layout.ROW_MAJOR, "A")
    b.require_layout(Layout.ROW_MAJOR, "B")
    if a.cols != b.rows:
        raise InvalidDimensionError(
            f"Shared dimension mismatch: A has {a.cols} columns, B has {b.rows} rows"
        )

    product: DenseMatrix = blas_invoker.multiply(to_column_major(a), to_column_major(b))
    return to_row_major(product)


def run_multiply(
    input_path: str | os.PathLike[str],
    output_path: str | os.PathLike[str],
    config: Optional[LinalgConfig] = None,
) -> DenseMatrix:
    """Compute C = A * B from an input file and write C to the output file.

    The output file is only created once the product has been computed and
    formatted, so every failure leaves the destination untouched.
    """
    cfg: LinalgConfig = config if config is not None else LinalgConfig(
        LinalgParams.defaults()
    )

    problem: MultiplyProblem = load_multiply_problem(input_path)
    _LOG.debug(
        "Read A (%dx%d) and B (%dx%d) from %s",
        problem.a.rows,
        problem.a.cols,
        problem.b.rows,
        problem.b.cols,
        os.fspath(input_path),
    )

    product: DenseMatrix = multiply_row_major(problem.a, problem.b)

    with FileReporter(
        output_path, digits=cfg.file_digits(), atomic_write=cfg.atomic_write()
    ) as reporter:
        reporter.emit_matrix(product)

    _LOG.info(
        "Wrote C (%dx%d) to %s", product.rows, product.cols, os.fspath(output_path)
    )
    return product
