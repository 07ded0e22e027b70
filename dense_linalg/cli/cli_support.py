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
Shared plumbing for the command line entry points
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable
from typing import NoReturn
from typing import Optional
from typing import TextIO

from dense_linalg.config.linalg_config import LinalgConfig
from dense_linalg.config.linalg_config import LinalgConfigError
from dense_linalg.config.linalg_params import LinalgParams
from dense_linalg.config.params_yaml import ParamsYamlError
from dense_linalg.config.params_yaml import load_params_yaml
from dense_linalg.errors import EXIT_SUCCESS
from dense_linalg.errors import EXIT_USAGE
from dense_linalg.errors import DenseLinalgError


_LOG: logging.Logger = logging.getLogger(__name__)


class UsageError(Exception):
    """Raised for a malformed command line."""


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises instead of exiting on bad usage."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(f"{message}\n{self.format_usage().strip()}")


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Add --config and --verbose."""
    parser.add_argument(
        "--config",
        default=None,
        help="YAML file with parameter overrides",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log routine calls and dimensions",
    )


def configure_logging(verbose: bool) -> None:
    """Route log records to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def load_config(config_path: Optional[str]) -> LinalgConfig:
    """Build the validated configuration, applying YAML overrides if given."""
    params: LinalgParams = LinalgParams.defaults()
    if config_path is not None:
        params = load_params_yaml(config_path, params)
    return LinalgConfig(params)


def run_program(
    parse: Callable[[Optional[list[str]]], argparse.Namespace],
    body: Callable[[argparse.Namespace, LinalgConfig], None],
    args: Optional[list[str]] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Parse arguments, run the program and map failures to exit codes."""
    err: TextIO = stderr if stderr is not None else sys.stderr

    try:
        options: argparse.Namespace = parse(args)
    except UsageError as exc:
        err.write(f"Usage error: {exc}\n")
        return EXIT_USAGE

    configure_logging(options.verbose)

    try:
        config: LinalgConfig = load_config(options.config)
    except (ParamsYamlError, LinalgConfigError) as exc:
        err.write(f"Error: {exc}\n")
        return EXIT_USAGE

    try:
        body(options, config)
    except DenseLinalgError as exc:
        _LOG.debug("Run failed", exc_info=True)
        err.write(f"Error: {exc}\n")
        return exc.exit_code

    return EXIT_SUCCESS
