################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of dense_linalg
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""YAML overrides for the parameter tree.

The YAML root is a mapping of namespaces, each a mapping of parameter
overrides. Omitted namespaces and keys keep their defaults:

    output:
      console_decimals: 8
    fit:
      csv_path: curve.csv
"""

from __future__ import annotations

import dataclasses
import numbers
import os
from pathlib import Path
from typing import Any

import yaml

from dense_linalg.config.linalg_params import LinalgParams


class ParamsYamlError(Exception):
    """Raised when a parameter YAML document is invalid."""


def loads_params_yaml(text: str, base: LinalgParams | None = None) -> LinalgParams:
    """Apply YAML overrides to a parameter tree (defaults when not given)."""
    try:
        loaded: Any = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ParamsYamlError("Invalid YAML syntax") from exc
    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ParamsYamlError("YAML root must be a mapping")
    return params_from_dict(loaded, base)


def load_params_yaml(
    path: str | os.PathLike[str], base: LinalgParams | None = None
) -> LinalgParams:
    """Load YAML overrides from a file."""
    path_obj: Path = Path(os.fspath(path))
    try:
        text: str = path_obj.read_text(encoding="utf-8")
    except OSError as exc:
        raise ParamsYamlError(f"Failed to read config from {path_obj}") from exc
    return loads_params_yaml(text, base)


def dumps_params_yaml(params: LinalgParams) -> str:
    """Serialize a full parameter tree to YAML text."""
    return yaml.safe_dump(params.as_nested_dict(), sort_keys=True)


def params_from_dict(
    data: dict[str, object], base: LinalgParams | None = None
) -> LinalgParams:
    """Apply a nested override mapping to a parameter tree."""
    params: LinalgParams = base if base is not None else LinalgParams.defaults()
    namespaces: dict[str, Any] = {
        field.name: getattr(params, field.name) for field in dataclasses.fields(params)
    }
    _require_known_keys("root", data, set(namespaces))

    overrides: dict[str, Any] = {}
    for name, value in data.items():
        section: dict[str, object] = _require_mapping(value, name)
        current: Any = namespaces[name]
        current_fields: dict[str, Any] = {
            field.name: getattr(current, field.name)
            for field in dataclasses.fields(current)
        }
        _require_known_keys(name, section, set(current_fields))
        coerced: dict[str, Any] = {
            key: _coerce_like(current_fields[key], item, f"{name}.{key}")
            for key, item in section.items()
        }
        overrides[name] = dataclasses.replace(current, **coerced)
    return params.replace(**overrides)


def _require_known_keys(scope: str, data: dict[str, object], allowed: set[str]) -> None:
    """Reject keys that are not part of the schema."""
    unknown: set[str] = {key for key in data.keys() if key not in allowed}
    if unknown:
        raise ParamsYamlError(
            f"Unexpected keys in {scope}: {', '.join(sorted(str(k) for k in unknown))}"
        )


def _require_mapping(value: object, name: str) -> dict[str, object]:
    """Ensure the value is a dictionary."""
    if not isinstance(value, dict):
        raise ParamsYamlError(f"{name} must be a mapping")
    return value


def _coerce_like(default: object, value: object, name: str) -> object:
    """Check an override against the type of its default value."""
    if isinstance(default, bool):
        if not isinstance(value, bool):
            raise ParamsYamlError(f"{name} must be a boolean")
        return value
    if isinstance(default, int):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise ParamsYamlError(f"{name} must be an integer")
        return int(value)
    if isinstance(default, str):
        if not isinstance(value, str):
            raise ParamsYamlError(f"{name} must be a string")
        return value
    return value
