"""
Readers for requirement lists.

JSON format: [{"name": "...", "cost": <int>, "profit": <int>}, ...]  ("name" optional)
CSV format : header row with "cost" and "profit" columns, "name" optional.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any, Dict, List, Union

from Core.errors import InvalidInputError, SchemaError
from Core.problem import Requirement

PathLike = Union[str, Path]


def _require(obj: Dict[str, Any], key: str, where: str) -> Any:
    if key not in obj or obj[key] in (None, ""):
        raise SchemaError(f"{where}: missing required key '{key}'")
    return obj[key]


def _as_int(value: Any, key: str, where: str) -> int:
    if isinstance(value, bool):
        raise SchemaError(f"{where}: '{key}' must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise SchemaError(f"{where}: '{key}' must be an integer, got {value!r}")


def _build(obj: Dict[str, Any], where: str) -> Requirement:
    cost = _as_int(_require(obj, "cost", where), "cost", where)
    profit = _as_int(_require(obj, "profit", where), "profit", where)
    name = str(obj.get("name") or "")
    try:
        return Requirement(cost=cost, profit=profit, name=name)
    except InvalidInputError as e:
        raise SchemaError(f"{where}: {e}") from e


def read_requirements_json(path: PathLike) -> List[Requirement]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise SchemaError(f"{path}: failed to read/parse JSON: {e}") from e

    if not isinstance(data, list):
        raise SchemaError(f"{path}: expected a JSON array.")

    reqs: List[Requirement] = []
    for idx, obj in enumerate(data, start=1):
        if not isinstance(obj, dict):
            raise SchemaError(f"{path}[{idx}]: expected an object.")
        reqs.append(_build(obj, f"{path}[{idx}]"))
    return reqs


def read_requirements_csv(path: PathLike) -> List[Requirement]:
    try:
        with open(path, "r", newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            fields = set(reader.fieldnames or [])
            missing = {"cost", "profit"} - fields
            if missing:
                raise SchemaError(f"{path}: missing column(s) {sorted(missing)}")
            # Header is line 1
            return [_build(row, f"{path}:{idx}") for idx, row in enumerate(reader, start=2)]
    except OSError as e:
        raise SchemaError(f"{path}: failed to read CSV: {e}") from e


def read_requirements(path: PathLike) -> List[Requirement]:
    """Load requirements, choosing the reader from the file suffix."""
    suffix = Path(path).suffix.lower()
    if suffix == ".json":
        return read_requirements_json(path)
    if suffix == ".csv":
        return read_requirements_csv(path)
    raise SchemaError(f"{path}: unsupported file type '{suffix}' (expected .json or .csv)")
