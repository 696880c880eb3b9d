# AreaStats
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from ..columns import ColumnMapping, SourceFormat

log = logging.getLogger(__name__)

AREAS_DATASET = "areas"
DEFAULT_DATA_DIR = "datasets"


@dataclass(frozen=True)
class DatasetSpec:
    """One importable dataset: its file, format and column mapping."""

    code: str
    name: str
    file: str
    source_format: SourceFormat
    cols: ColumnMapping
    records_key: Optional[str] = None


def _default_config_path() -> Path:
    env_path = os.getenv("AREASTATS_CONFIG_PATH")
    if env_path:
        return Path(env_path).expanduser().resolve()
    return Path(__file__).resolve().parent / "datasets.yml"


@lru_cache(maxsize=1)
def load() -> Dict[str, Any]:
    """Load the application configuration from YAML."""

    path = _default_config_path()
    if not path.exists():
        log.warning("Config file %s not found; using empty configuration", path)
        return {}
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        return {}
    return data


def data_dir() -> Path:
    return Path(os.getenv("AREASTATS_DATA_DIR") or DEFAULT_DATA_DIR)


def _build_spec(code: str, entry: Mapping[str, Any]) -> DatasetSpec:
    if not isinstance(entry, Mapping):
        raise ValueError(f"Dataset '{code}' must be a mapping")
    missing = [key for key in ("file", "format", "cols") if not entry.get(key)]
    if missing:
        raise ValueError(f"Dataset '{code}' is missing required keys: {missing}")
    try:
        source_format = SourceFormat(str(entry["format"]).strip().lower())
    except ValueError as exc:
        raise ValueError(f"Dataset '{code}' has unknown format '{entry['format']}'") from exc
    try:
        cols = ColumnMapping.from_config(entry["cols"])
    except ValueError as exc:
        raise ValueError(f"Dataset '{code}': {exc}") from exc
    records_key = entry.get("records_key")
    return DatasetSpec(
        code=code,
        name=str(entry.get("name") or code),
        file=str(entry["file"]),
        source_format=source_format,
        cols=cols,
        records_key=str(records_key) if records_key else None,
    )


def load_datasets(config: Optional[Mapping[str, Any]] = None) -> Dict[str, DatasetSpec]:
    """Return the dataset registry keyed by lowercase dataset code, in file order."""

    payload = load() if config is None else config
    raw = payload.get("datasets") or {}
    if not isinstance(raw, Mapping):
        raise ValueError("'datasets' must be a mapping of dataset code to definition")
    registry: Dict[str, DatasetSpec] = {}
    for key, entry in raw.items():
        code = str(key).strip().lower()
        registry[code] = _build_spec(code, entry)
    return registry


__all__ = [
    "AREAS_DATASET",
    "DEFAULT_DATA_DIR",
    "DatasetSpec",
    "data_dir",
    "load",
    "load_datasets",
]
