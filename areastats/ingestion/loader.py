# AreaStats
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Batch loader that imports several datasets and isolates their failures."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

from ..common import status_counts
from ..config import AREAS_DATASET, DatasetSpec
from ..errors import AreaStatsError
from ..filters import Filters
from ..io import FileSource, InputSource
from ..model import Areas
from .engine import populate

LOGGER = logging.getLogger(__name__)

SourceFactory = Callable[[Path, DatasetSpec], InputSource]


def _file_source(data_dir: Path, spec: DatasetSpec) -> InputSource:
    return FileSource(data_dir / spec.file)


def load_dataset(
    areas: Areas,
    spec: DatasetSpec,
    source: InputSource,
    filters: Filters | None = None,
) -> int:
    """Open ``source`` and import it with the mapping from ``spec``."""

    filters = filters or Filters()
    with source.open() as stream:
        return populate(
            areas,
            stream,
            spec.source_format,
            spec.cols,
            filters.areas,
            filters.measures,
            filters.years,
            source=source.identifier,
            records_key=spec.records_key,
        )


def load_all(
    areas: Areas,
    data_dir: str | Path,
    datasets: Iterable[DatasetSpec],
    filters: Filters | None = None,
    *,
    source_factory: Optional[SourceFactory] = None,
) -> List[Dict[str, object]]:
    """Load every dataset into ``areas``; a failing dataset is logged and skipped.

    The authority code table (dataset code ``areas``) is loaded first when it
    is present so later datasets can be matched on area names. Returns one
    result dict per dataset with ``status`` ``ok`` or ``error``.
    """

    directory = Path(data_dir)
    factory = source_factory or _file_source
    filters = filters or Filters()
    ordered = sorted(datasets, key=lambda spec: spec.code != AREAS_DATASET)

    results: List[Dict[str, object]] = []
    for spec in ordered:
        source = factory(directory, spec)
        try:
            count = load_dataset(areas, spec, source, filters)
        except AreaStatsError as exc:
            LOGGER.error(
                "Error importing dataset %s (%s): [%s] %s",
                spec.code,
                source.identifier,
                exc.kind.value,
                exc.message,
            )
            results.append(
                {
                    "dataset": spec.code,
                    "source": source.identifier,
                    "status": "error",
                    "reason": f"{exc.kind.value}: {exc.message}",
                }
            )
            continue
        results.append(
            {
                "dataset": spec.code,
                "source": source.identifier,
                "status": "ok",
                "reason": None,
                "areas": count,
            }
        )

    LOGGER.info(
        "loaded %s datasets: %s",
        len(results),
        status_counts(result["status"] for result in results),
    )
    return results


def compute_exit_code(results: Iterable[dict]) -> int:
    """
    results: iterable of dataset result dicts with keys:
      - status: {"ok","error"}
      - reason: str or None
    Exit rules:
      - Any 'error' => 1
      - Otherwise => 0 (including when nothing was requested)
    """

    for result in results:
        status = (str(result.get("status") or "")).lower()
        if status == "error":
            return 1
    return 0


__all__ = ["compute_exit_code", "load_all", "load_dataset"]
