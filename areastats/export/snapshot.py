# AreaStats
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Structured snapshots of an :class:`Areas` container."""

from __future__ import annotations

import json
from typing import Any, Dict, Final

import pandas as pd

from ..model import Areas

EMPTY_DOCUMENT: Final[str] = "{}"

FRAME_COLUMNS: Final[list[str]] = [
    "authority_code",
    "measure",
    "label",
    "year",
    "value",
]


def to_dict(areas: Areas) -> Dict[str, Dict[str, Any]]:
    """Return ``{code: {"names": {...}, "measures": {code: {"YYYY": value}}}}``."""

    document: Dict[str, Dict[str, Any]] = {}
    for area in areas:
        measures: Dict[str, Dict[str, float]] = {}
        for codename, measure in area.get_measures().items():
            measures[codename] = {
                str(year): value for year, value in measure.get_values().items()
            }
        document[area.code] = {
            "names": area.get_names(),
            "measures": measures,
        }
    return document


def to_json(areas: Areas, *, indent: int | None = None) -> str:
    """Serialise ``areas``; an empty container is the literal ``{}``."""

    if len(areas) == 0:
        return EMPTY_DOCUMENT
    return json.dumps(to_dict(areas), ensure_ascii=False, allow_nan=False, indent=indent)


def to_frame(areas: Areas) -> pd.DataFrame:
    """Return a tidy frame with one row per area, measure and year."""

    rows: list[dict[str, Any]] = []
    for area in areas:
        for codename, measure in area.get_measures().items():
            for year, value in measure.get_values().items():
                rows.append(
                    {
                        "authority_code": area.code,
                        "measure": codename,
                        "label": measure.label,
                        "year": year,
                        "value": value,
                    }
                )
    if not rows:
        return pd.DataFrame(columns=FRAME_COLUMNS)
    frame = pd.DataFrame.from_records(rows, columns=FRAME_COLUMNS)
    frame["year"] = frame["year"].astype("int64")
    frame["value"] = frame["value"].astype(float)
    return frame.sort_values(["authority_code", "measure", "year"], ignore_index=True)


__all__ = ["EMPTY_DOCUMENT", "FRAME_COLUMNS", "to_dict", "to_frame", "to_json"]
