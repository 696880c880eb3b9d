# AreaStats
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Dispatch a stream to the matching importer and merge the result."""

from __future__ import annotations

import logging
from typing import TextIO

from ..columns import ColumnMapping, SourceFormat
from ..filters import Filters, TokenFilterLike, YearRangeLike
from ..model import Areas
from .authority_by_year import AuthorityByYearImporter
from .authority_codes import AuthorityCodeImporter
from .base import BaseImporter, read_stream
from .stats_json import StatsJsonImporter

LOGGER = logging.getLogger(__name__)

IMPORTER_REGISTRY: dict[SourceFormat, type[BaseImporter]] = {
    SourceFormat.AUTHORITY_CODE_CSV: AuthorityCodeImporter,
    SourceFormat.STATS_JSON: StatsJsonImporter,
    SourceFormat.AUTHORITY_BY_YEAR_CSV: AuthorityByYearImporter,
}


def _resolve_format(source_format: SourceFormat | str) -> SourceFormat:
    try:
        return SourceFormat(source_format)
    except ValueError as exc:
        raise ValueError(
            f"Unknown source format '{source_format}'. "
            f"Available: {sorted(fmt.value for fmt in IMPORTER_REGISTRY)}"
        ) from exc


def build_importer(
    source_format: SourceFormat | str,
    cols: ColumnMapping,
    filters: Filters,
    areas: Areas,
    staged: Areas,
    *,
    source: str | None = None,
    records_key: str | None = None,
) -> BaseImporter:
    fmt = _resolve_format(source_format)
    cls = IMPORTER_REGISTRY[fmt]

    def known_names(code: str) -> list[str]:
        return areas.existing_names(code) + staged.existing_names(code)

    if cls is StatsJsonImporter:
        return StatsJsonImporter(
            cols, filters, known_names, source=source, records_key=records_key
        )
    return cls(cols, filters, known_names, source=source)


def populate(
    areas: Areas,
    stream: TextIO,
    source_format: SourceFormat | str,
    cols: ColumnMapping,
    areas_filter: TokenFilterLike = None,
    measures_filter: TokenFilterLike = None,
    years_filter: YearRangeLike = None,
    *,
    source: str | None = None,
    records_key: str | None = None,
) -> int:
    """Import one stream into ``areas`` and return the number of areas touched.

    Records are staged in a private container first; ``areas`` is only
    modified once the whole source has parsed, so a failing source never
    leaves half of its rows merged.
    """

    if not isinstance(cols, ColumnMapping):
        cols = ColumnMapping(cols)
    filters = Filters.build(areas_filter, measures_filter, years_filter)
    text = read_stream(stream, source=source)

    staged = Areas()
    importer = build_importer(
        source_format,
        cols,
        filters,
        areas,
        staged,
        source=source,
        records_key=records_key,
    )
    for area in importer.records(text):
        staged.set_area(area.code, area)

    for area in staged:
        areas.set_area(area.code, area)
    LOGGER.info(
        "%s: merged %s areas (container now holds %s)",
        importer.label,
        len(staged),
        len(areas),
    )
    return len(staged)


__all__ = ["IMPORTER_REGISTRY", "build_importer", "populate"]
