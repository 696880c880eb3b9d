# AreaStats
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""StatsWales-style JSON → areas with per-year measure values."""

from __future__ import annotations

import json
from typing import Any, Iterator, Mapping, Tuple

from ..columns import Column, ColumnMapping, SourceFormat
from ..errors import ColumnMismatchError
from ..filters import Filters
from ..model import ENGLISH, Area, Measure
from .base import LOGGER, BaseImporter, KnownNames, parse_value, parse_year

DEFAULT_RECORDS_KEY = "value"


class StatsJsonImporter(BaseImporter):
    """A JSON object whose ``records_key`` holds a list of flat records.

    Datasets either carry the measure code and name on every record
    (``measure_code``/``measure_name`` mapped) or describe a single measure
    whose code and label come from ``single_measure_code``/``single_measure_name``.
    """

    source_format = SourceFormat.STATS_JSON

    def __init__(
        self,
        cols: ColumnMapping,
        filters: Filters | None = None,
        known_names: KnownNames | None = None,
        *,
        source: str | None = None,
        records_key: str | None = None,
    ) -> None:
        super().__init__(cols, filters, known_names, source=source)
        self.records_key = records_key or DEFAULT_RECORDS_KEY

    def _load(self, text: str) -> list:
        try:
            document = json.loads(text)
        except json.JSONDecodeError as exc:
            raise self.malformed(f"invalid JSON: {exc.msg} (line {exc.lineno})") from exc
        if not isinstance(document, Mapping):
            raise self.malformed("top-level JSON value must be an object")
        if self.records_key not in document:
            raise self.malformed(f"top-level key '{self.records_key}' is missing")
        records = document[self.records_key]
        if not isinstance(records, list):
            raise self.malformed(f"'{self.records_key}' must hold a list of records")
        return records

    def _field(self, record: Mapping[str, Any], tag: Column) -> Any:
        key = self.column(tag)
        if key not in record:
            raise ColumnMismatchError(
                f"record has no '{key}' field for {tag.value}", source=self.source
            )
        return record[key]

    def _measure_identity(self, record: Mapping[str, Any]) -> Tuple[str, str]:
        if Column.MEASURE_CODE in self.cols:
            code = self._field(record, Column.MEASURE_CODE)
            name = self._field(record, Column.MEASURE_NAME)
        else:
            code = self.column(Column.SINGLE_MEASURE_CODE)
            name = self.column(Column.SINGLE_MEASURE_NAME)
        return str(code), str(name)

    def records(self, text: str) -> Iterator[Area]:
        records = self._load(text)

        kept = 0
        for index, record in enumerate(records):
            if not isinstance(record, Mapping):
                raise self.malformed(f"record {index} is not an object")

            code = str(self._field(record, Column.AUTH_CODE))
            english = str(self._field(record, Column.AUTH_NAME_ENG))
            measure_code, measure_name = self._measure_identity(record)
            year = parse_year(self._field(record, Column.YEAR), source=self.source)
            value = parse_value(self._field(record, Column.VALUE), source=self.source)

            names = self.known_names(code) + [english]
            if not self.filters.areas.matches(code, enhanced=True, extra=names):
                continue

            area = Area(code)
            area.set_name(ENGLISH, english)
            if self.filters.measures.matches(measure_code):
                measure = Measure(measure_code, measure_name)
                if self.filters.years.matches(year):
                    measure.set_value(year, value)
                area.set_measure(measure_code, measure)
            kept += 1
            yield area

        LOGGER.info("%s: read %s records, kept %s", self.label, len(records), kept)


__all__ = ["DEFAULT_RECORDS_KEY", "StatsJsonImporter"]
