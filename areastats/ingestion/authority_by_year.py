# AreaStats
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Authority-by-year wide table → one measure per area."""

from __future__ import annotations

from typing import Iterator, List

from ..columns import Column, SourceFormat
from ..errors import ColumnMismatchError, MalformedContentError
from ..model import Area, Measure
from .base import LOGGER, BaseImporter, iter_rows, parse_value, parse_year

EXPECTED_COLUMN_TAGS = 3


class AuthorityByYearImporter(BaseImporter):
    """Header ``<code column>,YYYY,YYYY,...``; each row a code then one value per year.

    Blank cells mean no data for that year and are skipped. Any other cell
    that is not numeric aborts the source.
    """

    source_format = SourceFormat.AUTHORITY_BY_YEAR_CSV

    def _header_years(self, header: List[str]) -> List[int]:
        years: List[int] = []
        for token in header[1:]:
            try:
                years.append(parse_year(token, source=self.source))
            except MalformedContentError as exc:
                raise self.malformed(f"header column {token!r} is not a year") from exc
        return years

    def records(self, text: str) -> Iterator[Area]:
        rows = iter_rows(text)
        header = next(rows, None)
        if header is None:
            raise self.malformed("missing header row")
        if len(self.cols) != EXPECTED_COLUMN_TAGS:
            raise ColumnMismatchError(
                f"mapping declares {len(self.cols)} columns, expected {EXPECTED_COLUMN_TAGS}",
                source=self.source,
            )
        code_header = self.column(Column.AUTH_CODE)
        if header[0].strip() != code_header:
            raise self.malformed(
                f"first header column {header[0]!r} does not match {code_header!r}"
            )
        measure_code = self.column(Column.SINGLE_MEASURE_CODE)
        measure_name = self.column(Column.SINGLE_MEASURE_NAME)
        years = self._header_years(header)

        read = 0
        kept = 0
        for row in rows:
            read += 1
            code = row[0]
            if len(row) - 1 > len(years):
                raise self.malformed(
                    f"row {read} ({code}) has {len(row) - 1} values for {len(years)} year columns"
                )
            if not self.filters.areas.matches(code, enhanced=True, extra=self.known_names(code)):
                LOGGER.debug("%s: area %s filtered out", self.label, code)
                continue

            area = Area(code)
            if self.filters.measures.matches(measure_code):
                measure = Measure(measure_code, measure_name)
                for year, cell in zip(years, row[1:]):
                    if not self.filters.years.matches(year):
                        continue
                    if not cell.strip():
                        continue
                    try:
                        measure.set_value(year, parse_value(cell, source=self.source))
                    except MalformedContentError as exc:
                        raise self.malformed(
                            f"row {read} ({code}) has non-numeric value {cell!r} for {year}"
                        ) from exc
                area.set_measure(measure_code, measure)
            kept += 1
            yield area

        LOGGER.info("%s: read %s rows, kept %s", self.label, read, kept)


__all__ = ["AuthorityByYearImporter", "EXPECTED_COLUMN_TAGS"]
