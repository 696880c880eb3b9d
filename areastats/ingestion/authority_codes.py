# AreaStats
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Authority code table → areas with English and Welsh names."""

from __future__ import annotations

from typing import Iterator

from ..columns import SourceFormat
from ..errors import ColumnMismatchError
from ..model import ENGLISH, WELSH, Area
from .base import LOGGER, BaseImporter, iter_rows


class AuthorityCodeImporter(BaseImporter):
    """Rows of ``code, English name, Welsh name``; extra columns are ignored."""

    source_format = SourceFormat.AUTHORITY_CODE_CSV

    def records(self, text: str) -> Iterator[Area]:
        rows = iter_rows(text)
        header = next(rows, None)
        if header is None:
            raise self.malformed("missing header row")
        if len(header) != len(self.cols):
            raise ColumnMismatchError(
                f"header has {len(header)} columns but the mapping declares {len(self.cols)}",
                source=self.source,
            )

        read = 0
        kept = 0
        for row in rows:
            read += 1
            if len(row) < 3:
                raise self.malformed(f"row {read} has {len(row)} fields, expected at least 3")
            code, english, welsh = row[0], row[1], row[2]
            if not self.filters.areas.matches(code, enhanced=True, extra=(english, welsh)):
                LOGGER.debug("%s: area %s filtered out", self.label, code)
                continue
            area = Area(code)
            area.set_name(ENGLISH, english)
            area.set_name(WELSH, welsh)
            kept += 1
            yield area

        LOGGER.info("%s: read %s rows, kept %s", self.label, read, kept)


__all__ = ["AuthorityCodeImporter"]
