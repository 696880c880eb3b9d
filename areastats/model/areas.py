# AreaStats
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Top-level container holding every imported area."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterator, List, TextIO

from ..errors import NotFoundError
from .area import Area

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..columns import ColumnMapping, SourceFormat
    from ..filters import TokenFilterLike, YearRangeLike


class Areas:
    """Mapping of authority code → :class:`Area`.

    Storage order is irrelevant; iteration, export and rendering always walk
    the areas in ascending code order.
    """

    def __init__(self) -> None:
        self._areas: Dict[str, Area] = {}

    def get_area(self, code: str) -> Area:
        """Return the live area for ``code``."""

        try:
            return self._areas[code]
        except KeyError as exc:
            raise NotFoundError(f"No area found matching {code}") from exc

    def get_areas(self) -> Dict[str, Area]:
        return {code: self._areas[code] for code in sorted(self._areas)}

    def set_area(self, code: str, area: Area) -> None:
        existing = self._areas.get(code)
        if existing is None:
            self._areas[code] = area.copy()
        else:
            existing.merge(area)

    def existing_names(self, code: str) -> List[str]:
        area = self._areas.get(code)
        if area is None:
            return []
        return list(area.get_names().values())

    def populate(
        self,
        stream: TextIO,
        source_format: "SourceFormat | str",
        cols: "ColumnMapping",
        areas_filter: "TokenFilterLike" = None,
        measures_filter: "TokenFilterLike" = None,
        years_filter: "YearRangeLike" = None,
        *,
        source: str | None = None,
        records_key: str | None = None,
    ) -> int:
        """Parse ``stream`` and merge its areas in; see :func:`areastats.ingestion.populate`."""

        from ..ingestion import populate

        return populate(
            self,
            stream,
            source_format,
            cols,
            areas_filter,
            measures_filter,
            years_filter,
            source=source,
            records_key=records_key,
        )

    def __contains__(self, code: object) -> bool:
        return code in self._areas

    def __len__(self) -> int:
        return len(self._areas)

    def __iter__(self) -> Iterator[Area]:
        for code in sorted(self._areas):
            yield self._areas[code]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Areas):
            return NotImplemented
        return self._areas == other._areas

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Areas(size={len(self._areas)})"


__all__ = ["Areas"]
