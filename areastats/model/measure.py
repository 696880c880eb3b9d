# AreaStats
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""A single statistical measure recorded over a number of years."""

from __future__ import annotations

from typing import Dict

from ..errors import NotFoundError


def normalize_codename(codename: str) -> str:
    return str(codename).lower()


class Measure:
    """Codename, human-readable label and a year → value table.

    The codename is lowercased on construction and cannot be changed. Years
    are kept unique and always iterate in ascending order.
    """

    __slots__ = ("_codename", "label", "_values")

    def __init__(self, codename: str, label: str) -> None:
        self._codename = normalize_codename(codename)
        self.label = str(label)
        self._values: Dict[int, float] = {}

    @property
    def codename(self) -> str:
        return self._codename

    def get_value(self, year: int) -> float:
        try:
            return self._values[int(year)]
        except KeyError as exc:
            raise NotFoundError(f"No value found for year {year}") from exc

    def get_values(self) -> Dict[int, float]:
        return {year: self._values[year] for year in sorted(self._values)}

    def set_value(self, year: int, value: float) -> None:
        if isinstance(year, bool) or int(year) != year or year < 0:
            raise ValueError(f"Year must be a non-negative integer, got {year!r}")
        self._values[int(year)] = float(value)

    def __len__(self) -> int:
        return len(self._values)

    # ------------------------------------------------------------------
    # Derived quantities
    # ------------------------------------------------------------------
    def difference(self) -> float:
        """Latest year's value minus the earliest year's value."""

        if len(self._values) < 2:
            return 0.0
        years = sorted(self._values)
        return self._values[years[-1]] - self._values[years[0]]

    def difference_as_percentage(self) -> float:
        if len(self._values) < 2:
            return 0.0
        first = self._values[min(self._values)]
        if first == 0:
            return 0.0
        return self.difference() / first * 100

    def average(self) -> float:
        if not self._values:
            return 0.0
        return sum(self._values.values()) / len(self._values)

    # ------------------------------------------------------------------
    # Merge / equality
    # ------------------------------------------------------------------
    def merge(self, incoming: "Measure") -> None:
        """Fold ``incoming`` into this measure; incoming label and years win."""

        self.label = incoming.label
        for year, value in incoming._values.items():
            self._values[year] = value

    def copy(self) -> "Measure":
        clone = Measure(self._codename, self.label)
        clone._values = dict(self._values)
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Measure):
            return NotImplemented
        return (
            self._codename == other._codename
            and self.label == other.label
            and self._values == other._values
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Measure({self._codename!r}, {self.label!r}, years={len(self._values)})"


__all__ = ["Measure", "normalize_codename"]
