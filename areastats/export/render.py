# AreaStats
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Plain-text tables for areas and their measures."""

from __future__ import annotations

from typing import List, Tuple

from ..model import ENGLISH, WELSH, Area, Areas, Measure

NO_DATA = "<no data>"
NO_MEASURES = "<no measures>"
NO_AREAS = "<no areas>"
UNNAMED = "Unnamed"


def _fmt(value: float) -> str:
    return f"{value:f}"


def _align(header: str, value: str) -> Tuple[str, str]:
    width = max(len(header), len(value))
    return header.rjust(width), value.rjust(width)


def render_measure(measure: Measure) -> str:
    """Label line, then a year/summary table or ``<no data>``."""

    lines = [f"{measure.label} ({measure.codename})"]
    values = measure.get_values()
    if not values:
        lines.append(NO_DATA)
        return "\n".join(lines) + "\n"

    cells: List[Tuple[str, str]] = [(str(year), _fmt(value)) for year, value in values.items()]
    cells.append(("Average", _fmt(measure.average())))
    cells.append(("Diff.", _fmt(measure.difference())))
    cells.append(("% Diff.", _fmt(measure.difference_as_percentage())))

    aligned = [_align(header, value) for header, value in cells]
    lines.append(" ".join(header for header, _ in aligned))
    lines.append(" ".join(value for _, value in aligned))
    return "\n".join(lines) + "\n"


def area_title(area: Area) -> str:
    names = area.get_names()
    parts = [names[lang] for lang in (ENGLISH, WELSH) if names.get(lang)]
    if not parts:
        # Areas may carry names in other languages only.
        parts = [name for name in names.values() if name][:1]
    title = " / ".join(parts) if parts else UNNAMED
    return f"{title} ({area.code})"


def render_area(area: Area) -> str:
    """Title line, then every measure in codename order separated by blank lines."""

    chunks = [area_title(area) + "\n"]
    measures = area.get_measures()
    if not measures:
        chunks.append(NO_MEASURES + "\n")
        return "".join(chunks)
    for codename in sorted(measures):
        chunks.append(render_measure(measures[codename]) + "\n")
    return "".join(chunks)


def render_areas(areas: Areas) -> str:
    if len(areas) == 0:
        return NO_AREAS + "\n"
    return "\n".join(render_area(area) for area in areas)


__all__ = [
    "NO_AREAS",
    "NO_DATA",
    "NO_MEASURES",
    "UNNAMED",
    "area_title",
    "render_area",
    "render_areas",
    "render_measure",
]
