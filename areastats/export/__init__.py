# AreaStats
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Structured export and text rendering of loaded areas."""

from .render import render_area, render_areas, render_measure
from .snapshot import EMPTY_DOCUMENT, to_dict, to_frame, to_json

__all__ = [
    "EMPTY_DOCUMENT",
    "render_area",
    "render_areas",
    "render_measure",
    "to_dict",
    "to_frame",
    "to_json",
]
