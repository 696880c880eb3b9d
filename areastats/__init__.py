# AreaStats
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Load per-area, per-year statistics from CSV and JSON sources."""

from .columns import Column, ColumnMapping, SourceFormat
from .errors import (
    AreaStatsError,
    ColumnMismatchError,
    ErrorKind,
    InvalidLanguageCodeError,
    MalformedContentError,
    NotFoundError,
    SourceUnavailableError,
)
from .filters import Filters, TokenFilter, YearRange
from .model import Area, Areas, Measure, equals, merge

__version__ = "0.1.0"

__all__ = [
    "Area",
    "AreaStatsError",
    "Areas",
    "Column",
    "ColumnMapping",
    "ColumnMismatchError",
    "ErrorKind",
    "Filters",
    "InvalidLanguageCodeError",
    "MalformedContentError",
    "Measure",
    "NotFoundError",
    "SourceFormat",
    "SourceUnavailableError",
    "TokenFilter",
    "YearRange",
    "equals",
    "merge",
]
