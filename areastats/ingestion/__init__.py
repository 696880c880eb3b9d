# AreaStats
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Importers for the supported source formats."""

from .authority_by_year import AuthorityByYearImporter
from .authority_codes import AuthorityCodeImporter
from .base import BaseImporter, read_stream
from .engine import IMPORTER_REGISTRY, build_importer, populate
from .loader import compute_exit_code, load_all, load_dataset
from .stats_json import StatsJsonImporter

__all__ = [
    "AuthorityByYearImporter",
    "AuthorityCodeImporter",
    "BaseImporter",
    "IMPORTER_REGISTRY",
    "StatsJsonImporter",
    "build_importer",
    "compute_exit_code",
    "load_all",
    "load_dataset",
    "populate",
    "read_stream",
]
