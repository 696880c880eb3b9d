# AreaStats
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Column tags, source formats and the per-dataset column mapping."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from .errors import ColumnMismatchError


class Column(str, Enum):
    """Abstract fields a source file may carry."""

    AUTH_CODE = "auth_code"
    AUTH_NAME_ENG = "auth_name_eng"
    AUTH_NAME_CYM = "auth_name_cym"
    MEASURE_CODE = "measure_code"
    MEASURE_NAME = "measure_name"
    SINGLE_MEASURE_CODE = "single_measure_code"
    SINGLE_MEASURE_NAME = "single_measure_name"
    YEAR = "year"
    VALUE = "value"


class SourceFormat(str, Enum):
    AUTHORITY_CODE_CSV = "authority_code_csv"
    STATS_JSON = "stats_json"
    AUTHORITY_BY_YEAR_CSV = "authority_by_year_csv"


class ColumnMapping(Mapping[Column, str]):
    """Read-only lookup from :class:`Column` tags to literal header text.

    Importers call :meth:`require` for the tags their format needs; a missing
    tag is a :class:`ColumnMismatchError` rather than a plain ``KeyError``.
    """

    def __init__(self, entries: Mapping[Column, str] | None = None) -> None:
        self._entries: Mapping[Column, str] = MappingProxyType(
            {Column(key): str(value) for key, value in (entries or {}).items()}
        )

    @classmethod
    def from_config(cls, raw: Mapping[str, Any] | None) -> "ColumnMapping":
        """Build a mapping from config keys such as ``auth_code``."""

        entries: dict[Column, str] = {}
        for key, value in (raw or {}).items():
            name = str(key).strip().lower()
            try:
                tag = Column(name)
            except ValueError as exc:
                valid = ", ".join(column.value for column in Column)
                raise ValueError(f"Unknown column tag '{key}'. Expected one of: {valid}") from exc
            entries[tag] = "" if value is None else str(value)
        return cls(entries)

    def require(self, tag: Column, *, source: str | None = None) -> str:
        try:
            return self._entries[tag]
        except KeyError as exc:
            raise ColumnMismatchError(
                f"column mapping has no entry for '{tag.value}'", source=source
            ) from exc

    def __getitem__(self, tag: Column) -> str:
        return self._entries[tag]

    def __iter__(self) -> Iterator[Column]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        inner = ", ".join(f"{tag.value}={value!r}" for tag, value in self._entries.items())
        return f"ColumnMapping({inner})"


__all__ = ["Column", "ColumnMapping", "SourceFormat"]
