# AreaStats
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""An area identified by its authority code, with names and measures."""

from __future__ import annotations

import re
from typing import Dict

from ..errors import InvalidLanguageCodeError, NotFoundError
from .measure import Measure, normalize_codename

_LANG_RE = re.compile(r"[A-Za-z]{3}")

ENGLISH = "eng"
WELSH = "cym"


class Area:
    """Names keyed by ISO 639-3 language code plus measures keyed by codename."""

    __slots__ = ("_code", "_names", "_measures")

    def __init__(self, code: str) -> None:
        self._code = str(code)
        self._names: Dict[str, str] = {}
        self._measures: Dict[str, Measure] = {}

    @property
    def code(self) -> str:
        return self._code

    # ------------------------------------------------------------------
    # Names
    # ------------------------------------------------------------------
    def get_name(self, lang: str) -> str:
        key = str(lang).lower()
        try:
            return self._names[key]
        except KeyError as exc:
            raise NotFoundError(f"Area {self._code} has no name for language '{key}'") from exc

    def get_names(self) -> Dict[str, str]:
        return {lang: self._names[lang] for lang in sorted(self._names)}

    def set_name(self, lang: str, name: str) -> None:
        if not isinstance(lang, str) or not _LANG_RE.fullmatch(lang):
            raise InvalidLanguageCodeError(
                f"Language code must be three alphabetical letters only, got {lang!r}"
            )
        self._names[lang.lower()] = str(name)

    # ------------------------------------------------------------------
    # Measures
    # ------------------------------------------------------------------
    def get_measure(self, codename: str) -> Measure:
        """Return the live measure for ``codename`` (case-insensitive)."""

        key = normalize_codename(codename)
        try:
            return self._measures[key]
        except KeyError as exc:
            raise NotFoundError(f"No measure found matching {key}") from exc

    def has_measure(self, codename: str) -> bool:
        return normalize_codename(codename) in self._measures

    def get_measures(self) -> Dict[str, Measure]:
        return {key: self._measures[key].copy() for key in sorted(self._measures)}

    def set_measure(self, codename: str, measure: Measure) -> None:
        key = normalize_codename(codename)
        if key != measure.codename:
            raise ValueError(f"Cannot store measure {measure.codename} under codename {key}")
        existing = self._measures.get(key)
        if existing is None:
            self._measures[key] = measure.copy()
        else:
            existing.merge(measure)

    def __len__(self) -> int:
        return len(self._measures)

    # ------------------------------------------------------------------
    # Merge / equality
    # ------------------------------------------------------------------
    def merge(self, incoming: "Area") -> None:
        """Union names and measures from ``incoming``; incoming values win."""

        for lang, name in incoming._names.items():
            self._names[lang] = name
        for key, measure in incoming._measures.items():
            self.set_measure(key, measure)

    def copy(self) -> "Area":
        clone = Area(self._code)
        clone.merge(self)
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Area):
            return NotImplemented
        return (
            self._code == other._code
            and self._names == other._names
            and self._measures == other._measures
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Area({self._code!r}, names={len(self._names)}, measures={len(self._measures)})"


__all__ = ["Area", "ENGLISH", "WELSH"]
