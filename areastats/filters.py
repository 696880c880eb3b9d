# AreaStats
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Area, measure and year filters applied while importing."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence, Tuple, Union

ALL_TOKEN = "all"

_YEARS_RE = re.compile(r"^(?P<start>[0-9]{4}|0)(?:-(?P<end>[0-9]{4}|0))?$")


@dataclass(frozen=True)
class TokenFilter:
    """Case-insensitive set of area or measure tokens. Empty matches everything."""

    tokens: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "tokens", frozenset(str(token).lower() for token in self.tokens)
        )

    @classmethod
    def of(cls, *tokens: str) -> "TokenFilter":
        return cls(frozenset(tokens))

    def is_empty(self) -> bool:
        return not self.tokens

    def matches(self, candidate: str, enhanced: bool = False, extra: Iterable[str] = ()) -> bool:
        """Return ``True`` when ``candidate`` passes the filter.

        Without ``enhanced`` a token must equal the lowercased candidate. With
        ``enhanced`` a token may also be a substring of the candidate or of any
        string in ``extra`` (alternate names).
        """

        if not self.tokens:
            return True
        lowered = str(candidate).lower()
        if lowered in self.tokens:
            return True
        if not enhanced:
            return False
        haystack = [lowered] + [str(item).lower() for item in extra]
        return any(token in text for token in self.tokens for text in haystack)


@dataclass(frozen=True)
class YearRange:
    """Inclusive year range. ``(0, 0)`` matches every year."""

    start: int = 0
    end: int = 0

    def is_empty(self) -> bool:
        return self.start == 0 and self.end == 0

    def matches(self, year: int) -> bool:
        if self.is_empty():
            return True
        return self.start <= year <= self.end

    def as_tuple(self) -> Tuple[int, int]:
        return (self.start, self.end)


@dataclass(frozen=True)
class Filters:
    """The three optional filters handed to every importer."""

    areas: TokenFilter = field(default_factory=TokenFilter)
    measures: TokenFilter = field(default_factory=TokenFilter)
    years: YearRange = field(default_factory=YearRange)

    @classmethod
    def build(
        cls,
        areas: "TokenFilterLike" = None,
        measures: "TokenFilterLike" = None,
        years: "YearRangeLike" = None,
    ) -> "Filters":
        return cls(
            areas=coerce_token_filter(areas),
            measures=coerce_token_filter(measures),
            years=coerce_year_range(years),
        )


TokenFilterLike = Union[TokenFilter, Iterable[str], None]
YearRangeLike = Union[YearRange, Sequence[int], None]


def coerce_token_filter(value: TokenFilterLike) -> TokenFilter:
    if value is None:
        return TokenFilter()
    if isinstance(value, TokenFilter):
        return value
    if isinstance(value, str):
        value = [value]
    tokens = [str(item).strip() for item in value if str(item).strip()]
    if any(token.lower() == ALL_TOKEN for token in tokens):
        return TokenFilter()
    return TokenFilter(frozenset(tokens))


def coerce_year_range(value: YearRangeLike) -> YearRange:
    if value is None:
        return YearRange()
    if isinstance(value, YearRange):
        return value
    start, end = value
    return YearRange(int(start), int(end))


def parse_token_list(raw: Optional[str | Iterable[str]]) -> TokenFilter:
    """Split comma-separated command line values into a :class:`TokenFilter`."""

    if raw is None:
        return TokenFilter()
    if isinstance(raw, str):
        raw = [raw]
    items: list[str] = []
    for chunk in raw:
        items.extend(part.strip() for part in str(chunk).split(",") if part.strip())
    return coerce_token_filter(items)


def parse_years(raw: Optional[str]) -> YearRange:
    """Parse ``YYYY`` or ``YYYY-ZZZZ``; a zero on either side disables the filter."""

    if raw is None:
        return YearRange()
    text = str(raw).strip()
    match = _YEARS_RE.match(text)
    if not match:
        raise ValueError("Invalid input for years argument")
    start = int(match.group("start"))
    end = int(match.group("end")) if match.group("end") is not None else start
    if start == 0 or end == 0:
        return YearRange()
    if start > end:
        raise ValueError("Invalid input for years argument: start year after end year")
    return YearRange(start, end)


__all__ = [
    "ALL_TOKEN",
    "Filters",
    "TokenFilter",
    "YearRange",
    "coerce_token_filter",
    "coerce_year_range",
    "parse_token_list",
    "parse_years",
]
