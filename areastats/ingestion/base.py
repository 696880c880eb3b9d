# AreaStats
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Base classes and parsing helpers shared by the format importers."""

from __future__ import annotations

import csv
import io
import logging
import math
import re
from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Iterator, List, TextIO

from ..columns import Column, ColumnMapping, SourceFormat
from ..errors import MalformedContentError, SourceUnavailableError
from ..filters import Filters
from ..model import Area

LOGGER = logging.getLogger(__name__)

_UNSIGNED_RE = re.compile(r"[0-9]+")

KnownNames = Callable[[str], List[str]]


def read_stream(stream: TextIO | None, *, source: str | None = None) -> str:
    """Return the full text of ``stream`` or raise :class:`SourceUnavailableError`.

    A ``None``, closed, write-only or empty stream fails here, before any
    importer tries to read a header.
    """

    if stream is None:
        raise SourceUnavailableError("input stream is missing", source=source)
    if getattr(stream, "closed", False):
        raise SourceUnavailableError("input stream is closed", source=source)
    readable = getattr(stream, "readable", None)
    if callable(readable) and not readable():
        raise SourceUnavailableError("input stream is not readable", source=source)
    try:
        text = stream.read()
    except (OSError, ValueError, UnicodeDecodeError) as exc:
        raise SourceUnavailableError(f"input stream could not be read: {exc}", source=source) from exc
    if not text or not text.strip():
        raise SourceUnavailableError("input stream is empty", source=source)
    return text


def parse_year(raw: Any, *, source: str | None = None) -> int:
    """Parse an unsigned integer year from text or a JSON integer."""

    if isinstance(raw, bool):
        raise MalformedContentError(f"invalid year {raw!r}", source=source)
    if isinstance(raw, int):
        if raw < 0:
            raise MalformedContentError(f"invalid year {raw!r}", source=source)
        return raw
    text = str(raw).strip() if raw is not None else ""
    if not _UNSIGNED_RE.fullmatch(text):
        raise MalformedContentError(f"invalid year {raw!r}", source=source)
    return int(text)


def parse_value(raw: Any, *, source: str | None = None) -> float:
    """Parse a numeric value given as a JSON number or a numeric string."""

    if isinstance(raw, bool):
        raise MalformedContentError(f"invalid numeric value {raw!r}", source=source)
    if isinstance(raw, (int, float, str)):
        try:
            value = float(raw.strip() if isinstance(raw, str) else raw)
        except (OverflowError, ValueError) as exc:
            raise MalformedContentError(f"invalid numeric value {raw!r}", source=source) from exc
    else:
        raise MalformedContentError(f"invalid numeric value {raw!r}", source=source)
    if not math.isfinite(value):
        raise MalformedContentError(f"invalid numeric value {raw!r}", source=source)
    return value


def iter_rows(text: str) -> Iterator[List[str]]:
    """Yield comma-separated rows, skipping blank lines."""

    reader = csv.reader(io.StringIO(text))
    for row in reader:
        if not row or all(not cell.strip() for cell in row):
            continue
        yield row


class BaseImporter(ABC):
    """Shared helpers for the per-format importers.

    An importer turns the text of one source into transient :class:`Area`
    objects, one per surviving record. It never touches the target container;
    :func:`areastats.ingestion.populate` merges what it yields.
    """

    source_format: ClassVar[SourceFormat]

    def __init__(
        self,
        cols: ColumnMapping,
        filters: Filters | None = None,
        known_names: KnownNames | None = None,
        *,
        source: str | None = None,
    ) -> None:
        self.cols = cols
        self.filters = filters or Filters()
        self._known_names = known_names or (lambda code: [])
        self.source = source

    @abstractmethod
    def records(self, text: str) -> Iterator[Area]:
        """Yield one :class:`Area` per record that passes the filters."""

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def column(self, tag: Column) -> str:
        return self.cols.require(tag, source=self.source)

    def known_names(self, code: str) -> List[str]:
        return list(self._known_names(code))

    def malformed(self, message: str) -> MalformedContentError:
        return MalformedContentError(message, source=self.source)

    @property
    def label(self) -> str:
        return self.source or self.source_format.value


__all__ = [
    "BaseImporter",
    "KnownNames",
    "LOGGER",
    "iter_rows",
    "parse_value",
    "parse_year",
    "read_stream",
]
