# AreaStats
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Exception types raised while loading and querying area statistics."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    PRECONDITION = "precondition"
    COLUMN_MISMATCH = "column_mismatch"
    MALFORMED_CONTENT = "malformed_content"
    LOOKUP = "lookup"
    INVALID_LANGUAGE_CODE = "invalid_language_code"


class AreaStatsError(Exception):
    """Base class for every error raised by the package."""

    kind: ErrorKind = ErrorKind.MALFORMED_CONTENT

    def __init__(self, message: str, *, source: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.source = source

    def __str__(self) -> str:
        if self.source:
            return f"{self.source}: {self.message}"
        return self.message


class SourceUnavailableError(AreaStatsError):
    """Raised when a stream is closed, unreadable or empty."""

    kind = ErrorKind.PRECONDITION


class ColumnMismatchError(AreaStatsError):
    """Raised when the column mapping does not fit the data actually present."""

    kind = ErrorKind.COLUMN_MISMATCH


class MalformedContentError(AreaStatsError):
    """Raised when a row or record cannot be parsed."""

    kind = ErrorKind.MALFORMED_CONTENT


class NotFoundError(AreaStatsError, KeyError):
    """Raised when an area, measure, year or name is looked up but absent."""

    kind = ErrorKind.LOOKUP


class InvalidLanguageCodeError(AreaStatsError, ValueError):
    """Raised when a name is set with a language code that is not three letters."""

    kind = ErrorKind.INVALID_LANGUAGE_CODE


__all__ = [
    "AreaStatsError",
    "ColumnMismatchError",
    "ErrorKind",
    "InvalidLanguageCodeError",
    "MalformedContentError",
    "NotFoundError",
    "SourceUnavailableError",
]
