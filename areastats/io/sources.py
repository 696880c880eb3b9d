# AreaStats
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Input sources that hand readable text streams to the importers."""

from __future__ import annotations

import io
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TextIO

from ..errors import SourceUnavailableError

LOGGER = logging.getLogger(__name__)


class InputSource(ABC):
    """A named place data can be read from."""

    @property
    @abstractmethod
    def identifier(self) -> str:
        """Unique identifier for the source (e.g. its path)."""

    @abstractmethod
    def open(self) -> TextIO:
        """Return a readable text stream; callers close it (``with`` block)."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.identifier!r})"


class FileSource(InputSource):
    """Source data contained within a file on disk."""

    def __init__(self, path: str | Path, *, encoding: str = "utf-8-sig") -> None:
        self.path = Path(path)
        self.encoding = encoding

    @property
    def identifier(self) -> str:
        return self.path.as_posix()

    def open(self) -> TextIO:
        LOGGER.debug("opening %s", self.path)
        try:
            return self.path.open("r", encoding=self.encoding, newline="")
        except OSError as exc:
            raise SourceUnavailableError(
                f"Failed to open file {self.path}: {exc.strerror or exc}",
                source=self.identifier,
            ) from exc


class BufferSource(InputSource):
    """In-memory text, mostly for tests and embedding."""

    def __init__(self, identifier: str, text: str) -> None:
        self._identifier = identifier
        self.text = text

    @property
    def identifier(self) -> str:
        return self._identifier

    def open(self) -> TextIO:
        return io.StringIO(self.text, newline="")


__all__ = ["BufferSource", "FileSource", "InputSource"]
