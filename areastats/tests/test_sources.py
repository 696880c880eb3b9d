from __future__ import annotations

from pathlib import Path

import pytest

from areastats.columns import SourceFormat
from areastats.errors import SourceUnavailableError
from areastats.io import BufferSource, FileSource
from areastats.model import Areas


def test_file_source_reads_text(tmp_path: Path, authority_cols) -> None:
    path = tmp_path / "areas.csv"
    path.write_text("code,name_eng,name_cym\nW1,Foo,Bar\n", encoding="utf-8")
    source = FileSource(path)
    assert source.identifier == path.as_posix()

    areas = Areas()
    with source.open() as stream:
        areas.populate(stream, SourceFormat.AUTHORITY_CODE_CSV, authority_cols, source=source.identifier)
    assert "W1" in areas


def test_file_source_strips_byte_order_mark(tmp_path: Path, authority_cols) -> None:
    path = tmp_path / "areas.csv"
    path.write_bytes("\ufeffcode,name_eng,name_cym\r\nW1,Foo,Bar\r\n".encode("utf-8"))
    areas = Areas()
    with FileSource(path).open() as stream:
        areas.populate(stream, SourceFormat.AUTHORITY_CODE_CSV, authority_cols)
    assert areas.get_area("W1").get_name("cym") == "Bar"


def test_missing_file_is_source_unavailable(tmp_path: Path) -> None:
    source = FileSource(tmp_path / "nope.csv")
    with pytest.raises(SourceUnavailableError, match="Failed to open file"):
        source.open()


def test_buffer_source_returns_fresh_streams() -> None:
    source = BufferSource("inline", "hello")
    with source.open() as first:
        assert first.read() == "hello"
    with source.open() as second:
        assert second.read() == "hello"
    assert repr(source) == "BufferSource('inline')"
