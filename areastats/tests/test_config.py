from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from areastats import config
from areastats.columns import Column, SourceFormat


def test_packaged_registry_lists_known_datasets() -> None:
    registry = config.load_datasets()
    assert list(registry)[0] == config.AREAS_DATASET
    assert {"popden", "biz", "aqi", "trains", "complete-pop"} <= set(registry)

    areas = registry["areas"]
    assert areas.source_format is SourceFormat.AUTHORITY_CODE_CSV
    assert len(areas.cols) == 3

    trains = registry["trains"]
    assert trains.cols.require(Column.SINGLE_MEASURE_CODE) == "rail"
    assert Column.MEASURE_CODE not in trains.cols

    for spec in registry.values():
        if spec.source_format is SourceFormat.AUTHORITY_BY_YEAR_CSV:
            assert len(spec.cols) == 3


def test_config_path_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "custom.yml"
    path.write_text(
        textwrap.dedent("""\
            datasets:
              Pop:
                file: pop.csv
                format: AUTHORITY_BY_YEAR_CSV
                cols:
                  auth_code: code
                  single_measure_code: pop
                  single_measure_name: Population
        """),
        encoding="utf-8",
    )
    monkeypatch.setenv("AREASTATS_CONFIG_PATH", str(path))
    config.load.cache_clear()

    registry = config.load_datasets()
    assert list(registry) == ["pop"]
    spec = registry["pop"]
    assert spec.name == "pop"
    assert spec.file == "pop.csv"
    assert spec.source_format is SourceFormat.AUTHORITY_BY_YEAR_CSV
    assert spec.records_key is None


def test_missing_config_file_is_empty(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AREASTATS_CONFIG_PATH", str(tmp_path / "missing.yml"))
    config.load.cache_clear()
    assert config.load() == {}
    assert config.load_datasets() == {}


@pytest.mark.parametrize(
    "entry, message",
    [
        ({"file": "x.csv", "format": "authority_code_csv"}, "missing required keys"),
        ({"file": "x.csv", "format": "xml", "cols": {"auth_code": "c"}}, "unknown format 'xml'"),
        ({"file": "x.csv", "format": "stats_json", "cols": {"colour": "c"}}, "Unknown column tag"),
        ("not-a-mapping", "must be a mapping"),
    ],
)
def test_invalid_dataset_entries(entry, message) -> None:
    with pytest.raises(ValueError, match=message):
        config.load_datasets({"datasets": {"bad": entry}})


def test_data_dir_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("AREASTATS_DATA_DIR", raising=False)
    assert config.data_dir() == Path("datasets")
    monkeypatch.setenv("AREASTATS_DATA_DIR", "/tmp/stats")
    assert config.data_dir() == Path("/tmp/stats")
