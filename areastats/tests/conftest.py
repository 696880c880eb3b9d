from __future__ import annotations

import os
import textwrap
from pathlib import Path

import pytest

from areastats import config
from areastats.columns import Column, ColumnMapping


def pytest_sessionstart(session: pytest.Session) -> None:
    """Keep importer logging quiet unless the runner overrides it."""
    os.environ.setdefault("AREASTATS_LOG_LEVEL", "WARNING")


@pytest.fixture(autouse=True)
def _reset_config_cache():
    config.load.cache_clear()
    yield
    config.load.cache_clear()


@pytest.fixture()
def authority_cols() -> ColumnMapping:
    return ColumnMapping(
        {
            Column.AUTH_CODE: "code",
            Column.AUTH_NAME_ENG: "name_eng",
            Column.AUTH_NAME_CYM: "name_cym",
        }
    )


@pytest.fixture()
def json_cols() -> ColumnMapping:
    return ColumnMapping(
        {
            Column.AUTH_CODE: "Localauthority_Code",
            Column.AUTH_NAME_ENG: "Localauthority_ItemName_ENG",
            Column.MEASURE_CODE: "Measure_Code",
            Column.MEASURE_NAME: "Measure_ItemName_ENG",
            Column.YEAR: "Year_Code",
            Column.VALUE: "Data",
        }
    )


@pytest.fixture()
def wide_cols() -> ColumnMapping:
    return ColumnMapping(
        {
            Column.AUTH_CODE: "code",
            Column.SINGLE_MEASURE_CODE: "Pop",
            Column.SINGLE_MEASURE_NAME: "Population",
        }
    )


@pytest.fixture()
def datasets_dir(tmp_path: Path) -> Path:
    """A data directory with one file per supported format."""

    (tmp_path / "areas.csv").write_text(
        textwrap.dedent("""\
            Local authority code,Name (eng),Name (cym)
            W06000011,Swansea,Abertawe
            W06000015,Cardiff,Caerdydd
        """),
        encoding="utf-8",
    )
    (tmp_path / "popu1009.json").write_text(
        textwrap.dedent("""\
            {"value": [
              {"Localauthority_Code": "W06000011", "Localauthority_ItemName_ENG": "Swansea",
               "Measure_Code": "Dens", "Measure_ItemName_ENG": "Population density",
               "Year_Code": "2010", "Data": 634.1},
              {"Localauthority_Code": "W06000011", "Localauthority_ItemName_ENG": "Swansea",
               "Measure_Code": "Dens", "Measure_ItemName_ENG": "Population density",
               "Year_Code": "2011", "Data": "637.9"}
            ]}
        """),
        encoding="utf-8",
    )
    (tmp_path / "complete-popu1009-pop.csv").write_text(
        textwrap.dedent("""\
            AuthorityCode,2010,2011
            W06000015,341000,346100
        """),
        encoding="utf-8",
    )
    return tmp_path
