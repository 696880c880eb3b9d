from __future__ import annotations

from areastats.export import render_area, render_areas, render_measure
from areastats.model import Area, Areas, Measure


def test_measure_table_is_right_aligned() -> None:
    measure = Measure("POP", "Population")
    measure.set_value(2015, 20)
    measure.set_value(2010, 10)
    text = render_measure(measure)
    assert text == (
        "Population (pop)\n"
        "     2010      2015   Average     Diff.    % Diff.\n"
        "10.000000 20.000000 15.000000 10.000000 100.000000\n"
    )


def test_measure_without_values_renders_placeholder() -> None:
    assert render_measure(Measure("pop", "Population")) == "Population (pop)\n<no data>\n"


def test_column_widths_follow_the_wider_text() -> None:
    measure = Measure("x", "X")
    measure.set_value(2010, 1234567.5)
    headings, values = render_measure(measure).splitlines()[1:]
    assert len(headings) == len(values)
    assert headings.split()[0] == "2010"
    assert values.split()[0] == "1234567.500000"


def test_area_title_variants() -> None:
    both = Area("W1")
    both.set_name("eng", "Swansea")
    both.set_name("cym", "Abertawe")
    assert render_area(both).splitlines()[0] == "Swansea / Abertawe (W1)"

    welsh = Area("W2")
    welsh.set_name("cym", "Abertawe")
    assert render_area(welsh).splitlines()[0] == "Abertawe (W2)"

    assert render_area(Area("W3")).splitlines()[0] == "Unnamed (W3)"


def test_area_without_measures() -> None:
    assert render_area(Area("W1")) == "Unnamed (W1)\n<no measures>\n"


def test_measures_render_in_codename_order() -> None:
    area = Area("W1")
    area.set_measure("pop", Measure("pop", "Population"))
    area.set_measure("area", Measure("area", "Land area"))
    lines = render_area(area).splitlines()
    assert lines.index("Land area (area)") < lines.index("Population (pop)")


def test_areas_render_in_code_order_and_empty_placeholder() -> None:
    assert render_areas(Areas()) == "<no areas>\n"

    areas = Areas()
    for code in ["W2", "W1"]:
        areas.set_area(code, Area(code))
    text = render_areas(areas)
    assert text.index("(W1)") < text.index("(W2)")
