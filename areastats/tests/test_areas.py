from __future__ import annotations

import pytest

from areastats.errors import NotFoundError
from areastats.model import Area, Areas, Measure, equals, merge


def _area(code: str, **names: str) -> Area:
    area = Area(code)
    for lang, name in names.items():
        area.set_name(lang, name)
    return area


def test_set_area_inserts_and_get_area_returns_it() -> None:
    areas = Areas()
    areas.set_area("W1", _area("W1", eng="Foo"))
    assert "W1" in areas
    assert len(areas) == 1
    assert areas.get_area("W1").get_name("eng") == "Foo"


def test_get_area_is_exact_match() -> None:
    areas = Areas()
    areas.set_area("W1", _area("W1"))
    with pytest.raises(NotFoundError, match="w1"):
        areas.get_area("w1")


def test_set_area_merges_existing_with_incoming_precedence() -> None:
    areas = Areas()
    areas.set_area("W1", _area("W1", eng="Foo", cym="Bar"))
    areas.set_area("W1", _area("W1", eng="Foo2"))
    assert areas.get_area("W1").get_names() == {"cym": "Bar", "eng": "Foo2"}
    assert len(areas) == 1


def test_set_area_does_not_alias_the_incoming_object() -> None:
    areas = Areas()
    incoming = _area("W1", eng="Foo")
    areas.set_area("W1", incoming)
    incoming.set_name("eng", "Changed")
    assert areas.get_area("W1").get_name("eng") == "Foo"


def test_iteration_is_in_ascending_code_order() -> None:
    areas = Areas()
    for code in ["W3", "W1", "W2"]:
        areas.set_area(code, _area(code))
    assert [area.code for area in areas] == ["W1", "W2", "W3"]
    assert list(areas.get_areas()) == ["W1", "W2", "W3"]


def test_existing_names() -> None:
    areas = Areas()
    areas.set_area("W1", _area("W1", eng="Vale of Glamorgan", cym="Bro Morgannwg"))
    assert sorted(areas.existing_names("W1")) == ["Bro Morgannwg", "Vale of Glamorgan"]
    assert areas.existing_names("W9") == []


def test_free_function_merge_and_equals() -> None:
    a = _area("W1", eng="Foo")
    b = _area("W1", cym="Bar")
    assert merge(a, b) is a
    assert a.get_names() == {"cym": "Bar", "eng": "Foo"}
    assert equals(a, _area("W1", eng="Foo", cym="Bar"))
    assert not equals(a, Measure("w1", "Foo"))


def test_free_function_merge_rejects_mismatched_identity() -> None:
    with pytest.raises(ValueError):
        merge(Area("W1"), Area("W2"))
    with pytest.raises(ValueError):
        merge(Measure("pop", "Population"), Measure("dens", "Density"))
    with pytest.raises(TypeError):
        merge(Area("W1"), Measure("pop", "Population"))


def test_container_equality() -> None:
    a = Areas()
    b = Areas()
    a.set_area("W1", _area("W1", eng="Foo"))
    assert a != b
    b.set_area("W1", _area("W1", eng="Foo"))
    assert a == b
