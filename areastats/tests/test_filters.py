from __future__ import annotations

import pytest

from areastats.filters import (
    Filters,
    TokenFilter,
    YearRange,
    coerce_token_filter,
    coerce_year_range,
    parse_token_list,
    parse_years,
)


def test_empty_token_filter_matches_everything() -> None:
    assert TokenFilter().matches("anything")
    assert coerce_token_filter(None).matches("W1")
    assert coerce_token_filter([]).matches("W1")


def test_exact_match_is_case_insensitive() -> None:
    flt = TokenFilter.of("W06000015")
    assert flt.matches("w06000015")
    assert not flt.matches("W0600001")


def test_substring_only_counts_when_enhanced() -> None:
    flt = TokenFilter.of("0600")
    assert not flt.matches("W06000015")
    assert flt.matches("W06000015", enhanced=True)


def test_enhanced_matching_searches_alternate_names() -> None:
    flt = TokenFilter.of("wales")
    assert flt.matches("W06000015", enhanced=True, extra=["Vale of Wales"])
    assert not flt.matches("W06000015", enhanced=True, extra=["England"])
    assert not flt.matches("W06000015", extra=["Vale of Wales"])


def test_filter_with_all_token_means_no_filter() -> None:
    assert coerce_token_filter(["W1", "ALL"]).is_empty()
    assert parse_token_list(["all"]).is_empty()


def test_parse_token_list_splits_commas() -> None:
    flt = parse_token_list(["W1, W2", "w3"])
    assert flt.tokens == frozenset({"w1", "w2", "w3"})


def test_year_range_is_inclusive() -> None:
    years = YearRange(2010, 2012)
    assert [year for year in range(2008, 2015) if years.matches(year)] == [2010, 2011, 2012]


def test_sentinel_year_range_matches_every_year() -> None:
    years = coerce_year_range((0, 0))
    assert years.is_empty()
    assert all(years.matches(year) for year in (0, 1, 2009, 9999))
    assert coerce_year_range(None).matches(0)


def test_reversed_year_range_matches_nothing() -> None:
    years = YearRange(2012, 2010)
    assert not any(years.matches(year) for year in range(2008, 2015))


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, (0, 0)),
        ("0", (0, 0)),
        ("2010", (2010, 2010)),
        ("2010-2015", (2010, 2015)),
        ("2010-0", (0, 0)),
        ("0-2015", (0, 0)),
    ],
)
def test_parse_years(raw, expected) -> None:
    assert parse_years(raw).as_tuple() == expected


@pytest.mark.parametrize("raw", ["10", "2010-", "201a", "2015-2010", "2010-2011-2012"])
def test_parse_years_rejects_bad_input(raw) -> None:
    with pytest.raises(ValueError, match="years"):
        parse_years(raw)


def test_filters_build_coerces_raw_values() -> None:
    filters = Filters.build(areas={"W1"}, measures=["POP"], years=(2010, 2011))
    assert filters.areas.tokens == frozenset({"w1"})
    assert filters.measures.matches("pop")
    assert filters.years == YearRange(2010, 2011)
