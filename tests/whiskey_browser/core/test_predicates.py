from __future__ import annotations

import dataclasses

import pytest

from whiskey_browser.core.filter_state import DEFAULT_FILTERS, FilterState
from whiskey_browser.core.predicates import apply_filters, build_predicates
from whiskey_browser.core.record import Whiskey


def _names(records):
    return [w.name for w in records]


def test_default_filters_return_everything_in_order(whiskeys):
    result = apply_filters(whiskeys, DEFAULT_FILTERS)

    assert result == whiskeys
    assert result is not whiskeys


def test_empty_collection_returns_empty():
    assert apply_filters([], DEFAULT_FILTERS) == []
    assert apply_filters([], FilterState(type="bourbon", age_min=5)) == []


def test_default_filters_build_no_predicates():
    assert build_predicates(DEFAULT_FILTERS) == []


def test_type_filter_bourbon(whiskeys):
    result = apply_filters(whiskeys, DEFAULT_FILTERS.set_dimension("type", "bourbon"))

    assert _names(result) == ["Buffalo Trace", "Pappy Van Winkle 20 Year"]


def test_type_filter_with_no_match(whiskeys):
    assert apply_filters(whiskeys, FilterState(type="canadian")) == []


def test_categorical_match_is_exact_and_case_sensitive(whiskeys):
    assert apply_filters(whiskeys, FilterState(type="Bourbon")) == []
    assert apply_filters(whiskeys, FilterState(distillery="Buffalo")) == []
    assert len(apply_filters(whiskeys, FilterState(distillery="Buffalo Trace Distillery"))) == 2


def test_region_and_country_filters(whiskeys):
    assert _names(apply_filters(whiskeys, FilterState(region="Islay"))) == ["Lagavulin 16"]
    assert _names(apply_filters(whiskeys, FilterState(country="Japan"))) == ["Yamazaki 18"]


def test_price_range_uses_msrp_when_no_purchase_price(whiskeys):
    result = apply_filters(whiskeys, FilterState(price_min=60, price_max=70))

    assert _names(result) == ["Redbreast 12"]


def test_purchase_price_wins_over_msrp():
    bottle = Whiskey(id=1, name="Both", purchase_price=50, msrp=500)

    assert apply_filters([bottle], FilterState(price_max=100)) == [bottle]
    assert apply_filters([bottle], FilterState(price_min=400)) == []


def test_price_bound_excludes_records_without_any_price():
    priced = Whiskey(id=1, msrp=20)
    unpriced = Whiskey(id=2)

    assert apply_filters([priced, unpriced], FilterState(price_min=0)) == [priced]
    assert apply_filters([priced, unpriced], FilterState(price_max=1000)) == [priced]


def test_scotch_chill_filtered_opened(whiskeys):
    state = FilterState(type="scotch", chill_filtered=True, is_opened=True)

    assert _names(apply_filters(whiskeys, state)) == ["Lagavulin 16"]


@pytest.mark.parametrize("wanted", [True, False])
def test_chill_filtered_excludes_missing_values(whiskeys, wanted):
    unknown = Whiskey(id=99, name="Mystery Malt")
    collection = whiskeys + [unknown]

    result = apply_filters(collection, FilterState(chill_filtered=wanted))

    assert unknown not in result
    assert all(w.chill_filtered is wanted for w in result)


@pytest.mark.parametrize("dimension", ["is_opened", "limited_edition", "natural_color"])
def test_general_flags_treat_missing_as_false(dimension):
    unknown = Whiskey(id=1)
    flagged = Whiskey(id=2, **{dimension: True})

    assert apply_filters([unknown, flagged], FilterState(**{dimension: False})) == [unknown]
    assert apply_filters([unknown, flagged], FilterState(**{dimension: True})) == [flagged]


def test_limited_edition_true(whiskeys):
    result = apply_filters(whiskeys, FilterState(limited_edition=True))

    assert _names(result) == ["Pappy Van Winkle 20 Year", "Yamazaki 18"]


def test_numeric_bounds_are_inclusive(whiskeys):
    result = apply_filters(whiskeys, FilterState(age_min=12, age_max=18))

    assert _names(result) == ["Lagavulin 16", "Yamazaki 18", "Redbreast 12"]


def test_numeric_bound_excludes_missing_values():
    aged = Whiskey(id=1, age=10)
    nas = Whiskey(id=2)

    assert apply_filters([aged, nas], FilterState(age_max=100)) == [aged]
    assert apply_filters([aged, nas], FilterState(rating_min=0)) == []


def test_zero_is_a_present_value():
    zero = Whiskey(id=1, rating=0)

    assert apply_filters([zero], FilterState(rating_min=0, rating_max=0)) == [zero]


def test_malformed_measure_is_treated_as_absent():
    broken = Whiskey(id=1, abv="strong")
    fine = Whiskey(id=2, abv=46)

    assert apply_filters([broken, fine], FilterState(abv_min=40)) == [fine]


def test_abv_and_rating_ranges(whiskeys):
    assert _names(apply_filters(whiskeys, FilterState(abv_min=45))) == [
        "Buffalo Trace",
        "Pappy Van Winkle 20 Year",
    ]
    assert _names(apply_filters(whiskeys, FilterState(rating_min=9.5))) == [
        "Pappy Van Winkle 20 Year",
        "Yamazaki 18",
    ]


def test_result_is_a_subsequence_of_the_input(whiskeys):
    reordered = list(reversed(whiskeys))

    result = apply_filters(reordered, FilterState(natural_color=True))

    positions = [reordered.index(w) for w in result]
    assert positions == sorted(positions)


def test_adding_a_dimension_only_narrows(whiskeys):
    base = FilterState(country="USA")
    narrower_states = [
        dataclasses.replace(base, limited_edition=True),
        dataclasses.replace(base, age_min=10),
        dataclasses.replace(base, chill_filtered=True),
        dataclasses.replace(base, price_max=100),
    ]

    base_result = apply_filters(whiskeys, base)
    for state in narrower_states:
        narrowed = apply_filters(whiskeys, state)
        assert all(w in base_result for w in narrowed)


def test_filtering_is_repeatable(whiskeys):
    state = FilterState(type="bourbon", price_min=10)

    first = apply_filters(whiskeys, state)
    second = apply_filters(whiskeys, state)

    assert first == second
    assert first is not second


def test_integer_flags_from_stored_records_filter_like_booleans():
    opened = Whiskey.from_dict({"id": 1, "is_opened": 1, "chill_filtered": 1})
    sealed = Whiskey.from_dict({"id": 2, "is_opened": 0, "chill_filtered": 0})

    assert apply_filters([opened, sealed], FilterState(is_opened=True)) == [opened]
    assert apply_filters([opened, sealed], FilterState(chill_filtered=True)) == [opened]
    assert apply_filters([opened, sealed], FilterState(chill_filtered=False)) == [sealed]
