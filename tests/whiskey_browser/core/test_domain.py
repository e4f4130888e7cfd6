from __future__ import annotations

from whiskey_browser.core.domain import NumericRange, derive_domain
from whiskey_browser.core.filter_state import DEFAULT_FILTERS
from whiskey_browser.core.predicates import apply_filters
from whiskey_browser.core.record import Whiskey


def test_categorical_values_are_sorted_and_distinct(whiskeys):
    domain = derive_domain(whiskeys)

    assert domain.options("type") == ["bourbon", "irish", "japanese", "scotch"]
    assert domain.options("distillery") == [
        "Buffalo Trace Distillery",
        "Lagavulin Distillery",
        "Midleton Distillery",
        "Yamazaki Distillery",
    ]
    assert domain.options("country") == ["Ireland", "Japan", "Scotland", "USA"]


def test_empty_and_missing_categorical_values_are_dropped():
    domain = derive_domain([Whiskey(id=1, region=""), Whiskey(id=2), Whiskey(id=3, region="Speyside")])

    assert domain.options("region") == ["Speyside"]


def test_numeric_ranges_from_present_values(whiskeys):
    domain = derive_domain(whiskeys)

    assert domain.range("age") == NumericRange(8, 20)
    assert domain.range("rating") == NumericRange(8.0, 9.8)


def test_abv_and_price_ranges_widen_to_whole_numbers(whiskeys):
    domain = derive_domain(whiskeys + [Whiskey(id=6, msrp=64.5)])

    assert domain.range("abv") == NumericRange(40, 46)
    # price is coalesced: Redbreast contributes its MSRP
    assert domain.range("price") == NumericRange(30, 2000)


def test_price_range_uses_msrp_fallback():
    domain = derive_domain([Whiskey(id=1, msrp=64.5), Whiskey(id=2, purchase_price=80.2, msrp=10)])

    assert domain.range("price") == NumericRange(64, 81)


def test_empty_collection_uses_fallback_ranges():
    domain = derive_domain([])

    assert domain.range("age") == NumericRange(0, 30, observed=False)
    assert domain.range("abv") == NumericRange(40, 70, observed=False)
    assert domain.range("rating") == NumericRange(0, 10, observed=False)
    assert domain.range("price") == NumericRange(0, 500, observed=False)
    assert all(domain.options(d) == [] for d in ("type", "distillery", "region", "country"))


def test_fallback_only_for_unobserved_dimension():
    domain = derive_domain([Whiskey(id=1, age=12)])

    assert domain.range("age").observed
    assert not domain.range("rating").observed


def test_fallbacks_never_constrain_filtering():
    bottles = [Whiskey(id=1, age=45, abv=72, msrp=900)]

    domain = derive_domain([])
    assert not domain.range("age").observed

    assert apply_filters(bottles, DEFAULT_FILTERS) == bottles
