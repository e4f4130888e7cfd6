from __future__ import annotations

import pytest

from whiskey_browser.core.exceptions import UnknownColumnError
from whiskey_browser.core.record import Whiskey
from whiskey_browser.core.sorting import (
    SortDirection,
    SortState,
    collation_key,
    sort_records,
)


def _names(records):
    return [w.name for w in records]


def test_sort_by_name_ascending(whiskeys):
    result = sort_records(whiskeys, "name", "asc")

    assert _names(result) == [
        "Buffalo Trace",
        "Lagavulin 16",
        "Pappy Van Winkle 20 Year",
        "Redbreast 12",
        "Yamazaki 18",
    ]


def test_toggling_direction_reverses_exact_order(whiskeys):
    state = SortState()
    ascending = sort_records(whiskeys, state.column, state.direction)

    state = state.toggle("name")
    descending = sort_records(whiskeys, state.column, state.direction)

    assert state.direction is SortDirection.DESC
    assert descending == list(reversed(ascending))


def test_sort_does_not_mutate_input(whiskeys):
    before = list(whiskeys)

    result = sort_records(whiskeys, "age", SortDirection.DESC)

    assert whiskeys == before
    assert result is not whiskeys


def test_numeric_sort_both_directions(whiskeys):
    assert [w.age for w in sort_records(whiskeys, "age", "asc")] == [8, 12, 16, 18, 20]
    assert [w.age for w in sort_records(whiskeys, "age", "desc")] == [20, 18, 16, 12, 8]


@pytest.mark.parametrize("direction", ["asc", "desc"])
def test_missing_values_always_sort_last(whiskeys, direction):
    # only Redbreast has an msrp
    result = sort_records(whiskeys, "msrp", direction)

    assert result[0].name == "Redbreast 12"
    assert [w.id for w in result[1:]] == [1, 2, 3, 4]


def test_malformed_values_sort_with_missing():
    records = [Whiskey(id=1, age="old"), Whiskey(id=2, age=3), Whiskey(id=3, age=None)]

    assert [w.id for w in sort_records(records, "age", "desc")] == [2, 1, 3]


def test_sort_is_stable_for_equal_keys():
    records = [
        Whiskey(id=1, abv=43),
        Whiskey(id=2, abv=40),
        Whiskey(id=3, abv=43),
        Whiskey(id=4, abv=43),
    ]

    assert [w.id for w in sort_records(records, "abv", "asc")] == [2, 1, 3, 4]
    assert [w.id for w in sort_records(records, "abv", "desc")] == [1, 3, 4, 2]


def test_sorting_twice_is_idempotent(whiskeys):
    once = sort_records(whiskeys, "rating", "desc")
    twice = sort_records(once, "rating", "desc")

    assert twice == once


def test_string_sort_ignores_case_and_accents():
    records = [
        Whiskey(id=1, distillery="glenfiddich"),
        Whiskey(id=2, distillery="Édradour"),
        Whiskey(id=3, distillery="Ardbeg"),
    ]

    assert [w.id for w in sort_records(records, "distillery", "asc")] == [3, 2, 1]


def test_collation_key_orders_case_variants_deterministically():
    assert collation_key("abc")[0] == collation_key("ABC")[0]
    assert collation_key("ABC") != collation_key("abc")


def test_unknown_column_raises(whiskeys):
    with pytest.raises(UnknownColumnError):
        sort_records(whiskeys, "private_notes", "asc")

    with pytest.raises(UnknownColumnError):
        SortState().toggle("private_notes")


def test_sort_state_transitions():
    state = SortState()
    assert state == SortState(column="name", direction=SortDirection.ASC)

    state = state.toggle("name")
    assert state.direction is SortDirection.DESC

    state = state.toggle("age")
    assert state == SortState(column="age", direction=SortDirection.ASC)


def test_sort_state_from_dict_falls_back_to_default():
    assert SortState.from_dict({"column": "rating", "direction": "desc"}) == SortState(
        column="rating", direction=SortDirection.DESC
    )
    assert SortState.from_dict({"column": "nope"}) == SortState()
    assert SortState.from_dict({"column": "age", "direction": "sideways"}) == SortState(column="age")
    assert SortState.from_dict(None) == SortState()
