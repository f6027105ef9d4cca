import locale

import pytest

from app.core.sorting import sort_creators, use_system_collation
from tests.helpers import make_creator


def ids(records):
    return [record.id for record in records]


@pytest.fixture()
def records():
    return [
        make_creator("1", "charlie", followers=300, total_views=10, pricing="$1.5k"),
        make_creator("2", "Alice", followers=900, total_views=5, pricing="₹2,000"),
        make_creator("3", "bob", followers=300, total_views=70),
        make_creator("4", "Dana", followers=100, total_views=70, pricing="From $100"),
    ]


def test_sort_by_followers_descending_and_stable(records):
    assert ids(sort_creators(records, "followers")) == ["2", "1", "3", "4"]


def test_sort_by_views_descending_and_stable(records):
    assert ids(sort_creators(records, "views")) == ["3", "4", "1", "2"]


def test_sort_by_price_ascending_with_missing_price_first(records):
    assert ids(sort_creators(records, "price")) == ["3", "4", "1", "2"]


def test_sort_by_name_ignores_case(records):
    assert ids(sort_creators(records, "name")) == ["2", "3", "1", "4"]


def test_unknown_key_keeps_input_order(records):
    result = sort_creators(records, "engagement")
    assert ids(result) == ["1", "2", "3", "4"]
    assert result is not records


@pytest.mark.parametrize("key", ["followers", "views", "price", "name", "unknown"])
def test_sorting_twice_is_a_no_op(records, key):
    once = sort_creators(records, key)
    assert sort_creators(once, key) == once


def test_sort_does_not_mutate_input(records):
    original = list(records)
    sort_creators(records, "name")
    assert records == original


def test_missing_analytics_sort_last_for_followers():
    records = [make_creator("x"), make_creator("y", followers=1)]
    assert ids(sort_creators(records, "followers")) == ["y", "x"]


def test_system_collation_keeps_name_sort_case_insensitive(records):
    assert use_system_collation()
    ordered = [r.name.casefold() for r in sort_creators(records, "name")]
    assert ordered == sorted(ordered, key=locale.strxfrm)
