import pytest

from app.core.filters import (
    build_predicates,
    filter_by_genre,
    filter_creators,
    location_predicate,
    platform_predicate,
    search_predicate,
)
from app.core.options import derive_range_bounds
from app.core.state import default_query_state
from app.models.search import QueryState
from tests.helpers import make_creator


def ids(records):
    return [record.id for record in records]


def test_snapshot_default_state_keeps_everything_in_order(scenario_records):
    state = default_query_state(derive_range_bounds(scenario_records))
    assert ids(filter_creators(scenario_records, state)) == ["A", "B", "C"]


def test_bare_default_state_admits_every_record(scenario_records):
    assert ids(filter_creators(scenario_records, QueryState())) == ["A", "B", "C"]


def test_bare_default_state_admits_large_prices_and_audiences():
    record = make_creator("1", pricing="$50,000", followers=25_000_000)
    assert filter_creators([record], QueryState()) == [record]


def test_default_state_has_only_range_predicates():
    assert len(build_predicates(QueryState())) == 2


@pytest.mark.parametrize("term", ["alex", "ALEX", "cook", "life", "  Cook  ", "alex "])
def test_search_matches_name_tag_or_genre(term):
    record = make_creator("1", "Alex", tags=["cooking"], genre="Lifestyle")
    assert filter_creators([record], QueryState(search_term=term)) == [record]


def test_search_without_match_excludes():
    record = make_creator("1", "Alex", tags=["cooking"], genre="Lifestyle")
    assert filter_creators([record], QueryState(search_term="gaming")) == []


def test_blank_search_is_pass_through():
    assert search_predicate("") is None
    assert search_predicate("   ") is None


def test_search_handles_missing_tags():
    record = make_creator("1", "Alex", genre="")
    assert filter_creators([record], QueryState(search_term="cook")) == []


def test_platform_filter_is_exact_and_case_sensitive(scenario_records):
    state = QueryState(platform="Instagram")
    assert ids(filter_creators(scenario_records, state)) == ["A", "C"]
    assert filter_creators(scenario_records, QueryState(platform="instagram")) == []
    assert platform_predicate("All") is None


def test_record_without_platform_is_excluded_by_platform_filter():
    record = make_creator("1")
    assert filter_creators([record], QueryState(platform="Instagram")) == []


def test_location_substring_is_case_insensitive():
    records = [
        make_creator("1", location="Mumbai, India"),
        make_creator("2", details_location="Navi Mumbai"),
        make_creator("3", location="Delhi"),
        make_creator("4"),
    ]
    assert ids(filter_creators(records, QueryState(location="mumbai"))) == ["1", "2"]
    assert location_predicate("All") is None


@pytest.mark.parametrize("location", ["", " ", "\t "])
def test_blank_location_is_pass_through(location):
    records = [make_creator("1", location="Delhi"), make_creator("2")]
    assert location_predicate(location) is None
    assert ids(filter_creators(records, QueryState(location=location))) == ["1", "2"]


def test_top_level_location_takes_precedence():
    record = make_creator("1", location="Pune", details_location="Mumbai")
    assert filter_creators([record], QueryState(location="Mumbai")) == []
    assert filter_creators([record], QueryState(location="Pune")) == [record]


def test_missing_price_passes_every_price_range():
    record = make_creator("1")
    for price_range in [(0, 0), (0, 10000), (5000, 6000)]:
        assert filter_creators([record], QueryState(price_range=price_range)) == [record]


def test_unparsable_price_passes_price_filter():
    record = make_creator("1", pricing="Contact for pricing")
    assert filter_creators([record], QueryState(price_range=(0, 0))) == [record]


def test_price_range_excludes_on_parsed_price():
    cheap = make_creator("1", pricing="₹2,000")
    pricey = make_creator("2", pricing="$1.5k")
    assert ids(filter_creators([cheap, pricey], QueryState(price_range=(0, 1000)))) == []
    assert ids(filter_creators([cheap, pricey], QueryState(price_range=(1000, 1800)))) == ["2"]
    assert ids(filter_creators([cheap, pricey], QueryState(price_range=(1500, 2000)))) == ["1", "2"]


def test_followers_compared_in_thousands():
    record = make_creator("1", followers=500_000)
    assert filter_creators([record], QueryState(followers_range=(0, 1000))) == [record]
    assert filter_creators([record], QueryState(followers_range=(0, 400))) == []
    assert filter_creators([record], QueryState(followers_range=(500, 500))) == [record]


def test_missing_followers_count_as_zero():
    record = make_creator("1")
    assert filter_creators([record], QueryState(followers_range=(0, 0))) == [record]
    assert filter_creators([record], QueryState(followers_range=(1, 1000))) == []


def test_widening_ranges_never_drops_records():
    records = [
        make_creator(str(i), pricing=pricing, followers=followers)
        for i, (pricing, followers) in enumerate(
            [("$50", 1_000), ("₹2,000", 250_000), (None, 900_000), ("$1.5k", 40_000), ("₹9,999", 0)]
        )
    ]
    price_ranges = [(1000, 2000), (500, 5000), (0, 10000)]
    follower_ranges = [(100, 300), (10, 500), (0, 1000)]

    previous = set()
    for price_range in price_ranges:
        current = set(ids(filter_creators(records, QueryState(price_range=price_range))))
        assert previous <= current
        previous = current

    previous = set()
    for followers_range in follower_ranges:
        current = set(ids(filter_creators(records, QueryState(followers_range=followers_range))))
        assert previous <= current
        previous = current


def test_filter_does_not_mutate_input(scenario_records):
    snapshot = list(scenario_records)
    filter_creators(scenario_records, QueryState(platform="YouTube"))
    assert scenario_records == snapshot


def test_genre_prefilter():
    records = [make_creator("1", genre="Business"), make_creator("2", genre="Lifestyle")]
    assert ids(filter_by_genre(records, "Business")) == ["1"]
    assert ids(filter_by_genre(records, "All Creators")) == ["1", "2"]
    assert ids(filter_by_genre(records, None)) == ["1", "2"]
