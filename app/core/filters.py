"""
Predicate composition for catalog queries.

Each ``*_predicate`` builder returns a callable for one QueryState field, or
``None`` when that field is at its pass-through value. ``filter_creators``
keeps the records that satisfy every active predicate, in input order.

Text filters ignore surrounding whitespace: the search term and the location
are stripped before matching, and a blank value filters nothing.
"""
from typing import Callable, Iterable, List, Optional

from app.core import accessors
from app.core.metrics import followers_in_thousands
from app.core.pricing import extract_min_price, price_in_range
from app.models.creator import CreatorRecord
from app.models.search import ALL, ALL_CREATORS, QueryState

Predicate = Callable[[CreatorRecord], bool]


def search_predicate(search_term: str) -> Optional[Predicate]:
    term = (search_term or "").strip().casefold()
    if not term:
        return None

    def matches(record: CreatorRecord) -> bool:
        if term in accessors.get_name(record).casefold():
            return True
        if any(term in tag.casefold() for tag in accessors.get_tags(record)):
            return True
        return term in accessors.get_genre(record).casefold()

    return matches


def platform_predicate(platform: str) -> Optional[Predicate]:
    if not platform or platform == ALL:
        return None
    return lambda record: accessors.get_platform(record) == platform


def location_predicate(location: str) -> Optional[Predicate]:
    # Substring containment: "Mumbai" matches "Mumbai, India".
    needle = (location or "").strip().casefold()
    if not needle or location == ALL:
        return None
    return lambda record: needle in accessors.get_location(record).casefold()


def price_predicate(price_range) -> Predicate:
    low, high = price_range

    def matches(record: CreatorRecord) -> bool:
        return price_in_range(extract_min_price(accessors.get_pricing(record)), low, high)

    return matches


def followers_predicate(followers_range) -> Predicate:
    low, high = followers_range

    def matches(record: CreatorRecord) -> bool:
        followers = followers_in_thousands(accessors.get_followers(record))
        return low <= followers <= high

    return matches


def build_predicates(state: QueryState) -> List[Predicate]:
    candidates = [
        search_predicate(state.search_term),
        platform_predicate(state.platform),
        location_predicate(state.location),
        price_predicate(state.price_range),
        followers_predicate(state.followers_range),
    ]
    return [predicate for predicate in candidates if predicate is not None]


def filter_creators(records: Iterable[CreatorRecord], state: QueryState) -> List[CreatorRecord]:
    predicates = build_predicates(state)
    return [record for record in records if all(predicate(record) for predicate in predicates)]


def filter_by_genre(records: Iterable[CreatorRecord], genre: Optional[str]) -> List[CreatorRecord]:
    """Genre pre-filter applied by the calling view before ``query``."""
    if not genre or genre in (ALL, ALL_CREATORS):
        return list(records)
    return [record for record in records if accessors.get_genre(record) == genre]
