"""Filter vocabularies and slider bounds derived from the live collection."""
from typing import Callable, Iterable, List

from app.config import settings
from app.core import accessors
from app.core.metrics import followers_in_thousands
from app.core.pricing import NO_PRICE, extract_min_price
from app.models.creator import CreatorRecord
from app.models.search import ALL, ALL_CREATORS, RangeBounds


def _distinct(records: Iterable[CreatorRecord], getter: Callable[[CreatorRecord], str], head: str) -> List[str]:
    options = [head]
    seen = {head}
    for record in records:
        value = getter(record)
        if value and value not in seen:
            seen.add(value)
            options.append(value)
    return options


def derive_platform_options(records: Iterable[CreatorRecord]) -> List[str]:
    return _distinct(records, accessors.get_platform, ALL)


def derive_location_options(records: Iterable[CreatorRecord]) -> List[str]:
    return _distinct(records, accessors.get_location, ALL)


def derive_genre_options(records: Iterable[CreatorRecord]) -> List[str]:
    return _distinct(records, accessors.get_genre, ALL_CREATORS)


def derive_range_bounds(records: Iterable[CreatorRecord]) -> RangeBounds:
    """Slider ceilings wide enough that the default state admits every record."""
    price_max = settings.DEFAULT_PRICE_MAX
    followers_max = settings.DEFAULT_FOLLOWERS_MAX
    for record in records:
        price = extract_min_price(accessors.get_pricing(record))
        if price is not NO_PRICE and price > price_max:
            price_max = price
        followers = followers_in_thousands(accessors.get_followers(record))
        if followers > followers_max:
            followers_max = followers
    return RangeBounds(price_max=price_max, followers_max=followers_max)
