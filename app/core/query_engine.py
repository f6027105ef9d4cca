"""
Catalog query engine.

``query`` is the pure entry point: filter, then sort. ``CatalogQueryEngine``
binds one immutable snapshot of the collection and memoizes results per
``(version, state)`` so repeated keystrokes against the same snapshot are
served from cache.
"""
import logging
from collections import OrderedDict
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from app.core.filters import filter_by_genre, filter_creators
from app.core.options import (
    derive_genre_options,
    derive_location_options,
    derive_platform_options,
    derive_range_bounds,
)
from app.core.sorting import sort_creators
from app.models.creator import CreatorRecord
from app.models.search import QueryState, RangeBounds

logger = logging.getLogger(__name__)


def query(records: Iterable[CreatorRecord], state: QueryState) -> List[CreatorRecord]:
    return sort_creators(filter_creators(records, state), state.sort_key)


@dataclass(frozen=True)
class FilterOptions:
    platforms: List[str]
    locations: List[str]
    genres: List[str]
    bounds: RangeBounds


class CatalogQueryEngine:
    """Query engine bound to a single collection snapshot."""

    def __init__(self, records: Sequence[CreatorRecord], version: int = 0, cache_size: int = 256):
        self.records: Tuple[CreatorRecord, ...] = tuple(records)
        self.version = version
        self.cache_size = max(0, cache_size)
        self._cache: "OrderedDict[tuple, Tuple[CreatorRecord, ...]]" = OrderedDict()
        self._options = FilterOptions(
            platforms=derive_platform_options(self.records),
            locations=derive_location_options(self.records),
            genres=derive_genre_options(self.records),
            bounds=derive_range_bounds(self.records),
        )

    @property
    def options(self) -> FilterOptions:
        return self._options

    def options_for_genre(self, genre: str = None) -> FilterOptions:
        """Vocabularies restricted to one genre; slider bounds stay snapshot-wide."""
        if not genre:
            return self._options
        subset = filter_by_genre(self.records, genre)
        return FilterOptions(
            platforms=derive_platform_options(subset),
            locations=derive_location_options(subset),
            genres=self._options.genres,
            bounds=self._options.bounds,
        )

    def query(self, state: QueryState, genre: str = None) -> List[CreatorRecord]:
        key = (self.version, genre or "", state)
        cached = self._cache.get(key)
        if cached is not None:
            self._cache.move_to_end(key)
            return list(cached)

        source = filter_by_genre(self.records, genre)
        results = query(source, state)
        logger.debug(
            "query v%s genre=%s sort=%s: %d of %d records",
            self.version,
            genre,
            state.sort_key,
            len(results),
            len(source),
        )

        if self.cache_size:
            self._cache[key] = tuple(results)
            if len(self._cache) > self.cache_size:
                self._cache.popitem(last=False)
        return results
