"""Service that owns the current catalog snapshot and serves queries against it."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple, Union

from app.config import settings
from app.core.filters import filter_by_genre
from app.core.query_engine import CatalogQueryEngine, FilterOptions
from app.core.state import default_query_state
from app.models.creator import CreatorRecord
from app.models.search import QueryRequest, QueryState
from app.services.catalog_provider import CatalogFetchError

logger = logging.getLogger(__name__)


class CreatorCatalogService:
    """Loads snapshots from a provider and routes queries to the bound engine.

    Each successful load builds a fresh ``CatalogQueryEngine`` with the next
    version number and swaps it in one assignment. A failed reload leaves the
    previous snapshot in place.
    """

    def __init__(self, provider, cache_size: Optional[int] = None) -> None:
        self.provider = provider
        self.cache_size = settings.QUERY_CACHE_SIZE if cache_size is None else cache_size
        self._engine: Optional[CatalogQueryEngine] = None
        self._version = 0

    @property
    def is_loaded(self) -> bool:
        return self._engine is not None

    @property
    def version(self) -> int:
        return self._version

    @property
    def engine(self) -> CatalogQueryEngine:
        if self._engine is None:
            raise CatalogFetchError("Catalog has not been loaded")
        return self._engine

    @property
    def records(self) -> Tuple[CreatorRecord, ...]:
        return self.engine.records

    def load(self) -> int:
        """Fetch a new snapshot; returns the number of records loaded."""
        records = self.provider.get_all()
        next_version = self._version + 1
        self._engine = CatalogQueryEngine(records, version=next_version, cache_size=self.cache_size)
        self._version = next_version
        logger.info("Catalog snapshot v%s loaded with %d creators", next_version, len(records))
        return len(records)

    def options(self, genre: Optional[str] = None) -> FilterOptions:
        return self.engine.options_for_genre(genre)

    def defaults(self) -> QueryState:
        return default_query_state(self.engine.options.bounds)

    def resolve_state(self, request: QueryRequest) -> QueryState:
        """Merge the caller's partial request over the snapshot defaults."""
        return self.defaults().model_copy(update=request.overrides())

    def query(self, state: QueryState, genre: Optional[str] = None) -> List[CreatorRecord]:
        return self.engine.query(state, genre=genre)

    def list_creators(self, genre: Optional[str] = None) -> List[CreatorRecord]:
        return filter_by_genre(self.records, genre)

    def get_creator(self, creator_id: Union[int, str]) -> Optional[CreatorRecord]:
        wanted = str(creator_id)
        for record in self.records:
            if str(record.id) == wanted:
                return record
        return None
