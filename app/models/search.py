"""Query-related Pydantic models for the catalog API."""
import math
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.config import settings

ALL = "All"
ALL_CREATORS = "All Creators"

SORT_KEYS = ("followers", "views", "price", "name")


def _check_range(name: str, bounds: Optional[Tuple[float, float]]) -> None:
    if bounds is not None and bounds[0] > bounds[1]:
        raise ValueError(f"{name} lower bound must not exceed upper bound")


class RangeBounds(BaseModel):
    """Upper limits of the range sliders for the current snapshot."""

    model_config = ConfigDict(frozen=True)

    price_max: float = settings.DEFAULT_PRICE_MAX
    followers_max: float = settings.DEFAULT_FOLLOWERS_MAX


class QueryState(BaseModel):
    """Complete, immutable description of one catalog query.

    ``price_range`` is in currency units, ``followers_range`` in thousands of
    followers. Both are closed intervals and unbounded above by default, so a
    bare ``QueryState()`` admits every record. Slider ceilings live in
    ``RangeBounds``.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    search_term: str = Field(default="", alias="searchTerm")
    platform: str = ALL
    location: str = ALL
    price_range: Tuple[float, float] = Field(
        default=(0.0, math.inf), alias="priceRange"
    )
    followers_range: Tuple[float, float] = Field(
        default=(0.0, math.inf), alias="followersRange"
    )
    sort_key: str = Field(default="followers", alias="sortKey")

    @model_validator(mode="after")
    def check_ranges(self):
        _check_range("priceRange", self.price_range)
        _check_range("followersRange", self.followers_range)
        return self


class QueryRequest(BaseModel):
    """Partial query; omitted fields fall back to the snapshot defaults."""

    model_config = ConfigDict(populate_by_name=True)

    search_term: Optional[str] = Field(default=None, alias="searchTerm")
    platform: Optional[str] = None
    location: Optional[str] = None
    price_range: Optional[Tuple[float, float]] = Field(default=None, alias="priceRange")
    followers_range: Optional[Tuple[float, float]] = Field(
        default=None, alias="followersRange"
    )
    sort_key: Optional[str] = Field(default=None, alias="sortKey")

    genre: Optional[str] = Field(default=None, description="Upstream genre pre-filter")
    limit: Optional[int] = Field(default=None, ge=1, le=5000)
    offset: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def check_ranges(self):
        _check_range("priceRange", self.price_range)
        _check_range("followersRange", self.followers_range)
        return self

    def overrides(self) -> Dict[str, Any]:
        """Return only the QueryState fields the caller actually set."""
        fields = ("search_term", "platform", "location", "price_range", "followers_range", "sort_key")
        return {name: getattr(self, name) for name in fields if getattr(self, name) is not None}


class QueryResponse(BaseModel):
    success: bool
    results: List[Dict[str, Any]]
    count: int
    total: int
    state: QueryState
    has_active_filters: bool
    active_filters: List[str]


class FilterOptionsResponse(BaseModel):
    success: bool
    platforms: List[str]
    locations: List[str]
    genres: List[str]
    sort_keys: List[str]
    bounds: RangeBounds
    version: int
