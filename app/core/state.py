"""Default, reset and summary helpers for QueryState."""
import math
from typing import List, Optional

from app.core.metrics import format_followers
from app.core.pricing import format_price
from app.models.search import ALL, QueryState, RangeBounds


def default_query_state(bounds: Optional[RangeBounds] = None) -> QueryState:
    """Slider-aligned defaults for ``bounds``, or the unbounded state without them."""
    if bounds is None:
        return QueryState()
    return QueryState(
        price_range=(0.0, bounds.price_max),
        followers_range=(0.0, bounds.followers_max),
    )


def reset_query_state(state: QueryState, bounds: Optional[RangeBounds] = None) -> QueryState:
    """Clear every filter and the search term but keep the chosen sort key."""
    return default_query_state(bounds).model_copy(update={"sort_key": state.sort_key})


def has_active_filters(state: QueryState, bounds: Optional[RangeBounds] = None) -> bool:
    defaults = default_query_state(bounds)
    return (
        state.platform != ALL
        or state.location.strip() not in ("", ALL)
        or tuple(state.price_range) != tuple(defaults.price_range)
        or tuple(state.followers_range) != tuple(defaults.followers_range)
        or bool(state.search_term.strip())
    )


def _range_label(low: float, high: float, formatter) -> str:
    if math.isinf(high):
        return f"{formatter(low)}+"
    return f"{formatter(low)} - {formatter(high)}"


def active_filter_labels(state: QueryState, bounds: Optional[RangeBounds] = None) -> List[str]:
    defaults = default_query_state(bounds)
    labels: List[str] = []
    if state.platform != ALL:
        labels.append(state.platform)
    if state.location.strip() not in ("", ALL):
        labels.append(state.location.strip())
    if tuple(state.price_range) != tuple(defaults.price_range):
        labels.append(_range_label(*state.price_range, format_price))
    if tuple(state.followers_range) != tuple(defaults.followers_range):
        labels.append(f"{_range_label(*state.followers_range, format_followers)} followers")
    return labels
