"""Catalog query API endpoints."""
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException

from app.core import accessors
from app.core.metrics import format_number
from app.core.pricing import extract_min_price
from app.core.sorting import SORTERS
from app.core.state import active_filter_labels, has_active_filters
from app.dependencies import get_catalog_service
from app.models.creator import CreatorRecord
from app.models.search import (
    FilterOptionsResponse,
    QueryRequest,
    QueryResponse,
    QueryState,
)

router = APIRouter()

logger = logging.getLogger("catalog_api")
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter("[CatalogAPI] %(asctime)s %(levelname)s: %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
logger.setLevel(logging.INFO)


def creator_to_dict(record: CreatorRecord) -> Dict[str, Any]:
    followers = accessors.get_followers(record)
    total_views = accessors.get_total_views(record)
    average_views = accessors.get_average_views(record)
    details = record.details

    return {
        "id": record.id,
        "name": accessors.get_name(record),
        "genre": accessors.get_genre(record),
        "platform": accessors.get_platform(record) or None,
        "location": accessors.get_display_location(record),
        "tags": accessors.get_tags(record),
        "pricing": accessors.get_pricing(record),
        "price_value": extract_min_price(accessors.get_pricing(record)),
        "followers": followers,
        "followers_formatted": format_number(followers),
        "total_views": total_views,
        "total_views_formatted": format_number(total_views),
        "average_views": average_views,
        "average_views_formatted": format_number(average_views),
        "avatar": record.avatar,
        "social_link": record.social_link,
        "bio": details.bio if details is not None else None,
    }


@router.post("/", response_model=QueryResponse)
async def query_creators(request: QueryRequest, catalog=Depends(get_catalog_service)):
    logger.info(
        "Query request | genre=%s sort=%s search=%s",
        request.genre,
        request.sort_key,
        request.search_term,
    )

    try:
        state = catalog.resolve_state(request)
        results = catalog.query(state, genre=request.genre)
        bounds = catalog.options().bounds
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:  # pylint: disable=broad-except
        logger.exception("Query failed: %s", exc)
        raise HTTPException(status_code=500, detail="Query failed") from exc

    total = len(results)
    page = results[request.offset:]
    if request.limit is not None:
        page = page[: request.limit]

    payload = [creator_to_dict(record) for record in page]
    return QueryResponse(
        success=True,
        results=payload,
        count=len(payload),
        total=total,
        state=state,
        has_active_filters=has_active_filters(state, bounds),
        active_filters=active_filter_labels(state, bounds),
    )


@router.get("/options", response_model=FilterOptionsResponse)
async def filter_options(genre: Optional[str] = None, catalog=Depends(get_catalog_service)):
    options = catalog.options(genre)
    return FilterOptionsResponse(
        success=True,
        platforms=options.platforms,
        locations=options.locations,
        genres=options.genres,
        sort_keys=list(SORTERS),
        bounds=options.bounds,
        version=catalog.version,
    )


@router.get("/defaults", response_model=QueryState)
async def default_state(catalog=Depends(get_catalog_service)):
    return catalog.defaults()
