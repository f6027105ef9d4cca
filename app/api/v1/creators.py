"""Creator-related API endpoints"""
import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Depends

from app.api.v1.search import creator_to_dict
from app.dependencies import get_catalog_service
from app.models.creator import (
    CatalogReloadResponse,
    CreatorDetailResponse,
    CreatorListResponse,
)
from app.services.catalog_provider import CatalogFetchError

router = APIRouter()

logger = logging.getLogger("catalog_api")


@router.get("/", response_model=CreatorListResponse)
async def list_creators(
    genre: Optional[str] = None,
    catalog=Depends(get_catalog_service)
):
    """List creators in snapshot order, optionally narrowed to one genre."""
    records = catalog.list_creators(genre)
    payload = [creator_to_dict(record) for record in records]
    return CreatorListResponse(success=True, results=payload, count=len(payload))


@router.post("/reload", response_model=CatalogReloadResponse)
async def reload_catalog(catalog=Depends(get_catalog_service)):
    """Re-fetch the creator listing; the previous snapshot stays live on failure."""
    try:
        count = catalog.load()
    except CatalogFetchError as exc:
        logger.warning("Catalog reload failed: %s", exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return CatalogReloadResponse(success=True, version=catalog.version, count=count)


@router.get("/{creator_id}", response_model=CreatorDetailResponse)
async def get_creator_detail(
    creator_id: str,
    catalog=Depends(get_catalog_service)
):
    record = catalog.get_creator(creator_id)
    if record is None:
        raise HTTPException(status_code=404, detail=f"Creator '{creator_id}' not found")
    return {"success": True, "result": creator_to_dict(record)}
