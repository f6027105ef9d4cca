"""Shared dependencies for FastAPI endpoints"""
from fastapi import HTTPException

from app.config import settings

# Global instances
_catalog_service = None


def init_catalog_service(provider=None) -> bool:
    """Initialize the catalog service and load the first snapshot"""
    global _catalog_service
    try:
        from app.services.catalog import CreatorCatalogService
        from app.services.catalog_provider import CatalogFetchError, build_default_provider

        service = CreatorCatalogService(provider or build_default_provider())
        try:
            count = service.load()
        except CatalogFetchError as exc:
            print(f"⚠️ Catalog could not be loaded: {exc}")
            _catalog_service = None
            return False

        _catalog_service = service
        print("✅ Catalog service initialized")
        if settings.CATALOG_SERVICE_URL:
            print(f"   • Source: {settings.CATALOG_SERVICE_URL}")
        else:
            print(f"   • Source: {settings.CATALOG_PATH}")
        print(f"   • Creators: {count}")
        return True
    except Exception as e:  # pylint: disable=broad-except
        print(f"❌ Error initializing catalog service: {e}")
        _catalog_service = None
        return False


def get_catalog_service():
    """Dependency to get catalog service instance"""
    if _catalog_service is None:
        raise HTTPException(
            status_code=503,
            detail="Catalog not loaded. Please ensure the creator listing is available."
        )
    return _catalog_service


async def get_optional_catalog_service():
    """Get catalog service if available, None otherwise"""
    return _catalog_service
