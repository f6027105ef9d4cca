"""Public service interfaces."""

from .catalog import CreatorCatalogService
from .catalog_provider import (
    CatalogFetchError,
    HTTPCatalogProvider,
    JSONFileCatalogProvider,
    StaticCatalogProvider,
    build_default_provider,
)

__all__ = [
    "CatalogFetchError",
    "CreatorCatalogService",
    "HTTPCatalogProvider",
    "JSONFileCatalogProvider",
    "StaticCatalogProvider",
    "build_default_provider",
]
