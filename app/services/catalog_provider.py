"""Creator-listing providers: where the catalog snapshot comes from."""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Iterable, List, Optional

import requests
from pydantic import ValidationError

from app.config import settings
from app.models.creator import CreatorRecord

logger = logging.getLogger(__name__)


class CatalogFetchError(RuntimeError):
    """Raised when the creator listing cannot be fetched or decoded."""


def parse_records(payload: Any) -> List[CreatorRecord]:
    """Validate raw listing items, skipping the ones that are not records at all."""
    if isinstance(payload, dict):
        payload = payload.get("creators", payload.get("results"))
    if not isinstance(payload, list):
        raise CatalogFetchError("Creator listing must be a JSON array of records")

    records: List[CreatorRecord] = []
    for index, item in enumerate(payload):
        try:
            records.append(CreatorRecord.model_validate(item))
        except ValidationError as exc:
            logger.warning("Skipping invalid creator record at index %s: %s", index, exc.errors()[:1])
    return records


class JSONFileCatalogProvider:
    """Reads the creator listing from a JSON export on disk."""

    def __init__(self, path: Optional[str] = None) -> None:
        self.path = path or settings.CATALOG_PATH

    @property
    def is_available(self) -> bool:
        return bool(self.path) and os.path.exists(self.path)

    def get_all(self) -> List[CreatorRecord]:
        if not self.is_available:
            raise CatalogFetchError(f"Catalog file not found at: {self.path}")
        try:
            with open(self.path, "r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except (OSError, json.JSONDecodeError) as exc:
            raise CatalogFetchError(f"Could not read catalog file {self.path}: {exc}") from exc
        return parse_records(payload)


class HTTPCatalogProvider:
    """Fetches the creator listing from the directory backend's REST endpoint."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[int] = None) -> None:
        base_url = (base_url or settings.CATALOG_SERVICE_URL or "").rstrip("/")
        self.base_url = base_url or None
        self.timeout = timeout or settings.CATALOG_FETCH_TIMEOUT or 30
        self.session = requests.Session()

    @property
    def is_available(self) -> bool:
        return bool(self.base_url)

    def get_all(self) -> List[CreatorRecord]:
        if not self.is_available:
            raise CatalogFetchError("Catalog service URL is not configured")
        try:
            response = self.session.get(f"{self.base_url}/creators", timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            raise CatalogFetchError(f"Creator listing request failed: {exc}") from exc
        except ValueError as exc:
            raise CatalogFetchError("Creator listing response was not valid JSON") from exc
        return parse_records(payload)


class StaticCatalogProvider:
    """In-memory listing, used by the CLI and tests."""

    def __init__(self, records: Iterable[Any]) -> None:
        self._records = list(records)

    @property
    def is_available(self) -> bool:
        return True

    def get_all(self) -> List[CreatorRecord]:
        return parse_records(self._records)


def build_default_provider():
    """HTTP provider when a service URL is configured, otherwise the JSON file."""
    if settings.CATALOG_SERVICE_URL:
        return HTTPCatalogProvider()
    return JSONFileCatalogProvider()
