import os
from typing import Optional, List, Union
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """Application settings"""

    # App settings
    APP_NAME: str = "CreatorDream Directory API"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    PORT: int = 7001

    # Catalog settings
    CATALOG_PATH: Optional[str] = None
    CATALOG_SERVICE_URL: Optional[str] = None
    CATALOG_FETCH_TIMEOUT: int = 30
    QUERY_CACHE_SIZE: int = 256

    # Filter defaults (the dataset may raise these ceilings)
    DEFAULT_PRICE_MAX: float = 10000
    DEFAULT_FOLLOWERS_MAX: float = 1000

    # CORS settings
    ALLOWED_ORIGINS: Union[str, List[str]] = ["*"]

    @field_validator('ALLOWED_ORIGINS', mode='before')
    @classmethod
    def parse_origins(cls, v):
        """Parse ALLOWED_ORIGINS from string or list"""
        if isinstance(v, str):
            if v == "*":
                return ["*"]
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True


# Global settings instance
settings = Settings()


def _candidate_catalog_roots() -> List[str]:
    """Return possible catalog locations (env override, repo data dir, sibling checkout)."""
    current_dir = os.path.dirname(os.path.abspath(__file__))
    repo_root = os.path.dirname(current_dir)
    workspace_root = os.path.dirname(repo_root)

    env_root = os.getenv("CREATOR_CATALOG_ROOT")
    candidates: List[str] = []
    if env_root:
        candidates.append(env_root)
    candidates.extend(
        [
            os.path.join(repo_root, "data"),
            os.path.join(workspace_root, "creator-catalog", "data"),
        ]
    )

    # Deduplicate while preserving order
    seen = set()
    unique_candidates: List[str] = []
    for path in candidates:
        norm = os.path.abspath(path)
        if norm not in seen:
            seen.add(norm)
            unique_candidates.append(norm)
    return unique_candidates or [repo_root]


def _resolve_default_catalog_path() -> str:
    """Prefer a full export, fall back to the bundled sample."""
    for file_name in ("creators.json", "creators.sample.json"):
        for root in _candidate_catalog_roots():
            candidate = os.path.join(root, file_name)
            if os.path.exists(candidate):
                return candidate

    # Last resort: point to the expected layout even if missing
    first_root = _candidate_catalog_roots()[0]
    return os.path.join(first_root, "creators.json")


# Set default catalog path if not provided
if not settings.CATALOG_PATH:
    settings.CATALOG_PATH = _resolve_default_catalog_path()
