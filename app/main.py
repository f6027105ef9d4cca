"""FastAPI application entry point for the creator directory API."""
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1.router import api_router
from app.config import settings
from app.core.sorting import use_system_collation
from app.dependencies import get_optional_catalog_service, init_catalog_service


@asynccontextmanager
async def lifespan(_app: FastAPI):
    use_system_collation()
    init_catalog_service()
    yield


app = FastAPI(title=settings.APP_NAME, version=settings.VERSION, debug=settings.DEBUG, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/health")
async def health(catalog=Depends(get_optional_catalog_service)):
    loaded = catalog is not None and catalog.is_loaded
    return {
        "status": "ok" if loaded else "degraded",
        "catalog_loaded": loaded,
        "catalog_version": catalog.version if loaded else None,
        "creators": len(catalog.records) if loaded else 0,
    }


if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT, reload=settings.DEBUG)
