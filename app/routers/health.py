"""
Health Check Router - ESG Scoring Platform
app/routers/health.py

Reports service status and the state of its storage/cache dependencies.
"""
from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.config import settings
from app.models.enumerations import StorageBackend
from app.services.cache import get_cache

router = APIRouter(tags=["Health"])


#  Schemas


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    storage_backend: StorageBackend
    dependencies: Dict[str, str]


#  Dependency Health Checks


def check_redis() -> str:
    """Redis is optional; report 'disabled' when caching is off or unreachable."""
    if not settings.CACHE_ENABLED:
        return "disabled"
    return "healthy" if get_cache() is not None else "unavailable"


#  Endpoints


@router.get("/health", response_model=HealthResponse, summary="Service health")
def health_check():
    dependencies = {
        "scoring_engine": "healthy",
        "redis": check_redis(),
    }
    body = HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=settings.APP_VERSION,
        storage_backend=settings.STORAGE_BACKEND,
        dependencies=dependencies,
    )
    return JSONResponse(status_code=status.HTTP_200_OK, content=body.model_dump(mode="json"))
