"""
Dependencies - ESG Scoring Platform
app/core/dependencies.py

FastAPI dependency injection for the scoring engine, repository and service.
"""

from functools import lru_cache
from fastapi import Depends, HTTPException, Request, status

from app.config import build_scoring_config, get_settings
from app.models.enumerations import StorageBackend
from app.repositories.esg_repository import (
    ESGRecordRepository,
    InMemoryESGRepository,
    SnowflakeESGRepository,
)
from app.scoring.esg_calculator import ESGCalculator
from app.services.cache import get_cache
from app.services.esg_service import ESGService


@lru_cache()
def get_esg_repository() -> ESGRecordRepository:
    """Get cached repository for the configured storage backend."""
    if get_settings().STORAGE_BACKEND == StorageBackend.SNOWFLAKE:
        return SnowflakeESGRepository()
    return InMemoryESGRepository()


@lru_cache()
def get_esg_calculator() -> ESGCalculator:
    """Get cached ESGCalculator built from settings."""
    return ESGCalculator(build_scoring_config(get_settings()))


def get_esg_service(
    repository: ESGRecordRepository = Depends(get_esg_repository),
    calculator: ESGCalculator = Depends(get_esg_calculator),
) -> ESGService:
    settings = get_settings()
    return ESGService(
        repository=repository,
        calculator=calculator,
        cache=get_cache(),
        cache_ttl=settings.CACHE_TTL_LATEST,
    )


def get_current_user(request: Request) -> str:
    """Submitter identity, set by the authenticating proxy in front of the API."""
    user_id = request.headers.get(get_settings().USER_ID_HEADER)
    if not user_id or not user_id.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing submitter identity header",
        )
    return user_id.strip()
