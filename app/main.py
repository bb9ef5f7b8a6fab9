import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

load_dotenv()

from app.config import settings
from app.core.exceptions import ESGValidationException, RepositoryException
from app.logging_config import configure_logging
from app.models.enumerations import StorageBackend
from app.core.dependencies import get_esg_repository

# IMPORT ROUTERS
from app.routers.health import router as health_router
from app.routers.esg import (
    router as esg_router,
    esg_validation_exception_handler,
    pydantic_validation_exception_handler,
    repository_exception_handler,
    request_validation_exception_handler,
)

configure_logging(settings)
logger = logging.getLogger(__name__)


# SWAGGER UI - tag display order
_OPENAPI_TAGS = [
    {"name": "Root"},
    {"name": "Health"},
    {"name": "ESG"},
]

# FASTAPI APPLICATION CONFIGURATION
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=_OPENAPI_TAGS,
)

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

# REGISTER EXCEPTION HANDLERS
app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
app.add_exception_handler(ESGValidationException, esg_validation_exception_handler)
app.add_exception_handler(ValidationError, pydantic_validation_exception_handler)
app.add_exception_handler(RepositoryException, repository_exception_handler)

# REGISTER ROUTERS (order matches _OPENAPI_TAGS / Swagger UI display order)
app.include_router(health_router)   # Health
app.include_router(esg_router)      # ESG


# ROOT ENDPOINT
@app.get("/", tags=["Root"], summary="Root endpoint")
async def root():
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc"
        },
        "status": "running"
    }


# STARTUP EVENT
@app.on_event("startup")
async def startup_event():
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION} (storage={settings.STORAGE_BACKEND.value})")
    if settings.STORAGE_BACKEND == StorageBackend.SNOWFLAKE:
        get_esg_repository().ensure_table()


# RUN WITH UVICORN
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
