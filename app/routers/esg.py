"""
ESG Router - ESG Scoring Platform
app/routers/esg.py

Endpoints:
  POST /api/v1/esg/submit   - Validate, score and store a submission
  GET  /api/v1/esg/latest   - Most recent record for the submitter
  GET  /api/v1/esg/trend    - Up to N most recent scores, oldest first
  GET  /api/v1/esg/config   - Emission factors, benchmarks and weights in force
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Query, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.config import settings
from app.core.dependencies import get_current_user, get_esg_calculator, get_esg_service
from app.core.exceptions import ESGValidationException, RepositoryException
from app.models.esg import ESGRecord, SubmitResponse, TrendPoint
from app.scoring.esg_calculator import ESGCalculator
from app.services.esg_service import ESGService

logger = logging.getLogger(__name__)

router = APIRouter(prefix=f"{settings.API_V1_PREFIX}/esg", tags=["ESG"])


#  Error helpers


def error_response(status_code: int, error_code: str, message: str, details: Any = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error_code": error_code,
            "message": message,
            "details": details,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


async def esg_validation_exception_handler(request: Request, exc: ESGValidationException):
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        exc.error_code,
        exc.message,
        {"section": exc.section, "field": exc.field},
    )


async def pydantic_validation_exception_handler(request: Request, exc: ValidationError):
    errors = exc.errors()
    err = errors[0] if errors else {}
    field = ".".join(str(part) for part in err.get("loc", ()))
    message = f"Invalid value for '{field}': {err.get('msg', 'invalid')}" if field else "Invalid submission"
    return error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "VALIDATION_ERROR",
        message,
        {"field": field, "type": err.get("type")} if field else None,
    )


async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return error_response(
            status.HTTP_422_UNPROCESSABLE_ENTITY, "VALIDATION_ERROR", "Request validation failed"
        )
    err = errors[0]
    error_type = err.get("type", "")
    if "json_invalid" in error_type:
        return error_response(status.HTTP_400_BAD_REQUEST, "INVALID_REQUEST", "Malformed JSON request body")
    field = ".".join(str(part) for part in err.get("loc", []) if part != "body")
    message = f"Field '{field}': {err.get('msg', 'invalid')}" if field else err.get("msg", "Invalid request")
    return error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "VALIDATION_ERROR",
        message,
        {"field": field, "type": error_type} if field else None,
    )


async def repository_exception_handler(request: Request, exc: RepositoryException):
    logger.error(f"Storage failure on {request.url.path}: {exc}")
    return error_response(
        status.HTTP_503_SERVICE_UNAVAILABLE,
        "STORAGE_UNAVAILABLE",
        "ESG record storage is unavailable",
    )


#  Endpoints


@router.post(
    "/submit",
    response_model=SubmitResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit ESG data and compute scores",
)
def submit_esg(
    payload: Dict[str, Any] = Body(...),
    user_id: str = Depends(get_current_user),
    service: ESGService = Depends(get_esg_service),
) -> SubmitResponse:
    record = service.submit(user_id, payload)
    scores = record.to_scores()
    return SubmitResponse(id=record.id, scores=scores, ratings=scores.ratings())


@router.get("/latest", response_model=ESGRecord, summary="Latest ESG record for the submitter")
def get_latest_esg(
    user_id: str = Depends(get_current_user),
    service: ESGService = Depends(get_esg_service),
):
    record = service.get_latest(user_id)
    if record is None:
        return error_response(status.HTTP_404_NOT_FOUND, "NOT_FOUND", "No ESG data found")
    return record


@router.get("/trend", response_model=List[TrendPoint], summary="ESG score history, oldest first")
def get_esg_trend(
    limit: int = Query(default=settings.TREND_DEFAULT_LIMIT, ge=1, le=settings.TREND_MAX_LIMIT),
    user_id: str = Depends(get_current_user),
    service: ESGService = Depends(get_esg_service),
) -> List[TrendPoint]:
    return service.get_trend(user_id, limit)


@router.get("/config", summary="Scoring constants in force")
def get_scoring_config(calculator: ESGCalculator = Depends(get_esg_calculator)) -> Dict[str, Any]:
    config = calculator.config
    return jsonable_encoder({
        **config.to_dict(),
        "weight_totals": {
            "environmental": round(config.environmental_weights.total(), 4),
            "social": round(config.social_weights.total(), 4),
            "governance": round(config.governance_weights.total(), 4),
            "overall": round(config.overall_weights.total(), 4),
        },
    })

