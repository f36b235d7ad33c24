from fastapi import APIRouter, Response, status

from prop_konverter.api.schemas import HealthResponse, ReadinessResponse
from prop_konverter.core.defaults import parser_ready

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse()


@router.get("/healthz/live", response_model=HealthResponse)
async def liveness() -> HealthResponse:
    return HealthResponse()


@router.get("/healthz/ready", response_model=ReadinessResponse)
async def readiness(response: Response) -> ReadinessResponse:
    """Readiness probe: can the TypeScript grammar be loaded?"""
    if parser_ready():
        return ReadinessResponse(status="ok", parser="up")
    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ReadinessResponse(status="degraded", parser="down")
