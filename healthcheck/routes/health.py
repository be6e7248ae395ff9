"""Health check endpoints."""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from healthcheck.core.health_reporter import HealthReporter
from healthcheck.schemas.health import StatusResponse

router = APIRouter(prefix="/health", tags=["health"])


def get_health_reporter(request: Request) -> HealthReporter:
    """Get the HealthReporter created at application startup."""
    return request.app.state.health_reporter


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=StatusResponse,
    response_model_exclude_none=True,
    summary="Health check",
    description="Returns health status of the API",
)
async def health_check(
    reporter: HealthReporter = Depends(get_health_reporter),
) -> JSONResponse:
    """Liveness check endpoint."""
    result = reporter.liveness()
    return JSONResponse(status_code=result.http_status, content=result.to_body())


@router.get(
    "/ready",
    status_code=status.HTTP_200_OK,
    response_model=StatusResponse,
    response_model_exclude_none=True,
    summary="Readiness check",
    description="Returns readiness status of the API including database connectivity",
    responses={
        status.HTTP_503_SERVICE_UNAVAILABLE: {
            "model": StatusResponse,
            "description": "Database is unreachable",
        },
    },
)
async def readiness_check(
    reporter: HealthReporter = Depends(get_health_reporter),
) -> JSONResponse:
    """Readiness check endpoint."""
    result = await reporter.readiness()
    return JSONResponse(status_code=result.http_status, content=result.to_body())
