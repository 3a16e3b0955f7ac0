"""Observability API endpoints.

Provides metrics and health checks for monitoring.
"""

from typing import Any

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from ..config import Settings, get_settings
from ..dependencies import get_dealer_directory
from ..domain.dealers.ports import ReferenceDataProvider
from .health import HealthStatus, check_reference_data_health

router = APIRouter(tags=["Observability"])


@router.get("/metrics", include_in_schema=False)
def metrics():
    """Expose Prometheus metrics in text exposition format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


@router.get(
    "/health",
    summary="Health check endpoint",
    description="Returns health status of the dealer reference data",
)
def health_check(
    reference_data: ReferenceDataProvider = Depends(get_dealer_directory),
    settings: Settings = Depends(get_settings),
):
    """Check health of the validator's dependencies.

    Returns:
        200 when reference data is healthy or degraded, 503 when it is
        unavailable
    """
    component = check_reference_data_health(reference_data)

    body: dict[str, Any] = {
        "status": component.status.value,
        "environment": settings.ENVIRONMENT,
        "components": {
            "reference_data": {
                "status": component.status.value,
                "message": component.message,
                "latency_ms": component.latency_ms,
            }
        },
    }

    status_code = (
        status.HTTP_503_SERVICE_UNAVAILABLE
        if component.status == HealthStatus.UNHEALTHY
        else status.HTTP_200_OK
    )
    return JSONResponse(status_code=status_code, content=body)
