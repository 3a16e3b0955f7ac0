"""Health check utilities.

Reports whether the dealer reference data the validator depends on is
reachable.
"""

import time
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..domain.dealers.ports import ReferenceDataProvider
from .logging_config import get_logger

logger = get_logger(__name__)


class HealthStatus(str, Enum):
    """Health check status enum."""
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    DEGRADED = "degraded"


@dataclass
class ComponentHealth:
    """Health status for a single component."""
    status: HealthStatus
    message: Optional[str] = None
    latency_ms: Optional[float] = None


def check_reference_data_health(reference_data: ReferenceDataProvider) -> ComponentHealth:
    """Check that the dealer directory answers and is not empty.

    Args:
        reference_data: Dealer directory in use

    Returns:
        ComponentHealth: HEALTHY with dealer count, DEGRADED if the directory
        is empty, UNHEALTHY if it raises
    """
    try:
        start = time.perf_counter()
        count = len(list(reference_data.dealer_ids()))
        latency_ms = (time.perf_counter() - start) * 1000
    except Exception as e:
        logger.error(f"Reference data health check failed: {e}", exc_info=True)
        return ComponentHealth(
            status=HealthStatus.UNHEALTHY,
            message=f"Reference data unavailable: {e}",
        )

    if count == 0:
        return ComponentHealth(
            status=HealthStatus.DEGRADED,
            message="Dealer directory is empty",
            latency_ms=round(latency_ms, 2),
        )

    return ComponentHealth(
        status=HealthStatus.HEALTHY,
        message=f"{count} dealers available",
        latency_ms=round(latency_ms, 2),
    )
