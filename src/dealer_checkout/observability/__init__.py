"""Observability module.

Provides structured logging, metrics, request correlation and health checks.
"""

from .logging_config import (
    configure_logging,
    generate_request_id,
    get_logger,
    get_request_id,
    request_id_var,
    set_request_id,
)
from .metrics import (
    validation_duration_seconds,
    validation_issues_total,
    validation_runs_total,
)
from .health import ComponentHealth, HealthStatus, check_reference_data_health
from .middleware import RequestIDMiddleware

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    # Request ID
    "request_id_var",
    "get_request_id",
    "set_request_id",
    "generate_request_id",
    # Metrics
    "validation_runs_total",
    "validation_issues_total",
    "validation_duration_seconds",
    # Health
    "HealthStatus",
    "ComponentHealth",
    "check_reference_data_health",
    # Middleware
    "RequestIDMiddleware",
]
