"""Dealer Checkout Validation - Main FastAPI Application

This module creates and configures the FastAPI application, including:
- Validation and assignment API routers
- Middleware (request ID correlation, CORS)
- Exception handlers
- Health and metrics endpoints
"""

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .api.v1.assignments.router import router as assignments_router
from .api.v1.validation.router import router as validation_router
from .config import get_settings
from .observability.logging_config import configure_logging
from .observability.middleware import RequestIDMiddleware
from .observability.router import router as observability_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings = get_settings()
    logger.info("Dealer checkout validation API starting up...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Debug mode: {settings.DEBUG}")
    logger.info(f"Dealer assignment required: {settings.REQUIRE_DEALER_ASSIGNMENT}")

    yield

    logger.info("Dealer checkout validation API shutting down...")


def create_app() -> FastAPI:
    """Application factory.

    Configures logging from settings and wires middleware, exception
    handlers and routers.
    """
    settings = get_settings()
    # Debug mode also lowers the log level
    log_level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL
    configure_logging(level=log_level, json_format=settings.LOG_JSON)

    docs_enabled = settings.ENVIRONMENT != "production"
    app = FastAPI(
        title="Dealer Checkout Validation API",
        description="Dealer assignment validation for checkout",
        version=__version__,
        debug=settings.DEBUG,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
    )

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    # Added last so it runs first
    app.add_middleware(RequestIDMiddleware)

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request body schema errors with field-level details."""
        logger.warning(f"Request validation error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "error": "validation_error",
                "message": "Request validation failed",
                "details": jsonable_errors(exc),
            },
        )

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(observability_router)
    app.include_router(validation_router, prefix="/api/v1")
    app.include_router(assignments_router, prefix="/api/v1")

    @app.get("/", include_in_schema=False)
    async def root() -> dict[str, Any]:
        return {
            "name": "Dealer Checkout Validation API",
            "version": __version__,
            "status": "running",
        }

    return app


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Strip non-serializable context from pydantic error entries."""
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "dealer_checkout.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.ENVIRONMENT == "development",
        log_level=settings.LOG_LEVEL.lower(),
    )
