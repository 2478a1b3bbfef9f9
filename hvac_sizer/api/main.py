"""
FastAPI Application Setup

Main entry point for the HVAC Sizer API application.

Responsibility:
    - FastAPI app initialization
    - Router registration (recommendations, equipment)
    - CORS middleware configuration
    - Global exception handlers
    - Request logging middleware
    - Health check endpoint

Architecture Notes:
    - Part of API Layer (Presentation)
    - Entry point for HTTP server (uvicorn)
    - Centralizes cross-cutting concerns (logging, CORS, error handling)
    - No business logic - pure HTTP orchestration

Configuration (environment, .env loaded with python-dotenv):
    - LOG_LEVEL: logging level (default INFO)
    - EQUIPMENT_CATALOG_PATH: catalog file (default: bundled sample catalog)
"""

import logging
import os
import time

from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from hvac_sizer import __version__
from hvac_sizer.api.routers import equipment_router, recommendations_router
from hvac_sizer.api.schemas.common import ErrorResponse
from hvac_sizer.domain.shared.exceptions import (
    CatalogLoadError,
    DomainException,
    EquipmentNotFoundError,
    UnsupportedCatalogFormatError,
)

load_dotenv()

# Configure logger
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# ============================================================================
# RESPONSE MODELS
# ============================================================================


class HealthCheckResponse(BaseModel):
    """
    Health check response model.

    Attributes:
        status: Health status (always "ok" if endpoint responds)
        version: Package version
        timestamp: Unix timestamp of health check
    """

    status: str = "ok"
    version: str = __version__
    timestamp: float


# ============================================================================
# MIDDLEWARE
# ============================================================================


async def request_logging_middleware(request: Request, call_next):
    """
    Request logging middleware.

    Logs all incoming requests with method, path, status code, and duration.

    Logging Format:
        INFO: "Incoming request: POST /api/recommendations/calculate"
        INFO: "Request completed: POST /api/recommendations/calculate - 200 - 0.012s"
    """
    logger.info(f"Incoming request: {request.method} {request.url.path}")

    start_time = time.time()
    response = await call_next(request)
    duration = time.time() - start_time

    logger.info(
        f"Request completed: {request.method} {request.url.path} - "
        f"{response.status_code} - {duration:.3f}s"
    )

    return response


# ============================================================================
# EXCEPTION HANDLERS
# ============================================================================


async def domain_exception_handler(request: Request, exc: DomainException):
    """
    Global exception handler for domain layer exceptions.

    Mapping:
        - EquipmentNotFoundError -> 404 Not Found
        - CatalogLoadError -> 500 Internal Server Error
        - UnsupportedCatalogFormatError -> 500 Internal Server Error
        - Other DomainException -> 400 Bad Request

    Returns:
        JSONResponse with ErrorResponse format and appropriate status code
    """
    details = {"exception_type": exc.__class__.__name__}

    if isinstance(exc, EquipmentNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
        error_code = "EQUIPMENT_NOT_FOUND"
        details["equipment_id"] = exc.equipment_id
    elif isinstance(exc, (CatalogLoadError, UnsupportedCatalogFormatError)):
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        error_code = "CATALOG_UNAVAILABLE"
    else:
        # All other domain exceptions -> 400 Bad Request
        status_code = status.HTTP_400_BAD_REQUEST
        error_code = exc.__class__.__name__.replace("Error", "").upper()

    error_response = ErrorResponse(
        code=error_code,
        message=str(exc),
        details=details,
    )

    logger.warning(
        f"Domain exception: {exc.__class__.__name__} - {str(exc)} - "
        f"Request: {request.method} {request.url.path}"
    )

    return JSONResponse(
        status_code=status_code,
        content=error_response.model_dump(),
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler for unexpected exceptions.

    Catches all unhandled exceptions and converts to 500 Internal Server Error.
    Logs full stack trace for debugging.
    """
    error_response = ErrorResponse(
        code="INTERNAL_SERVER_ERROR",
        message="An unexpected error occurred",
        details={"error": str(exc), "type": exc.__class__.__name__},
    )

    logger.error(
        f"Unexpected error: {exc.__class__.__name__} - {str(exc)} - "
        f"Request: {request.method} {request.url.path}",
        exc_info=True,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response.model_dump(),
    )


# ============================================================================
# APP FACTORY
# ============================================================================


def create_app() -> FastAPI:
    """
    FastAPI application factory.

    Configuration:
        - CORS: Allow all origins (development mode)
        - Routers: /api/recommendations, /api/equipment
        - Health: GET /health

    Usage:
        >>> app = create_app()
        >>> # Run with uvicorn:
        >>> # uvicorn hvac_sizer.api.main:app --reload
    """
    app = FastAPI(
        title="HVAC Sizer API",
        version=__version__,
        description=(
            "Residential HVAC equipment sizing. Submit Manual J design loads and "
            "preferences, get catalog equipment ranked by how well it fits."
        ),
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Add CORS middleware (allow all origins for development)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Production: restrict to specific origins
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.middleware("http")(request_logging_middleware)

    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # Register routers with /api prefix
    app.include_router(recommendations_router, prefix="/api")
    app.include_router(equipment_router, prefix="/api")

    @app.get(
        "/health",
        response_model=HealthCheckResponse,
        status_code=status.HTTP_200_OK,
        summary="Health check endpoint",
        description="Simple health check for monitoring and load balancers",
        tags=["health"],
    )
    async def health_check() -> HealthCheckResponse:
        return HealthCheckResponse(
            status="ok",
            version=__version__,
            timestamp=time.time(),
        )

    logger.info("FastAPI application created successfully")
    logger.info("Registered routers: /api/recommendations, /api/equipment")

    return app


# ============================================================================
# APP INSTANCE (for uvicorn)
# ============================================================================

# Usage: uvicorn hvac_sizer.api.main:app --reload
app = create_app()
