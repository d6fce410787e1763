"""
MensaToday FastAPI Application
Main entry point: logging, middleware, exception handlers and routers.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager

from api.routes import canteens, health, meals
from app.config import settings
from api.middleware import (
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    service_validation_exception_handler,
    upstream_unavailable_exception_handler,
    general_exception_handler,
)
from app.exceptions import ServiceValidationError, UpstreamUnavailableError

# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("mensatoday.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and shutdown; the service holds no connections to open or close."""
    _logger.info(
        "Starting %s in %s mode (upstream=%s, timeout=%ss)",
        settings.app_name,
        settings.environment.value,
        settings.eat_api_base_url,
        settings.upstream_timeout_sec,
    )
    try:
        yield
    finally:
        _logger.info("Shutting down %s", settings.app_name)


app = FastAPI(
    title=settings.api_title,
    version=settings.app_version,
    description=settings.api_description,
    lifespan=lifespan,
    debug=settings.debug,
    openapi_url=(
        f"{settings.api_prefix}/openapi.json" if not settings.is_production() else None
    ),
    docs_url=f"{settings.api_prefix}/docs" if not settings.is_production() else None,
    redoc_url=f"{settings.api_prefix}/redoc" if not settings.is_production() else None,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add request logging middleware
app.add_middleware(RequestLoggingMiddleware)

# Register exception handlers
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(ServiceValidationError, service_validation_exception_handler)
app.add_exception_handler(UpstreamUnavailableError, upstream_unavailable_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Include routers
app.include_router(health.router, prefix=settings.api_prefix)
app.include_router(canteens.router, prefix=settings.api_prefix)
app.include_router(meals.router, prefix=settings.api_prefix)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
