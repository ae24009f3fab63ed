"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.exceptions import StorageError
from .models.errors import ErrorResponse, ValidationErrorResponse
from .routes import health
from modules.auth.routes import router as auth_router
from modules.accounts.routes import router as accounts_router
from modules.marketplace.routes import router as marketplace_router
from modules.collections.routes import router as collections_router

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    configure_logging(settings.log_level)
    if not settings.jwt_secret:
        logger.warning("RECYCLEME_JWT_SECRET is not set; logins and protected routes will fail")
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    yield
    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Return request schema failures as 400."""
    body = ValidationErrorResponse(detail=jsonable_encoder(exc.errors()))
    return JSONResponse(status_code=400, content=body.model_dump())


async def storage_exception_handler(request: Request, exc: StorageError) -> JSONResponse:
    """Log the storage failure and hide it behind a generic 500."""
    logger.exception(f"Storage failure during {exc.operation} on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(detail="Internal server error").model_dump(exclude_none=True),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort for anything a route did not handle."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(detail="Internal server error").model_dump(exclude_none=True),
    )


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Recycling rewards: deposits earn points, points buy partner offers",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Error handlers
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StorageError, storage_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(auth_router, prefix="/auth", tags=["auth"])
    app.include_router(accounts_router, tags=["accounts"])
    app.include_router(marketplace_router, prefix="/market", tags=["marketplace"])
    app.include_router(collections_router, prefix="/transactions", tags=["collections"])

    return app


# Application instance for uvicorn
app = create_app()
