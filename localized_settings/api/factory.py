"""
API Factory

Centralized API setup with middleware, CORS, and monitoring configuration.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from localized_settings.api.errors import register_exception_handlers
from localized_settings.api.middleware import (
    LocaleMiddleware,
    RequestIDMiddleware,
    RequestLoggingMiddleware,
)
from localized_settings.api.router import router
from localized_settings.core.config import settings
from localized_settings.core.logger import get_logger
from localized_settings.stores.database import create_tables, dispose_engine

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Ensure the settings table exists on startup; release connections on shutdown."""
    create_tables()
    yield
    dispose_engine()


def setup_cors(app: FastAPI) -> None:
    """
    Setup CORS middleware with configurable origins.

    Args:
        app: FastAPI application instance
    """
    cors_origins = settings.cors_allow_origins_list

    if cors_origins and cors_origins != [""]:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=settings.cors__allow_credentials,
            allow_methods=settings.cors_allow_methods_list,
            allow_headers=settings.cors_allow_headers_list,
        )
        logger.info("CORS middleware configured for origins: %s", cors_origins)
    else:
        logger.info("CORS middleware skipped (no origins configured)")


def setup_request_middleware(app: FastAPI) -> None:
    """
    Setup locale, request logging and ID middleware.

    Args:
        app: FastAPI application instance
    """
    # Last added runs first: request ID, then logging, then locale
    app.add_middleware(LocaleMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    logger.info("Request ID, logging and locale middleware configured")


def setup_logfire_instrumentation(app: FastAPI) -> None:
    """
    Setup Logfire configuration and instrumentation.

    Args:
        app: FastAPI application instance
    """
    from localized_settings.core.logfire_config import initialize_logfire

    results = initialize_logfire(app)
    if results["configured"]:
        enabled = [
            name for name, on in results["instrumentation"].items() if on
        ]
        logger.info(
            "Logfire instrumentation enabled for: %s", ", ".join(enabled) or "none"
        )
    else:
        logger.debug("Logfire initialization skipped (disabled)")


def create_api(
    title: str = "localized-settings API",
    description: str = "Localized key-value settings",
    version: str = "1.0.0",
    docs_url: str = "/docs",
    redoc_url: str = "/redoc",
    enable_cors: bool = True,
    mount_prefix: str = "/api",
) -> FastAPI:
    """
    Create and configure FastAPI application with all middleware.

    Args:
        title: API title
        description: API description
        version: API version
        docs_url: URL path for API documentation (Swagger UI)
        redoc_url: URL path for ReDoc documentation
        enable_cors: Whether to enable CORS middleware
        mount_prefix: Prefix for mounting the API router

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=title,
        description=description,
        version=version,
        docs_url=docs_url,
        redoc_url=redoc_url,
        debug=settings.debug,
        lifespan=lifespan,
    )

    if enable_cors:
        setup_cors(app)

    setup_request_middleware(app)

    register_exception_handlers(app)
    logger.info("Global exception handlers configured")

    setup_logfire_instrumentation(app)

    app.include_router(router, prefix=mount_prefix)

    logger.info("API factory created: %s v%s", title, version)
    return app
