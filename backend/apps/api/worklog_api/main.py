"""
Worklog API - FastAPI application entry point.

This module initializes the FastAPI application and configures
middleware, routers, and lifecycle events.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from worklog_core import get_logger, init_logging

from .config import settings
from .routers import entries, users

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifecycle manager.

    Handles startup and shutdown events for the application.

    Args:
        app: The FastAPI application instance.

    Yields:
        None during application runtime.
    """
    # Startup: Initialize resources
    from worklog_database.session import close_database, init_database

    logger.info("Starting Worklog API", extra={"version": settings.version})
    init_database(settings.database_url, echo=settings.database_echo)

    yield

    # Shutdown: Cleanup resources
    await close_database()
    logger.info("Shutting down Worklog API")


def create_app() -> FastAPI:
    """
    Build a configured FastAPI application.

    Returns:
        Application with middleware and routers registered.
    """
    init_logging(settings.log_level, settings.log_format)

    app = FastAPI(
        title=settings.app_name,
        description="Worklog - Multi-user work journal API",
        version=settings.version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register API routers
    app.include_router(users.router, prefix="/api/users", tags=["Users"])
    app.include_router(entries.router, prefix="/api/entries", tags=["Entries"])

    @app.get("/api/health")
    async def health_check() -> dict[str, str]:
        """
        Health check endpoint.

        Returns:
            Dictionary containing service status and version.
        """
        return {"status": "healthy", "version": settings.version}

    return app


app = create_app()
