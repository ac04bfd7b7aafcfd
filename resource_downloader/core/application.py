"""Application factory for creating and configuring the FastAPI application.

This module provides a factory function to create a properly configured FastAPI
application with exception handlers and routers registered.
"""

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from resource_downloader.adapters.api.v1 import api_router
from resource_downloader.core.config.settings import settings
from resource_downloader.core.handlers import register_exception_handlers
from resource_downloader.core.lifecycle import create_lifespan_manager


def create_application() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Per-user download limit enforcement.",
        lifespan=create_lifespan_manager(),
        default_response_class=JSONResponse,
    )

    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api/v1")

    return app
