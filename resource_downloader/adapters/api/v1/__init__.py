"""API v1 router configuration.
"""

from fastapi import APIRouter

from .downloads import router as downloads_router
from .health import router as health_router

api_router = APIRouter()

api_router.include_router(health_router, prefix="/health", tags=["health"])
api_router.include_router(downloads_router, tags=["downloads"])
