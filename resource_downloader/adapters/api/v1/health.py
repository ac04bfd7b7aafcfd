from fastapi import APIRouter, Request

from resource_downloader.adapters.api.v1.schemas import HealthResponse
from resource_downloader.core.config.settings import settings
from resource_downloader.infrastructure.redis import check_redis_health

router = APIRouter()


@router.get("", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """
    Health check endpoint reporting the state of the cache backend.
    """
    services = {}
    if settings.CACHE_BACKEND == "redis":
        services["redis"] = await check_redis_health(request.app.state.redis)
    else:
        services["memory"] = {"status": "healthy"}

    healthy = all(service["status"] == "healthy" for service in services.values())
    return HealthResponse(
        status="ok" if healthy else "degraded",
        env=settings.APP_ENV,
        services=services,
    )
