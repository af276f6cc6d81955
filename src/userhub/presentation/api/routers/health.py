"""Health check endpoints."""

from fastapi import APIRouter

from userhub import __version__
from userhub.presentation.api.dependencies import AppSettings
from userhub.presentation.api.schemas import ApiResponse, HealthResponse

router = APIRouter()


def build_health_response(service_name: str) -> ApiResponse[HealthResponse]:
    return ApiResponse(
        data=HealthResponse(
            status="healthy",
            service=service_name,
            version=__version__,
        ),
    )


@router.get("", summary="Service health")
async def health_check(settings: AppSettings) -> ApiResponse[HealthResponse]:
    """Return service status and version info."""
    return build_health_response(settings.app_name)
