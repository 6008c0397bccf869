"""Health check and system endpoints."""

from fastapi import APIRouter

from app import __version__
from app.api.deps import SettingsDep

router = APIRouter()


@router.get("/")
async def root(settings: SettingsDep) -> dict[str, str]:
    """Report that the API is running and in which environment."""
    return {
        "message": f"{settings.app_name} is running",
        "environment": settings.environment,
    }


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint for container orchestration."""
    return {"status": "healthy"}


@router.get("/version")
async def get_version(settings: SettingsDep) -> dict[str, str]:
    """Get API version information."""
    return {
        "version": __version__,
        "environment": settings.environment,
    }
