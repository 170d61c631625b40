"""
Main API Router - Combines all route modules
"""
from fastapi import APIRouter

from gcal_bridge.config import Settings

from .routes import actions, calendar, google, health


def build_api_router(settings: Settings) -> APIRouter:
    api_router = APIRouter()

    # Plain HTTP binding
    api_router.include_router(health.router, tags=["Health"])
    api_router.include_router(google.router, prefix="/auth/google", tags=["Google"])
    api_router.include_router(calendar.router, prefix="/calendar", tags=["Calendar"])

    # Named-action binding
    api_router.include_router(actions.router, prefix=settings.action_service_path, tags=["Actions"])

    return api_router
