"""
Google Calendar Bridge API

Architecture:
- Single identity: one in-memory Google token set per process
- Shared operations layer (services/gateway.py) behind two transports:
  plain HTTP routes and a named-action service path

Flow:
1. /auth/google → consent screen → /auth/google/callback stores tokens
2. /calendar/freebusy and /calendar/events call Google Calendar with them
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load environment variables
load_dotenv()

from gcal_bridge.api.responses import register_exception_handlers
from gcal_bridge.api.router import build_api_router
from gcal_bridge.config import Settings, settings as default_settings
from gcal_bridge.core.logging import setup_logging
from gcal_bridge.services.gateway import CalendarGateway
from gcal_bridge.services.google import (
    AuthenticationGate,
    AuthorizationFlow,
    CalendarOperations,
    CredentialStore,
)
from gcal_bridge.services.google.auth import FlowFactory
from gcal_bridge.services.google.calendar import ServiceFactory

setup_logging(default_settings.log_level)
logger = logging.getLogger(__name__)

APP_TITLE = "Google Calendar Bridge API"
APP_VERSION = "1.0.0"


def create_app(
    settings: Optional[Settings] = None,
    flow_factory: Optional[FlowFactory] = None,
    service_factory: Optional[ServiceFactory] = None,
) -> FastAPI:
    """Wire the credential store, OAuth flow and calendar operations into an app"""
    settings = settings or default_settings

    store = CredentialStore()
    gateway = CalendarGateway(
        flow=AuthorizationFlow(settings, store, flow_factory=flow_factory),
        gate=AuthenticationGate(store),
        calendar=CalendarOperations(settings, service_factory=service_factory),
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        base_url = f"http://{settings.host}:{settings.port}"
        logger.info("🚀 Server is running on %s", base_url)
        logger.info("🔑 To authenticate, visit: %s/auth/google", base_url)
        logger.info("🧩 Action service mounted at %s", settings.action_service_path)
        yield

    app = FastAPI(
        title=APP_TITLE,
        version=APP_VERSION,
        description="Google OAuth2 login plus free/busy queries and event creation",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.gateway = gateway

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(build_api_router(settings))

    return app


app = create_app()


def run() -> None:
    """Console entry point - serve the module-level app with uvicorn"""
    import uvicorn

    uvicorn.run(
        "gcal_bridge.main:app",
        host=default_settings.host,
        port=default_settings.port,
        log_level=default_settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
