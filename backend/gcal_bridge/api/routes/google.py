"""
Google OAuth endpoints
"""
from typing import Optional

from fastapi import APIRouter, Depends

from gcal_bridge.api.deps import get_gateway
from gcal_bridge.api.responses import render
from gcal_bridge.services.gateway import CalendarGateway

router = APIRouter()


@router.get("")
def google_auth_begin(gateway: CalendarGateway = Depends(get_gateway)):
    """
    Start the OAuth flow.
    Redirects the browser to Google's consent screen (offline access).
    """
    return render(gateway.begin_authorization())


@router.get("/callback")
def google_auth_callback(
    code: Optional[str] = None,
    gateway: CalendarGateway = Depends(get_gateway),
):
    """
    Handle Google OAuth callback.
    Exchanges the code for tokens and keeps them for subsequent calendar calls.
    """
    return render(gateway.complete_authorization(code))


@router.get("/status")
def google_auth_status(gateway: CalendarGateway = Depends(get_gateway)):
    """Whether a token set is currently held (token values are never returned)"""
    return render(gateway.authorization_status())
