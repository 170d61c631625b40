"""
Calendar endpoints - require a completed OAuth flow
"""
from typing import Any

from fastapi import APIRouter, Body, Depends

from gcal_bridge.api.deps import get_gateway
from gcal_bridge.api.responses import render
from gcal_bridge.services.gateway import CalendarGateway

router = APIRouter()


@router.post("/freebusy")
def freebusy_endpoint(
    payload: Any = Body(None),
    gateway: CalendarGateway = Depends(get_gateway),
):
    """
    Check the free/busy status of calendars.
    Body: {"items": [{"id": "user1@example.com"}], "timeMin": ..., "timeMax": ...}
    The time range defaults to the next 7 days.
    """
    return render(gateway.check_free_busy(payload))


@router.post("/events")
def create_event_endpoint(
    payload: Any = Body(None),
    gateway: CalendarGateway = Depends(get_gateway),
):
    """
    Create an event in the user's primary calendar and notify attendees.
    Body: {"summary", "description", "start", "end", "attendees": [{"email"}]}
    """
    return render(gateway.create_event(payload))
