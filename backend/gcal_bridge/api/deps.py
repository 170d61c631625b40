"""
Request dependencies
"""
from fastapi import Request

from gcal_bridge.services.gateway import CalendarGateway


def get_gateway(request: Request) -> CalendarGateway:
    """The gateway create_app attached to this application"""
    return request.app.state.gateway
