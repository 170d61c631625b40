"""
Action-service binding

Exposes the same operations as named actions under a single service path,
e.g. GET /odata/v4/calendar/authGoogle or POST /odata/v4/calendar/checkFreeBusy.
Action parameters are the query string merged with the JSON object body.
"""
from typing import Any, Callable, Dict, List

from fastapi import APIRouter, Body, Depends, Request

from gcal_bridge.api.deps import get_gateway
from gcal_bridge.api.responses import render
from gcal_bridge.core.errors import CallerInputError, UnknownActionError
from gcal_bridge.schemas.results import OperationResult, TextResult
from gcal_bridge.services.gateway import CalendarGateway

ActionHandler = Callable[[CalendarGateway, Dict[str, Any]], OperationResult]


class ActionService:
    """Registry of named action handlers"""

    def __init__(self):
        self._handlers: Dict[str, ActionHandler] = {}

    def on(self, name: str) -> Callable[[ActionHandler], ActionHandler]:
        def register(handler: ActionHandler) -> ActionHandler:
            self._handlers[name] = handler
            return handler
        return register

    @property
    def actions(self) -> List[str]:
        return sorted(self._handlers)

    def dispatch(self, name: str, gateway: CalendarGateway, data: Dict[str, Any]) -> OperationResult:
        handler = self._handlers.get(name)
        if handler is None:
            raise UnknownActionError(f"Unknown action '{name}'.", operation=name)
        return handler(gateway, data)


calendar_service = ActionService()


@calendar_service.on("say")
def say(gateway: CalendarGateway, data: Dict[str, Any]) -> OperationResult:
    return TextResult(text="hello")


@calendar_service.on("authGoogle")
def auth_google(gateway: CalendarGateway, data: Dict[str, Any]) -> OperationResult:
    return gateway.begin_authorization()


@calendar_service.on("authGoogleCallback")
def auth_google_callback(gateway: CalendarGateway, data: Dict[str, Any]) -> OperationResult:
    return gateway.complete_authorization(data.get("code"))


@calendar_service.on("authStatus")
def auth_status(gateway: CalendarGateway, data: Dict[str, Any]) -> OperationResult:
    return gateway.authorization_status()


@calendar_service.on("checkFreeBusy")
def check_free_busy(gateway: CalendarGateway, data: Dict[str, Any]) -> OperationResult:
    return gateway.check_free_busy(data)


@calendar_service.on("createEvent")
def create_event(gateway: CalendarGateway, data: Dict[str, Any]) -> OperationResult:
    return gateway.create_event(data)


router = APIRouter()


@router.get("")
def service_document():
    """Actions this service exposes"""
    return {"actions": calendar_service.actions}


@router.api_route("/{action}", methods=["GET", "POST"])
def invoke_action(
    action: str,
    request: Request,
    payload: Any = Body(None),
    gateway: CalendarGateway = Depends(get_gateway),
):
    """Dispatch a named action"""
    if payload is not None and not isinstance(payload, dict):
        raise CallerInputError("Action parameters must be a JSON object.", operation=action)

    data: Dict[str, Any] = dict(request.query_params)
    data.update(payload or {})
    return render(calendar_service.dispatch(action, gateway, data))
