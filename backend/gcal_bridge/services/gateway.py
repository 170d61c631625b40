"""
Calendar gateway - the operations both transports share

Every method returns a structured result (redirect, text or JSON) or raises a
ServiceError; turning either into a response is the transport's job.
"""
from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from gcal_bridge.core.errors import CallerInputError
from gcal_bridge.schemas.calendar import EventDraft, FreeBusyQuery
from gcal_bridge.schemas.results import JsonResult, RedirectResult, TextResult
from gcal_bridge.services.google.auth import AuthenticationGate, AuthorizationFlow
from gcal_bridge.services.google.calendar import CalendarOperations

ModelT = TypeVar("ModelT", bound=BaseModel)

AUTH_SUCCESS_MESSAGE = "Authentication successful! You can now use the API endpoints."
FREEBUSY_INPUT_MESSAGE = 'Invalid request body. "items" array is required.'
EVENT_INPUT_MESSAGE = "Missing required event fields: summary, start, end."


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err["loc"]) or "body"
        parts.append(f"{location}: {err['msg']}")
    return "; ".join(parts)


def parse_payload(model: Type[ModelT], payload: Any, message: str, operation: str) -> ModelT:
    """Validate a request body, turning any problem into a CallerInputError"""
    if not isinstance(payload, dict):
        raise CallerInputError(message, operation=operation)
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise CallerInputError(f"{message} ({_describe(e)})", operation=operation) from e


class CalendarGateway:
    """Authorization flow plus the two protected calendar operations"""

    def __init__(
        self,
        flow: AuthorizationFlow,
        gate: AuthenticationGate,
        calendar: CalendarOperations,
    ):
        self.flow = flow
        self.gate = gate
        self.calendar = calendar

    # ============== Authorization ==============

    def begin_authorization(self) -> RedirectResult:
        return RedirectResult(url=self.flow.authorization_url())

    def complete_authorization(self, code: Optional[str]) -> TextResult:
        self.flow.exchange_code(code)
        return TextResult(text=AUTH_SUCCESS_MESSAGE)

    def authorization_status(self) -> JsonResult:
        return JsonResult(data=self.flow.status().model_dump())

    # ============== Protected operations ==============

    def check_free_busy(self, payload: Any) -> JsonResult:
        credentials = self.gate.require("check_free_busy")
        query = parse_payload(FreeBusyQuery, payload, FREEBUSY_INPUT_MESSAGE, "check_free_busy")
        calendars = self.calendar.query_free_busy(credentials, query)
        return JsonResult(data=calendars)

    def create_event(self, payload: Any) -> JsonResult:
        credentials = self.gate.require("create_event")
        draft = parse_payload(EventDraft, payload, EVENT_INPUT_MESSAGE, "create_event")
        created_event = self.calendar.create_event(credentials, draft)
        return JsonResult(data=created_event, status_code=201)
