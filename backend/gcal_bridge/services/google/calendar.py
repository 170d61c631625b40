"""
Google Calendar operations - free/busy query and event creation
"""
import logging
from typing import Any, Callable, Dict, Optional

from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from gcal_bridge.config import Settings
from gcal_bridge.core.datetime_utils import default_window, to_rfc3339
from gcal_bridge.core.errors import ProviderError
from gcal_bridge.core.logging import log_operation_error
from gcal_bridge.schemas.calendar import EventDraft, FreeBusyQuery

logger = logging.getLogger(__name__)

PRIMARY_CALENDAR = "primary"

REMINDER_POLICY = {
    "useDefault": False,
    "overrides": [
        {"method": "email", "minutes": 24 * 60},
        {"method": "popup", "minutes": 10},
    ],
}

ServiceFactory = Callable[[Credentials], Any]


def build_calendar_service(credentials: Credentials) -> Any:
    """Calendar v3 client bound to the given credentials"""
    return build("calendar", "v3", credentials=credentials, cache_discovery=False)


def _provider_failure(operation: str, message: str, exc: Exception) -> ProviderError:
    cause = f"Google Calendar API Error: {exc.resp.status}" if isinstance(exc, HttpError) else exc
    error = ProviderError(message, operation=operation)
    log_operation_error(logger, operation, error, cause=cause)
    return error


class CalendarOperations:
    """Delegated calls against the authenticated user's calendars"""

    def __init__(self, settings: Settings, service_factory: Optional[ServiceFactory] = None):
        self._settings = settings
        self._service_factory = service_factory or build_calendar_service

    def query_free_busy(self, credentials: Credentials, query: FreeBusyQuery) -> Dict[str, Any]:
        """
        Query busy intervals for every requested calendar in one round trip.

        Returns the provider's per-calendar mapping unchanged.
        """
        time_min, time_max = default_window(
            query.time_min, query.time_max, self._settings.freebusy_window_days
        )
        body = {
            "timeMin": to_rfc3339(time_min),
            "timeMax": to_rfc3339(time_max),
            "items": [item.model_dump() for item in query.items],
        }

        try:
            service = self._service_factory(credentials)
            response = service.freebusy().query(body=body).execute()
        except Exception as e:
            raise _provider_failure("check_free_busy", "Failed to query free/busy status.", e) from e

        calendars = response.get("calendars") if isinstance(response, dict) else None
        if not isinstance(calendars, dict):
            error = ProviderError("Failed to query free/busy status.", operation="check_free_busy")
            log_operation_error(logger, "check_free_busy", error, cause="response has no 'calendars' mapping")
            raise error

        logger.info("📅 Free/busy queried for %d calendar(s)", len(body["items"]))
        return calendars

    def build_event_body(self, draft: EventDraft) -> Dict[str, Any]:
        """Provider-native event with the fixed reminder policy and display timezone"""
        tz_name = self._settings.event_timezone
        return {
            "summary": draft.summary,
            "description": draft.description,
            "start": {
                "dateTime": to_rfc3339(draft.start),
                "timeZone": tz_name,
            },
            "end": {
                "dateTime": to_rfc3339(draft.end),
                "timeZone": tz_name,
            },
            "attendees": [attendee.model_dump() for attendee in draft.attendees],
            "reminders": {
                "useDefault": REMINDER_POLICY["useDefault"],
                "overrides": [dict(rule) for rule in REMINDER_POLICY["overrides"]],
            },
        }

    def create_event(self, credentials: Credentials, draft: EventDraft) -> Dict[str, Any]:
        """Insert the event into the primary calendar and notify attendees"""
        event = self.build_event_body(draft)

        try:
            service = self._service_factory(credentials)
            created_event = service.events().insert(
                calendarId=PRIMARY_CALENDAR,
                body=event,
                sendUpdates="all",
            ).execute()
        except Exception as e:
            raise _provider_failure("create_event", "Failed to create event.", e) from e

        logger.info("✅ Event created: %s", created_event.get("htmlLink"))
        return created_event
