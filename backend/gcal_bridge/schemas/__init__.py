"""Pydantic schemas for API models"""
from .calendar import Attendee, CalendarItem, EventDraft, FreeBusyQuery
from .google import GoogleAuthStatus
from .results import JsonResult, OperationResult, RedirectResult, TextResult

__all__ = [
    # Calendar
    "Attendee",
    "CalendarItem",
    "EventDraft",
    "FreeBusyQuery",
    # Google
    "GoogleAuthStatus",
    # Results
    "JsonResult",
    "OperationResult",
    "RedirectResult",
    "TextResult",
]
