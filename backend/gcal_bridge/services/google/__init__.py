"""
Google Services - OAuth flow, credential slot and Calendar operations
"""
from .auth import (
    AuthenticationGate,
    AuthorizationFlow,
    CredentialStore,
    default_flow_factory,
    load_client_config,
)
from .calendar import REMINDER_POLICY, CalendarOperations, build_calendar_service

__all__ = [
    "AuthenticationGate",
    "AuthorizationFlow",
    "CredentialStore",
    "default_flow_factory",
    "load_client_config",
    "REMINDER_POLICY",
    "CalendarOperations",
    "build_calendar_service",
]
