"""
Service errors - each carries the HTTP status the transports render it with
"""
from typing import Optional


class ServiceError(Exception):
    """Base error for everything an operation can fail with"""

    status_code = 500
    default_message = "Internal server error."

    def __init__(self, message: Optional[str] = None, operation: Optional[str] = None):
        self.message = message or self.default_message
        self.operation = operation
        super().__init__(self.message)


class CallerInputError(ServiceError):
    """Missing or malformed request fields"""

    status_code = 400
    default_message = "Invalid request."


class UnauthenticatedError(ServiceError):
    """Protected operation attempted before any token exchange"""

    status_code = 401
    default_message = "Unauthorized. Please authenticate by visiting /auth/google"


class UnknownActionError(ServiceError):
    status_code = 404
    default_message = "Unknown action."


class ProviderError(ServiceError):
    """Any failure reported by (or while talking to) Google"""

    status_code = 500
    default_message = "The calendar provider returned an error."


class ConfigurationError(ServiceError):
    status_code = 500
    default_message = (
        "Google OAuth not configured. Check GOOGLE_CLIENT_ID and GOOGLE_CLIENT_SECRET."
    )
