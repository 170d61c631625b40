"""Core utilities"""
from .datetime_utils import default_window, to_rfc3339, utc_now
from .errors import (
    CallerInputError,
    ConfigurationError,
    ProviderError,
    ServiceError,
    UnauthenticatedError,
    UnknownActionError,
)
from .logging import log_operation_error, setup_logging

__all__ = [
    "default_window",
    "to_rfc3339",
    "utc_now",
    "CallerInputError",
    "ConfigurationError",
    "ProviderError",
    "ServiceError",
    "UnauthenticatedError",
    "UnknownActionError",
    "log_operation_error",
    "setup_logging",
]
