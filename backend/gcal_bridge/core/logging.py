"""
Logging setup and helpers for provider operations
"""
import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once for the process"""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def log_operation_error(
    logger: logging.Logger,
    operation: str,
    error: BaseException,
    cause: Optional[object] = None,
) -> None:
    """Log a failed operation with its name and, when present, the underlying error"""
    if cause is not None:
        logger.error("❌ [%s] %s (cause: %r)", operation, error, cause)
    else:
        logger.warning("⚠️ [%s] %s", operation, error)
