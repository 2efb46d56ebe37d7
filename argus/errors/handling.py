from __future__ import annotations

from ..logging_config import log_structured_error
from .eventsub import EventSubError, SubscriptionError
from .internal import ConfigError, InternalError, NetworkError


def classify_error(error: Exception) -> str:
    """Return the structured-log category for ``error``."""
    if isinstance(error, NetworkError | OSError | ConnectionError):
        return "network"
    if isinstance(error, SubscriptionError):
        return "subscription"
    if isinstance(error, EventSubError):
        return "eventsub"
    if isinstance(error, ConfigError):
        return "config"
    if isinstance(error, InternalError):
        return "internal"
    return "unknown"


def log_error(message: str, error: Exception, context: dict | None = None) -> None:
    """Logs an error message with the associated exception details.

    Args:
        message: A descriptive message about the error context.
        error: The exception instance to be logged.
        context: Optional additional context data for debugging.
    """
    log_structured_error(
        error_type=classify_error(error),
        message=f"{message}: {str(error)}",
        exception=error,
        context=context,
    )
