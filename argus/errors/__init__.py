"""Error hierarchy and logging helpers."""

from .chat import ChatConnectionError
from .eventsub import (
    EventSubConnectionError,
    EventSubError,
    MessageProcessingError,
    SubscriptionError,
)
from .internal import ConfigError, InternalError, NetworkError

__all__ = [
    "ChatConnectionError",
    "ConfigError",
    "EventSubConnectionError",
    "EventSubError",
    "InternalError",
    "MessageProcessingError",
    "NetworkError",
    "SubscriptionError",
]
