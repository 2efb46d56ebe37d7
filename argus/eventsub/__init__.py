"""EventSub subsystem: session state machine, registrar and notification decoding."""

from .decoder import decode_notification, parse_message, render_notification
from .models import (
    CheerNotification,
    NotificationEvent,
    RedemptionNotification,
    SessionState,
    SubscriptionNotification,
    SubscriptionRequest,
    UnrecognizedNotification,
)
from .registrar import EventSubscriptionRegistrar
from .session import EventSessionMachine

__all__ = [
    "CheerNotification",
    "EventSessionMachine",
    "EventSubscriptionRegistrar",
    "NotificationEvent",
    "RedemptionNotification",
    "SessionState",
    "SubscriptionNotification",
    "SubscriptionRequest",
    "UnrecognizedNotification",
    "decode_notification",
    "parse_message",
    "render_notification",
]
