"""EventSub session state, subscription requests and notification variants."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from ..constants import EVENTSUB_SUBSCRIPTION_VERSION

# EventSub WebSocket message types (metadata.message_type)
SESSION_WELCOME = "session_welcome"
SESSION_KEEPALIVE = "session_keepalive"
SESSION_RECONNECT = "session_reconnect"
NOTIFICATION = "notification"
REVOCATION = "revocation"


class SessionState(Enum):
    CONNECTING = auto()
    WELCOMED = auto()
    SUBSCRIBING = auto()
    ACTIVE = auto()
    TERMINATED = auto()


@dataclass(frozen=True)
class SubscriptionRequest:
    """One EventSub subscription to register for a WebSocket session."""

    type: str
    broadcaster_user_id: str
    session_id: str
    version: str = EVENTSUB_SUBSCRIPTION_VERSION
    method: str = "websocket"

    @property
    def condition(self) -> dict[str, str]:
        return {"broadcaster_user_id": self.broadcaster_user_id}

    @property
    def transport(self) -> dict[str, str]:
        return {"method": self.method, "session_id": self.session_id}

    def to_body(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "version": self.version,
            "condition": self.condition,
            "transport": self.transport,
        }


@dataclass(frozen=True)
class SubscriptionNotification:
    username: str


@dataclass(frozen=True)
class CheerNotification:
    username: str
    bits: int


@dataclass(frozen=True)
class RedemptionNotification:
    username: str
    reward_title: str
    reward_cost: int


@dataclass(frozen=True)
class UnrecognizedNotification:
    """A notification that produces no output.

    ``reason`` is empty for subscription types that are simply not rendered
    and describes the problem when a known type carried a malformed body.
    """

    subscription_type: str | None
    reason: str = field(default="")


NotificationEvent = (
    SubscriptionNotification
    | CheerNotification
    | RedemptionNotification
    | UnrecognizedNotification
)
