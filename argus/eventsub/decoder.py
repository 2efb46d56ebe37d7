"""Decoding of EventSub WebSocket messages and notification payloads.

Notification bodies are mapped onto a closed set of variants keyed by the
subscription type. Anything that does not fit one of the known shapes
becomes an ``UnrecognizedNotification`` instead of raising.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from typing import Any

from .. import colors
from ..constants import (
    EVENTSUB_CHANNEL_CHEER,
    EVENTSUB_CHANNEL_POINTS_REDEMPTION,
    EVENTSUB_CHANNEL_SUBSCRIBE,
)
from ..errors.eventsub import MessageProcessingError
from .models import (
    CheerNotification,
    NotificationEvent,
    RedemptionNotification,
    SubscriptionNotification,
    UnrecognizedNotification,
)


class _MissingField(Exception):
    pass


def parse_message(raw: str | bytes) -> tuple[str, dict[str, Any]]:
    """Parse a raw WebSocket message into (message_type, envelope).

    Raises:
        MessageProcessingError: If the message is not a JSON object or lacks a
            string ``metadata.message_type``.
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MessageProcessingError(
            f"EventSub message contains invalid JSON: {str(e)}",
            operation_type="parse_json",
        ) from e
    if not isinstance(data, dict):
        raise MessageProcessingError(
            "EventSub message is not a JSON object", operation_type="parse_json"
        )
    metadata = data.get("metadata")
    if not isinstance(metadata, dict):
        raise MessageProcessingError(
            "metadata not found in message", operation_type="parse_metadata"
        )
    message_type = metadata.get("message_type")
    if not isinstance(message_type, str):
        raise MessageProcessingError(
            "message_type not found in metadata", operation_type="parse_metadata"
        )
    return message_type, data


def extract_session_id(envelope: Mapping[str, Any]) -> str:
    """Return ``payload.session.id`` from a session_welcome envelope.

    Raises:
        MessageProcessingError: If the id is absent or not a non-empty string.
    """
    payload = envelope.get("payload")
    session = payload.get("session") if isinstance(payload, dict) else None
    session_id = session.get("id") if isinstance(session, dict) else None
    if not isinstance(session_id, str) or not session_id:
        raise MessageProcessingError(
            "session id not found in welcome payload", operation_type="session_welcome"
        )
    return session_id


def _require_str(body: Mapping[str, Any], key: str) -> str:
    value = body.get(key)
    if not isinstance(value, str):
        raise _MissingField(key)
    return value


def _require_number(body: Mapping[str, Any], key: str) -> int:
    value = body.get(key)
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise _MissingField(key)
    try:
        return int(value)
    except (OverflowError, ValueError) as e:
        # json accepts Infinity and NaN
        raise _MissingField(key) from e


def _require_mapping(body: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = body.get(key)
    if not isinstance(value, dict):
        raise _MissingField(key)
    return value


def _decode_subscribe(event: Mapping[str, Any]) -> NotificationEvent:
    return SubscriptionNotification(username=_require_str(event, "user_name"))


def _decode_cheer(event: Mapping[str, Any]) -> NotificationEvent:
    return CheerNotification(
        username=_require_str(event, "user_name"),
        bits=_require_number(event, "bits"),
    )


def _decode_redemption(event: Mapping[str, Any]) -> NotificationEvent:
    reward = _require_mapping(event, "reward")
    return RedemptionNotification(
        username=_require_str(event, "user_name"),
        reward_title=_require_str(reward, "title"),
        reward_cost=_require_number(reward, "cost"),
    )


_DECODERS: dict[str, Callable[[Mapping[str, Any]], NotificationEvent]] = {
    EVENTSUB_CHANNEL_SUBSCRIBE: _decode_subscribe,
    EVENTSUB_CHANNEL_CHEER: _decode_cheer,
    EVENTSUB_CHANNEL_POINTS_REDEMPTION: _decode_redemption,
}


def decode_notification(envelope: Mapping[str, Any]) -> NotificationEvent:
    """Map a notification envelope onto one of the known variants."""
    payload = envelope.get("payload")
    if not isinstance(payload, dict):
        return UnrecognizedNotification(None, "payload missing")
    subscription = payload.get("subscription")
    sub_type = subscription.get("type") if isinstance(subscription, dict) else None
    if not isinstance(sub_type, str):
        return UnrecognizedNotification(None, "subscription type missing")

    decoder = _DECODERS.get(sub_type)
    if decoder is None:
        return UnrecognizedNotification(sub_type)

    event = payload.get("event")
    if not isinstance(event, dict):
        return UnrecognizedNotification(sub_type, "event body missing")
    try:
        return decoder(event)
    except _MissingField as e:
        return UnrecognizedNotification(sub_type, f"missing or invalid field '{e}'")


def render_notification(event: NotificationEvent) -> str | None:
    """Render a decoded notification as an activity line, or None."""
    if isinstance(event, SubscriptionNotification):
        return (
            f"{colors.SUBSCRIBER} [ACTIVITY] New Subscriber: "
            f"{event.username}!{colors.RESET}"
        )
    if isinstance(event, CheerNotification):
        return (
            f"{colors.CHEER} [ACTIVITY] {event.username} cheered "
            f"{event.bits} bits!{colors.RESET}"
        )
    if isinstance(event, RedemptionNotification):
        return (
            f"{colors.REDEMPTION} [ACTIVITY] {event.username} redeemed "
            f"{event.reward_cost} channel points for: {event.reward_title}{colors.RESET}"
        )
    return None
