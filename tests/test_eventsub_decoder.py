"""
Tests for argus.eventsub.decoder
"""

import json

import pytest

from argus import colors
from argus.errors.eventsub import MessageProcessingError
from argus.eventsub.decoder import (
    decode_notification,
    extract_session_id,
    parse_message,
    render_notification,
)
from argus.eventsub.models import (
    CheerNotification,
    RedemptionNotification,
    SubscriptionNotification,
    UnrecognizedNotification,
)
from tests.fixtures.eventsub_messages import (
    CHEER_EVENT,
    CHEER_NOTIFICATION,
    FOLLOW_NOTIFICATION,
    REDEMPTION_EVENT,
    REDEMPTION_NOTIFICATION,
    SESSION_ID,
    SESSION_KEEPALIVE,
    SESSION_WELCOME,
    SUBSCRIBE_NOTIFICATION,
    envelope,
    notification_payload,
)


def decoded(raw):
    _, env = parse_message(raw)
    return decode_notification(env)


def cheer_with(**changes):
    event = {**CHEER_EVENT, **changes}
    return envelope("notification", notification_payload("channel.cheer", event))


class TestParseMessage:
    def test_returns_type_and_envelope(self):
        message_type, env = parse_message(SESSION_KEEPALIVE)

        assert message_type == "session_keepalive"
        assert env["metadata"]["message_type"] == "session_keepalive"

    def test_accepts_bytes(self):
        message_type, _ = parse_message(SESSION_WELCOME.encode("utf-8"))

        assert message_type == "session_welcome"

    @pytest.mark.parametrize(
        "raw",
        [
            "not json",
            "[1, 2, 3]",
            json.dumps({"payload": {}}),
            json.dumps({"metadata": {"message_id": "x"}}),
            json.dumps({"metadata": {"message_type": 5}}),
        ],
    )
    def test_malformed_messages_raise(self, raw):
        with pytest.raises(MessageProcessingError):
            parse_message(raw)


class TestExtractSessionId:
    def test_welcome_session_id(self):
        _, env = parse_message(SESSION_WELCOME)

        assert extract_session_id(env) == SESSION_ID

    @pytest.mark.parametrize(
        "payload",
        [{}, {"session": None}, {"session": {"id": ""}}, {"session": {"id": 42}}],
    )
    def test_missing_id_raises(self, payload):
        _, env = parse_message(envelope("session_welcome", payload))

        with pytest.raises(MessageProcessingError):
            extract_session_id(env)


class TestDecodeNotification:
    def test_subscription(self):
        assert decoded(SUBSCRIBE_NOTIFICATION) == SubscriptionNotification("Cool_User")

    def test_cheer_bits_are_integral(self):
        event = decoded(CHEER_NOTIFICATION)

        assert event == CheerNotification("Cool_User", 500)
        assert isinstance(event.bits, int)

    def test_fractional_amounts_truncate(self):
        assert decoded(cheer_with(bits=99.9)).bits == 99

    def test_redemption(self):
        event = decoded(REDEMPTION_NOTIFICATION)

        assert event == RedemptionNotification("Cool_User", "Hydrate", 100)

    def test_unknown_type_has_no_reason(self):
        event = decoded(FOLLOW_NOTIFICATION)

        assert event == UnrecognizedNotification("channel.follow")
        assert event.reason == ""

    def test_missing_username_is_unrecognized(self):
        event = {k: v for k, v in CHEER_EVENT.items() if k != "user_name"}
        raw = envelope("notification", notification_payload("channel.cheer", event))

        result = decoded(raw)

        assert isinstance(result, UnrecognizedNotification)
        assert result.subscription_type == "channel.cheer"
        assert "user_name" in result.reason

    @pytest.mark.parametrize("bits", ["500", None, True, float("inf")])
    def test_invalid_bits_are_unrecognized(self, bits):
        raw = cheer_with(bits=bits)

        result = decoded(raw)

        assert isinstance(result, UnrecognizedNotification)
        assert "bits" in result.reason

    def test_redemption_without_reward_is_unrecognized(self):
        event = {k: v for k, v in REDEMPTION_EVENT.items() if k != "reward"}
        raw = envelope(
            "notification",
            notification_payload(
                "channel.channel_points_custom_reward_redemption.add", event
            ),
        )

        result = decoded(raw)

        assert isinstance(result, UnrecognizedNotification)
        assert "reward" in result.reason

    def test_missing_event_body(self):
        payload = notification_payload("channel.subscribe", {})
        del payload["event"]

        result = decoded(envelope("notification", payload))

        assert result == UnrecognizedNotification("channel.subscribe", "event body missing")

    def test_missing_subscription_type(self):
        result = decoded(envelope("notification", {"event": {}}))

        assert isinstance(result, UnrecognizedNotification)
        assert result.subscription_type is None


class TestRenderNotification:
    def test_subscription_line(self):
        line = render_notification(SubscriptionNotification("Cool_User"))

        assert line == f"{colors.WHITE} [ACTIVITY] New Subscriber: Cool_User!{colors.RESET}"

    def test_cheer_line(self):
        line = render_notification(decoded(CHEER_NOTIFICATION))

        assert line == f"{colors.PURPLE} [ACTIVITY] Cool_User cheered 500 bits!{colors.RESET}"

    def test_redemption_line(self):
        line = render_notification(decoded(REDEMPTION_NOTIFICATION))

        assert line == (
            f"{colors.CYAN} [ACTIVITY] Cool_User redeemed 100 channel points "
            f"for: Hydrate{colors.RESET}"
        )

    def test_unrecognized_renders_nothing(self):
        assert render_notification(UnrecognizedNotification("channel.follow")) is None
