"""
Tests for argus.constants
"""

from argus import constants
from argus.constants import _get_env_float


def test_env_float_override(monkeypatch):
    monkeypatch.setenv("ARGUS_TEST_TIMEOUT", "2.5")

    assert _get_env_float("ARGUS_TEST_TIMEOUT", 10.0) == 2.5


def test_env_float_invalid_falls_back(monkeypatch, capsys):
    monkeypatch.setenv("ARGUS_TEST_TIMEOUT", "soon")

    assert _get_env_float("ARGUS_TEST_TIMEOUT", 10.0) == 10.0
    assert "Invalid float value" in capsys.readouterr().out


def test_env_float_unset(monkeypatch):
    monkeypatch.delenv("ARGUS_TEST_TIMEOUT", raising=False)

    assert _get_env_float("ARGUS_TEST_TIMEOUT", 7.0) == 7.0


def test_subscription_types_in_registration_order():
    assert constants.EVENTSUB_SUBSCRIPTION_TYPES == (
        "channel.subscribe",
        "channel.cheer",
        "channel.channel_points_custom_reward_redemption.add",
    )
