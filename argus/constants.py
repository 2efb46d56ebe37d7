"""
Configuration constants for the Argus live viewer

Endpoint addresses are fixed by the platform. Timeouts can be overridden by
setting an environment variable with the same name.
"""

import os


def _get_env_float(name: str, default: float) -> float:
    """Retrieve a float value from an environment variable.

    Attempts to parse the environment variable as a float. If the variable
    is not set or cannot be parsed, prints a warning and returns the default.

    Args:
        name: The name of the environment variable to read.
        default: The default float value to return if parsing fails.

    Returns:
        The parsed float value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            print(
                f"Warning: Invalid float value for {name}='{value}', using default {default}"
            )
    return default


# Chat (IRC over raw TCP)
IRC_SERVER = "irc.chat.twitch.tv"
IRC_PORT = 6667
IRC_TAGS_CAPABILITY = "twitch.tv/tags"
IRC_PONG_SERVER = "tmi.twitch.tv"

# EventSub (WebSocket + Helix subscriptions endpoint)
EVENTSUB_WS_URL = "wss://eventsub.wss.twitch.tv/ws"
HELIX_BASE_URL = "https://api.twitch.tv/helix"
EVENTSUB_SUBSCRIPTIONS_ENDPOINT = "eventsub/subscriptions"

# Subscription types registered once per session, in registration order
EVENTSUB_CHANNEL_SUBSCRIBE = "channel.subscribe"
EVENTSUB_CHANNEL_CHEER = "channel.cheer"
EVENTSUB_CHANNEL_POINTS_REDEMPTION = (
    "channel.channel_points_custom_reward_redemption.add"
)
EVENTSUB_SUBSCRIPTION_TYPES = (
    EVENTSUB_CHANNEL_SUBSCRIBE,
    EVENTSUB_CHANNEL_CHEER,
    EVENTSUB_CHANNEL_POINTS_REDEMPTION,
)
EVENTSUB_SUBSCRIPTION_VERSION = "1"

# Dial timeouts only; established connections are read without a deadline
CHAT_CONNECT_TIMEOUT = _get_env_float("CHAT_CONNECT_TIMEOUT", 10.0)
EVENTSUB_CONNECT_TIMEOUT = _get_env_float("EVENTSUB_CONNECT_TIMEOUT", 10.0)
HELIX_REQUEST_TIMEOUT = _get_env_float("HELIX_REQUEST_TIMEOUT", 10.0)
