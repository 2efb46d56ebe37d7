"""Twitch HTTP API clients."""

from .twitch import TwitchAPI

__all__ = ["TwitchAPI"]
