"""Argus: live console viewer for a Twitch channel's chat and activity feed."""

__version__ = "0.1.0"
