from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

_OAUTH_PREFIX = "oauth:"


class ConnectionConfig(BaseModel):
    """Immutable connection settings shared by the chat and activity feeds.

    Attributes:
        nick: Chat identity used for the NICK frame.
        oauth_token: Bare OAuth token (no ``oauth:`` marker).
        client_id: Twitch application client ID for Helix requests.
        channel: Chat channel to join, always carrying a single leading ``#``.
        channel_id: Numeric broadcaster user ID used as subscription condition.
        show_logs: Verbosity flag enabling diagnostic output.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    nick: str = Field(min_length=1)
    oauth_token: str = Field(min_length=1)
    client_id: str = Field(min_length=1)
    channel: str = Field(min_length=1)
    channel_id: str = Field(min_length=1)
    show_logs: bool = False

    @field_validator("oauth_token")
    @classmethod
    def strip_oauth_prefix(cls, v: str) -> str:
        """Accept tokens with or without the IRC ``oauth:`` marker."""
        token = v[len(_OAUTH_PREFIX):] if v.lower().startswith(_OAUTH_PREFIX) else v
        if not token:
            raise ValueError("oauth_token is empty")
        return token

    @field_validator("channel")
    @classmethod
    def normalize_channel(cls, v: str) -> str:
        name = v.lstrip("#").lower()
        if not name:
            raise ValueError("channel name is empty")
        return f"#{name}"

    @field_validator("channel_id")
    @classmethod
    def validate_channel_id(cls, v: str) -> str:
        if not v.isdigit():
            raise ValueError("channel_id must be the numeric broadcaster user ID")
        return v

    @property
    def irc_password(self) -> str:
        return f"{_OAUTH_PREFIX}{self.oauth_token}"
