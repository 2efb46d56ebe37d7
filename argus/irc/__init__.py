"""IRC chat subsystem: line parsing, rendering and the stream client."""

from .client import ChatStreamClient
from .parser import (
    ChatMessage,
    ChatRole,
    parse_chat_line,
    parse_tagged_privmsg,
    parse_tags,
    parse_untagged_privmsg,
    render_chat_line,
)

__all__ = [
    "ChatMessage",
    "ChatRole",
    "ChatStreamClient",
    "parse_chat_line",
    "parse_tagged_privmsg",
    "parse_tags",
    "parse_untagged_privmsg",
    "render_chat_line",
]
