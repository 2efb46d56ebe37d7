"""IRC chat line parsing and rendering."""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from .. import colors
from ..formatting import visible_length, wrap_message

PRIVMSG = "PRIVMSG"
PRIVILEGED_BADGES = ("moderator", "broadcaster")

_TAG_BLOCK_RE = re.compile(r"^@([^ ]+) ")
_UNTAGGED_PRIVMSG_RE = re.compile(r"^:(\w+)!.*?PRIVMSG #\w+ :(.+)$")


class ChatRole(Enum):
    ORDINARY = "ordinary"
    PRIVILEGED = "privileged"


@dataclass(frozen=True)
class ChatMessage:
    username: str
    text: str
    role: ChatRole = ChatRole.ORDINARY

    @property
    def color(self) -> str:
        return colors.PRIVILEGED if self.role is ChatRole.PRIVILEGED else colors.DEFAULT


def parse_tags(raw_tags: str) -> dict[str, str]:
    """Parse an IRCv3 tag string (``k=v;k=v``) into a mapping.

    Pairs without ``=`` are dropped; values may themselves contain ``=``.
    """
    tags: dict[str, str] = {}
    for pair in raw_tags.split(";"):
        if "=" in pair:
            k, v = pair.split("=", 1)
            tags[k] = v
    return tags


def role_from_badges(badges: str) -> ChatRole:
    if any(badge in badges for badge in PRIVILEGED_BADGES):
        return ChatRole.PRIVILEGED
    return ChatRole.ORDINARY


def _split_privmsg(line: str) -> tuple[str, str] | None:
    """Split ``line`` at its first PRIVMSG into (prefix part, message text)."""
    if PRIVMSG not in line:
        return None
    head, payload = line.split(PRIVMSG, 1)
    # Text follows the first ':' of the payload (the trailing parameter).
    text = payload[payload.find(":") + 1:].strip()
    return head, text


def parse_tagged_privmsg(line: str) -> ChatMessage | None:
    """Parse a PRIVMSG carrying an IRCv3 tag block."""
    split = _split_privmsg(line)
    if split is None:
        return None
    head, text = split
    match = _TAG_BLOCK_RE.match(head)
    if not match:
        return None
    tags = parse_tags(match.group(1))
    username = tags.get("display-name") or tags.get("login", "")
    return ChatMessage(
        username=username, text=text, role=role_from_badges(tags.get("badges", ""))
    )


def parse_untagged_privmsg(line: str) -> ChatMessage | None:
    """Parse a plain ``:nick!user@host PRIVMSG #channel :text`` line."""
    split = _split_privmsg(line)
    if split is None:
        return None
    match = _UNTAGGED_PRIVMSG_RE.match(line)
    if not match:
        return None
    return ChatMessage(username=match.group(1), text=split[1])


ParseStrategy = Callable[[str], "ChatMessage | None"]

PARSE_STRATEGIES: Sequence[ParseStrategy] = (
    parse_tagged_privmsg,
    parse_untagged_privmsg,
)


def parse_chat_line(
    line: str, strategies: Sequence[ParseStrategy] = PARSE_STRATEGIES
) -> ChatMessage | None:
    """Return the first successful parse of ``line``, or None.

    Not every line containing PRIVMSG is a chat message; lines no strategy
    accepts are dropped by the caller.
    """
    for strategy in strategies:
        message = strategy(line)
        if message is not None:
            return message
    return None


def render_chat_line(message: ChatMessage, width: int | None = None) -> str:
    """Render a chat message as `` [CHAT] <user>: <text>``.

    Args:
        message: Parsed chat message.
        width: Terminal width in columns. When positive, the text is wrapped
            so that continuation lines align under the start of the text.

    Returns:
        The rendered (possibly multi-line) string without a trailing newline.
    """
    prefix = f" [CHAT] {message.color}{message.username}{colors.RESET}: "
    if width is None or width <= 0:
        return f"{prefix}{message.text}"
    prefix_len = visible_length(prefix)
    return prefix + wrap_message(message.text, width - prefix_len, prefix_len)
