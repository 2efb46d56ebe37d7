"""Shared text formatting helpers for console output."""

from __future__ import annotations

import os
import re
import sys

_ANSI_ESCAPE_RE = re.compile(
    r"[\u001B\u009B][\[\]()#;?]*"
    r"(?:(?:(?:[a-zA-Z\d]*(?:;[a-zA-Z\d]*)*)?\u0007)"
    r"|(?:(?:\d{1,4}(?:;\d{0,4})*)?[\dA-PR-TZcf-ntqry=><~]))"
)


def strip_ansi(text: str) -> str:
    """Return ``text`` with all ANSI escape sequences removed."""
    return _ANSI_ESCAPE_RE.sub("", text)


def visible_length(text: str) -> int:
    return len(strip_ansi(text))


def wrap_message(message: str, width: int, indent: int) -> str:
    """Word-wrap ``message`` to ``width`` columns.

    Words are appended to the current line until the next one would push it
    past ``width``; the following line then starts with ``indent`` spaces.
    Words are never split, so a single word longer than ``width`` occupies a
    line on its own.

    Args:
        message: Text to wrap. Runs of whitespace collapse to single spaces.
        width: Columns available for text on each line (excluding indent).
        indent: Number of spaces prefixed to every continuation line.

    Returns:
        The wrapped text, or an empty string when ``message`` has no words.
    """
    lines: list[str] = []
    current = ""
    for word in message.split():
        if current and len(current) + 1 + len(word) > width:
            lines.append(current)
            current = word
        elif current:
            current = f"{current} {word}"
        else:
            current = word
    if current:
        lines.append(current)
    return ("\n" + " " * indent).join(lines)


def terminal_width() -> int | None:
    """Return the width of the terminal attached to stdout, if any."""
    try:
        return os.get_terminal_size(sys.stdout.fileno()).columns
    except (OSError, ValueError, AttributeError):
        # stdout is not a tty (piped, captured, or replaced)
        return None
