"""Chat (IRC) error types."""

from __future__ import annotations

from .internal import NetworkError


class ChatConnectionError(NetworkError):
    """Raised when the chat server cannot be dialed.

    This is a startup precondition failure rather than a transient condition;
    the supervisor terminates the process when it sees one.
    """
