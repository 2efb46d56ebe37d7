"""EventSub error hierarchy for the activity feed.

All exceptions support additional context parameters for error tracking.
"""

from __future__ import annotations


class EventSubError(Exception):
    """Base exception for all EventSub-related errors.

    Args:
        message (str): Error message.
        request_id (str | None): Optional request ID for tracking.
        user_id (str | None): Optional user ID associated with the error.
        operation_type (str | None): Optional operation type (e.g., 'connect', 'subscribe').

    Example:
        >>> raise EventSubError("Generic error", request_id="req-123", operation_type="connect")
    """

    def __init__(
        self,
        message: str,
        request_id: str | None = None,
        user_id: str | None = None,
        operation_type: str | None = None,
    ) -> None:
        super().__init__(message)
        self.request_id = request_id
        self.user_id = user_id
        self.operation_type = operation_type


class EventSubConnectionError(EventSubError):
    """Raised when the EventSub WebSocket cannot be established.

    Example:
        >>> raise EventSubConnectionError("Failed to connect to WebSocket", operation_type="connect")
    """

    pass


class SubscriptionError(EventSubError):
    """Raised when registering an EventSub subscription fails.

    Covers both non-success HTTP responses and transport failures; in the
    latter case ``status`` is ``None``.

    Args:
        message (str): Error message.
        status (int | None): HTTP status returned by the subscriptions endpoint.
        subscription_type (str | None): The EventSub type being registered.
        **kwargs: Forwarded to ``EventSubError``.
    """

    def __init__(
        self,
        message: str,
        status: int | None = None,
        subscription_type: str | None = None,
        **kwargs: str | None,
    ) -> None:
        kwargs.setdefault("operation_type", "subscribe")
        super().__init__(message, **kwargs)
        self.status = status
        self.subscription_type = subscription_type


class MessageProcessingError(EventSubError):
    """Raised when an inbound EventSub message cannot be decoded.

    Example:
        >>> raise MessageProcessingError("Invalid JSON in message", operation_type="parse_json")
    """

    pass
