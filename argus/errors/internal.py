"""Centralized internal error hierarchy.

Classes:
  InternalError        – Base for all internal errors.
  NetworkError         – Connection establishment or transport failures.
  ConfigError          – Missing or invalid configuration.
"""

from __future__ import annotations

from collections.abc import Mapping


class InternalError(Exception):
    """Base class for all internal application errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class NetworkError(InternalError):
    """Exception raised for network or transport layer errors."""


class ConfigError(InternalError):
    """Exception raised when required configuration is missing or invalid.

    The names of missing settings, if any, are available under
    ``data["missing"]``.
    """

    @property
    def missing(self) -> list[str]:
        missing = self.data.get("missing")
        return list(missing) if isinstance(missing, list | tuple) else []


__all__ = [
    "InternalError",
    "NetworkError",
    "ConfigError",
]
