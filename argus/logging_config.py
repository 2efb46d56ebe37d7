r"""
Logging configuration module for the Argus live viewer.

Provides a colorlog-based setup for diagnostics on stderr plus a helper for
structured error lines. Rendered chat and activity output does not go
through logging; see ``argus.output``.
"""

import logging
import os
import sys
from typing import Any

import colorlog

_TRUTHY = ("true", "1", "yes")


def resolve_log_level(show_logs: bool) -> int:
    """Pick the root log level from the verbosity flag and the DEBUG env var.

    Verbosity-gated diagnostics are emitted at INFO or DEBUG, so the default
    WARNING threshold keeps them silent.
    """
    if os.environ.get("DEBUG", "").lower() in _TRUTHY:
        return logging.DEBUG
    return logging.INFO if show_logs else logging.WARNING


def log_structured_error(
    error_type: str,
    message: str,
    exception: Exception | None = None,
    context: dict[str, Any] | None = None,
    level: int = logging.ERROR,
) -> None:
    """Log an error with structured context.

    Args:
        error_type: Category of the error (e.g., 'network', 'subscription').
        message: Descriptive error message.
        exception: The exception that occurred (optional).
        context: Additional context data for debugging.
        level: Logging level (default: ERROR).
    """
    structured_message = f"[{error_type.upper()}] {message}"

    if exception:
        structured_message += f" | Exception: {type(exception).__name__}: {str(exception)}"

    if context:
        context_str = " | ".join(f"{k}={v}" for k, v in context.items())
        structured_message += f" | Context: {context_str}"

    logging.log(level, structured_message)


class LoggerConfigurator:
    """Handles logging configuration using colorlog.

    Args:
        show_logs: Verbosity flag from the connection configuration.
    """

    def __init__(self, show_logs: bool = False):
        self.show_logs = show_logs

    def build_formatter(self) -> colorlog.ColoredFormatter:
        return colorlog.ColoredFormatter(
            "%(asctime)s %(log_color)s%(levelname)-8s%(reset)s %(message_log_color)s%(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "magenta",
            },
            secondary_log_colors={
                "message": {
                    "ERROR": "red",
                    "CRITICAL": "magenta",
                }
            },
            reset=True,
        )

    def configure(self) -> int:
        """Configure the root logger and return the level that was applied."""
        log_level = resolve_log_level(self.show_logs)
        formatter = self.build_formatter()

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)

        root_logger = logging.getLogger()
        for existing in list(root_logger.handlers):
            root_logger.removeHandler(existing)
        root_logger.addHandler(handler)
        root_logger.setLevel(log_level)

        # aiohttp is chatty at DEBUG (connector, websocket frames)
        logging.getLogger("aiohttp").setLevel(max(log_level, logging.WARNING))

        return log_level
