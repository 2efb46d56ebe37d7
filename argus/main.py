#!/usr/bin/env python3
"""
Main entry point for the Argus live viewer
"""

from __future__ import annotations

import asyncio
import logging
import signal
import sys

from .config import ConnectionConfig, load_config
from .errors.handling import log_error
from .errors.internal import ConfigError
from .eventsub.session import EventSessionMachine
from .irc.client import ChatStreamClient
from .logging_config import LoggerConfigurator
from .output import ConsoleSink


class Supervisor:
    """Runs the chat and activity feeds side by side until a shutdown signal.

    The feeds share nothing but the console sink. A feed that ends on its own
    (connection lost, revocation, reconnect request) is not restarted, and the
    supervisor keeps waiting for SIGINT/SIGTERM. A feed that fails to dial
    its endpoint is fatal: the other feed is cancelled and ``run`` returns 1.

    Attributes:
        config (ConnectionConfig): Validated settings handed to both feeds.
        sink (ConsoleSink): Shared output sink.
        stop_event (asyncio.Event): Set when a termination signal arrives.
    """

    def __init__(
        self,
        config: ConnectionConfig,
        sink: ConsoleSink | None = None,
        *,
        chat: ChatStreamClient | None = None,
        events: EventSessionMachine | None = None,
    ) -> None:
        self.config = config
        self.sink = sink or ConsoleSink()
        self.chat = chat or ChatStreamClient(config, self.sink)
        self.events = events or EventSessionMachine(config, self.sink)
        self.stop_event = asyncio.Event()
        self.shutdown_initiated = False

    def stop(self, signum: int | None = None) -> None:
        # Idempotent: only the first signal is reported
        if self.shutdown_initiated:
            return
        self.shutdown_initiated = True
        if signum is not None:
            logging.info(f"🛑 Signal received - initiating shutdown (signal={signum})")
        self.stop_event.set()

    def setup_signal_handlers(self) -> None:  # pragma: no cover
        """Set up SIGINT/SIGTERM handlers that trigger ``stop``."""
        loop = asyncio.get_running_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(sig, self.stop, sig)
            except NotImplementedError:
                # Event loops without signal support (Windows)
                signal.signal(
                    sig, lambda signum, _frame: loop.call_soon_threadsafe(self.stop, signum)
                )

    async def run(self) -> int:
        """Run both feeds and return the process exit code."""
        feeds = {
            asyncio.create_task(self.chat.run(), name="chat"): "chat",
            asyncio.create_task(self.events.run(), name="eventsub"): "eventsub",
        }
        stop_waiter = asyncio.create_task(self.stop_event.wait(), name="stop")
        pending = set(feeds)
        exit_code = 0
        try:
            while True:
                done, _ = await asyncio.wait(
                    pending | {stop_waiter}, return_when=asyncio.FIRST_COMPLETED
                )
                if stop_waiter in done:
                    self.sink.write_line("\nProgram terminated. Disconnecting...")
                    break
                failed = False
                for task in done:
                    pending.discard(task)
                    error = task.exception()
                    if error is not None:
                        log_error(f"Fatal error in {feeds[task]} feed", error)
                        failed = True
                    else:
                        logging.info(f"{feeds[task]} feed finished")
                if failed:
                    exit_code = 1
                    break
        finally:
            for task in [*pending, stop_waiter]:
                task.cancel()
            await asyncio.gather(*pending, stop_waiter, return_exceptions=True)
        return exit_code


async def main() -> None:
    """Load configuration, configure logging and supervise both feeds.

    Raises:
        SystemExit: If configuration is invalid or a feed fails to connect.
    """
    LoggerConfigurator().configure()
    try:
        config = load_config()
    except ConfigError as e:
        log_error("Configuration error", e)
        sys.exit(1)

    LoggerConfigurator(show_logs=config.show_logs).configure()
    supervisor = Supervisor(config)
    supervisor.setup_signal_handlers()
    exit_code = await supervisor.run()
    if exit_code:
        sys.exit(exit_code)


def check_config() -> int:
    """Validate configuration without connecting; return an exit code."""
    LoggerConfigurator(show_logs=True).configure()
    try:
        config = load_config()
    except ConfigError as e:
        logging.error(f"❌ Configuration check failed: {e}")
        return 1
    logging.info(f"✅ Configuration check passed - channel {config.channel}")
    return 0


def run() -> None:
    """Synchronous entry point for the application.

    Raises:
        SystemExit: If a critical error occurs during execution.
    """
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        sys.exit(0)
    except asyncio.CancelledError:
        sys.exit(0)


if __name__ == "__main__":
    run()
