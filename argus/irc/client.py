"""Twitch IRC chat stream client."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from ..config.model import ConnectionConfig
from ..constants import (
    CHAT_CONNECT_TIMEOUT,
    IRC_PONG_SERVER,
    IRC_PORT,
    IRC_SERVER,
    IRC_TAGS_CAPABILITY,
)
from ..errors.chat import ChatConnectionError
from ..formatting import terminal_width
from ..output import ConsoleSink
from .parser import parse_chat_line, render_chat_line

WidthProvider = Callable[[], "int | None"]


class ChatStreamClient:
    """Reads one Twitch chat channel over raw IRC and renders its messages.

    The client performs the handshake, answers keepalive PINGs inline and
    writes every parsed PRIVMSG to the console sink. It never reconnects:
    when the connection is lost ``run`` simply returns.

    Attributes:
        config (ConnectionConfig): Credentials and target channel.
        sink (ConsoleSink): Destination for rendered chat lines.
        server (str): Chat server host.
        port (int): Chat server port.
    """

    def __init__(
        self,
        config: ConnectionConfig,
        sink: ConsoleSink,
        *,
        server: str = IRC_SERVER,
        port: int = IRC_PORT,
        width_provider: WidthProvider = terminal_width,
    ) -> None:
        self.config = config
        self.sink = sink
        self.server = server
        self.port = port
        self._width_provider = width_provider
        self.reader: asyncio.StreamReader | None = None
        self.writer: asyncio.StreamWriter | None = None

    async def connect(self) -> None:
        """Dial the chat server and send the handshake frames.

        Raises:
            ChatConnectionError: If the server cannot be reached.
        """
        logging.debug(f"🔌 Connecting to Twitch IRC at {self.server}:{self.port}")
        try:
            self.reader, self.writer = await asyncio.wait_for(
                asyncio.open_connection(self.server, self.port),
                timeout=CHAT_CONNECT_TIMEOUT,
            )
        except (OSError, TimeoutError) as e:
            raise ChatConnectionError(
                f"Error connecting to Twitch IRC: {e}",
                data={"server": self.server, "port": self.port},
            ) from e

        # Frames are pipelined; the server does not need acks between them.
        await self._send_line(f"CAP REQ :{IRC_TAGS_CAPABILITY}")
        await self._send_line(f"PASS {self.config.irc_password}")
        await self._send_line(f"NICK {self.config.nick}")
        await self._send_line(f"JOIN {self.config.channel}")

        if self.config.show_logs:
            self.sink.write_banner("Twitch Chat")
            logging.info(f"✅ Joined IRC channel {self.config.channel}")
        else:
            logging.info(f"💬 CLI active for channel {self.config.channel}")

    async def _send_line(self, message: str) -> None:
        if self.writer:
            self.writer.write(f"{message}\r\n".encode("utf-8"))
            await self.writer.drain()

    async def handle_line(self, raw_line: str) -> None:
        """Process one line read from the server."""
        line = raw_line.strip()
        if not line:
            return

        if line.startswith("PING"):
            await self._send_line(f"PONG :{IRC_PONG_SERVER}")
            logging.debug("🏓 Received PING from server, responded with PONG")
            return

        message = parse_chat_line(line)
        if message is None:
            if "PRIVMSG" in line:
                logging.debug(f"Dropped unparseable PRIVMSG line: {line!r}")
            return

        self.sink.write_line(render_chat_line(message, self._width_provider()))

    async def listen(self) -> None:
        """Read lines until the connection is closed or fails."""
        if self.reader is None:
            return
        while True:
            try:
                data = await self.reader.readline()
            except ValueError as e:
                # Line longer than the stream limit; the reader has already
                # discarded it, so the connection is still usable.
                logging.info(f"⚠️ Skipping oversized IRC line: {e}")
                continue
            except OSError as e:
                logging.warning(f"❌ IRC connection lost or closed: {e}")
                return
            if not data:
                logging.warning("❌ IRC connection lost or closed: EOF")
                return
            try:
                await self.handle_line(data.decode("utf-8", errors="ignore"))
            except OSError as e:
                # Writing the PONG failed
                logging.warning(f"❌ IRC connection lost or closed: {e}")
                return

    async def disconnect(self) -> None:
        if self.writer:
            try:
                self.writer.close()
                await self.writer.wait_closed()
            except OSError as e:
                logging.debug(f"Error closing IRC connection: {e}")
            finally:
                self.writer = None
                self.reader = None

    async def run(self) -> None:
        """Connect, then render chat until the connection ends.

        Raises:
            ChatConnectionError: If the initial dial fails.
        """
        await self.connect()
        try:
            await self.listen()
        finally:
            await self.disconnect()
