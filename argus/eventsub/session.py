"""EventSub WebSocket session state machine for the activity feed."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from ..api.twitch import TwitchAPI
from ..config.model import ConnectionConfig
from ..constants import (
    EVENTSUB_CONNECT_TIMEOUT,
    EVENTSUB_SUBSCRIPTION_TYPES,
    EVENTSUB_WS_URL,
)
from ..errors.eventsub import (
    EventSubConnectionError,
    MessageProcessingError,
    SubscriptionError,
)
from ..output import ConsoleSink
from .decoder import (
    decode_notification,
    extract_session_id,
    parse_message,
    render_notification,
)
from .models import (
    NOTIFICATION,
    REVOCATION,
    SESSION_KEEPALIVE,
    SESSION_RECONNECT,
    SESSION_WELCOME,
    SessionState,
    SubscriptionRequest,
    UnrecognizedNotification,
)
from .registrar import EventSubscriptionRegistrar

_CLOSING_TYPES = (
    aiohttp.WSMsgType.CLOSE,
    aiohttp.WSMsgType.CLOSING,
    aiohttp.WSMsgType.CLOSED,
    aiohttp.WSMsgType.ERROR,
)


class EventSessionMachine:
    """Drives one EventSub WebSocket session from welcome to termination.

    States move ``CONNECTING -> WELCOMED -> SUBSCRIBING -> ACTIVE`` and end in
    ``TERMINATED`` on revocation, a reconnect request, or a read failure.
    Messages are processed strictly one at a time: subscription registration
    after the welcome blocks the receive loop until every type was attempted.

    Attributes:
        config (ConnectionConfig): Credentials and broadcaster ID.
        sink (ConsoleSink): Destination for rendered activity lines.
        state (SessionState): Current session state.
        session_id (str): EventSub session ID, empty until welcomed.
        registrations (list[SubscriptionRequest]): Requests attempted for the
            current session, in order.
    """

    def __init__(
        self,
        config: ConnectionConfig,
        sink: ConsoleSink,
        *,
        registrar: EventSubscriptionRegistrar | None = None,
        http_session: aiohttp.ClientSession | None = None,
        ws_url: str = EVENTSUB_WS_URL,
    ) -> None:
        self.config = config
        self.sink = sink
        self.ws_url = ws_url
        self.registrar = registrar
        self._session = http_session
        self._owns_session = http_session is None
        self._ws: aiohttp.ClientWebSocketResponse | None = None
        self.state = SessionState.CONNECTING
        self.session_id = ""
        self.registrations: list[SubscriptionRequest] = []

    @property
    def verbose(self) -> bool:
        return self.config.show_logs

    def _set_state(self, new_state: SessionState) -> None:
        if self.state != new_state:
            logging.debug(
                f"EventSub state change: {self.state.name} -> {new_state.name}"
            )
            self.state = new_state

    async def connect(self) -> None:
        """Open the EventSub WebSocket.

        Raises:
            EventSubConnectionError: If the WebSocket cannot be established.
        """
        logging.info(f"🔌 Connecting to EventSub at {self.ws_url}")
        if self._session is None:
            self._session = aiohttp.ClientSession()
        if self.registrar is None:
            self.registrar = EventSubscriptionRegistrar(
                TwitchAPI(self._session),
                access_token=self.config.oauth_token,
                client_id=self.config.client_id,
            )
        try:
            self._ws = await asyncio.wait_for(
                self._session.ws_connect(self.ws_url),
                timeout=EVENTSUB_CONNECT_TIMEOUT,
            )
        except (aiohttp.ClientError, OSError, TimeoutError) as e:
            raise EventSubConnectionError(
                f"WebSocket connection error: {str(e)}", operation_type="connect"
            ) from e

    async def handle_message(self, raw: str | bytes) -> bool:
        """Process one inbound message.

        Returns:
            bool: True to keep reading, False once the session has terminated.
        """
        try:
            message_type, envelope = parse_message(raw)
        except MessageProcessingError as e:
            logging.info(f"⚠️ Skipping EventSub message: {e}")
            return True

        if message_type == SESSION_WELCOME:
            await self._handle_welcome(envelope)
        elif message_type == SESSION_KEEPALIVE:
            logging.debug("💓 Received keepalive message")
        elif message_type == NOTIFICATION:
            self._handle_notification(envelope)
        elif message_type == REVOCATION:
            logging.info("🛑 Received revocation. Session revoked")
            self._set_state(SessionState.TERMINATED)
        elif message_type == SESSION_RECONNECT:
            # Redialing is left to the caller.
            logging.info("🔄 Received reconnect message. Closing session")
            self._set_state(SessionState.TERMINATED)
        else:
            logging.info(f"Received unhandled message type: {message_type}")

        return self.state is not SessionState.TERMINATED

    async def _handle_welcome(self, envelope: dict[str, Any]) -> None:
        if self.state is not SessionState.CONNECTING:
            logging.info(
                f"⚠️ Ignoring repeated session welcome in state {self.state.name}"
            )
            return
        try:
            session_id = extract_session_id(envelope)
        except MessageProcessingError as e:
            logging.info(f"⚠️ Skipping EventSub message: {e}")
            return

        logging.info(f"👋 Received session welcome. Session ID: {session_id}")
        self.session_id = session_id
        self._set_state(SessionState.WELCOMED)
        await self.register_subscriptions()

    async def register_subscriptions(self) -> None:
        """Register every fixed subscription type for the current session.

        Each failure is logged and the remaining types are still attempted.

        Raises:
            ValueError: If no registrar is available (``connect`` not called).
        """
        registrar = self.registrar
        if registrar is None:
            raise ValueError("subscription registrar required; call connect() first")
        self._set_state(SessionState.SUBSCRIBING)
        for sub_type in EVENTSUB_SUBSCRIPTION_TYPES:
            request = SubscriptionRequest(
                type=sub_type,
                broadcaster_user_id=self.config.channel_id,
                session_id=self.session_id,
            )
            self.registrations.append(request)
            try:
                await registrar.register(request)
            except SubscriptionError as e:
                logging.info(f"❌ {e}")
        self._set_state(SessionState.ACTIVE)

        if self.verbose:
            self.sink.write_banner(
                "Activity Feed", "Application is now ready to receive events."
            )

    def _handle_notification(self, envelope: dict[str, Any]) -> None:
        event = decode_notification(envelope)
        if isinstance(event, UnrecognizedNotification):
            if event.reason:
                logging.info(
                    f"⚠️ Dropped {event.subscription_type or 'unknown'} notification: "
                    f"{event.reason}"
                )
            return
        line = render_notification(event)
        if line is not None:
            self.sink.write_line(line)

    async def listen(self) -> None:
        """Receive messages until the session terminates or the socket fails."""
        if self._ws is None:
            return
        while self.state is not SessionState.TERMINATED:
            try:
                msg = await self._ws.receive()
            except (aiohttp.ClientError, OSError) as e:
                logging.info(f"Read error: {e}")
                self._set_state(SessionState.TERMINATED)
                break

            if msg.type in (aiohttp.WSMsgType.TEXT, aiohttp.WSMsgType.BINARY):
                await self.handle_message(msg.data)
            elif msg.type in _CLOSING_TYPES:
                logging.info(f"Read error: websocket {msg.type.name.lower()}")
                self._set_state(SessionState.TERMINATED)

    async def close(self) -> None:
        if self._ws is not None and not self._ws.closed:
            await self._ws.close()
        self._ws = None
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()

    async def run(self) -> None:
        """Connect and process the session until it terminates.

        Raises:
            EventSubConnectionError: If the initial dial fails.
        """
        try:
            await self.connect()
            await self.listen()
        finally:
            await self.close()
            logging.info("EventSub connection closed")
