"""EventSub subscription registration over the Helix API."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from ..api.twitch import TwitchAPI
from ..constants import EVENTSUB_SUBSCRIPTIONS_ENDPOINT
from ..errors.eventsub import SubscriptionError
from .models import SubscriptionRequest

SUCCESS_STATUSES = frozenset({200, 202})


class EventSubscriptionRegistrar:
    """Registers EventSub subscriptions for a WebSocket session.

    Each call performs one authenticated POST to the Helix subscriptions
    endpoint. Nothing is retried or remembered; the caller decides what to
    do with a failure.

    Attributes:
        api (TwitchAPI): Helix client used for the POST.
        access_token (str): Bearer token.
        client_id (str): Twitch application client ID.
    """

    def __init__(self, api: TwitchAPI, access_token: str, client_id: str) -> None:
        self.api = api
        self.access_token = access_token
        self.client_id = client_id

    async def register(self, request: SubscriptionRequest) -> Any:
        """Register one subscription.

        Args:
            request (SubscriptionRequest): The subscription to create.

        Returns:
            Any: The decoded response body of the successful request.

        Raises:
            SubscriptionError: On a non-200/202 status, a transport failure or an
                undecodable response.
        """
        try:
            data, status, _ = await self.api.request(
                "POST",
                EVENTSUB_SUBSCRIPTIONS_ENDPOINT,
                access_token=self.access_token,
                client_id=self.client_id,
                json_body=request.to_body(),
            )
        except (aiohttp.ClientError, TimeoutError, OSError, ValueError) as e:
            raise SubscriptionError(
                f"Error making request for {request.type}: {str(e)}",
                subscription_type=request.type,
            ) from e

        if status not in SUCCESS_STATUSES:
            raise SubscriptionError(
                f"Failed to subscribe to {request.type}. Status: {status}, Body: {data}",
                status=status,
                subscription_type=request.type,
            )

        logging.info(f"✅ Successfully subscribed to {request.type}")
        return data
