"""Thin asynchronous Twitch Helix API client.

Currently wraps only what the EventSub registrar needs. If new endpoints are
needed, prefer adding focused methods instead of sprinkling raw request
logic across modules.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import aiohttp

from ..constants import HELIX_BASE_URL, HELIX_REQUEST_TIMEOUT


class TwitchAPI:
    """Asynchronous client for Twitch Helix API endpoints.

    Attributes:
        BASE_URL (str): The base URL for Twitch Helix API.
    """

    BASE_URL = HELIX_BASE_URL

    def __init__(self, session: aiohttp.ClientSession):
        """Initialize the TwitchAPI client.

        Args:
            session (aiohttp.ClientSession): The aiohttp session to use for requests.

        Raises:
            ValueError: If session is not provided.
        """
        if not session:
            raise ValueError("aiohttp session required")
        self._session = session

    @staticmethod
    def build_headers(access_token: str, client_id: str) -> dict[str, str]:
        return {
            "Client-ID": client_id,
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/json",
        }

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        access_token: str,
        client_id: str,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> tuple[Any, int, dict[str, str]]:
        """Perform a raw HTTP request to the Twitch Helix API.

        Args:
            method (str): HTTP method (e.g., 'GET', 'POST').
            endpoint (str): API endpoint path (without base URL).
            access_token (str): OAuth access token for authorization.
            client_id (str): Twitch application client ID.
            params (dict[str, Any] | None): Query parameters for the request.
            json_body (dict[str, Any] | None): JSON body for the request.

        Returns:
            tuple[Any, int, dict[str, str]]: The decoded response body (the raw
            text when it is not JSON, ``{}`` when empty), the HTTP status code
            and the response headers.

        Raises:
            aiohttp.ClientError: If the network request fails.
            TimeoutError: If the request times out.
        """
        url = f"{self.BASE_URL}/{endpoint}"
        async with self._session.request(
            method,
            url,
            headers=self.build_headers(access_token, client_id),
            params=params,
            json=json_body,
            timeout=aiohttp.ClientTimeout(total=HELIX_REQUEST_TIMEOUT),
        ) as resp:
            logging.debug(
                f"Twitch API response: status={resp.status}, "
                f"content-type={resp.headers.get('content-type', 'none')}, url={url}"
            )
            if resp.status == 204:
                # 204 No Content has no body, so don't try to parse JSON
                data: Any = {}
            else:
                text = await resp.text(errors="replace")
                try:
                    data = json.loads(text) if text else {}
                except ValueError:
                    data = text
            return data, resp.status, dict(resp.headers)
