"""Telegram Bot API notifier."""

import logging
from typing import Any

import httpx

from blockwatch.core.exceptions import NotifierError
from blockwatch.core.notifier import Notifier

logger = logging.getLogger(__name__)


class TelegramNotifier(Notifier):
    """Sends messages through the Telegram Bot API ``sendMessage`` method."""

    def __init__(
        self,
        bot_token: str,
        api_url: str = "https://api.telegram.org",
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._bot_token = bot_token
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._client = client

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self._timeout))
        return self._client

    async def send(
        self, channel_id: str, message: str, options: dict[str, Any] | None = None
    ) -> Any:
        """Send a message and return the Telegram message object."""
        payload: dict[str, Any] = {"chat_id": channel_id, "text": message}
        payload.update(options or {})

        client = await self._get_client()
        url = f"{self._api_url}/bot{self._bot_token}/sendMessage"
        try:
            response = await client.post(url, json=payload)
            body = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise NotifierError(f"Telegram request failed: {e}", channel_id) from e

        if not body.get("ok"):
            description = body.get("description", f"HTTP {response.status_code}")
            raise NotifierError(f"Telegram rejected message: {description}", channel_id)

        logger.info(f"[Telegram] Message sent to {channel_id}")
        return body.get("result")

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
