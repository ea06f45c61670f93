"""Chronik indexer HTTP client."""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from blockwatch.core.exceptions import BlockNotFoundError, IndexerError
from blockwatch.core.indexer import IndexerClient
from blockwatch.models.block import BlockDetails

logger = logging.getLogger(__name__)


class ChronikClient(IndexerClient):
    """
    Chronik REST client.

    Blocks are requested as JSON from ``{base_url}/block/{hash}``.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize Chronik client.

        Args:
            base_url: Base URL of the chronik instance.
            timeout: Request timeout in seconds.
            client: Optional preconfigured HTTP client.
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client = client

    @property
    def name(self) -> str:
        """Indexer name identifier."""
        return "chronik"

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                headers={
                    "Accept": "application/json",
                    "User-Agent": "blockwatch/1.0",
                },
            )
        return self._client

    async def _request(self, path: str) -> dict[str, Any]:
        url = f"{self._base_url}/{path.lstrip('/')}"
        logger.debug(f"[Chronik] GET {url}")

        client = await self._get_client()
        try:
            response = await client.get(url)
        except httpx.TimeoutException as e:
            logger.warning(f"[Chronik] Request timeout after {self._timeout}s: {url}")
            raise IndexerError(f"Chronik timeout: {url}") from e
        except httpx.HTTPError as e:
            logger.warning(f"[Chronik] Request failed: {e}")
            raise IndexerError(f"Chronik request failed: {e}") from e

        if response.status_code == 404:
            raise IndexerError(f"Not found: {url}", 404)
        if response.status_code >= 400:
            raise IndexerError(
                f"Chronik returned HTTP {response.status_code}", response.status_code
            )

        try:
            return response.json()
        except ValueError as e:
            raise IndexerError(f"Invalid JSON from chronik: {url}") from e

    async def get_block(self, block_hash: str) -> BlockDetails:
        """Fetch a block by hash."""
        try:
            data = await self._request(f"block/{block_hash}")
        except IndexerError as e:
            if e.status_code == 404:
                raise BlockNotFoundError(block_hash) from e
            raise

        try:
            return BlockDetails.model_validate(data)
        except ValidationError as e:
            raise IndexerError(f"Unexpected block format for {block_hash}: {e}") from e

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
