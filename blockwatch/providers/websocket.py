"""Chronik websocket transport."""

import asyncio
import json
import logging
from typing import Any

import websockets
from websockets.exceptions import WebSocketException

from blockwatch.core.exceptions import TransportError
from blockwatch.core.transport import Connection, MessageCallback, Transport

logger = logging.getLogger(__name__)


class WebsocketConnection(Connection):
    """
    One websocket connection to chronik.

    Each inbound frame is handed to the callback in its own task, started in
    arrival order. Frames are JSON decoded when possible.
    """

    def __init__(self, url: str, on_message: MessageCallback) -> None:
        self._url = url
        self._on_message = on_message
        self._ws: Any = None
        self._opened = asyncio.Event()
        self._reader: asyncio.Task | None = None
        self._tasks: set[asyncio.Task] = set()

    @property
    def url(self) -> str:
        return self._url

    @property
    def is_open(self) -> bool:
        return self._opened.is_set() and self._reader is not None and not self._reader.done()

    def start(self) -> None:
        """Start connecting in the background."""
        if self._reader is None:
            self._reader = asyncio.create_task(self._run())

    async def _run(self) -> None:
        async with websockets.connect(self._url) as ws:
            self._ws = ws
            self._opened.set()
            try:
                async for frame in ws:
                    self._dispatch(frame)
            except WebSocketException as e:
                logger.warning(f"Websocket closed: {self._url}: {e}")
                return
        logger.warning(f"Websocket closed: {self._url}")

    def _dispatch(self, frame: str | bytes) -> None:
        try:
            message = json.loads(frame)
        except ValueError:
            message = frame
        task = asyncio.create_task(self._on_message(message))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def wait_until_open(self) -> None:
        if self._reader is None:
            raise TransportError("Connection was never started", self._url)
        opened = asyncio.create_task(self._opened.wait())
        try:
            await asyncio.wait({opened, self._reader}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            if not opened.done():
                opened.cancel()
        if not self._opened.is_set():
            error = self._reader.exception() if not self._reader.cancelled() else None
            raise TransportError(f"Failed to connect to {self._url}: {error}", self._url)

    async def send_json(self, payload: dict[str, Any]) -> None:
        if self._ws is None:
            raise TransportError("Websocket is not open", self._url)
        try:
            await self._ws.send(json.dumps(payload))
        except WebSocketException as e:
            raise TransportError(f"Websocket send failed: {e}", self._url) from e

    async def close(self) -> None:
        if self._ws is not None:
            await self._ws.close()
        if self._reader is not None and not self._reader.done():
            self._reader.cancel()
            try:
                await self._reader
            except asyncio.CancelledError:
                pass


class WebsocketTransport(Transport):
    """Transport speaking JSON frames over a websocket."""

    def __init__(self, url: str) -> None:
        self._url = url

    def open_connection(self, on_message: MessageCallback) -> WebsocketConnection:
        connection = WebsocketConnection(self._url, on_message)
        connection.start()
        logger.info(f"Connecting to websocket {self._url}")
        return connection

    async def wait_until_open(self, connection: Connection) -> None:
        await self._as_websocket(connection).wait_until_open()

    async def subscribe(
        self, connection: Connection, script_type: str, script_hash: str
    ) -> None:
        await self._as_websocket(connection).send_json(
            {
                "type": "subscribe",
                "scriptType": script_type,
                "scriptPayload": script_hash,
            }
        )

    @staticmethod
    def _as_websocket(connection: Connection) -> WebsocketConnection:
        if not isinstance(connection, WebsocketConnection):
            raise TransportError(f"Unsupported connection type: {type(connection).__name__}")
        return connection
