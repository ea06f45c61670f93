"""Classification and dispatch of chronik websocket messages."""

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from blockwatch.constants import BLOCK_CONNECTED_LOCK_KEY, EventType
from blockwatch.models.events import (
    AddedToMempool,
    BlockConnected,
    Confirmed,
    EventEnvelope,
    UnknownEvent,
)
from blockwatch.services.block_handler import BlockHandler, HandlerContext
from blockwatch.services.gate import ConcurrencyGate

logger = logging.getLogger(__name__)

_EVENT_MODELS: dict[str, type[BlockConnected | AddedToMempool | Confirmed]] = {
    EventType.BLOCK_CONNECTED.value: BlockConnected,
    EventType.ADDED_TO_MEMPOOL.value: AddedToMempool,
    EventType.CONFIRMED.value: Confirmed,
}


def classify(raw: Any) -> EventEnvelope:
    """
    Turn a raw websocket message into an event envelope.

    Total: anything that is not a well-formed known event, including bad
    JSON and known types with missing or malformed fields, is an UnknownEvent.
    """
    message = raw
    if isinstance(raw, (str, bytes)):
        try:
            message = json.loads(raw)
        except ValueError:
            return UnknownEvent(raw=raw)

    if not isinstance(message, Mapping):
        return UnknownEvent(raw=message)

    msg_type = message.get("type")
    model = _EVENT_MODELS.get(msg_type) if isinstance(msg_type, str) else None
    if model is None:
        return UnknownEvent(type=msg_type if isinstance(msg_type, str) else None, raw=dict(message))

    try:
        return model.model_validate(dict(message))
    except ValidationError as e:
        logger.warning(f"Malformed {msg_type} message: {e.error_count()} validation error(s)")
        return UnknownEvent(type=msg_type, raw=dict(message))


class EventDispatcher:
    """
    Routes classified events to their handling.

    BlockConnected events go through a single gate key so only one block is
    handled at a time, in arrival order. Mempool and confirmed-tx events are
    only logged.
    """

    def __init__(
        self,
        context: HandlerContext,
        block_handler: BlockHandler,
        gate: ConcurrencyGate | None = None,
    ) -> None:
        self._context = context
        self._block_handler = block_handler
        self._gate = gate or ConcurrencyGate()

    @property
    def gate(self) -> ConcurrencyGate:
        """The gate serializing block handling."""
        return self._gate

    async def parse_websocket_message(self, raw: Any) -> Any:
        """
        Classify and handle one websocket message.

        Never raises. Returns the block handler result for BlockConnected
        (False on failure) and None for every other kind.
        """
        event = classify(raw)
        logger.info(f"Websocket message received, type: {event.type}")

        if isinstance(event, BlockConnected):
            logger.info(f"New block found: {event.block_hash}")
            return await self._handle_block_connected(event.block_hash)
        elif isinstance(event, AddedToMempool):
            logger.info(f"New tx: {event.txid}")
        elif isinstance(event, Confirmed):
            logger.info(f"New confirmed tx: {event.txid}")
        else:
            logger.info(f"New websocket message of unknown type: {event.raw!r}")
        return None

    async def _handle_block_connected(self, block_hash: str) -> Any:
        try:
            async with self._gate.acquire(BLOCK_CONNECTED_LOCK_KEY):
                return await self._block_handler.handle(self._context, block_hash)
        except Exception as e:
            logger.exception(f"Error handling block {block_hash}: {e}")
            return False
