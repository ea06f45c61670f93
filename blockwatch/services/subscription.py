"""Websocket subscription lifecycle."""

import logging

from blockwatch.core.address import AddressDecoder
from blockwatch.core.transport import Connection, Transport
from blockwatch.models.events import SubscriptionTarget
from blockwatch.services.classifier import EventDispatcher

logger = logging.getLogger(__name__)


def build_subscription_target(address: str, decoder: AddressDecoder) -> SubscriptionTarget:
    """Decode the watched address once into the script to subscribe to."""
    script_type, script_hash = decoder.decode(address)
    return SubscriptionTarget(script_type=script_type, script_hash=script_hash)


async def initialize_websocket(
    transport: Transport,
    target: SubscriptionTarget,
    dispatcher: EventDispatcher,
) -> Connection:
    """
    Connect to the indexer feed and subscribe to a script.

    Every inbound message is passed to ``dispatcher``. Waits for the
    connection to open without a timeout.

    Raises:
        TransportError: If the transport fails to connect.
    """
    connection = transport.open_connection(dispatcher.parse_websocket_message)

    await transport.wait_until_open(connection)
    logger.info("Connected to websocket")

    await transport.subscribe(connection, target.script_type, target.script_hash)
    logger.info(f"Subscribed to {target.script_type} {target.script_hash}")
    return connection
