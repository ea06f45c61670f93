"""Tests for the subscription manager."""

import asyncio
from typing import Any

import pytest

from blockwatch.core.address import StaticAddressDecoder
from blockwatch.core.exceptions import AddressDecodeError, TransportError
from blockwatch.core.transport import Connection, MessageCallback, Transport
from blockwatch.models.events import SubscriptionTarget
from blockwatch.services.block_handler import HandlerContext, StateMutatingBlockHandler
from blockwatch.services.classifier import EventDispatcher
from blockwatch.services.subscription import build_subscription_target, initialize_websocket
from tests.fakes import BLOCK_HASH, block_hash

ADDRESS = "ecash:qrmz0egsqxj35x5jmzf8szrszdeu72fx0uxgwk3r48"
SCRIPT_HASH = "f627e51001a51a1a92d8927808701373cf29267f"


class FakeConnection(Connection):
    def __init__(self, on_message: MessageCallback) -> None:
        self.on_message = on_message
        self.opened = asyncio.Event()
        self.closed = False

    @property
    def is_open(self) -> bool:
        return self.opened.is_set() and not self.closed

    async def close(self) -> None:
        self.closed = True


class FakeTransport(Transport):
    """Transport whose connection opens when the test says so."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.connection: FakeConnection | None = None
        self.subscriptions: list[tuple[str, str]] = []

    def open_connection(self, on_message: MessageCallback) -> FakeConnection:
        self.connection = FakeConnection(on_message)
        return self.connection

    async def wait_until_open(self, connection: Connection) -> None:
        if self.fail:
            raise TransportError("Failed to connect")
        await connection.opened.wait()

    async def subscribe(self, connection: Connection, script_type: str, script_hash: str) -> None:
        self.subscriptions.append((script_type, script_hash))

    async def deliver(self, message: Any) -> Any:
        return await self.connection.on_message(message)


@pytest.fixture
def target() -> SubscriptionTarget:
    return SubscriptionTarget(script_type="p2pkh", script_hash=SCRIPT_HASH)


@pytest.fixture
def dispatcher(context: HandlerContext) -> EventDispatcher:
    async def always_final(rpc, block_hash) -> bool:
        return True

    return EventDispatcher(context, StateMutatingBlockHandler(finality_check=always_final))


class TestBuildSubscriptionTarget:
    """Tests for build_subscription_target."""

    def test_decodes_address(self) -> None:
        """Test the address is decoded to a script target."""
        decoder = StaticAddressDecoder({ADDRESS: ("p2pkh", SCRIPT_HASH)})

        target = build_subscription_target(ADDRESS, decoder)

        assert target == SubscriptionTarget(script_type="p2pkh", script_hash=SCRIPT_HASH)

    def test_unknown_address(self) -> None:
        """Test an undecodable address raises."""
        with pytest.raises(AddressDecodeError):
            build_subscription_target("ecash:unknown", StaticAddressDecoder({}))


class TestInitializeWebsocket:
    """Tests for initialize_websocket."""

    @pytest.mark.asyncio
    async def test_subscribes_after_open(
        self, target: SubscriptionTarget, dispatcher: EventDispatcher
    ) -> None:
        """Test the subscription is only sent once the connection is open."""
        transport = FakeTransport()

        task = asyncio.create_task(initialize_websocket(transport, target, dispatcher))
        await asyncio.sleep(0.01)

        assert task.done() is False
        assert transport.subscriptions == []

        transport.connection.opened.set()
        connection = await task

        assert connection is transport.connection
        assert transport.subscriptions == [("p2pkh", SCRIPT_HASH)]

    @pytest.mark.asyncio
    async def test_messages_reach_dispatcher(
        self, target: SubscriptionTarget, dispatcher: EventDispatcher
    ) -> None:
        """Test inbound frames are classified and handled."""
        transport = FakeTransport()
        task = asyncio.create_task(initialize_websocket(transport, target, dispatcher))
        await asyncio.sleep(0)
        transport.connection.opened.set()
        await task

        mempool = await transport.deliver({"type": "AddedToMempool", "txid": block_hash(3)})
        block = await transport.deliver({"type": "BlockConnected", "blockHash": BLOCK_HASH})
        missing = await transport.deliver({"type": "BlockConnected", "blockHash": block_hash(404)})

        assert mempool is None
        assert block.processed_block_hash == BLOCK_HASH
        assert missing is False

    @pytest.mark.asyncio
    async def test_connect_failure_propagates(
        self, target: SubscriptionTarget, dispatcher: EventDispatcher
    ) -> None:
        """Test a transport that cannot connect fails startup."""
        transport = FakeTransport(fail=True)

        with pytest.raises(TransportError):
            await initialize_websocket(transport, target, dispatcher)

        assert transport.subscriptions == []
