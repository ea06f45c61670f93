"""Test configuration and fixtures."""

from typing import Callable

import pytest

from blockwatch.core.exceptions import NotifierError
from blockwatch.models.block import BlockDetails
from blockwatch.models.rpc import RpcConfig
from blockwatch.services.block_handler import HandlerContext
from blockwatch.store.memory import MemoryStateStore
from tests.fakes import BLOCK_HASH, FakeIndexer, FakeNotifier, make_block_details


@pytest.fixture
def make_block() -> Callable[..., BlockDetails]:
    """Factory for block details."""
    return make_block_details


@pytest.fixture
def indexer() -> FakeIndexer:
    """Indexer that knows BLOCK_HASH."""
    return FakeIndexer({BLOCK_HASH: make_block_details()})


@pytest.fixture
def notifier() -> FakeNotifier:
    """Recording notifier."""
    return FakeNotifier()


@pytest.fixture
def failing_notifier() -> FakeNotifier:
    """Notifier whose sends always fail."""
    fake = FakeNotifier()
    fake.error = NotifierError("Telegram rejected message: chat not found", "-100")
    return fake


@pytest.fixture
def store() -> MemoryStateStore:
    """Fresh in-memory state store."""
    return MemoryStateStore()


@pytest.fixture
def rpc_config() -> RpcConfig:
    """Avalanche RPC config with the default timeout."""
    return RpcConfig(url="http://node.test:8332", user="rpcuser", password="rpcpass")


@pytest.fixture
def context(
    indexer: FakeIndexer,
    store: MemoryStateStore,
    notifier: FakeNotifier,
    rpc_config: RpcConfig,
) -> HandlerContext:
    """Handler context wired to fakes."""
    return HandlerContext(
        indexer=indexer,
        store=store,
        notifier=notifier,
        channel_id="-1001234567890",
        rpc=rpc_config,
    )
