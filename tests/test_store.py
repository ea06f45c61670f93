"""Tests for state stores."""

import pytest

from blockwatch.models.block import ServerState
from blockwatch.store.memory import MemoryStateStore


class TestMemoryStateStore:
    """Tests for MemoryStateStore."""

    @pytest.mark.asyncio
    async def test_initial_state(self, store: MemoryStateStore) -> None:
        """Test a new store reports nothing processed."""
        state = await store.get_server_state()

        assert state.processed_block_height == -1
        assert state.processed_block_hash is None
        assert state.processed_tx_count == 0

    @pytest.mark.asyncio
    async def test_update_and_get(self, store: MemoryStateStore) -> None:
        """Test basic update and get operations."""
        new_state = ServerState(
            processed_block_height=800_000,
            processed_block_hash="ab" * 32,
            processed_tx_count=12,
        )

        assert await store.update_server_state(new_state) is True
        assert await store.get_server_state() == new_state

    @pytest.mark.asyncio
    async def test_returned_state_is_a_copy(self, store: MemoryStateStore) -> None:
        """Test callers cannot mutate the stored state in place."""
        state = await store.get_server_state()
        state.processed_block_height = 5

        assert (await store.get_server_state()).processed_block_height == -1

    @pytest.mark.asyncio
    async def test_initial_state_argument(self) -> None:
        """Test starting from a given state."""
        store = MemoryStateStore(ServerState(processed_block_height=10))

        assert (await store.get_server_state()).processed_block_height == 10

    @pytest.mark.asyncio
    async def test_close_resets(self, store: MemoryStateStore) -> None:
        """Test close discards the state."""
        await store.update_server_state(ServerState(processed_block_height=1))
        await store.close()

        assert await store.get_server_state() == ServerState()

    @pytest.mark.asyncio
    async def test_ping(self, store: MemoryStateStore) -> None:
        """Test ping operation."""
        assert await store.ping() is True
