"""In-memory state store implementation."""

import asyncio
import logging

from blockwatch.core.store import StateStore
from blockwatch.models.block import ServerState

logger = logging.getLogger(__name__)


class MemoryStateStore(StateStore):
    """In-memory server state. Lost on restart; for development/testing only."""

    def __init__(self, initial_state: ServerState | None = None) -> None:
        """
        Initialize memory store.

        Args:
            initial_state: State to start from. Defaults to nothing processed.
        """
        self._state = initial_state or ServerState()
        self._lock = asyncio.Lock()

    async def get_server_state(self) -> ServerState:
        """Return a copy of the stored state."""
        async with self._lock:
            return self._state.model_copy()

    async def update_server_state(self, state: ServerState) -> bool:
        """Replace the stored state."""
        async with self._lock:
            self._state = state.model_copy()
            logger.debug(f"Server state updated: {self._state}")
            return True

    async def close(self) -> None:
        """Reset to an empty state."""
        async with self._lock:
            self._state = ServerState()

    async def ping(self) -> bool:
        """Memory store is always available."""
        return True
