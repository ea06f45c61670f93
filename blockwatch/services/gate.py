"""Named mutual exclusion for serialized event handling."""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

logger = logging.getLogger(__name__)


class ConcurrencyGate:
    """
    Keyed async lock.

    One holder per key at any time; waiters on a key are served in the order
    they called ``acquire``. Keys never interfere with each other. Locks are
    created lazily and live as long as the gate.
    """

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}

    def _lock_for(self, key: str) -> asyncio.Lock:
        lock = self._locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[key] = lock
        return lock

    @asynccontextmanager
    async def acquire(self, key: str) -> AsyncIterator[None]:
        """Hold ``key`` for the duration of the ``async with`` block."""
        lock = self._lock_for(key)
        if lock.locked():
            logger.debug(f"Waiting for lock '{key}'")
        async with lock:
            yield

    def locked(self, key: str) -> bool:
        """Check whether ``key`` is currently held."""
        lock = self._locks.get(key)
        return lock is not None and lock.locked()
