"""State store implementations."""

from blockwatch.store.memory import MemoryStateStore

__all__ = ["MemoryStateStore"]
