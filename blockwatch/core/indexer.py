"""Abstract blockchain indexer interface."""

from abc import ABC, abstractmethod

from blockwatch.models.block import BlockDetails


class IndexerClient(ABC):
    """Abstract base class for block indexer clients."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Indexer name identifier."""
        ...

    @abstractmethod
    async def get_block(self, block_hash: str) -> BlockDetails:
        """
        Fetch block details from the indexer.

        Args:
            block_hash: Block hash (64 hex chars).

        Returns:
            Normalized BlockDetails object.

        Raises:
            BlockNotFoundError: If the block is unknown to the indexer.
            IndexerError: If the indexer cannot be reached.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Close the client and release resources."""
        ...
