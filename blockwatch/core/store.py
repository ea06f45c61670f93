"""Abstract state store interface."""

from abc import ABC, abstractmethod

from blockwatch.models.block import ServerState


class StateStore(ABC):
    """Abstract base class for server state persistence."""

    @abstractmethod
    async def get_server_state(self) -> ServerState:
        """
        Retrieve the current server state.

        Returns:
            The stored state, or a fresh ServerState if nothing was stored yet.
        """
        ...

    @abstractmethod
    async def update_server_state(self, state: ServerState) -> bool:
        """
        Replace the stored server state.

        Args:
            state: The new state.

        Returns:
            True if the state was stored successfully.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Close the store connection."""
        ...

    @abstractmethod
    async def ping(self) -> bool:
        """
        Check if the store is healthy.

        Returns:
            True if the store is responsive.
        """
        ...
