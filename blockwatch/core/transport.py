"""Abstract websocket transport interface."""

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable

MessageCallback = Callable[[Any], Awaitable[Any]]


class Connection(ABC):
    """Handle to a live transport connection."""

    @property
    @abstractmethod
    def is_open(self) -> bool:
        """True once the connection is ready for subscriptions."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Close the connection."""
        ...


class Transport(ABC):
    """Abstract base class for indexer event feeds."""

    @abstractmethod
    def open_connection(self, on_message: MessageCallback) -> Connection:
        """
        Start connecting and register the message callback.

        Args:
            on_message: Awaited for every inbound message.

        Returns:
            A connection handle, possibly not yet open.
        """
        ...

    @abstractmethod
    async def wait_until_open(self, connection: Connection) -> None:
        """
        Suspend until the connection is open.

        Raises:
            TransportError: If the connection attempt failed.
        """
        ...

    @abstractmethod
    async def subscribe(
        self, connection: Connection, script_type: str, script_hash: str
    ) -> None:
        """Subscribe the connection to events for a script."""
        ...
