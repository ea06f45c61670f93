"""Abstract notification channel interface."""

from abc import ABC, abstractmethod
from typing import Any


class Notifier(ABC):
    """Abstract base class for outbound message delivery."""

    @abstractmethod
    async def send(
        self, channel_id: str, message: str, options: dict[str, Any] | None = None
    ) -> Any:
        """
        Send a message to a channel.

        Args:
            channel_id: Destination channel or chat identifier.
            message: Message text.
            options: Channel specific formatting options.

        Returns:
            The delivered message as reported by the channel.

        Raises:
            NotifierError: If the message could not be delivered.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Close the notifier and release resources."""
        ...
