"""Core module for base interfaces and abstractions."""

from blockwatch.core.address import AddressDecoder, StaticAddressDecoder
from blockwatch.core.exceptions import (
    AddressDecodeError,
    BlockNotFoundError,
    BlockwatchError,
    IndexerError,
    NotifierError,
    TransportError,
)
from blockwatch.core.indexer import IndexerClient
from blockwatch.core.notifier import Notifier
from blockwatch.core.store import StateStore
from blockwatch.core.transport import Connection, Transport

__all__ = [
    "AddressDecodeError",
    "AddressDecoder",
    "BlockNotFoundError",
    "BlockwatchError",
    "Connection",
    "IndexerClient",
    "IndexerError",
    "Notifier",
    "NotifierError",
    "StateStore",
    "StaticAddressDecoder",
    "Transport",
    "TransportError",
]
