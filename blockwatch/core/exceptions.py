"""Custom exceptions for blockwatch."""


class BlockwatchError(Exception):
    """Base exception for all blockwatch errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or "BLOCKWATCH_ERROR"
        super().__init__(self.message)


class TransportError(BlockwatchError):
    """Raised when the websocket transport cannot connect or send."""

    def __init__(self, message: str, url: str | None = None) -> None:
        self.url = url
        super().__init__(message, "TRANSPORT_ERROR")


class IndexerError(BlockwatchError):
    """Raised when the indexer returns an error or cannot be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message, "INDEXER_ERROR")


class BlockNotFoundError(IndexerError):
    """Raised when the indexer does not know a block hash."""

    def __init__(self, block_hash: str) -> None:
        self.block_hash = block_hash
        super().__init__(f"Block {block_hash} not found", 404)
        self.code = "BLOCK_NOT_FOUND"


class NotifierError(BlockwatchError):
    """Raised when a notification cannot be delivered."""

    def __init__(self, message: str, channel_id: str | None = None) -> None:
        self.channel_id = channel_id
        super().__init__(message, "NOTIFIER_ERROR")


class AddressDecodeError(BlockwatchError):
    """Raised when an address cannot be decoded to a script."""

    def __init__(self, address: str) -> None:
        self.address = address
        super().__init__(f"Cannot decode address: {address}", "ADDRESS_DECODE_ERROR")
