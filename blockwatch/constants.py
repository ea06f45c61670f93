"""Application constants."""

from enum import Enum


class EventType(str, Enum):
    """Chronik websocket message types."""

    BLOCK_CONNECTED = "BlockConnected"
    ADDED_TO_MEMPOOL = "AddedToMempool"
    CONFIRMED = "Confirmed"


class BlockHandlerStrategy(str, Enum):
    """Available block handler configurations."""

    STATE = "state"
    NOTIFY = "notify"


# Only one block may be handled at a time; all BlockConnected events share this key
BLOCK_CONNECTED_LOCK_KEY = "block_connected"

ISFINALBLOCK_METHOD = "isfinalblock"
DEFAULT_RPC_TIMEOUT = 1.0

# 64 hex chars, the length of a block hash or txid
HASH_PATTERN = r"^[0-9a-fA-F]{64}$"
