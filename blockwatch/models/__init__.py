"""Domain models package."""

from blockwatch.models.api import FinalityResponse, HealthResponse
from blockwatch.models.block import (
    BlockDetails,
    BlockInfo,
    BlockTx,
    ParsedBlock,
    ServerState,
    TxOutput,
)
from blockwatch.models.events import (
    AddedToMempool,
    BlockConnected,
    Confirmed,
    EventEnvelope,
    SubscriptionTarget,
    UnknownEvent,
)
from blockwatch.models.rpc import RpcConfig, RpcError, RpcResponse

__all__ = [
    "AddedToMempool",
    "BlockConnected",
    "BlockDetails",
    "BlockInfo",
    "BlockTx",
    "Confirmed",
    "EventEnvelope",
    "FinalityResponse",
    "HealthResponse",
    "ParsedBlock",
    "RpcConfig",
    "RpcError",
    "RpcResponse",
    "ServerState",
    "SubscriptionTarget",
    "TxOutput",
    "UnknownEvent",
]
