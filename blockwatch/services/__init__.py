"""Services package."""

from blockwatch.services.block_handler import (
    BlockHandler,
    HandlerContext,
    NotifyOnlyBlockHandler,
    StateMutatingBlockHandler,
)
from blockwatch.services.classifier import EventDispatcher, classify
from blockwatch.services.finality import is_final_block
from blockwatch.services.gate import ConcurrencyGate
from blockwatch.services.subscription import (
    build_subscription_target,
    initialize_websocket,
)

__all__ = [
    "BlockHandler",
    "ConcurrencyGate",
    "EventDispatcher",
    "HandlerContext",
    "NotifyOnlyBlockHandler",
    "StateMutatingBlockHandler",
    "build_subscription_target",
    "classify",
    "initialize_websocket",
    "is_final_block",
]
