"""Handlers run for every BlockConnected event, one block at a time."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, NamedTuple

from blockwatch.core.indexer import IndexerClient
from blockwatch.core.notifier import Notifier
from blockwatch.core.store import StateStore
from blockwatch.models.block import BlockDetails, ParsedBlock, ServerState
from blockwatch.models.rpc import RpcConfig
from blockwatch.services.finality import is_final_block

logger = logging.getLogger(__name__)


class HandlerContext(NamedTuple):
    """Collaborators handed to the block handler."""

    indexer: IndexerClient
    store: StateStore | None
    notifier: Notifier | None
    channel_id: str
    rpc: RpcConfig | None


BlockProcessor = Callable[[BlockDetails, ServerState, HandlerContext], Awaitable[Any]]
FinalityCheck = Callable[[RpcConfig, str], Awaitable[bool]]


def parse_block(details: BlockDetails) -> ParsedBlock:
    """Summarize indexer block details for messaging."""
    return ParsedBlock.from_details(details)


def get_block_message(parsed: ParsedBlock, explorer_url: str) -> str:
    """Build a Markdown message announcing a block."""
    lines = [
        f"[{parsed.height:,}]({explorer_url}/block/{parsed.hash})",
        "",
        f"{parsed.hash}",
        "",
        f"{parsed.num_txs} tx{'' if parsed.num_txs == 1 else 's'} | {parsed.size:,} bytes",
        f"{parsed.timestamp:%Y-%m-%d %H:%M:%S} UTC",
    ]
    if parsed.coinbase_scripts:
        lines.append("")
        lines.append(f"Coinbase pays {len(parsed.coinbase_scripts)} output(s)")
    return "\n".join(lines)


def get_fallback_message(block_hash: str, explorer_url: str) -> str:
    """Message sent when block details are unavailable."""
    return (
        "New Block Found\n"
        "\n"
        f"{block_hash}\n"
        "\n"
        f"[explorer]({explorer_url}/block/{block_hash})"
    )


async def record_processed_block(
    block: BlockDetails, state: ServerState, context: HandlerContext
) -> ServerState:
    """Default processor: persist the block as the latest processed one."""
    new_state = ServerState(
        processed_block_height=block.block_info.height,
        processed_block_hash=block.block_info.hash,
        processed_tx_count=state.processed_tx_count + len(block.txs),
    )
    await context.store.update_server_state(new_state)
    logger.info(
        f"Processed block {new_state.processed_block_hash} "
        f"at height {new_state.processed_block_height}"
    )
    return new_state


class BlockHandler(ABC):
    """Body of the BlockConnected critical section."""

    @abstractmethod
    async def handle(self, context: HandlerContext, block_hash: str) -> Any:
        """
        Handle one connected block.

        The caller holds the block gate. Returns a result value, or False on
        failure. May raise; the caller logs and converts exceptions to False.
        """
        ...


class StateMutatingBlockHandler(BlockHandler):
    """
    Processes finalized blocks into persisted state.

    Blocks not yet finalized by avalanche are skipped and reported as False;
    a later BlockConnected for the same hash may be handled again.
    """

    def __init__(
        self,
        processor: BlockProcessor = record_processed_block,
        finality_check: FinalityCheck = is_final_block,
    ) -> None:
        self._processor = processor
        self._finality_check = finality_check

    async def handle(self, context: HandlerContext, block_hash: str) -> Any:
        block = await context.indexer.get_block(block_hash)

        if context.rpc is not None:
            if not await self._finality_check(context.rpc, block_hash):
                logger.info(f"Block {block_hash} is not yet finalized, skipping")
                return False

        state = await context.store.get_server_state()
        return await self._processor(block, state, context)


class NotifyOnlyBlockHandler(BlockHandler):
    """Announces each block on the notification channel."""

    def __init__(
        self, explorer_url: str, msg_options: dict[str, Any] | None = None
    ) -> None:
        self._explorer_url = explorer_url.rstrip("/")
        self._msg_options = msg_options or {}

    async def handle(self, context: HandlerContext, block_hash: str) -> Any:
        try:
            block = await context.indexer.get_block(block_hash)
            message = get_block_message(parse_block(block), self._explorer_url)
        except Exception as e:
            logger.error(f"Error building message for block {block_hash}: {e}")
            message = get_fallback_message(block_hash, self._explorer_url)

        try:
            return await context.notifier.send(
                context.channel_id, message, self._msg_options
            )
        except Exception as e:
            logger.error(
                f"Error sending message for block {block_hash} "
                f"(channel_id={context.channel_id}, options={self._msg_options}): {e}"
            )
        return False
