"""Indexer block models."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class TxOutput(BaseModel):
    """Transaction output as returned by the indexer."""

    model_config = ConfigDict(populate_by_name=True)

    value: int = 0
    output_script: str = Field(default="", alias="outputScript")


class BlockTx(BaseModel):
    """Transaction included in a block."""

    model_config = ConfigDict(populate_by_name=True)

    txid: str
    outputs: list[TxOutput] = Field(default_factory=list)
    is_coinbase: bool = Field(default=False, alias="isCoinbase")


class BlockInfo(BaseModel):
    """Block header summary."""

    model_config = ConfigDict(populate_by_name=True)

    hash: str
    prev_hash: str | None = Field(default=None, alias="prevHash")
    height: int
    n_bits: int | None = Field(default=None, alias="nBits")
    timestamp: int = 0
    block_size: int = Field(default=0, alias="blockSize")
    num_txs: int = Field(default=0, alias="numTxs")


class BlockDetails(BaseModel):
    """Block as returned by the indexer."""

    model_config = ConfigDict(populate_by_name=True)

    block_info: BlockInfo = Field(alias="blockInfo")
    txs: list[BlockTx] = Field(default_factory=list)


class ParsedBlock(BaseModel):
    """Summary of a block used for messages."""

    hash: str
    height: int
    timestamp: datetime
    num_txs: int
    size: int
    coinbase_scripts: list[str] = Field(default_factory=list)
    coinbase_value: int = 0

    @classmethod
    def from_details(cls, details: BlockDetails) -> "ParsedBlock":
        """Create a ParsedBlock from indexer block details."""
        info = details.block_info
        coinbase = next((tx for tx in details.txs if tx.is_coinbase), None)
        scripts: list[str] = []
        value = 0
        if coinbase is not None:
            for output in coinbase.outputs:
                value += output.value
                if output.output_script and output.value > 0:
                    scripts.append(output.output_script)
        return cls(
            hash=info.hash,
            height=info.height,
            timestamp=datetime.fromtimestamp(info.timestamp, tz=timezone.utc),
            num_txs=info.num_txs or len(details.txs),
            size=info.block_size,
            coinbase_scripts=scripts,
            coinbase_value=value,
        )


class ServerState(BaseModel):
    """Processing state persisted between blocks."""

    processed_block_height: int = -1
    processed_block_hash: str | None = None
    # Transactions across all processed blocks, coinbase included
    processed_tx_count: int = 0
