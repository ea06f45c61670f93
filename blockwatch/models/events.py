"""Chronik websocket event envelopes."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from blockwatch.constants import HASH_PATTERN


class BlockConnected(BaseModel):
    """A new block was connected to the chain."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["BlockConnected"] = "BlockConnected"
    block_hash: str = Field(alias="blockHash", pattern=HASH_PATTERN)


class AddedToMempool(BaseModel):
    """A transaction touching the subscribed script entered the mempool."""

    model_config = ConfigDict(frozen=True)

    type: Literal["AddedToMempool"] = "AddedToMempool"
    txid: str = Field(pattern=HASH_PATTERN)


class Confirmed(BaseModel):
    """A transaction touching the subscribed script was mined."""

    model_config = ConfigDict(frozen=True)

    type: Literal["Confirmed"] = "Confirmed"
    txid: str = Field(pattern=HASH_PATTERN)


class UnknownEvent(BaseModel):
    """Anything else, kept verbatim for logging."""

    model_config = ConfigDict(frozen=True)

    type: str | None = None
    raw: Any = None


EventEnvelope = BlockConnected | AddedToMempool | Confirmed | UnknownEvent


class SubscriptionTarget(BaseModel):
    """Script the websocket subscribes to, decoded once from an address."""

    model_config = ConfigDict(frozen=True)

    script_type: str
    script_hash: str = Field(min_length=1)
