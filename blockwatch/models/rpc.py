"""Remote node JSON-RPC models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from blockwatch.constants import DEFAULT_RPC_TIMEOUT


class RpcConfig(BaseModel):
    """Connection details for the avalanche-enabled node."""

    model_config = ConfigDict(frozen=True)

    url: str
    user: str = ""
    password: str = ""
    timeout: float = Field(default=DEFAULT_RPC_TIMEOUT, gt=0, description="Seconds")


class RpcError(BaseModel):
    """Error object returned by the node."""

    code: int
    message: str


class RpcResponse(BaseModel):
    """JSON-RPC response envelope."""

    result: Any = None
    error: RpcError | None = None
    id: str | int | None = None
