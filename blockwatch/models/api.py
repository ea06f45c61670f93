"""API response models."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    store_status: str
    websocket_connected: bool
    block_handler: str


class FinalityResponse(BaseModel):
    """Avalanche finality of a block."""

    block_hash: str = Field(description="Block hash that was checked")
    is_final: bool
