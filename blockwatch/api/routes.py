"""API route definitions."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path

from blockwatch.api.dependencies import get_connection, get_state_store
from blockwatch.config import Settings, get_settings
from blockwatch.constants import HASH_PATTERN
from blockwatch.core.store import StateStore
from blockwatch.models.api import FinalityResponse, HealthResponse
from blockwatch.models.block import ServerState
from blockwatch.services.block_handler import FinalityCheck
from blockwatch.services.finality import is_final_block

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["blocks"])


def get_finality_check() -> FinalityCheck:
    """Finality oracle used by the API."""
    return is_final_block


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Check store and websocket status.",
)
async def health_check(
    store: Annotated[StateStore, Depends(get_state_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """Check store connectivity and whether the subscription is live."""
    store_healthy = await store.ping()
    connection = get_connection()
    connected = connection is not None and connection.is_open

    overall_status = "healthy" if store_healthy and connected else "degraded"

    return HealthResponse(
        status=overall_status,
        version=settings.app_version,
        store_status="connected" if store_healthy else "disconnected",
        websocket_connected=connected,
        block_handler=settings.block_handler,
    )


@router.get(
    "/state",
    response_model=ServerState,
    summary="Server State",
    description="Last processed block and counters.",
)
async def get_server_state(
    store: Annotated[StateStore, Depends(get_state_store)],
) -> ServerState:
    return await store.get_server_state()


@router.get(
    "/blocks/{block_hash}/finality",
    response_model=FinalityResponse,
    summary="Block Finality",
    description="Ask the node whether a block has been finalized by avalanche.",
)
async def get_block_finality(
    block_hash: Annotated[str, Path(pattern=HASH_PATTERN)],
    settings: Annotated[Settings, Depends(get_settings)],
    finality_check: Annotated[FinalityCheck, Depends(get_finality_check)],
) -> FinalityResponse:
    """
    Check avalanche finality of a block.

    Any node or network failure is reported as not final.
    """
    is_final = await finality_check(settings.rpc_config(), block_hash.lower())
    return FinalityResponse(block_hash=block_hash.lower(), is_final=is_final)
