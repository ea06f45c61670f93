"""Avalanche finality checks against a remote node."""

import json
import logging

import httpx
from pydantic import ValidationError

from blockwatch.constants import ISFINALBLOCK_METHOD
from blockwatch.models.rpc import RpcConfig, RpcResponse

logger = logging.getLogger(__name__)


def _build_payload(block_hash: str) -> dict:
    return {
        "jsonrpc": "1.0",
        "id": ISFINALBLOCK_METHOD,
        "method": ISFINALBLOCK_METHOD,
        "params": [block_hash],
    }


async def is_final_block(
    rpc: RpcConfig,
    block_hash: str,
    client: httpx.AsyncClient | None = None,
) -> bool:
    """
    Ask the node whether a block has been finalized by avalanche.

    Never raises. A node error, a timeout or an unreadable response all
    count as "not final"; callers must not treat a block as final unless
    the node said so.

    Args:
        rpc: Node URL, credentials and request timeout.
        block_hash: Block hash to check.
        client: Optional HTTP client to reuse. A short-lived one is created
            otherwise.

    Returns:
        True only if the node answered with result true and no error.
    """
    auth = httpx.BasicAuth(rpc.user, rpc.password) if rpc.user else None
    payload = _build_payload(block_hash)

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=httpx.Timeout(rpc.timeout)) as owned:
                response = await owned.post(rpc.url, json=payload, auth=auth)
        else:
            response = await client.post(
                rpc.url, json=payload, auth=auth, timeout=httpx.Timeout(rpc.timeout)
            )
        body = response.json()
    except httpx.TimeoutException:
        logger.error(
            f'Error in is_final_block({block_hash}) '
            f'"timeout of {int(rpc.timeout * 1000)}ms exceeded"'
        )
        return False
    except Exception as e:
        logger.error(f'Error in is_final_block({block_hash}) "{e}"')
        return False

    try:
        rpc_response = RpcResponse.model_validate(body)
    except ValidationError:
        logger.error(f'Error in is_final_block({block_hash}) "malformed response: {body!r}"')
        return False

    if rpc_response.error is not None:
        error = rpc_response.error.model_dump()
        logger.error(f"Node error from is_final_block {json.dumps(error, indent=2)}")
        return False

    if response.status_code >= 400:
        logger.error(
            f'Error in is_final_block({block_hash}) "HTTP {response.status_code}"'
        )
        return False

    return rpc_response.result is True
