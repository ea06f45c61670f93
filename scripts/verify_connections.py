"""
Check that chronik and the avalanche node are reachable with the current settings.
Run: python scripts/verify_connections.py [block_hash]
"""

import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from blockwatch.config import get_settings
from blockwatch.core.exceptions import IndexerError
from blockwatch.providers.chronik import ChronikClient
from blockwatch.services.finality import is_final_block

# Example mainnet block
DEFAULT_BLOCK = "00000000000000000753144f1e8d9f02bd7539543d73dc9fd45355de5b99f504"


async def verify_chronik(block_hash: str) -> bool:
    """Fetch one block from chronik."""
    settings = get_settings()
    print("\n🔍 Testing chronik...")
    print(f"   URL: {settings.chronik_url}")

    chronik = ChronikClient(settings.chronik_url, timeout=settings.chronik_timeout)
    try:
        block = await chronik.get_block(block_hash)
        print(f"   ✅ chronik: block {block.block_info.height} ({block.block_info.num_txs} txs)")
        return True
    except IndexerError as e:
        print(f"   ❌ chronik: ERROR - {e}")
        return False
    finally:
        await chronik.close()


async def verify_node(block_hash: str) -> bool:
    """Ask the node for finality of one block."""
    settings = get_settings()
    print("\n🔍 Testing avalanche node...")
    print(f"   URL: {settings.avalanche_rpc_url}")

    # is_final_block never raises; failures are logged and reported as False
    final = await is_final_block(settings.rpc_config(), block_hash)
    print(f"   {'✅' if final else '⚠️ '} isfinalblock: {final}")
    return final


async def main() -> int:
    block_hash = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_BLOCK

    print("=" * 60)
    print("blockwatch connection check")
    print("=" * 60)

    chronik_ok = await verify_chronik(block_hash)
    node_ok = await verify_node(block_hash)

    print("\n" + "=" * 60)
    if chronik_ok and node_ok:
        print("✅ All connections OK")
        return 0
    print("❌ Some checks failed")
    return 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
