#!/usr/bin/env python3
"""
Blockfrost client - connectivity check

Checks the project id and backend with a few cheap calls.

Usage:
    BLOCKFROST_PROJECT_ID=mainnet... python main.py [server]
"""

import asyncio
import logging
import sys

from blockfrost_client import APIClient, BlockfrostError, CARDANO_MAINNET, ClientOptions

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def check_api(server: str) -> bool:
    """
    1. Root info
    2. Backend health and clock
    3. Latest block
    """
    print("=" * 60)
    print("Blockfrost - Connectivity Check")
    print("=" * 60)
    print()
    print(f"Server: {server}")
    print()

    async with APIClient(ClientOptions(server=server)) as client:
        try:
            print("[1/3] Querying API root...")
            info = await client.info()
            print(f"✅ API version {info.version} ({info.url})")

            print()
            print("[2/3] Checking backend health...")
            health = await client.health()
            clock = await client.health_clock()
            if health.is_healthy:
                print(f"✅ Backend healthy, server time {clock.server_time}")
            else:
                print("⚠️  Backend reports unhealthy")

            print()
            print("[3/3] Fetching latest block...")
            block = await client.block_latest()
            print(f"✅ Block {block.height:,} at slot {block.slot:,}")
            print(f"   Hash: {block.hash[:16]}...")
            print(f"   Transactions: {block.tx_count}")

            print()
            print("=" * 60)
            print("✅ All checks passed!")
            print("=" * 60)
            return True

        except BlockfrostError as e:
            print(f"❌ Error during check: {e}")
            logger.exception("Check failed with exception")
            return False


async def main():
    """Main entry point"""
    server = sys.argv[1] if len(sys.argv) > 1 else CARDANO_MAINNET
    try:
        success = await check_api(server)
        sys.exit(0 if success else 1)
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    asyncio.run(main())
