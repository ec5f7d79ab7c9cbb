#!/usr/bin/env python3
"""
Sui Type Gate - Infrastructure Test

This script tests the connection to your Sui full node and the type name parser.

Usage:
    python main.py
"""

import asyncio
import logging
import sys

from config import settings
from typegate.blockchain import SuiClient
from typegate.parsing import canonical_type_name, decompose

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

SAMPLE_TYPE = "0x2::coin::Coin<0x2::sui::SUI>"


async def test_infrastructure() -> bool:
    """
    Test the infrastructure setup:
    1. Decompose a sample type name
    2. Connect to the Sui node
    3. Verify connection health
    """
    print("=" * 60)
    print("Sui Type Gate - Infrastructure Test")
    print("=" * 60)
    print()
    
    print(f"Sui RPC URL: {settings.sui_rpc_url}")
    print(f"Address length: {settings.address_length} bytes")
    print()
    
    # Test 1: Parser
    print("[1/3] Decomposing sample type...")
    sig = decompose(canonical_type_name(SAMPLE_TYPE, settings.address_length), settings.address_length)
    print(f"✅ {SAMPLE_TYPE}")
    print(f"   Module: {sig.module_name}")
    print(f"   Struct: {sig.struct_name}")
    print(f"   Generics: {list(sig.generic_arguments)}")
    
    client = SuiClient(url=settings.sui_rpc_url, timeout=settings.rpc_timeout)
    
    # Test 2: Connection
    print()
    print("[2/3] Testing Sui node connection...")
    if not await client.connect():
        print("❌ FAILED: Could not connect to Sui node")
        print()
        print("Troubleshooting:")
        print(f"  1. Is the node accessible at {settings.sui_rpc_url}?")
        print("  2. Does the endpoint accept WebSocket JSON-RPC?")
        print("  3. Check firewall/network settings")
        return False
    print("✅ Connected to Sui node")
    
    try:
        # Test 3: Health check
        print()
        print("[3/3] Running health check...")
        health = await client.health_check()
        if health["status"] == "healthy":
            print(f"✅ Health check passed (chain {health['chain']}, checkpoint {health['checkpoint']:,})")
        else:
            print(f"⚠️  Health check: {health}")
        
        print()
        print("=" * 60)
        print("✅ All infrastructure tests passed!")
        print("=" * 60)
        print()
        print("Next steps:")
        print("  1. Run tests: pytest tests -v")
        print("  2. Check deployment objects: python test_fetch.py")
        print()
        
        return True
    
    except Exception as e:
        print(f"❌ Error during testing: {e}")
        logger.exception("Test failed with exception")
        return False
    
    finally:
        await client.disconnect()


async def main():
    """Main entry point"""
    try:
        success = await test_infrastructure()
        sys.exit(0 if success else 1)
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        sys.exit(130)
    except Exception:
        logger.exception("Unexpected error")
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
