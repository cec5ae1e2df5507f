#!/usr/bin/env python3
"""
feedloader Quickstart Example

Shows the basic flow: a failing network source retried, then served from
a cache.

Usage:
    python examples/01_quickstart.py
"""

import asyncio
import logging

from feedloader import FeedItem, InjectableLoader, LoadError, configure_logging, get_settings
from feedloader.loader.awaitable import load_outcome


async def main() -> None:
    """Retry a flaky source and fall back to the cache."""
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    configure_logging(get_settings(log_level="DEBUG"))

    cache = InjectableLoader(items=[FeedItem(), FeedItem()], name="cache")
    network = InjectableLoader(error=LoadError("network unreachable"), name="network")

    loader = network.retry(3).fallback(cache)

    print("Network down...")
    outcome = await load_outcome(loader, timeout=1.0)
    print(f"✓ Items: {len(outcome.items)}")
    print(f"✓ Network attempts: {network.load_count}")
    print(f"✓ Cache reads: {cache.load_count}")

    # Network comes back - the cache is no longer consulted
    print("\nNetwork restored...")
    network.error = None
    network.items = [FeedItem()]
    outcome = await load_outcome(loader, timeout=1.0)
    print(f"✓ Items: {len(outcome.items)}")
    print(f"✓ Cache reads: {cache.load_count} (unchanged)")


if __name__ == "__main__":
    asyncio.run(main())
