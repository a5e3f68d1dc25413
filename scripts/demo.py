#!/usr/bin/env python3
"""
Demo script for the Groq cache.

Asks the same prompts twice against a local Redis and the Groq API to show
the miss -> upstream -> store -> hit cycle. Requires GROQ_API_KEY and a
running Redis (REDIS_URL).
"""

import asyncio
import sys
import time

from groq_cache import CompletionHandler, CompletionQuery, TieredCache, derive_key, get_redis_client
from groq_cache.repositories import GroqCompletionClient, RedisFastStore, RedisPropertyStore


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


async def demo_round_trip(handler: CompletionHandler) -> None:
    """Ask each prompt twice and report where the answer came from."""
    print_section("Miss, then hit")

    prompts = [
        "Explain a two-tier cache in one sentence.",
        "What does TTL stand for?",
    ]

    for prompt in prompts:
        print(f"\n  Prompt: {prompt}")
        print(f"  Key:    {derive_key(prompt)[:60]}...")
        for attempt in (1, 2):
            start = time.time()
            response = await handler.handle(CompletionQuery(p=prompt))
            elapsed_ms = (time.time() - start) * 1000
            source = "cache" if response.cached else "groq"
            print(f"  [{attempt}] {source:<5} {elapsed_ms:8.1f} ms  {response.answer[:70]!r}")


async def demo_bypass(handler: CompletionHandler) -> None:
    """Show that cache=no always reaches upstream."""
    print_section("Bypass with cache=no")

    prompt = "What does TTL stand for?"
    response = await handler.handle(CompletionQuery(p=prompt, cache="no"))
    print(f"\n  cached={response.cached}  {response.answer[:70]!r}")


async def main() -> int:
    client = get_redis_client()
    try:
        client.ping()
    except Exception as e:
        print(f"Redis connection failed: {e}")
        print("Make sure Redis is running: docker compose up -d")
        return 1

    provider = GroqCompletionClient.create()
    cache = TieredCache.create(
        fast_store=RedisFastStore.create(redis_client=client),
        slow_store=RedisPropertyStore.create(redis_client=client),
    )
    handler = CompletionHandler(cache=cache, provider=provider)

    try:
        await demo_round_trip(handler)
        await demo_bypass(handler)
    finally:
        await provider.close()
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
