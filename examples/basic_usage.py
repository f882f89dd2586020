"""
email-alias-core — Basic Usage Example

Demonstrates generating and validating aliases for a custom domain.
"""

import asyncio
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from alias_core import InvalidInputError, generate_email_alias, validate_email_alias


async def main():
    # The only thing needed to check aliases later
    secret_key = "my-secret-key-change-this"
    domain = "example.com"

    # ── Example 1: One alias per service ──
    print("=" * 50)
    print("  Example 1: Generate")
    print("=" * 50)

    services = [["shop", "amazon"], ["news", "nytimes"], ["bank"]]
    aliases = await asyncio.gather(
        *(generate_email_alias(secret_key, parts, domain) for parts in services)
    )
    for parts, alias in zip(services, aliases):
        print(f"  {parts} -> {alias}")

    # ── Example 2: Validate incoming mail addresses ──
    print()
    print("=" * 50)
    print("  Example 2: Validate")
    print("=" * 50)

    forged = aliases[0].replace("amazon", "ebay")
    longer = await generate_email_alias(secret_key, ["shop", "amazon"], domain, hash_length=12)

    candidates = [
        (aliases[0], 8),
        (forged, 8),
        ("not-an-email", 8),
        (longer, 12),
        (longer, 8),  # hash_length must match generation
    ]
    for candidate, hash_length in candidates:
        ok = await validate_email_alias(secret_key, candidate, hash_length)
        print(f"  [{'PASS' if ok else 'FAIL'}] {candidate} (hash_length={hash_length})")

    # ── Example 3: Bad input ──
    print()
    try:
        await generate_email_alias(secret_key, [], domain)
    except InvalidInputError as e:
        print(f"Rejected: {e}")


if __name__ == "__main__":
    asyncio.run(main())
