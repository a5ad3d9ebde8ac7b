#!/usr/bin/env python3
"""
Demo of pseudo-shuffle for hiding sequential IDs.

This demonstrates the basic usage:
1. Describe the ID range and keys once, as deployment configuration
2. Encode auto-increment IDs before showing them to users
3. Decode the public IDs back when they come in again
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from pseudo_shuffle import ShuffleConfig, range_decode, range_encode


def main():
    print("=" * 60)
    print("pseudo-shuffle ID Obfuscation Demo")
    print("=" * 60)

    # Four-digit order numbers, keyed per deployment
    config = ShuffleConfig(
        min_index=1000,
        max_index=9999,
        private_key="secret-api-key",
        public_key="orders",
    )
    print(f"\nConfiguration: {config}")

    shuffler = config.shuffler()

    print("\n[1] Encoding sequential order numbers...")
    orders = list(range(1000, 1010))
    public_ids = [shuffler.encode(order) for order in orders]
    for order, public_id in zip(orders, public_ids):
        print(f"    order {order} -> #{public_id}")

    print("\n[2] Decoding public IDs...")
    for public_id in public_ids[:3]:
        print(f"    #{public_id} -> order {shuffler.decode(public_id)}")

    print("\n[3] One-off calls without a shuffler object...")
    page = range_encode(1, 100, 7, "page-key")
    print(f"    page 7 of 100 is served as page {page}")
    print(f"    page {page} decodes to page {range_decode(1, 100, page, 'page-key')}")

    print("\n[4] Values outside the range are left alone...")
    print(f"    order 42 -> #{shuffler.encode(42)}")

    print("\n" + "=" * 60)
    print("Demo complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
