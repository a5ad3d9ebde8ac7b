#!/usr/bin/env python3
"""
Demo and benchmarks for pseudo-shuffle.

Usage:
    python3 demo.py --demo        # Shuffle a small range and round-trip it
    python3 demo.py --benchmark   # Time encode/decode over a range
    python3 demo.py --min 1 --max 100 --key secret --demo
"""

import argparse
import logging
import time

from pseudo_shuffle import DEFAULT_KEY, DEFAULT_ROUNDS, RangeShuffler


# =============================================================================
# Formatting Utilities
# =============================================================================


def format_count(n: int) -> str:
    """Format number with K/M suffix."""
    if n >= 1_000_000:
        return f"{n/1_000_000:.1f}M"
    if n >= 1_000:
        return f"{n/1_000:.1f}K"
    return str(n)


def format_time(seconds: float) -> str:
    """Format time with appropriate unit."""
    if seconds >= 1:
        return f"{seconds:.2f}s"
    if seconds >= 0.001:
        return f"{seconds*1000:.2f}ms"
    return f"{seconds*1_000_000:.1f}us"


def describe(shuffler: RangeShuffler) -> None:
    """Print the parameters of a shuffler."""
    domain = shuffler.domain
    print(f"\n{'Parameters':─^70}")
    print(f"  Range:              [{domain.min_index}, {domain.max_index}]")
    print(f"  Size:               {format_count(domain.size):>12}")
    print(f"  Rounds:             {shuffler.rounds:>12}")
    if shuffler.is_passthrough:
        print("  Mode:               passthrough (range smaller than 4)")
        return
    a, b = shuffler.cipher.factors
    mode = "adjusted (max spliced)" if shuffler.is_adjusted else "direct"
    print(f"  Mode:               {mode:>12}")
    print(f"  Cipher domain:      {format_count(shuffler.cipher.domain_size):>12}  ({a} × {b})")


# =============================================================================
# Demo
# =============================================================================


def run_demo(shuffler: RangeShuffler, show: int):
    """Shuffle the start of the range and check every value round-trips."""
    print("=" * 70)
    print("pseudo-shuffle - Demo")
    print("=" * 70)
    describe(shuffler)

    domain = shuffler.domain
    print(f"\n{'Shuffled Indices':─^70}")
    shown = 0
    for index in domain:
        if shown >= show:
            break
        encoded = shuffler.encode(index)
        print(f"  {index:>12}  →  {encoded:<12}  →  {shuffler.decode(encoded)}")
        shown += 1

    print(f"\n{'Verification':─^70}")
    outside = [domain.min_index - 1, domain.max_index + 1]
    passthrough_ok = all(shuffler.encode(i) == i and shuffler.decode(i) == i for i in outside)
    print(f"  Out-of-range passthrough: {'PASS' if passthrough_ok else 'FAIL':>8}")

    if domain.size <= 100_000:
        outputs = list(shuffler.permutation())
        bijective = sorted(outputs) == list(domain)
        round_trip = all(shuffler.decode(y) == x for x, y in zip(domain, outputs))
        fixed = sum(1 for x, y in zip(domain, outputs) if x == y)
        print(f"  Bijection:                {'PASS' if bijective else 'FAIL':>8}")
        print(f"  Round trip:               {'PASS' if round_trip else 'FAIL':>8}")
        print(f"  Fixed points:             {fixed:>8}")
    else:
        print("  Full-range checks skipped (more than 100K indices)")
    print("=" * 70)


# =============================================================================
# Benchmark
# =============================================================================


def run_benchmark(shuffler: RangeShuffler, samples: int):
    """Time encode and decode on evenly spaced indices."""
    print("=" * 70)
    print("pseudo-shuffle - Benchmark")
    print("=" * 70)
    describe(shuffler)

    domain = shuffler.domain
    step = max(1, domain.size // samples)
    indices = list(range(domain.min_index, domain.max_index + 1, step))[:samples]

    # Cipher setup (factoring + context) is paid once, outside the timings
    start = time.perf_counter()
    if not shuffler.is_passthrough:
        _ = shuffler.cipher
    setup_time = time.perf_counter() - start

    start = time.perf_counter()
    encoded = [shuffler.encode(i) for i in indices]
    encode_time = time.perf_counter() - start

    start = time.perf_counter()
    decoded = [shuffler.decode(y) for y in encoded]
    decode_time = time.perf_counter() - start

    n = len(indices)
    print(f"\n{'Timing':─^70}")
    print(f"  Samples:            {format_count(n):>12}")
    print(f"  Setup:              {format_time(setup_time):>12}")
    print(f"  encode() avg:       {format_time(encode_time / n):>12}  ({n / encode_time:,.0f}/s)")
    print(f"  decode() avg:       {format_time(decode_time / n):>12}  ({n / decode_time:,.0f}/s)")
    print(f"  Correctness:        {'PASS' if decoded == indices else 'FAIL':>12}")
    print("=" * 70)


# =============================================================================
# Main
# =============================================================================


# Default parameters
DEFAULT_MIN = 0
DEFAULT_MAX = 100
DEFAULT_SHOW = 20
DEFAULT_SAMPLES = 10_000


def main():
    parser = argparse.ArgumentParser(
        description="pseudo-shuffle demo with benchmarks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 demo.py --demo                      # Shuffle [0, 100]
  python3 demo.py --benchmark --max 78364164095
  python3 demo.py --demo --min 1000 --max 9999 --key secret-api-key
        """,
    )
    parser.add_argument("--demo", action="store_true", help="Run the shuffle demo")
    parser.add_argument("--benchmark", action="store_true", help="Run the encode/decode benchmark")
    parser.add_argument("--min", type=int, default=DEFAULT_MIN, help=f"First index (default: {DEFAULT_MIN})")
    parser.add_argument("--max", type=int, default=DEFAULT_MAX, help=f"Last index (default: {DEFAULT_MAX})")
    parser.add_argument("--key", default=DEFAULT_KEY, help="Private key")
    parser.add_argument("--tweak", default=DEFAULT_KEY, help="Public key (tweak)")
    parser.add_argument("--rounds", type=int, default=DEFAULT_ROUNDS, help=f"FE1 rounds (default: {DEFAULT_ROUNDS})")
    parser.add_argument("--show", type=int, default=DEFAULT_SHOW, help=f"Indices to print (default: {DEFAULT_SHOW})")
    parser.add_argument("--samples", type=int, default=DEFAULT_SAMPLES, help=f"Benchmark samples (default: {DEFAULT_SAMPLES})")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    shuffler = RangeShuffler(args.min, args.max, args.key, args.tweak, args.rounds)

    if args.benchmark:
        run_benchmark(shuffler, args.samples)
    elif args.demo:
        run_demo(shuffler, args.show)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
