"""Lazy Random Reals — Demonstration Entry Point.

Shows blocks being generated on access, and random reals used as
priorities the way a treap uses them.
"""

import sys
from lazyreal import rng
from lazyreal.random_real import RandomReal


NUM_KEYS = 8


def show_lazy_generation():
    """Print a real before and after its blocks are accessed."""
    real = RandomReal()
    print(f"A random number when it has never been accessed: {real}")

    real.block_at(4)
    print(f"Fifth block has been accessed: {real}")

    real2 = RandomReal(-1)
    real2.block_at(2)
    print(f"Another real: {real2}")
    print()
    return real, real2


def show_priorities(count: int = NUM_KEYS) -> list[RandomReal]:
    """Sort fresh reals; comparisons only generate the blocks they need."""
    source = rng.get_source()
    before = source.blocks_drawn
    keys = [RandomReal() for _ in range(count)]
    ordered = sorted(keys)

    for rank, key in enumerate(ordered, 1):
        print(f"  {rank}: {key.size()} block(s)  {key}")
    print(f"\n  Blocks drawn while sorting: {source.blocks_drawn - before}")
    print()
    return ordered


def main(argv: list[str] | None = None):
    argv = sys.argv[1:] if argv is None else argv
    seed = int(argv[0]) if argv else 42
    rng.set_seed(seed)

    print("=" * 50)
    print(f"SCENARIO 1: Lazy generation (seed={seed})")
    print("=" * 50)
    show_lazy_generation()

    print("=" * 50)
    print(f"SCENARIO 2: {NUM_KEYS} reals as treap priorities")
    print("=" * 50)
    show_priorities()


if __name__ == "__main__":
    main()
