"""Shared block source for lazily generated random reals.

Seed the calling thread's source with set_seed(n) to make every real it
feeds repeatable. An unseeded source reads its blocks from os.urandom.

The current source is thread-scoped: each thread gets its own, so seeding
or replacing it in one thread never disturbs another.
"""

import os
import random as _random
import threading

BLOCK_BITS = 32  # canonical block width


class BlockSource:
    """Produces one block of uniformly random bits per call.

    When seed is None and no engine is given, uses os.urandom. An engine is
    any object with getrandbits(k), e.g. a random.Random instance.
    """

    def __init__(self, seed=None, block_bits: int = BLOCK_BITS, engine=None):
        if not isinstance(block_bits, int) or block_bits <= 0:
            raise ValueError(f"block_bits must be a positive int, got {block_bits!r}")
        self.block_bits = block_bits
        self._seed = seed
        if engine is not None:
            self._engine = engine
        elif seed is not None:
            self._engine = _random.Random(seed)
        else:
            self._engine = None  # Use os-level randomness
        self.blocks_drawn = 0

    def next_block(self) -> int:
        self.blocks_drawn += 1
        if self._engine is not None:
            return self._engine.getrandbits(self.block_bits)
        nbytes = (self.block_bits + 7) // 8
        value = int.from_bytes(os.urandom(nbytes), 'big')
        return value >> (nbytes * 8 - self.block_bits)

    def __repr__(self):
        return f"BlockSource(seed={self._seed!r}, block_bits={self.block_bits})"


# Per-thread instance
_local = threading.local()


def get_source() -> BlockSource:
    """Return the calling thread's source, creating an unseeded one on first use."""
    source = getattr(_local, 'source', None)
    if source is None:
        source = BlockSource()
        _local.source = source
    return source


def set_source(source: BlockSource):
    """Replace the calling thread's source."""
    _local.source = source


def set_seed(seed: int | None, block_bits: int = BLOCK_BITS):
    """Set this thread's seed for reproducibility. None = cryptographic randomness."""
    _local.source = BlockSource(seed=seed, block_bits=block_bits)


def next_block() -> int:
    return get_source().next_block()
