"""Lazily generated random real numbers for use as comparison keys."""

from lazyreal import rng

LESS = -1
EQUAL = 0
GREATER = 1


class RandomReal:
    """Random real number integer + 0.b0 b1 b2 ... with b_i drawn on demand.

    Block i holds the bits at positions [i*w, (i+1)*w) of the fraction, where
    w is the block width of the source. Reading block i generates every
    missing block up to i; generated blocks never change.

    Meant as a key for randomized search trees such as treaps: two distinct
    reals always order strictly, and the order never flips as more bits
    are revealed.

    Equality is identity. a == b only if a is b, and == never generates
    blocks. Use matches_so_far() for "equal as far as currently known".

    The block width is fixed by the first generated block; drawing later
    blocks from a source of another width raises ValueError.

    Not thread-safe: a real must only have blocks generated by one thread
    at a time.
    """

    __slots__ = ('_integer', '_blocks', '_source', '_block_bits')

    def __init__(self, integer: int = 0, source: rng.BlockSource | None = None):
        if not isinstance(integer, int) or isinstance(integer, bool):
            raise TypeError(f"integer part must be an int, got {type(integer).__name__}")
        self._integer = integer
        self._blocks: list[int] = []
        # None: draw from the current thread's shared source
        self._source = source
        # set when the first block is generated
        self._block_bits: int | None = None

    @property
    def integer(self) -> int:
        return self._integer

    def get_integer(self) -> int:
        return self._integer

    @property
    def blocks(self) -> tuple[int, ...]:
        """Blocks generated so far, most significant first."""
        return tuple(self._blocks)

    @property
    def block_bits(self) -> int:
        """Width of this real's blocks; the source's width until one exists."""
        if self._block_bits is not None:
            return self._block_bits
        return self._resolve_source().block_bits

    def _resolve_source(self):
        if self._source is not None:
            return self._source
        return rng.get_source()

    def block_at(self, index: int) -> int:
        """Return block `index`, generating all missing blocks up to it."""
        if not isinstance(index, int):
            raise TypeError(f"block index must be an int, got {type(index).__name__}")
        if index < 0:
            raise IndexError(f"block index must be non-negative, got {index}")
        if index >= len(self._blocks):
            source = self._resolve_source()
            if self._block_bits is None:
                self._block_bits = source.block_bits
            elif source.block_bits != self._block_bits:
                raise ValueError(
                    f"source yields {source.block_bits}-bit blocks, real holds "
                    f"{self._block_bits}-bit blocks")
            while len(self._blocks) <= index:
                self._blocks.append(source.next_block())
        return self._blocks[index]

    def size(self) -> int:
        """Number of blocks generated so far."""
        return len(self._blocks)

    def compare(self, other: 'RandomReal') -> int:
        """Three-way comparison, generating blocks until the reals differ.

        Returns EQUAL only when other is self, in which case nothing is
        generated. Otherwise the integer parts decide if they differ, then
        the generated blocks, then freshly generated blocks of both reals.

        The loop has no bound. Two independent streams differ almost surely,
        but a degenerate source (e.g. one that always yields the same block
        to both sides) makes this never return.
        """
        if not isinstance(other, RandomReal):
            raise TypeError(f"cannot compare RandomReal with {type(other).__name__}")
        if self is other:
            return EQUAL
        if self._integer != other._integer:
            return LESS if self._integer < other._integer else GREATER
        if self.block_bits != other.block_bits:
            raise ValueError(
                f"cannot compare reals with {self.block_bits}-bit and "
                f"{other.block_bits}-bit blocks")

        common = min(len(self._blocks), len(other._blocks))
        for left, right in zip(self._blocks[:common], other._blocks[:common]):
            if left != right:
                return LESS if left < right else GREATER

        i = common
        while True:
            left = self.block_at(i)
            right = other.block_at(i)
            if left != right:
                return LESS if left < right else GREATER
            i += 1

    def matches_so_far(self, other: 'RandomReal') -> bool:
        """Equal integer part and identical generated blocks. Never generates.

        Reflexive and symmetric but not transitive, and may turn False once
        more blocks are generated.
        """
        if not isinstance(other, RandomReal):
            return False
        return self._integer == other._integer and self._blocks == other._blocks

    def __lt__(self, other):
        if not isinstance(other, RandomReal):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        if not isinstance(other, RandomReal):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, RandomReal):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other):
        if not isinstance(other, RandomReal):
            return NotImplemented
        return self.compare(other) >= 0

    def __eq__(self, other):
        return self is other

    def __ne__(self, other):
        return self is not other

    __hash__ = object.__hash__

    def copy(self) -> 'RandomReal':
        """New real with the same integer part and generated blocks.

        The copy is a distinct identity: it is never == to the original, and
        blocks generated from here on are drawn independently for each.
        """
        duplicate = RandomReal(self._integer, self._source)
        duplicate._blocks = list(self._blocks)
        duplicate._block_bits = self._block_bits
        return duplicate

    __copy__ = copy

    def __str__(self):
        width = self.block_bits
        bits = ''.join(format(block, f'0{width}b') for block in self._blocks)
        return f"{self._integer}.{bits}"

    def __repr__(self):
        return f"RandomReal({self})"
