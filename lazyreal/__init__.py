"""Lazily generated random reals and their shared block source."""

from lazyreal.random_real import RandomReal, LESS, EQUAL, GREATER
from lazyreal.rng import BlockSource, BLOCK_BITS
from lazyreal import rng
