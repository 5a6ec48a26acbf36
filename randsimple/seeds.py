"""
Seeds for groups of engine states owned by one distribution.
"""

from time import time_ns
from typing import List, MutableSequence
from warnings import warn

from randsimple.xorshift import MASK32

FALLBACK_SEED = 1192
"""Replacement for a perturbed seed that collapsed to zero"""


def dedupe_seeds(seeds: MutableSequence[int]) -> MutableSequence[int]:
    """
    Make the seeds pairwise distinct in place, the same input always gives the same output.

    Every later duplicate of an earlier seed is replaced with a shifted mix of both.
    This is a single pass, so a replacement can in rare cases collide again;
    a warning is issued when that happens.
    """
    for i in range(len(seeds)):
        for j in range(i + 1, len(seeds)):
            if seeds[i] == seeds[j]:
                seeds[j] = ((seeds[j] << 3) & MASK32) ^ (seeds[i] >> 2)
                if seeds[j] == 0:
                    seeds[j] = FALLBACK_SEED

    if len(set(seeds)) != len(seeds):
        warn(f'seeds {list(seeds)} still contain duplicates, streams will be correlated')
    return seeds


def create_seed() -> int:
    """
    Seed from the wall clock, in milliseconds wrapped to 32 bits (about 49.7 days period).
    """
    return (time_ns() // 1_000_000) & MASK32


def create_seeds(count: int) -> List[int]:
    """
    Distinct seeds from the wall clock for a distribution with `count` states.
    """
    nanos = time_ns()
    # first one in milliseconds, others mixed from nanoseconds counting down from the top
    seeds = [(nanos // 1_000_000) & MASK32]
    for i in range(1, count):
        seeds.append((MASK32 - (nanos >> (i - 1))) & MASK32)
    return dedupe_seeds(seeds)
