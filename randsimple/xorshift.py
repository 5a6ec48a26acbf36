"""
Xorshift160 engine producing 32-bit words and uniform deviates from them.

Based on the 5-word generator from
Marsaglia, G. (2003). Xorshift RNGs. Journal of Statistical Software, 8(14), 1-6.
https://doi.org/10.18637/jss.v008.i14

State is kept in a plain `list` of five unsigned 32-bit integers so that every
function here can advance it in place, the same list being owned by exactly one
distribution for its lifetime.
"""

from typing import List

State = List[int]
"""Five unsigned 32-bit words `[x, y, z, u, v]`, mutated by every draw"""

MASK32 = 0xFFFF_FFFF
"""Largest value of an unsigned 32-bit word, also the divisor for uniform deviates"""

INITIAL_STATE = (123456789, 362436069, 521288629, 88675123)
"""First four words of every new state, the last one is the seed"""

SHIFT_A = 7
SHIFT_B = 13
SHIFT_C = 6


def new_state(seed: int) -> State:
    """
    Create a state for one independent stream, the seed fills the last word.
    """
    assert 0 <= seed <= MASK32, 'seed must fit into 32 bits'
    return [*INITIAL_STATE, seed]


def advance(state: State) -> int:
    """
    Advance the state in place and return the new 32-bit word, between 0 and 2**32-1 inclusive.
    """
    x = state[0]
    t = x ^ ((x << SHIFT_A) & MASK32)
    v = state[4]
    state[0] = state[1]
    state[1] = state[2]
    state[2] = state[3]
    state[3] = v
    # keep the new word inside uint32_t
    state[4] = ((v ^ (v >> SHIFT_C)) ^ (t ^ (t >> SHIFT_B))) & MASK32
    return state[4]


def uniform_closed(state: State) -> float:
    """
    Return a random floating-point number N such that 0 <= N <= 1.
    """
    return advance(state) / float(MASK32)


def uniform_right_open(state: State) -> float:
    """
    Return a random floating-point number N such that 0 <= N < 1.
    """
    while True:
        raw = advance(state)
        if raw != MASK32:
            return raw / float(MASK32)


def uniform_open(state: State) -> float:
    """
    Return a random floating-point number N such that 0 < N < 1.
    """
    while True:
        raw = advance(state)
        if raw != 0 and raw != MASK32:
            return raw / float(MASK32)
