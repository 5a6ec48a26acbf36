"""
Seeded random number generation from Xorshift160 with reproducible sequences.

The engine and the standard-form samplers live in `randsimple.xorshift` and
`randsimple.standard`; the parameterised distributions built from them live in
`randsimple.distributions`. Helpers below are shared by the command line scripts.
"""

from argparse import ArgumentDefaultsHelpFormatter, ArgumentTypeError, RawDescriptionHelpFormatter
from typing import Any

from randsimple.xorshift import new_state, advance, uniform_closed, uniform_right_open, uniform_open
from randsimple.seeds import dedupe_seeds, create_seed, create_seeds
from randsimple.standard import (standard_normal, standard_cauchy, standard_exponential,
                                 standard_laplace, standard_gamma)


class SampleFormatter(ArgumentDefaultsHelpFormatter, RawDescriptionHelpFormatter):
    """Subclassed from `argparse` formatters to use multiple features in `formatter_class`"""
    pass

def check_number(t: Any, value: str, allow_zero: bool = False, allow_negative: bool = False):
    """
    Helper function to check numbers passed on the command line.

    Pass in `add_argument` for `type` using a lambda to create a converter from string:
    ```
    add_argument(..., type=lambda s: check_number(int, s)) # non-negative int
    add_argument(..., type=lambda s: check_number(int, s, allow_zero=True)) # positive int
    ```
    """
    try:
        number = t(value)
    except ValueError:
        raise ArgumentTypeError('string "{}" could not be converted to {}'.format(value, t.__name__))
    if not allow_negative:
        if allow_zero:
            if number <= 0:
                raise ArgumentTypeError(f"{number} is not a positive number")
        else:
            if number < 0:
                raise ArgumentTypeError(f"{number} is not a non-negative number")
    return number

def check_seed(value: str) -> int:
    """`check_number` variant accepting only values that fit an unsigned 32-bit word"""
    seed = check_number(int, value)
    if seed > 0xFFFF_FFFF:
        raise ArgumentTypeError(f"{seed} does not fit into 32 bits")
    return seed
