"""
Samplers for the standard forms of the distributions, all others are derived from these.

Each function takes the engine state(s) it draws from and advances them in place.
Methods are described in
Marsaglia, G., Tsang, W. W. (2000). A simple method for generating gamma variables.
ACM Transactions on Mathematical Software, 26(3), 363-372.
and the Monty Python method of
Marsaglia, G., Tsang, W. W. (1998). The Monty Python method for generating random variables.
ACM Transactions on Mathematical Software, 24(3), 341-350.
"""

from math import log, pi, sqrt, tan, tau

from randsimple.xorshift import State, advance, uniform_closed, uniform_open, uniform_right_open

NORMAL_B = 2.50662827463
"""sqrt(2 pi), width of the Monty Python rectangle"""
NORMAL_S = 0.88579134438
"""a / (b - a) where a = sqrt(ln 4)"""
NORMAL_K = 30783
"""floor((2^16 - 1) * a / b), indices below are accepted directly"""
NORMAL_W = 0.00003824869
"""b / (2^16 - 1), scale from 16-bit index to the x axis"""
NORMAL_P = 0.94289567219
"""(s + 1) / 2"""
NORMAL_Q = -0.12127385907
"""ln(s)"""
NORMAL_HALF_BITS = 0xFFFF
"""mask selecting 16 of the 31 bits left after the sign"""
NORMAL_TAIL_D = tau
"""b^2 = 2 pi, start of the tail"""

GAMMA_SQUEEZE = 0.0331
"""Constant of the quick acceptance test u < 1 - 0.0331 z^4"""


def standard_normal(state_a: State, state_b: State) -> float:
    """
    Normal distribution with mean 0 and variance 1, using the Monty Python method.

    Most draws need a single word from `state_a`, `state_b` is used only in the tail.
    """
    raw = advance(state_a)
    sign = 1.0 if raw & 1 else -1.0
    rest = raw >> 1
    u_half = rest & NORMAL_HALF_BITS
    u_x = u_half * NORMAL_W
    if u_half < NORMAL_K:
        return sign * u_x

    # remaining high bits give the vertical coordinate
    u_dash = ((rest >> 16) + 0.5) / 65534.0
    if log(u_dash) < -u_x ** 2 / 2.0:
        return sign * u_x

    # point in the rotated part, reflected about the crossing of both densities
    y = sign * NORMAL_S * (NORMAL_B - u_x)
    if log(NORMAL_P - u_dash) < NORMAL_Q - y ** 2 / 2.0:
        return y

    return sign * _standard_normal_tail(state_a, state_b)


def _standard_normal_tail(state_a: State, state_b: State) -> float:
    """
    Positive tail of the normal distribution beyond NORMAL_B, by rejection from x^2 / 2 exponential.
    """
    while True:
        u_1 = uniform_open(state_a)
        u_2 = uniform_closed(state_b)
        x = sqrt(NORMAL_TAIL_D - 2.0 * log(1.0 - u_1))
        if x * u_2 <= NORMAL_B:
            return x


def standard_cauchy(state: State) -> float:
    """
    Cauchy distribution with location 0 and scale 1, by inverting the distribution function.
    """
    u = uniform_open(state)
    return tan(pi * (u - 0.5))


def standard_exponential(state: State) -> float:
    """
    Exponential distribution with scale 1, by inverting the distribution function.
    """
    # 1 - u is never 0 on the right-open interval
    u = uniform_right_open(state)
    return -log(1.0 - u)


def standard_laplace(state: State) -> float:
    """
    Laplace distribution with location 0 and scale 1, by inverting the distribution function.
    """
    u = uniform_open(state)
    return laplace_inverse_cdf(u)


def laplace_inverse_cdf(u: float) -> float:
    """Quantile of the standard Laplace distribution for 0 < u < 1"""
    if u < 0.5:
        return log(2.0 * u)
    return -log(2.0 * (1.0 - u))


def standard_gamma(state_u: State, state_n0: State, state_n1: State, shape: float) -> float:
    """
    Gamma distribution with scale 1 and given `shape` > 0, Marsaglia-Tsang rejection method.

    Shape below 1 is boosted to `shape + 1` and scaled back with u^(1/shape),
    so the recursion is at most one level deep.
    Uniform deviates come from `state_u`, normal deviates from `state_n0` and `state_n1`.
    """
    if shape == 1.0:
        return standard_exponential(state_u)
    elif shape < 1.0:
        boosted = standard_gamma(state_u, state_n0, state_n1, shape + 1.0)
        return boosted * uniform_open(state_u) ** (1.0 / shape)

    d = shape - 1.0 / 3.0
    c = (9.0 * d) ** -0.5
    while True:
        z = standard_normal(state_n0, state_n1)
        v = 1.0 + c * z
        if v <= 0.0:
            continue
        w = v ** 3
        y = d * w
        u = uniform_open(state_u)
        if u <= 1.0 - GAMMA_SQUEEZE * z ** 4:
            return y
        if z ** 2 / 2.0 + d * (log(w) + 1.0) - y >= log(u):
            return y
