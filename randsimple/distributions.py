"""
Distributions with parameters, built from the standard-form samplers.

Every distribution owns its engine states, created from seeds made distinct
with `dedupe_seeds`. Parameters are changed with `try_set_params`, which raises
`ValueError` and keeps the previous values when the new ones are invalid.
"""

from math import exp, inf, isfinite, log, sqrt
from typing import Sequence, Tuple, Union

import numpy as np

from randsimple.seeds import create_seeds, dedupe_seeds
from randsimple.standard import (standard_cauchy, standard_exponential, standard_gamma,
                                 standard_laplace, standard_normal)
from randsimple.xorshift import State, new_state, uniform_closed, uniform_open

Seeds = Union[int, Sequence[int]]


class Distribution:
    """
    Common base, subclasses set `STATE_COUNT` and implement `sample`
    """

    STATE_COUNT = 1
    """How many independent engine states the distribution draws from"""
    DTYPE = np.float64
    """Type of the array returned by `samples`"""

    def __init__(self, seeds: Seeds):
        if isinstance(seeds, int):
            seeds = [seeds]
        seeds = list(seeds)
        if len(seeds) != self.STATE_COUNT:
            raise ValueError(f'{type(self).__name__} requires {self.STATE_COUNT} seeds, got {len(seeds)}')
        self._states: list[State] = [new_state(s) for s in dedupe_seeds(seeds)]

    @classmethod
    def from_time(cls):
        """Create with seeds taken from the wall clock, the sequence will not be reproducible"""
        return cls(create_seeds(cls.STATE_COUNT))

    def sample(self):
        raise NotImplementedError

    def samples(self, count: int) -> np.ndarray:
        """Draw `count` consecutive samples into an array"""
        result = np.zeros(count, dtype=self.DTYPE)
        for i in range(count):
            result[i] = self.sample()
        return result

    @property
    def params(self):
        raise NotImplementedError


def _check_positive(name: str, value: float):
    if not value > 0.0:
        raise ValueError(f'{name} must be positive, got {value}')


def _check_natural(name: str, value: int):
    if not (isfinite(value) and value >= 1 and int(value) == value):
        raise ValueError(f'{name} must be a natural number, got {value}')


def _power(base: float, exponent: float) -> float:
    """`base ** exponent` for positive `base`, overflowing to infinity instead of raising"""
    try:
        return base ** exponent
    except OverflowError:
        return inf


def _exp(x: float) -> float:
    try:
        return exp(x)
    except OverflowError:
        return inf


# Continuous distributions

class Uniform(Distribution):
    """Uniform on the closed interval [min, max]"""

    def __init__(self, seeds: Seeds):
        super().__init__(seeds)
        self.min = 0.0
        self.max = 1.0

    def sample(self) -> float:
        return uniform_closed(self._states[0]) * (self.max - self.min) + self.min

    def try_set_params(self, min: float, max: float) -> Tuple[float, float]:
        if not min < max:
            raise ValueError(f'minimum {min} must be smaller than maximum {max}')
        self.min = min
        self.max = max
        return self.params

    @property
    def params(self) -> Tuple[float, float]:
        return self.min, self.max


class Normal(Distribution):
    STATE_COUNT = 2

    def __init__(self, seeds: Seeds):
        super().__init__(seeds)
        self.mean = 0.0
        self.variance = 1.0
        self.std = 1.0

    def sample(self) -> float:
        return standard_normal(self._states[0], self._states[1]) * self.std + self.mean

    def try_set_params(self, mean: float, variance: float) -> Tuple[float, float]:
        _check_positive('variance', variance)
        self.mean = mean
        self.variance = variance
        self.std = sqrt(variance)
        return self.params

    @property
    def params(self) -> Tuple[float, float]:
        """mean and variance"""
        return self.mean, self.variance


class HalfNormal(Distribution):
    STATE_COUNT = 2

    def __init__(self, seeds: Seeds):
        super().__init__(seeds)
        self.scale = 1.0

    def sample(self) -> float:
        return abs(standard_normal(self._states[0], self._states[1])) * self.scale

    def try_set_params(self, scale: float) -> float:
        _check_positive('scale', scale)
        self.scale = scale
        return scale

    @property
    def params(self) -> float:
        return self.scale


class LogNormal(Normal):
    """Exponent of a normal variable with given mean and variance"""

    def sample(self) -> float:
        return _exp(super().sample())


class Cauchy(Distribution):
    def __init__(self, seeds: Seeds):
        super().__init__(seeds)
        self.location = 0.0
        self.scale = 1.0

    def sample(self) -> float:
        return standard_cauchy(self._states[0]) * self.scale + self.location

    def try_set_params(self, location: float, scale: float) -> Tuple[float, float]:
        _check_positive('scale', scale)
        self.location = location
        self.scale = scale
        return self.params

    @property
    def params(self) -> Tuple[float, float]:
        return self.location, self.scale


class HalfCauchy(Distribution):
    def __init__(self, seeds: Seeds):
        super().__init__(seeds)
        self.scale = 1.0

    def sample(self) -> float:
        return abs(standard_cauchy(self._states[0])) * self.scale

    def try_set_params(self, scale: float) -> float:
        _check_positive('scale', scale)
        self.scale = scale
        return scale

    @property
    def params(self) -> float:
        return self.scale


class Levy(Distribution):
    STATE_COUNT = 2

    def __init__(self, seeds: Seeds):
        super().__init__(seeds)
        self.location = 0.0
        self.scale = 1.0

    def sample(self) -> float:
        while True:
            z = abs(standard_normal(self._states[0], self._states[1]))
            if z > 0.0:
                return z ** -2 * self.scale + self.location

    def try_set_params(self, location: float, scale: float) -> Tuple[float, float]:
        _check_positive('scale', scale)
        self.location = location
        self.scale = scale
        return self.params

    @property
    def params(self) -> Tuple[float, float]:
        return self.location, self.scale


class Exponential(Distribution):
    def __init__(self, seeds: Seeds):
        super().__init__(seeds)
        self.scale = 1.0

    def sample(self) -> float:
        return standard_exponential(self._states[0]) * self.scale

    def try_set_params(self, scale: float) -> float:
        _check_positive('scale', scale)
        self.scale = scale
        return scale

    @property
    def params(self) -> float:
        return self.scale


class Laplace(Distribution):
    def __init__(self, seeds: Seeds):
        super().__init__(seeds)
        self.location = 0.0
        self.scale = 1.0

    def sample(self) -> float:
        return standard_laplace(self._states[0]) * self.scale + self.location

    def try_set_params(self, location: float, scale: float) -> Tuple[float, float]:
        _check_positive('scale', scale)
        self.location = location
        self.scale = scale
        return self.params

    @property
    def params(self) -> Tuple[float, float]:
        return self.location, self.scale


class LogLaplace(Laplace):
    def sample(self) -> float:
        return _exp(super().sample())


class Rayleigh(Distribution):
    def __init__(self, seeds: Seeds):
        super().__init__(seeds)
        self.scale = 1.0

    def sample(self) -> float:
        return sqrt(2.0 * standard_exponential(self._states[0])) * self.scale

    def try_set_params(self, scale: float) -> float:
        _check_positive('scale', scale)
        self.scale = scale
        return scale

    @property
    def params(self) -> float:
        return self.scale


class Weibull(Distribution):
    def __init__(self, seeds: Seeds):
        super().__init__(seeds)
        self.shape = 1.0
        self.scale = 1.0

    def sample(self) -> float:
        while True:
            z = standard_exponential(self._states[0])
            if z > 0.0:
                return _power(z, 1.0 / self.shape) * self.scale

    def try_set_params(self, shape: float, scale: float) -> Tuple[float, float]:
        _check_positive('shape', shape)
        _check_positive('scale', scale)
        self.shape = shape
        self.scale = scale
        return self.params

    @property
    def params(self) -> Tuple[float, float]:
        return self.shape, self.scale


class ReflectedWeibull(Distribution):
    """Weibull mirrored around `location`, each side with half of the probability"""

    def __init__(self, seeds: Seeds):
        super().__init__(seeds)
        self.shape = 1.0
        self.location = 0.0
        self.scale = 1.0

    def sample(self) -> float:
        u = uniform_open(self._states[0])
        if u < 0.5:
            return -_power(-log(2.0 * u), 1.0 / self.shape) * self.scale + self.location
        return _power(-log(2.0 * (1.0 - u)), 1.0 / self.shape) * self.scale + self.location

    def try_set_params(self, shape: float, location: float, scale: float) -> Tuple[float, float, float]:
        _check_positive('shape', shape)
        _check_positive('scale', scale)
        self.shape = shape
        self.location = location
        self.scale = scale
        return self.params

    @property
    def params(self) -> Tuple[float, float, float]:
        return self.shape, self.location, self.scale


class Frechet(Distribution):
    def __init__(self, seeds: Seeds):
        super().__init__(seeds)
        self.shape = 1.0
        self.scale = 1.0

    def sample(self) -> float:
        while True:
            z = standard_exponential(self._states[0])
            if z > 0.0:
                return _power(z, -1.0 / self.shape) * self.scale

    def try_set_params(self, shape: float, scale: float) -> Tuple[float, float]:
        _check_positive('shape', shape)
        _check_positive('scale', scale)
        self.shape = shape
        self.scale = scale
        return self.params

    @property
    def params(self) -> Tuple[float, float]:
        return self.shape, self.scale


class Gumbel(Distribution):
    def __init__(self, seeds: Seeds):
        super().__init__(seeds)
        self.location = 0.0
        self.scale = 1.0

    def sample(self) -> float:
        while True:
            z = standard_exponential(self._states[0])
            if z > 0.0:
                return -log(z) * self.scale + self.location

    def try_set_params(self, location: float, scale: float) -> Tuple[float, float]:
        _check_positive('scale', scale)
        self.location = location
        self.scale = scale
        return self.params

    @property
    def params(self) -> Tuple[float, float]:
        return self.location, self.scale


class Gamma(Distribution):
    STATE_COUNT = 3

    def __init__(self, seeds: Seeds):
        super().__init__(seeds)
        self.shape = 1.0
        self.scale = 1.0

    def sample(self) -> float:
        return standard_gamma(*self._states, self.shape) * self.scale

    def try_set_params(self, shape: float, scale: float) -> Tuple[float, float]:
        _check_positive('shape', shape)
        _check_positive('scale', scale)
        self.shape = shape
        self.scale = scale
        return self.params

    @property
    def params(self) -> Tuple[float, float]:
        return self.shape, self.scale


class Erlang(Gamma):
    """Gamma with a natural number shape, the sum of `shape` exponential variables"""

    def try_set_params(self, shape: int, scale: float) -> Tuple[float, float]:
        _check_natural('shape', shape)
        return super().try_set_params(shape, scale)


class Beta(Distribution):
    STATE_COUNT = 6

    def __init__(self, seeds: Seeds):
        super().__init__(seeds)
        self.alpha = 1.0
        self.beta = 1.0

    def sample(self) -> float:
        while True:
            y1 = standard_gamma(*self._states[0:3], self.alpha)
            y2 = standard_gamma(*self._states[3:6], self.beta)
            # both underflow to zero for very small shapes
            if y1 + y2 > 0.0:
                return y1 / (y1 + y2)

    def try_set_params(self, alpha: float, beta: float) -> Tuple[float, float]:
        _check_positive('alpha', alpha)
        _check_positive('beta', beta)
        self.alpha = alpha
        self.beta = beta
        return self.params

    @property
    def params(self) -> Tuple[float, float]:
        return self.alpha, self.beta


def _chi_square(states: Sequence[State], degree_of_freedom: int) -> float:
    """
    Chi-square variable from three gamma states and one uniform state
    """
    gamma_states = states[0:3]
    uniform_state = states[3]
    if degree_of_freedom == 2:
        return 2.0 * standard_exponential(uniform_state)
    elif degree_of_freedom > 2:
        return 2.0 * standard_gamma(*gamma_states, degree_of_freedom / 2.0)
    # chi-square(1) = U^2 chi-square(3), avoids shape 1/2 boosting on the gamma states
    y = 2.0 * standard_gamma(*gamma_states, 1.5)
    return uniform_open(uniform_state) ** 2 * y


class ChiSquare(Distribution):
    STATE_COUNT = 4

    def __init__(self, seeds: Seeds):
        super().__init__(seeds)
        self.degree_of_freedom = 1

    def sample(self) -> float:
        return _chi_square(self._states[0:4], self.degree_of_freedom)

    def try_set_params(self, degree_of_freedom: int) -> int:
        _check_natural('degree_of_freedom', degree_of_freedom)
        self.degree_of_freedom = int(degree_of_freedom)
        return self.degree_of_freedom

    @property
    def params(self) -> int:
        return self.degree_of_freedom


class Chi(ChiSquare):
    def sample(self) -> float:
        return sqrt(super().sample())


class TDistribution(Distribution):
    """Student's t distribution with natural number degrees of freedom"""

    STATE_COUNT = 5

    def __init__(self, seeds: Seeds):
        super().__init__(seeds)
        self.degree_of_freedom = 1

    def sample(self) -> float:
        normal_states = self._states[0:2]
        gamma_states = self._states[2:5]
        r = self.degree_of_freedom
        if r == 1:
            return standard_cauchy(gamma_states[0])
        elif r == 2:
            while True:
                z = standard_normal(*normal_states)
                w = standard_exponential(gamma_states[0])
                if w > 0.0:
                    return z / sqrt(w)
        z = standard_normal(*normal_states)
        w = standard_gamma(*gamma_states, r / 2.0)
        return z / sqrt(2.0 * w / r)

    def try_set_params(self, degree_of_freedom: int) -> int:
        _check_natural('degree_of_freedom', degree_of_freedom)
        self.degree_of_freedom = int(degree_of_freedom)
        return self.degree_of_freedom

    @property
    def params(self) -> int:
        return self.degree_of_freedom


class FDistribution(Distribution):
    """Ratio of two chi-square variables, each divided by its degrees of freedom"""

    STATE_COUNT = 8

    def __init__(self, seeds: Seeds):
        super().__init__(seeds)
        self.degree_of_freedom_1 = 1
        self.degree_of_freedom_2 = 1

    def sample(self) -> float:
        while True:
            chi_1 = _chi_square(self._states[0:4], self.degree_of_freedom_1)
            chi_2 = _chi_square(self._states[4:8], self.degree_of_freedom_2)
            if chi_2 > 0.0:
                return (chi_1 * self.degree_of_freedom_2) / (chi_2 * self.degree_of_freedom_1)

    def try_set_params(self, degree_of_freedom_1: int, degree_of_freedom_2: int) -> Tuple[int, int]:
        _check_natural('degree_of_freedom_1', degree_of_freedom_1)
        _check_natural('degree_of_freedom_2', degree_of_freedom_2)
        self.degree_of_freedom_1 = int(degree_of_freedom_1)
        self.degree_of_freedom_2 = int(degree_of_freedom_2)
        return self.params

    @property
    def params(self) -> Tuple[int, int]:
        return self.degree_of_freedom_1, self.degree_of_freedom_2


class InverseGaussian(Distribution):
    """
    Wald distribution with given mean and shape.

    Uses the root of the chi-square(1) transform picked with probability mean / (x + mean),
    Michael, J. R., Schucany, W. R., Haas, R. W. (1976).
    """

    STATE_COUNT = 3

    def __init__(self, seeds: Seeds):
        super().__init__(seeds)
        self.mean = 1.0
        self.shape = 1.0

    def sample(self) -> float:
        p = self.mean ** 2
        q = p / (2.0 * self.shape)
        z = abs(standard_normal(self._states[1], self._states[2]))
        if z == 0.0:
            return self.mean
        v = self.mean + q * z ** 2
        x_1 = v + sqrt(v ** 2 - p)
        u = uniform_closed(self._states[0])
        if u * (x_1 + self.mean) <= self.mean:
            return x_1
        return p / x_1

    def try_set_params(self, mean: float, shape: float) -> Tuple[float, float]:
        _check_positive('mean', mean)
        _check_positive('shape', shape)
        self.mean = mean
        self.shape = shape
        return self.params

    @property
    def params(self) -> Tuple[float, float]:
        return self.mean, self.shape


class PowerFunction(Distribution):
    """Density proportional to (x - min)^(shape - 1) on [min, max]"""

    def __init__(self, seeds: Seeds):
        super().__init__(seeds)
        self.shape = 1.0
        self.min = 0.0
        self.max = 1.0

    def sample(self) -> float:
        return _power(uniform_open(self._states[0]), 1.0 / self.shape) * (self.max - self.min) + self.min

    def try_set_params(self, shape: float, min: float, max: float) -> Tuple[float, float, float]:
        _check_positive('shape', shape)
        if not min < max:
            raise ValueError(f'minimum {min} must be smaller than maximum {max}')
        self.shape = shape
        self.min = min
        self.max = max
        return self.params

    @property
    def params(self) -> Tuple[float, float, float]:
        return self.shape, self.min, self.max


class Triangular(Distribution):
    def __init__(self, seeds: Seeds):
        super().__init__(seeds)
        self.min = 0.0
        self.max = 1.0
        self.mode = 0.5

    def sample(self) -> float:
        s = self.max - self.min
        d = (self.mode - self.min) / s
        u = uniform_closed(self._states[0])
        if u < d:
            y = sqrt(d * u)
        else:
            y = 1.0 - sqrt((1.0 - d) * (1.0 - u))
        return self.min + s * y

    def try_set_params(self, min: float, max: float, mode: float) -> Tuple[float, float, float]:
        if not min < max:
            raise ValueError(f'minimum {min} must be smaller than maximum {max}')
        if not min <= mode <= max:
            raise ValueError(f'mode {mode} must be between {min} and {max}')
        self.min = min
        self.max = max
        self.mode = mode
        return self.params

    @property
    def params(self) -> Tuple[float, float, float]:
        return self.min, self.max, self.mode


# Discrete distributions

class Bernoulli(Distribution):
    DTYPE = np.int64

    def __init__(self, seeds: Seeds):
        super().__init__(seeds)
        self.probability = 0.5

    def sample(self) -> int:
        return 1 if uniform_closed(self._states[0]) <= self.probability else 0

    def try_set_params(self, probability: float) -> float:
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f'probability must be between 0 and 1, got {probability}')
        self.probability = probability
        return probability

    @property
    def params(self) -> float:
        return self.probability


class Geometric(Distribution):
    """Number of Bernoulli trials up to and including the first success"""

    DTYPE = np.int64

    def __init__(self, seeds: Seeds):
        super().__init__(seeds)
        self.probability = 0.5

    def sample(self) -> int:
        x = 1
        while uniform_closed(self._states[0]) > self.probability:
            x += 1
        return x

    def try_set_params(self, probability: float) -> float:
        # zero would never finish sampling
        if not 0.0 < probability <= 1.0:
            raise ValueError(f'probability must be in (0, 1], got {probability}')
        self.probability = probability
        return probability

    @property
    def params(self) -> float:
        return self.probability
