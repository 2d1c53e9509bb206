"""
Descriptive statistics for samples of analysis results.

Includes the mean, median, percentiles, (lognormal) standard deviation, a few
vector checks, and `greater_probability`, the probability that a demand
random variable exceeds a capacity random variable.
"""

# =============================================================================
# IMPORTS
# =============================================================================
import logging
from enum import Enum
from typing import Any, Sequence, Union

import numpy as np
from scipy import integrate, stats

from .errors import EmptyInput, InvalidArgument

log = logging.getLogger(__name__)

# Integration range and step of greater_probability
PROB_LOWER_QUANTILE = 0.001 # ~ -3 sigma for normal distributions
PROB_UPPER_QUANTILE = 0.999 # ~ +3 sigma for normal distributions
PROB_STEPS_PER_MEDIAN = 1000


class Interpolation(str, Enum):
    """Rule used when a median or percentile falls between two samples."""
    LINEAR = "linear"
    LOWER = "lower"
    HIGHER = "higher"


# =============================================================================
# PUBLIC API
# =============================================================================

def mean(v: Sequence[float]) -> float:
    """Arithmetic mean of the sample. Raises `EmptyInput` for an empty sample."""
    arr = _as_sample(v)
    return float(np.sum(arr) / arr.size)


def median(v: Sequence[float], interpolation: Union[Interpolation, str] = Interpolation.LINEAR) -> float:
    """Median of the sample.

    For an odd number of samples the middle value is returned. For an even
    number, the two central values are averaged (``"linear"``) or the lower
    or higher of them is returned.

    Raises
    ------
    EmptyInput
        If `v` is empty.
    InvalidArgument
        If `interpolation` is not a valid `Interpolation`.
    """
    method = _as_interpolation(interpolation)
    arr = _as_sample(v)
    return float(np.percentile(arr, 50.0, method=method.value))


def percentile(
    v: Sequence[float],
    percent: float,
    interpolation: Union[Interpolation, str] = Interpolation.LINEAR) -> float:

    """Percentile of the sample.

    The sample is sorted and the fractional rank ``percent/100 * (n-1)`` is
    located; `interpolation` selects between the neighbouring sorted values.
    ``percent=0`` gives the minimum and ``percent=100`` the maximum.

    Parameters
    ----------
    v : Sequence[float]
        Sample values.
    percent : float
        Percentile in [0, 100].
    interpolation : Interpolation or str, optional
        ``"linear"`` (default), ``"lower"`` or ``"higher"``.

    Returns
    -------
    float

    Raises
    ------
    EmptyInput
        If `v` is empty.
    InvalidArgument
        If `percent` is outside [0, 100] or `interpolation` is invalid.
    """
    method = _as_interpolation(interpolation)
    if not 0.0 <= percent <= 100.0:
        raise InvalidArgument(f"Percent should be between 0 and 100, got {percent}.")
    arr = _as_sample(v)
    return float(np.percentile(arr, percent, method=method.value))


def standard_deviation(v: Sequence[float]) -> float:
    """Sample standard deviation (divisor n-1).

    Raises `InvalidArgument` when fewer than two values are given.
    """
    arr = np.asarray(v, dtype=float)
    if arr.size < 2:
        raise InvalidArgument(
            f"At least two values are required for a standard deviation, got {arr.size}.")
    return float(np.sqrt(np.sum((arr - mean(arr)) ** 2) / (arr.size - 1)))


def lognormal_standard_deviation(v: Sequence[float]) -> float:
    """Standard deviation of the natural logarithms of the sample (beta).

    Raises `InvalidArgument` if any value is non-positive or fewer than two
    values are given.
    """
    arr = np.asarray(v, dtype=float)
    if is_negative_or_zero(arr):
        raise InvalidArgument(
            "One or more elements in the sample for calculating beta are non positive.")
    return standard_deviation(np.log(arr))


def check_equal(v1: Sequence[float], v2: Sequence[float], percent_error: float = 0.0) -> bool:
    """True if the vectors have the same length and every pair of elements
    differs by at most ``|v1[i]| * percent_error / 100``."""
    a = np.asarray(v1, dtype=float)
    b = np.asarray(v2, dtype=float)
    if a.shape != b.shape:
        return False
    return bool(np.all(np.abs(a - b) <= np.abs(a * percent_error / 100.0)))


def check_equal_size(vectors: Sequence[Sequence[float]]) -> bool:
    """True if every vector has the length of the first one."""
    return all(len(vec) == len(vectors[0]) for vec in vectors)


def is_negative_or_zero(v: Sequence[float]) -> bool:
    """True if any element is <= 0."""
    return bool(np.any(np.asarray(v, dtype=float) <= 0))


def greater_probability(demand: Any, capacity: Any) -> float:
    """Probability that the demand random variable exceeds the capacity.

    Integrates ``pdf_demand(x) * cdf_capacity(x)`` with the trapezoidal rule
    between the 0.1 and 99.9 percentiles of the demand, with a fixed step of
    ``median(demand) / 1000``.

    Parameters
    ----------
    demand : scipy.stats frozen distribution
        Demand distribution. Any object with ``ppf``, ``pdf`` and ``median``
        methods works.
    capacity : scipy.stats frozen distribution
        Capacity distribution. Only ``cdf`` is used.

    Returns
    -------
    float
        Approximate probability. The tails beyond the integration range are
        ignored, so the result is at most ~0.998.

    Raises
    ------
    InvalidArgument
        If the median of the demand is not positive, which leaves no usable
        integration step.
    """
    min_demand = float(demand.ppf(PROB_LOWER_QUANTILE))
    max_demand = float(demand.ppf(PROB_UPPER_QUANTILE))
    delta = float(demand.median()) / PROB_STEPS_PER_MEDIAN
    if not np.isfinite(delta) or delta <= 0:
        raise InvalidArgument(
            f"Integration step must be positive; demand median gives {delta * PROB_STEPS_PER_MEDIAN}.")

    nsteps = np.arange(min_demand, max_demand, delta).size
    x = min_demand + delta * np.arange(nsteps + 1)
    y = demand.pdf(x) * capacity.cdf(x)
    prob = float(integrate.trapezoid(y, dx=delta))
    log.debug("greater_probability: %d steps of %g over [%g, %g], P=%.6f",
              nsteps, delta, min_demand, max_demand, prob)
    return prob


def lognormal(median: float, beta: float) -> Any:
    """Frozen lognormal distribution given its median and logarithmic
    standard deviation, ready for `greater_probability`."""
    if median <= 0 or beta <= 0:
        raise InvalidArgument(
            f"Lognormal median and beta must be positive, got median={median}, beta={beta}.")
    return stats.lognorm(s=beta, scale=median)


def zeropad(n: int, n_tot: int) -> str:
    """Left-pads `n` with zeros to the number of digits of `n_tot`.

    ``zeropad(3, 100) == '003'``. No padding is added when `n` has as many
    digits as `n_tot` or more.
    """
    if n < 0 or n_tot < 0:
        raise InvalidArgument(f"zeropad expects non-negative integers, got n={n}, n_tot={n_tot}.")
    return str(n).zfill(len(str(n_tot)))


# =============================================================================
# INTERNAL HELPER FUNCTIONS
# =============================================================================

def _as_interpolation(value: Union[Interpolation, str]) -> Interpolation:
    try:
        return Interpolation(value)
    except ValueError:
        raise InvalidArgument(
            f"Invalid interpolation type {value!r}; expected one of "
            f"{[m.value for m in Interpolation]}.") from None


def _as_sample(v: Sequence[float]) -> np.ndarray:
    arr = np.asarray(v, dtype=float)
    if arr.size == 0:
        raise EmptyInput("Sample must contain at least one value.")
    return arr
