"""Exception types raised by the sdofpy public functions.

All of them derive from ``ValueError`` so callers that already guard
numerical routines with ``except ValueError`` keep working.
"""


class SdofpyError(ValueError):
    """Base class for sdofpy input errors."""


class InvalidInput(SdofpyError):
    """Malformed record or grid: non-increasing time, bad frequency bounds,
    non-positive time step, non-finite samples, etc."""


class InvalidArgument(SdofpyError):
    """Bad option value: unknown interpolation rule, percentile outside
    [0, 100], sample too small for the requested statistic."""


class EmptyInput(InvalidInput):
    """Zero-length sequence where at least one element is required."""
