"""
sdofpy: numerical utilities for seismic and structural analysis.

Its primary capabilities include:
1.  Resampling irregularly sampled acceleration records at a constant time
    step (`regularize`).
2.  Displacement, pseudo-velocity and pseudo-acceleration response spectra
    of a linear SDOF oscillator over a log-uniform frequency grid
    (`response_spectrum`, `spectrum_from_history`).
3.  Descriptive statistics of analysis results and the probability that a
    demand exceeds a capacity (`sdofpy.stats`).

---
Quick Start
---

.. code-block:: python

    import numpy as np
    from sdofpy import regularize, response_spectrum, plot_response_spectrum

    time = np.array([0.0, 0.013, 0.021, 0.040, 0.052])
    accel = np.array([0.0, 0.12, -0.08, 0.05, 0.0])

    t_reg, a_reg = regularize(accel, time, dt=0.005)
    spec = response_spectrum(0.1, 50.0, 100, a_reg, xi=0.05, reg_dt=0.005)
    fig = plot_response_spectrum(spec, 'accel')

Logging goes through the standard ``logging`` module under the ``sdofpy``
logger; configure it from the application, e.g.
``logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')``.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .errors import SdofpyError, InvalidInput, InvalidArgument, EmptyInput
from .spectra import ResponseSpectrum, regularize, response_spectrum, spectrum_from_history
from .stats import (
    Interpolation,
    mean,
    median,
    percentile,
    standard_deviation,
    lognormal_standard_deviation,
    check_equal,
    check_equal_size,
    is_negative_or_zero,
    greater_probability,
    lognormal,
    zeropad,
)
from .plotting import plot_response_spectrum

__all__ = [
    "SdofpyError", "InvalidInput", "InvalidArgument", "EmptyInput",
    "ResponseSpectrum", "regularize", "response_spectrum", "spectrum_from_history",
    "Interpolation", "mean", "median", "percentile", "standard_deviation",
    "lognormal_standard_deviation", "check_equal", "check_equal_size",
    "is_negative_or_zero", "greater_probability", "lognormal", "zeropad",
    "plot_response_spectrum",
]
