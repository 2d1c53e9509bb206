"""
Regularization of acceleration records and SDOF response spectra.

The response spectrum is obtained by direct time integration of a linear
single-degree-of-freedom oscillator at every frequency of a log-uniform grid,
using a Newmark average-acceleration recursion. Records sampled at irregular
time instants must be brought to a constant time step first with
`regularize`.
"""

# =============================================================================
# IMPORTS
# =============================================================================
import logging
import numpy as np
from numba import jit
from typing import NamedTuple, Tuple

from .errors import EmptyInput, InvalidInput

log = logging.getLogger(__name__)

# A time step coarser than 1/SAMPLES_PER_PERIOD_WARNING of the shortest
# oscillator period is reported (the recursion stays stable, but the peak
# is poorly resolved).
SAMPLES_PER_PERIOD_WARNING = 10


class ResponseSpectrum(NamedTuple):
    """Response spectrum on a log-uniform frequency grid.

    Attributes
    ----------
    freq : np.ndarray
        Oscillator frequencies (Hz), ascending.
    disp : np.ndarray
        Peak relative displacement (spectral displacement).
    vel : np.ndarray
        Pseudo-spectral velocity, ``disp * 2*pi*freq``.
    accel : np.ndarray
        Pseudo-spectral acceleration, ``disp * (2*pi*freq)**2``.
    """
    freq: np.ndarray
    disp: np.ndarray
    vel: np.ndarray
    accel: np.ndarray

    @property
    def periods(self) -> np.ndarray:
        """Oscillator periods (s), ``1/freq``."""
        return 1.0 / self.freq


# =============================================================================
# PUBLIC API
# =============================================================================

def regularize(
    accel: np.ndarray,
    time: np.ndarray,
    dt: float) -> Tuple[np.ndarray, np.ndarray]:

    """Resamples an acceleration record at a constant time step.

    Starting at ``time[0]``, samples are taken every `dt` seconds and the
    acceleration is linearly interpolated inside the segment of the original
    record that contains each new time instant.

    Parameters
    ----------
    accel : np.ndarray
        Acceleration values at the instants in `time`.
    time : np.ndarray
        Sample instants (s). Must be strictly increasing.
    dt : float
        Time step of the regularized record (s).

    Returns
    -------
    Tuple[np.ndarray, np.ndarray]
        - time_reg (np.ndarray): Regularized time instants (s).
        - accel_reg (np.ndarray): Interpolated acceleration at `time_reg`.

    Raises
    ------
    EmptyInput
        If `accel` or `time` is empty.
    InvalidInput
        If the lengths differ, fewer than two samples are given, `time` is
        not strictly increasing, `dt` is not positive or any value is not
        finite.

    Notes
    -----
    The new time instants are built by repeated addition of `dt`, so for
    time steps without an exact binary representation the last instant may
    fall a rounding error past ``time[-1]`` and be dropped. A new instant
    that lands exactly on an original sample is emitted once.
    """
    accel = np.asarray(accel, dtype=float)
    time = np.asarray(time, dtype=float)
    if accel.size == 0 or time.size == 0:
        raise EmptyInput("Acceleration and time vectors must not be empty.")
    if accel.ndim != 1 or time.ndim != 1:
        raise InvalidInput("Acceleration and time must be one-dimensional.")
    if accel.size != time.size:
        raise InvalidInput(
            f"Acceleration and time vectors differ in length ({accel.size} vs {time.size}).")
    if time.size < 2:
        raise InvalidInput("At least two samples are required to regularize a record.")
    if not np.all(np.isfinite(accel)) or not np.all(np.isfinite(time)):
        raise InvalidInput("Acceleration and time vectors must contain finite values only.")
    if np.any(np.diff(time) <= 0):
        raise InvalidInput("Time vector must be strictly increasing.")
    if not np.isfinite(dt) or dt <= 0:
        raise InvalidInput(f"Time step must be positive, got dt={dt}.")

    time_reg, accel_reg = _regularize_kernel(accel, time, float(dt))
    log.debug("Regularized %d samples into %d samples at dt=%g.", time.size, time_reg.size, dt)
    return time_reg, accel_reg


def response_spectrum(
    freq_start: float,
    freq_end: float,
    freq_num: int,
    history_acc: np.ndarray,
    xi: float,
    reg_dt: float) -> ResponseSpectrum:

    """Computes displacement, pseudo-velocity and pseudo-acceleration spectra.

    Parameters
    ----------
    freq_start : float
        Lowest frequency of the grid (Hz). Must be positive.
    freq_end : float
        Highest frequency of the grid (Hz). Must exceed `freq_start`.
    freq_num : int
        Number of frequencies, log-uniformly spaced between `freq_start` and
        `freq_end` (both included). Must be at least 2.
    history_acc : np.ndarray
        Base acceleration sampled at the constant step `reg_dt`, usually the
        output of `regularize`.
    xi : float
        Damping ratio, ``0 <= xi < 1``.
    reg_dt : float
        Time step of `history_acc` (s).

    Returns
    -------
    ResponseSpectrum
        Frequencies and the three spectra, one entry per frequency.

    Raises
    ------
    EmptyInput
        If `history_acc` is empty.
    InvalidInput
        If the frequency grid, damping ratio or time step is invalid, or the
        record contains non-finite values.

    Notes
    -----
    - Solves u'' + 2*om_d*u' + om_n^2*u = -ag(t) with om_n = 2*pi*f and
      om_d = om_n*xi, stepping with the average-acceleration (trapezoidal)
      rule. The peak of |u| over the whole record is the spectral
      displacement; velocity and acceleration are pseudo values.
    - Bins are independent; the result only depends on the inputs.
    """
    if isinstance(freq_num, bool) or not isinstance(freq_num, (int, np.integer)):
        raise InvalidInput(f"Number of frequencies must be an integer, got {freq_num!r}.")
    freq_num = int(freq_num)
    if freq_num < 2:
        raise InvalidInput(f"At least two frequencies are required, got freq_num={freq_num}.")
    if not np.isfinite(freq_start) or freq_start <= 0:
        raise InvalidInput(f"Start frequency must be positive, got {freq_start}.")
    if not np.isfinite(freq_end) or freq_end <= freq_start:
        raise InvalidInput(
            f"End frequency ({freq_end}) must be greater than start frequency ({freq_start}).")
    if not np.isfinite(reg_dt) or reg_dt <= 0:
        raise InvalidInput(f"Time step must be positive, got reg_dt={reg_dt}.")
    if not 0 <= xi < 1:
        raise InvalidInput(f"Damping ratio must satisfy 0 <= xi < 1, got xi={xi}.")

    s = np.asarray(history_acc, dtype=float)
    if s.ndim != 1:
        raise InvalidInput("Acceleration history must be one-dimensional.")
    if s.size == 0:
        raise EmptyInput("Acceleration history must not be empty.")
    if not np.all(np.isfinite(s)):
        raise InvalidInput("Acceleration history must contain finite values only.")

    freq = _log_frequency_grid(freq_start, freq_end, freq_num)

    if reg_dt * SAMPLES_PER_PERIOD_WARNING > 1.0 / freq_end:
        log.warning("Time step %g s gives fewer than %d samples per period at %g Hz; "
                    "high-frequency peaks may be underestimated.",
                    reg_dt, SAMPLES_PER_PERIOD_WARNING, freq_end)
    if s.size == 1:
        log.warning("Response spectrum computed from a single acceleration sample.")
    log.debug("Response spectrum: %d frequencies in [%g, %g] Hz, %d samples, xi=%g.",
              freq_num, freq_start, freq_end, s.size, xi)

    disp, vel, accel = _sdof_peak_kernel(freq, s, float(xi), float(reg_dt))
    return ResponseSpectrum(freq, disp, vel, accel)


def spectrum_from_history(
    accel: np.ndarray,
    time: np.ndarray,
    dt: float,
    freq_start: float,
    freq_end: float,
    freq_num: int,
    xi: float = 0.05) -> ResponseSpectrum:

    """Regularizes an irregularly sampled record and computes its spectrum.

    Equivalent to calling `regularize` followed by `response_spectrum` on the
    regularized acceleration with ``reg_dt=dt``.

    Parameters
    ----------
    accel, time : np.ndarray
        Record as accepted by `regularize`.
    dt : float
        Time step used for regularization and integration (s).
    freq_start, freq_end, freq_num :
        Frequency grid, see `response_spectrum`.
    xi : float, optional
        Damping ratio. Default is 0.05.

    Returns
    -------
    ResponseSpectrum
    """
    _, accel_reg = regularize(accel, time, dt)
    return response_spectrum(freq_start, freq_end, freq_num, accel_reg, xi, dt)


# =============================================================================
# INTERNAL HELPER FUNCTIONS
# =============================================================================

def _log_frequency_grid(freq_start: float, freq_end: float, freq_num: int) -> np.ndarray:
    """Frequencies evenly spaced in log10 between the bounds, both included."""
    logdf = (np.log10(freq_end) - np.log10(freq_start)) / (freq_num - 1)
    return 10.0 ** (np.log10(freq_start) + np.arange(freq_num) * logdf)


@jit(nopython=True, cache=True)
def _regularize_kernel(accel: np.ndarray, time: np.ndarray, dt: float) -> Tuple[np.ndarray, np.ndarray]:
    """Constant-step resampling by linear interpolation. Internal helper function.

    Inputs are assumed valid (see `regularize`).
    """
    nmax = int((time[-1] - time[0]) / dt) + 3
    time_reg = np.empty(nmax)
    accel_reg = np.empty(nmax)
    k = 0
    cur_time = time[0]
    for i in range(len(time) - 1):
        t0 = time[i]
        t1 = time[i + 1]
        while cur_time >= t0 and cur_time <= t1 and k < nmax:
            accel_reg[k] = accel[i] + (cur_time - t0) / (t1 - t0) * (accel[i + 1] - accel[i])
            time_reg[k] = cur_time
            k += 1
            cur_time += dt
    return time_reg[:k], accel_reg[:k]


@jit(nopython=True, cache=True)
def _sdof_peak_kernel(freq: np.ndarray, s: np.ndarray, xi: float, dt: float) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Peak SDOF response for every frequency. Internal helper function.

    Parameters
    ----------
    freq : np.ndarray
        Oscillator frequencies (Hz).
    s : np.ndarray
        Base acceleration at constant step `dt`. Assumed valid.
    xi : float
        Damping ratio.
    dt : float
        Time step (s).

    Returns
    -------
    Tuple[np.ndarray, np.ndarray, np.ndarray]
        - SD (np.ndarray): Peak relative displacement.
        - PSV (np.ndarray): Pseudo-spectral velocity.
        - PSA (np.ndarray): Pseudo-spectral acceleration.
    """
    nfreq = len(freq)
    npts = len(s)
    SD = np.zeros(nfreq)
    PSV = np.zeros(nfreq)
    PSA = np.zeros(nfreq)
    dt2 = dt * dt

    for n in range(nfreq):
        om_n = 2.0 * np.pi * freq[n]
        om_d = om_n * xi # direct product, not om_n*sqrt(1-xi^2)
        dis1 = 0.0
        vel1 = 0.0
        pdmax = 0.0
        acc1 = -1.0 * s[0] - 2.0 * om_d * vel1 - om_n * om_n * dis1
        kd = 1.0 + om_d * dt + dt2 * om_n * om_n / 4.0
        for j in range(npts):
            dis2 = ((1.0 + om_d * dt) * dis1 + (dt + 0.5 * om_d * dt2) * vel1
                    + dt2 / 4.0 * acc1 - dt2 / 4.0 * s[j]) / kd
            acc2 = 4.0 / dt2 * (dis2 - dis1) - 4.0 / dt * vel1 - acc1
            vel2 = vel1 + dt / 2.0 * (acc1 + acc2)
            if abs(dis2) > pdmax:
                pdmax = abs(dis2)
            dis1 = dis2
            vel1 = vel2
            acc1 = acc2
        SD[n] = pdmax
        PSV[n] = pdmax * om_n
        PSA[n] = pdmax * om_n * om_n

    return SD, PSV, PSA
