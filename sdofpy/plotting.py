"""Plotting of response spectra with matplotlib."""

import logging
import matplotlib.pyplot as plt
import matplotlib as mpl
from typing import Optional

from .errors import InvalidArgument
from .spectra import ResponseSpectrum

log = logging.getLogger(__name__)

_YLABELS = {
    'disp': 'SD',
    'vel': 'PSV',
    'accel': 'PSA',
}


def plot_response_spectrum(
    spectrum: ResponseSpectrum,
    quantity: str = 'accel',
    ax: Optional[plt.Axes] = None,
    label: Optional[str] = None,
    xlim_min: Optional[float] = None,
    xlim_max: Optional[float] = None) -> plt.Figure:

    """Plots one spectral quantity against frequency on a log axis.

    Parameters
    ----------
    spectrum : ResponseSpectrum
        Output of `response_spectrum`.
    quantity : str, optional
        ``'disp'``, ``'vel'`` or ``'accel'`` (default).
    ax : Optional[plt.Axes], optional
        Axes to draw on. A new figure is created if None.
    label : Optional[str], optional
        Legend label for the curve.
    xlim_min, xlim_max : Optional[float], optional
        Frequency limits of the x-axis. Default to the grid bounds.

    Returns
    -------
    plt.Figure
        Figure containing the axes.
    """
    if quantity not in _YLABELS:
        raise InvalidArgument(
            f"Invalid spectral quantity {quantity!r}; expected one of {sorted(_YLABELS)}.")

    if ax is None:
        mpl.rcParams['font.size'] = 9
        mpl.rcParams['legend.frameon'] = False
        fig, ax = plt.subplots(figsize=(6.5, 4.5))
    else:
        fig = ax.figure

    freq = spectrum.freq
    ax.semilogx(freq, getattr(spectrum, quantity), lw=1, label=label)
    ax.set_xlabel('Frequency [Hz]')
    ax.set_ylabel(_YLABELS[quantity])
    ax.set_ylim(bottom=0)
    ax.grid(True, which='both', linestyle=':', alpha=0.7)

    x_min = xlim_min if xlim_min is not None else freq.min()
    x_max = xlim_max if xlim_max is not None else freq.max()
    if x_min < x_max:
        ax.set_xlim(x_min, x_max)
    else:
        log.warning("Invalid xlim provided (min=%g >= max=%g). Using default limits.", x_min, x_max)
        ax.set_xlim(freq.min(), freq.max())

    if label is not None:
        ax.legend(loc='upper right')
    fig.tight_layout()
    return fig
