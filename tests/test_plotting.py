"""
Tests for response spectrum plots (Agg backend, nothing written to disk).
"""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from sdofpy import InvalidArgument, plot_response_spectrum, response_spectrum


@pytest.fixture
def spectrum():
    s = np.zeros(1000)
    s[1] = 1.0
    return response_spectrum(0.5, 20.0, 25, s, 0.05, 0.001)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')


@pytest.mark.parametrize("quantity, ylabel", [("disp", "SD"), ("vel", "PSV"), ("accel", "PSA")])
def test_plot_quantity(spectrum, quantity, ylabel):
    fig = plot_response_spectrum(spectrum, quantity)
    ax = fig.axes[0]
    line = ax.get_lines()[0]
    np.testing.assert_allclose(line.get_xdata(), spectrum.freq)
    np.testing.assert_allclose(line.get_ydata(), getattr(spectrum, quantity))
    assert ax.get_xscale() == 'log'
    assert ax.get_ylabel() == ylabel


def test_plot_on_existing_axes(spectrum):
    fig, ax = plt.subplots()
    returned = plot_response_spectrum(spectrum, 'accel', ax=ax, label='5%')
    assert returned is fig
    assert ax.get_legend() is not None


def test_plot_default_xlim(spectrum):
    fig = plot_response_spectrum(spectrum)
    assert fig.axes[0].get_xlim() == pytest.approx((spectrum.freq[0], spectrum.freq[-1]))


def test_plot_invalid_xlim_falls_back(spectrum):
    fig = plot_response_spectrum(spectrum, xlim_min=10.0, xlim_max=1.0)
    assert fig.axes[0].get_xlim() == pytest.approx((spectrum.freq[0], spectrum.freq[-1]))


def test_plot_invalid_quantity(spectrum):
    with pytest.raises(InvalidArgument):
        plot_response_spectrum(spectrum, 'velocity')
