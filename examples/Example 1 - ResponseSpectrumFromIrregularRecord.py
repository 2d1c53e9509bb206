"""
Example 1: Response Spectrum of an Irregularly Sampled Record

Builds a synthetic accelerogram sampled at irregular instants, regularizes it
to a constant time step, computes its response spectra for two damping ratios
and estimates the probability that the peak demand exceeds a capacity.
"""

from sdofpy import (regularize, response_spectrum, plot_response_spectrum,
        percentile, lognormal_standard_deviation, median, lognormal,
        greater_probability)

import numpy as np
import matplotlib.pyplot as plt
import logging

plt.close('all')
# --- Configuration ---
# Setup basic logging to see output from the module
logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')

dt = 0.005                                    # Regularization time step (s)
freq_start = 0.1                              # Lowest oscillator frequency (Hz)
freq_end = 20.0                               # Highest oscillator frequency (Hz)
freq_num = 200                                # Number of frequencies
dampratios = [0.02, 0.05]                     # Damping ratios for spectra
capacity_median = 0.8                         # Capacity median PSA [g]
capacity_beta = 0.4                           # Capacity lognormal std

# --- Synthetic record: enveloped filtered noise at irregular instants ---

rng = np.random.default_rng(2024)
time = np.cumsum(rng.uniform(0.002, 0.009, size=4000))
time -= time[0]
envelope = (time / 2.0) ** 2 * np.exp(-(time - 2.0))
envelope /= envelope.max()
accel = 0.3 * envelope * np.sin(2 * np.pi * 1.5 * time + rng.normal(0, 0.5, size=time.size))

# --- Regularize and compute spectra ---

t_reg, a_reg = regularize(accel, time, dt)
print(f"Regularized {time.size} samples into {t_reg.size} samples at dt={dt}s.")

fig, ax = plt.subplots(figsize=(6.5, 4.5))
spectra = {}
for xi in dampratios:
    spectra[xi] = response_spectrum(freq_start, freq_end, freq_num, a_reg, xi, dt)
    plot_response_spectrum(spectra[xi], 'accel', ax=ax, label=f'{xi*100:.0f}%')

# --- Statistics of the 5% PSA across frequencies ---

psa = spectra[0.05].accel
print(f"PSA median: {median(psa):.3f} g, 84th percentile: {percentile(psa, 84):.3f} g")
print(f"PSA lognormal std: {lognormal_standard_deviation(psa):.3f}")

demand = lognormal(psa.max(), lognormal_standard_deviation(psa))
capacity = lognormal(capacity_median, capacity_beta)
print(f"P(demand > capacity) = {greater_probability(demand, capacity):.3f}")

plt.show() # Display plots

print("\nScript finished.")
