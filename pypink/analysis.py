"""Spectral checks for generated noise.

Pink noise has a log-log PSD slope of about -1, white noise about 0.
"""

import logging
from typing import Optional

import numpy as np
from scipy.signal import welch

log = logging.getLogger(__name__)


def spectral_slope(samples: np.ndarray, sample_rate: float,
                   fmin: Optional[float] = None, fmax: Optional[float] = None,
                   nperseg: int = 4096) -> float:
    """Fit a line to log10(PSD) vs log10(f) over [fmin, fmax] and return its slope.

    The PSD is a Welch estimate with ``nperseg``-sample segments. The band
    defaults to 8 bins above DC up to an eighth of the sample rate, which
    stays clear of the lowest, noisiest bins and of the flat top end of a
    Voss-McCartney spectrum.
    """
    x = np.asarray(samples, dtype=np.float64).ravel()
    if len(x) < nperseg:
        raise ValueError(f"need at least {nperseg} samples, got {len(x)}")

    if fmin is None:
        fmin = 8.0 * sample_rate / nperseg
    if fmax is None:
        fmax = sample_rate / 8.0

    f, pxx = welch(x, fs=sample_rate, nperseg=nperseg)
    band = (f >= fmin) & (f <= fmax) & (pxx > 0)
    if np.count_nonzero(band) < 2:
        raise ValueError(f"fewer than two PSD bins in [{fmin}, {fmax}] Hz")

    slope, _ = np.polyfit(np.log10(f[band]), np.log10(pxx[band]), 1)
    log.debug("slope %.3f over %d bins", slope, np.count_nonzero(band))
    return float(slope)
