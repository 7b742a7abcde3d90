"""Coarse frequency estimate from a windowed, interpolated FFT.

The signal is Gaussian-windowed and transformed with the positive-exponent
DFT

    X_k = sum_t x_t exp(+i 2 pi k t / N)

so that a component ``exp(-i 2 pi f t)`` peaks at bin ``k = f N``.  The
maximum is searched among the interior bins ``1..N-2`` (both neighbours
exist) and refined by log-parabolic interpolation, which is exact for the
Gaussian line shape produced by the Gaussian window:

    A = (ln m[k+1] - ln m[k-1]) / (2 (2 ln m[k] - ln m[k+1] - ln m[k-1]))
    f = (k + A) / N
"""

from __future__ import annotations

import logging
from typing import Optional, TextIO

import numpy as np

from ..errors import DegenerateSpectrumError
from .windows import DEFAULT_GAUSSIAN_SHAPE, WindowKind, apply_window


logger = logging.getLogger(__name__)


def magnitude_spectrum(
    signal: np.ndarray,
    window: WindowKind = "gaussian",
    *,
    gaussian_shape: float = DEFAULT_GAUSSIAN_SHAPE,
) -> np.ndarray:
    """Unnormalized magnitude of the positive-exponent DFT of the windowed signal."""
    wx = apply_window(signal, window, gaussian_shape=gaussian_shape)
    n = wx.size
    # ifft carries the +i exponent and a 1/N factor.
    return np.abs(np.fft.ifft(wx) * n)


def write_spectrum_block(stream: TextIO, magnitudes: np.ndarray, index: int = 0) -> None:
    """Write one ``index  bin/N  magnitude`` record per bin, then two blank lines.

    The two blank lines separate data blocks for multi-block plotting tools
    (gnuplot ``index``).
    """
    m = np.asarray(magnitudes, dtype=np.float64)
    n = m.size
    lines = [f"{int(index)} {k / n:.16e} {m[k]:.16e}\n" for k in range(n)]
    stream.write("".join(lines))
    stream.write("\n\n")


def interpolated_fft_peak(
    signal: np.ndarray,
    *,
    gaussian_shape: float = DEFAULT_GAUSSIAN_SHAPE,
    dump: Optional[TextIO] = None,
    dump_index: int = 0,
) -> float:
    """Estimate the frequency of the strongest spectral line.

    Parameters
    ----------
    signal:
        1D complex samples.  At least 3 samples are needed for an interior bin.
    gaussian_shape:
        Shape parameter of the Gaussian window.
    dump:
        Optional text stream receiving the magnitude spectrum (see
        :func:`write_spectrum_block`).  Written before the peak is checked.
    dump_index:
        Index written in the first column of the dump records.

    Returns
    -------
    float
        Frequency in cycles/sample.  It lies within about one bin of the
        interior range and is not wrapped.

    Raises
    ------
    DegenerateSpectrumError
        If the largest interior magnitude is exactly zero.
    """
    mag = magnitude_spectrum(signal, "gaussian", gaussian_shape=gaussian_shape)
    n = mag.size
    if n < 3:
        raise ValueError(f"need at least 3 samples for peak interpolation, got {n}")

    if dump is not None:
        write_spectrum_block(dump, mag, dump_index)

    k = int(np.argmax(mag[1 : n - 1])) + 1
    if mag[k] == 0.0:
        raise DegenerateSpectrumError(f"no usable spectral peak: magnitude at bin {k} is zero", bin=k)

    with np.errstate(divide="ignore", invalid="ignore"):
        lk, lkm, lkp = np.log(mag[k]), np.log(mag[k - 1]), np.log(mag[k + 1])
        a = (lkp - lkm) / (2.0 * (2.0 * lk - lkp - lkm))
    if not np.isfinite(a):
        # A zero neighbour makes the parabola undefined; keep the bin centre.
        logger.debug("log-parabolic interpolation undefined at bin %d, using bin centre", k)
        a = 0.0

    return (k + float(a)) / n
