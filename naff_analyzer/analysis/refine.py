"""Local refinement of a coarse frequency estimate.

The refined frequency maximizes the magnitude of the projection of the
Hanning-windowed signal onto the basis vector ``exp(-i 2 pi f t)``.  The search
is a bracket-then-Brent minimization of

    g(f) = -|projection(hanning(signal), basis_vector(f, N))|

using :func:`scipy.optimize.bracket` and :func:`scipy.optimize.minimize_scalar`.
"""

from __future__ import annotations

import logging

import numpy as np
from scipy.optimize import bracket, minimize_scalar

from .projection import basis_vector, projection
from .windows import apply_window


logger = logging.getLogger(__name__)

DEFAULT_TOL = 1e-8
DEFAULT_STEP_BINS = 0.1


def maximize_projection(
    seed: float,
    signal: np.ndarray,
    *,
    tol: float = DEFAULT_TOL,
    step_bins: float = DEFAULT_STEP_BINS,
) -> float:
    """Refine ``seed`` to the local maximum of the windowed projection magnitude.

    Parameters
    ----------
    seed:
        Coarse frequency estimate (cycles/sample), typically from
        :func:`~naff_analyzer.analysis.peak.interpolated_fft_peak`.
    signal:
        1D complex samples.  Not modified.
    tol:
        Tolerance of the Brent minimizer.
    step_bins:
        The bracket search starts from ``seed`` and ``seed + step_bins/N``.

    Returns
    -------
    float
        The argmax, not wrapped into ``[0, 1)``.

    Notes
    -----
    Failures of the scipy bracketing/minimization routines are not caught.
    """
    wx = apply_window(signal, "hanning")
    n = wx.size

    def objective(f: float) -> float:
        return -abs(projection(wx, basis_vector(f, n)))

    xa, xb, xc, fa, fb, fc, ncalls = bracket(objective, xa=float(seed), xb=float(seed) + step_bins / n)
    logger.debug(
        "bracket after %d calls: (%.10g, %.10g, %.10g) -> (%.6g, %.6g, %.6g)",
        ncalls, xa, xb, xc, fa, fb, fc,
    )

    res = minimize_scalar(objective, bracket=(xa, xb, xc), method="brent", tol=tol)
    return float(res.x)
