"""Tapering windows applied before spectral estimation.

Both windows are defined on the 1-based sample index ``i = 1..N`` with
``h = (N-1)/2``:

- Gaussian: ``w_i = exp(-0.5 * (r * (i - h) / (N-1))**2)``, shape ``r``
  (default 8).  Used before the coarse FFT estimate, where its Gaussian
  spectral line shape makes the log-parabolic interpolation accurate.
- Hanning: ``w_i = 0.5 * (1 + cos(2*pi * (i - h - 1) / (N-1)))``.  Used before
  the local refinement, where it gives a smooth single-peaked objective.
"""

from __future__ import annotations

from typing import Literal

import numpy as np

from .projection import TWO_PI


WindowKind = Literal["gaussian", "hanning"]

DEFAULT_GAUSSIAN_SHAPE = 8.0


def _index_grid(n: int) -> tuple[np.ndarray, float]:
    n = int(n)
    if n < 2:
        raise ValueError(f"window length must be >= 2, got {n}")
    i = np.arange(1, n + 1, dtype=np.float64)
    return i, (n - 1) / 2.0


def gaussian_window(n: int, r: float = DEFAULT_GAUSSIAN_SHAPE) -> np.ndarray:
    i, h = _index_grid(n)
    return np.exp(-0.5 * (r * (i - h) / (n - 1)) ** 2)


def hanning_window(n: int) -> np.ndarray:
    i, h = _index_grid(n)
    return 0.5 * (1.0 + np.cos(TWO_PI * (i - h - 1.0) / (n - 1)))


def apply_window(
    signal: np.ndarray,
    kind: WindowKind,
    *,
    gaussian_shape: float = DEFAULT_GAUSSIAN_SHAPE,
) -> np.ndarray:
    """Return a windowed copy of ``signal`` (the input is never modified)."""
    x = np.asarray(signal)
    if x.ndim != 1:
        raise ValueError(f"signal must be 1D, got shape {x.shape}")

    if kind == "gaussian":
        w = gaussian_window(x.size, gaussian_shape)
    elif kind == "hanning":
        w = hanning_window(x.size)
    else:
        raise ValueError(f"Unknown window kind: {kind!r}")

    return x.astype(np.complex128) * w
