"""Inner product, complex-exponential basis and Gram-Schmidt.

All three operations work on 1-D complex sample sequences of a common length
``N``.  The inner product is normalized by ``N`` so that a basis vector has
unit norm:

    projection(a, b) = (1/N) * sum_t conj(a_t) * b_t
    basis_vector(f, N)_t = exp(-i * 2*pi * f * t),   t = 0..N-1
"""

from __future__ import annotations

from typing import Iterable

import numpy as np


TWO_PI = 2.0 * np.pi


def projection(a: np.ndarray, b: np.ndarray) -> complex:
    """Normalized complex inner product ``<a|b>``, conjugate-linear in ``a``."""
    a = np.asarray(a)
    b = np.asarray(b)
    if a.shape != b.shape or a.ndim != 1:
        raise ValueError(f"projection needs two 1D arrays of equal length, got {a.shape} and {b.shape}")
    return complex(np.vdot(a, b) / a.size)


def basis_vector(freq: float, n: int) -> np.ndarray:
    """Samples of ``exp(-i 2 pi freq t)`` for ``t = 0..n-1``."""
    t = np.arange(int(n), dtype=np.float64)
    return np.exp(-1j * TWO_PI * float(freq) * t)


def orthogonalize(vector: np.ndarray, previous: Iterable[np.ndarray]) -> np.ndarray:
    """Classical Gram-Schmidt step against already accepted basis vectors.

    For each ``u_j`` in ``previous`` (in order) the component along ``u_j`` is
    removed:

        u <- u - projection(u_j, u) * u_j

    The predecessors are used as given (they are expected to be orthogonalized
    already); neither they nor the result are normalized.

    Returns
    -------
    np.ndarray
        A new array; ``vector`` is not modified.
    """
    u = np.array(vector, dtype=np.complex128, copy=True)
    for uj in previous:
        u -= projection(uj, u) * uj
    return u
