"""Analysis package: the NAFF decomposition and its building blocks.

Design principle:
  - Leaf operations (projection, basis, windows) are pure functions on 1D
    complex arrays.
  - Only :func:`~naff_analyzer.analysis.naff.naff_inplace` mutates data, and
    only the signal buffer it is handed.
"""

from .naff import naff, naff_inplace, synthesize
from .peak import interpolated_fft_peak, magnitude_spectrum, write_spectrum_block
from .projection import basis_vector, orthogonalize, projection
from .refine import maximize_projection
from .windows import apply_window, gaussian_window, hanning_window

__all__ = [
    "naff",
    "naff_inplace",
    "synthesize",
    "interpolated_fft_peak",
    "magnitude_spectrum",
    "write_spectrum_block",
    "basis_vector",
    "orthogonalize",
    "projection",
    "maximize_projection",
    "apply_window",
    "gaussian_window",
    "hanning_window",
]
