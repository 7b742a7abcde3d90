"""NAFF Analyzer -- Numerical Analysis of Fundamental Frequencies.

Extracts the dominant frequency components of a finite, evenly sampled
complex periodic signal with a precision far beyond the FFT bin width.

Each iteration of the decomposition:
- estimates the strongest peak with a Gaussian-windowed, log-parabolic
  interpolated FFT
- refines it by maximizing the projection of the Hanning-windowed signal
  onto ``exp(-i 2 pi f t)``
- orthogonalizes the new basis vector against the ones already extracted
  (Gram-Schmidt)
- measures the amplitude and subtracts the component from the signal

Key principles:
- The caller decides how many components are significant.
- Frequencies are in cycles/sample, in ``[0, 1)``.
- Degenerate (silent) residuals are reported, never silently propagated.

Main subpackages:
- analysis: projection, windows, peak estimation, refinement, driver
- models: configuration and result containers
"""

import logging

from .analysis.naff import naff, naff_inplace, synthesize
from .errors import DegenerateSpectrumError
from .models.config import NAFFConfig
from .models.results import FrequencyComponent, NAFFResult

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "naff",
    "naff_inplace",
    "synthesize",
    "NAFFConfig",
    "NAFFResult",
    "FrequencyComponent",
    "DegenerateSpectrumError",
]
