"""NAFF configuration -- bundles every option of the decomposition.

A NAFFConfig groups the parameters that affect the decomposition output into
one frozen dataclass.  It can be:

- Constructed with defaults (``NAFFConfig()``) for the standard algorithm
- Overridden field-by-field via ``dataclasses.replace()``
- Serialized to/from a dict for JSON provenance (the debug sink is not
  serialized)
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, TextIO


@dataclass(frozen=True)
class NAFFConfig:
    """Frozen configuration for :func:`~naff_analyzer.analysis.naff.naff_inplace`.

    Fields
    ------
    zero_first : bool
        If True, the first component returned is forced to frequency 0 (DC);
        its amplitude is the mean of the signal.  Default False.
    debug_sink : text stream or None
        If given, the magnitude spectrum seen by the peak estimator is written
        to it once per component, as blocks separated by two blank lines.
        Diagnostic only, never changes the result.  Default None.
    gaussian_shape : float
        Shape parameter ``r`` of the Gaussian window applied before the coarse
        FFT estimate.  Default 8.0.
    tol : float
        Tolerance handed to the Brent minimizer of the refiner.  Default 1e-8.
    step_bins : float
        Offset of the second bracketing seed from the coarse estimate, in FFT
        bins (i.e. ``step_bins / N`` in frequency).  Default 0.1.
    """

    zero_first: bool = False
    debug_sink: Optional[TextIO] = None

    gaussian_shape: float = 8.0
    tol: float = 1e-8
    step_bins: float = 0.1

    def __post_init__(self) -> None:
        if not self.gaussian_shape > 0:
            raise ValueError(f"gaussian_shape must be > 0, got {self.gaussian_shape}")
        if not self.tol > 0:
            raise ValueError(f"tol must be > 0, got {self.tol}")
        if not self.step_bins > 0:
            raise ValueError(f"step_bins must be > 0, got {self.step_bins}")
        if self.debug_sink is not None and not callable(getattr(self.debug_sink, "write", None)):
            raise ValueError("debug_sink must provide a write(str) method")

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dict.  ``debug_sink`` is reported as a flag only."""
        d = {f.name: getattr(self, f.name) for f in fields(self) if f.name != "debug_sink"}
        d["debug_sink"] = self.debug_sink is not None
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> NAFFConfig:
        """Reconstruct from a dict (e.g. loaded from JSON).

        A ``debug_sink`` entry is ignored; pass a stream with
        ``dataclasses.replace()`` afterwards if needed.
        """
        d = dict(d)  # shallow copy
        d.pop("debug_sink", None)
        return cls(**d)
