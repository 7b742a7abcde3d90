from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from .config import NAFFConfig


@dataclass(frozen=True)
class FrequencyComponent:
    """One extracted component.

    Attributes
    ----------
    frequency:
        Cycles per sample, in ``[0, 1)``.  The angular frequency is
        ``2*pi*frequency``.
    amplitude:
        Complex amplitude measured on the orthogonalized basis vector.
    """

    frequency: float
    amplitude: complex


@dataclass(frozen=True)
class NAFFResult:
    """Container for a complete NAFF decomposition.

    Attributes
    ----------
    frequencies:
        Extracted frequencies, shape ``(K,)``, in order of extraction.
    amplitudes:
        Complex amplitudes, shape ``(K,)``.
    basis:
        Accepted (orthogonalized) basis vectors, shape ``(K, N)``.  Row ``i``
        is the vector the amplitude ``i`` was measured on and deflated with.
    residual:
        Signal left after the K deflations, shape ``(N,)``.
    residual_energy:
        ``sum |signal|^2`` before the first deflation and after each one,
        shape ``(K+1,)``.
    config:
        Configuration used for the run.
    warnings:
        Human-readable diagnostics collected during the run.
    """

    frequencies: np.ndarray
    amplitudes: np.ndarray
    basis: np.ndarray
    residual: np.ndarray
    residual_energy: np.ndarray

    config: Optional[NAFFConfig] = None
    warnings: tuple[str, ...] = ()

    @property
    def n_components(self) -> int:
        return int(self.frequencies.size)

    @property
    def n_samples(self) -> int:
        return int(self.residual.size)

    @property
    def components(self) -> tuple[FrequencyComponent, ...]:
        return tuple(
            FrequencyComponent(frequency=float(f), amplitude=complex(a))
            for f, a in zip(self.frequencies, self.amplitudes)
        )

    def reconstruct(self, *, include_residual: bool = False) -> np.ndarray:
        """Sum of ``amplitude_i * basis_i``, optionally plus the residual.

        With ``include_residual=True`` this reproduces the signal passed to
        the decomposition up to rounding.
        """
        out = self.amplitudes @ self.basis
        if include_residual:
            out = out + self.residual
        return out

    def to_frame(self) -> pd.DataFrame:
        """One row per component, in extraction order."""
        amps = np.asarray(self.amplitudes)
        return pd.DataFrame(
            {
                "frequency": np.asarray(self.frequencies, dtype=np.float64),
                "amplitude": amps,
                "abs": np.abs(amps),
                "phase_rad": np.angle(amps),
            }
        )
