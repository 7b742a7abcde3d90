"""NAFF decomposition driver.

Per component ``i = 0..K-1``:

1) Coarse estimate of the strongest line of the current signal
   (:func:`~naff_analyzer.analysis.peak.interpolated_fft_peak`), skipped for
   ``i == 0`` when ``zero_first`` is set (frequency forced to 0).
2) Refinement (:func:`~naff_analyzer.analysis.refine.maximize_projection`),
   result wrapped into ``[0, 1)``.
3) Basis vector ``exp(-i 2 pi f t)`` orthogonalized against the vectors
   accepted so far (classical Gram-Schmidt).
4) Amplitude ``projection(u_i, signal)``.
5) Deflation ``signal -= amplitude * u_i``.

The loop always runs exactly K times.  Deciding how many components are
significant is left to the caller.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np

from ..errors import DegenerateSpectrumError
from ..models.config import NAFFConfig
from ..models.results import NAFFResult
from .peak import interpolated_fft_peak, magnitude_spectrum, write_spectrum_block
from .projection import basis_vector, orthogonalize, projection
from .refine import maximize_projection


logger = logging.getLogger(__name__)


def _is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def _validate_signal(x: np.ndarray) -> int:
    if x.ndim != 1:
        raise ValueError(f"signal must be 1D, got shape {x.shape}")
    n = int(x.size)
    if n < 4 or not _is_power_of_two(n):
        raise ValueError(f"signal length must be a power of two >= 4, got {n}")
    if not np.all(np.isfinite(x)):
        raise ValueError("signal contains non-finite samples")
    return n


def _energy(x: np.ndarray) -> float:
    return float(np.vdot(x, x).real)


def _bin_distance(f1: float, f2: float, n: int) -> float:
    """Circular distance between two frequencies, in FFT bins."""
    d = (f1 - f2) % 1.0
    return min(d, 1.0 - d) * n


def _wrap_unit(f: float) -> float:
    f = f % 1.0
    # -1e-18 % 1.0 == 1.0 in floating point
    return 0.0 if f >= 1.0 else f


def naff_inplace(
    signal: np.ndarray,
    frequencies: np.ndarray,
    amplitudes: np.ndarray,
    config: Optional[NAFFConfig] = None,
) -> NAFFResult:
    """Decompose ``signal`` into ``len(frequencies)`` components, destructively.

    Parameters
    ----------
    signal:
        1D complex ``numpy`` array, length a power of two (>= 4).
        **Overwritten**: on return (or on a ``DegenerateSpectrumError``) it
        holds the residual after all deflations performed so far.  Copy it
        first if the original data is still needed, or use :func:`naff`.
    frequencies:
        Pre-sized 1D real array of length K >= 1, filled with the extracted
        frequencies (cycles/sample, in ``[0, 1)``).
    amplitudes:
        Pre-sized 1D complex array of length K, filled with the amplitudes.
    config:
        Options; defaults to ``NAFFConfig()``.

    Returns
    -------
    NAFFResult
        Copies of the outputs plus the accepted basis vectors, the residual
        and per-step residual energies.

    Raises
    ------
    ValueError
        Invalid arguments.  Raised before anything is modified.
    DegenerateSpectrumError
        The residual has no usable spectral peak.  ``err.iteration`` is the
        0-based index of the component that could not be extracted; the
        earlier components are already stored in the output arrays.
    """
    cfg = NAFFConfig() if config is None else config

    if not isinstance(signal, np.ndarray) or not np.iscomplexobj(signal):
        raise ValueError("signal must be a complex numpy array (it is modified in place)")
    if not signal.flags.writeable:
        raise ValueError("signal must be writeable")
    for name, buf in (("frequencies", frequencies), ("amplitudes", amplitudes)):
        if not isinstance(buf, np.ndarray) or buf.ndim != 1:
            raise ValueError(f"{name} must be a 1D numpy array")
    if not np.issubdtype(frequencies.dtype, np.floating):
        raise ValueError("frequencies must be a real floating-point array")
    if not np.iscomplexobj(amplitudes):
        raise ValueError("amplitudes must be a complex array")
    if frequencies.size != amplitudes.size:
        raise ValueError(
            f"frequencies and amplitudes must have the same length, got {frequencies.size} and {amplitudes.size}"
        )
    n_comp = int(frequencies.size)
    if n_comp < 1:
        raise ValueError("at least one component must be requested")
    n = _validate_signal(signal)

    basis = np.zeros((n_comp, n), dtype=np.complex128)
    energy = [_energy(signal)]
    warnings: list[str] = []

    for i in range(n_comp):
        if i == 0 and cfg.zero_first:
            if cfg.debug_sink is not None:
                mag = magnitude_spectrum(signal, "gaussian", gaussian_shape=cfg.gaussian_shape)
                write_spectrum_block(cfg.debug_sink, mag, i)
            freq = 0.0
        else:
            try:
                coarse = interpolated_fft_peak(
                    signal,
                    gaussian_shape=cfg.gaussian_shape,
                    dump=cfg.debug_sink,
                    dump_index=i,
                )
            except DegenerateSpectrumError as e:
                raise DegenerateSpectrumError(
                    f"component {i}: {e}", iteration=i, bin=e.bin
                ) from e

            freq = _wrap_unit(maximize_projection(coarse, signal, tol=cfg.tol, step_bins=cfg.step_bins))

            moved = _bin_distance(freq, coarse, n)
            if moved > 1.0:
                msg = f"component {i}: refinement moved {moved:.3g} bins from the FFT estimate {coarse:.8g}"
                warnings.append(msg)
                logger.warning(msg)
            logger.debug("component %d: coarse=%.10g refined=%.12g", i, coarse, freq)

        u = orthogonalize(basis_vector(freq, n), basis[:i])
        basis[i] = u

        amp = projection(u, signal)
        signal -= amp * u

        frequencies[i] = freq
        amplitudes[i] = amp

        energy.append(_energy(signal))
        if energy[-1] > energy[-2] * (1.0 + 1e-12):
            msg = f"component {i}: residual energy increased from {energy[-2]:.6g} to {energy[-1]:.6g}"
            warnings.append(msg)
            logger.warning(msg)
        logger.debug("component %d: amplitude=%s residual energy=%.6g", i, amp, energy[-1])

    return NAFFResult(
        frequencies=np.array(frequencies, dtype=np.float64),
        amplitudes=np.array(amplitudes, dtype=np.complex128),
        basis=basis,
        residual=signal.copy(),
        residual_energy=np.asarray(energy),
        config=cfg,
        warnings=tuple(warnings),
    )


def naff(
    signal: Sequence[complex] | np.ndarray,
    n_components: int,
    config: Optional[NAFFConfig] = None,
) -> NAFFResult:
    """Non-destructive NAFF decomposition.

    The input is copied to a ``complex128`` array before decomposition; the
    residual is available as ``result.residual``.  See :func:`naff_inplace`
    for the algorithm and the exceptions raised.
    """
    n_components = int(n_components)
    if n_components < 1:
        raise ValueError(f"n_components must be >= 1, got {n_components}")

    work = np.array(signal, dtype=np.complex128, copy=True)
    freqs = np.zeros(n_components, dtype=np.float64)
    amps = np.zeros(n_components, dtype=np.complex128)
    return naff_inplace(work, freqs, amps, config)


def synthesize(
    frequencies: Sequence[float] | np.ndarray,
    amplitudes: Sequence[complex] | np.ndarray,
    n_samples: int,
) -> np.ndarray:
    """Sum of ``amplitude_k * exp(-i 2 pi f_k t)`` for ``t = 0..n_samples-1``."""
    f = np.asarray(frequencies, dtype=np.float64)
    a = np.asarray(amplitudes, dtype=np.complex128)
    if f.ndim != 1 or f.shape != a.shape:
        raise ValueError(f"frequencies and amplitudes must be 1D of equal length, got {f.shape} and {a.shape}")
    out = np.zeros(int(n_samples), dtype=np.complex128)
    for fk, ak in zip(f, a):
        out += ak * basis_vector(fk, n_samples)
    return out
