from __future__ import annotations

import io

import numpy as np
import pytest

from naff_analyzer.analysis.naff import synthesize
from naff_analyzer.analysis.peak import interpolated_fft_peak, magnitude_spectrum, write_spectrum_block
from naff_analyzer.errors import DegenerateSpectrumError


def test_magnitude_spectrum_peaks_at_component_bin() -> None:
    n = 64
    x = synthesize([7 / n], [1.0], n)
    mag = magnitude_spectrum(x, "hanning")
    assert mag.shape == (n,)
    assert int(np.argmax(mag)) == 7
    # Unnormalized: a unit tone under a Hanning window peaks at sum(w).
    assert mag[7] == pytest.approx(np.hanning(n).sum(), rel=1e-12)


def test_interpolated_peak_on_and_off_bin() -> None:
    n = 64
    for f in (5 / n, 10.3 / n, 0.8123):
        x = synthesize([f], [0.7 - 0.2j], n)
        est = interpolated_fft_peak(x)
        assert abs(est - f) * n < 0.05


def test_interpolated_peak_picks_strongest_line() -> None:
    n = 128
    x = synthesize([0.2, 0.61], [0.3, 1.0], n)
    assert interpolated_fft_peak(x) == pytest.approx(0.61, abs=0.5 / n)


def test_interpolated_peak_does_not_modify_signal() -> None:
    x = synthesize([0.31], [1.0], 32)
    x_before = x.copy()
    interpolated_fft_peak(x)
    assert np.array_equal(x, x_before)


def test_zero_signal_is_degenerate() -> None:
    with pytest.raises(DegenerateSpectrumError) as excinfo:
        interpolated_fft_peak(np.zeros(16, dtype=complex))
    assert excinfo.value.bin == 1
    assert excinfo.value.iteration is None


def test_dump_is_written_before_degenerate_check() -> None:
    buf = io.StringIO()
    with pytest.raises(DegenerateSpectrumError):
        interpolated_fft_peak(np.zeros(8, dtype=complex), dump=buf, dump_index=3)
    lines = buf.getvalue().split("\n")
    assert len([ln for ln in lines if ln]) == 8
    assert all(ln.split()[0] == "3" for ln in lines if ln)


def test_write_spectrum_block_format() -> None:
    buf = io.StringIO()
    write_spectrum_block(buf, np.array([1.0, 2.0, 3.0, 4.0]), index=2)
    text = buf.getvalue()
    assert text.endswith("\n\n\n")

    rows = [ln.split() for ln in text.splitlines() if ln]
    assert len(rows) == 4
    assert [int(r[0]) for r in rows] == [2, 2, 2, 2]
    assert np.allclose([float(r[1]) for r in rows], [0.0, 0.25, 0.5, 0.75])
    assert np.allclose([float(r[2]) for r in rows], [1.0, 2.0, 3.0, 4.0])


def test_dump_does_not_change_estimate() -> None:
    x = synthesize([0.4321, 0.1], [1.0, 0.2], 64)
    assert interpolated_fft_peak(x, dump=io.StringIO()) == interpolated_fft_peak(x)
