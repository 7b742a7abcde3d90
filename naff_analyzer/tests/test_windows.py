from __future__ import annotations

import numpy as np
import pytest

from naff_analyzer.analysis.windows import apply_window, gaussian_window, hanning_window


def test_hanning_matches_numpy_definition() -> None:
    for n in (4, 16, 33):
        assert np.allclose(hanning_window(n), np.hanning(n), atol=1e-14, rtol=0.0)


def test_hanning_vanishes_at_both_ends() -> None:
    w = hanning_window(32)
    assert w[0] == pytest.approx(0.0, abs=1e-15)
    assert w[-1] == pytest.approx(0.0, abs=1e-15)


def test_gaussian_definition_on_one_based_index() -> None:
    n = 5
    r = 8.0
    w = gaussian_window(n, r)
    h = (n - 1) / 2.0
    i = np.arange(1, n + 1)
    assert np.allclose(w, np.exp(-0.5 * (r * (i - h) / (n - 1)) ** 2))
    # i == h (= 2) is the 0-based sample 1
    assert w[1] == pytest.approx(1.0)
    assert np.argmax(w) == 1


def test_gaussian_shape_parameter_narrows_window() -> None:
    assert gaussian_window(64, 12.0).sum() < gaussian_window(64, 8.0).sum()


def test_apply_window_returns_windowed_copy() -> None:
    x = np.exp(1j * np.arange(16.0))
    x_before = x.copy()

    y = apply_window(x, "hanning")
    assert np.array_equal(x, x_before)
    assert np.allclose(y, x * np.hanning(16))

    g = apply_window(x, "gaussian", gaussian_shape=4.0)
    assert np.allclose(g, x * gaussian_window(16, 4.0))


def test_apply_window_rejects_unknown_kind_and_2d() -> None:
    with pytest.raises(ValueError):
        apply_window(np.ones(8, dtype=complex), "blackman")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        apply_window(np.ones((2, 8), dtype=complex), "hanning")
