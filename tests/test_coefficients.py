"""Tests for icgemio.model.coefficients."""
from __future__ import annotations

import numpy as np
import pytest

from icgemio.model import coefficients as coefficients_module
from icgemio.model.coefficients import HarmonicCoeffs


def test_zero_initialized_with_default_order() -> None:
    coeffs = HarmonicCoeffs(3)
    assert coeffs.max_degree == 3
    assert coeffs.max_order == 3
    assert coeffs.C.shape == (4, 4)
    assert not coeffs.C.any()
    assert not coeffs.S.any()


@pytest.mark.parametrize("degree, order", [(-1, None), (2, 3), (2, -1)])
def test_invalid_size(degree, order) -> None:
    with pytest.raises(ValueError):
        HarmonicCoeffs(degree, order)


def test_accessors_check_bounds() -> None:
    coeffs = HarmonicCoeffs(3, 1)
    coeffs.set_c(3, 1, 0.5)
    coeffs.set_s(3, 1, -0.5)
    assert coeffs.c(3, 1) == 0.5
    assert coeffs.s(3, 1) == -0.5
    assert coeffs.covers(2, 1)
    assert not coeffs.covers(2, 2)
    for l, m in [(2, 2), (4, 0), (1, 2), (-1, 0)]:
        with pytest.raises(IndexError):
            coeffs.set_c(l, m, 1.0)


def test_resize_keeps_overlap() -> None:
    coeffs = HarmonicCoeffs(2)
    coeffs.set_c(2, 2, 1.5)
    coeffs.set_c(2, 1, 2.5)
    coeffs.resize(4)
    assert coeffs.C.shape == (5, 5)
    assert coeffs.c(2, 2) == 1.5

    coeffs.resize(3, 1)
    assert coeffs.max_order == 1
    assert coeffs.c(2, 1) == 2.5
    assert coeffs.C[2, 2] == 0.0


def test_degree_variances() -> None:
    coeffs = HarmonicCoeffs(2)
    coeffs.set_c(0, 0, 1.0)
    coeffs.set_c(2, 0, 3.0)
    coeffs.set_c(2, 2, 1.0)
    coeffs.set_s(2, 2, 2.0)
    np.testing.assert_allclose(coeffs.degree_variances(), [1.0, 0.0, 14.0])


def test_plot_degree_variances(monkeypatch) -> None:
    shown = []
    monkeypatch.setattr(coefficients_module.plt, "show", lambda: shown.append(True))
    coeffs = HarmonicCoeffs(3)
    coeffs.set_c(2, 0, -4.8e-4)
    coeffs.set_c(3, 0, 9.6e-7)
    coeffs.plot_degree_variances(title="test")
    assert shown == [True]
    coefficients_module.plt.close("all")


def test_module_docstring_has_title() -> None:
    assert coefficients_module.__doc__.strip().splitlines()[0] == "Harmonic Coefficients"
