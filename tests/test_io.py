"""Tests for icgemio.model.io."""
from __future__ import annotations

import pytest

from icgemio.model.coefficients import HarmonicCoeffs
from icgemio.model.io import load_coefficients, save_coefficients


def test_save_and_load(tmp_path) -> None:
    coeffs = HarmonicCoeffs(3, 2)
    coeffs.set_c(2, 0, -4.841651437908e-04)
    coeffs.set_s(3, 2, -6.19e-07)
    coeffs.gm = 0.3986004415e15
    coeffs.radius = 0.63781363e7
    coeffs.normalized = False

    path = tmp_path / "model.h5"
    save_coefficients(coeffs, str(path))
    loaded = load_coefficients(str(path))

    assert (loaded.max_degree, loaded.max_order) == (3, 2)
    assert loaded.c(2, 0) == coeffs.c(2, 0)
    assert loaded.s(3, 2) == coeffs.s(3, 2)
    assert loaded.gm == coeffs.gm
    assert loaded.radius == coeffs.radius
    assert loaded.normalized is False


def test_load_rejects_non_hdf5(tmp_path, example_path) -> None:
    with pytest.raises(ValueError):
        load_coefficients(str(example_path))
