"""Tests for icgemio.icgem (file facade and driver)."""
from __future__ import annotations

import pytest

from icgemio import (
    HarmonicCoeffs,
    Icgem,
    IcgemIOError,
    RangeError,
    SequencingError,
    parse_gravity_model,
)


def test_example_model_layout(example_path) -> None:
    gfc = Icgem(example_path)
    header = gfc.parse_header()
    assert header.max_degree == 3
    assert gfc.gm == 0.3986004415e15
    assert gfc.is_normalized

    result = gfc.inspect_data()
    bounds = result.bounds
    assert (bounds.degree_static_start, bounds.degree_static_stop) == (1, 3)
    assert (bounds.order_static_start, bounds.order_static_stop) == (1, 3)
    assert (bounds.degree_tv_start, bounds.degree_tv_stop) == (1, 2)
    assert (bounds.order_tv_start, bounds.order_tv_stop) == (1, 1)
    assert gfc.periods == (1.0, 0.5)
    assert gfc.degree == 3
    assert gfc.order == 3


def test_example_model_coefficients(example_path) -> None:
    gfc = Icgem(example_path)
    gfc.parse_header()
    coeffs = HarmonicCoeffs(3)
    assert gfc.parse_data(3, 3, coeffs) == 10
    assert coeffs.c(2, 0) == pytest.approx(-4.841651437908e-04)
    assert coeffs.s(3, 3) == pytest.approx(1.414349261929e-06)
    assert coeffs.radius == 0.63781363e7
    assert coeffs.normalized


def test_passes_need_the_header(example_path) -> None:
    gfc = Icgem(example_path)
    with pytest.raises(SequencingError):
        gfc.inspect_data()
    with pytest.raises(SequencingError):
        gfc.parse_data(2, 2, HarmonicCoeffs(2))
    with pytest.raises(SequencingError):
        gfc.periods


def test_degree_is_the_data_maximum(make_file, static_records) -> None:
    gfc = Icgem(make_file(static_records(2), max_degree=4))
    header = gfc.parse_header()
    with pytest.raises(SequencingError):
        gfc.degree
    gfc.inspect_data()
    assert (gfc.degree, gfc.order) == (2, 2)
    assert header.max_degree == 4


def test_parse_data_checks_request(example_path) -> None:
    gfc = Icgem(example_path)
    gfc.parse_header()
    with pytest.raises(RangeError):
        gfc.parse_data(4, 4, HarmonicCoeffs(4))
    with pytest.raises(RangeError):
        gfc.parse_data(2, 3, HarmonicCoeffs(3))


def test_missing_file(tmp_path) -> None:
    gfc = Icgem(tmp_path / "missing.gfc")
    with pytest.raises(IcgemIOError) as exc:
        gfc.parse_header()
    assert isinstance(exc.value, OSError)


def test_parse_gravity_model(example_path) -> None:
    model = parse_gravity_model(str(example_path), 2)
    assert model.header.modelname == "EXAMPLE3"
    assert model.periods == (1.0, 0.5)
    assert model.coefficients.max_degree == 2
    assert model.coefficients.c(2, 2) == pytest.approx(2.439383573283e-06)
    assert model.coefficients.gm == 0.3986004415e15


def test_parse_gravity_model_reduced_order(example_path) -> None:
    model = parse_gravity_model(str(example_path), 3, 1)
    assert model.coefficients.max_order == 1
    assert model.coefficients.c(3, 1) == pytest.approx(2.030462010478e-06)


def test_parse_gravity_model_degree_one_omitted(make_file, static_records) -> None:
    path = make_file(static_records(3, skip=((1, 0), (1, 1))), max_degree=3)
    model = parse_gravity_model(str(path), 3)
    assert model.coefficients.c(1, 0) == 0.0
    assert model.coefficients.c(1, 1) == 0.0
    assert model.coefficients.c(3, 3) == pytest.approx(3.3)


def test_parse_gravity_model_rejects_too_high_degree(example_path) -> None:
    with pytest.raises(RangeError):
        parse_gravity_model(str(example_path), 5)
