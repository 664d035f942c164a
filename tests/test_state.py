"""Tests for icgemio.parser.state."""
from __future__ import annotations

from icgemio.parser.state import Bounds, PeriodCatalog, TvgContext


def test_bounds_start_ignores_zero_and_stop_is_max() -> None:
    bounds = Bounds()
    bounds.update_static(0, 0)
    assert (bounds.degree_static_start, bounds.degree_static_stop) == (0, 0)
    bounds.update_static(2, 0)
    bounds.update_static(2, 1)
    bounds.update_static(1, 1)
    assert (bounds.degree_static_start, bounds.degree_static_stop) == (2, 2)
    assert (bounds.order_static_start, bounds.order_static_stop) == (1, 1)
    assert not bounds.has_tvg


def test_bounds_overall_degree_and_order() -> None:
    bounds = Bounds()
    bounds.update_static(3, 2)
    bounds.update_tv(4, 1)
    assert bounds.degree == 4
    assert bounds.order == 2
    assert bounds.has_tvg
    assert (bounds.degree_tv_start, bounds.order_tv_start) == (4, 1)


def test_tvg_context() -> None:
    context = TvgContext()
    assert not context.is_set
    assert not context.matches(0, 0)
    context.set(2, 1)
    assert context.is_set
    assert context.matches(2, 1)
    assert not context.matches(2, 0)


def test_period_catalog_is_ordered_and_idempotent() -> None:
    catalog = PeriodCatalog()
    assert catalog.add(1.0)
    assert catalog.add(0.5)
    assert not catalog.add(1.0)
    assert len(catalog) == 2
    assert 0.5 in catalog
    assert 0.4999 not in catalog
    assert list(catalog) == [1.0, 0.5]
    assert catalog.as_tuple() == (1.0, 0.5)
