"""
Scan State
==========
Pass-local bookkeeping of the inspection pass.

Classes:
    Bounds: Degree/order ranges of the static and time-variable parts.
    TvgContext: Degree/order of the last 'gfct' record.
    PeriodCatalog: Distinct periods (years) of the periodic terms.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class Bounds:
    """
    Degree/order ranges found in the data section.

    A 'start' holds the first nonzero value seen (degree/order 0 does not
    establish a start), a 'stop' the running maximum.
    """
    degree_static_start: int = 0
    degree_static_stop: int = 0
    order_static_start: int = 0
    order_static_stop: int = 0
    degree_tv_start: int = 0
    degree_tv_stop: int = 0
    order_tv_start: int = 0
    order_tv_stop: int = 0

    def update_static(self, degree: int, order: int) -> None:
        if not self.degree_static_start and degree:
            self.degree_static_start = degree
        if degree > self.degree_static_stop:
            self.degree_static_stop = degree
        if not self.order_static_start and order:
            self.order_static_start = order
        if order > self.order_static_stop:
            self.order_static_stop = order

    def update_tv(self, degree: int, order: int) -> None:
        if not self.degree_tv_start and degree:
            self.degree_tv_start = degree
        if degree > self.degree_tv_stop:
            self.degree_tv_stop = degree
        if not self.order_tv_start and order:
            self.order_tv_start = order
        if order > self.order_tv_stop:
            self.order_tv_stop = order

    @property
    def degree(self) -> int:
        """Max degree of the file."""
        return max(self.degree_static_stop, self.degree_tv_stop)

    @property
    def order(self) -> int:
        """Max order of the file."""
        return max(self.order_static_stop, self.order_tv_stop)

    @property
    def has_tvg(self) -> bool:
        return self.degree_tv_stop > 0


@dataclass
class TvgContext:
    """Degree/order of the most recent 'gfct' record; (-1, -1) when unset."""
    degree: int = -1
    order: int = -1

    def set(self, degree: int, order: int) -> None:
        self.degree = degree
        self.order = order

    def matches(self, degree: int, order: int) -> bool:
        return self.degree == degree and self.order == order

    @property
    def is_set(self) -> bool:
        return self.degree >= 0


@dataclass
class PeriodCatalog:
    """
    Insertion ordered set of periods in years.

    Periods are written with a fixed number of decimals, so membership is
    exact equality.
    """
    _periods: list[float] = field(default_factory=list)

    def __contains__(self, period: object) -> bool:
        return period in self._periods

    def __len__(self) -> int:
        return len(self._periods)

    def __iter__(self) -> Iterator[float]:
        return iter(self._periods)

    def add(self, period: float) -> bool:
        """Add a period; returns False if it was already listed."""
        if period in self._periods:
            return False
        self._periods.append(period)
        return True

    def as_tuple(self) -> tuple[float, ...]:
        return tuple(self._periods)
