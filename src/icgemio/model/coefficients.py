"""
Harmonic Coefficients
=====================
Storage for the spherical harmonic coefficients C(l, m), S(l, m) read from
a gravity field model, with the degree amplitude spectrum and its plot.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import numpy as np
import matplotlib.pyplot as plt

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class HarmonicCoeffs:
    """
    Spherical harmonic coefficients C(l, m) and S(l, m) up to a max degree/order.

    Coefficients are kept in two (L+1) x (L+1) arrays; only the lower triangle
    (m <= l) and columns m <= max_order are meaningful.
    """
    def __init__(self, max_degree: int, max_order: Optional[int] = None) -> None:
        """
        Initialize zero-valued coefficients.

        Args:
            max_degree: Max degree L (>= 0).
            max_order: Max order M (0 <= M <= L); defaults to L.
        """
        self._max_degree, self._max_order = self._check_size(max_degree, max_order)
        n = self._max_degree + 1
        self.C: npt.NDArray[np.float64] = np.zeros((n, n), dtype=np.float64)
        self.S: npt.NDArray[np.float64] = np.zeros((n, n), dtype=np.float64)

        # Model constants, assigned when read from a file
        self.gm: float = 0.0
        self.radius: float = 0.0
        self.normalized: bool = True

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(max_degree={self._max_degree}, max_order={self._max_order})"

    @staticmethod
    def _check_size(max_degree: int, max_order: Optional[int]) -> tuple[int, int]:
        if max_order is None:
            max_order = max_degree
        if max_degree < 0 or max_order < 0 or max_order > max_degree:
            raise ValueError(f"Invalid degree/order {max_degree}/{max_order} for harmonic coefficients.")
        return max_degree, max_order

    @property
    def max_degree(self) -> int:
        return self._max_degree

    @property
    def max_order(self) -> int:
        return self._max_order

    def covers(self, l: int, m: int) -> bool:
        """True if (l, m) can be stored."""
        return 0 <= m <= l and l <= self._max_degree and m <= self._max_order

    def _check_index(self, l: int, m: int) -> None:
        if not self.covers(l, m):
            raise IndexError(
                f"Degree/order {l}/{m} out of range for {self!r}"
            )

    def c(self, l: int, m: int) -> float:
        self._check_index(l, m)
        return float(self.C[l, m])

    def s(self, l: int, m: int) -> float:
        self._check_index(l, m)
        return float(self.S[l, m])

    def set_c(self, l: int, m: int, value: float) -> None:
        self._check_index(l, m)
        self.C[l, m] = value

    def set_s(self, l: int, m: int, value: float) -> None:
        self._check_index(l, m)
        self.S[l, m] = value

    def resize(self, max_degree: int, max_order: Optional[int] = None) -> None:
        """Change the max degree/order, keeping the overlapping coefficients."""
        max_degree, max_order = self._check_size(max_degree, max_order)
        n = max_degree + 1
        k = min(n, self._max_degree + 1)

        C = np.zeros((n, n), dtype=np.float64)
        S = np.zeros((n, n), dtype=np.float64)
        C[:k, :k] = self.C[:k, :k]
        S[:k, :k] = self.S[:k, :k]
        # drop orders beyond the new max order
        C[:, max_order + 1:] = 0.0
        S[:, max_order + 1:] = 0.0

        self.C, self.S = C, S
        self._max_degree, self._max_order = max_degree, max_order
        logger.debug(f"Resized harmonic coefficients to {max_degree}/{max_order}")

    def degree_variances(self) -> npt.NDArray[np.float64]:
        """Degree variances sum_m (C(l,m)^2 + S(l,m)^2), one per degree."""
        mask = np.tril(np.ones_like(self.C, dtype=bool))
        return np.sum(np.where(mask, self.C**2 + self.S**2, 0.0), axis=1)

    def plot_degree_variances(self, title: Optional[str] = None) -> None:
        """
        Plot the degree amplitudes sqrt(sigma_l^2) on a log scale.
        """
        degrees = np.arange(self._max_degree + 1)
        amplitudes = np.sqrt(self.degree_variances())

        plt.rcParams["figure.constrained_layout.use"] = True
        fig = plt.figure(figsize=(7, 5))

        # degree 0 dominates every other degree, leave it out
        plt.semilogy(degrees[1:], amplitudes[1:], 'b', lw=2)

        plt.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
        plt.minorticks_on()
        plt.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

        plt.title(title or "Degree amplitudes")
        plt.xlabel("Degree")
        plt.ylabel("Amplitude")

        plt.show()
