"""
ICGEM Gravity Models
====================
Basic handling of ICGEM files holding gravity potential models, see the
International Centre for Global Earth Models (ICGEM),
http://icgem.gfz-potsdam.de/home and the format description
http://icgem.gfz-potsdam.de/ICGEM-Format-2011.pdf

Reading is done in up to three passes over the file, each one opening its own
handle:

1. parse_header(): model constants and the start of the data section.
2. inspect_data(): degree/order layout of the static and time-variable parts
   and the periods of the periodic terms.
3. parse_data(): the static ('gfc') coefficients up to a degree and order.

Classes:
    Icgem: One ICGEM file.
    GravityModel: Result of parse_gravity_model().
"""
from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
import logging
from typing import BinaryIO, Iterator, Optional

from icgemio.exceptions import IcgemError, IcgemIOError, RangeError, SequencingError
from icgemio.model.coefficients import HarmonicCoeffs
from icgemio.model.header import IcgemHeader
from icgemio.parser.extraction import extract_coefficients
from icgemio.parser.header import parse_header
from icgemio.parser.inspection import InspectionResult, inspect_data
from icgemio.parser.state import Bounds

logger = logging.getLogger(__name__)


class Icgem:
    """
    A class to hold the reading/parsing of an ICGEM gravity model.

    Note that only parameters of type 'gfc' are read as values; time-variable
    terms are inspected (degree/order, periods) but not stored.
    """
    def __init__(self, filename: str) -> None:
        self.filename = str(filename)
        self.header: Optional[IcgemHeader] = None
        self.inspection: Optional[InspectionResult] = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.filename!r})"

    @contextmanager
    def _open(self) -> Iterator[BinaryIO]:
        try:
            fin = open(self.filename, "rb")
        except OSError as e:
            msg = f"Failed opening icgem file {self.filename}: {e}"
            logger.error(msg)
            raise IcgemIOError(msg) from e
        with fin:
            yield fin

    @property
    def data_section_start(self) -> int:
        if self.header is None or not self.header.data_section_start:
            raise SequencingError(
                f"Data section of icgem file {self.filename} unknown; did you forget to read the header?"
            )
        return self.header.data_section_start

    def parse_header(self) -> IcgemHeader:
        """Read the file header and assign basic information."""
        with self._open() as fin:
            try:
                self.header = parse_header(fin, self.filename)
            except IcgemError as e:
                logger.error(f"Failed to parse icgem header for {self.filename}: {e}")
                raise
        return self.header

    def inspect_data(self) -> InspectionResult:
        """
        Inspect the data section; the header must have been read already.
        """
        start = self.data_section_start
        with self._open() as fin:
            try:
                self.inspection = inspect_data(fin, start, self.filename)
            except IcgemError as e:
                logger.error(f"Failed inspecting data of icgem file {self.filename}: {e}")
                raise
        return self.inspection

    def parse_data(self, degree: int, order: int, coeffs: HarmonicCoeffs) -> int:
        """
        Parse harmonic coefficients up to degree ``degree`` and order ``order``.

        Args:
            degree: Max degree of C/S coefficients to read and store.
            order: Max order of C/S coefficients to read and store (order <= degree).
            coeffs: Destination; must be sized to hold (degree, order).

        Returns:
            Number of coefficient pairs read.
        """
        start = self.data_section_start
        if degree > self.header.max_degree or order > degree or order < 0:
            msg = (
                f"Invalid degree/order {degree}/{order} for icgem file {self.filename} "
                f"(max degree {self.header.max_degree})"
            )
            logger.error(msg)
            raise RangeError(msg)

        with self._open() as fin:
            try:
                written = extract_coefficients(fin, start, degree, order, coeffs, self.filename)
            except IcgemError as e:
                logger.error(f"Failed to parse harmonic coefficients from file {self.filename}: {e}")
                raise

        coeffs.gm = self.gm
        coeffs.radius = self.earth_radius
        coeffs.normalized = self.is_normalized
        return written

    @property
    def bounds(self) -> Bounds:
        if self.inspection is None:
            raise SequencingError(f"Data of icgem file {self.filename} not inspected yet")
        return self.inspection.bounds

    @property
    def periods(self) -> tuple[float, ...]:
        if self.inspection is None:
            raise SequencingError(f"Data of icgem file {self.filename} not inspected yet")
        return self.inspection.periods

    @property
    def degree(self) -> int:
        """Max degree found in the data section (the header value is header.max_degree)."""
        return self.bounds.degree

    @property
    def order(self) -> int:
        """Max order found in the data section."""
        return self.bounds.order

    @property
    def earth_radius(self) -> float:
        return self._header().radius

    @property
    def gm(self) -> float:
        return self._header().earth_gravity_constant

    @property
    def is_normalized(self) -> bool:
        return self._header().is_normalized

    def _header(self) -> IcgemHeader:
        if self.header is None:
            raise SequencingError(f"Header of icgem file {self.filename} not read yet")
        return self.header


@dataclass
class GravityModel:
    header: IcgemHeader
    bounds: Bounds
    periods: tuple[float, ...]
    coefficients: HarmonicCoeffs


def parse_gravity_model(filename: str, degree: int, order: Optional[int] = None) -> GravityModel:
    """
    Read a gravity model's static coefficients up to the given degree and order.

    Runs the header pass, the inspection pass and the extraction pass and
    returns the coefficients together with the model layout.

    Args:
        filename: ICGEM file.
        degree: Max degree to read.
        order: Max order to read; defaults to ``degree``.
    """
    if order is None:
        order = degree

    gfc = Icgem(filename)
    gfc.parse_header()
    inspection = gfc.inspect_data()

    if not (0 <= order <= degree <= gfc.degree):
        msg = f"Invalid degree/order {degree}/{order} for input gravity model {filename}"
        logger.error(msg)
        raise RangeError(msg)

    coeffs = HarmonicCoeffs(degree, order)
    gfc.parse_data(degree, order, coeffs)

    logger.info(f"Read {gfc.header.modelname or filename} up to degree/order {degree}/{order}")
    return GravityModel(
        header=gfc.header,
        bounds=inspection.bounds,
        periods=inspection.periods,
        coefficients=coeffs,
    )
