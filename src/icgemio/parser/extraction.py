"""
Coefficient Extraction Pass
===========================
Reads the static ('gfc') coefficients of an ICGEM file into a pre-sized
HarmonicCoeffs instance, up to a requested max degree and order.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, BinaryIO

from icgemio.config import DEGREE_ONE_SENTINEL
from icgemio.exceptions import CompletenessError, FieldParseError, RangeError
from icgemio.parser.fields import FieldScanner
from icgemio.parser.records import DATA_FIELD_OFFSET, RecordKind, classify
from icgemio.parser.stream import iter_data_lines
from icgemio.parser.triangular import contains, is_valid_index, required_count

if TYPE_CHECKING:
    from icgemio.model.coefficients import HarmonicCoeffs

logger = logging.getLogger(__name__)


def extract_coefficients(
    stream: BinaryIO,
    data_section_start: int,
    max_degree: int,
    max_order: int,
    store: HarmonicCoeffs,
    source: str = "<stream>",
) -> int:
    """
    Parse harmonic coefficients up to degree ``max_degree`` and order ``max_order``.

    Only records of type 'gfc' are read, every other record is skipped.

    Args:
        stream: Seekable binary stream over the file.
        data_section_start: Byte offset of the data section.
        max_degree: Max degree of C/S coefficients to store.
        max_order: Max order of C/S coefficients to store (<= max_degree).
        store: Coefficients to fill; must already be sized to hold
            (max_degree, max_order). It is never resized here.
        source: Name of the file, used in messages.

    Returns:
        Number of (l, m) pairs written to the store.

    Raises:
        RangeError: if the degree/order request is invalid or the store is too small.
        SequencingError: if the data section start is unknown.
        FieldParseError: if a 'gfc' record has malformed columns.
        CompletenessError: if the file holds fewer coefficients than requested.
        IcgemIOError: on read failures and over-long lines.
    """
    if max_degree < 0 or max_order < 0 or max_order > max_degree:
        raise RangeError(f"Invalid degree/order {max_degree}/{max_order} requested from icgem file {source}")
    if store.max_degree < max_degree or store.max_order < max_order:
        raise RangeError(
            f"Coefficient store sized {store.max_degree}/{store.max_order} cannot hold "
            f"degree/order {max_degree}/{max_order} from icgem file {source}"
        )

    # Some models (e.g. EGM2008) do not list C(1,0) and C(1,1) since they are
    # zero; mark them so we can tell afterwards whether they were read
    watch_degree_one = max_degree >= 1 and max_order >= 1
    if watch_degree_one:
        store.set_c(1, 0, DEGREE_ONE_SENTINEL)
        store.set_c(1, 1, DEGREE_ONE_SENTINEL)

    expected = required_count(max_degree, max_order)
    written = 0

    for _, line in iter_data_lines(stream, data_section_start, source):
        if classify(line) != RecordKind.STATIC:
            continue

        scanner = FieldScanner(line, DATA_FIELD_OFFSET, source=source)
        degree, order = scanner.next_degree_order()
        clm = scanner.next_float("Clm")
        slm = scanner.next_float("Slm")

        if not is_valid_index(degree, order):
            raise FieldParseError(
                line, DATA_FIELD_OFFSET, field="degree/order", source=source,
                reason=f"invalid degree/order {degree}/{order}",
            )

        if not contains(degree, order, max_degree, max_order):
            continue

        store.set_c(degree, order, clm)
        written += 1
        if order == 0:
            if slm != 0.0:
                logger.warning(
                    f"Non-zero S({degree},0) = {slm} ignored; line [{line}], icgem file {source}"
                )
        else:
            store.set_s(degree, order, slm)

        if written >= expected:
            break

    if written < expected:
        missing = expected - written
        if (
            watch_degree_one
            and missing == 2
            and store.c(1, 0) == DEGREE_ONE_SENTINEL
            and store.c(1, 1) == DEGREE_ONE_SENTINEL
        ):
            logger.info(
                f"The coefficients C(1,0) and C(1,1) are not explicitly written in the "
                f"icgem file {source}; setting C(1,0) = C(1,1) = 0"
            )
            store.set_c(1, 0, 0.0)
            store.set_c(1, 1, 0.0)
        else:
            raise CompletenessError(written, expected, source)

    logger.debug(f"Read {written}/{expected} coefficients from {source}")
    return written
