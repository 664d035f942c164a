"""
Inspection Pass
===============
Scans the whole data section once and collects the model layout without
storing any coefficient.

Why is this needed?
-------------------
1. Sizing: the caller needs the static/TVG degree and order ranges before it
   allocates the coefficient store.
2. Validation: 'trnd', 'acos' and 'asin' records must follow the 'gfct'
   record of the same degree/order, and every periodic term must use a
   period declared by the degree/order 1/0 terms.
3. Harmonics: the distinct periods of the periodic terms are collected in
   the order they are declared.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import BinaryIO

from icgemio.config import PERIODIC_FIELD_COUNT
from icgemio.exceptions import CatalogError, ConsistencyError
from icgemio.parser.fields import FieldScanner
from icgemio.parser.records import DATA_FIELD_OFFSET, RecordKind, classify
from icgemio.parser.state import Bounds, PeriodCatalog, TvgContext
from icgemio.parser.stream import iter_data_lines

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InspectionResult:
    bounds: Bounds
    periods: tuple[float, ...]
    skipped_lines: int = 0


def inspect_data(
    stream: BinaryIO,
    data_section_start: int,
    source: str = "<stream>",
) -> InspectionResult:
    """
    Inspect the data section of an ICGEM file.

    Args:
        stream: Seekable binary stream over the file.
        data_section_start: Byte offset of the data section.
        source: Name of the file, used in messages.

    Returns:
        The degree/order bounds and the catalog of periods.

    Raises:
        SequencingError: if the data section start is unknown.
        FieldParseError: if a degree/order or periodic column is malformed.
        ConsistencyError: if a 'trnd'/'acos'/'asin' record does not match the
            degree/order of the preceding 'gfct' record.
        CatalogError: if a periodic record (other than 1/0) uses an unlisted period.
        IcgemIOError: on read failures and over-long lines.
    """
    bounds = Bounds()
    context = TvgContext()
    catalog = PeriodCatalog()
    skipped = 0

    for _, line in iter_data_lines(stream, data_section_start, source):
        kind = classify(line)

        if kind == RecordKind.UNKNOWN:
            logger.warning(f"ICGEM line skipped: '{line}' (file {source})")
            skipped += 1
            continue

        scanner = FieldScanner(line, DATA_FIELD_OFFSET, source=source)
        degree, order = scanner.next_degree_order()

        if kind == RecordKind.STATIC:
            # remaining columns are read by the extraction pass
            bounds.update_static(degree, order)

        elif kind == RecordKind.TIME_VARYING:
            bounds.update_tv(degree, order)
            context.set(degree, order)

        elif kind == RecordKind.TREND:
            _check_context(kind, degree, order, context, line, source)

        elif kind.is_periodic:
            period = scanner.skip_floats(PERIODIC_FIELD_COUNT, field=f"{kind} column")
            _check_context(kind, degree, order, context, line, source)

            # only the 1/0 terms may introduce a new period
            if degree == 1 and order == 0:
                if catalog.add(period):
                    logger.debug(f"New harmonic period {period} years in {source}")
            elif period not in catalog:
                raise CatalogError(period, line, source)

    logger.debug(
        f"Inspected {source}: static degree {bounds.degree_static_start}-{bounds.degree_static_stop}, "
        f"TVG degree {bounds.degree_tv_start}-{bounds.degree_tv_stop}, {len(catalog)} period(s)"
    )
    return InspectionResult(bounds=bounds, periods=catalog.as_tuple(), skipped_lines=skipped)


def _check_context(
    kind: RecordKind,
    degree: int,
    order: int,
    context: TvgContext,
    line: str,
    source: str,
) -> None:
    if not context.matches(degree, order):
        raise ConsistencyError(
            kind=str(kind),
            degree=degree,
            order=order,
            context_degree=context.degree,
            context_order=context.order,
            line=line,
            source=source,
        )
