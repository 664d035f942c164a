"""
Exceptions
==========
Error taxonomy for reading ICGEM files. Every error is terminal for the pass
that raised it; messages carry the source name and the offending line so a
failure can be diagnosed from the message alone.
"""
from __future__ import annotations

from typing import Optional


class IcgemError(Exception):
    """Base class of all errors raised while reading an ICGEM file."""


class SequencingError(IcgemError):
    """A data pass was requested before the data-section start is known."""


class HeaderError(IcgemError):
    """The header block is malformed or incomplete."""


class IcgemIOError(IcgemError, OSError):
    """The file could not be opened or read."""


class LineTooLongError(IcgemIOError):
    """A record does not fit in the data line buffer."""

    def __init__(self, source: str, line_number: int, length: int, limit: int) -> None:
        self.source = source
        self.line_number = line_number
        self.length = length
        self.limit = limit
        super().__init__(
            f"Line {line_number} of {source} is {length} characters long; "
            f"records must be shorter than {limit} bytes"
        )


class FieldParseError(IcgemError, ValueError):
    """A numeric field could not be parsed."""

    def __init__(
        self,
        line: str,
        position: int,
        field: str = "field",
        source: str = "<stream>",
        reason: Optional[str] = None,
    ) -> None:
        self.line = line
        self.position = position
        self.field = field
        self.source = source
        detail = reason or f"failed parsing {field} at column {position}"
        super().__init__(f"{detail} in line [{line}]; icgem file {source}")


class ConsistencyError(IcgemError):
    """A trnd/acos/asin record does not follow its gfct record."""

    def __init__(
        self,
        kind: str,
        degree: int,
        order: int,
        context_degree: int,
        context_order: int,
        line: str,
        source: str,
    ) -> None:
        self.kind = kind
        self.degree = degree
        self.order = order
        self.context_degree = context_degree
        self.context_order = context_order
        self.line = line
        self.source = source
        super().__init__(
            f"Record of type '{kind}' with degree/order {degree}/{order} does not match "
            f"the current TVG degree/order {context_degree}/{context_order}; "
            f"line [{line}], icgem file {source}"
        )


class CatalogError(IcgemError):
    """A periodic record references a period never declared at degree/order 1/0."""

    def __init__(self, period: float, line: str, source: str) -> None:
        self.period = period
        self.line = line
        self.source = source
        super().__init__(
            f"Period {period:.3f}/year not listed; line [{line}], icgem file {source}"
        )


class RangeError(IcgemError, ValueError):
    """Requested degree/order is invalid for the file or the store."""


class CompletenessError(IcgemError):
    """Fewer static coefficients were found than requested."""

    def __init__(self, written: int, expected: int, source: str) -> None:
        self.written = written
        self.expected = expected
        self.source = source
        super().__init__(
            f"EOF reached before reading all Cnm/Snm coefficients; "
            f"read/expected {written}/{expected}; icgem file {source}"
        )
