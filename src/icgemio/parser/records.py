"""
Record Classifier
=================
Maps the leading tag of a data-section line to its record kind.
"""
from __future__ import annotations

from enum import StrEnum


class RecordKind(StrEnum):
    STATIC = "gfc"
    TIME_VARYING = "gfct"
    TREND = "trnd"
    PERIODIC_COSINE = "acos"
    PERIODIC_SINE = "asin"
    UNKNOWN = "unknown"

    @property
    def is_periodic(self) -> bool:
        return self in (RecordKind.PERIODIC_COSINE, RecordKind.PERIODIC_SINE)


# Columns start right after the 4-character tag
DATA_FIELD_OFFSET = 4

# "gfc " keeps its trailing space so that it never matches "gfct"
_PREFIXES: dict[str, RecordKind] = {
    "gfc ": RecordKind.STATIC,
    "gfct": RecordKind.TIME_VARYING,
    "trnd": RecordKind.TREND,
    "acos": RecordKind.PERIODIC_COSINE,
    "asin": RecordKind.PERIODIC_SINE,
}


def classify(line: str) -> RecordKind:
    """Classify a record by its first 4 characters."""
    return _PREFIXES.get(line[:DATA_FIELD_OFFSET], RecordKind.UNKNOWN)
