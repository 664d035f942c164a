"""
Reader for gravity field models in the ICGEM exchange format.
"""
from icgemio.exceptions import (
    CatalogError,
    CompletenessError,
    ConsistencyError,
    FieldParseError,
    HeaderError,
    IcgemError,
    IcgemIOError,
    LineTooLongError,
    RangeError,
    SequencingError,
)
from icgemio.icgem import GravityModel, Icgem, parse_gravity_model
from icgemio.model.coefficients import HarmonicCoeffs

__all__ = [
    "CatalogError",
    "CompletenessError",
    "ConsistencyError",
    "FieldParseError",
    "GravityModel",
    "HarmonicCoeffs",
    "HeaderError",
    "Icgem",
    "IcgemError",
    "IcgemIOError",
    "LineTooLongError",
    "RangeError",
    "SequencingError",
    "parse_gravity_model",
]
