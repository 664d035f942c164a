"""
ICGEM Parser
============
Line oriented scanning of ICGEM files.

The data section is read in two independent passes: the inspection pass
(layout and validation, no values) and the extraction pass (static
coefficient values). Both seek to the data-section start found by the
header pass and share the same record classifier and field scanner.
"""
from icgemio.parser.extraction import extract_coefficients
from icgemio.parser.header import parse_header
from icgemio.parser.inspection import InspectionResult, inspect_data
from icgemio.parser.triangular import required_count

__all__ = [
    "InspectionResult",
    "extract_coefficients",
    "inspect_data",
    "parse_header",
    "required_count",
]
