"""
Header Pass
===========
Reads the header block of an ICGEM file (everything up to 'end_of_head') and
locates the start of the data section.

Example header::

    begin_of_head ================================================
    product_type           gravity_field
    modelname              EGM2008
    earth_gravity_constant 0.3986004415E+15
    radius                 0.63781363E+07
    max_degree             2190
    errors                 calibrated
    norm                   fully_normalized
    tide_system            tide_free
    end_of_head ==================================================
"""
from __future__ import annotations

import logging
from typing import BinaryIO

from icgemio.config import END_OF_HEAD, FILE_ENCODING
from icgemio.exceptions import FieldParseError, HeaderError, IcgemIOError
from icgemio.model.header import IcgemHeader
from icgemio.parser.fields import scan_float, scan_int

logger = logging.getLogger(__name__)

BEGIN_OF_HEAD = "begin_of_head"

_TEXT_KEYS = ("product_type", "modelname", "errors", "norm", "tide_system")
_FLOAT_KEYS = ("earth_gravity_constant", "radius")


def parse_header(stream: BinaryIO, source: str = "<stream>") -> IcgemHeader:
    """
    Parse the header of an ICGEM file.

    Args:
        stream: Binary stream over the file; read from its beginning.
        source: Name of the file, used in messages.

    Returns:
        The header, including the byte offset of the data section.

    Raises:
        HeaderError: if 'end_of_head' or 'max_degree' is missing, or a
            numeric value cannot be parsed.
        IcgemIOError: on read failures.
    """
    header = IcgemHeader()
    seen_max_degree = False
    in_head = False
    offset = 0

    try:
        stream.seek(0)
        for raw in iter(stream.readline, b""):
            offset += len(raw)
            line = raw.decode(FILE_ENCODING).rstrip("\r\n")
            tokens = line.split()
            if not tokens:
                continue

            key = tokens[0]
            value = tokens[1] if len(tokens) > 1 else ""

            if key == END_OF_HEAD:
                header.data_section_start = offset
                break
            if key == BEGIN_OF_HEAD:
                in_head = True
                continue

            if key in _TEXT_KEYS:
                setattr(header, key, value)
            elif key in _FLOAT_KEYS:
                setattr(header, key, _header_float(value, key, line, source))
            elif key == "max_degree":
                header.max_degree = _header_int(value, key, line, source)
                seen_max_degree = True
            elif in_head and value:
                header.extra[key] = " ".join(tokens[1:])
    except OSError as e:
        raise IcgemIOError(f"Failed reading header of icgem file {source}: {e}") from e

    if not header.data_section_start:
        raise HeaderError(f"No '{END_OF_HEAD}' line found in icgem file {source}")
    if not seen_max_degree:
        raise HeaderError(f"No 'max_degree' entry in header of icgem file {source}")
    if header.max_degree < 0:
        raise HeaderError(f"Invalid max_degree {header.max_degree} in icgem file {source}")

    logger.debug(
        f"Header of {source}: model '{header.modelname}', max degree {header.max_degree}, "
        f"data section at byte {header.data_section_start}"
    )
    return header


def _header_float(value: str, key: str, line: str, source: str) -> float:
    try:
        return scan_float(value, 0, field=key, source=source)[0]
    except FieldParseError as e:
        raise HeaderError(f"Failed parsing '{key}' in header line [{line}]; icgem file {source}") from e


def _header_int(value: str, key: str, line: str, source: str) -> int:
    try:
        return scan_int(value, 0, field=key, source=source)[0]
    except FieldParseError as e:
        raise HeaderError(f"Failed parsing '{key}' in header line [{line}]; icgem file {source}") from e
