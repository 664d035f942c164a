"""
Data Section Reader
===================
Line reader shared by the inspection and extraction passes.
"""
from __future__ import annotations

import logging
from typing import BinaryIO, Iterator

from icgemio.config import FILE_ENCODING, MAX_DATA_LINE
from icgemio.exceptions import IcgemIOError, LineTooLongError, SequencingError

logger = logging.getLogger(__name__)


def iter_data_lines(
    stream: BinaryIO,
    data_section_start: int,
    source: str = "<stream>",
) -> Iterator[tuple[int, str]]:
    """
    Seek to the data section and yield its records one by one.

    Args:
        stream: A seekable binary stream over the ICGEM file.
        data_section_start: Byte offset of the first data record (set by the
            header pass; zero means "not known yet").
        source: Name used in error messages.

    Yields:
        (line number relative to the data section start, record text without
        its line terminator)

    Raises:
        SequencingError: if ``data_section_start`` is not set.
        LineTooLongError: if a record does not fit in ``MAX_DATA_LINE`` bytes.
        IcgemIOError: if seeking or reading fails.
    """
    if not data_section_start:
        raise SequencingError(
            f"Data section start unknown for icgem file {source}; "
            f"the header must be read first"
        )

    try:
        stream.seek(data_section_start)
    except OSError as e:
        raise IcgemIOError(f"Failed seeking to data section of icgem file {source}: {e}") from e

    line_number = 0
    while True:
        try:
            raw = stream.readline(MAX_DATA_LINE + 1)
        except OSError as e:
            raise IcgemIOError(f"Failed reading icgem file {source}: {e}") from e

        if not raw:
            break

        line_number += 1
        content = raw.rstrip(b"\r\n")
        # the buffer also holds the terminator
        if len(content) >= MAX_DATA_LINE:
            raise LineTooLongError(source, line_number, len(content), MAX_DATA_LINE)

        yield line_number, content.decode(FILE_ENCODING)

    logger.debug(f"Reached end of {source} after {line_number} data records.")
